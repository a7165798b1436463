"""rice-cli commands - Subcommand implementations."""
