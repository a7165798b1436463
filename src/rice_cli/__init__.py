"""rice-cli - Interactive setup for Rice Storage and Rice State."""

__version__ = "0.1.0"
