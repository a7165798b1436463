"""rice-cli - Rice setup command-line interface."""

from __future__ import annotations

from typing import Literal

import click

from rice_cli import __version__
from rice_cli.commands.check_cmd import check
from rice_cli.commands.config_cmd import config
from rice_cli.commands.setup_cmd import setup
from rice_cli.config import RiceSettings

VerbosityLevel = Literal["quiet", "normal", "verbose"]


class RiceContext:
    """Shared context for CLI commands."""

    def __init__(self) -> None:
        self.settings: RiceSettings = RiceSettings.model_construct()
        self.verbosity: VerbosityLevel = "normal"
        self.debug: bool = False


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output")
@click.option("--debug", is_flag=True, help="Show full tracebacks on errors")
@click.version_option(version=__version__, prog_name="rice-cli")
@click.pass_context
def cli(click_ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """Rice CLI Setup Tool.

    Running rice-cli without a command starts setup.
    Use --debug to show full tracebacks on errors.
    """
    import sys

    from rice_cli.errors import ConfigError
    from rice_cli.logging import print_error, setup_logging

    ctx = click_ctx.ensure_object(RiceContext)
    ctx.debug = debug

    if quiet:
        ctx.verbosity = "quiet"
    elif verbose:
        ctx.verbosity = "verbose"
    else:
        ctx.verbosity = "normal"

    setup_logging(ctx.verbosity)

    try:
        ctx.settings = RiceSettings.load()
    except ConfigError as e:
        print_error(e.message)
        sys.exit(e.exit_code)

    if click_ctx.invoked_subcommand is None:
        click_ctx.invoke(setup)


cli.add_command(setup)
cli.add_command(config)
cli.add_command(check)


def main() -> None:
    """Entry point for the CLI."""
    import sys

    debug_mode = "--debug" in sys.argv

    try:
        cli()
    except click.ClickException:
        # Let Click handle its own exceptions
        raise
    except KeyboardInterrupt:
        from rice_cli.errors import ExitCode

        sys.exit(ExitCode.INTERRUPTED)
    except Exception as e:
        from rice_cli.errors import RiceError
        from rice_cli.logging import print_error, print_info

        if isinstance(e, RiceError):
            print_error(e.message)
        elif isinstance(e, OSError):
            print_error(f"File system error: {e}")
        else:
            print_error(f"Error: {e}")

        if debug_mode:
            print_info("")
            print_info("Full traceback (--debug mode):")
            import traceback

            traceback.print_exc()
        else:
            print_info("")
            print_info("Run with --debug for full traceback.")

        sys.exit(e.exit_code if isinstance(e, RiceError) else 1)


if __name__ == "__main__":
    main()
