"""rice-cli setup command - Interactive project setup."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from rice_cli.cli import RiceContext


@click.command()
@click.pass_obj
def setup(ctx: RiceContext) -> None:
    """Set up Rice in the current project (default).

    Writes rice.config.js and appends connection settings to .env, then
    checks that Rice Storage answers on its HTTP port.
    """
    from rice_cli.errors import PersistenceError
    from rice_cli.logging import create_spinner, print_error
    from rice_cli.prompts import ClickPrompter
    from rice_cli.wizard import run_setup

    try:
        run_setup(
            Path.cwd(),
            ClickPrompter(),
            settings=ctx.settings,
            progress=create_spinner,
        )
    except PersistenceError as e:
        print_error(e.message)
        sys.exit(e.exit_code)


__all__ = ["setup"]
