"""rice-cli config command - Show persisted configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from rice_cli.cli import RiceContext


@click.command()
@click.pass_obj
def config(ctx: RiceContext) -> None:
    """Show current configuration.

    Token values are always masked.
    """
    from rice_cli.env_file import load_env_file
    from rice_cli.paths import get_env_path
    from rice_cli.report import show_config

    root = Path.cwd()
    load_env_file(get_env_path(root, ctx.settings.env_filename))
    show_config(root, os.environ, settings_file=ctx.settings.settings_filename)


__all__ = ["config"]
