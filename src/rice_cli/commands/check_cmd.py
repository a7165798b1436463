"""rice-cli check command - Probe Rice Storage health."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from rice_cli.cli import RiceContext


@click.command()
@click.pass_obj
def check(ctx: RiceContext) -> None:
    """Check connection to the Rice instance.

    Uses STORAGE_INSTANCE_URL and STORAGE_HTTP_PORT from the environment or
    .env. An unhealthy or unreachable instance is reported, not treated as
    a failure.
    """
    from rice_cli.env_file import load_env_file
    from rice_cli.logging import create_spinner
    from rice_cli.paths import get_env_path
    from rice_cli.report import run_check

    load_env_file(get_env_path(Path.cwd(), ctx.settings.env_filename))
    run_check(os.environ, progress=create_spinner)


__all__ = ["check"]
