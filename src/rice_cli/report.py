"""Read-only views over persisted configuration."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import httpx
from rich.markup import escape

from rice_cli.env_file import ENV_KEYS
from rice_cli.health import check_health, health_url
from rice_cli.logging import (
    ProgressFactory,
    console,
    print_check,
    print_cross,
    print_heading,
    print_info,
)
from rice_cli.models import HealthCheckResult, HealthStatus, StorageParams
from rice_cli.paths import SETTINGS_FILE

MASK = "********"
NOT_SET = "Not set"


def is_secret(key: str) -> bool:
    """Keys naming a token are never shown in cleartext."""
    return "TOKEN" in key


def display_value(key: str, environ: Mapping[str, str]) -> str | None:
    """Value to display for a key, or None when the key is absent."""
    if key not in environ:
        return None
    return MASK if is_secret(key) else environ[key]


def show_config(
    root: Path,
    environ: Mapping[str, str],
    settings_file: str = SETTINGS_FILE,
) -> None:
    """Print the seven connection variables and whether the settings file exists."""
    print_heading("Rice Configuration:", style="bold green")

    for key in ENV_KEYS:
        value = display_value(key, environ)
        if value is None:
            console.print(f"{key}: [dim]{NOT_SET}[/dim]", highlight=False)
        else:
            console.print(f"{key}: {value}", highlight=False, markup=False)

    if (root / settings_file).exists():
        print_info(f"\n{escape(settings_file)} found.")
    else:
        print_info(f"\n{escape(settings_file)} not found.")


def run_check(
    environ: Mapping[str, str],
    *,
    client: httpx.Client | None = None,
    progress: ProgressFactory | None = None,
) -> HealthCheckResult:
    """Probe Storage using persisted configuration and print the outcome."""
    print_heading("Checking connection to Rice...")

    storage = StorageParams.from_environ(environ)
    result = check_health(
        storage.url,
        storage.http_port,
        client=client,
        progress=progress,
        message=f"Checking Storage health at {health_url(storage.url, storage.http_port)}...",
    )

    if result.status is HealthStatus.HEALTHY:
        print_check(f"Storage is healthy (Status: {result.status_text})")
    elif result.status is HealthStatus.UNHEALTHY:
        print_cross(f"Storage is unhealthy (Status: {result.status_text})")
    else:
        print_cross(f"Failed to connect to Storage: {result.error}")

    return result


__all__ = ["MASK", "NOT_SET", "is_secret", "display_value", "show_config", "run_check"]
