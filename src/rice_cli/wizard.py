"""The setup pipeline: ask, write both project files, verify Storage."""

from __future__ import annotations

from pathlib import Path

import httpx
from rich.markup import escape

from rice_cli.config import RiceSettings
from rice_cli.env_file import build_assignments, merge_env_file, render_env_block
from rice_cli.health import check_health
from rice_cli.logging import (
    ProgressFactory,
    console,
    print_check,
    print_cross,
    print_heading,
    print_info,
    print_success,
)
from rice_cli.models import HealthCheckResult, HealthStatus, SetupReport, WriteOutcome
from rice_cli.paths import get_env_path, get_settings_path
from rice_cli.prompts import Prompter, collect_answers
from rice_cli.settings_file import render_settings, write_settings


def run_setup(
    root: Path,
    prompter: Prompter,
    *,
    settings: RiceSettings | None = None,
    client: httpx.Client | None = None,
    progress: ProgressFactory | None = None,
) -> SetupReport | None:
    """Run the interactive setup in a project directory.

    Args:
        root: Directory receiving the settings document and env file.
        prompter: Source of answers.
        settings: Tool settings (file names, SDK package).
        client: HTTP client for the Storage health probe.
        progress: Busy-indicator factory shown during the probe.

    Returns:
        A report of what was written and probed, or None if the user
        enabled no service (nothing is written in that case).

    Raises:
        PersistenceError: If either project file cannot be written.
    """
    settings = settings or RiceSettings.load()

    print_heading("Welcome to the Rice CLI Setup", style="bold green")
    print_info("This utility will walk you through setting up Rice in your project.\n")

    answers = collect_answers(prompter)
    if answers is None:
        console.print("[red]You must enable at least one service.[/red]")
        return None

    print_heading("\nGenerating configuration files...")

    settings_path = get_settings_path(root, settings.settings_filename)
    settings_outcome = write_settings(
        settings_path,
        render_settings(answers.storage_enabled, answers.state_enabled, settings.sdk_package),
        confirm_overwrite=lambda: prompter.confirm(
            f"{settings_path.name} already exists. Overwrite?", default=False
        ),
    )
    if settings_outcome is WriteOutcome.SKIPPED:
        print_check(f"Skipped {settings_path.name}")
    else:
        print_check(f"Created {settings_path.name}")

    env_path = get_env_path(root, settings.env_filename)
    env_outcome = merge_env_file(env_path, render_env_block(build_assignments(answers)))
    if env_outcome is WriteOutcome.APPENDED:
        print_check(f"Appended to {env_path.name}")
    else:
        print_check(f"Created {env_path.name}")

    health = None
    if answers.storage_enabled:
        print_info("")
        storage = answers.storage_params
        health = check_health(
            storage.url,
            storage.http_port,
            client=client,
            progress=progress,
            message="Verifying connection to Storage...",
        )
        _report_health(health)

    print_success("\n[bold]Setup complete![/bold]")
    print_info(f"You can now install the SDK using: npm install {escape(settings.sdk_package)}")

    return SetupReport(
        answers=answers,
        settings_outcome=settings_outcome,
        env_outcome=env_outcome,
        health=health,
    )


def _report_health(result: HealthCheckResult) -> None:
    if result.status is HealthStatus.HEALTHY:
        print_check(f"Successfully connected to Rice Storage at {result.url}")
    elif result.status is HealthStatus.UNHEALTHY:
        print_cross(f"Connection failed: Status {result.status_text}")
        print_info("   Please check if your Rice instance is running.")
    else:
        print_cross(f"Connection failed: {result.error}")
        print_info(
            f"   Could not reach {escape(result.url)}. "
            "Please ensure Rice is running and HTTP port is correct."
        )


__all__ = ["run_setup"]
