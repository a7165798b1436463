"""Interactive question flow for the setup wizard."""

from __future__ import annotations

from typing import Protocol

import click

from rice_cli.logging import print_heading
from rice_cli.models import (
    DEFAULT_HTTP_PORT,
    DEFAULT_INSTANCE_URL,
    DEFAULT_RUN_ID,
    DEFAULT_STORAGE_USER,
    SetupAnswers,
    StateParams,
    StorageParams,
)


class Prompter(Protocol):
    """Source of answers for the wizard."""

    def confirm(self, question: str, default: bool) -> bool: ...

    def text(self, question: str, default: str) -> str: ...

    def secret(self, question: str) -> str: ...


class ClickPrompter:
    """Prompter reading from the terminal via click.

    Cancelling a prompt raises click.Abort, which ends the run.
    """

    def confirm(self, question: str, default: bool) -> bool:
        return click.confirm(click.style(question, bold=True), default=default)

    def text(self, question: str, default: str) -> str:
        value: str = click.prompt(click.style(question, bold=True), default=default)
        return value

    def secret(self, question: str) -> str:
        value: str = click.prompt(
            click.style(question, bold=True),
            default="",
            hide_input=True,
            show_default=False,
        )
        return value


def collect_answers(prompter: Prompter) -> SetupAnswers | None:
    """Ask which services to enable and how to reach them.

    Returns:
        The collected answers, or None when both services were declined.
    """
    storage_enabled = prompter.confirm("Enable Rice Storage?", default=True)
    state_enabled = prompter.confirm("Enable Rice State (AI Agent Memory)?", default=True)

    if not storage_enabled and not state_enabled:
        return None

    storage = _collect_storage(prompter) if storage_enabled else None
    state = _collect_state(prompter) if state_enabled else None

    return SetupAnswers(
        storage_enabled=storage_enabled,
        state_enabled=state_enabled,
        storage=storage,
        state=state,
    )


def _collect_storage(prompter: Prompter) -> StorageParams:
    print_heading("\nStorage Configuration")
    return StorageParams(
        url=prompter.text("Storage Instance URL", default=DEFAULT_INSTANCE_URL),
        user=prompter.text("Storage User", default=DEFAULT_STORAGE_USER),
        token=prompter.secret("Storage Auth Token/Password"),
        http_port=prompter.text("Storage HTTP Port (for verification)", default=DEFAULT_HTTP_PORT),
    )


def _collect_state(prompter: Prompter) -> StateParams:
    print_heading("\nState Configuration")
    return StateParams(
        url=prompter.text("State Instance URL", default=DEFAULT_INSTANCE_URL),
        token=prompter.secret("State Auth Token"),
        run_id=prompter.text("State Run ID", default=DEFAULT_RUN_ID),
    )


__all__ = ["Prompter", "ClickPrompter", "collect_answers"]
