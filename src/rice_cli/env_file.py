"""Serialize connection parameters and merge them into the .env file.

The merge is append-only: existing content is never parsed, rewritten or
deduplicated, so every setup run adds one more block at the end. Reading the
file back keeps the first value of each key.
"""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping
from pathlib import Path

from dotenv.parser import parse_stream

from rice_cli.errors import PersistenceError
from rice_cli.models import SetupAnswers, WriteOutcome

logger = logging.getLogger(__name__)

ENV_KEYS: tuple[str, ...] = (
    "STORAGE_INSTANCE_URL",
    "STORAGE_USER",
    "STORAGE_AUTH_TOKEN",
    "STORAGE_HTTP_PORT",
    "STATE_INSTANCE_URL",
    "STATE_AUTH_TOKEN",
    "STATE_RUN_ID",
)

BLOCK_HEADER = "# Rice Configuration"


def build_assignments(answers: SetupAnswers) -> list[tuple[str, str]]:
    """Map answers onto the seven environment keys, in file order.

    A disabled service contributes its default values.
    """
    storage = answers.storage_params
    state = answers.state_params
    values = (
        storage.url,
        storage.user,
        storage.token,
        storage.http_port,
        state.url,
        state.token,
        state.run_id,
    )
    return list(zip(ENV_KEYS, values, strict=True))


def render_env_block(assignments: list[tuple[str, str]]) -> str:
    """Render assignments as a commented KEY=value block with a leading blank line."""
    lines = ["", BLOCK_HEADER]
    lines.extend(f"{key}={value}" for key, value in assignments)
    return "\n".join(lines) + "\n"


def merge_env_file(path: Path, block: str) -> WriteOutcome:
    """Append the block to an existing env file, or create the file with it.

    The block goes out in a single write before the file is closed.

    Raises:
        PersistenceError: If the file cannot be opened or written.
    """
    existed = path.exists()
    mode = "a" if existed else "w"

    try:
        with open(path, mode, encoding="utf-8") as f:
            f.write(block)
    except OSError as e:
        raise PersistenceError(f"Failed to update {path.name}: {e}", path=str(path)) from e

    outcome = WriteOutcome.APPENDED if existed else WriteOutcome.CREATED
    logger.debug(f"Wrote {len(block)} bytes to {path} ({outcome.value})")
    return outcome



def load_env_file(
    path: Path,
    environ: MutableMapping[str, str] | None = None,
) -> dict[str, str]:
    """Load an env file into the environment, keeping the first value of each key.

    Setup appends a new block on every run, so a key can appear several
    times. The earliest assignment wins, and variables already present in the
    environment are never replaced.

    Returns:
        The variables this call actually set.
    """
    target = os.environ if environ is None else environ
    loaded: dict[str, str] = {}
    if not path.exists():
        return loaded

    try:
        with open(path, encoding="utf-8") as f:
            bindings = list(parse_stream(f))
    except OSError as e:
        raise PersistenceError(f"Failed to read {path.name}: {e}", path=str(path)) from e

    for binding in bindings:
        if binding.error or binding.key is None or binding.value is None:
            continue
        if binding.key in target:
            continue
        target[binding.key] = binding.value
        loaded[binding.key] = binding.value

    logger.debug(f"Loaded {len(loaded)} variables from {path}")
    return loaded


__all__ = [
    "ENV_KEYS",
    "BLOCK_HEADER",
    "build_assignments",
    "render_env_block",
    "merge_env_file",
    "load_env_file",
]
