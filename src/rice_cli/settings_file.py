"""Render and persist the module-style settings document (rice.config.js)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from rice_cli.errors import PersistenceError
from rice_cli.models import WriteOutcome

logger = logging.getLogger(__name__)

SETTINGS_TEMPLATE = """\
/** @type {{import('{sdk_package}').RiceConfig}} */
module.exports = {{
  storage: {{
    enabled: {storage},
  }},
  state: {{
    enabled: {state},
  }},
}};"""


def _js_bool(value: bool) -> str:
    return "true" if value else "false"


def render_settings(
    storage_enabled: bool,
    state_enabled: bool,
    sdk_package: str = "rice-node-sdk",
) -> str:
    """Render the settings document for the given service flags."""
    return SETTINGS_TEMPLATE.format(
        sdk_package=sdk_package,
        storage=_js_bool(storage_enabled),
        state=_js_bool(state_enabled),
    )


def write_settings(
    path: Path,
    content: str,
    confirm_overwrite: Callable[[], bool],
) -> WriteOutcome:
    """Write the settings document, asking before replacing an existing one.

    Args:
        path: Target file.
        content: Rendered document.
        confirm_overwrite: Called only when the file already exists.

    Returns:
        CREATED, OVERWRITTEN or SKIPPED. A skipped file is left byte-for-byte
        as it was.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    if path.exists():
        if not confirm_overwrite():
            logger.debug(f"Keeping existing {path}")
            return WriteOutcome.SKIPPED
        outcome = WriteOutcome.OVERWRITTEN
    else:
        outcome = WriteOutcome.CREATED

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Failed to write {path.name}: {e}", path=str(path)) from e

    logger.debug(f"Wrote {path} ({outcome.value})")
    return outcome


__all__ = ["SETTINGS_TEMPLATE", "render_settings", "write_settings"]
