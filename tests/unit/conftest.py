"""Shared fixtures for rice-cli unit tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any
from unittest.mock import patch

import httpx
import pytest

from rice_cli.env_file import ENV_KEYS


class ScriptedPrompter:
    """Prompter double answering from a fixed script.

    Each answer is consumed in order; None means "accept the default".
    """

    def __init__(self, *answers: Any) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    def _next(self, question: str, default: Any) -> Any:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {question}")
        answer = self.answers.pop(0)
        return default if answer is None else answer

    def confirm(self, question: str, default: bool) -> bool:
        return bool(self._next(question, default))

    def text(self, question: str, default: str) -> str:
        return str(self._next(question, default))

    def secret(self, question: str) -> str:
        return str(self._next(question, ""))


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def status_transport(status_code: int) -> RecordingTransport:
    """Transport answering every request with the given status."""
    return RecordingTransport(lambda request: httpx.Response(status_code, text="ok"))


def refusing_transport() -> RecordingTransport:
    """Transport failing every request as if the port were closed."""

    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    return RecordingTransport(_refuse)


class ProgressRecorder:
    """Busy-indicator double recording enter/exit events."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def __call__(self, message: str) -> Any:
        @contextmanager
        def _indicator() -> Iterator[None]:
            self.events.append(("start", message))
            try:
                yield
            finally:
                self.events.append(("stop", message))

        return _indicator()


@pytest.fixture
def progress() -> ProgressRecorder:
    """Create a progress recorder."""
    return ProgressRecorder()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture(autouse=True)
def clean_environ() -> Iterator[None]:
    """Isolate os.environ from the Rice keys loaded by tests."""
    with patch.dict(os.environ):
        for key in ENV_KEYS:
            os.environ.pop(key, None)
        for key in ("RICE_SETTINGS_FILENAME", "RICE_ENV_FILENAME", "RICE_SDK_PACKAGE"):
            os.environ.pop(key, None)
        yield
