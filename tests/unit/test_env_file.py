"""Tests for the .env block and append-only merge."""

from __future__ import annotations

from pathlib import Path

import pytest

from rice_cli.env_file import (
    ENV_KEYS,
    build_assignments,
    load_env_file,
    merge_env_file,
    render_env_block,
)
from rice_cli.errors import PersistenceError
from rice_cli.models import SetupAnswers, StateParams, StorageParams, WriteOutcome


def _storage_only() -> SetupAnswers:
    return SetupAnswers(
        storage_enabled=True,
        state_enabled=False,
        storage=StorageParams(url="db.internal:50051", user="svc", token="s3cret", http_port="8080"),
    )


class TestBuildAssignments:
    """Tests for mapping answers to environment keys."""

    def test_all_seven_keys_in_order(self) -> None:
        """Test every key is present in fixed order."""
        keys = [key for key, _ in build_assignments(_storage_only())]
        assert keys == list(ENV_KEYS)
        assert len(keys) == 7

    def test_disabled_service_keeps_defaults(self) -> None:
        """Test State fields default when State is disabled."""
        assignments = dict(build_assignments(_storage_only()))
        assert assignments["STORAGE_INSTANCE_URL"] == "db.internal:50051"
        assert assignments["STORAGE_USER"] == "svc"
        assert assignments["STORAGE_AUTH_TOKEN"] == "s3cret"
        assert assignments["STORAGE_HTTP_PORT"] == "8080"
        assert assignments["STATE_INSTANCE_URL"] == "localhost:50051"
        assert assignments["STATE_AUTH_TOKEN"] == ""
        assert assignments["STATE_RUN_ID"] == "default"

    def test_state_only(self) -> None:
        """Test Storage fields default when Storage is disabled."""
        answers = SetupAnswers(
            storage_enabled=False,
            state_enabled=True,
            state=StateParams(url="mem:6000", token="t", run_id="run-7"),
        )
        assignments = dict(build_assignments(answers))
        assert assignments["STORAGE_INSTANCE_URL"] == "localhost:50051"
        assert assignments["STORAGE_USER"] == "admin"
        assert assignments["STORAGE_HTTP_PORT"] == "3000"
        assert assignments["STATE_RUN_ID"] == "run-7"


class TestRenderEnvBlock:
    """Tests for the rendered block."""

    def test_block_layout(self) -> None:
        """Test blank line, header, then KEY=value lines."""
        block = render_env_block(build_assignments(_storage_only()))
        lines = block.split("\n")
        assert lines[0] == ""
        assert lines[1] == "# Rice Configuration"
        assert lines[2] == "STORAGE_INSTANCE_URL=db.internal:50051"
        assert lines[8] == "STATE_RUN_ID=default"
        assert block.endswith("\n")

    def test_empty_token_written_verbatim(self) -> None:
        """Test an empty token produces an empty assignment."""
        block = render_env_block([("STATE_AUTH_TOKEN", "")])
        assert "STATE_AUTH_TOKEN=\n" in block


class TestMergeEnvFile:
    """Tests for the append-only merge."""

    def test_creates_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file is created containing only the block."""
        path = tmp_path / ".env"
        block = render_env_block(build_assignments(_storage_only()))

        assert merge_env_file(path, block) is WriteOutcome.CREATED
        assert path.read_text() == block

    def test_appends_after_existing_content(self, tmp_path: Path) -> None:
        """Test unrelated content is preserved and the block goes last."""
        path = tmp_path / ".env"
        path.write_text("DATABASE_URL=postgres://x\nSTORAGE_USER=old")
        block = render_env_block(build_assignments(_storage_only()))

        assert merge_env_file(path, block) is WriteOutcome.APPENDED
        assert path.read_text() == "DATABASE_URL=postgres://x\nSTORAGE_USER=old" + block

    def test_repeated_merges_accumulate(self, tmp_path: Path) -> None:
        """Test two merges keep both blocks in insertion order."""
        path = tmp_path / ".env"
        first = render_env_block(build_assignments(_storage_only()))
        second = render_env_block(
            build_assignments(SetupAnswers(storage_enabled=False, state_enabled=True))
        )

        merge_env_file(path, first)
        merge_env_file(path, second)

        content = path.read_text()
        assert content == first + second
        assert content.count("# Rice Configuration") == 2
        assert content.count("STORAGE_INSTANCE_URL=") == 2

    def test_unwritable_path_raises(self, tmp_path: Path) -> None:
        """Test I/O failures surface as PersistenceError."""
        path = tmp_path / "nope" / ".env"
        with pytest.raises(PersistenceError, match="Failed to update .env"):
            merge_env_file(path, "\n# Rice Configuration\n")


class TestLoadEnvFile:
    """Tests for reading persisted assignments back."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test an absent file loads nothing."""
        environ: dict[str, str] = {}
        assert load_env_file(tmp_path / ".env", environ) == {}
        assert environ == {}

    def test_first_block_wins(self, tmp_path: Path) -> None:
        """Test the earliest assignment of a repeated key is kept."""
        path = tmp_path / ".env"
        path.write_text(
            "\n# Rice Configuration\nSTORAGE_INSTANCE_URL=first:1\nSTORAGE_HTTP_PORT=1111\n"
            "\n# Rice Configuration\nSTORAGE_INSTANCE_URL=second:2\nSTORAGE_HTTP_PORT=2222\n"
        )
        environ: dict[str, str] = {}

        loaded = load_env_file(path, environ)

        assert environ == {"STORAGE_INSTANCE_URL": "first:1", "STORAGE_HTTP_PORT": "1111"}
        assert loaded == environ

    def test_existing_environment_not_overridden(self, tmp_path: Path) -> None:
        """Test variables already set in the environment take precedence."""
        path = tmp_path / ".env"
        path.write_text("STORAGE_USER=from-file\nSTATE_RUN_ID=run-7\n")
        environ = {"STORAGE_USER": "from-shell"}

        loaded = load_env_file(path, environ)

        assert environ == {"STORAGE_USER": "from-shell", "STATE_RUN_ID": "run-7"}
        assert loaded == {"STATE_RUN_ID": "run-7"}

    def test_empty_value_and_comments(self, tmp_path: Path) -> None:
        """Test comments are skipped and empty values are kept."""
        path = tmp_path / ".env"
        path.write_text("# Rice Configuration\nSTATE_AUTH_TOKEN=\n")
        environ: dict[str, str] = {}

        load_env_file(path, environ)

        assert environ == {"STATE_AUTH_TOKEN": ""}

    def test_unreadable_path_raises(self, tmp_path: Path) -> None:
        """Test a directory in place of the file surfaces as PersistenceError."""
        path = tmp_path / ".env"
        path.mkdir()
        with pytest.raises(PersistenceError, match="Failed to read .env"):
            load_env_file(path, {})
