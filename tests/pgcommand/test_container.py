"""Tests for the engine Container and settings."""

import pytest
from pydantic import ValidationError

from pgcommand.engine import AsyncioExecutor, Container, SubprocessExecutor
from pgcommand.engine.mocks import MockExecutor
from pgcommand.settings import CommandSettings, get_settings


class TestContainer:
    """Tests for Container."""

    def test_default_executors(self) -> None:
        assert isinstance(Container.executor(), SubprocessExecutor)
        assert isinstance(Container.async_executor(), AsyncioExecutor)

    def test_executors_are_cached(self) -> None:
        assert Container.executor() is Container.executor()

    def test_override_and_reset(self) -> None:
        mock = MockExecutor()
        Container.set_executor(mock)
        assert Container.executor() is mock

        Container.reset()
        assert isinstance(Container.executor(), SubprocessExecutor)

    def test_executors_use_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PGCOMMAND_ENCODING", "latin-1")
        monkeypatch.setenv("PGCOMMAND_DEFAULT_TIMEOUT", "12.5")

        executor = Container.async_executor()

        assert executor.encoding == "latin-1"
        assert executor.default_timeout == 12.5


class TestCommandSettings:
    """Tests for CommandSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PGCOMMAND_ENCODING", raising=False)
        monkeypatch.delenv("PGCOMMAND_DEFAULT_TIMEOUT", raising=False)

        settings = CommandSettings(_env_file=None)

        assert settings.encoding == "utf-8"
        assert settings.default_timeout is None

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            CommandSettings(default_timeout=0)

    def test_rejects_unknown_encoding(self, monkeypatch: pytest.MonkeyPatch) -> None:
        with pytest.raises(ValidationError, match="Unknown encoding"):
            CommandSettings(encoding="no-such-codec")

        monkeypatch.setenv("PGCOMMAND_ENCODING", "no-such-codec")
        with pytest.raises(ValidationError):
            get_settings()

    def test_accepts_encoding_aliases(self) -> None:
        assert CommandSettings(encoding="latin1").encoding == "latin1"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
