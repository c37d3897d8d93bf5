"""Shared pytest fixtures for pgcommand tests.

Provides mock executors installed into the Container, and makes sure every
test starts from default settings.
"""

import pytest

from pgcommand.engine import CommandOutput, Container
from pgcommand.engine.mocks import MockAsyncExecutor, MockExecutor
from pgcommand.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_container():
    """Reset container overrides and cached settings around each test."""
    clear_settings_cache()
    Container.reset()
    yield
    Container.reset()
    clear_settings_cache()


@pytest.fixture
def mock_executor() -> MockExecutor:
    """Fixture that installs a mock blocking executor via Container.

    Yields:
        MockExecutor configured to return a successful result
    """
    result = CommandOutput(
        program="psql",
        exit_code=0,
        stdout="success",
        stderr="",
        duration_seconds=0.1,
    )
    executor = MockExecutor(result)
    Container.set_executor(executor)
    yield executor


@pytest.fixture
def mock_async_executor() -> MockAsyncExecutor:
    """Fixture that installs a mock asyncio executor via Container."""
    result = CommandOutput(
        program="psql",
        exit_code=0,
        stdout="success",
        stderr="",
        duration_seconds=0.1,
    )
    executor = MockAsyncExecutor(result)
    Container.set_async_executor(executor)
    yield executor


@pytest.fixture
def failing_async_executor() -> MockAsyncExecutor:
    """Fixture that provides a mock asyncio executor returning exit code 2."""
    result = CommandOutput(
        program="psql",
        exit_code=2,
        stdout="partial",
        stderr="psql: error: connection refused",
        duration_seconds=0.1,
    )
    executor = MockAsyncExecutor(result)
    Container.set_async_executor(executor)
    yield executor
