"""Mock implementations for testing the engine layer.

Provides in-memory executors that record invocations without spawning any
process.
"""

from typing import Any

from pgcommand.engine.invocation import Invocation
from pgcommand.engine.protocols import (
    AsyncCommandExecutor,
    CommandExecutor,
    CommandOutput,
    Timeout,
)


def _default_output() -> CommandOutput:
    return CommandOutput(
        program="mock",
        exit_code=0,
        stdout="",
        stderr="",
        duration_seconds=0.0,
    )


class MockExecutor:
    """Mock blocking executor for testing.

    Records all calls without actually executing anything. Returns a
    configurable result for each call, or raises a configured error.
    """

    def __init__(self, result: CommandOutput | None = None, error: Exception | None = None) -> None:
        """Initialize with a result to return.

        Args:
            result: CommandOutput to return from run(). If None, uses an empty success result.
            error: Exception to raise from run() instead of returning.
        """
        self.result = result or _default_output()
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def run(self, invocation: Invocation, timeout: Timeout = None) -> CommandOutput:
        """Record the call and return the configured result."""
        self.calls.append({"invocation": invocation, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.result

    def set_result(self, result: CommandOutput) -> None:
        """Change the result for subsequent calls."""
        self.result = result


class MockAsyncExecutor:
    """Mock asyncio executor for testing."""

    def __init__(self, result: CommandOutput | None = None, error: Exception | None = None) -> None:
        self.result = result or _default_output()
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def run(self, invocation: Invocation, timeout: Timeout = None) -> CommandOutput:
        """Record the call and return the configured result."""
        self.calls.append({"invocation": invocation, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.result

    def set_result(self, result: CommandOutput) -> None:
        """Change the result for subsequent calls."""
        self.result = result


# Verify protocol compliance at import time
assert isinstance(MockExecutor(), CommandExecutor)
assert isinstance(MockAsyncExecutor(), AsyncCommandExecutor)
