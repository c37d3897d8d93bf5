"""Runnable command descriptors.

Command runs an Invocation on a blocking executor, AsyncCommand on an
asyncio executor. Both wrap the same immutable Invocation, so the program
path and arguments are identical whichever model runs them. Each descriptor
runs at most once.

Exit status handling differs between the two:
- Command returns captured output whatever the exit status;
  CommandOutput.check() is there for callers that want an error.
- AsyncCommand raises NonZeroExitError on a non-zero exit, with the
  captured stdout and stderr attached.
"""

import os
from enum import Enum
from typing import TypeVar

from pgcommand.engine.container import Container
from pgcommand.engine.invocation import Invocation
from pgcommand.engine.protocols import (
    AsyncCommandExecutor,
    CommandExecutor,
    CommandOutput,
    Timeout,
)
from pgcommand.exceptions import (
    CommandStateError,
    CommandTimeoutError,
    SpawnError,
)

CommandT = TypeVar("CommandT", bound="_CommandDescriptor")


class ExecutionState(str, Enum):
    """Lifecycle of a command descriptor."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    SPAWN_FAILED = "spawn_failed"


class _CommandDescriptor:
    def __init__(self, invocation: Invocation) -> None:
        self._invocation = invocation
        self._state = ExecutionState.NOT_STARTED

    @property
    def invocation(self) -> Invocation:
        return self._invocation

    @property
    def program(self) -> str:
        return self._invocation.program

    @property
    def state(self) -> ExecutionState:
        return self._state

    def with_current_dir(self: CommandT, cwd: str | os.PathLike[str]) -> CommandT:
        """Return a new, unstarted command that runs in cwd."""
        return self._replace(self._invocation.with_current_dir(cwd))

    def with_env(self: CommandT, key: str, value: str) -> CommandT:
        """Return a new, unstarted command with an extra environment variable."""
        return self._replace(self._invocation.with_env(key, value))

    def to_command_string(self) -> str:
        return self._invocation.to_command_string()

    def _replace(self: CommandT, invocation: Invocation) -> CommandT:
        raise NotImplementedError

    def _start(self) -> None:
        if self._state is not ExecutionState.NOT_STARTED:
            raise CommandStateError(self.program, self._state.value)
        self._state = ExecutionState.RUNNING

    def _finish(self, output: CommandOutput) -> None:
        self._state = ExecutionState.COMPLETED if output.success else ExecutionState.FAILED

    def _fail(self, error: BaseException) -> None:
        if isinstance(error, SpawnError):
            self._state = ExecutionState.SPAWN_FAILED
        elif isinstance(error, CommandTimeoutError):
            self._state = ExecutionState.TIMED_OUT
        else:
            self._state = ExecutionState.FAILED

    def __repr__(self) -> str:
        rendered = self._invocation.to_command_string(redact=True)
        return f"{type(self).__name__}({rendered!r}, state={self._state.value})"


class Command(_CommandDescriptor):
    """Blocking command descriptor."""

    def __init__(self, invocation: Invocation, executor: CommandExecutor | None = None) -> None:
        """Initialize command.

        Args:
            invocation: What to run
            executor: Executor to use (Container.executor() if None)
        """
        super().__init__(invocation)
        self._executor = executor

    def _replace(self, invocation: Invocation) -> "Command":
        return Command(invocation, self._executor)

    def output(self, timeout: Timeout = None) -> CommandOutput:
        """Run the command and return the full result, whatever the exit status.

        Raises:
            SpawnError: If the program could not be started
            CommandTimeoutError: If the timeout elapsed; the process is killed
            CommandStateError: If this command was already executed
        """
        self._start()
        executor = self._executor or Container.executor()
        try:
            output = executor.run(self._invocation, timeout)
        except BaseException as e:
            self._fail(e)
            raise
        self._finish(output)
        return output

    def execute(self, timeout: Timeout = None) -> tuple[str, str]:
        """Run the command and return (stdout, stderr)."""
        output = self.output(timeout)
        return output.stdout, output.stderr


class AsyncCommand(_CommandDescriptor):
    """Asyncio command descriptor.

    States: NOT_STARTED -> RUNNING -> COMPLETED, FAILED (non-zero exit),
    TIMED_OUT or SPAWN_FAILED.
    """

    def __init__(self, invocation: Invocation, executor: AsyncCommandExecutor | None = None) -> None:
        super().__init__(invocation)
        self._executor = executor

    def _replace(self, invocation: Invocation) -> "AsyncCommand":
        return AsyncCommand(invocation, self._executor)

    async def output(self, timeout: Timeout = None) -> CommandOutput:
        """Run the command and return the full result.

        Raises:
            SpawnError: If the program could not be started
            CommandTimeoutError: If the timeout elapsed; the process is killed
            NonZeroExitError: If the program exited with a non-zero status
            CommandStateError: If this command was already executed
        """
        self._start()
        executor = self._executor or Container.async_executor()
        try:
            output = await executor.run(self._invocation, timeout)
        except BaseException as e:
            self._fail(e)
            raise
        self._finish(output)
        return output.check()

    async def execute(self, timeout: Timeout = None) -> tuple[str, str]:
        """Run the command and return (stdout, stderr)."""
        output = await self.output(timeout)
        return output.stdout, output.stderr
