"""Protocols for the command execution engine.

Defines the contracts between builders, command descriptors and executors,
enabling dependency injection and testability.
"""

from datetime import timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from pgcommand.exceptions import NonZeroExitError

if TYPE_CHECKING:
    from pgcommand.engine.invocation import Invocation

Timeout = float | timedelta | None


class CommandOutput(BaseModel):
    """Result of one external program run.

    Frozen because results are immutable facts about past executions.
    """

    model_config = ConfigDict(frozen=True)

    program: str
    exit_code: int
    stdout: str
    stderr: str
    duration_seconds: float

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    def check(self) -> "CommandOutput":
        """Return self, or raise NonZeroExitError if the program failed."""
        if not self.success:
            raise NonZeroExitError(
                self.program,
                self.exit_code,
                stdout=self.stdout,
                stderr=self.stderr,
            )
        return self


@runtime_checkable
class SupportsCommand(Protocol):
    """Anything that can describe an external program invocation.

    Tool builders provide the program name, an optional directory holding
    the binary, and the ordered argument tokens.
    """

    def get_program(self) -> str:
        """Fixed program name, e.g. "psql"."""
        ...

    def get_program_dir(self) -> Path | None:
        """Directory holding the binary, or None to search PATH."""
        ...

    def get_args(self) -> list[str]:
        """Ordered argument tokens."""
        ...


@runtime_checkable
class CommandExecutor(Protocol):
    """Protocol for blocking execution backends.

    The calling thread waits until the process exits or the timeout
    elapses.
    """

    def run(self, invocation: "Invocation", timeout: Timeout = None) -> CommandOutput:
        """Execute an invocation and return its captured output."""
        ...


@runtime_checkable
class AsyncCommandExecutor(Protocol):
    """Protocol for asyncio execution backends.

    The calling task suspends while the process runs, leaving the event
    loop free for other tasks.
    """

    async def run(self, invocation: "Invocation", timeout: Timeout = None) -> CommandOutput:
        """Execute an invocation and return its captured output."""
        ...
