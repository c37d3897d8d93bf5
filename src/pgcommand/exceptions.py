"""pgcommand exception hierarchy.

Every failure raised by this package derives from CommandError, so callers
can catch all of them with a single except clause while still telling a
missing binary apart from a timeout or a failed exit status.

Usage:
    from pgcommand.exceptions import NonZeroExitError, SpawnError

    try:
        stdout, stderr = await builder.build_async().execute(timeout=5)
    except SpawnError as e:
        print(f"Could not start {e.program}: {e.cause}")
    except NonZeroExitError as e:
        print(f"{e.program} exited with {e.exit_code}: {e.stderr}")
"""

from collections.abc import Sequence


class CommandError(Exception):
    """Base exception for all pgcommand errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Assembly Errors


class InvalidArgumentsError(CommandError):
    """Argument model failed validation when the invocation was assembled.

    Fields are never validated as they are set; the whole model is checked
    once, when build() is called.
    """

    def __init__(self, program: str, errors: Sequence[str]) -> None:
        self.program = program
        self.errors = list(errors)
        super().__init__(f"Invalid arguments for '{program}': {'; '.join(self.errors)}")


class CommandStateError(CommandError):
    """A command descriptor was executed more than once."""

    def __init__(self, program: str, state: str) -> None:
        self.program = program
        self.state = state
        super().__init__(f"Command '{program}' cannot be executed from state {state}")


# Execution Errors


class ExecutionError(CommandError):
    """Base class for failures while running an external program.

    Carries whatever stdout/stderr was captured before the failure.
    """

    def __init__(self, program: str, message: str, stdout: str = "", stderr: str = "") -> None:
        self.program = program
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(message)


class SpawnError(ExecutionError):
    """The external program could not be started.

    Raised for a missing binary, a permission problem or an invalid working
    directory. The underlying OSError is kept as ``cause``.
    """

    def __init__(self, program: str, cause: OSError) -> None:
        self.cause = cause
        super().__init__(program, f"Failed to start '{program}': {cause}")


class CommandTimeoutError(ExecutionError):
    """The program did not exit before the timeout elapsed.

    The process has been killed by the time this is raised. Captured output
    is best effort.
    """

    def __init__(
        self,
        program: str,
        timeout: float,
        stdout: str = "",
        stderr: str = "",
        pid: int | None = None,
    ) -> None:
        self.timeout = timeout
        self.pid = pid
        super().__init__(
            program,
            f"Command '{program}' timed out after {timeout}s",
            stdout=stdout,
            stderr=stderr,
        )


class NonZeroExitError(ExecutionError):
    """The program exited with a non-success status."""

    def __init__(self, program: str, exit_code: int, stdout: str = "", stderr: str = "") -> None:
        self.exit_code = exit_code
        message = f"Command '{program}' failed with exit code {exit_code}"
        if stderr:
            message += f": {stderr.strip()[:200]}"
        super().__init__(program, message, stdout=stdout, stderr=stderr)
