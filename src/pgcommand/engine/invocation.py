"""Immutable description of one external program call."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pgcommand.engine.protocols import SupportsCommand


def program_file(command: SupportsCommand) -> str:
    """Resolve the executable for a builder.

    Joins the program directory and name when a directory is set. Otherwise
    returns the bare name so the operating system searches PATH at spawn
    time. A relative directory is kept as given: "." yields "./psql".
    """
    program = command.get_program()
    program_dir = command.get_program_dir()
    if program_dir is None:
        return program
    return os.path.join(os.fspath(program_dir), program)


def quote(token: str) -> str:
    """Double-quote a token for display, escaping quotes and control chars."""
    return json.dumps(token, ensure_ascii=False)


REDACTED = "***REDACTED***"
_SECRET_MARKERS = ("KEY", "TOKEN", "SECRET", "PASSWORD")


def is_secret(key: str) -> bool:
    """Whether an environment variable name looks like it holds a secret."""
    return any(marker in key.upper() for marker in _SECRET_MARKERS)


class Invocation(BaseModel):
    """Resolved program path plus ordered arguments.

    Shared by the blocking and asyncio command descriptors so both run
    exactly the same command line.
    """

    model_config = ConfigDict(frozen=True)

    program_file: str
    args: tuple[str, ...] = ()
    cwd: Path | None = None
    env: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_builder(cls, command: SupportsCommand) -> "Invocation":
        return cls(program_file=program_file(command), args=tuple(command.get_args()))

    @property
    def program(self) -> str:
        """Program name without its directory, used in errors and logs."""
        return os.path.basename(self.program_file)

    def command_line(self) -> list[str]:
        return [self.program_file, *self.args]

    def with_current_dir(self, cwd: str | os.PathLike[str]) -> "Invocation":
        return self.model_copy(update={"cwd": Path(cwd)})

    def with_env(self, key: str, value: str) -> "Invocation":
        return self.model_copy(update={"env": {**self.env, key: value}})

    def process_env(self) -> dict[str, str] | None:
        """Environment for the child process; None inherits ours unchanged."""
        if not self.env:
            return None
        return {**os.environ, **self.env}

    def to_command_string(self, redact: bool = False) -> str:
        """Render a shell-like string for logs and test assertions.

        Example: cd "/tmp" && PGPASSWORD="secret" "/usr/bin/psql" "--quiet"

        With redact=True, values of variables named like KEY, TOKEN, SECRET
        or PASSWORD are replaced with ***REDACTED***.

        Never parsed back; the process is always spawned from command_line().
        """
        parts: list[str] = []
        if self.cwd is not None:
            parts.append(f"cd {quote(os.fspath(self.cwd))} &&")
        for key, value in self.env.items():
            if redact and is_secret(key):
                value = REDACTED
            parts.append(f"{key}={quote(value)}")
        parts.extend(quote(token) for token in self.command_line())
        return " ".join(parts)
