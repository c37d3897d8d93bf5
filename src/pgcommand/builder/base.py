"""Base class for tool-specific command builders.

A builder pairs a fixed program name with an ArgumentModel describing that
program's flags. Builders are immutable: every fluent method returns a new
builder, so a partially configured builder can be shared and extended
safely.

    command = (
        PgIsReadyBuilder()
        .program_dir("/usr/lib/postgresql/16/bin")
        .host("localhost")
        .port(5432)
        .build()
    )
    stdout, stderr = command.execute(timeout=5)
"""

import os
from pathlib import Path
from typing import ClassVar, Generic, TypeVar

from pydantic import ValidationError

from pgcommand.builder.flags import ArgumentModel
from pgcommand.engine.command import AsyncCommand, Command
from pgcommand.engine.invocation import Invocation, program_file
from pgcommand.engine.protocols import AsyncCommandExecutor, CommandExecutor
from pgcommand.exceptions import InvalidArgumentsError

ArgsT = TypeVar("ArgsT", bound=ArgumentModel)
BuilderT = TypeVar("BuilderT", bound="CommandBuilder")


def _format_errors(error: ValidationError) -> list[str]:
    """Flatten pydantic errors to "field: message" strings."""
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        messages.append(f"{location}: {item['msg']}" if location else item["msg"])
    return messages


class CommandBuilder(Generic[ArgsT]):
    """Maps a typed ArgumentModel to an invocation of one program.

    Subclasses set ``program`` and ``arguments_model`` and add one fluent
    method per flag, each delegating to _set().
    """

    program: ClassVar[str]
    arguments_model: ClassVar[type[ArgumentModel]]

    def __init__(
        self,
        arguments: ArgsT | None = None,
        program_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        self._arguments = arguments if arguments is not None else self.arguments_model()
        self._program_dir = Path(program_dir) if program_dir is not None else None

    @property
    def arguments(self) -> ArgsT:
        return self._arguments

    def program_dir(self: BuilderT, path: str | os.PathLike[str]) -> BuilderT:
        """Location of the program binary."""
        return type(self)(self._arguments, program_dir=path)

    def _set(self: BuilderT, **changes: object) -> BuilderT:
        """Return a new builder with the given argument fields replaced."""
        arguments = self._arguments.model_copy(update=changes)
        return type(self)(arguments, program_dir=self._program_dir)

    def get_program(self) -> str:
        return self.program

    def get_program_dir(self) -> Path | None:
        return self._program_dir

    def get_program_file(self) -> str:
        """Fully qualified path to the program binary."""
        return program_file(self)

    def get_args(self) -> list[str]:
        """Validate the argument model and render it to tokens.

        Raises:
            InvalidArgumentsError: If the argument model fails validation
        """
        try:
            arguments = self._arguments.validated()
        except ValidationError as e:
            raise InvalidArgumentsError(self.program, _format_errors(e)) from e
        return arguments.to_args()

    def to_invocation(self) -> Invocation:
        return Invocation.from_builder(self)

    def build(self, executor: CommandExecutor | None = None) -> Command:
        """Build a blocking command."""
        return Command(self.to_invocation(), executor)

    def build_async(self, executor: AsyncCommandExecutor | None = None) -> AsyncCommand:
        """Build an asyncio command."""
        return AsyncCommand(self.to_invocation(), executor)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._arguments == other._arguments
            and self._program_dir == other._program_dir
        )

    def __hash__(self) -> int:
        return hash((type(self), self._arguments, self._program_dir))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(program_dir={self._program_dir!r}, {self._arguments!r})"
