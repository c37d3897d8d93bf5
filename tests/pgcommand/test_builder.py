"""Tests for the CommandBuilder base class."""

import os
from typing import Annotated

import pytest
from pydantic import model_validator

from pgcommand.builder import ArgumentModel, CommandBuilder, PairFlag, PresenceFlag, ValueFlag
from pgcommand.engine import AsyncCommand, Command, SupportsCommand
from pgcommand.engine.mocks import MockAsyncExecutor, MockExecutor
from pgcommand.exceptions import InvalidArgumentsError


class EchoArguments(ArgumentModel):
    message: Annotated[str | None, ValueFlag("--message")] = None
    loud: Annotated[bool, PresenceFlag("--loud")] = False
    setting: Annotated[tuple[str, str] | None, PairFlag("--set")] = None
    quiet: Annotated[bool, PresenceFlag("--quiet")] = False

    @model_validator(mode="after")
    def check_volume(self) -> "EchoArguments":
        if self.loud and self.quiet:
            raise ValueError("loud and quiet cannot be combined")
        return self


class EchoBuilder(CommandBuilder[EchoArguments]):
    program = "echo-tool"
    arguments_model = EchoArguments

    def message(self, message: str) -> "EchoBuilder":
        return self._set(message=message)

    def loud(self) -> "EchoBuilder":
        return self._set(loud=True)

    def setting(self, name: str, value: str) -> "EchoBuilder":
        return self._set(setting=(name, value))

    def quiet(self) -> "EchoBuilder":
        return self._set(quiet=True)


class TestCommandBuilder:
    """Tests for CommandBuilder."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(EchoBuilder(), SupportsCommand)

    def test_program(self) -> None:
        builder = EchoBuilder()
        assert builder.get_program() == "echo-tool"
        assert builder.get_program_dir() is None
        assert builder.get_program_file() == "echo-tool"

    def test_program_dir(self) -> None:
        builder = EchoBuilder().program_dir("/opt/bin")
        assert builder.get_program_file() == os.path.join("/opt/bin", "echo-tool")

    def test_args_follow_declaration_order(self) -> None:
        builder = EchoBuilder().setting("mode", "fast").loud().message("hello")
        assert builder.get_args() == ["--message", "hello", "--loud", "--set", "mode=fast"]

    def test_methods_return_new_builders(self) -> None:
        base = EchoBuilder().message("hello")
        loud = base.loud()

        assert base.get_args() == ["--message", "hello"]
        assert loud.get_args() == ["--message", "hello", "--loud"]
        assert base is not loud

    def test_program_dir_survives_later_calls(self) -> None:
        builder = EchoBuilder().program_dir("/opt/bin").loud()
        assert builder.get_program_dir() is not None
        assert builder.to_invocation().program_file == os.path.join("/opt/bin", "echo-tool")

    def test_equality(self) -> None:
        assert EchoBuilder().loud() == EchoBuilder().loud()
        assert EchoBuilder().loud() != EchoBuilder()
        assert hash(EchoBuilder().loud()) == hash(EchoBuilder().loud())

    def test_build_is_idempotent(self) -> None:
        builder = EchoBuilder().program_dir("/opt/bin").message("hi").setting("a", "b")
        first = builder.to_invocation()
        second = builder.to_invocation()

        assert first == second
        assert first.command_line() == second.command_line()

    def test_build_and_build_async_share_invocation(self) -> None:
        builder = EchoBuilder().program_dir("/opt/bin").message("hi")

        command = builder.build()
        async_command = builder.build_async()

        assert isinstance(command, Command)
        assert isinstance(async_command, AsyncCommand)
        assert command.invocation == async_command.invocation
        assert command.to_command_string() == async_command.to_command_string()

    def test_build_passes_executors(self) -> None:
        executor = MockExecutor()
        async_executor = MockAsyncExecutor()

        EchoBuilder().build(executor).execute()

        assert len(executor.calls) == 1
        assert EchoBuilder().build_async(async_executor).state.value == "not_started"

    def test_construction_never_fails(self) -> None:
        builder = EchoBuilder().loud().quiet()
        assert builder.arguments.loud is True
        assert builder.arguments.quiet is True

    def test_validation_happens_at_build(self) -> None:
        builder = EchoBuilder().loud().quiet()

        with pytest.raises(InvalidArgumentsError, match="loud and quiet cannot be combined") as exc_info:
            builder.build()

        assert exc_info.value.program == "echo-tool"
        assert len(exc_info.value.errors) == 1

    def test_invalid_field_type_reported_with_location(self) -> None:
        builder = EchoBuilder()._set(message=123)

        with pytest.raises(InvalidArgumentsError) as exc_info:
            builder.get_args()

        assert exc_info.value.errors[0].startswith("message:")

    def test_repr(self) -> None:
        assert "EchoBuilder" in repr(EchoBuilder().loud())
