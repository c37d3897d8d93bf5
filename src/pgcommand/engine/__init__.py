"""Execution engine for external commands.

- Invocation: immutable program path plus ordered arguments
- Command / AsyncCommand: runnable descriptors for the blocking and asyncio models
- CommandExecutor / AsyncCommandExecutor: protocols for execution backends
- SubprocessExecutor / AsyncioExecutor: default backends
- Container: composition root for swapping backends in tests
"""

from pgcommand.engine.backends import AsyncioExecutor, SubprocessExecutor, decode_output
from pgcommand.engine.command import AsyncCommand, Command, ExecutionState
from pgcommand.engine.container import Container
from pgcommand.engine.invocation import Invocation, program_file
from pgcommand.engine.protocols import (
    AsyncCommandExecutor,
    CommandExecutor,
    CommandOutput,
    SupportsCommand,
)

__all__ = [
    # Descriptors
    "AsyncCommand",
    "Command",
    "ExecutionState",
    "Invocation",
    # Protocols and types
    "AsyncCommandExecutor",
    "CommandExecutor",
    "CommandOutput",
    "SupportsCommand",
    # Implementations
    "AsyncioExecutor",
    "SubprocessExecutor",
    # Composition root
    "Container",
    # Functions
    "decode_output",
    "program_file",
]
