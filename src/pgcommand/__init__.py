"""pgcommand: typed builders and executors for external command-line tools.

Builders turn typed options into an ordered argument list, commands run
that invocation either blocking (subprocess) or under asyncio, with
optional timeouts and typed errors.

Usage:
    from pgcommand import PgIsReadyBuilder

    stdout, stderr = PgIsReadyBuilder().host("localhost").port(5432).build().execute()
    stdout, stderr = await PsqlBuilder().command("SELECT 1").build_async().execute(timeout=10)
"""

from pgcommand.builder import (
    ArgumentModel,
    CommandBuilder,
    PairFlag,
    PresenceFlag,
    ValueFlag,
)
from pgcommand.engine import (
    AsyncCommand,
    Command,
    CommandOutput,
    Container,
    ExecutionState,
    Invocation,
)
from pgcommand.exceptions import (
    CommandError,
    CommandStateError,
    CommandTimeoutError,
    ExecutionError,
    InvalidArgumentsError,
    NonZeroExitError,
    SpawnError,
)
from pgcommand.settings import CommandSettings, get_settings
from pgcommand.tools import PgControlDataBuilder, PgIsReadyBuilder, PsqlBuilder

__version__ = "0.1.0"

__all__ = [
    # Builders
    "ArgumentModel",
    "CommandBuilder",
    "PairFlag",
    "PresenceFlag",
    "ValueFlag",
    "PgControlDataBuilder",
    "PgIsReadyBuilder",
    "PsqlBuilder",
    # Engine
    "AsyncCommand",
    "Command",
    "CommandOutput",
    "Container",
    "ExecutionState",
    "Invocation",
    # Errors
    "CommandError",
    "CommandStateError",
    "CommandTimeoutError",
    "ExecutionError",
    "InvalidArgumentsError",
    "NonZeroExitError",
    "SpawnError",
    # Settings
    "CommandSettings",
    "get_settings",
]
