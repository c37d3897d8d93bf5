"""Builder abstraction: typed argument models and command builders."""

from pgcommand.builder.base import CommandBuilder
from pgcommand.builder.flags import ArgumentModel, Flag, PairFlag, PresenceFlag, ValueFlag

__all__ = [
    "ArgumentModel",
    "CommandBuilder",
    "Flag",
    "PairFlag",
    "PresenceFlag",
    "ValueFlag",
]
