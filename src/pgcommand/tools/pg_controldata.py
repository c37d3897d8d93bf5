"""pg_controldata displays control information of a PostgreSQL database cluster."""

import os
from pathlib import Path
from typing import Annotated

from pgcommand.builder import ArgumentModel, CommandBuilder, PresenceFlag, ValueFlag


class PgControlDataArguments(ArgumentModel):
    pgdata: Annotated[Path | None, ValueFlag("--pgdata")] = None
    version: Annotated[bool, PresenceFlag("--version")] = False
    help: Annotated[bool, PresenceFlag("--help")] = False


class PgControlDataBuilder(CommandBuilder[PgControlDataArguments]):
    program = "pg_controldata"
    arguments_model = PgControlDataArguments

    def pgdata(self, pgdata: str | os.PathLike[str]) -> "PgControlDataBuilder":
        """Set the data directory."""
        return self._set(pgdata=Path(pgdata))

    def version(self) -> "PgControlDataBuilder":
        """Output version information, then exit."""
        return self._set(version=True)

    def help(self) -> "PgControlDataBuilder":
        """Show help, then exit."""
        return self._set(help=True)
