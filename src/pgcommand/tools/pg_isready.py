"""pg_isready issues a connection check to a PostgreSQL database."""

from typing import Annotated

from pydantic import Field

from pgcommand.builder import ArgumentModel, CommandBuilder, PresenceFlag, ValueFlag


class PgIsReadyArguments(ArgumentModel):
    dbname: Annotated[str | None, ValueFlag("--dbname")] = None
    quiet: Annotated[bool, PresenceFlag("--quiet")] = False
    version: Annotated[bool, PresenceFlag("--version")] = False
    help: Annotated[bool, PresenceFlag("--help")] = False
    host: Annotated[str | None, ValueFlag("--host")] = None
    port: Annotated[int | None, ValueFlag("--port"), Field(ge=0, le=65535)] = None
    timeout: Annotated[int | None, ValueFlag("--timeout"), Field(ge=0, le=65535)] = None
    username: Annotated[str | None, ValueFlag("--username")] = None


class PgIsReadyBuilder(CommandBuilder[PgIsReadyArguments]):
    """Builder for pg_isready."""

    program = "pg_isready"
    arguments_model = PgIsReadyArguments

    def dbname(self, dbname: str) -> "PgIsReadyBuilder":
        """Set the database name."""
        return self._set(dbname=dbname)

    def quiet(self) -> "PgIsReadyBuilder":
        """Run quietly."""
        return self._set(quiet=True)

    def version(self) -> "PgIsReadyBuilder":
        """Output version information, then exit."""
        return self._set(version=True)

    def help(self) -> "PgIsReadyBuilder":
        """Show help, then exit."""
        return self._set(help=True)

    def host(self, host: str) -> "PgIsReadyBuilder":
        """Set the database server host or socket directory."""
        return self._set(host=host)

    def port(self, port: int) -> "PgIsReadyBuilder":
        """Set the database server port."""
        return self._set(port=port)

    def timeout(self, timeout: int) -> "PgIsReadyBuilder":
        """Set the seconds to wait when attempting connection, 0 disables (default: 3)."""
        return self._set(timeout=timeout)

    def username(self, username: str) -> "PgIsReadyBuilder":
        """Set the user name to connect as."""
        return self._set(username=username)
