"""psql is the PostgreSQL interactive terminal."""

import os
from pathlib import Path
from typing import Annotated

from pydantic import Field

from pgcommand.builder import ArgumentModel, CommandBuilder, PairFlag, PresenceFlag, ValueFlag


class PsqlArguments(ArgumentModel):
    """psql options in the order they are passed on the command line."""

    command: Annotated[str | None, ValueFlag("--command")] = None
    dbname: Annotated[str | None, ValueFlag("--dbname")] = None
    file: Annotated[Path | None, ValueFlag("--file")] = None
    list: Annotated[bool, PresenceFlag("--list")] = False
    variable: Annotated[tuple[str, str] | None, PairFlag("--variable")] = None
    version: Annotated[bool, PresenceFlag("--version")] = False
    no_psqlrc: Annotated[bool, PresenceFlag("--no-psqlrc")] = False
    single_transaction: Annotated[bool, PresenceFlag("--single-transaction")] = False
    help: Annotated[str | None, ValueFlag("--help")] = None
    echo_all: Annotated[bool, PresenceFlag("--echo-all")] = False
    echo_errors: Annotated[bool, PresenceFlag("--echo-errors")] = False
    echo_queries: Annotated[bool, PresenceFlag("--echo-queries")] = False
    echo_hidden: Annotated[bool, PresenceFlag("--echo-hidden")] = False
    log_file: Annotated[Path | None, ValueFlag("--log-file")] = None
    no_readline: Annotated[bool, PresenceFlag("--no-readline")] = False
    output: Annotated[Path | None, ValueFlag("--output")] = None
    quiet: Annotated[bool, PresenceFlag("--quiet")] = False
    single_step: Annotated[bool, PresenceFlag("--single-step")] = False
    single_line: Annotated[bool, PresenceFlag("--single-line")] = False
    no_align: Annotated[bool, PresenceFlag("--no-align")] = False
    csv: Annotated[bool, PresenceFlag("--csv")] = False
    field_separator: Annotated[str | None, ValueFlag("--field-separator")] = None
    html: Annotated[bool, PresenceFlag("--html")] = False
    pset: Annotated[tuple[str, str] | None, PairFlag("--pset")] = None
    record_separator: Annotated[str | None, ValueFlag("--record-separator")] = None
    tuples_only: Annotated[bool, PresenceFlag("--tuples-only")] = False
    table_attr: Annotated[str | None, ValueFlag("--table-attr")] = None
    expanded: Annotated[bool, PresenceFlag("--expanded")] = False
    field_separator_zero: Annotated[bool, PresenceFlag("--field-separator-zero")] = False
    record_separator_zero: Annotated[bool, PresenceFlag("--record-separator-zero")] = False
    host: Annotated[str | None, ValueFlag("--host")] = None
    port: Annotated[int | None, ValueFlag("--port"), Field(ge=0, le=65535)] = None
    username: Annotated[str | None, ValueFlag("--username")] = None
    no_password: Annotated[bool, PresenceFlag("--no-password")] = False
    password: Annotated[bool, PresenceFlag("--password")] = False


class PsqlBuilder(CommandBuilder[PsqlArguments]):
    """Builder for psql.

    Example:
        command = (
            PsqlBuilder()
            .command("SELECT 1")
            .variable("ON_ERROR_STOP", "1")
            .tuples_only()
            .no_align()
            .build()
        )
    """

    program = "psql"
    arguments_model = PsqlArguments

    def command(self, command: str) -> "PsqlBuilder":
        """Run only single command (SQL or internal) and exit."""
        return self._set(command=command)

    def dbname(self, dbname: str) -> "PsqlBuilder":
        """Database name to connect to."""
        return self._set(dbname=dbname)

    def file(self, file: str | os.PathLike[str]) -> "PsqlBuilder":
        """Execute commands from file, then exit."""
        return self._set(file=Path(file))

    def list(self) -> "PsqlBuilder":
        """List available databases, then exit."""
        return self._set(list=True)

    def variable(self, name: str, value: str) -> "PsqlBuilder":
        """Set psql variable NAME to VALUE (e.g., -v ON_ERROR_STOP=1)."""
        return self._set(variable=(name, value))

    def version(self) -> "PsqlBuilder":
        """Output version information, then exit."""
        return self._set(version=True)

    def no_psqlrc(self) -> "PsqlBuilder":
        """Do not read startup file (~/.psqlrc)."""
        return self._set(no_psqlrc=True)

    def single_transaction(self) -> "PsqlBuilder":
        """Execute as a single transaction (if non-interactive)."""
        return self._set(single_transaction=True)

    def help(self, topic: str) -> "PsqlBuilder":
        """Show help, then exit.

        Possible values: options, commands, variables.
        """
        return self._set(help=topic)

    def echo_all(self) -> "PsqlBuilder":
        """Echo all input from script."""
        return self._set(echo_all=True)

    def echo_errors(self) -> "PsqlBuilder":
        """Echo failed commands."""
        return self._set(echo_errors=True)

    def echo_queries(self) -> "PsqlBuilder":
        """Echo commands sent to server."""
        return self._set(echo_queries=True)

    def echo_hidden(self) -> "PsqlBuilder":
        """Display queries that internal commands generate."""
        return self._set(echo_hidden=True)

    def log_file(self, log_file: str | os.PathLike[str]) -> "PsqlBuilder":
        """Send session log to file."""
        return self._set(log_file=Path(log_file))

    def no_readline(self) -> "PsqlBuilder":
        """Disable enhanced command line editing (readline)."""
        return self._set(no_readline=True)

    def output(self, output: str | os.PathLike[str]) -> "PsqlBuilder":
        """Send query results to file (or |pipe)."""
        return self._set(output=Path(output))

    def quiet(self) -> "PsqlBuilder":
        """Run quietly (no messages, only query output)."""
        return self._set(quiet=True)

    def single_step(self) -> "PsqlBuilder":
        """Single-step mode (confirm each query)."""
        return self._set(single_step=True)

    def single_line(self) -> "PsqlBuilder":
        """Single-line mode (end of line terminates SQL command)."""
        return self._set(single_line=True)

    def no_align(self) -> "PsqlBuilder":
        """Unaligned table output mode."""
        return self._set(no_align=True)

    def csv(self) -> "PsqlBuilder":
        """CSV (Comma-Separated Values) table output mode."""
        return self._set(csv=True)

    def field_separator(self, field_separator: str) -> "PsqlBuilder":
        """Field separator for unaligned output (default: "|")."""
        return self._set(field_separator=field_separator)

    def html(self) -> "PsqlBuilder":
        """HTML table output mode."""
        return self._set(html=True)

    def pset(self, name: str, value: str) -> "PsqlBuilder":
        """Set printing option VAR to ARG (see \\pset command)."""
        return self._set(pset=(name, value))

    def record_separator(self, record_separator: str) -> "PsqlBuilder":
        """Record separator for unaligned output (default: newline)."""
        return self._set(record_separator=record_separator)

    def tuples_only(self) -> "PsqlBuilder":
        """Print rows only."""
        return self._set(tuples_only=True)

    def table_attr(self, table_attr: str) -> "PsqlBuilder":
        """Set HTML table tag attributes (e.g., width, border)."""
        return self._set(table_attr=table_attr)

    def expanded(self) -> "PsqlBuilder":
        """Turn on expanded table output."""
        return self._set(expanded=True)

    def field_separator_zero(self) -> "PsqlBuilder":
        """Set field separator for unaligned output to zero byte."""
        return self._set(field_separator_zero=True)

    def record_separator_zero(self) -> "PsqlBuilder":
        """Set record separator for unaligned output to zero byte."""
        return self._set(record_separator_zero=True)

    def host(self, host: str) -> "PsqlBuilder":
        """Database server host or socket directory."""
        return self._set(host=host)

    def port(self, port: int) -> "PsqlBuilder":
        """Database server port."""
        return self._set(port=port)

    def username(self, username: str) -> "PsqlBuilder":
        """Database user name."""
        return self._set(username=username)

    def no_password(self) -> "PsqlBuilder":
        """Never prompt for password."""
        return self._set(no_password=True)

    def password(self) -> "PsqlBuilder":
        """Force password prompt (should happen automatically)."""
        return self._set(password=True)
