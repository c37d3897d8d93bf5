"""Tests for the pg_controldata builder."""

from pathlib import Path

from pgcommand.tools import PgControlDataBuilder


class TestPgControlDataBuilder:
    """Tests for PgControlDataBuilder."""

    def test_builder_new(self) -> None:
        command = PgControlDataBuilder().build()
        assert command.to_command_string() == '"pg_controldata"'

    def test_builder(self) -> None:
        command = (
            PgControlDataBuilder()
            .program_dir("/usr/bin")
            .pgdata("/var/lib/postgresql/data")
            .version()
            .help()
            .build()
        )

        assert command.to_command_string() == (
            r'"/usr/bin/pg_controldata" "--pgdata" "/var/lib/postgresql/data" "--version" "--help"'
        )

    def test_pgdata_accepts_path(self) -> None:
        builder = PgControlDataBuilder().pgdata(Path("/data"))
        assert builder.get_args() == ["--pgdata", "/data"]
