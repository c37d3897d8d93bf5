"""Tests for the pg_isready builder."""

import pytest

from pgcommand.exceptions import InvalidArgumentsError
from pgcommand.tools import PgIsReadyBuilder


class TestPgIsReadyBuilder:
    """Tests for PgIsReadyBuilder."""

    def test_builder_new(self) -> None:
        command = PgIsReadyBuilder().build()
        assert command.to_command_string() == '"pg_isready"'

    def test_builder(self) -> None:
        command = (
            PgIsReadyBuilder()
            .program_dir("/usr/bin")
            .dbname("postgres")
            .quiet()
            .version()
            .help()
            .host("localhost")
            .port(5432)
            .timeout(3)
            .username("postgres")
            .build()
        )

        assert command.to_command_string() == (
            r'"/usr/bin/pg_isready" "--dbname" "postgres" "--quiet" "--version" "--help" '
            r'"--host" "localhost" "--port" "5432" "--timeout" "3" "--username" "postgres"'
        )

    def test_connection_check_args(self) -> None:
        builder = PgIsReadyBuilder().dbname("postgres").quiet().host("localhost").port(5432)

        assert builder.get_args() == [
            "--dbname",
            "postgres",
            "--quiet",
            "--host",
            "localhost",
            "--port",
            "5432",
        ]

    def test_port_out_of_range(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="port"):
            PgIsReadyBuilder().port(70000).build()
