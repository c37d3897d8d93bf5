"""Builders for the PostgreSQL command-line tools."""

from pgcommand.tools.pg_controldata import PgControlDataArguments, PgControlDataBuilder
from pgcommand.tools.pg_isready import PgIsReadyArguments, PgIsReadyBuilder
from pgcommand.tools.psql import PsqlArguments, PsqlBuilder

__all__ = [
    "PgControlDataArguments",
    "PgControlDataBuilder",
    "PgIsReadyArguments",
    "PgIsReadyBuilder",
    "PsqlArguments",
    "PsqlBuilder",
]
