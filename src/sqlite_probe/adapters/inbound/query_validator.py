"""Read-only query validation using sqlglot.

The probe only ever issues a single read-only statement. Queries are
parsed before they reach the driver so that anything else (writes, DDL,
multiple statements, malformed SQL) is rejected as a query failure
without touching the database.
"""

from __future__ import annotations

import sqlglot
from sqlglot import exp
from sqlglot.errors import SqlglotError

from sqlite_probe.ports.outbound import QueryFailure

# Set operations (UNION, INTERSECT, EXCEPT) of SELECTs are read-only too.
READ_ONLY_STATEMENTS = (exp.Select, exp.Union, exp.Intersect, exp.Except)


class ReadOnlyQueryValidator:
    """Validates that a SQL string is a single read-only statement.

    Example:
        >>> validator = ReadOnlyQueryValidator()
        >>> validator.validate("select sqlite_version()")
        'select sqlite_version()'
    """

    def __init__(self, dialect: str = "sqlite") -> None:
        """Initialize the validator.

        Args:
            dialect: SQL dialect to use for parsing (default: sqlite).
        """
        self._dialect = dialect

    def validate(self, sql: str) -> str:
        """Check that ``sql`` is a single SELECT (or set operation of SELECTs).

        Args:
            sql: The SQL statement to check.

        Returns:
            The statement, unchanged.

        Raises:
            QueryFailure: If the SQL is invalid, empty, has several
                statements, or is not read-only.
        """
        try:
            statements = sqlglot.parse(sql, dialect=self._dialect)
        except SqlglotError as e:
            raise QueryFailure(f"failed to parse query: {e}") from e

        statements = [stmt for stmt in statements if stmt is not None]
        if not statements:
            raise QueryFailure("empty query")

        if len(statements) > 1:
            raise QueryFailure("multiple statements not supported")

        stmt = statements[0]
        if not isinstance(stmt, READ_ONLY_STATEMENTS):
            raise QueryFailure(
                f"query is not read-only: {type(stmt).__name__} statement"
            )

        return sql
