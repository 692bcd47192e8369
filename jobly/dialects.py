'''
jobly.dialects
Placeholder style, identifier quoting and case-insensitive match operator
for each SQL backend the record layer can run on.
'''

from typing import Any


class Dialect:
    """PostgreSQL native dialect (`$1, $2, ...` placeholders)."""

    paramstyle: str = "numeric"
    quote_char: str = '"'
    ilike: str = "ILIKE"

    def q(self, ident: str) -> str:
        return f"{self.quote_char}{ident}{self.quote_char}"

    def placeholder(self, index: int) -> str:
        """Return the marker for the 1-indexed positional parameter `index`."""
        if self.paramstyle == "numeric":
            return f"${index}"
        if self.paramstyle == "qmark":
            return "?"
        if self.paramstyle in ("format", "pyformat"):
            return "%s"
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")


class PsycopgDialect(Dialect):
    paramstyle = "format"


class SQLiteDialect(Dialect):
    # sqlite LIKE already ignores ASCII case
    paramstyle = "qmark"
    ilike = "LIKE"


class MySQLDialect(Dialect):
    paramstyle = "format"
    quote_char = "`"
    ilike = "LIKE"


DEFAULT_DIALECT = Dialect()


def dialect_for(bind: Any) -> Dialect:
    """Pick the dialect matching a SQLAlchemy engine or connection."""
    sa_dialect = bind.dialect
    name = sa_dialect.name
    paramstyle = sa_dialect.paramstyle

    if name == "postgresql":
        if paramstyle in ("format", "pyformat"):
            return PsycopgDialect()
        return Dialect()
    if name == "sqlite":
        return SQLiteDialect()
    if name in ("mysql", "mariadb"):
        return MySQLDialect()
    raise ValueError(f"Unsupported database backend: {name}")
