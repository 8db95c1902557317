"""sqlbrace compilation layer: template + arguments → SQL text."""
from sqlbrace.compile.base import SQLDialect
from sqlbrace.compile.builder import QueryBuilder
from sqlbrace.compile.mysql import MySQLDialect
from sqlbrace.compile.postgres import PostgresDialect
from sqlbrace.compile.sqlite import SQLiteDialect

__all__ = [
    "SQLDialect",
    "QueryBuilder",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
]
