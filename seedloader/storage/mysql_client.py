# ==============================================
# MySQLClient
# ==============================================
#
# PURPOSE:
#   Manages the MySQL connection and the few SQL operations the
#   loader needs: drop a table, create it from resolved column
#   types, and insert rows with parameterised statements.
#
# CLASS: MySQLClient
# ------------------
#   Stateful — holds connection to MySQL.
#
#   Constructor:
#   ------------
#   - __init__(host, port, user, password, database)
#       Store connection params. Don't connect yet.
#
#   Methods:
#   --------
#   - connect() -> None
#       Establish connection. Create database if it doesn't exist.
#
#   - disconnect() -> None
#       Close connection cleanly.
#
#   - drop_table(table_name: str) -> None
#       DROP TABLE IF EXISTS.
#
#   - create_table(table_name, columns: dict[str, ResolvedColumnType]) -> None
#       CREATE TABLE with one column per entry, in order.
#
#   - insert_rows(table_name, column_names, rows: list[tuple]) -> int
#       Parameterised multi-row INSERT. Return count inserted.
#
#   - execute(query: str, params: tuple = None) -> None
#   - fetch_all(query: str, params: tuple = None) -> list[dict]
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MySQLClient(...) as db:` usage.
#
# FUNCTIONS:
# ----------
#   Connection-free SQL rendering, also used for dry runs:
#   - quote_identifier(name) -> str
#   - quote_format_identifier(name) -> str   (also doubles "%")
#   - build_create_table_sql(table_name, columns) -> str
#   - build_insert_sql(table_name, column_names) -> str
#
# ==============================================

from typing import Any, Dict, List, Optional, Sequence, cast

import pymysql
import pymysql.cursors

from seedloader.analysis.column_types import ResolvedColumnType


def quote_identifier(name: str) -> str:
    # Backtick-quote a MySQL identifier, doubling embedded backticks
    return "`" + name.replace("`", "``") + "`"


def build_create_table_sql(table_name: str, columns: Dict[str, ResolvedColumnType]) -> str:
    columns_def = ",\n    ".join(
        f"{quote_identifier(name)} {resolved.sql_type}"
        for name, resolved in columns.items()
    )
    return f"CREATE TABLE {quote_identifier(table_name)} (\n    {columns_def}\n)"


def quote_format_identifier(name: str) -> str:
    # Identifier for a statement PyMySQL formats with `query % args`
    return quote_identifier(name).replace("%", "%%")


def build_insert_sql(table_name: str, column_names: Sequence[str]) -> str:
    column_list = ", ".join(quote_format_identifier(name) for name in column_names)
    placeholders = ", ".join(["%s"] * len(column_names))
    return f"INSERT INTO {quote_format_identifier(table_name)} ({column_list}) VALUES ({placeholders})"


class MySQLClient:
    def __init__(self, host, port, user, password, database):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.database = database
        self.connection = None

    def connect(self) -> None:
        # Establish connection to MySQL, create database if it doesn't exist
        if self.connection is not None:
            return
        self.connection = pymysql.connect(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            charset="utf8mb4",
        )
        cursor = self.connection.cursor()
        database = quote_identifier(self.database)
        cursor.execute(f"CREATE DATABASE IF NOT EXISTS {database}")
        cursor.execute(f"USE {database}")
        cursor.close()

    def disconnect(self) -> None:
        # Close connection cleanly
        if self.connection:
            self.connection.close()
            self.connection = None

    def _require_connection(self):
        if self.connection is None:
            raise RuntimeError("Not connected to MySQL")
        return self.connection

    def drop_table(self, table_name: str) -> None:
        self.execute(f"DROP TABLE IF EXISTS {quote_identifier(table_name)}")

    def create_table(self, table_name: str, columns: Dict[str, ResolvedColumnType]) -> None:
        if not columns:
            raise ValueError(f"Cannot create table {table_name} without columns")
        self.execute(build_create_table_sql(table_name, columns))

    def insert_rows(self, table_name: str, column_names: Sequence[str], rows: List[tuple]) -> int:
        # Insert all rows with one parameterised statement, return count inserted
        if not rows:
            return 0
        connection = self._require_connection()
        cursor = connection.cursor()
        try:
            cursor.executemany(build_insert_sql(table_name, column_names), rows)
            connection.commit()
        except pymysql.MySQLError:
            connection.rollback()
            raise
        finally:
            cursor.close()
        return len(rows)

    def execute(self, query: str, params: Optional[tuple] = None) -> None:
        # Execute a raw SQL query
        connection = self._require_connection()
        cursor = connection.cursor()
        try:
            if params:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            connection.commit()
        finally:
            cursor.close()

    def fetch_all(self, query: str, params: Optional[tuple] = None) -> List[Dict[str, Any]]:
        # Execute SELECT and return rows as dicts
        connection = self._require_connection()
        cursor = connection.cursor(pymysql.cursors.DictCursor)
        try:
            if params is not None:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            return cast(List[Dict[str, Any]], cursor.fetchall())
        finally:
            cursor.close()

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
