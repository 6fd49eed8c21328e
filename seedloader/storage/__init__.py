# ==============================================
# STORAGE (MySQL)
# ==============================================
#
# This package handles all database operations:
# connecting, recreating a table from resolved column types,
# and inserting the buffered records of a source file.
#
# Modules:
# --------
# - mysql_client.py  → MySQL connection, DDL rendering, operations
# - table_writer.py  → Drop / create / insert for one source file
#
# ==============================================

from .mysql_client import (
    MySQLClient,
    quote_identifier,
    quote_format_identifier,
    build_create_table_sql,
    build_insert_sql,
)
from .table_writer import TableWriter, WriteResult

__all__ = [
    "MySQLClient",
    "quote_identifier",
    "quote_format_identifier",
    "build_create_table_sql",
    "build_insert_sql",
    "TableWriter",
    "WriteResult",
]
