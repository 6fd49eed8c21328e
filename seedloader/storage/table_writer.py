# ==============================================
# TableWriter
# ==============================================
#
# PURPOSE:
#   Takes the buffered records of one source file and the resolved
#   column types, and writes them to MySQL:
#     1. DROP TABLE IF EXISTS <table>
#     2. CREATE TABLE <table> (columns in header order)
#     3. INSERT every record (empty / missing field → NULL)
#
# CLASS: TableWriter
# ------------------
#   Stateless apart from the MySQLClient reference.
#
#   Methods:
#   --------
#   - write(table_name, column_names, resolved, records) -> WriteResult
#   - to_row(record, column_names) -> tuple   (staticmethod)
#
# DATA CLASS: WriteResult
# -----------------------
#   - table_name: str
#   - rows_inserted: int
#
# ==============================================
from dataclasses import dataclass
from typing import Dict, List, Sequence

from seedloader.analysis.column_types import ResolvedColumnType


@dataclass
class WriteResult:
    table_name: str
    rows_inserted: int = 0


class TableWriter:
    def __init__(self, mysql_client):
        self.mysql_client = mysql_client

    def write(
        self,
        table_name: str,
        column_names: Sequence[str],
        resolved: Dict[str, ResolvedColumnType],
        records: List[dict]
    ) -> WriteResult:
        # Columns are created in header order, not in dict order of `resolved`
        columns = {name: resolved[name] for name in column_names}

        self.mysql_client.drop_table(table_name)
        self.mysql_client.create_table(table_name, columns)

        rows = [self.to_row(record, column_names) for record in records]
        inserted = self.mysql_client.insert_rows(table_name, list(column_names), rows)

        return WriteResult(table_name=table_name, rows_inserted=inserted)

    @staticmethod
    def to_row(record: dict, column_names: Sequence[str]) -> tuple:
        # Empty strings indicate null values
        return tuple(record.get(name) or None for name in column_names)
