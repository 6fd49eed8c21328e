import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from seedloader.analysis.column_stats import ColumnTypeState
from seedloader.analysis.column_types import ResolvedColumnType


# ==============================================
# SchemaStore
# ==============================================
#
# PURPOSE:
#   Write a JSON report for every loaded table so the inferred
#   schema (and the evidence behind it) can be inspected after a
#   run without querying the database.
#
# WHAT IS PERSISTED (one file per table):
#   1. Resolved column types   → column name → {category, sql_type, length}
#   2. Column statistics       → column name → {category, max_length, counts}
#   3. Source file + row count
#   4. Timestamp of the run
#
# CLASS: SchemaStore
# ------------------
#   Stateful — holds a reference to the storage directory.
#
#   Constructor:
#   ------------
#   - __init__(storage_dir: str = "metadata/")
#       Create storage directory if it doesn't exist.
#
class SchemaStore:
    """
    Handles persistence of resolved table schemas to disk.

    Files created:
    - <storage_dir>/<table>.json
    """

    VERSION = "1.0"

    def __init__(self, storage_dir: str = "metadata/"):
        """
        Initialize the schema store.

        Args:
            storage_dir: Directory to store schema reports
        """
        self.storage_dir = Path(storage_dir)

        # Create directory if it doesn't exist
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, table_name: str) -> Path:
        return self.storage_dir / f"{table_name}.json"

#   Methods:
#   --------
#   - save(table_name, source_file, resolved, states, row_count) -> Path
#       Serialize one table's schema report.
#
#   - load(table_name) -> (resolved, states, info)
#       Deserialize it. Raise FileNotFoundError if missing.
#
    def save(
        self,
        table_name: str,
        source_file: str,
        resolved: Dict[str, ResolvedColumnType],
        states: Dict[str, ColumnTypeState],
        row_count: int
    ) -> Path:
        """
        Save the schema report for one table.

        Args:
            table_name: Destination table name
            source_file: File the table was loaded from
            resolved: column_name -> ResolvedColumnType, in header order
            states: column_name -> final ColumnTypeState
            row_count: Number of records loaded

        Returns:
            Path of the written report
        """
        report = {
            "table": table_name,
            "source_file": source_file,
            "row_count": row_count,
            "columns": {
                name: resolved_type.to_dict()
                for name, resolved_type in resolved.items()
            },
            "column_stats": {
                name: state.to_dict()
                for name, state in states.items()
            },
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "version": self.VERSION,
        }

        path = self.path_for(table_name)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return path

    def load(self, table_name: str) -> Tuple[Dict[str, ResolvedColumnType], Dict[str, ColumnTypeState], Dict[str, Any]]:
        """
        Load the schema report for one table.

        Returns:
            Tuple of (resolved types, column states, remaining report fields)
        """
        path = self.path_for(table_name)
        with open(path, 'r', encoding='utf-8') as f:
            report = json.load(f)

        resolved = {
            name: ResolvedColumnType.from_dict(data)
            for name, data in report.pop("columns", {}).items()
        }
        states = {
            name: ColumnTypeState.from_dict(data)
            for name, data in report.pop("column_stats", {}).items()
        }
        return resolved, states, report

#   UTILITY:
#   - exists(table_name) -> bool
#   - clear(table_name=None) -> None
#       Delete one report, or all of them.
#
    def exists(self, table_name: str) -> bool:
        return self.path_for(table_name).exists()

    def clear(self, table_name: Optional[str] = None) -> None:
        """
        Delete one schema report, or every report when no table is given.
        """
        if table_name is not None:
            files_to_delete = [self.path_for(table_name)]
        else:
            files_to_delete = list(self.storage_dir.glob("*.json"))

        for file in files_to_delete:
            if file.exists():
                file.unlink()
# FILE STRUCTURE:
# ---------------
#   metadata/
#   ├── customers.json   → {table, source_file, row_count, columns, column_stats, ...}
#   └── orders.json
#
# =============================================
