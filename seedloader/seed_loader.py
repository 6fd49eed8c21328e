# ==============================================
# SeedLoader — Main Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties every package together. For each file in the source
#   directory it reads all records, infers column types, then
#   recreates the matching MySQL table and inserts the records.
#
# FLOW (per file):
#   1. RowStreamReader       (ingestion/)    → header + records, buffered in memory
#   2. TypeInferenceEngine   (analysis/)     → observe every record, then resolve
#   3. TableWriter           (storage/)      → DROP, CREATE, INSERT
#   4. SchemaStore           (persistence/)  → optional JSON report
#
#   Step 2 only resolves after the reader is exhausted. Each file gets
#   its own engine; nothing is shared between files.
#
# FAILURES:
#   A file that cannot be read or written is reported with ✗ and
#   skipped; the remaining files are still processed.
#   A schema report that cannot be written is printed with ⚠; the
#   file still counts as loaded.
#
# CLASS: SeedLoader
# -----------------
#   Methods:
#   --------
#   - list_source_files() -> list[Path]
#   - table_name_for(path) -> str
#   - infer_file(path) -> FileInference
#   - process_file(path) -> FileResult
#   - run() -> RunSummary
#   - render_ddl(inference) -> str
#   - close() -> None
#
# ==============================================

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import pymysql

from seedloader.config import AppConfig, get_config
from seedloader.ingestion import RowStreamReader, StreamError
from seedloader.analysis import TypeInferenceEngine, ResolvedColumnType, ColumnTypeState
from seedloader.storage import MySQLClient, TableWriter, build_create_table_sql
from seedloader.persistence import SchemaStore


@dataclass
class FileInference:
    """Everything learned from reading one source file."""
    source_file: Path
    table_name: str
    column_names: List[str]
    records: List[dict]
    resolved: Dict[str, ResolvedColumnType]
    states: Dict[str, ColumnTypeState]
    malformed_rows: int = 0
    renamed_columns: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class FileResult:
    """Outcome of processing one source file."""
    source_file: str
    table_name: str
    status: str  # "loaded", "inferred" (dry run) or "failed"
    rows: int = 0
    error: Optional[str] = None  # failure reason, or why the schema report is missing
    schema_report: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status != "failed"


@dataclass
class RunSummary:
    results: List[FileResult] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def succeeded(self) -> List[FileResult]:
        return [result for result in self.results if result.succeeded]

    @property
    def failed(self) -> List[FileResult]:
        return [result for result in self.results if not result.succeeded]

    @property
    def total_rows(self) -> int:
        return sum(result.rows for result in self.succeeded)

    def to_dict(self) -> dict:
        return {
            "files_processed": len(self.results),
            "files_succeeded": len(self.succeeded),
            "files_failed": len(self.failed),
            "total_rows": self.total_rows,
            "elapsed_seconds": self.elapsed_seconds,
            "errors": {result.source_file: result.error for result in self.failed},
        }


class SeedLoader:
    """
    Loads every seed file of a directory into its own MySQL table.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        mysql_client: Optional[MySQLClient] = None,
        schema_store: Optional[SchemaStore] = None
    ):
        """
        Initialize the loader with all components.

        Args:
            config: Application configuration. If None, loads from environment.
            mysql_client: Optional client; built from config.mysql if omitted.
            schema_store: Optional report store; built from config.loader.schema_dir
                          if omitted and a directory is configured.
        """
        self._config = config or get_config()
        loader_config = self._config.loader

        self._source_dir = Path(loader_config.source_dir)
        self._separator = loader_config.separator
        self._encoding = loader_config.encoding
        self._dry_run = loader_config.dry_run

        # Storage
        self._mysql_client = mysql_client or MySQLClient(
            host=self._config.mysql.host,
            port=self._config.mysql.port,
            user=self._config.mysql.user,
            password=self._config.mysql.password,
            database=self._config.mysql.database
        )
        self._table_writer = TableWriter(self._mysql_client)

        # Persistence
        if schema_store is None and loader_config.schema_dir:
            schema_store = SchemaStore(loader_config.schema_dir)
        self._schema_store = schema_store

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def list_source_files(self) -> List[Path]:
        """
        List the seed files to load, sorted by name.

        Hidden files and sub-directories are skipped.

        Returns:
            Paths of the files in the source directory
        """
        if not self._source_dir.is_dir():
            raise FileNotFoundError(f"Source directory not found: {self._source_dir}")

        return sorted(
            path for path in self._source_dir.iterdir()
            if path.is_file() and not path.name.startswith(".")
        )

    @staticmethod
    def table_name_for(path: Union[str, Path]) -> str:
        """The destination table is the file name without its extension."""
        return Path(path).stem

    def infer_file(self, path: Union[str, Path]) -> FileInference:
        """
        Read every record of a file and infer its column types.

        Records are buffered so they can be inserted after inference.

        Args:
            path: Source file to read

        Returns:
            FileInference holding records, resolved types and column stats

        Raises:
            StreamError: If the file cannot be read to the end
        """
        path = Path(path)
        records: List[dict] = []

        with RowStreamReader(path, separator=self._separator, encoding=self._encoding) as reader:
            engine = TypeInferenceEngine(reader.column_names)
            for record in reader:
                records.append(record)
                engine.observe(record)

            # Reader is exhausted, every record has been observed
            resolved = engine.resolve()

            return FileInference(
                source_file=path,
                table_name=self.table_name_for(path),
                column_names=list(reader.column_names),
                records=records,
                resolved=resolved,
                states=engine.states,
                malformed_rows=reader.malformed_rows,
                renamed_columns=list(reader.renamed_columns)
            )

    def process_file(self, path: Union[str, Path]) -> FileResult:
        """
        Load one source file into its table.

        Args:
            path: Source file to load

        Returns:
            FileResult describing the outcome; never raises for read or
            database errors.
        """
        path = Path(path)
        table_name = self.table_name_for(path)

        try:
            inference = self.infer_file(path)
            self._report_warnings(inference)

            if self._dry_run:
                print(self.render_ddl(inference))
                status = "inferred"
                rows = len(inference.records)
            else:
                self._mysql_client.connect()
                write_result = self._table_writer.write(
                    table_name,
                    inference.column_names,
                    inference.resolved,
                    inference.records
                )
                status = "loaded"
                rows = write_result.rows_inserted

        except (StreamError, pymysql.MySQLError, OSError) as e:
            print(f"✗ {path.name}: {e}")
            return FileResult(
                source_file=path.name,
                table_name=table_name,
                status="failed",
                error=str(e)
            )

        # The table is already written; a report failure does not undo it
        schema_report = None
        report_error = None
        if self._schema_store is not None:
            try:
                schema_report = str(self._schema_store.save(
                    table_name=table_name,
                    source_file=path.name,
                    resolved=inference.resolved,
                    states=inference.states,
                    row_count=rows
                ))
            except OSError as e:
                report_error = f"schema report not written: {e}"
                print(f"⚠ {path.name}: {report_error}")

        print(f"✓ Finished processing {path.name} ({rows} rows → {table_name})")
        return FileResult(
            source_file=path.name,
            table_name=table_name,
            status=status,
            rows=rows,
            error=report_error,
            schema_report=schema_report
        )

    def run(self) -> RunSummary:
        """
        Process every file of the source directory.

        Returns:
            RunSummary with one FileResult per file
        """
        start_time = time.time()
        files = self.list_source_files()

        if not files:
            print(f"⚠ No source files found in {self._source_dir}")

        summary = RunSummary()
        try:
            for path in files:
                summary.results.append(self.process_file(path))
        finally:
            self.close()

        summary.elapsed_seconds = round(time.time() - start_time, 3)

        print(f"\n📊 Summary:")
        print(f"   → Files loaded: {len(summary.succeeded)}/{len(summary.results)}")
        print(f"   → Rows: {summary.total_rows}")
        print(f"   → Time elapsed: {summary.elapsed_seconds}s")
        for result in summary.failed:
            print(f"   ✗ {result.source_file}: {result.error}")

        return summary

    def render_ddl(self, inference: FileInference) -> str:
        """CREATE TABLE statement for an inferred file."""
        return build_create_table_sql(inference.table_name, inference.resolved)

    def _report_warnings(self, inference: FileInference) -> None:
        name = inference.source_file.name
        for original, renamed in inference.renamed_columns:
            print(f"⚠ {name}: column '{original}' renamed to '{renamed}'")
        if inference.malformed_rows:
            print(f"⚠ {name}: {inference.malformed_rows} row(s) did not match the header "
                  f"(missing fields stored as NULL, extra fields ignored)")

    def close(self) -> None:
        """Close the database connection."""
        self._mysql_client.disconnect()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False  # Don't suppress exceptions
