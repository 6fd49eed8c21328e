# ==============================================
# RowStreamReader
# ==============================================
#
# PURPOSE:
#   Parse a pipe-delimited seed file into a lazy, single-pass
#   stream of records. The first line holds the column names,
#   every following line is one record.
#
# CLASS: RowStreamReader
# ----------------------
#   Stateful — holds the open file handle while iterating.
#
#   Constructor:
#   ------------
#   - __init__(path, separator="|", encoding="utf-8")
#       Store parameters. Don't open yet.
#       Raises ValueError unless separator is exactly one character.
#
#   Attributes (after open):
#   ------------------------
#   - column_names: list[str]              → Header row (duplicates renamed)
#   - renamed_columns: list[tuple[str, str]] → (original, renamed) pairs
#   - rows_read: int                       → Records yielded so far
#   - malformed_rows: int                  → Records whose field count != header
#
#   Methods:
#   --------
#   - open() -> None
#       Open the file and read the header row.
#   - close() -> None
#   - __iter__() -> Iterator[dict[str, str | None]]
#       Yield one record per data line.
#
#   Context Manager:
#   ----------------
#   - `with RowStreamReader(path) as reader: for record in reader: ...`
#
# RECORD SHAPE:
# -------------
#   - Empty field          → None
#   - Missing fields       → None (row is counted as malformed)
#   - Extra fields         → dropped (row is counted as malformed)
#   - Blank line           → every field None
#   - Duplicate header     → second "name" becomes "name_2", third "name_3", ...
#   - Empty header name    → "column_<position>" (1-based)
#
# ERRORS:
# -------
#   OSError / UnicodeDecodeError / csv.Error are raised as StreamError.
#   Records already yielded stay yielded.
#
# ==============================================

import csv
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from .errors import StreamError, EmptySourceError


BOM = "\ufeff"


class RowStreamReader:
    """
    Streams records from one delimited source file.
    """

    def __init__(self, path: Union[str, Path], separator: str = "|", encoding: str = "utf-8"):
        if not isinstance(separator, str) or len(separator) != 1:
            raise ValueError(f"Separator must be a single character, got {separator!r}")
        self.path = Path(path)
        self.separator = separator
        self.encoding = encoding
        self.column_names: List[str] = []
        self.renamed_columns: List[Tuple[str, str]] = []
        self.rows_read = 0
        self.malformed_rows = 0
        self._file = None
        self._reader = None
        self._consumed = False

    def open(self) -> None:
        # Open the file and consume the header row
        if self._file is not None:
            return
        try:
            self._file = open(self.path, "r", encoding=self.encoding, newline="")
            self._reader = csv.reader(self._file, delimiter=self.separator)
            header = next(self._reader, None)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            self.close()
            raise StreamError(self.path, str(e)) from e

        if header:
            header[0] = header[0].lstrip(BOM)
        if not header or all(not name.strip() for name in header):
            self.close()
            raise EmptySourceError(self.path, "no header row")

        self.column_names, self.renamed_columns = self._disambiguate(
            [name.strip() for name in header]
        )

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._reader = None

    def __iter__(self) -> Iterator[dict]:
        if self._consumed:
            raise StreamError(self.path, "records can only be read once")
        self.open()
        self._consumed = True
        return self._iter_records()

    def _iter_records(self) -> Iterator[dict]:
        try:
            while True:
                try:
                    row = next(self._reader, None)
                except (OSError, UnicodeDecodeError, csv.Error) as e:
                    raise StreamError(
                        self.path, f"line {self._reader.line_num}: {e}"
                    ) from e
                if row is None:
                    return
                self.rows_read += 1
                yield self._to_record(row)
        finally:
            self.close()

    def _to_record(self, row: List[str]) -> dict:
        n_columns = len(self.column_names)
        if row and len(row) != n_columns:
            self.malformed_rows += 1
        # Pad short rows, drop extra fields
        values = (row + [""] * n_columns)[:n_columns]
        return {
            name: (value if value != "" else None)
            for name, value in zip(self.column_names, values)
        }

    @staticmethod
    def _disambiguate(names: List[str]) -> Tuple[List[str], List[Tuple[str, str]]]:
        """
        Rename empty and repeated header names so every column is unique.

        Args:
            names: Header names as read

        Returns:
            Tuple of (unique names, list of (original, renamed) pairs)
        """
        taken = set(name for name in names if name)
        seen = set()
        result = []
        renamed = []

        for position, name in enumerate(names, start=1):
            if not name:
                candidate = f"column_{position}"
                suffix = 1
                while candidate in taken:
                    suffix += 1
                    candidate = f"column_{position}_{suffix}"
                taken.add(candidate)
                seen.add(candidate)
                result.append(candidate)
                renamed.append((name, candidate))
                continue

            if name not in seen:
                seen.add(name)
                result.append(name)
                continue

            suffix = 2
            candidate = f"{name}_{suffix}"
            while candidate in taken:
                suffix += 1
                candidate = f"{name}_{suffix}"
            taken.add(candidate)
            seen.add(candidate)
            result.append(candidate)
            renamed.append((name, candidate))

        return result, renamed

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def read_records(path: Union[str, Path], separator: str = "|", encoding: str = "utf-8") -> Tuple[List[str], List[dict]]:
    """
    Read a whole source file into memory.

    Returns:
        Tuple of (column_names, records)
    """
    with RowStreamReader(path, separator=separator, encoding=encoding) as reader:
        records = list(reader)
        return reader.column_names, records
