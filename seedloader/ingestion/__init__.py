# ==============================================
# INGESTION
# ==============================================
#
# This package turns a pipe-delimited seed file into a stream
# of records keyed by column name.
#
# Modules:
# --------
# - row_reader.py → RowStreamReader (header + lazy record stream)
# - errors.py     → StreamError, EmptySourceError
#
# ==============================================

from .errors import StreamError, EmptySourceError
from .row_reader import RowStreamReader, read_records

__all__ = ["StreamError", "EmptySourceError", "RowStreamReader", "read_records"]
