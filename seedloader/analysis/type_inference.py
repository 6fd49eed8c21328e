# ==============================================
# TypeInferenceEngine
# ==============================================
#
# PURPOSE:
#   Observe every record of ONE source file and accumulate a
#   ColumnTypeState per column, then resolve each column to a
#   concrete MySQL type. This is the "observation engine" for
#   a single file.
#
# CLASS: TypeInferenceEngine
# --------------------------
#   Stateful — owns the column-state table for one file. A new engine
#   is created for every file; nothing is shared between files.
#
#   Constructor:
#   ------------
#   - __init__(column_names, classifier=ValueClassifier, resolver=None)
#
#   Methods:
#   --------
#   - observe(record: dict) -> None
#       Update each column's state from one record.
#
#   - observe_all(records: Iterable[dict]) -> int
#       Observe many records, return how many were seen.
#
#   - resolve() -> dict[str, ResolvedColumnType]
#       Resolve every column in header order. Afterwards the engine
#       is finalized and refuses further observations.
#
# FUNCTION:
# ---------
# - infer_column_types(column_names, records) -> dict[str, ResolvedColumnType]
#
# ==============================================

from typing import Dict, Iterable, List, Optional

from .column_stats import ColumnTypeState
from .column_types import ResolvedColumnType
from .type_resolver import TypeResolver
from .value_classifier import ValueClassifier


class TypeInferenceEngine:
    """
    Observes records from one file and infers a storage type per column.

    Every record must be observed before resolve() is called; resolving
    early would size columns from partial statistics.
    """

    def __init__(
        self,
        column_names: List[str],
        classifier: type = ValueClassifier,
        resolver: Optional[TypeResolver] = None
    ):
        """
        Initialize a fresh engine for one file.

        Args:
            column_names: Header row of the file, in order
            classifier: Value classifier used for every update
            resolver: Optional TypeResolver. A default one is created if omitted.
        """
        self.column_names = list(column_names)
        self.classifier = classifier
        self.resolver = resolver or TypeResolver()
        self.states: Dict[str, ColumnTypeState] = {
            name: ColumnTypeState(name=name) for name in self.column_names
        }
        self.records_observed: int = 0
        self._resolved: Optional[Dict[str, ResolvedColumnType]] = None

    @property
    def is_resolved(self) -> bool:
        return self._resolved is not None

    def observe(self, record: dict) -> None:
        """
        Update every column's statistics from a single record.

        Columns missing from the record count as null; keys that are not
        columns are ignored.

        Args:
            record: Mapping of column name → raw value (or None)
        """
        if self.is_resolved:
            raise RuntimeError("Cannot observe records after column types were resolved")

        for name in self.column_names:
            self.states[name].update(record.get(name), self.classifier)

        self.records_observed += 1

    def observe_all(self, records: Iterable[dict]) -> int:
        """
        Observe a sequence of records.

        Args:
            records: Any iterable of record dictionaries

        Returns:
            Number of records observed by this call
        """
        count = 0
        for record in records:
            self.observe(record)
            count += 1
        return count

    def resolve(self) -> Dict[str, ResolvedColumnType]:
        """
        Resolve every column to a MySQL type, in header order.

        Returns:
            Dictionary of column_name → ResolvedColumnType
        """
        if self._resolved is None:
            self._resolved = self.resolver.resolve_all(self.states)
        return dict(self._resolved)


def infer_column_types(column_names: List[str], records: Iterable[dict]) -> Dict[str, ResolvedColumnType]:
    """Run a fresh engine over records and return the resolved types."""
    engine = TypeInferenceEngine(column_names)
    engine.observe_all(records)
    return engine.resolve()
