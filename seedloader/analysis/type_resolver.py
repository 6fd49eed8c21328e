# ==============================================
# TypeResolver
# ==============================================
#
# PURPOSE:
#   Turn a finished ColumnTypeState into the MySQL type the column
#   is created with. This is the "decision" half of inference: the
#   state says what the data looked like, the resolver picks a type.
#
# RESOLUTION RULES:
# -----------------
#   UNSET          → TEXT (no value ever seen, anything fits)
#   INTEGER        → by max_length, largest threshold first:
#                      >= 11 → BIGINT
#                      >= 3  → INT
#                      >= 2  → SMALLINT
#                      else  → TINYINT
#   TEXT_VARIABLE  → smallest of VARCHAR(10/50/255/500) with max_length <= bound,
#                    TEXT when longer than 500
#   FLOAT          → FLOAT
#   DATE           → DATE
#
#   Integer sizing uses the character length of the longest value,
#   not its numeric value: "99" and "10" both land on SMALLINT.
#
# ==============================================

from typing import Dict, List, Optional, Tuple

from .column_stats import ColumnTypeState
from .column_types import (
    ColumnCategory,
    ResolvedColumnType,
    INTEGER_SIZE_CLASSES,
    SMALLEST_INTEGER_TYPE,
    VARCHAR_SIZE_CLASSES,
    UNBOUNDED_TEXT_TYPE,
    FLOAT_TYPE,
    DATE_TYPE,
)


class TypeResolver:
    """
    Applies the size tables to a ColumnTypeState to produce a ResolvedColumnType.

    Always returns a valid type; there is no input it rejects.
    """

    def __init__(
        self,
        integer_size_classes: Optional[List[Tuple[int, str]]] = None,
        varchar_size_classes: Optional[List[int]] = None
    ):
        """
        Initialize the resolver with optional custom size tables.

        Args:
            integer_size_classes: (min_length, sql_type) pairs, largest threshold first
            varchar_size_classes: VARCHAR bounds, smallest first
        """
        if integer_size_classes is None:
            integer_size_classes = INTEGER_SIZE_CLASSES
        if varchar_size_classes is None:
            varchar_size_classes = VARCHAR_SIZE_CLASSES
        self.integer_size_classes = integer_size_classes
        self.varchar_size_classes = varchar_size_classes

    def resolve_all(self, states: Dict[str, ColumnTypeState]) -> Dict[str, ResolvedColumnType]:
        """
        Resolve every column, keeping header order.

        Args:
            states: Dictionary of column_name → ColumnTypeState

        Returns:
            Dictionary of column_name → ResolvedColumnType
        """
        return {name: self.resolve(state) for name, state in states.items()}

    def resolve(self, state: ColumnTypeState) -> ResolvedColumnType:
        """
        Resolve a single finished column.

        Args:
            state: Final statistics for the column

        Returns:
            The MySQL type to create the column with
        """
        if state.category == ColumnCategory.UNSET:
            return ResolvedColumnType(ColumnCategory.UNSET, UNBOUNDED_TEXT_TYPE)

        if state.category == ColumnCategory.INTEGER:
            return ResolvedColumnType(
                ColumnCategory.INTEGER,
                self._resolve_integer_type(state.max_length)
            )

        if state.category == ColumnCategory.TEXT_VARIABLE:
            return self._resolve_text_type(state.max_length)

        if state.category == ColumnCategory.FLOAT:
            return ResolvedColumnType(ColumnCategory.FLOAT, FLOAT_TYPE)

        return ResolvedColumnType(ColumnCategory.DATE, DATE_TYPE)

    def _resolve_integer_type(self, max_length: int) -> str:
        for threshold, sql_type in self.integer_size_classes:
            if max_length >= threshold:
                return sql_type
        return SMALLEST_INTEGER_TYPE

    def _resolve_text_type(self, max_length: int) -> ResolvedColumnType:
        for bound in self.varchar_size_classes:
            if max_length <= bound:
                return ResolvedColumnType(
                    ColumnCategory.TEXT_VARIABLE,
                    f"VARCHAR({bound})",
                    length=bound
                )
        # Longer than every bound
        return ResolvedColumnType(ColumnCategory.TEXT_VARIABLE, UNBOUNDED_TEXT_TYPE)
