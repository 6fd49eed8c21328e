# ==============================================
# Column Types (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the vocabulary of type inference:
#   the semantic category a column is believed to hold, and the
#   concrete MySQL type a finished column resolves to.
#
# ENUMS:
# ------
# - ColumnCategory(Enum): UNSET, INTEGER, FLOAT, DATE, TEXT_VARIABLE
#     UNSET until the first non-null value; TEXT_VARIABLE is absorbing.
#
# CLASSES:
# --------
# - ResolvedColumnType (frozen dataclass)
#     The final storage type for a single column.
#
#     Attributes:
#     -----------
#     - category: ColumnCategory   → Category the column finished in
#     - sql_type: str              → MySQL column type ("SMALLINT", "VARCHAR(50)", ...)
#     - length: int | None         → VARCHAR bound, None for every other type
#
# SIZE TABLES:
# ------------
# - INTEGER_SIZE_CLASSES: ordered (min_length, sql_type), largest first
# - VARCHAR_SIZE_CLASSES: ordered VARCHAR bounds, smallest first
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Dict, Any, List, Tuple


class ColumnCategory(Enum):
    """
    Semantic category observed for a column.

    - UNSET: no non-null value seen yet
    - INTEGER: every value so far is unsigned digits
    - FLOAT: every value so far is digits.digits
    - DATE: every value so far is YYYY-MM-DD
    - TEXT_VARIABLE: anything else; never changes once reached
    """
    UNSET = "unset"
    INTEGER = "int"
    FLOAT = "float"
    DATE = "date"
    TEXT_VARIABLE = "varchar"


# Sentinel for "no value observed" in ColumnTypeState.max_length
NO_VALUE = -1

# (minimum character length, MySQL type), checked largest threshold first.
# The length of the textual value stands in for numeric magnitude.
INTEGER_SIZE_CLASSES: List[Tuple[int, str]] = [
    (11, "BIGINT"),
    (3, "INT"),
    (2, "SMALLINT"),
]
SMALLEST_INTEGER_TYPE = "TINYINT"

# VARCHAR bounds, checked smallest first
VARCHAR_SIZE_CLASSES: List[int] = [10, 50, 255, 500]

UNBOUNDED_TEXT_TYPE = "TEXT"
FLOAT_TYPE = "FLOAT"
DATE_TYPE = "DATE"


@dataclass(frozen=True)
class ResolvedColumnType:
    """
    The concrete MySQL type a column resolves to once its file is exhausted.
    """

    category: ColumnCategory
    sql_type: str
    length: Optional[int] = None  # Set only for bounded VARCHAR

    def __str__(self) -> str:
        return self.sql_type

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the resolved type for the schema report.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "category": self.category.value,  # Convert enum to string
            "sql_type": self.sql_type,
            "length": self.length,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResolvedColumnType":
        """
        Reconstruct a ResolvedColumnType from a stored schema report.

        Args:
            data: Dictionary with saved type information

        Returns:
            A ResolvedColumnType instance
        """
        return cls(
            category=ColumnCategory(data["category"]),
            sql_type=data["sql_type"],
            length=data.get("length"),
        )
