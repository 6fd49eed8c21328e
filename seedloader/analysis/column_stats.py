# ==============================================
# ColumnTypeState
# ==============================================
#
# PURPOSE:
#   Data class that holds the running statistics for a single column
#   of a single source file. This is the "evidence" the resolver turns
#   into a MySQL type once the file has been read to the end.
#
# CLASS: ColumnTypeState (dataclass)
# ----------------------------------
#   Attributes:
#   -----------
#   - name: str                 → Column name from the header row
#   - category: ColumnCategory  → UNSET until the first non-null value
#   - max_length: int           → Longest non-null value seen (NO_VALUE = -1 if none)
#   - value_count: int          → Non-null values observed
#   - null_count: int           → Empty / missing values observed
#
#   Methods:
#   --------
#   - update(value: str | None, classifier) -> None
#       Fold one raw value into the statistics.
#
#   - to_dict() / from_dict()
#       Serialize for the schema report.
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .column_types import ColumnCategory, NO_VALUE
from .value_classifier import ValueClassifier


@dataclass
class ColumnTypeState:
    """
    Observed statistics for one column across every record of a file.

    The category only ever moves toward TEXT_VARIABLE: UNSET becomes
    whatever the first value looks like, and a value that does not fit
    the current category downgrades it to TEXT_VARIABLE for good.
    """

    # --- Core identity ---
    name: str

    # --- Inference state ---
    category: ColumnCategory = ColumnCategory.UNSET
    max_length: int = NO_VALUE

    # --- Counters (reporting only) ---
    value_count: int = 0
    null_count: int = 0

    # ======================================
    # Update logic
    # ======================================
    def update(self, value: Optional[str], classifier: type = ValueClassifier) -> None:
        """
        Update statistics based on a newly observed raw value.

        Args:
            value: The raw field value; None or "" means no value
            classifier: Classifier providing classify() / matches()
        """

        # Nulls never affect the category or max_length
        if classifier.is_null(value):
            self.null_count += 1
            return

        self.value_count += 1

        if self.category == ColumnCategory.UNSET:
            self.category = classifier.classify(value)
        elif self.category != ColumnCategory.TEXT_VARIABLE:
            if not classifier.matches(self.category, value):
                self.category = ColumnCategory.TEXT_VARIABLE

        # Tracked for every category, TEXT_VARIABLE included
        self.max_length = max(self.max_length, len(value))

    # ======================================
    # Computed properties
    # ======================================
    @property
    def has_values(self) -> bool:
        """True once any non-null value has been observed."""
        return self.max_length != NO_VALUE

    # ======================================
    # Serialization
    # ======================================
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert stats to a serializable dictionary for the schema report.

        Returns:
            A dictionary representation suitable for JSON storage.
        """
        return {
            "name": self.name,
            "category": self.category.value,
            "max_length": self.max_length,
            "value_count": self.value_count,
            "null_count": self.null_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColumnTypeState":
        """
        Reconstruct a ColumnTypeState from a stored schema report.

        Args:
            data: Dictionary with saved column statistics

        Returns:
            A ColumnTypeState instance reconstructed from the data
        """
        return cls(
            name=data["name"],
            category=ColumnCategory(data.get("category", ColumnCategory.UNSET.value)),
            max_length=data.get("max_length", NO_VALUE),
            value_count=data.get("value_count", 0),
            null_count=data.get("null_count", 0),
        )
