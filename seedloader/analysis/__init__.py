# ==============================================
# ANALYSIS: COLUMN TYPE INFERENCE
# ==============================================
#
# This package observes the values of each column in a source
# file and decides which MySQL type the column is created with.
#
# Two-step process:
#   Step 1 (Observation): Stream records → update ColumnTypeState per column
#   Step 2 (Resolution):  Finished state → ResolvedColumnType
#
# Modules:
# --------
# - column_types.py      → ColumnCategory, ResolvedColumnType, size tables
# - value_classifier.py  → Ordered pattern rules for a single value
# - column_stats.py      → Running statistics for one column
# - type_resolver.py     → Size tables applied to finished statistics
# - type_inference.py    → Per-file engine tying it together
#
# ==============================================

from .column_types import ColumnCategory, ResolvedColumnType, NO_VALUE
from .value_classifier import ValueClassifier
from .column_stats import ColumnTypeState
from .type_resolver import TypeResolver
from .type_inference import TypeInferenceEngine, infer_column_types

__all__ = [
    "ColumnCategory",
    "ResolvedColumnType",
    "NO_VALUE",
    "ValueClassifier",
    "ColumnTypeState",
    "TypeResolver",
    "TypeInferenceEngine",
    "infer_column_types",
]
