# ==============================================
# PERSISTENCE (Schema reports)
# ==============================================
#
# This package saves the resolved schema of each loaded table
# as a JSON report, so inference results survive the run.
#
# Modules:
# --------
# - schema_store.py  → Save/load per-table schema reports
#
# ==============================================

from .schema_store import SchemaStore

__all__ = ["SchemaStore"]
