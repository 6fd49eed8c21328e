# ==============================================
# seedloader — Delimited Seed File Loader
# ==============================================
#
# Package Structure:
#
# seedloader/
# ├── ingestion/        # Read pipe-delimited source files into records
# ├── analysis/         # Infer each column's storage type from its values
# ├── storage/          # Drop / create / insert into MySQL
# ├── persistence/      # Optional JSON report of resolved schemas
# ├── config.py         # Configuration management
# ├── seed_loader.py    # Orchestrator: one source file -> one table
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
