# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# COMMANDS:
# ---------
# 1. Load every seed file of the source directory:
#    python -m seedloader.cli load
#    python -m seedloader.cli load --source-dir ./source-data --schema-dir metadata/
#
# 2. Show the DDL that would be created, without touching MySQL:
#    python -m seedloader.cli load --dry-run
#
# 3. Infer the column types of a single file:
#    python -m seedloader.cli infer ./source-data/customers.txt
#
# Connection settings come from the environment / .env
# (DB_HOST, DB_PORT, DB_USER, DB_PASSWORD, DB_NAME).
#
# ==============================================

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

import pymysql

from seedloader.config import get_config
from seedloader.ingestion import StreamError
from seedloader.seed_loader import SeedLoader


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seedloader",
        description="Load pipe-delimited seed files into MySQL with inferred column types."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    load_parser = subparsers.add_parser("load", help="Load every file of the source directory")
    load_parser.add_argument("--source-dir", help="Directory of seed files (SOURCE_DATA_DIR)")
    load_parser.add_argument("--separator", help="Field separator (SEPARATOR_CHAR)")
    load_parser.add_argument("--schema-dir", help="Write a JSON schema report per table here (SCHEMA_DIR)")
    load_parser.add_argument("--dry-run", action="store_true", help="Print DDL instead of writing to MySQL")

    infer_parser = subparsers.add_parser("infer", help="Print the inferred column types of one file")
    infer_parser.add_argument("file", help="Seed file to inspect")
    infer_parser.add_argument("--separator", help="Field separator (SEPARATOR_CHAR)")

    return parser


def _loader_config(args):
    config = get_config()
    overrides = {}
    if getattr(args, "source_dir", None):
        overrides["source_dir"] = args.source_dir
    if args.separator is not None:
        overrides["separator"] = args.separator
    if getattr(args, "schema_dir", None):
        overrides["schema_dir"] = args.schema_dir
    if getattr(args, "dry_run", False) or args.command == "infer":
        overrides["dry_run"] = True
    return replace(config, loader=replace(config.loader, **overrides))


def cmd_load(args, config) -> int:
    try:
        with SeedLoader(config) as loader:
            summary = loader.run()
    except FileNotFoundError as e:
        print(f"✗ {e}")
        return 1
    return 1 if summary.failed else 0


def cmd_infer(args, config) -> int:
    loader = SeedLoader(config)
    try:
        inference = loader.infer_file(args.file)
    except StreamError as e:
        print(f"✗ {e}")
        return 1

    print(f"{inference.source_file.name}: {len(inference.records)} rows")
    for name in inference.column_names:
        state = inference.states[name]
        print(f"   → {name}: {inference.resolved[name]} "
              f"(category={state.category.value}, max_length={state.max_length}, "
              f"nulls={state.null_count})")
    print()
    print(loader.render_ddl(inference))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _loader_config(args)
    except ValueError as e:
        print(f"✗ Invalid configuration: {e}")
        return 1

    try:
        if args.command == "load":
            return cmd_load(args, config)
        return cmd_infer(args, config)
    except pymysql.MySQLError as e:
        print(f"✗ MySQL error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
