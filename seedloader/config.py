# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file
#   and hand typed config objects to the rest of the package.
#
# CLASSES:
# --------
# - MySQLConfig (dataclass)
#     host: str          (DB_HOST, default "localhost")
#     port: int          (DB_PORT, default 3306)
#     user: str          (DB_USER, default "root")
#     password: str      (DB_PASSWORD, default "")
#     database: str      (DB_NAME, default "seed_db")
#
# - LoaderConfig (dataclass)
#     source_dir: str            (SOURCE_DATA_DIR, default "./source-data")
#     separator: str             (SEPARATOR_CHAR, default "|")
#     encoding: str              (SOURCE_ENCODING, default "utf-8")
#     schema_dir: str | None     (SCHEMA_DIR, default None -> no reports)
#     dry_run: bool              (DRY_RUN, default False)
#     Raises ValueError unless separator is exactly one character.
#
# - AppConfig (dataclass)
#     mysql: MySQLConfig
#     loader: LoaderConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Raises ValueError for an invalid SEPARATOR_CHAR.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the cached singleton (tests, CLI overrides).
#
# ==============================================

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


TRUE_VARIANTS = {"1", "true", "yes", "on"}


@dataclass
class MySQLConfig:
    """MySQL database configuration."""
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "seed_db"


@dataclass
class LoaderConfig:
    """Where the seed files live and how they are parsed."""
    source_dir: str = "./source-data"
    separator: str = "|"
    encoding: str = "utf-8"
    schema_dir: Optional[str] = None
    dry_run: bool = False

    def __post_init__(self):
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ValueError(
                f"SEPARATOR_CHAR must be a single character, got {self.separator!r}"
            )


@dataclass
class AppConfig:
    """Main application configuration."""
    mysql: MySQLConfig = field(default_factory=MySQLConfig)
    loader: LoaderConfig = field(default_factory=LoaderConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUE_VARIANTS


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    mysql_config = MySQLConfig(
        host=os.getenv("DB_HOST", "localhost"),
        port=int(os.getenv("DB_PORT", "3306")),
        user=os.getenv("DB_USER", "root"),
        password=os.getenv("DB_PASSWORD", ""),
        database=os.getenv("DB_NAME", "seed_db")
    )

    loader_config = LoaderConfig(
        source_dir=os.getenv("SOURCE_DATA_DIR", "./source-data"),
        separator=os.getenv("SEPARATOR_CHAR", "|"),
        encoding=os.getenv("SOURCE_ENCODING", "utf-8"),
        schema_dir=os.getenv("SCHEMA_DIR") or None,
        dry_run=_env_flag("DRY_RUN")
    )

    _config_instance = AppConfig(mysql=mysql_config, loader=loader_config)

    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the env."""
    global _config_instance
    _config_instance = None
