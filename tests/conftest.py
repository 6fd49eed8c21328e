# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - write_source(name, text) → writes a seed file into a temp source dir
# - source_dir               → the temp source dir itself
# - mysql_client             → MagicMock standing in for MySQLClient
# - app_config               → AppConfig pointing at source_dir
# - offline_mysql_client     → real MySQLClient on an unconnected PyMySQL
#                              connection; statements land in `.sent`
#
# No live MySQL server is needed; the storage layer is exercised
# through mocks of the PyMySQL connection.
# ==============================================

from unittest.mock import MagicMock

import pymysql
import pymysql.connections
import pymysql.cursors
import pytest

from seedloader.config import AppConfig, LoaderConfig, MySQLConfig, reset_config
from seedloader.storage import MySQLClient


@pytest.fixture
def source_dir(tmp_path):
    """Empty directory to hold seed files."""
    directory = tmp_path / "source-data"
    directory.mkdir()
    return directory


@pytest.fixture
def write_source(source_dir):
    """Write a seed file and return its path."""
    def _write(name: str, text: str):
        path = source_dir / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def mysql_client():
    """MySQLClient double that records calls and reports every row inserted."""
    client = MagicMock(spec=MySQLClient)
    client.insert_rows.side_effect = lambda table, columns, rows: len(rows)
    return client


@pytest.fixture
def app_config(source_dir):
    """Configuration pointing at the temp source dir."""
    return AppConfig(
        mysql=MySQLConfig(database="seed_test"),
        loader=LoaderConfig(source_dir=str(source_dir))
    )


@pytest.fixture(autouse=True)
def fresh_config():
    """Never leak the cached config between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def offline_mysql_client(monkeypatch):
    """
    MySQLClient backed by a real PyMySQL connection that never opens a socket.

    Statements go through PyMySQL's own cursor formatting and are recorded
    as bytes in `client.sent` instead of being sent to a server.
    """
    sent = []

    def _record(cursor, query):
        sent.append(bytes(query) if isinstance(query, (bytes, bytearray)) else query.encode("utf-8"))
        return 1

    monkeypatch.setattr(pymysql.cursors.Cursor, "_query", _record)

    connection = pymysql.connections.Connection(defer_connect=True)
    # Normally set by the server handshake; string escaping reads it
    connection.server_status = 0
    monkeypatch.setattr(connection, "commit", lambda: None)
    monkeypatch.setattr(connection, "rollback", lambda: None)
    monkeypatch.setattr(connection, "close", lambda: None)

    client = MySQLClient("localhost", 3306, "root", "", "seed_test")
    client.connection = connection
    client.sent = sent
    return client
