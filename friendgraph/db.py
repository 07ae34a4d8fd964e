"""Opening, creating and resetting the friend graph database."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Mapping

from friendgraph.seed import seed_block_lists, seed_friend_links, seed_users

TABLES = ("users", "friend_links", "block_lists")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL UNIQUE,
    name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS friend_links (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user1_id INTEGER NOT NULL REFERENCES users (user_id),
    user2_id INTEGER NOT NULL REFERENCES users (user_id),
    UNIQUE (user1_id, user2_id)
);
CREATE INDEX IF NOT EXISTS idx_friend_links_user1_id ON friend_links (user1_id);
CREATE INDEX IF NOT EXISTS idx_friend_links_user2_id ON friend_links (user2_id);
CREATE TABLE IF NOT EXISTS block_lists (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user1_id INTEGER NOT NULL REFERENCES users (user_id),
    user2_id INTEGER NOT NULL REFERENCES users (user_id)
);
CREATE INDEX IF NOT EXISTS idx_block_lists_user1_id ON block_lists (user1_id);
CREATE INDEX IF NOT EXISTS idx_block_lists_user2_id ON block_lists (user2_id);
"""


def database_path_from_env(environ: Mapping[str, str] | None = None) -> str:
    """Return the database path named by ``DB_DATABASE``."""
    if environ is None:
        environ = os.environ
    path = environ.get("DB_DATABASE")
    if not path:
        raise ValueError("DB_DATABASE is not set")
    return path


def connect(path: str) -> sqlite3.Connection:
    """Open the database with rows addressable by name and foreign keys enforced."""
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def create_tables(conn: sqlite3.Connection) -> None:
    """Create the tables and indexes that do not exist yet."""
    conn.executescript(_SCHEMA)


def init_database(conn: sqlite3.Connection) -> None:
    """Create the tables, empty them, restart their keys and load the sample data."""
    create_tables(conn)
    placeholders = ", ".join("?" for _ in TABLES)
    with conn:
        for table in reversed(TABLES):
            conn.execute(f"DELETE FROM {table}")
        conn.execute(f"DELETE FROM sqlite_sequence WHERE name IN ({placeholders})", TABLES)
    seed_users(conn)
    seed_block_lists(conn)
    seed_friend_links(conn)