"""Queries for users, their friends and recommended friends of friends."""

from __future__ import annotations

import sqlite3

from friendgraph.models import Friend, User

_FRIEND_LIST = """
SELECT u.user_id AS id, u.name AS name
FROM friend_links AS fl
JOIN users AS u ON u.user_id = fl.user2_id
WHERE fl.user1_id = :id
ORDER BY fl.id
"""

_FRIEND_OF_FRIEND_LIST = """
SELECT u.user_id AS id, u.name AS name
FROM friend_links AS fl
JOIN users AS u ON u.user_id = fl.user2_id
WHERE fl.user1_id IN (SELECT user2_id FROM friend_links WHERE user1_id = :id)
  AND fl.user2_id NOT IN (SELECT user2_id FROM friend_links WHERE user1_id = :id)
  AND fl.user2_id != :id
  AND fl.user2_id NOT IN (
      SELECT user2_id FROM block_lists WHERE user1_id = :id
      UNION
      SELECT user1_id FROM block_lists WHERE user2_id = :id
  )
GROUP BY u.user_id, u.name
ORDER BY MIN(fl.id)
"""

_PAGE = "LIMIT :limit OFFSET :offset"


class RecordNotFound(LookupError):
    """No row matched the lookup."""


def _friends(rows: list[sqlite3.Row]) -> list[Friend]:
    return [Friend(id=row["id"], name=row["name"]) for row in rows]


def get_user_by_id(conn: sqlite3.Connection, user_id: int) -> User:
    """Return the user whose row key is ``user_id``."""
    row = conn.execute(
        "SELECT id, user_id, name FROM users WHERE id = ? ORDER BY id LIMIT 1", (user_id,)
    ).fetchone()
    if row is None:
        raise RecordNotFound(f"user {user_id} not found")
    return User(user_id=row["user_id"], name=row["name"], id=row["id"])


def get_friend_list(conn: sqlite3.Connection, user_id: int) -> list[Friend]:
    """Return the users that ``user_id`` has befriended."""
    return _friends(conn.execute(_FRIEND_LIST, {"id": user_id}).fetchall())


def get_friend_of_friend_list(conn: sqlite3.Connection, user_id: int) -> list[Friend]:
    """Return friends of the user's friends, excluding the user, their friends and blocks."""
    return _friends(conn.execute(_FRIEND_OF_FRIEND_LIST, {"id": user_id}).fetchall())


def get_friend_of_friend_list_paging(
    conn: sqlite3.Connection, user_id: int, page: int, limit: int
) -> list[Friend]:
    """Return one page of ``limit`` friend-of-friend recommendations.

    A negative ``limit`` means no limit, and an offset below zero is ignored.
    """
    offset = max((page - 1) * limit, 0)
    rows = conn.execute(
        _FRIEND_OF_FRIEND_LIST + _PAGE,
        {"id": user_id, "limit": limit, "offset": offset},
    ).fetchall()
    return _friends(rows)