"""Sample users, friendships and blocks loaded into a fresh database."""

from __future__ import annotations

import logging
import sqlite3

from friendgraph.models import BlockList, FriendLink, User

logger = logging.getLogger(__name__)

USERS = (
    User(user_id=1, name="タカシ"),
    User(user_id=2, name="ユキ"),
    User(user_id=3, name="ハルカ"),
    User(user_id=4, name="ケンジ"),
    User(user_id=5, name="アユミ"),
    User(user_id=6, name="サトシ"),
    User(user_id=7, name="ミサキ"),
    User(user_id=8, name="ダイスケ"),
)

FRIEND_LINKS = (
    FriendLink(1, 2),
    FriendLink(1, 6),
    FriendLink(1, 3),
    FriendLink(1, 4),
    FriendLink(2, 3),
    FriendLink(2, 5),
    FriendLink(2, 4),
    FriendLink(2, 8),
    FriendLink(3, 4),
    FriendLink(3, 1),
    FriendLink(3, 6),
    FriendLink(3, 5),
    FriendLink(4, 5),
    FriendLink(4, 2),
    FriendLink(4, 1),
    FriendLink(5, 6),
    FriendLink(5, 2),
    FriendLink(6, 4),
    FriendLink(6, 3),
    FriendLink(6, 7),
)

BLOCK_LISTS = (
    BlockList(2, 1),
    BlockList(1, 5),
    BlockList(3, 5),
    BlockList(4, 2),
    BlockList(5, 7),
    BlockList(6, 3),
    BlockList(7, 4),
)


def seed_users(conn: sqlite3.Connection) -> None:
    """Insert the sample users."""
    with conn:
        conn.executemany(
            "INSERT INTO users (user_id, name) VALUES (?, ?)",
            ((user.user_id, user.name) for user in USERS),
        )
    logger.info("User seeding completed successfully.")


def seed_friend_links(conn: sqlite3.Connection) -> None:
    """Insert the sample friendships; the users must already exist."""
    with conn:
        conn.executemany(
            "INSERT INTO friend_links (user1_id, user2_id) VALUES (?, ?)",
            ((link.user1_id, link.user2_id) for link in FRIEND_LINKS),
        )
    logger.info("Friend link seeding completed successfully.")


def seed_block_lists(conn: sqlite3.Connection) -> None:
    """Insert the sample blocks; the users must already exist."""
    with conn:
        conn.executemany(
            "INSERT INTO block_lists (user1_id, user2_id) VALUES (?, ?)",
            ((block.user1_id, block.user2_id) for block in BLOCK_LISTS),
        )
    logger.info("Block list seeding completed successfully.")