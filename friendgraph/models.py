"""Records stored in and read from the friend graph database."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A registered user: ``user_id`` is the public identifier, ``id`` the row key."""

    user_id: int
    name: str
    id: int | None = None


@dataclass(frozen=True, order=True)
class Friend:
    """A user as shown in friend lists and recommendations."""

    id: int
    name: str


@dataclass(frozen=True)
class FriendLink:
    """A directed friendship from ``user1_id`` to ``user2_id``."""

    user1_id: int
    user2_id: int
    id: int | None = None


@dataclass(frozen=True)
class BlockList:
    """A block placed by ``user1_id`` on ``user2_id``."""

    user1_id: int
    user2_id: int
    id: int | None = None


@dataclass(frozen=True)
class UserIDQuery:
    """A validated request naming one user."""

    id: int


@dataclass(frozen=True)
class UserPagingQuery:
    """A validated request naming one user and a page of results."""

    id: int
    page: int
    limit: int