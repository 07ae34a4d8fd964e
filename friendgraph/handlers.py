"""Request handlers for the user page, login and friend lists."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Mapping
from typing import Any, Protocol

from flask import Response, jsonify, redirect, request

from friendgraph.repository import (
    RecordNotFound,
    get_friend_list,
    get_friend_of_friend_list,
    get_friend_of_friend_list_paging,
    get_user_by_id,
)
from friendgraph.validate import (
    ValidationError,
    validate_paging_query,
    validate_user_id_query,
)

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = 1
MIN_PAGE = 1
DEFAULT_LIMIT = 1

RECOMMEND_TITLE = "おすすめの友達"


class Renderer(Protocol):
    def render(self, name: str, data: Mapping[str, Any]) -> str: ...


def _real_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()
    return request.remote_addr or ""


def _error(message: str, status: int) -> Response:
    response = jsonify({"error": message})
    response.status_code = status
    return response


class Handler:
    """Serves the pages; remembers which user is logged in."""

    def __init__(
        self,
        conn: sqlite3.Connection,
        renderer: Renderer,
        current_user_id: int = DEFAULT_USER_ID,
    ) -> None:
        self.conn = conn
        self.renderer = renderer
        self.current_user_id = current_user_id

    def _render(self, name: str, data: Mapping[str, Any]) -> Response:
        return Response(self.renderer.render(name, data), status=200, mimetype="text/html")

    def index(self) -> Response:
        """Show the current user with their friends and recommendations."""
        logger.info(_real_ip())
        try:
            user = get_user_by_id(self.conn, self.current_user_id)
        except (RecordNotFound, sqlite3.Error):
            return _error("Failed to get user", 500)
        try:
            followers = get_friend_list(self.conn, self.current_user_id)
        except sqlite3.Error:
            return _error("Failed to get followers", 500)
        try:
            recommendations = get_friend_of_friend_list(self.conn, self.current_user_id)
        except sqlite3.Error:
            return _error("Failed to get recommendations", 500)
        return self._render(
            "index.html",
            {
                "Title": "ユーザーページ",
                "User": user,
                "Followers": followers,
                "Recommendations": recommendations,
            },
        )

    def get_login(self) -> Response:
        """Show the login form."""
        return self._render("login.html", {"Title": "ログイン"})

    def post_login(self) -> Response:
        """Switch the current user to the posted ``id`` and go back to the top page."""
        try:
            query = validate_user_id_query(request.form)
        except ValidationError:
            return _error("Invalid ID", 400)
        self.current_user_id = query.id
        return redirect("/", code=303)

    def get_friend_list(self) -> Response:
        """Show the friends of the user named by ``id``."""
        logger.info(_real_ip())
        try:
            query = validate_user_id_query(request.args)
        except ValidationError:
            return _error("Invalid Parameter", 400)
        try:
            friends = get_friend_list(self.conn, query.id)
        except sqlite3.Error:
            return _error("Failed", 500)
        return self._render("friend_list.html", {"Title": "フレンドリスト", "Friends": friends})

    def get_friend_of_friend_list(self) -> Response:
        """Show every friend-of-friend recommendation for the user named by ``id``."""
        logger.info(_real_ip())
        try:
            query = validate_user_id_query(request.args)
        except ValidationError:
            return _error("Invalid Parameter", 400)
        try:
            friends = get_friend_of_friend_list(self.conn, query.id)
        except sqlite3.Error:
            return _error("Failed", 500)
        return self._render(
            "recommend_friend.html",
            {
                "Title": RECOMMEND_TITLE,
                "ID": request.args["id"],
                "Friends": friends,
                "HasPrev": False,
                "HasNext": True,
                "PrevPage": MIN_PAGE,
                "NextPage": MIN_PAGE + 1,
                "Limit": DEFAULT_LIMIT,
            },
        )

    def get_friend_of_friend_list_paging(self) -> Response:
        """Show one page of recommendations, chosen by ``id``, ``page`` and ``limit``."""
        logger.info(_real_ip())
        try:
            query = validate_paging_query(request.args)
        except ValidationError:
            return _error("Invalid Parameter", 400)
        try:
            friends = get_friend_of_friend_list_paging(
                self.conn, query.id, query.page, query.limit
            )
        except sqlite3.Error:
            return _error("Failed", 500)
        return self._render(
            "recommend_friend.html",
            {
                "Title": RECOMMEND_TITLE,
                "ID": request.args["id"],
                "Friends": friends,
                "HasPrev": query.page > MIN_PAGE,
                "HasNext": len(friends) == query.limit,
                "PrevPage": query.page - 1,
                "NextPage": query.page + 1,
                "Limit": request.args["limit"],
            },
        )