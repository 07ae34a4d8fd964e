"""The web application: routes and the command that serves them."""

from __future__ import annotations

import argparse
import logging
import os
import sqlite3
from collections.abc import Sequence

from dotenv import load_dotenv
from flask import Flask

from friendgraph.db import connect, database_path_from_env, init_database
from friendgraph.handlers import Handler, Renderer
from friendgraph.render import TemplateRenderer

ENV_FILE = ".env"
TEMPLATE_DIRECTORY = "views"
HOST = "0.0.0.0"
PORT = 1323


def register_routes(app: Flask, handler: Handler) -> None:
    """Attach the handler's pages to their paths."""
    app.add_url_rule("/", "index", handler.index, methods=["GET"])
    app.add_url_rule("/login", "get_login", handler.get_login, methods=["GET"])
    app.add_url_rule("/login", "post_login", handler.post_login, methods=["POST"])
    app.add_url_rule(
        "/get_friend_list", "get_friend_list", handler.get_friend_list, methods=["GET"]
    )
    app.add_url_rule(
        "/get_friend_of_friend_list",
        "get_friend_of_friend_list",
        handler.get_friend_of_friend_list,
        methods=["GET"],
    )
    app.add_url_rule(
        "/get_friend_of_friend_list_paging",
        "get_friend_of_friend_list_paging",
        handler.get_friend_of_friend_list_paging,
        methods=["GET"],
    )


def create_app(conn: sqlite3.Connection, renderer: Renderer) -> Flask:
    """Build the application over an open database and a template renderer."""
    app = Flask(__name__)
    register_routes(app, Handler(conn, renderer))
    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Load settings from ``.env``, reset the database and serve on port 1323."""
    parser = argparse.ArgumentParser(
        prog="friendgraph", description="Serve the friend graph web application."
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    if not os.path.isfile(ENV_FILE):
        raise SystemExit(f"open {ENV_FILE}: no such file or directory")
    load_dotenv(ENV_FILE)

    try:
        conn = connect(database_path_from_env())
    except (ValueError, sqlite3.Error) as err:
        raise SystemExit(str(err)) from err
    init_database(conn)

    app = create_app(conn, TemplateRenderer(TEMPLATE_DIRECTORY))
    app.run(host=HOST, port=PORT)