import sqlite3
from unittest.mock import call, patch

import pytest
from flask import Flask

from friendgraph.app import create_app, main, register_routes
from friendgraph.db import connect, init_database
from friendgraph.handlers import Handler


class MockRenderer:
    def render(self, name, data):
        return name


@pytest.fixture
def conn():
    connection = connect(":memory:")
    init_database(connection)
    yield connection
    connection.close()


@pytest.fixture
def client(conn):
    return create_app(conn, MockRenderer()).test_client()


@pytest.mark.parametrize(
    ("path", "expected_status"),
    [
        ("/get_friend_list?id=1", 200),
        ("/get_friend_of_friend_list?id=1", 200),
        ("/get_friend_of_friend_list_paging?id=1&page=1&limit=1", 200),
        ("/get_friend_list", 400),
        ("/get_friend_of_friend_list", 400),
        ("/get_friend_of_friend_list_paging", 400),
        ("/get_friend_list?id=a", 400),
        ("/get_friend_of_friend_list?id=a", 400),
        ("/get_friend_of_friend_list_paging?id=a&page=1&limit=1", 400),
        ("/get_friend_of_friend_list_paging?id=1&page=a&limit=1", 400),
        ("/get_friend_of_friend_list_paging?id=1&page=1&limit=a", 400),
        ("/get_friend_list?id=-1", 400),
        ("/get_friend_list?id=0", 400),
        ("/get_friend_of_friend_list?id=-1", 400),
        ("/get_friend_of_friend_list?id=0", 400),
        ("/get_friend_of_friend_list_paging?id=0&page=1&limit=1", 400),
        ("/get_friend_of_friend_list_paging?id=1&page=0&limit=1", 400),
        ("/get_friend_of_friend_list_paging?id=1&page=1&limit=0", 400),
        ("/get_friend_of_friend_list_paging?id=-1&page=1&limit=1", 400),
        ("/get_friend_of_friend_list_paging?id=1&page=-1&limit=1", 400),
        ("/get_friend_of_friend_list_paging?id=1&page=1&limit=-1", 400),
        ("/get_friend_list?id=", 400),
        ("/get_friend_of_friend_list?id=", 400),
        ("/get_friend_of_friend_list_paging?id=", 400),
        ("/get_friend_list?id=99999999999999999999", 400),
        ("/get_friend_of_friend_list?id=99999999999999999999", 400),
        ("/get_friend_of_friend_list_paging?id=99999999999999999999", 400),
        ("/get_friend_of_friend_list_paging?page=1&limit=1", 400),
        ("/get_friend_of_friend_list_paging?id=1&limit=1", 400),
        ("/get_friend_of_friend_list_paging?id=1&page=1", 400),
    ],
)
def test_friend_list_requests(client, path, expected_status):
    response = client.get(path)
    assert response.status_code == expected_status


def test_index_route(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "index.html"


def test_login_routes(client):
    assert client.get("/login").get_data(as_text=True) == "login.html"
    response = client.post("/login", data={"id": "2"})
    assert response.status_code == 303


def test_register_routes_maps_every_path(conn):
    app = Flask(__name__)
    register_routes(app, Handler(conn, MockRenderer()))
    routes = {
        (rule.rule, method)
        for rule in app.url_map.iter_rules()
        if rule.endpoint != "static"
        for method in rule.methods - {"HEAD", "OPTIONS"}
    }
    assert routes == {
        ("/", "GET"),
        ("/login", "GET"),
        ("/login", "POST"),
        ("/get_friend_list", "GET"),
        ("/get_friend_of_friend_list", "GET"),
        ("/get_friend_of_friend_list_paging", "GET"),
    }


def test_unregistered_method_is_rejected(client):
    response = client.post("/get_friend_list?id=1")
    assert response.status_code == 405


def test_main_without_env_file_exits(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit):
        main([])


def test_main_without_database_setting_exits(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DB_DATABASE", raising=False)
    (tmp_path / ".env").write_text("# settings\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main([])


def _count_rows(connection, table):
    return connection.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def test_main_seeds_database_and_serves(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    database = tmp_path / "app.db"
    monkeypatch.setenv("DB_DATABASE", str(database))
    (tmp_path / ".env").write_text("# settings\n", encoding="utf-8")
    views = tmp_path / "views"
    views.mkdir()
    (views / "index.html").write_text("{{ Title }}", encoding="utf-8")

    with patch("flask.Flask.run") as run:
        main([])

    assert run.call_args_list == [call(host="0.0.0.0", port=1323)]

    seeded = connect(str(database))
    try:
        counts = (
            _count_rows(seeded, "users"),
            _count_rows(seeded, "friend_links"),
            _count_rows(seeded, "block_lists"),
        )
    finally:
        seeded.close()
    assert counts == (8, 20, 7)

    with sqlite3.connect(database) as check:
        first_user = check.execute(
            "SELECT name FROM users WHERE user_id = 1"
        ).fetchone()[0]
    assert first_user == "タカシ"