# friendgraph

A small web application for a social network, backed by SQLite. It shows a
user's page, their friends, and recommended "friends of friends", leaving out
the user themselves, anyone they have already befriended, and anyone on
either side of a block.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
friendgraph
```

The command expects, in the working directory:

- a `.env` file; it stops with an error if the file is missing. The file must
  set `DB_DATABASE` to the path of the SQLite database file.
- a `views/` directory holding the page templates (see below).

On start it opens the database, creates any missing tables, **deletes every
row** in `users`, `friend_links` and `block_lists`, restarts their keys and
loads the sample users, block lists and friend links from
`friendgraph.seed`. It then serves on `0.0.0.0`, port 1323.

## Routes

| Method | Path                                 | Parameters             |
|--------|--------------------------------------|------------------------|
| GET    | `/`                                  | –                      |
| GET    | `/login`                             | –                      |
| POST   | `/login`                             | `id` (form)            |
| GET    | `/get_friend_list`                   | `id`                   |
| GET    | `/get_friend_of_friend_list`         | `id`                   |
| GET    | `/get_friend_of_friend_list_paging`  | `id`, `page`, `limit`  |

Every parameter must be a whole number of at least 1 that fits in a signed
64-bit integer. A missing, empty, non-numeric, fractional, too small or
out-of-range value gets a `400` response with a JSON body: `{"error": "Invalid
ID"}` for `POST /login`, `{"error": "Invalid Parameter"}` elsewhere. A database
error gets a `500` response with a JSON error body.

Posting a valid `id` to `/login` makes it the current user (1 at start) and
redirects to `/` with `303 See Other`. The top page looks that user up by row
key.

The paged recommendation list returns `limit` entries from page `page`,
counting from 1.

## Templates

`friendgraph.render.TemplateRenderer` loads every `*.html` file in a
directory as a Jinja2 template with HTML autoescaping, compiling them all at
once; it raises `FileNotFoundError` if the directory holds none. The pages
use these templates and context values:

| Template                | Context                                                                 |
|-------------------------|-------------------------------------------------------------------------|
| `index.html`            | `Title`, `User`, `Followers`, `Recommendations`                         |
| `login.html`            | `Title`                                                                 |
| `friend_list.html`      | `Title`, `Friends`                                                      |
| `recommend_friend.html` | `Title`, `ID`, `Friends`, `HasPrev`, `HasNext`, `PrevPage`, `NextPage`, `Limit` |

`User` is a `friendgraph.models.User`; friend lists are lists of
`friendgraph.models.Friend` with `id` and `name`. On the paged list,
`HasPrev` is true past page 1 and `HasNext` is true when the page came back
full.

## Using it as a library

```python
from friendgraph.db import connect, init_database
from friendgraph.repository import (
    get_friend_list,
    get_friend_of_friend_list,
    get_friend_of_friend_list_paging,
)

conn = connect(":memory:")
init_database(conn)

print([f.id for f in get_friend_list(conn, 1)])
print([f.id for f in get_friend_of_friend_list(conn, 1)])
print([f.id for f in get_friend_of_friend_list_paging(conn, 1, page=2, limit=1)])
```

- `friendgraph.db`: `connect`, `create_tables`, `init_database`,
  `database_path_from_env`.
- `friendgraph.repository`: `get_user_by_id` (raises `RecordNotFound`),
  `get_friend_list`, `get_friend_of_friend_list`,
  `get_friend_of_friend_list_paging`.
- `friendgraph.validate`: `parse_min_id`, `validate_user_id_query`,
  `validate_paging_query`, raising `ValidationError`.
- `friendgraph.app.create_app(conn, renderer)` builds the Flask application
  around an open connection and a renderer, for embedding in another server
  or for tests; `register_routes(app, handler)` attaches a
  `friendgraph.handlers.Handler` to an existing Flask app.

## What it does not do

- It ships no page templates; supply your own `views/*.html` files.
- It has no real authentication: logging in only sets which user id the top
  page shows, shared by every client of the server.
- Starting the server always resets the database to the sample data.