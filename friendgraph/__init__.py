"""Friend lists and friend-of-friend recommendations over SQLite, served with Flask."""

__version__ = "0.1.0"