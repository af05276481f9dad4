from system.db.model import Model


class User(Model):
    table = "users"
    __fields__ = ("id", "name", "email", "age", "dept", "status", "created_at")

    SCHEMA = """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL UNIQUE,
            age INTEGER,
            dept TEXT,
            status TEXT,
            created_at TEXT
        );
    """
