import os
import sys
from pathlib import Path
import pytest

# Omogući import projekta kad se testovi pokreću iz bilo kog radnog dir-a
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.models.user import User
from system.config.env import EnvLoader
from system.db.base_gateway import BaseGateway
from system.db.manager.db_manager import DBManager
from system.managers.error_manager import ErrorManager
from system.managers.log_manager import LogManager


@pytest.fixture(scope="session", autouse=True)
def ensure_env_and_init(tmp_path_factory):
    """
    - SQLite u memoriji + log u privremenom folderu (ne diramo app.db / app.log).
    - Inicijalizuj DBManager iz env-a kao u produkciji.
    """
    logs = tmp_path_factory.mktemp("logs")
    os.environ["DB_DRIVER"] = "sqlite"
    os.environ["SQLITE_PATH"] = ":memory:"
    os.environ["LOG_FILE_PATH"] = str(logs / "test.log")
    os.environ["LOG_LEVEL"] = "debug"

    EnvLoader.load()
    ErrorManager.initialize(dev_mode=False)
    LogManager.initialize()
    DBManager.initialize(reload_env=True)
    yield
    # uredno zatvaranje
    DBManager.shutdown()


def _user_row(i: int) -> dict:
    return {
        "id": i,
        "name": f"User{i:02d}",
        "email": f"user{i}@example.com",
        "age": 20 + i,
        "dept": "eng" if i % 2 else "ops",
        "status": "inactive" if i % 3 == 0 else "active",
        "created_at": f"2025-08-{i:02d}T10:00:00+00:00",
    }


@pytest.fixture
def users_table():
    """
    Sveža tabela users sa 10 redova (id 1..10).
    dept: neparni -> eng, parni -> ops; status: 3, 6, 9 -> inactive.
    """
    DBManager.execute("DROP TABLE IF EXISTS users")
    DBManager.execute(User.SCHEMA)
    for i in range(1, 11):
        row = _user_row(i)
        cols = ", ".join(row)
        marks = ", ".join("?" for _ in row)
        DBManager.execute(f"INSERT INTO users ({cols}) VALUES ({marks})", *row.values())
    yield DBManager.table("users")
    DBManager.execute("DROP TABLE IF EXISTS users")


class FakeGateway(BaseGateway):
    """
    Test dvojnik: pamti pozive, vraća zadate redove/skalar, ili baca zadatu
    grešku po imenu metode (fail={"execute_scalar": RuntimeError("boom")}).
    """
    placeholder_style = "qmark"

    def __init__(self, rows=None, scalar=None, fail=None):
        self.rows = list(rows or [])
        self.scalar = scalar
        self.fail = dict(fail or {})
        self.calls = []

    def _record(self, method, sql, args):
        self.calls.append((method, sql, list(args)))
        if method in self.fail:
            raise self.fail[method]

    def execute_query(self, sql, args=()):
        self._record("execute_query", sql, args)
        return [dict(r) for r in self.rows]

    def execute_scalar(self, sql, args=()):
        self._record("execute_scalar", sql, args)
        return self.scalar

    def execute(self, sql, args=()):
        self._record("execute", sql, args)
        return 0


@pytest.fixture
def fake_gateway():
    def _maker(**kw):
        return FakeGateway(**kw)
    return _maker
