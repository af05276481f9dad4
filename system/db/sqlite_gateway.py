# =============================================================================
# File:        system/db/sqlite_gateway.py
# Purpose:     SQLite gateway:
#              - PRAGMA tuning (WAL, synchronous, busy_timeout) preko .env
#              - execute_query / execute_scalar / execute nad jednom konekcijom
#              - :memory: baza za testove
# =============================================================================
from __future__ import annotations

import os
import sqlite3
import threading
from typing import Any, Dict, List, Sequence

from system.config.env import EnvLoader
from system.db.base_gateway import BaseGateway
from system.db.query import NoRowsError

MEMORY = ":memory:"


class SQLiteGateway(BaseGateway):
    """
    __init__(**params): očekuje 'path' u params (putanja do .db ili ':memory:').
    Jedna konekcija po gateway-u, pristup serijalizovan kroz _LOCK.
    """
    placeholder_style = "qmark"
    _LOCK = threading.RLock()

    def __init__(self, **params):
        db_path = params.get("path")
        if not db_path:
            db_path = os.path.join("system", "data", "db", "app.db")

        if db_path == MEMORY:
            self.db_file = MEMORY
        else:
            self.db_file = os.path.abspath(db_path)

            if os.path.isdir(self.db_file):
                raise RuntimeError(
                    f"SQLite path '{self.db_file}' je direktorijum: očekivan je put do .db fajla."
                )

            dirpath = os.path.dirname(self.db_file) or "."
            os.makedirs(dirpath, exist_ok=True)

        # isolation_level=None -> autocommit, transakcije nisu posao ovog sloja
        self.conn = sqlite3.connect(self.db_file, isolation_level=None, timeout=5.0, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row

        self._apply_pragmas()

    def _apply_pragmas(self) -> None:
        """
        .env varijable (sve opcione):
          - SQLITE_JOURNAL_MODE=wal|delete|truncate|persist|off|memory (default wal)
          - SQLITE_SYNCHRONOUS=OFF|NORMAL|FULL|EXTRA (default NORMAL)
          - SQLITE_BUSY_TIMEOUT_MS=4000
        """
        cur = self.conn.cursor()
        try:
            cur.execute("PRAGMA foreign_keys = ON;")

            if self.db_file != MEMORY:
                jm = (EnvLoader.get("SQLITE_JOURNAL_MODE", "wal") or "wal").strip().lower()
                if jm in ("wal", "delete", "truncate", "persist", "off", "memory"):
                    cur.execute(f"PRAGMA journal_mode = {jm};")

            sync = (EnvLoader.get("SQLITE_SYNCHRONOUS", "NORMAL") or "NORMAL").upper()
            if sync not in ("OFF", "NORMAL", "FULL", "EXTRA"):
                sync = "NORMAL"
            cur.execute(f"PRAGMA synchronous = {sync};")

            bt = EnvLoader.get_int("SQLITE_BUSY_TIMEOUT_MS", 4000)
            cur.execute(f"PRAGMA busy_timeout = {bt};")
        finally:
            cur.close()

    # --- lifecycle ---
    def close(self) -> None:
        self.conn.close()

    # --- upiti ---
    def execute_query(self, sql: str, args: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        with self._LOCK:
            cur = self.conn.cursor()
            try:
                cur.execute(sql, list(args))
                rows = cur.fetchall()
            finally:
                cur.close()
        return [{k: row[k] for k in row.keys()} for row in rows]

    def execute_scalar(self, sql: str, args: Sequence[Any] = ()) -> Any:
        with self._LOCK:
            cur = self.conn.cursor()
            try:
                cur.execute(sql, list(args))
                row = cur.fetchone()
            finally:
                cur.close()
        if row is None:
            raise NoRowsError("no rows in result set")
        return row[0]

    def execute(self, sql: str, args: Sequence[Any] = ()) -> int:
        with self._LOCK:
            cur = self.conn.cursor()
            try:
                cur.execute(sql, list(args))
                return cur.rowcount or 0
            finally:
                cur.close()
