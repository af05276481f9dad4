# =============================================================================
# File:        system/db/manager/helpers.py
# Purpose:     Zajednički helper-i za DBManager podmodule i QueryBuilder
# =============================================================================
from __future__ import annotations

from functools import wraps

from system.managers.log_manager import LogManager


def _log(level: str, msg: str, source: str = "DBManager"):
    LogManager.create(level, f"[{source}] {msg}")


def _requires_init(fn):
    """Dekorator koji obezbeđuje da je DBManager inicijalizovan pre poziva metode."""
    @wraps(fn)
    def wrapper(cls, *a, **kw):
        if not getattr(cls, "_initialized", False):
            # lazy init
            cls.initialize()
        return fn(cls, *a, **kw)
    return classmethod(wrapper)
