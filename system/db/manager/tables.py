# =============================================================================
# File:        system/db/manager/tables.py
# Purpose:     Ulazne tačke ka QueryBuilder-u + sirovi upiti + health check
# =============================================================================
from __future__ import annotations

from typing import Any, Dict, List, Optional

from system.managers.error_manager import ErrorManager
from system.db.base_gateway import BaseGateway
from system.db.query import ExecutionError
from system.db.query_builder import QueryBuilder
from system.db.row_mapper import RowMapper
from .helpers import _log, _requires_init


class DBTablesMixin:
    @_requires_init
    def gateway(cls) -> BaseGateway:
        return cls._gateway

    @_requires_init
    def table(cls, name: str, row_mapper: Optional[RowMapper] = None) -> QueryBuilder:
        """Novi builder nad tabelom, vezan za aktivni gateway."""
        return QueryBuilder(name, cls._gateway, row_mapper)

    @_requires_init
    def query(cls, sql: str, *args: Any) -> List[Dict[str, Any]]:
        try:
            return cls._gateway.execute_query(sql, args)
        except Exception as e:
            err = ExecutionError("execute query", e)
            ErrorManager.create(err)
            raise err from e

    @_requires_init
    def execute(cls, sql: str, *args: Any) -> int:
        try:
            return cls._gateway.execute(sql, args)
        except Exception as e:
            err = ExecutionError("execute statement", e)
            ErrorManager.create(err)
            raise err from e

    @_requires_init
    def ping(cls) -> bool:
        try:
            cls._gateway.execute_scalar("SELECT 1", ())
        except Exception as e:
            err = ExecutionError("ping database", e)
            ErrorManager.create(err)
            raise err from e
        _log("info", f"ping -> ok ({cls.get_driver_name()})")
        return True
