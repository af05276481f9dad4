# =============================================================================
# File:        system/db/query_builder.py
# Purpose:     Fluent QueryBuilder nad nepromenljivim ClauseConfig-om:
#              svaki mutator vraća NOVI builder, polazni ostaje netaknut
#              + izvršavanje (get/get_all/count/exists) + keyset paginacija
# =============================================================================

from __future__ import annotations
from dataclasses import replace
from typing import Any, List, Optional, Tuple

from system.db import cursor as cursors
from system.db import pagination
from system.db.base_gateway import BaseGateway
from system.db.manager.helpers import _log
from system.db.query import (
    ClauseConfig, CompositeCursor, Cursor, DBError, ExecutionError,
    InvalidArgumentError, NoRowsError, PageResult, RecordNotFound,
)
from system.db.row_mapper import RowMapper
from system.db.sql_renderer import rebind, render_count, render_exists, render_select
from system.managers.error_manager import ErrorManager


class QueryBuilder:
    def __init__(
        self,
        table: str,
        gateway: Optional[BaseGateway] = None,
        row_mapper: Optional[RowMapper] = None,
        *,
        config: Optional[ClauseConfig] = None,
    ):
        self._cfg = config if config is not None else ClauseConfig(table=table)
        self._gateway = gateway
        self._mapper = row_mapper or RowMapper()

    def _derive(self, cfg: ClauseConfig) -> "QueryBuilder":
        return QueryBuilder(cfg.table, self._gateway, self._mapper, config=cfg)

    # ------------------------------------------------------------------ #
    # Pogled u stanje
    # ------------------------------------------------------------------ #
    @property
    def config(self) -> ClauseConfig:
        return self._cfg

    @property
    def args(self) -> Tuple[Any, ...]:
        return self._cfg.args

    @property
    def table(self) -> str:
        return self._cfg.table

    @property
    def gateway(self) -> Optional[BaseGateway]:
        return self._gateway

    @property
    def row_mapper(self) -> RowMapper:
        return self._mapper

    def to_sql(self, style: Optional[str] = None) -> Tuple[str, List[Any]]:
        """SQL + argumenti. Bez stila: tekst tačno kako je sastavljen; sa stilom: posle rebind-a."""
        sql = render_select(self._cfg)
        if style is None:
            return sql, list(self._cfg.args)
        return rebind(sql, self._cfg.args, style)

    # ------------------------------------------------------------------ #
    # Mutatori (uvek nova instanca)
    # ------------------------------------------------------------------ #
    def select(self, *fields: str) -> "QueryBuilder":
        return self._derive(replace(self._cfg, select_fields=tuple(fields)))

    def where(self, conditions: str, *args: Any) -> "QueryBuilder":
        """Zamenjuje prethodni WHERE i argumente; AND spajanje radi samo kursor."""
        return self._derive(replace(self._cfg, where_clause=conditions or "", args=tuple(args)))

    def order_by(self, fields: str) -> "QueryBuilder":
        return self._derive(replace(self._cfg, order_by=fields or ""))

    def limit(self, n: int) -> "QueryBuilder":
        """Goli limit poništava veličinu strane koju je postavio kursor (nema više +1 reda)."""
        return self._derive(replace(self._cfg, limit=_non_negative("limit", n), page_limit=0))

    def offset(self, n: int) -> "QueryBuilder":
        return self._derive(replace(self._cfg, offset=_non_negative("offset", n)))

    def join(self, join_clause: str) -> "QueryBuilder":
        return self._derive(replace(self._cfg, join_clauses=self._cfg.join_clauses + (join_clause,)))

    def group_by(self, fields: str) -> "QueryBuilder":
        return self._derive(replace(self._cfg, group_by=fields or ""))

    def having(self, conditions: str) -> "QueryBuilder":
        return self._derive(replace(self._cfg, having=conditions or ""))

    def for_update(self) -> "QueryBuilder":
        return self._derive(replace(self._cfg, for_update=True))

    # ------------------------------------------------------------------ #
    # Kursori
    # ------------------------------------------------------------------ #
    def with_cursor(self, key_field: str, cursor: Optional[Cursor]) -> "QueryBuilder":
        return self._derive(cursors.apply_cursor(self._cfg, key_field, cursor))

    def with_composite_cursor(self, cursor: Optional[CompositeCursor]) -> "QueryBuilder":
        cfg = cursors.apply_composite_cursor(self._cfg, cursor)
        if cfg is self._cfg:
            return self
        return self._derive(cfg)

    # ------------------------------------------------------------------ #
    # Izvršavanje
    # ------------------------------------------------------------------ #
    def _require_gateway(self) -> BaseGateway:
        if self._gateway is None:
            raise DBError(f"QueryBuilder('{self.table}') nema gateway, koristi DBManager.table()")
        return self._gateway

    def _fail(self, operation: str, error: Exception) -> ExecutionError:
        err = ExecutionError(operation, error)
        err.__cause__ = error
        ErrorManager.create(err)
        return err

    def _call(self, method: str, sql: str, operation: str, passthrough=()):
        gw = self._require_gateway()
        sql, args = rebind(sql, self._cfg.args, gw.placeholder_style)
        _log("debug", f"{operation} -> {sql} | args={len(args)}", "QueryBuilder")
        try:
            return getattr(gw, method)(sql, args)
        except passthrough:
            raise
        except Exception as e:
            raise self._fail(operation, e) from e

    def get(self) -> Any:
        """Prvi red rezultata; RecordNotFound ako ga nema."""
        cfg = self._cfg if self._cfg.limit else replace(self._cfg, limit=1)
        rows = self._call("execute_query", render_select(cfg), "execute get query")
        if not rows:
            raise RecordNotFound("execute get query")
        return self._mapper.map_row(rows[0])

    def get_all(self, dest: Optional[list] = None) -> list:
        """Svi redovi. Ako je prosleđena lista, puni se u mestu i vraća se ona."""
        if dest is not None and not isinstance(dest, list):
            raise InvalidArgumentError("destination must be a list")
        rows = self._call("execute_query", render_select(self._cfg), "execute get all query")
        items = self._mapper.map_rows(rows)
        if dest is None:
            return items
        dest[:] = items
        return dest

    def count(self) -> int:
        value = self._call("execute_scalar", render_count(self._cfg), "execute count query")
        return int(value or 0)

    def exists(self) -> bool:
        try:
            self._call(
                "execute_scalar", render_exists(self._cfg), "exists check failed",
                passthrough=NoRowsError,
            )
        except NoRowsError:
            return False
        return True

    # ------------------------------------------------------------------ #
    # Paginacija
    # ------------------------------------------------------------------ #
    def get_page(self, dest: list, with_count: bool = False) -> PageResult:
        return pagination.assemble_page(self, dest, with_count)

    def page_by_key_since(self, dest: list, key_field: str, key_value: Any, limit: int,
                          with_count: bool = False) -> PageResult:
        cursor = Cursor(key_field=key_field, key_value=key_value, forward=True, limit=limit)
        return self.with_cursor(key_field, cursor).get_page(dest, with_count)

    def page_by_key_before(self, dest: list, key_field: str, key_value: Any, limit: int,
                           with_count: bool = False) -> PageResult:
        cursor = Cursor(key_field=key_field, key_value=key_value, forward=False, limit=limit)
        return self.with_cursor(key_field, cursor).get_page(dest, with_count)

    def __repr__(self) -> str:
        sql, args = self.to_sql()
        return f"<QueryBuilder {sql!r} args={args!r}>"


def _non_negative(name: str, n: int) -> int:
    n = int(n)
    if n < 0:
        raise InvalidArgumentError(f"{name} ne sme biti negativan: {n}")
    return n
