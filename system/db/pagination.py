# =============================================================================
# File:        system/db/pagination.py
# Purpose:     Sastavljanje strane: izvrši upit, prepoznaj višak reda
#              (over-fetch), skrati listu, izvedi sledeći/prethodni kursor,
#              opciono COUNT(*)
# =============================================================================
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from system.db.manager.helpers import _log
from system.db.query import (
    ClauseConfig, CompositeCursor, Cursor, ExecutionError, InvalidArgumentError, PageResult,
)
from system.db.row_mapper import key_value

if TYPE_CHECKING:
    from system.db.query_builder import QueryBuilder


def cursor_from_row(cfg: ClauseConfig, item: Any, forward: bool):
    """
    Kursor na poziciji reda `item`, po poljima na kojima je kursor primenjen.
    Bez kursorskih polja, ili ako red nema vrednost nekog ključa -> None.
    """
    if not cfg.cursor_fields:
        return None

    if cfg.cursor_order:
        values = {name: key_value(item, name) for name in cfg.cursor_fields}
        if any(v is None for v in values.values()):
            return None
        return CompositeCursor(
            key_values=values,
            order_fields=cfg.cursor_order,
            forward=forward,
            limit=cfg.page_limit,
        )

    key = cfg.cursor_fields[0]
    value = key_value(item, key)
    if value is None:
        return None
    return Cursor(key_field=key, key_value=value, forward=forward, limit=cfg.page_limit)


def assemble_page(builder: "QueryBuilder", dest: list, with_count: bool = False) -> PageResult:
    """
    dest mora biti lista; puni se i skraćuje u mestu i vraća kao PageResult.data.

    Višak reda se prepoznaje samo ako je limit postavljen kroz kursor
    (page_limit). Goli limit() nema +1 red, pa has_next ostaje False.
    """
    if not isinstance(dest, list):
        raise InvalidArgumentError("destination must be a list")

    cfg = builder.config
    try:
        builder.get_all(dest)
    except ExecutionError as e:
        raise builder._fail("execute page query", e) from e

    page_limit = cfg.page_limit
    result_count = len(dest)

    has_next = False
    next_cursor: Optional[Any] = None
    if page_limit > 0 and result_count > page_limit:
        del dest[page_limit:]
        has_next = True
        next_cursor = cursor_from_row(cfg, dest[-1], forward=True)

    has_prev = False
    prev_cursor: Optional[Any] = None
    if cfg.where_clause and dest:
        has_prev = True
        prev_cursor = cursor_from_row(cfg, dest[0], forward=False)

    total_count = None
    if with_count:
        try:
            total_count = builder.limit(0).offset(0).count()
        except ExecutionError as e:
            raise builder._fail("count total records", e) from e

    _log(
        "debug",
        f"page {cfg.table}: rows={len(dest)} fetched={result_count} has_next={has_next} has_prev={has_prev}",
        "QueryBuilder",
    )
    return PageResult(
        data=dest,
        total_count=total_count,
        next_cursor=next_cursor,
        prev_cursor=prev_cursor,
        has_next=has_next,
        has_prev=has_prev,
    )
