# =============================================================================
# File:        system/db/cursor.py
# Purpose:     Keyset (cursor) paginacija nad ClauseConfig-om:
#              - jedan ključ: smer poređenja iz (forward x ASC/DESC)
#              - složeni ključ: poređenje torki (a, b) > (?, ?)
# =============================================================================
from __future__ import annotations

from dataclasses import replace
from typing import Optional

from system.db.query import ASC, DESC, ClauseConfig, CompositeCursor, Cursor

# (forward, smer sortiranja) -> operator
_OPERATORS = {
    (True, ASC): ">",
    (True, DESC): "<",
    (False, ASC): "<",
    (False, DESC): ">",
}


def order_direction(order_by: str) -> str:
    """Smer = poslednja reč ORDER BY fragmenta; sve osim DESC se tretira kao ASC."""
    parts = (order_by or "").split()
    if parts and parts[-1].upper() == DESC:
        return DESC
    return ASC


def compare_operator(forward: bool, direction: str) -> str:
    return _OPERATORS[(bool(forward), DESC if direction.upper() == DESC else ASC)]


def apply_cursor(cfg: ClauseConfig, key_field: str, cursor: Optional[Cursor]) -> ClauseConfig:
    if cursor is None or not key_field:
        return replace(cfg)

    if cursor.limit > 0:
        # +1 red: ako stigne, postoji sledeća strana
        cfg = replace(cfg, limit=cursor.limit + 1, page_limit=cursor.limit)
    cfg = replace(cfg, cursor_fields=(key_field,), cursor_order=())

    if cursor.key_value is None:
        return cfg

    if not cfg.order_by:
        cfg = replace(cfg, order_by=f"{key_field} ASC")

    op = compare_operator(cursor.forward, order_direction(cfg.order_by))
    return cfg.and_where(f"{key_field} {op} ?", (cursor.key_value,))


def apply_composite_cursor(cfg: ClauseConfig, cursor: Optional[CompositeCursor]) -> ClauseConfig:
    if cursor is None or not cursor.key_values or not cursor.order_fields:
        return cfg

    if cursor.limit > 0:
        cfg = replace(cfg, limit=cursor.limit + 1, page_limit=cursor.limit)

    names = [f.name for f in cursor.order_fields]
    cfg = replace(
        cfg,
        order_by=", ".join(f"{f.name} {f.direction}" for f in cursor.order_fields),
        cursor_fields=tuple(names),
        cursor_order=cursor.order_fields,
    )

    # isti operator za celu torku: korektno samo kad sva polja dele smer
    op = ">" if cursor.forward else "<"
    values = [cursor.key_values.get(n) for n in names]
    predicate = "({}) {} ({})".format(", ".join(names), op, ", ".join("?" for _ in names))
    return cfg.and_where(predicate, values)
