# =============================================================================
# File:        system/db/sql_renderer.py
# Purpose:     Čist prevod ClauseConfig -> SQL tekst (fiksni redosled klauza)
#              + COUNT/EXISTS varijante + rebind placeholdera po dijalektu
# =============================================================================
from __future__ import annotations

import re
from dataclasses import replace
from typing import Any, List, Sequence, Tuple

from system.db.query import ClauseConfig, InvalidArgumentError

# qmark: ?   numeric: $1, $2...   format: %s
PLACEHOLDER_STYLES = ("qmark", "numeric", "format")

# string literal ('...' sa '' escape-om) | $n | ?
_PLACEHOLDER = re.compile(r"'(?:[^']|'')*'|\$(\d+)|\?")


def render_select(cfg: ClauseConfig) -> str:
    """
    SELECT -> FROM -> JOIN* -> WHERE -> GROUP BY -> HAVING -> ORDER BY
    -> LIMIT -> OFFSET -> FOR UPDATE. Prazne/nulte klauze se izostavljaju.
    """
    sel = ", ".join(cfg.select_fields) if cfg.select_fields else "*"
    sql = [f"SELECT {sel} FROM {cfg.table}"]

    for join in cfg.join_clauses:
        sql.append(join)

    if cfg.where_clause:
        sql.append("WHERE " + cfg.where_clause)
    if cfg.group_by:
        sql.append("GROUP BY " + cfg.group_by)
    if cfg.having:
        sql.append("HAVING " + cfg.having)
    if cfg.order_by:
        sql.append("ORDER BY " + cfg.order_by)
    if cfg.limit > 0:
        sql.append(f"LIMIT {int(cfg.limit)}")
    if cfg.offset > 0:
        sql.append(f"OFFSET {int(cfg.offset)}")
    if cfg.for_update:
        sql.append("FOR UPDATE")

    return " ".join(sql)


def render_count(cfg: ClauseConfig) -> str:
    """COUNT(*) samo nad tabelom + WHERE; select/order/limit/offset/join/group/having se ignorišu."""
    sql = f"SELECT COUNT(*) FROM {cfg.table}"
    if cfg.where_clause:
        sql += " WHERE " + cfg.where_clause
    return sql


def render_exists(cfg: ClauseConfig) -> str:
    return render_select(replace(cfg, select_fields=("1",), limit=1))


def rebind(sql: str, args: Sequence[Any], style: str) -> Tuple[str, List[Any]]:
    """
    Normalizuje mešavinu `$n` i `?` markera u jedan dijalekt i poravnava
    argumente po redosledu markera u tekstu.

    `$n` vezuje args[n-1]; `?` vezuje prvi argument posle najvećeg do tada
    viđenog `$n` (odnosno sledeći po redu). Markeri unutar '...' literala
    ostaju netaknuti.
    """
    if style not in PLACEHOLDER_STYLES:
        raise InvalidArgumentError(f"Nepoznat placeholder stil: {style}")

    args = list(args)
    out_sql: List[str] = []
    out_args: List[Any] = []
    pos = 0
    next_implicit = 0

    for m in _PLACEHOLDER.finditer(sql):
        token = m.group(0)
        if token.startswith("'"):
            continue

        if m.group(1) is not None:
            idx = int(m.group(1)) - 1
            next_implicit = max(next_implicit, idx + 1)
        else:
            idx = next_implicit
            next_implicit += 1

        if idx < 0 or idx >= len(args):
            raise InvalidArgumentError(
                f"Placeholder '{token}' nema odgovarajući argument (ukupno {len(args)})"
            )

        out_sql.append(sql[pos:m.start()])
        if style == "qmark":
            out_sql.append("?")
            out_args.append(args[idx])
        elif style == "format":
            out_sql.append("%s")
            out_args.append(args[idx])
        else:
            out_sql.append(f"${idx + 1}")
        pos = m.end()

    out_sql.append(sql[pos:])
    if style == "numeric":
        out_args = args
    return "".join(out_sql), out_args
