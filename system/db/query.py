# =============================================================================
# File:        system/db/query.py
# Purpose:     ClauseConfig (nepromenljiva konfiguracija upita) + kursori
#              + PageResult + exceptions DB sloja
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple


# ---------- Exceptions ----------
class DBError(Exception):
    """Bazna greška DB sloja."""
    pass


class InvalidArgumentError(DBError):
    """Pogrešan argument (npr. destinacija nije lista)."""
    pass


class NoRowsError(DBError):
    """Gateway: upit nije vratio nijedan red (execute_scalar)."""
    pass


class RecordNotFound(DBError):
    """Traženi zapis ne postoji (get)."""

    def __init__(self, operation: str):
        super().__init__(f"record not found: {operation}")
        self.operation = operation


class ExecutionError(DBError):
    """Greška izvršavanja u bazi, obeležena imenom operacije koja je pala."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        msg = operation if cause is None else f"{operation}: {cause}"
        super().__init__(msg)
        self.operation = operation
        self.cause = cause


# ---------- Kursori ----------
ASC = "ASC"
DESC = "DESC"


@dataclass(frozen=True)
class Cursor:
    """Pozicija u nizu sortiranom po jednoj koloni + veličina strane i smer."""
    key_field: str = ""
    key_value: Any = None
    forward: bool = True
    limit: int = 0


@dataclass(frozen=True)
class OrderField:
    name: str
    direction: str = ASC


@dataclass(frozen=True)
class CompositeCursor:
    """Pozicija u nizu sortiranom po više kolona (poređenje torki)."""
    key_values: Dict[str, Any] = field(default_factory=dict)
    order_fields: Tuple[OrderField, ...] = ()
    forward: bool = True
    limit: int = 0

    def __post_init__(self):
        # dozvoli listu / tuple parova na ulazu, interno uvek tuple OrderField-ova
        fields = tuple(
            f if isinstance(f, OrderField) else OrderField(*f)
            for f in (self.order_fields or ())
        )
        object.__setattr__(self, "order_fields", fields)
        object.__setattr__(self, "key_values", dict(self.key_values or {}))


# ---------- PageResult ----------
@dataclass(frozen=True)
class PageResult:
    data: Any
    total_count: Optional[int] = None
    next_cursor: Optional[Any] = None   # Cursor | CompositeCursor
    prev_cursor: Optional[Any] = None
    has_next: bool = False
    has_prev: bool = False


# ---------- ClauseConfig ----------
@dataclass(frozen=True)
class ClauseConfig:
    """
    Akumulirana namera upita. Sve sekvence su tuple -> dve kopije nikad ne dele
    promenljivo skladište (select_fields, join_clauses, args).

    page_limit / cursor_fields / cursor_order pune samo with_cursor i
    with_composite_cursor; pagination.assemble_page iz njih zna zadatu veličinu strane
    i po kojim poljima pravi sledeći/prethodni kursor.
    """
    table: str
    select_fields: Tuple[str, ...] = ()
    where_clause: str = ""
    order_by: str = ""
    limit: int = 0
    offset: int = 0
    join_clauses: Tuple[str, ...] = ()
    group_by: str = ""
    having: str = ""
    for_update: bool = False
    args: Tuple[Any, ...] = ()

    page_limit: int = 0
    cursor_fields: Tuple[str, ...] = ()
    cursor_order: Tuple[OrderField, ...] = ()

    def and_where(self, predicate: str, values) -> "ClauseConfig":
        """Spaja predikat sa postojećim WHERE kao (staro) AND (novo); argumenti idu na kraj."""
        values = tuple(values)
        if self.where_clause:
            return replace(
                self,
                where_clause=f"({self.where_clause}) AND ({predicate})",
                args=self.args + values,
            )
        return replace(self, where_clause=predicate, args=values)
