# =============================================================================
# File:        system/db/row_mapper.py
# Purpose:     Mapiranje dict redova iz gateway-a u ciljni tip (Model,
#              dataclass, callable) + čitanje vrednosti polja po imenu
# =============================================================================
from __future__ import annotations

import dataclasses
import threading
from typing import Any, Dict, Iterable, List, Optional, Tuple


def _tail(name: str) -> str:
    # "u.id" -> "id"
    return name.rsplit(".", 1)[-1]


def key_value(item: Any, name: str) -> Any:
    """
    Vrednost polja `name` na mapiranom redu: dict po ključu, objekat sa
    value_for(name) preko njega, ostalo preko atributa. Kvalifikovano ime
    (alias.kolona) pada na samu kolonu.
    """
    if isinstance(item, dict):
        if name in item:
            return item[name]
        return item.get(_tail(name))

    if hasattr(item, "value_for"):
        value = item.value_for(name)
        if value is None and _tail(name) != name:
            value = item.value_for(_tail(name))
        return value

    if hasattr(item, name):
        return getattr(item, name)
    return getattr(item, _tail(name), None)


class RowMapper:
    """
    target=None -> redovi ostaju dict-ovi.
    target sa from_row (Model) -> target.from_row(row).
    dataclass -> samo deklarisana polja kao kwargs.
    ostali callable -> target(**row).
    """
    _FIELDS_CACHE: Dict[Any, Optional[Tuple[str, ...]]] = {}
    _LOCK = threading.RLock()

    def __init__(self, target: Any = None):
        self.target = target

    @classmethod
    def fields_for(cls, target: Any) -> Optional[Tuple[str, ...]]:
        with cls._LOCK:
            if target in cls._FIELDS_CACHE:
                return cls._FIELDS_CACHE[target]

            if hasattr(target, "field_names"):
                fields = tuple(target.field_names()) or None
            elif dataclasses.is_dataclass(target):
                fields = tuple(f.name for f in dataclasses.fields(target))
            else:
                fields = None

            cls._FIELDS_CACHE[target] = fields
            return fields

    @classmethod
    def clear_cache(cls) -> None:
        with cls._LOCK:
            cls._FIELDS_CACHE.clear()

    def map_row(self, row: Dict[str, Any]) -> Any:
        if self.target is None:
            return dict(row)
        if hasattr(self.target, "from_row"):
            return self.target.from_row(row)

        fields = self.fields_for(self.target)
        if fields is None:
            return self.target(**row)
        return self.target(**{k: row[k] for k in fields if k in row})

    def map_rows(self, rows: Iterable[Dict[str, Any]]) -> List[Any]:
        return [self.map_row(r) for r in rows]
