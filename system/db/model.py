# =============================================================================
# File:        system/db/model.py
# Purpose:     Bazni Model: tabela + deklarisana polja + query() ulaz
#              (field_names / value_for za RowMapper i kursore)
# =============================================================================

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple

from system.db.manager.db_manager import DBManager
from system.db.query_builder import QueryBuilder
from system.db.row_mapper import RowMapper


class Model:
    """
    Bazna Model klasa:
    - table + pk_field kao do sada,
    - __fields__ = ("id", "name", ...): kolone koje model prima iz reda
      (prazno = sve kolone iz reda),
    - query() vraća builder koji mapira redove u instance modela.
    """

    table: Optional[str] = None
    pk_field: str = "id"
    __fields__: Tuple[str, ...] = ()

    def __init__(self, **values: Any):
        for name in self.field_names():
            setattr(self, name, None)
        for name, value in values.items():
            setattr(self, name, value)

    # --------------------------------------------------------------------- #
    # Opis šeme
    # --------------------------------------------------------------------- #

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(cls.__fields__)

    def value_for(self, name: str) -> Any:
        return getattr(self, name, None)

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Model":
        fields = cls.field_names()
        if not fields:
            return cls(**row)
        return cls(**{k: row[k] for k in fields if k in row})

    def to_dict(self) -> Dict[str, Any]:
        names = self.field_names() or tuple(k for k in vars(self) if not k.startswith("_"))
        return {k: self.value_for(k) for k in names}

    # --------------------------------------------------------------------- #
    # QueryBuilder
    # --------------------------------------------------------------------- #

    @classmethod
    def query(cls) -> QueryBuilder:
        return DBManager.table(cls.table, RowMapper(cls))

    @classmethod
    def find(cls, value):
        return cls.query().where(f"{cls.pk_field} = ?", value).get()

    def __eq__(self, other):
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.to_dict()!r}>"
