# =============================================================================
# File:        system/db/base_gateway.py
# Purpose:     Jedinstven interfejs za sve DB gateway-e (SQLite, Postgres...)
# =============================================================================
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence


class BaseGateway(ABC):
    """Svi gateway-i moraju implementirati isti API. Konekcije su njihova briga."""

    # qmark | numeric | format: u šta sql_renderer.rebind prevodi markere
    placeholder_style: str = "qmark"

    # --- Lifecycle / konekcija ---
    def close(self) -> None:
        """Opcionalno: uredno zatvaranje konekcije."""
        return None

    # --- Upiti ---
    @abstractmethod
    def execute_query(self, sql: str, args: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Izvrši SELECT i vrati redove kao listu dict-ova (kolona -> vrednost)."""

    @abstractmethod
    def execute_scalar(self, sql: str, args: Sequence[Any] = ()) -> Any:
        """Prva kolona prvog reda. Ako nema redova -> NoRowsError."""

    @abstractmethod
    def execute(self, sql: str, args: Sequence[Any] = ()) -> int:
        """Izvrši naredbu (DDL/DML). Vraća broj pogođenih redova."""
