# =============================================================================
# File:        system/db/manager/config.py
# Purpose:     Inicijalizacija gateway-a iz .env, aktivacija, pregled stanja
# =============================================================================
from __future__ import annotations

from typing import Any, Dict, Optional

from system.config.env import EnvLoader
from system.managers.error_manager import ErrorManager
from system.db.base_gateway import BaseGateway
from system.db.sqlite_gateway import SQLiteGateway

from .helpers import _log

GATEWAYS = {
    "sqlite": SQLiteGateway,
}


class DBConfigMixin:
    _gateway: Optional[BaseGateway] = None
    _initialized: bool = False
    _config: Dict[str, Any] = {"driver": None, "params": {}, "source": None}

    @classmethod
    def initialize(cls, reload_env: bool = False) -> None:
        if cls._initialized and not reload_env:
            return
        try:
            EnvLoader.load(force=reload_env)

            driver_key = (EnvLoader.get("DB_DRIVER", "sqlite") or "sqlite").strip().lower()
            db_path = (EnvLoader.get("DB_PATH", "system/data/db/") or "system/data/db/").strip()

            if driver_key == "sqlite":
                sqlite_path = EnvLoader.get("SQLITE_PATH", None) or f"{db_path.rstrip('/')}/app.db"
                params = {"path": sqlite_path}
            else:
                raise ValueError(f"Nepoznat DB_DRIVER u .env: {driver_key}")

            if cls._gateway is not None:
                cls._gateway.close()
            cls._activate(driver_key, params, source="env")
            cls._initialized = True
        except Exception as e:
            ErrorManager.create(e)
            raise

    @classmethod
    def use_gateway(cls, gateway: BaseGateway, *, driver: str = "custom") -> None:
        """Aktivira već napravljen gateway (npr. Postgres adapter ili test dvojnik)."""
        cls._gateway = gateway
        cls._config = {"driver": driver, "params": {}, "source": "override"}
        cls._initialized = True
        _log("info", f"activate -> driver={driver} source=override gateway={type(gateway).__name__}")

    @classmethod
    def shutdown(cls) -> None:
        try:
            if cls._gateway is not None:
                cls._gateway.close()
                _log("info", f"shutdown -> driver={cls._config.get('driver')}")
        finally:
            cls._gateway = None
            cls._initialized = False
            cls._config = {"driver": None, "params": {}, "source": None}

    @classmethod
    def _activate(cls, driver_key: str, params: Dict[str, Any], *, source: str) -> None:
        gateway_cls = GATEWAYS.get(driver_key)
        if gateway_cls is None:
            raise ValueError(f"Nepoznat driver_key: {driver_key}")

        cls._gateway = gateway_cls(**(params or {}))
        cls._config = {"driver": driver_key, "params": dict(params or {}), "source": source}
        _log("info", f"activate -> driver={driver_key} source={source} params={params}")

    # ---------- Pogled u stanje ----------
    @classmethod
    def active_config(cls) -> Dict[str, Any]:
        return dict(cls._config)

    @classmethod
    def get_driver_key(cls) -> Optional[str]:
        return cls._config.get("driver")

    @classmethod
    def get_driver_name(cls) -> Optional[str]:
        return cls._gateway.__class__.__name__ if cls._gateway else None
