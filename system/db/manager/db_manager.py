# =============================================================================
# File:        system/db/manager/db_manager.py
# Purpose:     Tanka "fasada" klasa koja spaja mixin-ove u DBManager
# =============================================================================
from __future__ import annotations

from .config import DBConfigMixin
from .tables import DBTablesMixin


class DBManager(DBConfigMixin, DBTablesMixin):
    """
    Centralna DB klasa.
    - initialize(), shutdown(), use_gateway(), active_config(), get_driver_key(), get_driver_name()
    - table(name) -> QueryBuilder, gateway()
    - query(), execute(), ping()
    """
    pass
