# ========================================================================
# File:       system/managers/error_manager.py
# Purpose:    Beleženje grešaka DB sloja (log + memorija); ne guta izuzetke
# ========================================================================

from system.config.env import EnvLoader
from system.handlers.error_handler import ErrorHandler
from system.managers.log_manager import LogManager


class ErrorManager:
    _errors = []
    _dev_mode = None

    @classmethod
    def initialize(cls, dev_mode: bool = None):
        cls._dev_mode = EnvLoader.get_bool("APP_DEBUG", False) if dev_mode is None else dev_mode

    @classmethod
    def create(cls, error: Exception):
        """Zabeleži grešku. Pozivalac je posle toga ponovo baca."""
        if cls._dev_mode is None:
            cls.initialize()

        cls._errors.append(error)
        formatted = ErrorHandler.format_error(error)
        causes = ErrorHandler.cause_chain(error)[1:]
        if causes:
            formatted += " <- " + " <- ".join(causes)

        if cls._dev_mode:
            print(f"[ERROR]: {formatted}\n{ErrorHandler.get_traceback(error)}")

        LogManager.create("error", formatted)

    @classmethod
    def read(cls, last_only: bool = True):
        return cls._errors[-1] if last_only and cls._errors else cls._errors

    @classmethod
    def delete(cls, index: int = None):
        if index is None:
            cls._errors.clear()
        elif 0 <= index < len(cls._errors):
            cls._errors.pop(index)
