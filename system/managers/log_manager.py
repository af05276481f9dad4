# ============================================================================
# File:       system/managers/log_manager.py
# Purpose:    LogManager klasa: klasni API sloj nad LogHandler-om
# ============================================================================

from system.handlers.log_handler import LogHandler


class LogManager:
    _log_entries = []
    _MAX_ENTRIES = 1000

    @classmethod
    def initialize(cls):
        cls._log_entries = []

    @classmethod
    def create(cls, level: str, message: str):
        """
        Centralni ulaz za log. Pamti poslednje unose u memoriji (samo one koji
        prolaze LOG_LEVEL prag) i delegira LogHandler-u.
        """
        level_upper = (level or "").upper()
        if not LogHandler.enabled(level_upper):
            return

        cls._log_entries.append((level_upper, message))
        if len(cls._log_entries) > cls._MAX_ENTRIES:
            del cls._log_entries[0]

        method = getattr(LogHandler, level_upper.lower(), None)
        if callable(method):
            method(message)
            return
        LogHandler._write(level_upper, message)

    @classmethod
    def read(cls, last_only: bool = False):
        if last_only and cls._log_entries:
            return cls._log_entries[-1]
        return cls._log_entries

    @classmethod
    def delete(cls, index: int = None):
        if index is None:
            cls._log_entries.clear()
        elif 0 <= index < len(cls._log_entries):
            cls._log_entries.pop(index)

    # === Shortcut metode ===

    @classmethod
    def debug(cls, message: str):
        cls.create("DEBUG", message)

    @classmethod
    def info(cls, message: str):
        cls.create("INFO", message)

    @classmethod
    def warning(cls, message: str):
        cls.create("WARNING", message)

    @classmethod
    def success(cls, message: str):
        cls.create("SUCCESS", message)

    @classmethod
    def error(cls, message: str):
        cls.create("ERROR", message)

    @classmethod
    def critical(cls, message: str):
        cls.create("CRITICAL", message)
