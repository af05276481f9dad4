# ============================================================================
# File:       system/handlers/log_handler.py
# Purpose:    Pisanje logova u fajl uz prag nivoa (LOG_LEVEL)
# ============================================================================

import os
from datetime import datetime
from system.config.env import EnvLoader

LEVELS = {"DEBUG": 10, "INFO": 20, "SUCCESS": 25, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class LogHandler:

    @staticmethod
    def log_file_path() -> str:
        # čita se pri svakom upisu -> testovi mogu da preusmere LOG_FILE_PATH
        return EnvLoader.get("LOG_FILE_PATH", "system/data/logs/app.log")

    @staticmethod
    def enabled(level: str) -> bool:
        threshold = (EnvLoader.get("LOG_LEVEL", "info") or "info").upper()
        return LEVELS.get(level.upper(), 20) >= LEVELS.get(threshold, 20)

    @staticmethod
    def _write(level, message):
        if not LogHandler.enabled(level):
            return
        path = LogHandler.log_file_path()
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            with open(path, "a", encoding="utf-8") as f:
                f.write(f"[{level.upper()}] {timestamp} - {message}\n")
        except OSError as e:
            print(f"❌ Neuspelo logovanje: {e}")

    @staticmethod
    def debug(message):
        LogHandler._write("DEBUG", message)

    @staticmethod
    def info(message):
        LogHandler._write("INFO", message)

    @staticmethod
    def warning(message):
        LogHandler._write("WARNING", message)

    @staticmethod
    def success(message):
        LogHandler._write("SUCCESS", message)

    @staticmethod
    def error(message):
        LogHandler._write("ERROR", message)

    @staticmethod
    def critical(message):
        LogHandler._write("CRITICAL", message)
