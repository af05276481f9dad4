# ========================================================================
# File:       system/handlers/error_handler.py
# Purpose:    Formatira DB greške za ErrorManager (operacija + uzrok)
# ========================================================================

import traceback


class ErrorHandler:
    @staticmethod
    def format_error(error: Exception) -> str:
        operation = getattr(error, "operation", None)
        if operation:
            return f"{type(error).__name__} [{operation}]: {error}"
        return f"{type(error).__name__}: {error}"

    @staticmethod
    def get_traceback(error: Exception) -> str:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))

    @staticmethod
    def cause_chain(error: Exception) -> list:
        """Lanac uzroka (raise ... from e), od spolja ka unutra."""
        chain = []
        seen = set()
        current = error
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            chain.append(f"{type(current).__name__}: {current}")
            current = current.__cause__
        return chain
