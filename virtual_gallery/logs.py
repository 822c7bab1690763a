"""Callback-based logging shared by gallery components."""

from __future__ import annotations

from typing import Callable

LogCallback = Callable[[str, str], None]


class LogEmitter:
    """
    Mix-in that forwards log lines to an optional callback.

    Components stay free of any UI dependency; the app wires the callback
    to its debug console.
    """

    # Prefix shown in front of every message (e.g. "AIC", "Gallery")
    log_tag: str = "Gallery"

    _log_callback: LogCallback | None = None

    def set_logger(self, callback: LogCallback | None) -> None:
        """Set logging callback. Signature: callback(level, message)."""
        self._log_callback = callback

    def _log(self, level: str, message: str) -> None:
        """Log a message if callback is set."""
        if self._log_callback:
            self._log_callback(level, f"[{self.log_tag}] {message}")

    def _log_info(self, message: str) -> None:
        self._log("INFO", message)

    def _log_warning(self, message: str) -> None:
        self._log("WARN", message)

    def _log_error(self, message: str) -> None:
        self._log("ERROR", message)
