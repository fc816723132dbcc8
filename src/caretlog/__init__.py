from __future__ import annotations

from .errors import FATAL_MESSAGE, FatalError
from .printer import Outcome, Printer, caret_line, log_error, read_line
from .report import Report, Severity

__all__ = [
    "FATAL_MESSAGE",
    "FatalError",
    "Outcome",
    "Printer",
    "Report",
    "Severity",
    "caret_line",
    "log_error",
    "read_line",
]
