from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def tag(self) -> str:
        return _TAGS[self]


# Fixed width so messages line up regardless of level.
_TAGS: dict[Severity, str] = {
    Severity.DEBUG: "[D] Debug:   ",
    Severity.INFO: "[I] Info:    ",
    Severity.WARNING: "[W] Warning: ",
    Severity.ERROR: "[E] Error:   ",
}


@dataclass(frozen=True, slots=True)
class Report:
    """A diagnostic message plus an optional single-line column span.

    `line` and `start` are 1-based; `line == 0` means no specific line.
    The highlighted span is half-open: [start, start + count).
    """

    line: int = 0
    start: int = 0
    count: int = 0
    level: Severity = Severity.DEBUG
    message: str = ""

    @property
    def span_end(self) -> int:
        return self.start + self.count
