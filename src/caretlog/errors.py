from __future__ import annotations

from dataclasses import dataclass

from .report import Report


FATAL_MESSAGE = "Unhandled exception occurred."


@dataclass(slots=True)
class FatalError(Exception):
    report: Report | None = None

    def __str__(self) -> str:
        return FATAL_MESSAGE
