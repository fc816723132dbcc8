from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import TextIO, overload

from .errors import FatalError
from .report import Report, Severity


logger = logging.getLogger("caretlog.printer")

DETAILS_PREFIX = "⟹"
CARET_INDENT = "    "

_BOLD = "\x1b[1m"
_NORMAL = "\x1b[0m"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of a single print call.

    `fatal` is set when the caller asked to abort, or unconditionally when the
    annotated file could not be opened. Nothing is raised until the caller
    asks for it via `raise_for_fatal`.
    """

    fatal: bool
    report: Report
    line_text: str | None = None
    cause: BaseException | None = None

    def raise_for_fatal(self) -> None:
        if self.fatal:
            raise FatalError(report=self.report) from self.cause


def caret_line(start: int, count: int) -> str:
    # Columns are code points; wide or combining characters will misalign.
    return "".join("^" if cur >= start else " " for cur in range(1, start + count))


def _open_source(path: str | os.PathLike[str]) -> TextIO:
    # Only "\n" ends a line; a stray "\r" stays part of the text.
    return open(path, encoding="utf-8", errors="replace", newline="\n")


def _find_line(fh: TextIO, line: int) -> str | None:
    for cur, text in enumerate(fh, start=1):
        if cur == line:
            text = text.removesuffix("\n")
            return text.removesuffix("\r")
    return None


def read_line(path: str | os.PathLike[str], line: int) -> str | None:
    """Return the text of 1-based `line` in `path`, or None if the file is shorter."""
    with _open_source(path) as fh:
        return _find_line(fh, line)


@dataclass(slots=True)
class Printer:
    stream: TextIO | None = None  # None -> sys.stdout at call time
    emphasis: bool = True

    def _out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def _tag(self, level: Severity) -> str:
        if self.emphasis:
            return f"{_BOLD}{level.tag}{_NORMAL}"
        return level.tag

    def emit(self, report: Report, should_abort: bool = False) -> Outcome:
        out = self._out()
        out.write(f"{self._tag(report.level)}{report.message}\n")
        out.flush()
        return Outcome(fatal=should_abort, report=report)

    def emit_annotated(
        self,
        path: str | os.PathLike[str],
        report: Report,
        should_abort: bool = False,
    ) -> Outcome:
        # The message itself is always printed, whatever happens to the file.
        self.emit(report)

        try:
            fh = _open_source(path)
        except OSError as e:
            logger.debug("cannot open %s: %s", path, e)
            failure = Report(level=Severity.ERROR, message=f"cannot open file '{os.fspath(path)}'")
            self.emit(failure)
            return Outcome(fatal=True, report=failure, cause=e)

        # Errors while reading an opened file propagate; only opening is fatal here.
        with fh:
            text = _find_line(fh, report.line)

        if text is None:
            logger.debug("line %d not found in %s", report.line, path)
            return Outcome(fatal=should_abort, report=report)

        out = self._out()
        out.write(f"{DETAILS_PREFIX}   {text}\n")
        out.write(f"{CARET_INDENT}{caret_line(report.start, report.count)}\n")
        out.flush()
        return Outcome(fatal=should_abort, report=report, line_text=text)


@overload
def log_error(report: Report, /, should_abort: bool = ..., *, stream: TextIO | None = ...) -> Outcome: ...


@overload
def log_error(
    path: str | os.PathLike[str],
    report: Report,
    /,
    should_abort: bool = ...,
    *,
    stream: TextIO | None = ...,
) -> Outcome: ...


def log_error(target, /, *args, stream=None, **kwargs):
    """Print a report, optionally annotating a file line, and raise if fatal.

    `log_error(report)` prints the message only; `log_error(path, report)`
    also shows the offending line of `path` with a caret underline. A fatal
    outcome raises FatalError after everything has been printed.
    """
    printer = Printer(stream=stream)
    if isinstance(target, Report):
        outcome = printer.emit(target, *args, **kwargs)
    else:
        outcome = printer.emit_annotated(target, *args, **kwargs)
    outcome.raise_for_fatal()
    return outcome
