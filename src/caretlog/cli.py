from __future__ import annotations

import argparse
import logging

from .printer import Printer
from .report import Report, Severity


def _unsigned(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return n


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="caretlog", description="Print a diagnostic, optionally underlining a file line")
    ap.add_argument("message", help="Diagnostic text")
    ap.add_argument(
        "-l",
        "--level",
        choices=[s.value for s in Severity],
        default=Severity.ERROR.value,
        help="Severity tag (default: error)",
    )
    ap.add_argument("-f", "--file", help="Source file whose line is shown")
    ap.add_argument("--line", type=_unsigned, default=0, help="1-based line in --file")
    ap.add_argument("--start", type=_unsigned, default=0, help="1-based first highlighted column")
    ap.add_argument("--count", type=_unsigned, default=0, help="Number of highlighted columns")
    ap.add_argument("--abort", action="store_true", help="Exit non-zero after printing")
    ap.add_argument("--plain", action="store_true", help="Do not embolden the severity tag")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        logging.getLogger("caretlog").setLevel(logging.DEBUG)

    report = Report(
        line=args.line,
        start=args.start,
        count=args.count,
        level=Severity(args.level),
        message=args.message,
    )
    printer = Printer(emphasis=not args.plain)
    if args.file is None:
        outcome = printer.emit(report, args.abort)
    else:
        outcome = printer.emit_annotated(args.file, report, args.abort)
    return 1 if outcome.fatal else 0


if __name__ == "__main__":
    raise SystemExit(main())
