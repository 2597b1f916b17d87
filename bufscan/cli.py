"""Command-line entry point for the buffer-overflow scanner."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, NoReturn

from . import __version__
from .result import ScanResult, format_report
from .rules import Rule, ScanContext
from .rules.function_signature import FunctionSignatureRule
from .rules.line_scanner import LineScannerRule
from .rules.loop_boundary import LoopBoundaryRule
from .utils import SourceOpenError, get_logger, set_verbosity, write_report_file

USAGE_EXIT_CODE = 1

logger = get_logger("cli")


class UsageErrorParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = UsageErrorParser(
        prog="bufscan",
        description="Heuristic buffer-overflow scanner for C/C++ source files",
        epilog="Findings are advisory; every one should be manually verified.",
    )
    parser.add_argument("source", help="Path to the C/C++ source file to scan.")
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Format of the structured report written with --out (defaults to json).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Also write a structured report to this path (e.g., artifacts/scan.json).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v for info, -vv for debug).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_rules() -> List[Rule]:
    # Order matters: it fixes the order findings are reported in.
    return [
        LineScannerRule(),
        LoopBoundaryRule(),
        FunctionSignatureRule(),
    ]


def run_scan(source_path: str | Path) -> ScanResult:
    """Run every pass over ``source_path`` and return the combined result.

    Raises :class:`SourceOpenError` when the file cannot be opened by the
    first pass; no later pass runs in that case.
    """

    path = Path(source_path)
    context = ScanContext(source_path=path)
    result = ScanResult(source=str(source_path))
    for rule in load_rules():
        logger.info("Running %s on %s", rule.name, path)
        rule.scan(context, result)
    return result


def write_output(result: ScanResult, output_path: str | None, report_format: str) -> None:
    print(format_report(result))

    if output_path:
        try:
            write_report_file(Path(output_path), result.to_dict(), report_format)
        except OSError as exc:
            logger.error("Could not write report to %s: %s", output_path, exc)
            return
        logger.info("Report written to %s", output_path)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    if len(argv) == 1:
        # A lone argument is always the source path, even if it looks like an option.
        argv = ["--", argv[0]]
    args = parser.parse_args(argv)
    set_verbosity(args.verbose)

    try:
        result = run_scan(args.source)
    except SourceOpenError:
        # Open failure is reported but keeps exit status 0.
        print(f"Error: Could not open file {args.source}", file=sys.stderr)
        return 0

    for severity, count in result.summary.as_rows():
        logger.info("%-6s %d", severity, count)
    write_output(result, args.output_path, args.format)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
