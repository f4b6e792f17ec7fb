"""
Command-line entry point.

Usage
-----
    python -m energy_checker [--format text|diagnostics] FILE [FILE ...]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .main_checker import EnergyChecker
from .reporter import ReportGenerator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="energy_checker",
        description="Scan C/C++ sources for energy-inefficient patterns.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="source files to scan")
    parser.add_argument(
        "--format",
        choices=("text", "diagnostics"),
        default="text",
        help="output format (default: text)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    checker = EnergyChecker()
    status = 0
    for file_path in args.files:
        try:
            issues = checker.check_file(file_path)
        except OSError as e:
            print(f"{file_path}: cannot read file: {e}", file=sys.stderr)
            status = 1
            continue
        if args.format == "diagnostics":
            for line in ReportGenerator.generate_diagnostic_lines(issues, file_path):
                print(line)
        else:
            print(ReportGenerator.generate_text_report(issues, file_path))
    return status


if __name__ == "__main__":
    sys.exit(main())
