"""
Main checker class that coordinates all checkers.
"""

import logging
from pathlib import Path
from typing import Dict, List

from .checkers import LoopNestingChecker, MemoryChecker, STLChecker, StringChecker
from .issue import Issue
from .utils import is_blank, split_lines, strip_comment_lines

logger = logging.getLogger(__name__)


class EnergyChecker:
    """Main checker class for C/C++ energy issues."""

    def __init__(self):
        # Per-line rule checkers, in the order their issues are reported on each line
        self.line_checkers = [
            MemoryChecker(),
            STLChecker(),
            StringChecker(),
        ]
        self.nesting_checker = LoopNestingChecker()

    def scan(self, text: str) -> List[Issue]:
        """Scan document text and return every issue found, in report order.

        Per-line rule issues come first in document order, followed by the
        loop nesting issues.
        """
        lines = strip_comment_lines(split_lines(text))
        issues: List[Issue] = []

        for i, line in enumerate(lines):
            if is_blank(line):
                continue
            for checker in self.line_checkers:
                issues.extend(checker.check_line(line, i))

        issues.extend(self.nesting_checker.check(lines))

        logger.debug("Scanned %d line(s), found %d issue(s)", len(lines), len(issues))
        return issues

    def check_file(self, file_path: Path) -> List[Issue]:
        """Check a file for energy issues. Raises OSError if it cannot be read."""
        with open(file_path, 'r', encoding='utf-8', errors='ignore') as f:
            content = f.read()
        return self.scan(content)

    def check_files(self, file_paths: List[Path]) -> Dict[Path, List[Issue]]:
        """Check multiple files for energy issues.

        Args:
            file_paths: List of file paths to analyze

        Returns:
            Dictionary mapping file path to list of issues found in that file
        """
        results: Dict[Path, List[Issue]] = {}
        for file_path in file_paths:
            results[file_path] = self.check_file(file_path)
        return results


def scan(text: str) -> List[Issue]:
    """Scan C/C++ source text with a fresh checker."""
    return EnergyChecker().scan(text)
