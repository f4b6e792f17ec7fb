"""
Base checker classes for energy issues.
"""

from typing import List

from .issue import Issue, Severity


class BaseChecker:
    """Base class for all checkers. Works on comment-stripped lines."""

    def __init__(self):
        self.issues: List[Issue] = []
        self.lines: List[str] = []

    def check(self, lines: List[str]) -> List[Issue]:
        """Run checks over the clean lines of one document."""
        self.lines = lines
        self.issues = []
        self._run_checks()
        return self.issues

    def _run_checks(self):
        """Override in subclasses to implement specific checks."""
        pass

    def _add_issue(
        self,
        line_num: int,
        col: int,
        length: int,
        severity: Severity,
        message: str,
        category: str,
        suggestion: str,
        score: int,
    ):
        """Add an issue to the list."""
        self.issues.append(
            Issue(line_num, col, length, severity, message, category, suggestion, score)
        )


class LineChecker(BaseChecker):
    """Checker whose rules only look at a single line at a time.

    EnergyChecker drives these line by line through check_line so that the
    issues of every rule interleave in line order.
    """

    def check_line(self, line: str, line_num: int) -> List[Issue]:
        """Run the per-line rules on one clean line and return what they found."""
        self.issues = []
        self._check_line(line, line_num)
        return self.issues

    def _check_line(self, line: str, line_num: int):
        """Override in subclasses to implement per-line rules."""
        pass
