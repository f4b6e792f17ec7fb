"""Checker service: wraps energy_checker and maps to API models."""

from deps import Dict, List

from energy_checker.issue import Issue
from energy_checker.main_checker import EnergyChecker
from energy_checker.reporter import ReportGenerator

from ..schemas import IssueOut


def issue_to_out(i: Issue) -> IssueOut:
    return IssueOut(
        line=i.line,
        column=i.column,
        length=i.length,
        severity=i.severity.value,
        message=i.message,
        category=i.category,
        suggestion=i.suggestion,
        score=i.score,
    )


class CheckerService:
    """Wraps EnergyChecker for use by the API. Each call gets a fresh checker."""

    def analyze_code(self, code: str) -> List[Issue]:
        """Run rule-based checks on raw document text."""
        return EnergyChecker().scan(code)

    @staticmethod
    def summarize(issues: List[Issue]) -> Dict[str, int]:
        """Issue count per category."""
        return ReportGenerator.generate_summary(issues)
