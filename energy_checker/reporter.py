"""
Report generation for the C/C++ energy checker.
"""

from pathlib import Path
from typing import Dict, List

from .issue import Issue, Severity


def format_diagnostic_message(issue: Issue) -> str:
    """Diagnostic text for one issue: category, message, score, then the suggestion."""
    return (
        f"[{issue.category}] {issue.message} (Score: {issue.score}/10)\n"
        f"💡 {issue.suggestion}"
    )


class ReportGenerator:
    """Generate reports from issues."""

    @staticmethod
    def generate_text_report(issues: List[Issue], file_path: Path) -> str:
        """Generate a text report."""
        if not issues:
            return f"\n✓ No energy issues found in {file_path}\n"

        report = [f"\n{'='*80}"]
        report.append(f"C/C++ Energy Report: {file_path}")
        report.append(f"{'='*80}\n")

        # Group by severity
        for severity, title in (
            (Severity.HIGH, "HIGH"),
            (Severity.MEDIUM, "MEDIUM"),
            (Severity.LOW, "LOW"),
        ):
            group = [i for i in issues if i.severity == severity]
            if not group:
                continue
            report.append(f"{title} ({len(group)}):")
            report.append("-" * 80)
            for issue in group:
                report.append(f"  Line {issue.line + 1}, col {issue.column + 1}: {issue.message}")
                report.append(f"    Fix: {issue.suggestion}")
                report.append(f"    Category: {issue.category} · Score: {issue.score}/10\n")

        counts = ReportGenerator.generate_severity_counts(issues)
        report.append(
            f"\nSummary: {counts['high']} high, {counts['medium']} medium, {counts['low']} low"
        )
        report.append("="*80)

        return "\n".join(report)

    @staticmethod
    def generate_diagnostic_lines(issues: List[Issue], file_path: Path) -> List[str]:
        """One compiler-style line per issue (1-based line and column)."""
        lines = []
        for issue in issues:
            message = format_diagnostic_message(issue).replace("\n", " ")
            lines.append(
                f"{file_path}:{issue.line + 1}:{issue.column + 1}: "
                f"{issue.severity.value}: {message}"
            )
        return lines

    @staticmethod
    def generate_summary(issues: List[Issue]) -> Dict[str, int]:
        """Generate a summary count by category."""
        summary = {}
        for issue in issues:
            summary[issue.category] = summary.get(issue.category, 0) + 1
        return summary

    @staticmethod
    def generate_severity_counts(issues: List[Issue]) -> Dict[str, int]:
        counts = {s.value: 0 for s in Severity}
        for issue in issues:
            counts[issue.severity.value] += 1
        return counts
