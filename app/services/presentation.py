"""Map scanner issues to editor-style diagnostics and highlight decorations."""

from deps import Dict, List

from energy_checker.issue import Issue, Severity
from energy_checker.reporter import format_diagnostic_message

from ..schemas import Decoration, DiagnosticOut, Position, Range

DIAGNOSTIC_SOURCE = "Energy Checker - C/C++"

_DIAGNOSTIC_SEVERITY = {
    Severity.HIGH: "Error",
    Severity.MEDIUM: "Warning",
    Severity.LOW: "Information",
}

DECORATION_COLORS = {
    Severity.HIGH: "red",
    Severity.MEDIUM: "orange",
    Severity.LOW: "yellow",
}


def issue_range(issue: Issue) -> Range:
    """Highlight range [column, column + length) on the issue's line."""
    return Range(
        start=Position(line=issue.line, character=issue.column),
        end=Position(line=issue.line, character=issue.end_column),
    )


def to_diagnostic(issue: Issue) -> DiagnosticOut:
    return DiagnosticOut(
        range=issue_range(issue),
        severity=_DIAGNOSTIC_SEVERITY[issue.severity],
        message=format_diagnostic_message(issue),
        source=DIAGNOSTIC_SOURCE,
    )


def to_diagnostics(issues: List[Issue]) -> List[DiagnosticOut]:
    return [to_diagnostic(i) for i in issues]


def to_decorations(issues: List[Issue]) -> Dict[str, Decoration]:
    """Group highlight ranges by severity. Every severity is present, possibly empty."""
    decorations = {
        severity.value: Decoration(color=DECORATION_COLORS[severity])
        for severity in (Severity.HIGH, Severity.MEDIUM, Severity.LOW)
    }
    for issue in issues:
        decorations[issue.severity.value].ranges.append(issue_range(issue))
    return decorations
