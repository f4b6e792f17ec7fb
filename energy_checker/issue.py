"""
Issue data models for the C/C++ energy checker.
"""

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Issue severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Issue categories
MEMORY_MANAGEMENT = "Memory Management"
STL_EFFICIENCY = "STL Efficiency"
STRING_OPERATIONS = "String Operations"
ALGORITHMIC_COMPLEXITY = "Algorithmic Complexity"


@dataclass(frozen=True)
class Issue:
    """A pattern found on one line that is likely to waste energy or memory."""
    line: int
    column: int
    length: int
    severity: Severity
    message: str
    category: str
    suggestion: str
    score: int

    @property
    def end_column(self) -> int:
        return self.column + self.length


@dataclass(frozen=True)
class LoopFrame:
    """An open loop on the nesting stack."""
    line: int
    column: int
    kind: str
