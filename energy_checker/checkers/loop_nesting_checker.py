"""
Loop nesting checks.

Nesting is tracked with a stack of open loops. Every ``}`` on a later line
pops the most recent loop, whether or not it is that loop's own brace, so
non-loop blocks and brace-less loops are not told apart.
"""

import re
from typing import List

from ..checker_base import BaseChecker
from ..issue import ALGORITHMIC_COMPLEXITY, LoopFrame, Severity
from ..utils import is_blank

_LOOP_OPENER = re.compile(r"\b(for|while)\s*\(", re.ASCII)


class LoopNestingChecker(BaseChecker):
    """Flags loops nested two or more levels deep across the whole document."""

    def __init__(self):
        super().__init__()
        self.stack: List[LoopFrame] = []

    def _run_checks(self):
        self.stack = []
        for i, line in enumerate(self.lines):
            if is_blank(line):
                continue
            self._push_loops(line, i)
            self._pop_closed(line)
        # Loops still open at end of document are dropped without a report.
        self.stack = []

    def _push_loops(self, line: str, line_num: int):
        for m in _LOOP_OPENER.finditer(line):
            self.stack.append(LoopFrame(line_num, m.start(), m.group(1)))
            level = len(self.stack)
            if level >= 3:
                self._add_issue(
                    line_num, m.start(), len(m.group(0)),
                    Severity.HIGH,
                    f"Deeply nested loop (level {level}) - O(n^{level}) complexity",
                    ALGORITHMIC_COMPLEXITY,
                    "Consider refactoring the algorithm or using more efficient data structures",
                    min(10, 7 + level),
                )
            elif level == 2:
                self._add_issue(
                    line_num, m.start(), len(m.group(0)),
                    Severity.MEDIUM,
                    "Double loop - O(n²) complexity",
                    ALGORITHMIC_COMPLEXITY,
                    "Check whether a more efficient algorithm applies",
                    6,
                )

    def _pop_closed(self, line: str):
        for _ in range(line.count("}")):
            if not self.stack:
                break
            self.stack.pop()
