"""
STL container efficiency checks.
"""

import re

from ..checker_base import LineChecker
from ..issue import STL_EFFICIENCY, Severity

_LIST = re.compile(r"std::list<.*>")
_MAP = re.compile(r"std::map<.*>")
_PUSH_BACK = re.compile(r"\.push_back\s*\(")


class STLChecker(LineChecker):
    """Flags container choices and usage that cost extra work."""

    def _check_line(self, line: str, line_num: int):
        self._check_list(line, line_num)
        self._check_ordered_map(line, line_num)
        self._check_push_back(line, line_num)

    def _check_list(self, line: str, line_num: int):
        m = _LIST.search(line)
        if m:
            self._add_issue(
                line_num, line.find("std::list"), len(m.group(0)),
                Severity.MEDIUM,
                "std::list can be inefficient for sequential access",
                STL_EFFICIENCY,
                "Use std::vector unless you need insertion/removal in the middle",
                5,
            )

    def _check_ordered_map(self, line: str, line_num: int):
        m = _MAP.search(line)
        if m and "unordered_map" not in line:
            self._add_issue(
                line_num, line.find("std::map"), len(m.group(0)),
                Severity.LOW,
                "std::map lookups are O(log n)",
                STL_EFFICIENCY,
                "Consider std::unordered_map (O(1)) if ordering is not needed",
                4,
            )

    def _check_push_back(self, line: str, line_num: int):
        if _PUSH_BACK.search(line):
            self._add_issue(
                line_num, line.find(".push_back"), 10,
                Severity.LOW,
                "push_back may trigger reallocations",
                STL_EFFICIENCY,
                "Call reserve() when the approximate size is known",
                3,
            )
