"""
Manual memory management checks.
"""

import re

from ..checker_base import LineChecker
from ..issue import MEMORY_MANAGEMENT, Severity

_NEW = re.compile(r"\bnew\s+\w+", re.ASCII)
_DELETE = re.compile(r"\bdelete\s+\w+", re.ASCII)
_MALLOC = re.compile(r"\bmalloc\s*\(", re.ASCII)


class MemoryChecker(LineChecker):
    """Flags raw new/delete and C-style allocation."""

    def _check_line(self, line: str, line_num: int):
        self._check_raw_new(line, line_num)
        self._check_raw_delete(line, line_num)
        self._check_malloc(line, line_num)

    def _check_raw_new(self, line: str, line_num: int):
        m = _NEW.search(line)
        if m:
            self._add_issue(
                line_num, line.find("new"), len(m.group(0)),
                Severity.HIGH,
                'Raw pointer allocated with "new"',
                MEMORY_MANAGEMENT,
                "Use smart pointers (std::unique_ptr, std::shared_ptr)",
                8,
            )

    def _check_raw_delete(self, line: str, line_num: int):
        m = _DELETE.search(line)
        if m:
            self._add_issue(
                line_num, line.find("delete"), len(m.group(0)),
                Severity.HIGH,
                "Manual delete",
                MEMORY_MANAGEMENT,
                "Use RAII and smart pointers for automatic cleanup",
                8,
            )

    def _check_malloc(self, line: str, line_num: int):
        # Length is the bare "malloc" token, not the call.
        if _MALLOC.search(line):
            self._add_issue(
                line_num, line.find("malloc"), 6,
                Severity.HIGH,
                "C-style allocation with malloc",
                MEMORY_MANAGEMENT,
                "Use std::vector or smart pointers in C++",
                9,
            )
