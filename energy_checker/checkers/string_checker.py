"""
String operation checks.
"""

import re

from ..checker_base import LineChecker
from ..issue import STRING_OPERATIONS, Severity

_CONCAT_ASSIGN = re.compile(r"\w\s*\+=\s*[\"'].*[\"']", re.ASCII)
_BY_VALUE_PARAM = re.compile(r"\bstd::string\s+\w+\s*\)", re.ASCII)
_COMPARE_CALL = re.compile(r"\w\.compare\s*\(", re.ASCII)


class StringChecker(LineChecker):
    """Flags string handling that copies or allocates more than needed."""

    def _check_line(self, line: str, line_num: int):
        self._check_concat_assign(line, line_num)
        self._check_by_value_param(line, line_num)
        self._check_compare_call(line, line_num)

    def _check_concat_assign(self, line: str, line_num: int):
        if _CONCAT_ASSIGN.search(line):
            self._add_issue(
                line_num, line.find("+="), 2,
                Severity.LOW,
                "String concatenation with +=",
                STRING_OPERATIONS,
                "Inside a loop, consider std::stringstream or reserve()",
                4,
            )

    def _check_by_value_param(self, line: str, line_num: int):
        # Heuristic: "std::string name)" is most likely the last parameter of a signature.
        if _BY_VALUE_PARAM.search(line):
            self._add_issue(
                line_num, line.find("std::string"), 11,
                Severity.LOW,
                "std::string parameter passed by value",
                STRING_OPERATIONS,
                "Use const std::string& or std::string_view for parameters",
                3,
            )

    def _check_compare_call(self, line: str, line_num: int):
        if _COMPARE_CALL.search(line):
            self._add_issue(
                line_num, line.find(".compare"), 8,
                Severity.LOW,
                "Use == and != instead of compare()",
                STRING_OPERATIONS,
                "Operators are cheaper and easier to read",
                2,
            )
