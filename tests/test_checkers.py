"""Tests for the per-line rule checkers."""

import time

from energy_checker.checkers import MemoryChecker, STLChecker, StringChecker
from energy_checker.issue import (
    MEMORY_MANAGEMENT,
    STL_EFFICIENCY,
    STRING_OPERATIONS,
    Severity,
)


class TestMemoryChecker:
    """Test raw new/delete and malloc detection."""

    def test_raw_new(self):
        issues = MemoryChecker().check_line("int* p = new int[10];", 3)
        assert len(issues) == 1
        issue = issues[0]
        assert issue.line == 3
        assert issue.column == 9
        assert issue.length == len("new int")
        assert issue.severity == Severity.HIGH
        assert issue.category == MEMORY_MANAGEMENT
        assert issue.score == 8

    def test_new_column_is_first_occurrence_of_anchor(self):
        """The column comes from the first "new" substring, not the regex match."""
        line = "renew(); int* q = new int;"
        issues = MemoryChecker().check_line(line, 0)
        assert len(issues) == 1
        assert issues[0].column == 2
        assert issues[0].length == len("new int")

    def test_one_issue_per_line_for_repeated_matches(self):
        issues = MemoryChecker().check_line("p = new int; q = new int;", 0)
        assert len(issues) == 1
        assert issues[0].column == 4

    def test_delete(self):
        issues = MemoryChecker().check_line("    delete p;", 0)
        assert len(issues) == 1
        assert issues[0].column == 4
        assert issues[0].length == len("delete p")
        assert issues[0].score == 8

    def test_array_delete_without_space_not_flagged(self):
        assert MemoryChecker().check_line("delete[] arr;", 0) == []

    def test_malloc(self):
        issues = MemoryChecker().check_line("int* r = (int*)malloc(sizeof(int));", 0)
        assert len(issues) == 1
        assert issues[0].column == 15
        assert issues[0].length == 6
        assert issues[0].severity == Severity.HIGH
        assert issues[0].score == 9

    def test_malloc_requires_call(self):
        assert MemoryChecker().check_line("void* (*alloc)(size_t) = malloc;", 0) == []

    def test_smart_pointer_not_flagged(self):
        line = "std::unique_ptr<int> q = std::make_unique<int>(10);"
        assert MemoryChecker().check_line(line, 0) == []

    def test_emission_order(self):
        issues = MemoryChecker().check_line("delete a; b = new int; c = malloc(1);", 0)
        assert [i.score for i in issues] == [8, 8, 9]
        assert [i.message for i in issues][0] == 'Raw pointer allocated with "new"'
        assert issues[1].message == "Manual delete"


class TestSTLChecker:
    """Test container efficiency detection."""

    def test_push_back(self):
        issues = STLChecker().check_line("std::vector<int> v; v.push_back(1);", 0)
        assert len(issues) == 1
        assert issues[0].column == 21
        assert issues[0].length == 10
        assert issues[0].severity == Severity.LOW
        assert issues[0].category == STL_EFFICIENCY
        assert issues[0].score == 3

    def test_ordered_map(self):
        issues = STLChecker().check_line("std::map<int,int> m;", 0)
        assert len(issues) == 1
        assert issues[0].column == 0
        assert issues[0].length == len("std::map<int,int>")
        assert issues[0].severity == Severity.LOW
        assert issues[0].score == 4

    def test_map_suppressed_when_unordered_map_on_line(self):
        line = "std::map<int,int> m; std::unordered_map<int,int> u;"
        assert STLChecker().check_line(line, 0) == []

    def test_unordered_map_alone_not_flagged(self):
        assert STLChecker().check_line("std::unordered_map<int,int> um;", 0) == []

    def test_list(self):
        issues = STLChecker().check_line("    std::list<int> l;", 0)
        assert len(issues) == 1
        assert issues[0].column == 4
        assert issues[0].length == len("std::list<int>")
        assert issues[0].severity == Severity.MEDIUM
        assert issues[0].score == 5

    def test_list_match_is_greedy_to_last_angle_bracket(self):
        line = "std::list<int> a; std::vector<int> b;"
        issues = STLChecker().check_line(line, 0)
        assert issues[0].length == len("std::list<int> a; std::vector<int>")


class TestStringChecker:
    """Test string operation detection."""

    def test_concat_assign(self):
        issues = StringChecker().check_line('s += " World";', 0)
        assert len(issues) == 1
        assert issues[0].column == 2
        assert issues[0].length == 2
        assert issues[0].category == STRING_OPERATIONS
        assert issues[0].score == 4

    def test_concat_assign_with_variable_not_flagged(self):
        assert StringChecker().check_line("total += step;", 0) == []

    def test_by_value_param(self):
        issues = StringChecker().check_line("void greet(std::string name) {", 0)
        assert len(issues) == 1
        assert issues[0].column == len("void greet(")
        assert issues[0].length == 11
        assert issues[0].score == 3

    def test_const_reference_param_not_flagged(self):
        assert StringChecker().check_line("void greet(const std::string& name) {", 0) == []

    def test_compare(self):
        issues = StringChecker().check_line("s.compare(t);", 0)
        assert len(issues) == 1
        assert issues[0].column == 1
        assert issues[0].length == 8
        assert issues[0].severity == Severity.LOW
        assert issues[0].score == 2

    def test_check_line_does_not_accumulate(self):
        checker = StringChecker()
        checker.check_line("s.compare(t);", 0)
        assert len(checker.check_line("t.compare(s);", 1)) == 1


class TestLongLines:
    """Test that the string rules stay fast on very long lines."""

    def test_long_identifier_run(self):
        start = time.perf_counter()
        assert StringChecker().check_line("x" * 50000, 0) == []
        assert time.perf_counter() - start < 1.0

    def test_long_line_ending_in_compare(self):
        line = "x" * 50000 + " s.compare(t);"
        start = time.perf_counter()
        issues = StringChecker().check_line(line, 0)
        assert time.perf_counter() - start < 1.0
        assert len(issues) == 1
        assert issues[0].column == line.find(".compare")
        assert issues[0].length == 8

    def test_long_line_ending_in_concat(self):
        line = "x" * 50000 + ' += "!";'
        issues = StringChecker().check_line(line, 0)
        assert [(i.column, i.length) for i in issues] == [(line.find("+="), 2)]
