"""Tests for loop nesting tracking."""

from energy_checker.checkers import LoopNestingChecker
from energy_checker.issue import ALGORITHMIC_COMPLEXITY, Severity

LOOP = "for (int i=0;i<n;i++) {"


def check(lines):
    return LoopNestingChecker().check(lines)


class TestNestingLevels:
    """Test classification by nesting level."""

    def test_single_loop_not_flagged(self):
        assert check([LOOP]) == []

    def test_double_loop_is_medium(self):
        issues = check([LOOP, "    " + LOOP])
        assert len(issues) == 1
        issue = issues[0]
        assert issue.line == 1
        assert issue.column == 4
        assert issue.length == len("for (")
        assert issue.severity == Severity.MEDIUM
        assert issue.category == ALGORITHMIC_COMPLEXITY
        assert issue.score == 6
        assert "O(n²)" in issue.message

    def test_triple_loop_is_high(self):
        issues = check([LOOP, "  " + LOOP, "    " + LOOP])
        assert len(issues) == 2
        issue = issues[1]
        assert issue.line == 2
        assert issue.severity == Severity.HIGH
        assert issue.score == 10
        assert "level 3" in issue.message
        assert "O(n^3)" in issue.message

    def test_score_capped_at_ten(self):
        issues = check([LOOP] * 4)
        assert [i.score for i in issues] == [6, 10, 10]
        assert "level 4" in issues[2].message

    def test_while_loops_count(self):
        issues = check(["while (running) {", "    while(queue.size()) {"])
        assert len(issues) == 1
        assert issues[0].column == 4
        assert issues[0].length == len("while(")

    def test_two_loops_on_one_line(self):
        issues = check(["for (a;b;c) for (d;e;f) x();"])
        assert len(issues) == 1
        assert issues[0].column == len("for (a;b;c) ")


class TestBraceTracking:
    """Test the approximate stack popping on closing braces."""

    def test_closed_loops_do_not_nest(self):
        assert check([LOOP, "}", LOOP, "}"]) == []

    def test_closing_brace_on_opener_line_pops(self):
        assert check(["for (;;) { x(); }", LOOP]) == []

    def test_non_loop_block_closes_loop(self):
        """Any closing brace pops the most recent loop, even an if-block's."""
        lines = [LOOP, "    if (x) { y(); }", "    " + LOOP]
        assert check(lines) == []

    def test_extra_closing_braces_are_ignored(self):
        assert len(check(["}}}", "}", LOOP, "  " + LOOP])) == 1

    def test_opening_braces_are_ignored(self):
        issues = check(["for (;;)", "{", "{", "for (;;)"])
        assert len(issues) == 1

    def test_blank_lines_do_not_reset_nesting(self):
        issues = check([LOOP, "", "   ", "    " + LOOP])
        assert len(issues) == 1
        assert issues[0].line == 3

    def test_unclosed_loops_discarded_between_documents(self):
        checker = LoopNestingChecker()
        checker.check([LOOP, LOOP])
        assert checker.check([LOOP]) == []


class TestNonLoops:
    """Test identifiers that only look like loops."""

    def test_identifiers_containing_for_not_counted(self):
        assert check(["format(x); forEach(y);", "platform_for(z);", LOOP]) == []

    def test_keyword_without_parenthesis_not_counted(self):
        assert check([LOOP, "// for each item", "while_done = true;"]) == []
