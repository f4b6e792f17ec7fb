"""Tests for comment stripping."""

from energy_checker.utils import BlockCommentState, strip_comment_lines, strip_comments


class TestLineComments:
    """Test // comment removal."""

    def test_truncates_at_line_comment(self):
        state = BlockCommentState()
        assert strip_comments("int a; // note", state) == "int a; "
        assert state.inside is False

    def test_whole_line_comment_becomes_empty(self):
        assert strip_comments("// malloc(10)", BlockCommentState()) == ""

    def test_line_without_comments_is_unchanged(self):
        line = "    v.push_back(1);"
        assert strip_comments(line, BlockCommentState()) == line

    def test_comment_marker_inside_string_literal_still_truncates(self):
        """Literals are not recognized, so the quoted // starts a comment."""
        line = 'printf("// not a comment"); x = 1;'
        assert strip_comments(line, BlockCommentState()) == 'printf("'


class TestInlineBlockComments:
    """Test /* ... */ comments closed on the same line."""

    def test_excises_single_block(self):
        assert strip_comments("a /* b */ c", BlockCommentState()) == "a  c"

    def test_excises_several_blocks(self):
        assert strip_comments("a /* b */ c /* d */ e", BlockCommentState()) == "a  c  e"

    def test_block_then_line_comment(self):
        state = BlockCommentState()
        assert strip_comments("x = 1; /* y */ z(); // w", state) == "x = 1;  z(); "
        assert state.inside is False

    def test_slash_star_slash_does_not_close(self):
        state = BlockCommentState()
        assert strip_comments("a /*/ b", state) == "a "
        assert state.inside is True


class TestMultiLineBlockComments:
    """Test block comment state carried across lines."""

    def test_unterminated_opener_sets_state(self):
        state = BlockCommentState()
        assert strip_comments("x /* start", state) == "x "
        assert state.inside is True

    def test_line_inside_block_is_empty(self):
        state = BlockCommentState(inside=True)
        assert strip_comments("int* p = new int[10];", state) == ""
        assert state.inside is True

    def test_terminator_keeps_rest_of_line(self):
        state = BlockCommentState(inside=True)
        assert strip_comments("end */ y();", state) == " y();"
        assert state.inside is False

    def test_terminator_followed_by_new_block(self):
        state = BlockCommentState(inside=True)
        assert strip_comments("*/ a /* b */ c /* d", state) == " a  c "
        assert state.inside is True

    def test_opener_after_line_comment_still_opens_block(self):
        """Block comments are removed before line comments are looked at."""
        state = BlockCommentState()
        assert strip_comments("a(); // see /* below", state) == "a(); "
        assert state.inside is True


class TestStripCommentLines:
    """Test whole-document stripping."""

    def test_spans_lines(self):
        lines = ["a();", "/*", "for (;;) {", "}", "*/", "b();"]
        assert strip_comment_lines(lines) == ["a();", "", "", "", "", "b();"]

    def test_each_pass_starts_outside_comment(self):
        first = strip_comment_lines(["x /* open"])
        second = strip_comment_lines(["y();"])
        assert first == ["x "]
        assert second == ["y();"]
