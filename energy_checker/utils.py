"""
Utility functions for the C/C++ energy checker.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

BLOCK_COMMENT_START = "/*"
BLOCK_COMMENT_END = "*/"
LINE_COMMENT = "//"

# Languages the checker understands; C and C++ share one rule set.
SUPPORTED_LANGUAGES = ("c", "cpp")


@dataclass
class BlockCommentState:
    """Whether the scan is currently inside an unterminated /* ... */ comment."""
    inside: bool = False


def strip_comments(line: str, state: BlockCommentState) -> str:
    """Return the code part of line, updating state for block comments.

    String and character literals are not recognized, so a comment marker
    inside a quoted literal still starts a comment.
    """
    code = line

    if state.inside:
        end = code.find(BLOCK_COMMENT_END)
        if end < 0:
            return ""
        code = code[end + len(BLOCK_COMMENT_END):]
        state.inside = False

    start = code.find(BLOCK_COMMENT_START)
    while start >= 0:
        end = code.find(BLOCK_COMMENT_END, start + len(BLOCK_COMMENT_START))
        if end < 0:
            code = code[:start]
            state.inside = True
            break
        code = code[:start] + code[end + len(BLOCK_COMMENT_END):]
        start = code.find(BLOCK_COMMENT_START)

    line_comment = code.find(LINE_COMMENT)
    if line_comment >= 0:
        code = code[:line_comment]
    return code


def strip_comment_lines(lines: Iterable[str]) -> List[str]:
    """Strip comments from every line, starting outside any block comment."""
    state = BlockCommentState()
    return [strip_comments(line, state) for line in lines]


def split_lines(text: str) -> List[str]:
    """Split document text on newlines. Keeps a trailing empty line like str.split."""
    return text.split("\n")


def is_blank(line: str) -> bool:
    return not line.strip()


def detect_language(file_path: Path) -> str:
    """Detect programming language from file extension."""
    ext = file_path.suffix.lower()
    lang_map = {
        '.cpp': 'cpp',
        '.cxx': 'cpp',
        '.cc': 'cpp',
        '.hpp': 'cpp',
        '.hh': 'cpp',
        '.hxx': 'cpp',
        '.c': 'c',
        '.h': 'c',
    }
    return lang_map.get(ext, 'unknown')


def is_supported_language(language: str) -> bool:
    return (language or "").strip().lower() in SUPPORTED_LANGUAGES
