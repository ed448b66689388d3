"""Blank detection and line splitting shared by the trimming functions."""

from __future__ import annotations

from .constants import LINE_ENDING_PATTERN, NON_WHITESPACE_SEPARATORS


def is_whitespace(char: str) -> bool:
    """Unicode White_Space test for a single character.

    `str.isspace` also accepts the file, group, record, and unit separators
    (U+001C..U+001F), which are not Unicode whitespace.
    """
    return char.isspace() and char not in NON_WHITESPACE_SEPARATORS


def is_blank(text: str) -> bool:
    """Report whether a string contains only whitespace characters.

    Whitespace follows the Unicode White_Space property, which covers ASCII
    whitespace as well as no-break space, en/em spaces, and the ideographic
    space. The empty string is blank.

    Args:
        text: The string to inspect.

    Returns:
        bool: True when no non-whitespace character is present.

    Examples:
        is_blank("")  # True
        is_blank(" \\t\\u3000")  # True
        is_blank("\\u2002a")  # False
    """
    return all(is_whitespace(char) for char in text)


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and bare CR line terminators to LF."""
    return LINE_ENDING_PATTERN.sub("\n", text)


def split_lines(text: str) -> list[str]:
    """Split text into lines and drop a blank first and last line.

    Line endings are normalized first, so CRLF, LF, and CR are all accepted.
    Only one line is dropped from each end, and each removal is checked
    against the lines that remain, so a single blank line is removed once.

    Args:
        text: Complete multiline text.

    Returns:
        list[str]: Lines without terminators. The list belongs to the caller
            and may be empty.

    Examples:
        split_lines("\\n  a\\r\\n  b\\n")  # ["  a", "  b"]
        split_lines("   ")  # []
    """
    lines = normalize_line_endings(text).split("\n")
    if lines and is_blank(lines[0]):
        del lines[0]
    if lines and is_blank(lines[-1]):
        del lines[-1]
    return lines
