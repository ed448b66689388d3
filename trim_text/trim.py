"""Indent and margin stripping for multiline text literals."""

from __future__ import annotations

from .constants import DEFAULT_MARGIN_DELIMITER
from .lines import is_blank, is_whitespace, split_lines


def detect_indent(lines: list[str]) -> int | None:
    """Find the smallest leading-whitespace run across non-blank lines.

    The indent is a raw character count, so a tab and a space each count as
    one. Blank lines are ignored rather than treated as having no indent.

    Args:
        lines: Lines without terminators.

    Returns:
        int | None: Minimum indent, or None when every line is blank.

    Examples:
        detect_indent(["  a", "    b", ""])  # 2
        detect_indent(["", " "])  # None
    """
    indent: int | None = None
    for line in lines:
        if is_blank(line):
            continue
        leading = next(index for index, char in enumerate(line) if not is_whitespace(char))
        if indent is None or leading < indent:
            indent = leading
    return indent


def strip_indent(text: str) -> str:
    """Remove the common minimal indent from every line.

    A blank first and last line are dropped, blank lines do not influence the
    detected indent, and blank lines shorter than the indent become empty.
    CRLF, LF, and CR terminators are accepted; the result always uses LF.

    Args:
        text: Multiline text, typically an indented literal.

    Returns:
        str: Text with the indent removed and lines joined by ``"\\n"``.

    Examples:
        strip_indent('''
            ABC
              123
            456
        ''')  # "ABC\\n  123\\n456"
    """
    lines = split_lines(text)
    if not lines:
        return ""

    indent = detect_indent(lines)
    if indent:
        lines = [line[indent:] if len(line) > indent else "" for line in lines]

    return "\n".join(lines)


def strip_margin(text: str, delimiter: str = "") -> str:
    """Remove a whitespace prefix and margin delimiter from each line.

    On every line the first occurrence of `delimiter` is located; when only
    whitespace precedes it, everything up to and including the delimiter is
    removed. Lines without the delimiter, or with content before it, are kept
    as they are. A blank first and last line are dropped and the result
    always uses LF separators.

    Args:
        text: Multiline text with a margin marker on each line.
        delimiter: Margin marker. An empty string selects ``"|"``.

    Returns:
        str: Text with margins removed and lines joined by ``"\\n"``.

    Examples:
        strip_margin('''
            |ABC
            |  123
        ''')  # "ABC\\n  123"
        strip_margin("\\n> ABC\\n> 123\\n", "> ")  # "ABC\\n123"
    """
    delimiter = delimiter or DEFAULT_MARGIN_DELIMITER

    lines = split_lines(text)
    for index, line in enumerate(lines):
        position = line.find(delimiter)
        if position >= 0 and is_blank(line[:position]):
            lines[index] = line[position + len(delimiter) :]

    return "\n".join(lines)
