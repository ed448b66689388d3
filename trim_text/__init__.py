"""
trim-text: strip source indentation and margins from multiline text.

Library Usage:
    from trim_text import strip_indent, strip_margin

    sql = strip_indent('''
        SELECT id
          FROM users
    ''')
    text = strip_margin('''
        |Hello
        |  World
    ''')
"""

from .lines import is_blank, is_whitespace, normalize_line_endings, split_lines
from .trim import detect_indent, strip_indent, strip_margin

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "strip_indent",
    "strip_margin",
    "is_blank",
    # Helpers
    "detect_indent",
    "is_whitespace",
    "normalize_line_endings",
    "split_lines",
    # Version
    "__version__",
]
