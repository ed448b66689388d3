"""Constants used across the trim-text package."""

from __future__ import annotations

import re

# Margin marker used when callers pass an empty delimiter
DEFAULT_MARGIN_DELIMITER = "|"

# CRLF must match as one unit so it yields a single LF
LINE_ENDING_PATTERN = re.compile(r"\r\n?")

# Information separators that `str.isspace` accepts but Unicode does not
NON_WHITESPACE_SEPARATORS = "\x1c\x1d\x1e\x1f"
