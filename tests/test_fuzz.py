from __future__ import annotations

import os

import pytest
from trim_text import is_blank, strip_indent, strip_margin

atheris = pytest.importorskip("atheris")


def test_strip_indent_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    seen = 0

    while provider.remaining_bytes() > 0 and seen < 128:
        text = provider.ConsumeUnicodeNoSurrogates(64)
        result = strip_indent(text)
        assert "\r" not in result
        assert len(result) <= len(text)
        seen += 1

    assert seen  # ensure we exercised the loop


def test_strip_margin_with_fuzzed_delimiters():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    seen = 0

    while provider.remaining_bytes() > 0 and seen < 128:
        delimiter = provider.ConsumeUnicodeNoSurrogates(4)
        text = provider.ConsumeUnicodeNoSurrogates(64)
        result = strip_margin(text, delimiter)
        assert "\r" not in result
        assert len(result) <= len(text)
        if is_blank(text):
            assert is_blank(result)
        seen += 1

    assert seen
