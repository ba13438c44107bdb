"""Unit tests for text processing utilities."""

import pytest

from resumetex.utils.text_processing import (
    non_empty_lines,
    set_max_consecutive_blank_lines,
    slugify_name,
    truncate,
)


@pytest.mark.unit
def test_non_empty_lines():
    assert non_empty_lines("  a \n\n b\n") == ["a", "b"]
    assert non_empty_lines(None) == []


@pytest.mark.unit
def test_truncate():
    assert truncate("Bachelor of Science", 8) == "Bachelor"
    assert truncate("short", 80) == "short"
    assert truncate(None, 8) == ""


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, slug",
    [
        ("Jane Doe", "jane-doe"),
        ("  Jane \t Q   Doe ", "jane-q-doe"),
        ("", "resume"),
        (None, "resume"),
    ],
)
def test_slugify_name(name, slug):
    assert slugify_name(name) == slug


@pytest.mark.unit
def test_set_max_consecutive_blank_lines():
    assert set_max_consecutive_blank_lines("a\n\n\n\nb") == "a\n\nb"
    assert set_max_consecutive_blank_lines("a\n \n\t\n\nb") == "a\n\nb"
    assert set_max_consecutive_blank_lines("a\n\n\nb", max_consecutive=0) == "a\nb"
    assert set_max_consecutive_blank_lines("a\n\nb") == "a\n\nb"
