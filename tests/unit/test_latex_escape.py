"""Unit tests for LaTeX escaping."""

import re

import pytest

from resumetex.contexts.templating.latex_escape import (
    ESCAPE_SEQUENCES,
    escape_latex,
    escape_url,
    unescape_latex,
)

SPECIAL_CHARS = "\\&%$#_{}~^"


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("R&D", r"R\&D"),
        ("100%", r"100\%"),
        ("$5", r"\$5"),
        ("#1", r"\#1"),
        ("snake_case", r"snake\_case"),
        ("{x}", r"\{x\}"),
        ("~home", r"\textasciitilde{}home"),
        ("x^2", r"x\textasciicircum{}2"),
        ("C:\\temp", r"C:\textbackslash{}temp"),
    ],
)
def test_escape_each_special_character(text, expected):
    assert escape_latex(text) == expected


@pytest.mark.unit
@pytest.mark.parametrize("text", [None, ""])
def test_escape_empty_input(text):
    assert escape_latex(text) == ""


@pytest.mark.unit
def test_backslash_sequence_braces_not_reescaped():
    """The braces of \\textbackslash{} must survive as real braces."""
    assert escape_latex("\\") == r"\textbackslash{}"
    assert escape_latex("\\{") == r"\textbackslash{}\{"


@pytest.mark.unit
def test_no_unescaped_special_characters_remain():
    escaped = escape_latex(f"all of them: {SPECIAL_CHARS} done")

    # Remove every sequence escape_latex emits; nothing special may be left
    stripped = escaped
    for sequence in sorted(ESCAPE_SEQUENCES.values(), key=len, reverse=True):
        stripped = stripped.replace(sequence, "")
    assert not re.search(r"[\\&%$#_{}~^]", stripped)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        SPECIAL_CHARS,
        "plain text",
        "\\textbackslash{}",
        r"\&\%",
        "a_b {c} ~d^ e$ #f% g&h \\i",
    ],
)
def test_unescape_inverts_escape(text):
    assert unescape_latex(escape_latex(text)) == text


@pytest.mark.unit
def test_already_escaped_text_escapes_again_losslessly():
    once = escape_latex("50% off")
    twice = escape_latex(once)

    assert twice != once
    assert unescape_latex(twice) == once


@pytest.mark.unit
def test_escape_url():
    assert escape_url("https://janedoe.dev/a b") == "https://janedoe.dev/ab"
    assert escape_url("https://x.dev/page#top") == r"https://x.dev/page\#top"
    assert escape_url("https://x.dev/%20") == r"https://x.dev/\%20"
    assert escape_url("https://x.dev/{evil}\\") == "https://x.dev/evil"
    assert escape_url(None) == ""
