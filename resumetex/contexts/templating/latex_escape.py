"""
LaTeX escaping for plain text embedded in generated documents.

These are pure functions with no dependencies on the rest of the system.
"""

import re
from typing import Optional

# Special character -> literal-producing LaTeX sequence.
# Listed in the order a sequential replace chain would need (backslash first);
# escape_latex applies them in a single pass so no emitted sequence is
# ever escaped again.
ESCAPE_SEQUENCES = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

_SPECIAL_CHARS = re.compile("[" + re.escape("".join(ESCAPE_SEQUENCES)) + "]")

# Longest sequences first so \textbackslash{} is not read as \t...
_ESCAPED_SEQUENCES = re.compile(
    "|".join(re.escape(seq) for seq in sorted(ESCAPE_SEQUENCES.values(), key=len, reverse=True))
)
_UNESCAPE_MAP = {seq: char for char, seq in ESCAPE_SEQUENCES.items()}


def escape_latex(text: Optional[str]) -> str:
    """
    Escape special LaTeX characters so plain text can be embedded safely.

    Handles backslash, & % $ # _ { } ~ ^. None or empty input gives "".

    Args:
        text: Plain text

    Returns:
        Text safe to place verbatim in a LaTeX document body

    Example:
        >>> escape_latex("R&D 100% C:\\\\temp")
        'R\\\\&D 100\\\\% C:\\\\textbackslash{}temp'
    """
    if not text:
        return ""
    return _SPECIAL_CHARS.sub(lambda m: ESCAPE_SEQUENCES[m.group(0)], text)


def unescape_latex(text: Optional[str]) -> str:
    """
    Invert escape_latex over its escape alphabet.

    Only the sequences escape_latex emits are recognized; other LaTeX
    commands are left untouched.

    Example:
        >>> unescape_latex(escape_latex("a_b {c}"))
        'a_b {c}'
    """
    if not text:
        return ""
    return _ESCAPED_SEQUENCES.sub(lambda m: _UNESCAPE_MAP[m.group(0)], text)


def escape_url(url: Optional[str]) -> str:
    """
    Make a URL safe for the first argument of \\href.

    Whitespace, backslashes and braces are dropped; % and # are escaped.

    Example:
        >>> escape_url("https://x.dev/a b#top")
        'https://x.dev/ab\\\\#top'
    """
    if not url:
        return ""
    cleaned = re.sub(r"[\s\\{}]", "", url)
    return cleaned.replace("%", r"\%").replace("#", r"\#")
