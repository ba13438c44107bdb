"""
Text processing utilities for free-text resume fields and generated LaTeX.
"""

import re
from typing import List, Optional


def non_empty_lines(text: Optional[str]) -> List[str]:
    """
    Split text on newlines, strip each line, and drop blank lines.

    Args:
        text: Multi-line text (None is treated as empty)

    Returns:
        List of stripped, non-empty lines in original order

    Example:
        >>> non_empty_lines("  a \\n\\n b\\n")
        ['a', 'b']
    """
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def truncate(text: Optional[str], max_len: int) -> str:
    """
    Cut text to at most max_len characters (no ellipsis).

    Example:
        >>> truncate("Bachelor of Science", 8)
        'Bachelor'
        >>> truncate(None, 8)
        ''
    """
    if not text:
        return ""
    return text[:max_len]


def slugify_name(name: Optional[str], default: str = "resume") -> str:
    """
    Lower-case a display name and replace whitespace runs with single hyphens.

    Used for download filenames, so "Jane  Q Doe" becomes "jane-q-doe".

    Example:
        >>> slugify_name("Jane  Q Doe")
        'jane-q-doe'
        >>> slugify_name("")
        'resume'
    """
    if not name or not name.strip():
        name = default
    return re.sub(r"\s+", "-", name.strip().lower())


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Replaces 2 or more consecutive blank lines with max_consecutive blank lines.
    This standardizes spacing in generated documents for consistent formatting.

    Args:
        content: The text content to normalize
        max_consecutive: Maximum number of consecutive blank lines to allow.
                        Use 0 to remove all blank lines, 1 for standard
                        normalization (default: 1)

    Returns:
        Content with normalized blank lines

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=0)
        'text\\nmore'
    """
    if max_consecutive == 0:
        # Any blank line at all
        pattern = r'\n[ \t]*\n([ \t]*\n)*'
    else:
        # Only runs of 2+ blank lines
        pattern = r'\n[ \t]*\n([ \t]*\n)+'

    # max_consecutive=1 means "\n\n" which is 1 blank line
    replacement = '\n' * (max_consecutive + 1)

    return re.sub(pattern, replacement, content)
