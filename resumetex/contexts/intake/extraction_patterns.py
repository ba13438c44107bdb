"""
Reusable regex patterns for parsing free-text resume sections.

Pattern classes are frozen dataclasses with class-level compiled patterns.
Where a field can be found by more than one pattern, an ordered list of
candidates is exported; parsers try the candidates in list order and the
first match wins, so precedence is visible here rather than buried in
nested conditionals.

Date patterns are English/Gregorian only (capitalized month names, "Present",
"Ongoing").
"""

import re
from dataclasses import dataclass

# =============================================================================
# BLOCK STRUCTURE
# =============================================================================


@dataclass(frozen=True)
class BlockPatterns:
    """
    Patterns for splitting a free-text field into entries and lines.
    """

    # Two or more newlines (whitespace-only lines count as blank)
    BLANK_LINE_SEPARATOR: re.Pattern = re.compile(r"\n[ \t]*(?:\n[ \t]*)+")

    # Bullet glyph at line start: •, -, *
    BULLET_MARKER: re.Pattern = re.compile(r"^[•\-*]")

    # Bullet glyph plus the whitespace that follows it
    BULLET_PREFIX: re.Pattern = re.compile(r"^[•\-*]\s*")


# =============================================================================
# HEADER PATTERNS
# =============================================================================


@dataclass(frozen=True)
class DatePatterns:
    """
    Patterns for the date part of an entry header line.

    Group 1 of every pattern is the date text; the whole match is what gets
    removed from the header.
    """

    # Trailing parenthesized range - e.g., "Engineer — Acme (Jan 2023 – Present)"
    PAREN_RANGE: re.Pattern = re.compile(r"\(([^)]+)\)\s*$")

    # Separator then month/year to end of line - e.g., "Engineer — Acme | Jan 2023 – Present"
    SEPARATED_MONTH_YEAR: re.Pattern = re.compile(r"[|–\-]\s*([A-Z][a-z]+\s+\d{4}.*)$")

    # Bare year range - e.g., "2018 - 2022", "2021–Present", "2023-ongoing"
    BARE_YEAR_RANGE: re.Pattern = re.compile(
        r"(\d{4}\s*[-–]\s*(?:\d{4}|Present|Ongoing))", re.IGNORECASE
    )

    # Pipe or en-dash then a single month/year - e.g., "Portfolio Site | React | Mar 2024"
    SEPARATED_MONTH_YEAR_SINGLE: re.Pattern = re.compile(r"[|–]\s*([A-Z][a-z]+\s+\d{4})")

    # Anything from the first remaining pipe onwards - e.g., "Portfolio Site | React"
    TRAILING_PIPE_SUFFIX: re.Pattern = re.compile(r"\|.*$")


@dataclass(frozen=True)
class SeparatorPatterns:
    """
    Patterns for splitting "Title — Company" style header text.
    """

    # Em-dash or the word "at" surrounded by whitespace, or a spaced hyphen
    # between non-space characters
    TITLE_ORG: re.Pattern = re.compile(r"\s+(?:—|at)\s+|(?<=\S)\s+-\s+(?=\S)")

    # Leftover separators when a date was cut from the end of the header
    TRAILING_PUNCTUATION: re.Pattern = re.compile(r"[\s,|]+$")


# Experience headers: parenthesized range first, then separator + month/year
EXPERIENCE_DATE_PATTERNS = [
    DatePatterns.PAREN_RANGE,
    DatePatterns.SEPARATED_MONTH_YEAR,
]

# Education headers: parenthesized range first, then bare year range
EDUCATION_DATE_PATTERNS = [
    DatePatterns.PAREN_RANGE,
    DatePatterns.BARE_YEAR_RANGE,
]

# Project headers: a single separated month/year
PROJECT_DATE_PATTERNS = [
    DatePatterns.SEPARATED_MONTH_YEAR_SINGLE,
]


# =============================================================================
# PROJECT BODY LABELS
# =============================================================================


@dataclass(frozen=True)
class ProjectLabelPatterns:
    """
    Case-insensitive label prefixes for project body lines.

    Each pattern matches the label plus its ":" or whitespace separator so
    that the remainder of the line is the value.
    """

    TECH: re.Pattern = re.compile(r"^tech(?:\s*stack|nologies)?(?:\s*:|\s)\s*", re.IGNORECASE)
    LIVE: re.Pattern = re.compile(r"^live(?:\s*demo)?(?:\s*:|\s)\s*", re.IGNORECASE)
    GITHUB: re.Pattern = re.compile(r"^github(?:\s*:|\s)\s*", re.IGNORECASE)


# Label pattern -> ProjectEntry field it fills, checked in order
PROJECT_LABEL_FIELDS = [
    (ProjectLabelPatterns.TECH, "tech"),
    (ProjectLabelPatterns.LIVE, "live_url"),
    (ProjectLabelPatterns.GITHUB, "github_url"),
]


# =============================================================================
# CONTACT PATTERNS
# =============================================================================

# Top-level domains accepted for a bare portfolio domain
PORTFOLIO_TLDS = ("tech", "dev", "io", "co", "com", "me", "app", "site")


@dataclass(frozen=True)
class ContactPatterns:
    """
    Independent patterns applied to the full contact string.

    Each pattern is searched against the original string, so one field's
    match never hides another's.
    """

    EMAIL: re.Pattern = re.compile(r"[\w.+-]+@[\w-]+\.[a-zA-Z.]{2,}")

    # Optional +, optional "(", then 9-20 digits/separators ending in a digit
    PHONE: re.Pattern = re.compile(r"(?<![\w/])\+?\(?\d[\d\s\-().]{7,18}\d")

    LINKEDIN: re.Pattern = re.compile(r"linkedin\.com/in/([\w-]+)", re.IGNORECASE)

    GITHUB: re.Pattern = re.compile(r"github\.com/([\w-]+)", re.IGNORECASE)

    # Bare domain; never part of an email address and never linkedin/github
    PORTFOLIO: re.Pattern = re.compile(
        r"(?<![@\w.-])(?:https?://)?(?!(?:www\.)?(?:linkedin|github)\.com\b)(?:www\.)?"
        rf"((?:[\w-]+\.)+(?:{'|'.join(PORTFOLIO_TLDS)}))(?![\w@-])",
        re.IGNORECASE,
    )
