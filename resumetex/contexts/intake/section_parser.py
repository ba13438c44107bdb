"""
Heuristic section parsers for free-text resume fields.

Each parser turns one free-text block into an ordered list of records. The
parsers are best-effort: malformed input degrades to partial records or an
empty list and never raises. Text is kept raw here; LaTeX escaping happens
when the document is assembled, so date brackets and separators are matched
against what the user actually typed.

Block conventions:
- Entries are separated by blank lines
- The first line of an entry is its header ("Title — Company (Dates)")
- Lines starting with •, - or * are bullets
"""

import re
from typing import List, Optional, Sequence, Tuple

from resumetex.contexts.intake.extraction_patterns import (
    EDUCATION_DATE_PATTERNS,
    EXPERIENCE_DATE_PATTERNS,
    PROJECT_DATE_PATTERNS,
    PROJECT_LABEL_FIELDS,
    BlockPatterns,
    DatePatterns,
    SeparatorPatterns,
)
from resumetex.contexts.intake.logger import _log_debug, log_parse_result
from resumetex.contexts.intake.resume_fields import (
    EducationEntry,
    JobEntry,
    ProjectEntry,
    SkillGroup,
)
from resumetex.utils.text_processing import non_empty_lines

# Category used for skill lines without a "Category:" label
DEFAULT_SKILL_CATEGORY = "Others"


# =============================================================================
# SHARED HELPERS
# =============================================================================


def split_blocks(text: Optional[str]) -> List[List[str]]:
    """
    Split a free-text field into entries of stripped, non-empty lines.

    Entries are separated by one or more blank lines. Windows line endings
    are normalized first.

    Args:
        text: Raw field text (None is treated as empty)

    Returns:
        List of entries, each a non-empty list of lines

    Example:
        >>> split_blocks("A\\n• x\\n\\nB")
        [['A', '• x'], ['B']]
    """
    if not text or not text.strip():
        return []

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    blocks = []
    for chunk in BlockPatterns.BLANK_LINE_SEPARATOR.split(normalized.strip()):
        lines = non_empty_lines(chunk)
        if lines:
            blocks.append(lines)
    return blocks


def extract_header_date(header: str, candidates: Sequence[re.Pattern]) -> Tuple[str, str]:
    """
    Pull the date text out of a header line using ordered candidate patterns.

    The first candidate that matches wins. Its group 1 becomes the date and its
    whole match is cut out of the header.

    Args:
        header: Header line
        candidates: Date patterns in precedence order

    Returns:
        (dates, remainder) - dates is "" and remainder is the stripped header
        when no candidate matches

    Example:
        >>> extract_header_date("Engineer — Acme (2021 – 2023)", EXPERIENCE_DATE_PATTERNS)
        ('2021 – 2023', 'Engineer — Acme')
    """
    for pattern in candidates:
        match = pattern.search(header)
        if match:
            dates = match.group(1).strip()
            remainder = header[: match.start()] + header[match.end():]
            remainder = SeparatorPatterns.TRAILING_PUNCTUATION.sub("", remainder.strip())
            return dates, remainder
    return "", header.strip()


def split_title_company(text: str) -> Tuple[str, str]:
    """
    Split "Title — Company" header text on the first separator.

    Separators: an em-dash or the word "at" with surrounding whitespace, or a
    hyphen with whitespace on both sides.

    Args:
        text: Header text with dates already removed

    Returns:
        (primary, secondary) - secondary is "" when no separator is found

    Example:
        >>> split_title_company("Data Engineer at Globex")
        ('Data Engineer', 'Globex')
        >>> split_title_company("Freelance")
        ('Freelance', '')
    """
    parts = SeparatorPatterns.TITLE_ORG.split(text, maxsplit=1)
    primary = parts[0].strip()
    secondary = parts[1].strip() if len(parts) > 1 else ""
    return primary, secondary


def is_bullet(line: str) -> bool:
    """Check whether a line starts with a bullet glyph (•, -, *)."""
    return bool(BlockPatterns.BULLET_MARKER.match(line))


def strip_bullet(line: str) -> str:
    """Remove a leading bullet glyph and surrounding whitespace."""
    return BlockPatterns.BULLET_PREFIX.sub("", line.strip()).strip()


# =============================================================================
# SECTION PARSERS
# =============================================================================


def parse_experience(text: Optional[str]) -> List[JobEntry]:
    """
    Parse the work experience field into job entries.

    Expected format per job (jobs separated by blank lines):
        Job Title — Company (Start – End)
        • Bullet one
        • Bullet two

    Header dates are found by EXPERIENCE_DATE_PATTERNS (parenthesized range,
    then separator + month/year). Only bullet lines become bullets; other
    body lines are ignored.

    Args:
        text: Raw experience field

    Returns:
        One JobEntry per block, in input order
    """
    jobs = []
    for lines in split_blocks(text):
        header = lines[0]
        dates, without_dates = extract_header_date(header, EXPERIENCE_DATE_PATTERNS)
        title, company = split_title_company(without_dates)

        if not dates:
            _log_debug(f"No date range found in experience header: '{header}'")
        if not company:
            _log_debug(f"No title/company separator in experience header: '{header}'")

        bullets = tuple(strip_bullet(line) for line in lines[1:] if is_bullet(line))

        jobs.append(
            JobEntry(
                title=title or without_dates or header,
                company=company,
                dates=dates,
                bullets=bullets,
            )
        )

    log_parse_result("experience", text, len(jobs))
    return jobs


def parse_education(text: Optional[str]) -> List[EducationEntry]:
    """
    Parse the education field into education entries.

    Expected format per entry:
        Degree, Major — University Name (2018 – 2022)
        GPA / honours / other details

    Header dates are found by EDUCATION_DATE_PATTERNS (parenthesized range,
    then a bare YYYY-YYYY / YYYY-Present / YYYY-Ongoing range). Every line after
    the header, bullet or not, is joined into extra.

    Args:
        text: Raw education field

    Returns:
        One EducationEntry per block, in input order
    """
    entries = []
    for lines in split_blocks(text):
        header = lines[0]
        dates, without_dates = extract_header_date(header, EDUCATION_DATE_PATTERNS)
        degree, institution = split_title_company(without_dates)

        entries.append(
            EducationEntry(
                degree=degree or without_dates or header,
                institution=institution,
                dates=dates,
                extra=" ".join(lines[1:]),
            )
        )

    log_parse_result("education", text, len(entries))
    return entries


def parse_projects(text: Optional[str]) -> List[ProjectEntry]:
    """
    Parse the projects field into project entries.

    Expected format per project:
        Project Name | Tech Stack | Mar 2024
        • Description line
        Tech: ...
        Live: ...
        GitHub: ...

    The header date comes from PROJECT_DATE_PATTERNS; the name is what remains
    before the first pipe. Labeled body lines fill tech/live/github; all other
    lines are bullet-stripped and joined into the description.

    Args:
        text: Raw projects field

    Returns:
        One ProjectEntry per block, in input order
    """
    projects = []
    for lines in split_blocks(text):
        header = lines[0]
        date, without_date = extract_header_date(header, PROJECT_DATE_PATTERNS)
        name = DatePatterns.TRAILING_PIPE_SUFFIX.sub("", without_date).strip()

        labeled = {}
        description_lines = []
        for line in lines[1:]:
            for pattern, field_name in PROJECT_LABEL_FIELDS:
                match = pattern.match(line)
                if match:
                    labeled[field_name] = line[match.end():].strip()
                    break
            else:
                description_lines.append(strip_bullet(line))

        projects.append(
            ProjectEntry(
                name=name or header,
                date=date,
                tech=labeled.get("tech", ""),
                description=" ".join(d for d in description_lines if d),
                live_url=labeled.get("live_url") or None,
                github_url=labeled.get("github_url") or None,
            )
        )

    log_parse_result("projects", text, len(projects))
    return projects


def parse_skills(text: Optional[str]) -> List[SkillGroup]:
    """
    Parse "Category: skill1, skill2" lines into skill groups.

    Lines are split on single newlines (no blank-line blocks). Text before the
    first colon is the category; a line without a colon goes entirely into
    skills under DEFAULT_SKILL_CATEGORY.

    Args:
        text: Raw skills field

    Returns:
        One SkillGroup per non-empty line

    Example:
        >>> parse_skills("Languages: Go, Rust")
        [SkillGroup(category='Languages', skills='Go, Rust')]
    """
    groups = []
    for line in non_empty_lines(text):
        category, colon, skills = line.partition(":")
        if not colon:
            groups.append(SkillGroup(category=DEFAULT_SKILL_CATEGORY, skills=line))
        else:
            groups.append(
                SkillGroup(
                    category=category.strip() or DEFAULT_SKILL_CATEGORY,
                    skills=skills.strip(),
                )
            )

    log_parse_result("skills", text, len(groups))
    return groups
