"""
Resume Field Data Structures

Defines the input aggregate (ResumeFields) and the structured records the
section parsers produce from it. All records are immutable and are built
fresh for every document generation.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Tuple

# Accepted snake_case aliases for the camelCase keys used by the editor
FIELD_ALIASES = {
    "fullName": "full_name",
    "full_name": "full_name",
    "name": "full_name",
}


@dataclass(frozen=True)
class ContactInfo:
    """
    Contact details extracted from one free-text contact string.

    Every field is independently optional; None means the pattern did not match.

    Attributes:
        email: Email address
        phone: Phone number with whitespace removed
        linkedin_handle: Handle from linkedin.com/in/<handle>
        github_handle: Handle from github.com/<handle>
        portfolio_domain: Bare personal domain (e.g., janedoe.dev)
    """

    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin_handle: Optional[str] = None
    github_handle: Optional[str] = None
    portfolio_domain: Optional[str] = None

    def is_empty(self) -> bool:
        """True when no contact field could be extracted."""
        return not any(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class JobEntry:
    """
    One work experience entry.

    Attributes:
        title: Job title (never empty for a non-empty source block)
        company: Employer (empty when the header has no separator)
        dates: Date range text as written (empty when none found)
        bullets: Bullet texts with their glyphs stripped
    """

    title: str
    company: str = ""
    dates: str = ""
    bullets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EducationEntry:
    """
    One education entry.

    Attributes:
        degree: Degree/programme text
        institution: School name (may be empty)
        dates: Date range text (may be empty)
        extra: All lines after the header joined with single spaces
    """

    degree: str
    institution: str = ""
    dates: str = ""
    extra: str = ""


@dataclass(frozen=True)
class ProjectEntry:
    """
    One project entry.

    Attributes:
        name: Project name from the header line
        date: Month/year text (may be empty)
        tech: Technology list from a "Tech:" line
        description: Unlabeled body lines, bullet-stripped and space-joined
        live_url: URL from a "Live:" line
        github_url: URL from a "GitHub:" line
    """

    name: str
    date: str = ""
    tech: str = ""
    description: str = ""
    live_url: Optional[str] = None
    github_url: Optional[str] = None


@dataclass(frozen=True)
class SkillGroup:
    """
    One "Category: skill, skill" line.

    Attributes:
        category: Label before the first colon, or the default category
        skills: Raw comma-separated list, kept verbatim
    """

    category: str
    skills: str


@dataclass(frozen=True)
class ResumeFields:
    """
    Read-only input aggregate of free-text resume blocks.

    Every attribute is an optional free-text block as typed by the user
    (or returned by the AI content collaborator).
    """

    full_name: Optional[str] = None
    contact: Optional[str] = None
    summary: Optional[str] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[str] = None
    projects: Optional[str] = None
    certifications: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ResumeFields":
        """
        Build ResumeFields from a plain key/value mapping.

        Accepts the editor's camelCase keys (fullName) as well as snake_case keys.
        Unknown keys are ignored and non-string values are converted with str().

        Args:
            data: Mapping of field name to free text

        Returns:
            New ResumeFields instance

        Example:
            >>> ResumeFields.from_mapping({"fullName": "Jane Doe", "skills": "Go"}).full_name
            'Jane Doe'
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = FIELD_ALIASES.get(key, key)
            if name not in known or value is None:
                continue
            values[name] = value if isinstance(value, str) else str(value)
        return cls(**values)
