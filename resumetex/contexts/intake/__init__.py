"""
Intake Context

Responsibilities:
- Accepts the free-text resume fields supplied by the editor/form collaborator
- Parses each section into structured records with best-effort heuristics
- Extracts contact details from a single free-text contact line

Owns: ResumeFields and the section record types, section parsing heuristics
Never: Escapes text for LaTeX or decides document layout
"""

from resumetex.contexts.intake.contact_parser import parse_contact
from resumetex.contexts.intake.resume_fields import (
    ContactInfo,
    EducationEntry,
    JobEntry,
    ProjectEntry,
    ResumeFields,
    SkillGroup,
)
from resumetex.contexts.intake.section_parser import (
    parse_education,
    parse_experience,
    parse_projects,
    parse_skills,
)

__all__ = [
    # Data structures
    "ResumeFields",
    "ContactInfo",
    "JobEntry",
    "EducationEntry",
    "ProjectEntry",
    "SkillGroup",
    # Parsers
    "parse_contact",
    "parse_experience",
    "parse_education",
    "parse_projects",
    "parse_skills",
]
