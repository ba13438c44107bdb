"""
Default values for generated resume documents.

Provides the placeholders and caps used by document_assembler.py when a
section is empty or its free text could not be parsed into records. These
keep every section structurally complete in the generated LaTeX.
"""

from resumetex.contexts.intake.resume_fields import (
    EducationEntry,
    JobEntry,
    ProjectEntry,
    SkillGroup,
)

DEFAULT_FULL_NAME = "Your Name"

# Rendered when the raw field is empty
PLACEHOLDER_EDUCATION = EducationEntry(
    degree="Degree",
    institution="Your University",
    dates="Year",
)
PLACEHOLDER_EXPERIENCE = JobEntry(
    title="Role",
    company="Company Name",
    dates="Dates",
    bullets=("Experience details",),
)
PLACEHOLDER_SKILLS = SkillGroup(category="Skills", skills="")
PLACEHOLDER_PROJECT = ProjectEntry(name="Project Name", description="Project details")

# Character caps for the raw-text record used when parsing yields nothing
TRUNCATION_CAPS = {
    "education": 80,
    "skills": 200,
    "experience": 200,
    "projects": 400,
}

# Sections always rendered (with placeholder records when necessary)
RECORD_SECTIONS = ("education", "skills", "experience", "projects")

# Fixed order after the heading; optional sections are skipped when absent
SECTION_ORDER = (
    "target_banner",
    "summary",
    "education",
    "skills",
    "experience",
    "projects",
    "certifications",
)

# Heading rows: (left cell, right cell) contact fields
CONTACT_ROWS = (
    ("linkedin", "mobile"),
    ("github", "email"),
    ("portfolio", None),
)
