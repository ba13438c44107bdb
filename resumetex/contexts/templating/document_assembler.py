"""
Document Assembler

Composes parsed resume records into one complete LaTeX document source.

Parsing of every section completes before any template is rendered. All free
text is escaped here (through the `latex` template filter), never during
parsing, so the intake patterns always see what the user typed.
"""

from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from resumetex.contexts.intake.contact_parser import parse_contact
from resumetex.contexts.intake.resume_fields import ContactInfo, ResumeFields
from resumetex.contexts.intake.section_parser import (
    parse_education,
    parse_experience,
    parse_projects,
    parse_skills,
)
from resumetex.contexts.templating.defaults import (
    CONTACT_ROWS,
    DEFAULT_FULL_NAME,
    PLACEHOLDER_EDUCATION,
    PLACEHOLDER_EXPERIENCE,
    PLACEHOLDER_PROJECT,
    PLACEHOLDER_SKILLS,
    SECTION_ORDER,
    TRUNCATION_CAPS,
)
from resumetex.contexts.templating.logger import (
    _log_debug,
    log_document_generated,
    log_section_fallback,
)
from resumetex.contexts.templating.registries import TemplateRegistry, get_default_registry
from resumetex.utils.text_processing import (
    non_empty_lines,
    set_max_consecutive_blank_lines,
    truncate,
)


@dataclass(frozen=True)
class ContactCell:
    """One labeled cell of the heading table (text is escaped by the template)."""

    label: str
    text: str
    url: Optional[str] = None


@dataclass(frozen=True)
class ContactRow:
    left: Optional[ContactCell] = None
    right: Optional[ContactCell] = None


@dataclass(frozen=True)
class ParsedResume:
    """
    Every section of a resume, parsed and ready for rendering.

    Record sections always hold at least one record (parsed, raw-text fallback,
    or placeholder). Optional text sections are None when absent.
    """

    full_name: str
    contact: ContactInfo
    summary: Optional[str]
    education: list
    skills: list
    experience: list
    projects: list
    certifications: List[str]


def records_or_fallback(
    section: str,
    raw_text: Optional[str],
    parser: Callable[[Optional[str]], list],
    from_raw_text: Callable[[str], object],
    placeholder: object,
) -> list:
    """
    Parse a section, degrading to a single record when parsing yields nothing.

    - Parsed records are returned as-is
    - Non-empty raw text with no records: one record built from the raw text,
      truncated to the section's cap, so nothing typed is silently dropped
    - Empty raw text: the section's placeholder record

    Args:
        section: Section name (key of TRUNCATION_CAPS)
        raw_text: Raw field text
        parser: Section parser
        from_raw_text: Builds the fallback record from truncated raw text
        placeholder: Record used when the field is empty

    Returns:
        Non-empty list of records
    """
    records = parser(raw_text)
    if records:
        return records

    if raw_text and raw_text.strip():
        cap = TRUNCATION_CAPS[section]
        log_section_fallback(section, len(raw_text), cap)
        return [from_raw_text(truncate(raw_text.strip(), cap))]

    _log_debug(f"{section}: empty field, using placeholder")
    return [placeholder]


def parse_resume(fields: ResumeFields) -> ParsedResume:
    """Run every section parser over the input fields."""
    summary = fields.summary.strip() if fields.summary and fields.summary.strip() else None

    return ParsedResume(
        full_name=(fields.full_name or "").strip() or DEFAULT_FULL_NAME,
        contact=parse_contact(fields.contact),
        summary=summary,
        education=records_or_fallback(
            "education",
            fields.education,
            parse_education,
            lambda text: replace(PLACEHOLDER_EDUCATION, degree=text),
            PLACEHOLDER_EDUCATION,
        ),
        skills=records_or_fallback(
            "skills",
            fields.skills,
            parse_skills,
            lambda text: replace(PLACEHOLDER_SKILLS, skills=text),
            PLACEHOLDER_SKILLS,
        ),
        experience=records_or_fallback(
            "experience",
            fields.experience,
            parse_experience,
            lambda text: replace(PLACEHOLDER_EXPERIENCE, bullets=(text,)),
            PLACEHOLDER_EXPERIENCE,
        ),
        projects=records_or_fallback(
            "projects",
            fields.projects,
            parse_projects,
            lambda text: replace(PLACEHOLDER_PROJECT, description=text),
            PLACEHOLDER_PROJECT,
        ),
        certifications=non_empty_lines(fields.certifications),
    )


def build_contact_cells(contact: ContactInfo) -> dict:
    """Map each present contact field to its heading cell."""
    cells = {}
    if contact.linkedin_handle:
        cells["linkedin"] = ContactCell(
            label="LinkedIn",
            text=contact.linkedin_handle,
            url=f"https://linkedin.com/in/{contact.linkedin_handle}",
        )
    if contact.phone:
        cells["mobile"] = ContactCell(label="Mobile", text=contact.phone)
    if contact.github_handle:
        cells["github"] = ContactCell(
            label="GitHub",
            text=contact.github_handle,
            url=f"https://github.com/{contact.github_handle}",
        )
    if contact.email:
        cells["email"] = ContactCell(
            label="Email", text=contact.email, url=f"mailto:{contact.email}"
        )
    if contact.portfolio_domain:
        cells["portfolio"] = ContactCell(
            label="Portfolio",
            text=contact.portfolio_domain,
            url=f"https://{contact.portfolio_domain}",
        )
    return cells


def build_contact_rows(contact: ContactInfo) -> List[ContactRow]:
    """
    Arrange contact cells into heading rows.

    Rows follow CONTACT_ROWS; a row is emitted only when at least one of its
    cells is present.
    """
    cells = build_contact_cells(contact)
    rows = []
    for left_key, right_key in CONTACT_ROWS:
        left = cells.get(left_key)
        right = cells.get(right_key) if right_key else None
        if left or right:
            rows.append(ContactRow(left=left, right=right))
    return rows


class LatexResumeAssembler:
    """Renders ResumeFields into a complete LaTeX document."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or get_default_registry()

    def _render(self, type_name: str, **context) -> str:
        return self.template_registry.get_template(type_name).render(**context).strip()

    def render_sections(
        self,
        parsed: ParsedResume,
        job_title: Optional[str] = None,
        company_name: Optional[str] = None,
    ) -> List[tuple]:
        """
        Render every present section in SECTION_ORDER.

        Returns:
            List of (section_name, latex) pairs; absent optional sections
            (banner, summary, certifications) are left out entirely
        """
        job_title = (job_title or "").strip()
        company_name = (company_name or "").strip()

        renderers = {
            "target_banner": lambda: (
                self._render(
                    "target_banner", job_title=job_title, company_name=company_name
                )
                if job_title or company_name
                else None
            ),
            "summary": lambda: (
                self._render("summary", summary=parsed.summary) if parsed.summary else None
            ),
            "education": lambda: self._render("education", entries=parsed.education),
            "skills": lambda: self._render("skills", groups=parsed.skills),
            "experience": lambda: self._render("experience", jobs=parsed.experience),
            "projects": lambda: self._render("projects", projects=parsed.projects),
            "certifications": lambda: (
                self._render("certifications", lines=parsed.certifications)
                if parsed.certifications
                else None
            ),
        }

        sections = []
        for name in SECTION_ORDER:
            latex = renderers[name]()
            if latex is None:
                _log_debug(f"Omitting section: {name}")
                continue
            sections.append((name, latex))
        return sections

    def render_heading(self, parsed: ParsedResume) -> str:
        template = self.template_registry.get_structure_template("heading")
        return template.render(
            name=parsed.full_name, rows=build_contact_rows(parsed.contact)
        ).strip()

    def generate_document(
        self,
        fields: ResumeFields,
        job_title: Optional[str] = None,
        company_name: Optional[str] = None,
    ) -> str:
        """
        Generate complete LaTeX document from free-text resume fields.

        Never raises on partial or empty input: record sections fall back to
        raw text or placeholders, optional sections are omitted.

        Args:
            fields: Free-text resume fields
            job_title: Target role for the banner line (optional)
            company_name: Target company for the banner line (optional)

        Returns:
            Complete LaTeX document string
        """
        parsed = parse_resume(fields)
        sections = self.render_sections(parsed, job_title, company_name)

        template = self.template_registry.get_structure_template("document")
        document = template.render(
            preamble=self.template_registry.preamble.rstrip(),
            heading=self.render_heading(parsed),
            sections=[latex for _, latex in sections],
        )
        document = set_max_consecutive_blank_lines(document, max_consecutive=1)

        log_document_generated(parsed.full_name, [name for name, _ in sections], len(document))
        return document


def generate_latex_resume(
    fields: ResumeFields,
    job_title: Optional[str] = None,
    company_name: Optional[str] = None,
) -> str:
    """
    Generate a LaTeX resume with the default template registry.

    Example:
        >>> source = generate_latex_resume(ResumeFields(full_name="Jane Doe"))
        >>> source.startswith("\\\\documentclass")
        True
    """
    return LatexResumeAssembler().generate_document(fields, job_title, company_name)
