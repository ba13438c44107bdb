"""
Rendered Artifacts

Top-level generation operation: assemble the LaTeX source, compile it
remotely, and return either the PDF or the source itself for manual
compilation. The fallback is a result variant, not an exception, so callers
always handle both outcomes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from resumetex.contexts.intake.resume_fields import ResumeFields
from resumetex.contexts.rendering.compiler import LatexServiceClient
from resumetex.contexts.rendering.exceptions import CompilationDiagnosticError, CompilationError
from resumetex.contexts.rendering.logger import _log_success, log_fallback
from resumetex.contexts.rendering.service_config import CompileServiceConfig
from resumetex.contexts.templating.document_assembler import generate_latex_resume
from resumetex.utils.pdf_processing import page_count
from resumetex.utils.text_processing import slugify_name

# Distinguishes generated downloads from the user's own files
ARTIFACT_SUFFIX = "-optimized"


def artifact_basename(full_name: Optional[str]) -> str:
    """
    Download basename derived from the candidate's name.

    Example:
        >>> artifact_basename("Jane Doe")
        'jane-doe-optimized'
        >>> artifact_basename(None)
        'resume-optimized'
    """
    return f"{slugify_name(full_name)}{ARTIFACT_SUFFIX}"


@dataclass(frozen=True)
class RenderedArtifact:
    """
    Compiled PDF ready for download.

    Attributes:
        filename: Download name (<name>-optimized.pdf)
        content: PDF bytes
        source: LaTeX source the PDF was compiled from
        page_count: Number of pages (None if the PDF could not be read)
    """

    filename: str
    content: bytes
    source: str
    page_count: Optional[int] = None
    media_type: str = "application/pdf"

    def write(self, output_dir: Path) -> Path:
        """Write the PDF into output_dir and return its path."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / self.filename
        path.write_bytes(self.content)
        return path


@dataclass(frozen=True)
class FallbackSource:
    """
    LaTeX source offered for manual compilation after rendering failed.

    Attributes:
        filename: Download name (<name>-optimized.tex)
        source: Complete LaTeX document source
        error: The compilation failure that triggered the fallback
    """

    filename: str
    source: str
    error: CompilationError
    media_type: str = "text/plain"

    @property
    def diagnostic(self) -> Optional[str]:
        """LaTeX error line reported by the service, if any."""
        if isinstance(self.error, CompilationDiagnosticError):
            return self.error.diagnostic
        return None

    def write(self, output_dir: Path) -> Path:
        """Write the .tex source into output_dir and return its path."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / self.filename
        path.write_text(self.source, encoding="utf-8")
        return path


RenderResult = Union[RenderedArtifact, FallbackSource]


def render_resume(
    fields: ResumeFields,
    job_title: Optional[str] = None,
    company_name: Optional[str] = None,
    config: CompileServiceConfig = None,
    client: LatexServiceClient = None,
) -> RenderResult:
    """
    Generate a resume document and try to compile it to PDF.

    Parsing and assembly finish before the single compilation request is sent.
    Only compilation failures are turned into a FallbackSource; any other error
    propagates.

    Args:
        fields: Free-text resume fields
        job_title: Target role for the banner line (optional)
        company_name: Target company for the banner line (optional)
        config: Service settings (default: loaded from compile_service.yaml)
        client: Unused single-attempt client (default: a new LatexServiceClient)

    Returns:
        RenderedArtifact on success, FallbackSource when compilation failed
    """
    source = generate_latex_resume(fields, job_title, company_name)
    basename = artifact_basename(fields.full_name)

    if client is None:
        client = LatexServiceClient(config)

    try:
        pdf_bytes = client.compile(source)
    except CompilationError as e:
        fallback = FallbackSource(filename=f"{basename}.tex", source=source, error=e)
        log_fallback(fallback.filename, e)
        return fallback

    artifact = RenderedArtifact(
        filename=f"{basename}.pdf",
        content=pdf_bytes,
        source=source,
        page_count=page_count(pdf_bytes),
    )
    _log_success(f"Rendered {artifact.filename} ({artifact.page_count} page(s))")
    return artifact
