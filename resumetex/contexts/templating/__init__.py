"""
Templating Context

Responsibilities:
- Escapes free text for safe embedding in LaTeX
- Owns the static preamble and the per-section Jinja2 templates
- Assembles parsed records into one complete document source
- Substitutes placeholders or truncated raw text for unparsable sections

Owns: LaTeX escaping, template system, section order, document assembly
Never: Talks to the compilation service
"""

from resumetex.contexts.templating.document_assembler import (
    LatexResumeAssembler,
    generate_latex_resume,
)
from resumetex.contexts.templating.latex_escape import escape_latex, escape_url, unescape_latex
from resumetex.contexts.templating.registries import TemplateRegistry, get_default_registry

__all__ = [
    # Escaping
    "escape_latex",
    "unescape_latex",
    "escape_url",
    # Templates
    "TemplateRegistry",
    "get_default_registry",
    # Assembly
    "LatexResumeAssembler",
    "generate_latex_resume",
]
