"""
Templating Registries

Loads and caches the Jinja2 templates and the static LaTeX preamble used to
assemble resume documents.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from resumetex.contexts.templating.latex_escape import escape_latex, escape_url

load_dotenv()
TEMPLATE_PATH = Path(
    os.getenv("RESUMETEX_TEMPLATE_PATH", str(Path(__file__).parent / "template"))
)


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX generation.

    Layout under the template root:
    - structure/preamble.tex: static preamble and resume macros (not a template)
    - structure/{name}.tex.jinja: document skeleton and heading
    - types/{section}/template.tex.jinja: one template per resume section

    Templates use custom delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>

    Two filters are registered: `latex` (escape_latex) and `latex_url` (escape_url).
    """

    def __init__(self, template_root: Path = None):
        """
        Initialize the template registry.

        Args:
            template_root: Base path of the template tree. Defaults to
                           RESUMETEX_TEMPLATE_PATH from environment, else the
                           template/ directory shipped with this package
        """
        if template_root is None:
            template_root = TEMPLATE_PATH

        self.template_root = Path(template_root)
        self._cache: Dict[str, Template] = {}
        self._preamble: Optional[str] = None

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_root)),
            # Catches silent failures
            undefined=StrictUndefined,
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Preserve whitespace (important for LaTeX)
            trim_blocks=False,
            lstrip_blocks=False,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self.env.filters["latex"] = escape_latex
        self.env.filters["latex_url"] = escape_url

    def get_template(self, type_name: str) -> Template:
        """
        Get a section template by type name, loading and caching it if necessary.

        Args:
            type_name: Name of the section type (e.g., 'experience')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        return self._load(f"types/{type_name}/template.tex.jinja")

    def get_structure_template(self, name: str) -> Template:
        """
        Get a document structure template (e.g., 'document', 'heading').

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        return self._load(f"structure/{name}.tex.jinja")

    def _load(self, relative_path: str) -> Template:
        if relative_path in self._cache:
            return self._cache[relative_path]

        try:
            template = self.env.get_template(relative_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found at {self.template_root / relative_path}"
            ) from e

        self._cache[relative_path] = template
        return template

    @property
    def preamble(self) -> str:
        """Static LaTeX preamble, read from disk once per registry."""
        if self._preamble is None:
            self._preamble = (self.template_root / "structure" / "preamble.tex").read_text(
                encoding="utf-8"
            )
        return self._preamble

    def get_template_path(self, type_name: str) -> Path:
        """
        Get the file path for a section type's template.

        Args:
            type_name: Name of the section type (e.g., 'skills')

        Returns:
            Path to template file
        """
        return self.template_root / "types" / type_name / "template.tex.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, type_name: str) -> bool:
        """
        Check if a section template is in the cache.

        Args:
            type_name: Name of the section type

        Returns:
            True if cached, False otherwise
        """
        return f"types/{type_name}/template.tex.jinja" in self._cache


@lru_cache(maxsize=None)
def get_default_registry() -> TemplateRegistry:
    """Process-wide registry over the packaged templates, created on first use."""
    return TemplateRegistry()
