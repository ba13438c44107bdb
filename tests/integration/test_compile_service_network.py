"""
Integration tests against the real remote compilation service.

Skipped unless RESUMETEX_NETWORK_TESTS=1.
"""

import os

import pytest

from conftest import load_fixture_fields
from resumetex.contexts.rendering import (
    CompilationDiagnosticError,
    RenderedArtifact,
    compile_latex_remote,
    render_resume,
)

skip_without_network = pytest.mark.skipif(
    os.getenv("RESUMETEX_NETWORK_TESTS") != "1",
    reason="set RESUMETEX_NETWORK_TESTS=1 to call the real compilation service",
)


@pytest.mark.integration
@pytest.mark.network
@skip_without_network
def test_full_resume_compiles_to_pdf():
    result = render_resume(load_fixture_fields("full_resume"), "Data Engineer", "Globex")

    assert isinstance(result, RenderedArtifact), getattr(result, "error", None)
    assert result.content.startswith(b"%PDF")
    assert result.page_count >= 1


@pytest.mark.integration
@pytest.mark.network
@skip_without_network
def test_broken_source_reports_diagnostic():
    broken = "\\documentclass{article}\n\\begin{document}\n\\undefinedcommand\n\\end{document}\n"

    with pytest.raises(CompilationDiagnosticError) as exc_info:
        compile_latex_remote(broken)

    assert exc_info.value.diagnostic is None or exc_info.value.diagnostic.startswith("!")
