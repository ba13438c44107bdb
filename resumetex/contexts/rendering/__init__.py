"""
Rendering Context

Responsibilities:
- Submits LaTeX source to the remote compilation service
- Interprets success, transport failure and compile diagnostics
- Returns the PDF, or the LaTeX source as a fallback artifact

Owns: Remote compilation, service configuration, download artifacts
Never: Modifies document content
"""

from resumetex.contexts.rendering.artifacts import (
    FallbackSource,
    RenderedArtifact,
    RenderResult,
    artifact_basename,
    render_resume,
)
from resumetex.contexts.rendering.compiler import (
    CompilationState,
    LatexServiceClient,
    compile_latex_remote,
    extract_diagnostic,
)
from resumetex.contexts.rendering.exceptions import (
    CompilationDiagnosticError,
    CompilationError,
    CompilationTransportError,
)
from resumetex.contexts.rendering.service_config import CompileServiceConfig, load_service_config

__all__ = [
    # Top-level generation
    "render_resume",
    "RenderResult",
    "RenderedArtifact",
    "FallbackSource",
    "artifact_basename",
    # Compilation
    "LatexServiceClient",
    "CompilationState",
    "compile_latex_remote",
    "extract_diagnostic",
    # Errors
    "CompilationError",
    "CompilationTransportError",
    "CompilationDiagnosticError",
    # Configuration
    "CompileServiceConfig",
    "load_service_config",
]
