"""
LaTeX Compilation Module

Compiles LaTeX source to PDF through a remote compilation service (texlive.net
by default). One request per attempt; no retries.
"""

import html
import re
import time
from enum import Enum
from typing import Optional

import requests

from resumetex.contexts.rendering.exceptions import (
    CompilationDiagnosticError,
    CompilationError,
    CompilationTransportError,
)
from resumetex.contexts.rendering.logger import (
    _log_debug,
    log_compilation_result,
    log_compilation_start,
)
from resumetex.contexts.rendering.service_config import CompileServiceConfig, load_service_config

# LaTeX error lines in the service log start with "!"
DIAGNOSTIC_LINE = re.compile(r"^\s*(!.*?)\s*$", re.MULTILINE)
HTML_TAG = re.compile(r"<[^>]+>")


class CompilationState(Enum):
    """Lifecycle of one compilation attempt: idle -> submitting -> succeeded | failed."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def extract_diagnostic(text: Optional[str]) -> Optional[str]:
    """
    Find the first LaTeX error line in a service error payload.

    HTML tags are stripped and entities unescaped before searching.

    Args:
        text: Error payload returned instead of a PDF

    Returns:
        The first line starting with "!" (stripped), or None

    Example:
        >>> extract_diagnostic("<pre>This is pdfTeX\\n! Undefined control sequence.\\n</pre>")
        '! Undefined control sequence.'
    """
    if not text:
        return None
    plain = html.unescape(HTML_TAG.sub("", text))
    match = DIAGNOSTIC_LINE.search(plain)
    return match.group(1) if match else None


class LatexServiceClient:
    """
    Client for a single compilation attempt against the remote service.

    The attempt moves through CompilationState; `state` holds the current
    value. A client is used for exactly one attempt.
    """

    def __init__(self, config: CompileServiceConfig = None):
        self.config = config or load_service_config()
        self.state = CompilationState.IDLE
        self.elapsed_s: Optional[float] = None

    def _build_form(self, source: str) -> tuple:
        files = {
            "filecontents[]": (
                self.config.source_filename,
                source.encode("utf-8"),
                "text/plain",
            )
        }
        data = {
            "filename[]": self.config.source_filename,
            "engine": self.config.engine,
            "return": self.config.output_format,
        }
        return files, data

    def _submit(self, source: str) -> bytes:
        files, data = self._build_form(source)
        try:
            response = requests.post(
                self.config.url, files=files, data=data, timeout=self.config.timeout_s
            )
        except requests.RequestException as e:
            raise CompilationTransportError(
                f"LaTeX compilation request failed: {e}", status_code=None
            ) from e

        if not response.ok:
            raise CompilationTransportError(
                f"LaTeX compilation failed: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )

        content_type = response.headers.get("content-type", "")
        _log_debug(f"Response content type: {content_type}")
        if f"application/{self.config.output_format}" not in content_type:
            raise CompilationDiagnosticError(extract_diagnostic(response.text))

        return response.content

    def compile(self, source: str) -> bytes:
        """
        Submit LaTeX source and return the rendered PDF bytes.

        Args:
            source: Complete LaTeX document source

        Returns:
            PDF bytes

        Raises:
            CompilationTransportError: Network failure, timeout or non-2xx status
            CompilationDiagnosticError: Service answered without a PDF
            RuntimeError: If this client was already used
        """
        if self.state is not CompilationState.IDLE:
            raise RuntimeError(f"Compilation client already used (state: {self.state.value})")

        log_compilation_start(self.config.url, self.config.engine, len(source))
        self.state = CompilationState.SUBMITTING
        start_time = time.time()

        try:
            pdf_bytes = self._submit(source)
        except CompilationError as e:
            self.state = CompilationState.FAILED
            self.elapsed_s = time.time() - start_time
            log_compilation_result(success=False, elapsed_time=self.elapsed_s, error=e)
            raise

        self.state = CompilationState.SUCCEEDED
        self.elapsed_s = time.time() - start_time
        log_compilation_result(
            success=True, elapsed_time=self.elapsed_s, pdf_size=len(pdf_bytes)
        )
        return pdf_bytes


def compile_latex_remote(source: str, config: CompileServiceConfig = None) -> bytes:
    """
    Compile LaTeX source to PDF bytes with a fresh single-attempt client.

    Raises:
        CompilationTransportError: Network failure, timeout or non-2xx status
        CompilationDiagnosticError: Service answered without a PDF
    """
    return LatexServiceClient(config).compile(source)
