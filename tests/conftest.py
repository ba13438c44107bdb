"""Shared fixtures: fixture resumes and a fake compilation service."""

import sys
from io import BytesIO
from pathlib import Path

import pytest
import requests
from loguru import logger
from omegaconf import OmegaConf
from PyPDF2 import PdfWriter
from requests.structures import CaseInsensitiveDict

from resumetex.contexts.intake.resume_fields import ResumeFields
from resumetex.contexts.rendering.service_config import CompileServiceConfig

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def make_pdf_bytes(num_pages: int = 1) -> bytes:
    """Blank PDF with the requested number of pages."""
    writer = PdfWriter()
    for _ in range(num_pages):
        writer.add_blank_page(width=612, height=792)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


LATEX_ERROR_HTML = """<html><head><title>texlive.net</title></head><body>
<pre>
This is pdfTeX, Version 3.141592653
(./resume.tex
LaTeX2e &lt;2023-11-01&gt;
! Undefined control sequence.
l.42 \\resumeSubheadin
                      g
</pre>
</body></html>
"""


def load_fixture_fields(name: str) -> ResumeFields:
    """Load tests/fixtures/<name>.yaml into ResumeFields."""
    data = OmegaConf.to_container(OmegaConf.load(FIXTURES_PATH / f"{name}.yaml"), resolve=True)
    return ResumeFields.from_mapping(data)


def make_response(
    status_code: int = 200,
    content: bytes = b"",
    content_type: str = "application/pdf",
    reason: str = "OK",
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = content
    response.headers = CaseInsensitiveDict({"Content-Type": content_type})
    response.encoding = "utf-8"
    return response


class FakeCompileService:
    """Stand-in for requests.post that records submissions."""

    def __init__(self, response: requests.Response = None, error: Exception = None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, url, files=None, data=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "files": files, "data": data, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def service_config() -> CompileServiceConfig:
    return CompileServiceConfig(url="https://latex.invalid/compile", timeout_s=5)


@pytest.fixture
def fake_service(monkeypatch):
    """Install a FakeCompileService; configure it via .response / .error."""
    service = FakeCompileService(response=make_response(content=make_pdf_bytes()))
    monkeypatch.setattr(requests, "post", service)
    return service


@pytest.fixture
def full_fields() -> ResumeFields:
    return load_fixture_fields("full_resume")


@pytest.fixture
def restore_logger():
    """Reset loguru sinks after tests that call setup_logger."""
    yield
    logger.remove()
    logger.add(sys.stderr)
