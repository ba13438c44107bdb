"""Unit tests for the resumetex command line interface."""

import pytest
from typer.testing import CliRunner

from conftest import FIXTURES_PATH, LATEX_ERROR_HTML, make_response
from resumetex.cli import app

runner = CliRunner()

FULL_RESUME = str(FIXTURES_PATH / "full_resume.yaml")


@pytest.mark.unit
def test_no_command_shows_help():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "latex" in result.output
    assert "render" in result.output


@pytest.mark.unit
def test_latex_command_writes_source(tmp_path):
    result = runner.invoke(
        app, ["latex", FULL_RESUME, "--job-title", "Data Engineer", "--output-dir", str(tmp_path)]
    )

    assert result.exit_code == 0, result.output
    tex_path = tmp_path / "jane-q-doe-optimized.tex"
    source = tex_path.read_text(encoding="utf-8")
    assert source.startswith("\\documentclass")
    assert "Applying for: Data Engineer" in source


@pytest.mark.unit
def test_latex_command_accepts_json(tmp_path):
    fields_file = tmp_path / "fields.json"
    fields_file.write_text('{"fullName": "Ada Lovelace", "skills": "Math: Analysis"}', encoding="utf-8")

    result = runner.invoke(app, ["latex", str(fields_file), "-o", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "\\resumeSubItem{Math}{Analysis}" in (tmp_path / "ada-lovelace-optimized.tex").read_text(
        encoding="utf-8"
    )


@pytest.mark.unit
def test_latex_command_rejects_non_mapping(tmp_path):
    fields_file = tmp_path / "fields.yaml"
    fields_file.write_text("- just\n- a list\n", encoding="utf-8")

    result = runner.invoke(app, ["latex", str(fields_file), "-o", str(tmp_path)])
    assert result.exit_code == 1


@pytest.mark.unit
def test_latex_command_missing_file(tmp_path):
    result = runner.invoke(app, ["latex", str(tmp_path / "missing.yaml")])
    assert result.exit_code != 0


@pytest.mark.unit
def test_render_command_success(fake_service, restore_logger, tmp_path):
    result = runner.invoke(
        app,
        ["render", FULL_RESUME, "-o", str(tmp_path / "out"), "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 0, result.output
    assert "Compilation succeeded" in result.output
    assert (tmp_path / "out" / "jane-q-doe-optimized.pdf").exists()
    assert (tmp_path / "logs" / "render.log").exists()


@pytest.mark.unit
def test_render_command_fallback(fake_service, restore_logger, tmp_path):
    fake_service.response = make_response(
        content=LATEX_ERROR_HTML.encode("utf-8"), content_type="text/html"
    )

    result = runner.invoke(
        app,
        ["render", FULL_RESUME, "-o", str(tmp_path / "out"), "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 1
    assert "Undefined control sequence" in result.output
    assert (tmp_path / "out" / "jane-q-doe-optimized.tex").exists()
    assert not (tmp_path / "out" / "jane-q-doe-optimized.pdf").exists()
