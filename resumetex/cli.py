"""
Resume LaTeX CLI

Generates LaTeX resumes from free-text fields and compiles them to PDF through
the remote compilation service.

Commands:
    latex  - Write the LaTeX source only (no network)
    render - Compile to PDF, falling back to the .tex source on failure

FIELDS_FILE is a YAML (or JSON) mapping of resume fields, e.g.:

    fullName: Jane Doe
    contact: jane@x.com | linkedin.com/in/janedoe
    experience: |
      Software Engineer — Acme Corp (Jan 2023 – Present)
      • Led migration

Examples:\n

    resumetex latex fields.yaml --output-dir outs/

    resumetex render fields.yaml --job-title "Data Engineer" --company Globex
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from resumetex.contexts.intake.resume_fields import ResumeFields
from resumetex.contexts.rendering import RenderedArtifact, load_service_config, render_resume
from resumetex.contexts.rendering.artifacts import artifact_basename
from resumetex.contexts.rendering.logger import setup_rendering_logger
from resumetex.contexts.templating import generate_latex_resume
from resumetex.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Generate LaTeX resumes from free-text fields and compile them to PDF",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def load_fields(fields_file: Path) -> ResumeFields:
    """Load a YAML/JSON mapping of resume fields."""
    data = OmegaConf.to_container(OmegaConf.load(fields_file), resolve=True)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping of resume fields in {fields_file}")
    return ResumeFields.from_mapping(data)


FieldsFileArg = Annotated[
    Path,
    typer.Argument(help="YAML or JSON file with resume fields", exists=True, dir_okay=False),
]
JobTitleOpt = Annotated[
    Optional[str], typer.Option("--job-title", "-j", help="Target job title for the banner")
]
CompanyOpt = Annotated[
    Optional[str], typer.Option("--company", "-c", help="Target company for the banner")
]
OutputDirOpt = Annotated[
    Path, typer.Option("--output-dir", "-o", help="Directory for the generated file")
]


@app.command("latex")
def latex_command(
    fields_file: FieldsFileArg,
    job_title: JobTitleOpt = None,
    company: CompanyOpt = None,
    output_dir: OutputDirOpt = Path("."),
):
    """
    Write the LaTeX source of a resume without compiling it.

    Examples:\n

        $ resumetex latex fields.yaml

        $ resumetex latex fields.yaml -j "Data Engineer" -c Globex -o outs/
    """
    try:
        fields = load_fields(fields_file)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    source = generate_latex_resume(fields, job_title, company)

    output_dir.mkdir(parents=True, exist_ok=True)
    tex_path = output_dir / f"{artifact_basename(fields.full_name)}.tex"
    tex_path.write_text(source, encoding="utf-8")

    typer.secho("✓ LaTeX source generated", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Source: {tex_path}")


@app.command("render")
def render_command(
    fields_file: FieldsFileArg,
    job_title: JobTitleOpt = None,
    company: CompanyOpt = None,
    output_dir: OutputDirOpt = Path("."),
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for render.log (default: LOGS_PATH/render_<timestamp>)"),
    ] = None,
):
    """
    Compile a resume to PDF via the remote LaTeX service.

    On compilation failure the LaTeX source is written instead so it can be
    compiled manually (e.g., on overleaf.com). Exits 1 in that case.

    Examples:\n

        $ resumetex render fields.yaml

        $ resumetex render fields.yaml --job-title "Data Engineer" --company Globex
    """
    try:
        fields = load_fields(fields_file)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    config = load_service_config()
    if log_dir is None:
        log_dir = LOGS_PATH / f"render_{now()}"
    log_file = setup_rendering_logger(log_dir, service_url=config.url)

    typer.secho(f"\nRendering: {fields.full_name or 'resume'}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Service: {config.url}")
    typer.echo("")

    result = render_resume(fields, job_title, company, config=config)
    path = result.write(output_dir)

    typer.echo("")
    if isinstance(result, RenderedArtifact):
        typer.secho("✓ Compilation succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  PDF: {path}")
        typer.echo(f"  Pages: {result.page_count}")
    else:
        typer.secho("✗ Compilation failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  Error: {result.error}", fg=typer.colors.RED)
        typer.echo(f"  LaTeX source written instead: {path}")
        typer.echo("  Paste it into overleaf.com to get the PDF.")

    typer.echo(f"  Log: {log_file}")
    typer.echo("")

    raise typer.Exit(code=0 if isinstance(result, RenderedArtifact) else 1)


if __name__ == "__main__":
    app()
