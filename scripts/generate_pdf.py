#!/usr/bin/env python3
"""
Resume PDF Generation CLI

Generates resume PDFs from a stored profile and a completed resume JSON file,
lists available profiles and layouts, and serves the HTTP API.

Commands:
    generate - Render one resume PDF to disk
    profiles - List stored profiles
    layouts  - List available layouts
    serve    - Run the HTTP API with uvicorn

Examples:\n

    generate_pdf.py generate jane_doe content.json "Acme, Inc." "Senior Engineer"

    generate_pdf.py generate jane_doe content.json Acme Engineer --template modern

    generate_pdf.py profiles

    generate_pdf.py serve --port 8000
"""

import asyncio
import os
from pathlib import Path
from typing import Optional

import typer
import uvicorn
from dotenv import load_dotenv
from typing_extensions import Annotated

from press.contexts.delivery import GenerateRequest, generate_resume_pdf
from press.contexts.profiles import ProfileStore
from press.contexts.rendering import PlaywrightRasterizer
from press.contexts.templating import DEFAULT_LAYOUT, LayoutRegistry
from press.utils import PressError, now
from press.utils.logger import LOGS_PATH, setup_logger

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path(__file__).resolve().parents[1]))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", PROJECT_ROOT / "outs" / "results"))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(path.resolve().relative_to(PROJECT_ROOT))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Generate resume PDFs from stored profiles and completed resume JSON",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("generate")
def generate_command(
    profile: Annotated[str, typer.Argument(help="Profile identifier (file stem in the profiles directory)")],
    content_file: Annotated[
        Path,
        typer.Argument(help="File with the completed resume JSON", exists=True, dir_okay=False),
    ],
    company: Annotated[str, typer.Argument(help="Target company name")],
    role: Annotated[str, typer.Argument(help="Target role name")],
    template: Annotated[
        str,
        typer.Option("--template", "-t", help="Layout identifier (unknown values use the default)"),
    ] = DEFAULT_LAYOUT,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Directory for the PDF (default: RESULTS_PATH)"),
    ] = None,
):
    """
    Render one resume PDF to disk.

    Examples:\n

        $ generate_pdf.py generate jane_doe content.json Acme Engineer

        $ generate_pdf.py generate jane_doe content.json Acme Engineer -t elegant -o out/
    """
    log_file = setup_logger("generate", LOGS_PATH / f"generate_{now()}")

    typer.secho(f"\nGenerating: {profile} ({template})", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Target: {role} at {company}")
    typer.echo("")

    request = GenerateRequest(
        profile=profile,
        jd=content_file.read_text(encoding="utf-8"),
        company=company,
        role=role,
        template=template,
    )

    try:
        rendered = asyncio.run(
            generate_resume_pdf(request, ProfileStore(), LayoutRegistry(), PlaywrightRasterizer())
        )
    except PressError as e:
        typer.secho(f"✗ Generation failed: {e.message}\n", fg=typer.colors.RED, err=True)
        typer.echo(f"  Log: {display_path(log_file)}")
        raise typer.Exit(code=1)

    output_dir = output_dir or RESULTS_PATH
    output_dir.mkdir(parents=True, exist_ok=True)
    pdf_path = output_dir / rendered.filename
    pdf_path.write_bytes(rendered.content)

    typer.secho("✓ Generation succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  PDF: {display_path(pdf_path)}")
    typer.echo(f"  Log: {display_path(log_file)}")
    typer.echo("")


@app.command("profiles")
def profiles_command():
    """List stored profiles."""
    summaries = ProfileStore().list_profiles()
    if not summaries:
        typer.secho("No profiles found.", fg=typer.colors.YELLOW)
        raise typer.Exit(code=0)

    for summary in summaries:
        typer.echo(f"  {summary.id:<24} {summary.name}")


@app.command("layouts")
def layouts_command():
    """List available layouts."""
    for layout_id, label in LayoutRegistry().available_layouts():
        marker = " (default)" if layout_id == DEFAULT_LAYOUT else ""
        typer.echo(f"  {layout_id:<16} {label}{marker}")


@app.command("serve")
def serve_command(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", "-p", help="Port to listen on", min=1, max=65535)] = 8000,
):
    """
    Run the HTTP API.

    Examples:\n

        $ generate_pdf.py serve

        $ generate_pdf.py serve --host 0.0.0.0 --port 3000
    """
    setup_logger("serve", LOGS_PATH / f"serve_{now()}", extra_provenance={"Bind": f"{host}:{port}"})
    uvicorn.run("press.contexts.delivery.api:app", host=host, port=port)


if __name__ == "__main__":
    app()
