"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from resume_pdf import __version__
from resume_pdf.choices import COLORS, TEMPLATES, list_resumes
from resume_pdf.config import load_config
from resume_pdf.errors import ResumePdfError, Stage
from resume_pdf.pipeline.orchestrator import generate
from resume_pdf.pipeline.prompts import RichPrompter
from resume_pdf.pipeline.resolver import ConfigResolver, RunOptions

app = typer.Typer(
    name="resume-pdf",
    help="Generate a PDF from a JSON resume.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"resume-pdf {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a PDF from a JSON resume."""


def _load_config_or_exit(config_path: Path | None):
    try:
        return load_config(config_path)
    except (ValueError, TypeError) as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command("generate")
def generate_command(
    resume: str = typer.Option(None, "--resume", "-r", help="JSON resume to use"),
    template: str = typer.Option(None, "--template", "-t", help="Template to use"),
    primary: str = typer.Option(None, "--primary", "-p", help="Primary color to use"),
    secondary: str = typer.Option(None, "--secondary", "-s", help="Secondary color to use"),
    output: str = typer.Option(None, "--output", "-o", help="Output file name of the PDF"),
    force: bool = typer.Option(False, "--force", "-f", help="Force the generation of the PDF"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate a PDF from a JSON resume, asking for any option not given."""
    _setup_logging(verbose)
    config = _load_config_or_exit(config_path)

    console.print("This tool will generate a PDF from a JSON resume.")
    console.print("Please follow the prompts to configure the PDF generation.")

    options = RunOptions(
        resume=resume,
        template=template,
        primary=primary,
        secondary=secondary,
        output=output,
        force=force,
    )
    # Prompts block on stdin, so they run before any event loop exists.
    try:
        resolved = ConfigResolver(RichPrompter(console), config.paths).resolve(options)
    except ResumePdfError as e:
        console.print(f"[red]{escape(f'[{e.stage.value}] {e}')}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        raise typer.Exit(130)

    if resolved is None:
        console.print("[yellow]Existing file kept, nothing generated.[/yellow]")
        return

    console.print()
    status = console.status("Generating PDF")

    def on_stage(stage: Stage, detail: str) -> None:
        status.update(f"Generating PDF - {detail}")

    status.start()
    try:
        result = asyncio.run(generate(resolved, config=config, on_stage=on_stage))
    except ResumePdfError as e:
        status.stop()
        console.print(f"[red]{escape(f'[{e.stage.value}] {e}')}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        status.stop()
        console.print("\n[yellow]Cancelled.[/yellow]")
        raise typer.Exit(130)
    status.stop()

    console.print(
        f"[bold green]✔[/bold green] [bold]PDF generated successfully[/bold] "
        f"at [green]{escape(str(result.target.path))}[/green]"
    )
    console.print(
        f"[dim]{result.layout.describe()} | template: {result.render.template} | "
        f"colors: {result.render.primary_color}/{result.render.secondary_color} | "
        f"{result.elapsed_seconds:.1f}s[/dim]"
    )


@app.command()
def choices(
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
) -> None:
    """List the resumes, templates and colors that can be chosen."""
    config = _load_config_or_exit(config_path)
    input_dir = config.paths.resolved_input_dir

    resumes = list_resumes(input_dir)
    console.print(f"[bold]Resumes[/bold] [dim]({escape(str(input_dir))})[/dim]")
    if resumes:
        for name in resumes:
            console.print(f"  {name}")
    else:
        console.print("  [yellow]No JSON resumes found.[/yellow]")

    console.print("[bold]Templates[/bold]")
    for name in TEMPLATES:
        console.print(f"  {name}")

    console.print("[bold]Colors[/bold]")
    console.print("  " + ", ".join(COLORS))


if __name__ == "__main__":
    app()
