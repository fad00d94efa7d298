"""Resolve a complete rendering configuration from flags, prompts and defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from pydantic import ValidationError

from resume_pdf.choices import COLORS, TEMPLATES, list_resumes
from resume_pdf.config import PathsConfig
from resume_pdf.errors import ConfigResolutionError
from resume_pdf.models.document import ResumeDocument
from resume_pdf.models.render import OutputTarget, RenderConfig
from resume_pdf.parsers.resume_loader import load_resume
from resume_pdf.pipeline.prompts import Prompter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    """Values supplied on the command line; None means "ask"."""

    resume: str | None = None
    template: str | None = None
    primary: str | None = None
    secondary: str | None = None
    output: str | None = None
    force: bool = False


@dataclass(frozen=True)
class ResolvedRun:
    document: ResumeDocument
    render: RenderConfig
    target: OutputTarget


def resolve_choice(
    supplied: str | None,
    domain: Sequence[str],
    ask: Callable[[], str],
    *,
    field: str,
) -> str:
    """Use the supplied value if it belongs to the domain, otherwise ask once."""
    if supplied is not None:
        if supplied not in domain:
            raise ConfigResolutionError(
                f"{field} {supplied!r} is not one of: {', '.join(domain) or '(none available)'}"
            )
        return supplied

    if not domain:
        raise ConfigResolutionError(f"no {field} available to choose from")

    answer = ask()
    if answer not in domain:
        raise ConfigResolutionError(f"{field} {answer!r} is not one of: {', '.join(domain)}")
    return answer


def output_path_for(name: str, output_dir: str | Path) -> Path:
    """Return the absolute `<output_dir>/<name>.pdf` path for an output name."""
    cleaned = name.strip()
    if cleaned.lower().endswith(".pdf"):
        cleaned = cleaned[: -len(".pdf")]
    if not cleaned or cleaned in (".", ".."):
        raise ConfigResolutionError(f"invalid output file name {name!r}")
    if "/" in cleaned or "\\" in cleaned:
        raise ConfigResolutionError(
            f"output file name {name!r} must not contain path separators"
        )

    directory = Path(output_dir).resolve()
    return directory / f"{cleaned}.pdf"


class ConfigResolver:
    """Merges supplied options with interactive answers into a ResolvedRun."""

    def __init__(self, prompter: Prompter, paths: PathsConfig):
        self.prompter = prompter
        self.paths = paths

    def resolve(self, options: RunOptions) -> ResolvedRun | None:
        """Resolve every field; returns None when the user declines an overwrite."""
        input_dir = self.paths.resolved_input_dir
        resumes = list_resumes(input_dir)

        resume_file = resolve_choice(
            options.resume,
            resumes,
            lambda: self.prompter.select("Choose a JSON resume", resumes),
            field="resume",
        )
        primary = resolve_choice(
            options.primary,
            COLORS,
            lambda: self.prompter.select("Choose a primary color", COLORS),
            field="primary color",
        )
        secondary = resolve_choice(
            options.secondary,
            COLORS,
            lambda: self.prompter.select("Choose a secondary color", COLORS),
            field="secondary color",
        )
        template = resolve_choice(
            options.template,
            TEMPLATES,
            lambda: self.prompter.select("Choose a template", TEMPLATES),
            field="template",
        )

        try:
            render = RenderConfig(
                template=template,
                primary_color=primary,
                secondary_color=secondary,
            )
        except ValidationError as e:
            raise ConfigResolutionError(str(e)) from e

        document = load_resume(input_dir / resume_file)

        name = options.output
        if name is None:
            name = self.prompter.text("Define the output file name", default=document.stem)
        path = output_path_for(name, self.paths.resolved_output_dir)
        target = OutputTarget(path=path, exists=path.exists())

        if target.exists and not options.force:
            if not self.prompter.confirm(f"Do you want to override {target.file_name}"):
                logger.info("Overwrite of %s declined, nothing generated", target.path)
                return None

        logger.debug(
            "Resolved %s -> %s (template=%s, primary=%s, secondary=%s)",
            resume_file, target.path, template, primary, secondary,
        )
        return ResolvedRun(document=document, render=render, target=target)
