"""Main pipeline orchestrator - renders a resolved run and inspects the PDF."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from resume_pdf.config import AppConfig
from resume_pdf.errors import PdfExportError
from resume_pdf.export.pdf_inspect import PdfLayout, inspect_pdf
from resume_pdf.export.pdf_renderer import PdfRenderer, StageCallback
from resume_pdf.models.render import OutputTarget, RenderConfig
from resume_pdf.pipeline.resolver import ResolvedRun

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Outcome of one successful run."""

    target: OutputTarget
    render: RenderConfig
    layout: PdfLayout
    elapsed_seconds: float = 0.0


async def generate(
    resolved: ResolvedRun,
    *,
    config: AppConfig,
    renderer: PdfRenderer | None = None,
    on_stage: StageCallback | None = None,
) -> GenerationResult:
    """Render one resolved run to PDF and report the resulting layout.

    Resolution (and any prompting) happens before this is called, outside
    the event loop, via ConfigResolver.

    Args:
        resolved: Document, render settings and output target.
        config: Application configuration (directories, browser, PDF).
        renderer: Rendering pipeline; built from config when omitted.
        on_stage: Optional callback(stage, detail) for progress.
    """
    renderer = renderer or PdfRenderer.from_config(config)
    start = time.monotonic()
    path = await renderer.run(
        resolved.document, resolved.render, resolved.target, on_stage=on_stage
    )
    elapsed = time.monotonic() - start

    try:
        layout = inspect_pdf(path)
    except Exception as e:
        raise PdfExportError(f"could not inspect {path}: {e}") from e
    logger.info("Generated %s (%s) in %.1fs", path, layout.describe(), elapsed)
    return GenerationResult(
        target=resolved.target,
        render=resolved.render,
        layout=layout,
        elapsed_seconds=elapsed,
    )
