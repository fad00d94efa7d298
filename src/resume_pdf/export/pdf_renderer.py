"""Render a JSON resume to PDF inside headless Chromium."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager, suppress
from pathlib import Path
from typing import Any, AsyncIterator, Callable

from playwright.async_api import async_playwright

from resume_pdf.config import AppConfig, BrowserConfig, PdfConfig
from resume_pdf.errors import (
    BrowserLaunchError,
    NavigationError,
    PageAcquisitionError,
    PdfExportError,
    RenderEvaluationError,
    ScriptInjectionError,
    Stage,
)
from resume_pdf.models.document import ResumeDocument
from resume_pdf.models.render import OutputTarget, RenderConfig

logger = logging.getLogger(__name__)

RENDERER_ENTRY_POINT = "UniversalResume.HtmlRenderer.Renderer"

# Playwright awaits the promise returned by this function, so the export
# step cannot start before the renderer has finished drawing.
RENDER_SCRIPT = """
async ({ data, template, theme, entryPoint }) => {
  const render = entryPoint
    .split(".")
    .reduce((scope, key) => (scope == null ? undefined : scope[key]), window);
  if (typeof render !== "function") {
    throw new Error(`renderer entry point ${entryPoint} is not defined`);
  }
  await render(data, { template, theme, domElement: document.body });
  return true;
}
"""

StageCallback = Callable[[Stage, str], None]


def write_atomically(path: Path, data: bytes) -> None:
    """Write data next to path, then swap it in so path is never left partial."""
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_bytes(data)
        os.replace(tmp_path, path)
    except OSError as e:
        with suppress(OSError):
            tmp_path.unlink()
        raise PdfExportError(f"could not write {path}: {e}") from e


@asynccontextmanager
async def launched_browser(browser_type: Any, settings: BrowserConfig) -> AsyncIterator[Any]:
    """Launch a browser and close it exactly once, whatever leaves the block."""
    try:
        browser = await browser_type.launch(
            headless=settings.headless,
            args=list(settings.args),
        )
    except Exception as e:
        raise BrowserLaunchError(str(e)) from e
    logger.debug("Browser launched (headless=%s)", settings.headless)

    try:
        yield browser
    finally:
        try:
            await browser.close()
        except Exception:
            logger.warning("Failed to close browser", exc_info=True)
        else:
            logger.debug("Browser closed")


class PdfRenderer:
    """Drives one browser through navigate, inject, render and export."""

    def __init__(
        self,
        host_page: str | Path,
        renderer_script: str | Path,
        *,
        browser: BrowserConfig | None = None,
        pdf: PdfConfig | None = None,
    ):
        self.host_page = Path(host_page).resolve()
        self.renderer_script = Path(renderer_script).resolve()
        self.browser_settings = browser or BrowserConfig()
        self.pdf_settings = pdf or PdfConfig()

    @classmethod
    def from_config(cls, config: AppConfig) -> PdfRenderer:
        return cls(
            config.paths.resolved_host_page,
            config.paths.resolved_renderer_script,
            browser=config.browser,
            pdf=config.pdf,
        )

    async def run(
        self,
        document: ResumeDocument,
        render: RenderConfig,
        target: OutputTarget,
        *,
        on_stage: StageCallback | None = None,
    ) -> Path:
        """Start Playwright, render the document to target and stop Playwright."""
        try:
            playwright = await async_playwright().start()
        except Exception as e:
            raise BrowserLaunchError(f"could not start Playwright: {e}") from e
        try:
            return await self.render_with(
                playwright.chromium, document, render, target, on_stage=on_stage
            )
        finally:
            try:
                await playwright.stop()
            except Exception:
                logger.warning("Failed to stop Playwright", exc_info=True)

    async def render_with(
        self,
        browser_type: Any,
        document: ResumeDocument,
        render: RenderConfig,
        target: OutputTarget,
        *,
        on_stage: StageCallback | None = None,
    ) -> Path:
        """Run the full pipeline with the given Playwright browser type.

        Every browser call is wrapped on its own so a failure names the step
        that raised it. Nothing is retried.
        """

        def _notify(stage: Stage, detail: str) -> None:
            logger.debug("[%s] %s", stage.value, detail)
            if on_stage:
                on_stage(stage, detail)

        _notify(Stage.LAUNCH, "Launching browser")
        async with launched_browser(browser_type, self.browser_settings) as browser:
            _notify(Stage.PAGE, "Opening page")
            try:
                page = await browser.new_page(viewport=self.browser_settings.viewport)
            except Exception as e:
                raise PageAcquisitionError(str(e)) from e
            if page is None:
                raise PageAcquisitionError("browser returned no page")

            _notify(Stage.NAVIGATE, f"Loading {self.host_page.name}")
            try:
                await page.goto(
                    self.host_page.as_uri(),
                    wait_until="networkidle",
                    timeout=self.browser_settings.timeout_ms,
                )
            except Exception as e:
                raise NavigationError(str(e)) from e

            _notify(Stage.INJECT, f"Injecting {self.renderer_script.name}")
            try:
                await page.add_script_tag(path=str(self.renderer_script))
            except Exception as e:
                raise ScriptInjectionError(str(e)) from e

            _notify(Stage.RENDER, f"Rendering {document.path.name}")
            try:
                await page.evaluate(
                    RENDER_SCRIPT,
                    {
                        "data": document.data,
                        "template": render.template,
                        "theme": render.theme(),
                        "entryPoint": RENDERER_ENTRY_POINT,
                    },
                )
            except Exception as e:
                raise RenderEvaluationError(str(e)) from e

            _notify(Stage.EXPORT, f"Exporting {target.file_name}")
            try:
                pdf_bytes = await page.pdf(
                    format=self.pdf_settings.format,
                    print_background=self.pdf_settings.print_background,
                    margin=self.pdf_settings.margins,
                )
            except Exception as e:
                raise PdfExportError(str(e)) from e

            # Only a completed export touches the filesystem.
            write_atomically(target.path, pdf_bytes)

        logger.debug("Wrote %d bytes to %s", len(pdf_bytes), target.path)
        return target.path
