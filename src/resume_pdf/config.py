"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "RESUME_PDF_CONFIG"
PAGE_FORMATS = ("A4", "Letter")


@dataclass(frozen=True)
class PathsConfig:
    input_dir: str = "json"
    output_dir: str = "out"
    host_page: str = "assets/index.html"
    renderer_script: str = "assets/renderer.js"

    @property
    def resolved_input_dir(self) -> Path:
        return Path(self.input_dir).expanduser().resolve()

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser().resolve()

    @property
    def resolved_host_page(self) -> Path:
        return Path(self.host_page).expanduser().resolve()

    @property
    def resolved_renderer_script(self) -> Path:
        return Path(self.renderer_script).expanduser().resolve()


@dataclass(frozen=True)
class BrowserConfig:
    headless: bool = True
    viewport_width: int = 1240
    viewport_height: int = 1754
    args: tuple[str, ...] = ("--start-maximized",)
    timeout_ms: int = 30000

    @property
    def viewport(self) -> dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}


@dataclass(frozen=True)
class PdfConfig:
    format: str = "A4"
    print_background: bool = False
    margin: str = "0"

    @property
    def margins(self) -> dict[str, str]:
        return {side: self.margin for side in ("top", "bottom", "left", "right")}


@dataclass(frozen=True)
class AppConfig:
    paths: PathsConfig = field(default_factory=PathsConfig)
    browser: BrowserConfig = field(default_factory=BrowserConfig)
    pdf: PdfConfig = field(default_factory=PdfConfig)


def _validate(config: AppConfig) -> None:
    """Raise ValueError naming the first out-of-range setting."""
    if config.browser.viewport_width < 1:
        raise ValueError(f"browser.viewport_width must be >= 1, got {config.browser.viewport_width}")
    if config.browser.viewport_height < 1:
        raise ValueError(f"browser.viewport_height must be >= 1, got {config.browser.viewport_height}")
    if config.browser.timeout_ms < 1:
        raise ValueError(f"browser.timeout_ms must be >= 1, got {config.browser.timeout_ms}")
    if config.pdf.format not in PAGE_FORMATS:
        raise ValueError(f"pdf.format must be one of {PAGE_FORMATS}, got {config.pdf.format!r}")
    if str(config.pdf.margin).strip().startswith("-"):
        raise ValueError(f"pdf.margin must not be negative, got {config.pdf.margin!r}")


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        candidates = [Path(env_path)] if env_path else []
        candidates.append(Path.cwd() / "config.yaml")
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    browser_raw = dict(raw.get("browser") or {})
    if "args" in browser_raw:
        browser_raw["args"] = tuple(browser_raw["args"] or ())
    pdf_raw = dict(raw.get("pdf") or {})
    if "margin" in pdf_raw:
        pdf_raw["margin"] = str(pdf_raw["margin"])

    config = AppConfig(
        paths=PathsConfig(**(raw.get("paths") or {})),
        browser=BrowserConfig(**browser_raw),
        pdf=PdfConfig(**pdf_raw),
    )
    _validate(config)
    return config
