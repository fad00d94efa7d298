"""Error types raised while resolving and rendering a resume."""

from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    """Where in a run an error originated."""

    CONFIG = "config"
    READ = "read"
    PARSE = "parse"
    LAUNCH = "launch"
    PAGE = "page"
    NAVIGATE = "navigate"
    INJECT = "inject"
    RENDER = "render"
    EXPORT = "export"


class ResumePdfError(Exception):
    """Base class for every failure that aborts a run."""

    stage: Stage = Stage.CONFIG
    summary: str = "failed"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.summary}: {self.message}"


class ConfigResolutionError(ResumePdfError):
    stage = Stage.CONFIG
    summary = "Invalid configuration"


class DocumentReadError(ResumePdfError):
    stage = Stage.READ
    summary = "Failed to read JSON resume"


class DocumentParseError(ResumePdfError):
    stage = Stage.PARSE
    summary = "Failed to parse JSON resume"


class BrowserLaunchError(ResumePdfError):
    stage = Stage.LAUNCH
    summary = "Failed to launch browser"


class PageAcquisitionError(ResumePdfError):
    stage = Stage.PAGE
    summary = "Failed to get page"


class NavigationError(ResumePdfError):
    stage = Stage.NAVIGATE
    summary = "Failed to load page"


class ScriptInjectionError(ResumePdfError):
    stage = Stage.INJECT
    summary = "Failed to add script tag"


class RenderEvaluationError(ResumePdfError):
    stage = Stage.RENDER
    summary = "Failed to evaluate renderer"


class PdfExportError(ResumePdfError):
    stage = Stage.EXPORT
    summary = "Failed to generate PDF"
