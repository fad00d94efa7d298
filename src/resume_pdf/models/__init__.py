"""Data models for the resume PDF pipeline."""

from resume_pdf.models.document import ResumeDocument
from resume_pdf.models.render import OutputTarget, RenderConfig

__all__ = [
    "OutputTarget",
    "RenderConfig",
    "ResumeDocument",
]
