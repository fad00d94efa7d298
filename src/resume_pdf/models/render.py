"""Pydantic models for resolved rendering parameters."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, field_validator

from resume_pdf.choices import COLORS, TEMPLATES


class RenderConfig(BaseModel):
    template: str
    primary_color: str
    secondary_color: str

    model_config = {"frozen": True}

    @field_validator("template")
    @classmethod
    def _known_template(cls, value: str) -> str:
        if value not in TEMPLATES:
            raise ValueError(f"unknown template {value!r}, expected one of {', '.join(TEMPLATES)}")
        return value

    @field_validator("primary_color", "secondary_color")
    @classmethod
    def _known_color(cls, value: str) -> str:
        if value not in COLORS:
            raise ValueError(f"unknown color {value!r}, expected one of {', '.join(COLORS)}")
        return value

    def theme(self) -> dict:
        """Theme object handed to the in-page renderer."""
        return {"color": {"primary": self.primary_color, "secondary": self.secondary_color}}


class OutputTarget(BaseModel):
    path: Path  # absolute path of the PDF to write
    exists: bool

    model_config = {"frozen": True}

    @property
    def file_name(self) -> str:
        return self.path.name
