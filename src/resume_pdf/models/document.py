"""Pydantic model for a loaded JSON resume."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel


class ResumeDocument(BaseModel):
    path: Path  # identity of the document
    data: dict[str, Any]  # opaque JSON resume payload

    model_config = {"frozen": True}

    @property
    def stem(self) -> str:
        """File name without its extension, used as the default output name."""
        return self.path.stem
