"""Page-geometry summary of a generated PDF."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

A4_POINTS = (595.28, 841.89)
_TOLERANCE = 1.0


@dataclass(frozen=True)
class PdfLayout:
    page_count: int
    page_sizes: tuple[tuple[float, float], ...]  # (width, height) in points

    @property
    def is_a4(self) -> bool:
        return bool(self.page_sizes) and all(
            abs(w - A4_POINTS[0]) <= _TOLERANCE and abs(h - A4_POINTS[1]) <= _TOLERANCE
            for w, h in self.page_sizes
        )

    def describe(self) -> str:
        fmt = "A4" if self.is_a4 else "non-A4"
        noun = "page" if self.page_count == 1 else "pages"
        return f"{self.page_count} {noun}, {fmt}"


def inspect_pdf(path: str | Path) -> PdfLayout:
    """Return page count and page dimensions of a PDF file."""
    import fitz  # pymupdf

    doc = fitz.open(str(path))
    try:
        sizes = tuple(
            (round(page.rect.width, 2), round(page.rect.height, 2)) for page in doc
        )
    finally:
        doc.close()
    return PdfLayout(page_count=len(sizes), page_sizes=sizes)
