"""PDF export module for resume-pdf."""
from resume_pdf.export.pdf_inspect import PdfLayout, inspect_pdf
from resume_pdf.export.pdf_renderer import PdfRenderer, launched_browser

__all__ = ["PdfRenderer", "PdfLayout", "inspect_pdf", "launched_browser"]
