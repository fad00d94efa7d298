"""Render JSON resumes to A4 PDF through a headless browser."""

__version__ = "0.1.0"
