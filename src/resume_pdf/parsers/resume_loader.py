from __future__ import annotations

import json
import logging
from pathlib import Path

from resume_pdf.errors import DocumentParseError, DocumentReadError
from resume_pdf.models.document import ResumeDocument

logger = logging.getLogger(__name__)


def load_resume(file_path: str | Path) -> ResumeDocument:
    """Read a JSON resume file and return it as a ResumeDocument.

    Raises DocumentReadError when the file cannot be read and
    DocumentParseError when it is not a JSON object.
    """
    path = Path(file_path).resolve()
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(f"{path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DocumentParseError(f"{path.name}: {e}") from e

    if not isinstance(data, dict):
        raise DocumentParseError(
            f"{path.name}: expected a JSON object, got {type(data).__name__}"
        )

    logger.debug("Loaded resume %s (%d top-level keys)", path, len(data))
    return ResumeDocument(path=path, data=data)
