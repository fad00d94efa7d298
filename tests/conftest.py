"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from resume_pdf.config import AppConfig, PathsConfig
from resume_pdf.models.document import ResumeDocument
from resume_pdf.models.render import OutputTarget, RenderConfig

SAMPLE_RESUME = {
    "basics": {"name": "Jane Doe", "label": "Backend Engineer", "email": "jane@example.com"},
    "work": [{"name": "Example Corp", "position": "Engineer", "startDate": "2020-01-01"}],
}


def make_pdf_bytes(pages: int = 1, width: float = 595.28, height: float = 841.89) -> bytes:
    """Build a blank PDF with the given page geometry."""
    import fitz  # pymupdf

    doc = fitz.open()
    for _ in range(pages):
        doc.new_page(width=width, height=height)
    data = doc.tobytes()
    doc.close()
    return data


class FakePrompter:
    """Prompter that answers from canned values and records every question."""

    def __init__(
        self,
        selections: dict[str, str] | None = None,
        text: str | None = None,
        confirm: bool = True,
    ):
        self.selections = dict(selections or {})
        self.text_answer = text
        self.confirm_answer = confirm
        self.calls: list[tuple[str, str]] = []
        self.offered: dict[str, tuple[str, ...]] = {}
        self.text_defaults: list[str] = []

    def select(self, message, choices):
        self.calls.append(("select", message))
        self.offered[message] = tuple(choices)
        return self.selections.get(message, choices[0])

    def text(self, message, default):
        self.calls.append(("text", message))
        self.text_defaults.append(default)
        return default if self.text_answer is None else self.text_answer

    def confirm(self, message):
        self.calls.append(("confirm", message))
        return self.confirm_answer


class FakeChromium:
    """Stands in for playwright's chromium BrowserType.

    Every browser call is appended to ``events``; the call whose stage name
    equals ``fail_at`` raises instead of succeeding.
    """

    def __init__(
        self,
        fail_at: str | None = None,
        pdf_bytes: bytes | None = None,
        close_error: Exception | None = None,
    ):
        self.fail_at = fail_at
        self.close_error = close_error
        self.events: list[str] = []

        self.page = MagicMock()
        self.page.goto = AsyncMock(side_effect=self._step("navigate"))
        self.page.add_script_tag = AsyncMock(side_effect=self._step("inject"))
        self.page.evaluate = AsyncMock(side_effect=self._step("render", True))
        self.page.pdf = AsyncMock(
            side_effect=self._step("export", pdf_bytes if pdf_bytes is not None else make_pdf_bytes())
        )

        self.browser = MagicMock()
        self.browser.new_page = AsyncMock(side_effect=self._step("page", self.page))
        self.browser.close = AsyncMock(side_effect=self._close)

        self.launch = AsyncMock(side_effect=self._step("launch", self.browser))

    def _step(self, name: str, result=None):
        def _side_effect(*args, **kwargs):
            self.events.append(name)
            if self.fail_at == name:
                raise RuntimeError(f"{name} exploded")
            return result

        return _side_effect

    def _close(self, *args, **kwargs):
        self.events.append("close")
        if self.close_error is not None:
            raise self.close_error

    @property
    def launches(self) -> int:
        return self.events.count("launch")

    @property
    def closes(self) -> int:
        return self.events.count("close")


@pytest.fixture
def workspace(tmp_path) -> Path:
    (tmp_path / "json").mkdir()
    (tmp_path / "out").mkdir()
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "index.html").write_text("<html><body></body></html>")
    (tmp_path / "assets" / "renderer.js").write_text("window.UniversalResume = {};")
    return tmp_path


@pytest.fixture
def paths_config(workspace) -> PathsConfig:
    return PathsConfig(
        input_dir=str(workspace / "json"),
        output_dir=str(workspace / "out"),
        host_page=str(workspace / "assets" / "index.html"),
        renderer_script=str(workspace / "assets" / "renderer.js"),
    )


@pytest.fixture
def app_config(paths_config) -> AppConfig:
    return AppConfig(paths=paths_config)


@pytest.fixture
def jane_resume(workspace) -> Path:
    path = workspace / "json" / "jane.json"
    path.write_text(json.dumps(SAMPLE_RESUME), encoding="utf-8")
    return path


@pytest.fixture
def sample_document(jane_resume) -> ResumeDocument:
    return ResumeDocument(path=jane_resume, data=SAMPLE_RESUME)


@pytest.fixture
def sample_render_config() -> RenderConfig:
    return RenderConfig(template="default", primary_color="blue", secondary_color="gray")


@pytest.fixture
def sample_target(workspace) -> OutputTarget:
    path = workspace / "out" / "jane-resume.pdf"
    return OutputTarget(path=path, exists=path.exists())


@pytest.fixture
def fake_prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture
def fake_chromium() -> FakeChromium:
    return FakeChromium()
