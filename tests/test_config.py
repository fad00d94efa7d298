"""Tests for config loading."""

import pytest

from resume_pdf.config import AppConfig, BrowserConfig, PathsConfig, PdfConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.paths.input_dir == "json"
        assert config.paths.output_dir == "out"
        assert config.browser.viewport == {"width": 1240, "height": 1754}
        assert config.pdf.format == "A4"
        assert config.pdf.print_background is False

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config == AppConfig()

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "paths:\n  output_dir: build\nbrowser:\n  headless: false\n  args: [--no-sandbox]\n"
        )
        config = load_config(yaml_path)
        assert config.paths.output_dir == "build"
        assert config.browser.headless is False
        assert config.browser.args == ("--no-sandbox",)
        # Defaults for unspecified
        assert config.paths.input_dir == "json"
        assert config.pdf.margin == "0"

    def test_numeric_margin_is_normalised(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("pdf:\n  margin: 0\n")
        assert load_config(yaml_path).pdf.margin == "0"

    def test_env_var_points_to_config(self, tmp_path, monkeypatch):
        yaml_path = tmp_path / "custom.yaml"
        yaml_path.write_text("paths:\n  input_dir: resumes\n")
        monkeypatch.setenv("RESUME_PDF_CONFIG", str(yaml_path))
        monkeypatch.chdir(tmp_path)
        assert load_config().paths.input_dir == "resumes"

    def test_cwd_config_is_used(self, tmp_path, monkeypatch):
        (tmp_path / "config.yaml").write_text("paths:\n  output_dir: pdfs\n")
        monkeypatch.delenv("RESUME_PDF_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)
        assert load_config().paths.output_dir == "pdfs"

    def test_resolved_paths_are_absolute(self):
        paths = PathsConfig(input_dir="~/resumes", output_dir="out")
        assert paths.resolved_input_dir.is_absolute()
        assert "~" not in str(paths.resolved_input_dir)
        assert paths.resolved_output_dir.is_absolute()

    def test_pdf_margins_cover_all_sides(self):
        assert PdfConfig().margins == {"top": "0", "bottom": "0", "left": "0", "right": "0"}

    def test_frozen_config(self):
        config = BrowserConfig()
        with pytest.raises(AttributeError):
            config.headless = False
