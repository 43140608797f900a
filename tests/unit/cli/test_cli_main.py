"""Unit tests for the html2org command entry point."""

import io
import os
import sys
from pathlib import Path

import pytest

from html2org.cli import main
from html2org.cli.builder import (
    EXIT_FILE_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch):
    """Run each test in an empty directory without HTML2ORG_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("HTML2ORG_"):
            monkeypatch.delenv(name)
    return tmp_path


@pytest.fixture
def page(tmp_path: Path) -> Path:
    path = tmp_path / "page.html"
    path.write_text(
        "<h1>Test</h1><p>See <a href='/docs'>the docs</a>.</p>"
        "<table><tr><th>k</th></tr><tr><td>v</td></tr></table>",
        encoding="utf-8",
    )
    return path


def _stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """End-to-end behavior of main()."""

    def test_convert_file_to_stdout(self, page, capsys):
        assert main(["-i", str(page)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* Test\n\nSee [[/docs][the docs]].\n\nk\nv\n"

    def test_output_file(self, page, tmp_path):
        out = tmp_path / "page.org"
        assert main(["-i", str(page), "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8").startswith("* Test\n")

    def test_stdin(self, monkeypatch, capsys):
        _stdin(monkeypatch, b"<p>from stdin</p>")
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "from stdin\n"

    def test_dash_means_stdin(self, monkeypatch, capsys):
        _stdin(monkeypatch, b"<b>x</b>")
        assert main(["-i", "-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "*x*\n"

    def test_option_flags(self, page, capsys):
        assert main(["-i", str(page), "--pretty-tables", "-u", "http://example.com/a/"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "[[http://example.com/docs][the docs]]" in out
        assert "| K |\n|---|\n| v |" in out

    def test_environment_defaults(self, page, capsys, monkeypatch):
        monkeypatch.setenv("HTML2ORG_OMIT_LINKS", "true")
        assert main(["-i", str(page)]) == EXIT_SUCCESS
        assert "See the docs." in capsys.readouterr().out

    def test_config_file(self, page, capsys, tmp_path):
        config = tmp_path / "custom.toml"
        config.write_text("omit_links = true\n")
        assert main(["-i", str(page), "--config", str(config)]) == EXIT_SUCCESS
        assert "See the docs." in capsys.readouterr().out

    def test_discovered_config(self, page, capsys, tmp_path):
        (tmp_path / ".html2org.yaml").write_text("omit_links: true\n")
        assert main(["-i", str(page)]) == EXIT_SUCCESS
        assert "See the docs." in capsys.readouterr().out

    def test_no_config(self, page, capsys, tmp_path):
        (tmp_path / ".html2org.yaml").write_text("omit_links: true\n")
        assert main(["-i", str(page), "--no-config"]) == EXIT_SUCCESS
        assert "[[/docs][the docs]]" in capsys.readouterr().out

    def test_config_from_environment_variable(self, page, capsys, tmp_path, monkeypatch):
        config = tmp_path / "elsewhere.json"
        config.write_text('{"omit_links": true}')
        monkeypatch.setenv("HTML2ORG_CONFIG", str(config))
        assert main(["-i", str(page)]) == EXIT_SUCCESS
        assert "See the docs." in capsys.readouterr().out

    def test_plain_text_input_is_kept_verbatim(self, tmp_path, capsys):
        notes = tmp_path / "notes.txt"
        notes.write_text("if a < b:\n    pass\n", encoding="utf-8")
        assert main(["-i", str(notes)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "#+begin_src\nif a < b:\n    pass\n#+end_src\n"


@pytest.mark.unit
@pytest.mark.cli
class TestMainErrors:
    """Error reporting and exit codes."""

    def test_missing_file(self, tmp_path, capsys):
        assert main(["-i", str(tmp_path / "missing.html")]) == EXIT_FILE_ERROR
        assert "Error: File not found" in capsys.readouterr().err

    def test_directory_input(self, tmp_path, capsys):
        assert main(["-i", str(tmp_path)]) == EXIT_FILE_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_binary_input(self, tmp_path, capsys):
        blob = tmp_path / "image.png"
        blob.write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
        assert main(["-i", str(blob)]) == EXIT_FORMAT_ERROR
        assert "binary" in capsys.readouterr().err

    def test_bad_link(self, tmp_path, capsys):
        page = tmp_path / "bad.html"
        page.write_text('<a href="http://[::1/">x</a>')
        assert main(["-i", str(page), "-u", "http://example.com/"]) == EXIT_RENDERING_ERROR
        assert capsys.readouterr().out == ""

    def test_invalid_config(self, page, tmp_path, capsys):
        config = tmp_path / "broken.json"
        config.write_text("{oops")
        assert main(["-i", str(page), "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "Invalid JSON" in capsys.readouterr().err

    def test_invalid_environment_value(self, page, capsys, monkeypatch):
        monkeypatch.setenv("HTML2ORG_DATA_URL_MAX_LENGTH", "lots")
        assert main(["-i", str(page)]) == EXIT_VALIDATION_ERROR
        assert "--data-url-max-length" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("html2org ")
