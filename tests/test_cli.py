"""Tests for the typer command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from doc_editor.config import loader
from doc_editor.config.loader import clear_cache
from doc_editor.presentation.cli.app import app

runner = CliRunner()

DEMO_TEXT = (
    "Hello, world!\n"
    "This is a real-world document editor example.\n"
    "\tIndented text after a tab space.\n"
    "[Image: picture.jpg]"
)


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch):
    """Run every command in a temp directory with no per-user config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(loader, "user_config_path", lambda: tmp_path / "user" / "config.json")
    clear_cache()
    yield
    clear_cache()


def _document_file(tmp_path: Path) -> Path:
    path = tmp_path / "doc.json"
    path.write_text(
        json.dumps(
            {
                "elements": [
                    {"kind": "text", "text": "Title"},
                    {"kind": "newline"},
                    {"kind": "tab"},
                    {"kind": "image", "path": "figure.png"},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# demo
# ---------------------------------------------------------------------------


class TestDemo:
    def test_prints_and_saves_default_file(self, tmp_path: Path):
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0, result.output
        assert DEMO_TEXT in result.output
        assert (tmp_path / "document.txt").read_text() == DEMO_TEXT

    def test_output_option(self, tmp_path: Path):
        dest = tmp_path / "custom.txt"
        result = runner.invoke(app, ["demo", "--output", str(dest)])
        assert result.exit_code == 0, result.output
        assert dest.read_text() == DEMO_TEXT
        assert not (tmp_path / "document.txt").exists()

    def test_unwritable_output_exits_non_zero(self, tmp_path: Path):
        dest = tmp_path / "missing" / "out.txt"
        result = runner.invoke(app, ["demo", "--output", str(dest)])
        assert result.exit_code == 1
        assert DEMO_TEXT in result.output
        assert not dest.exists()

    def test_database_backend_warns_only(self, tmp_path: Path):
        cfg = tmp_path / "db.json"
        cfg.write_text(json.dumps({"storage": {"backend": "database"}}), encoding="utf-8")
        result = runner.invoke(app, ["demo", "--config", str(cfg)])
        assert result.exit_code == 0, result.output
        assert "Nothing persisted" in result.output
        assert not (tmp_path / "document.txt").exists()

    def test_missing_config(self, tmp_path: Path):
        result = runner.invoke(app, ["demo", "--config", str(tmp_path / "nope.json")])
        assert result.exit_code == 1

    def test_verbose_flag(self):
        result = runner.invoke(app, ["--verbose", "demo"])
        assert result.exit_code == 0, result.output


# ---------------------------------------------------------------------------
# render / save
# ---------------------------------------------------------------------------


class TestRender:
    def test_renders_document_file(self, tmp_path: Path):
        result = runner.invoke(app, ["render", str(_document_file(tmp_path))])
        assert result.exit_code == 0, result.output
        assert "Title\n\t[Image: figure.png]" in result.output

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["render", str(tmp_path / "absent.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_document(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"elements": [{"kind": "video"}]}), encoding="utf-8")
        result = runner.invoke(app, ["render", str(bad)])
        assert result.exit_code == 1
        assert "Invalid document" in result.output


class TestSave:
    def test_saves_to_default_file(self, tmp_path: Path):
        result = runner.invoke(app, ["save", str(_document_file(tmp_path))])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "document.txt").read_text() == "Title\n\t[Image: figure.png]"

    def test_saves_to_output(self, tmp_path: Path):
        dest = tmp_path / "out.txt"
        result = runner.invoke(app, ["save", str(_document_file(tmp_path)), "-o", str(dest)])
        assert result.exit_code == 0, result.output
        assert dest.read_text() == "Title\n\t[Image: figure.png]"

    def test_memory_backend(self, tmp_path: Path):
        result = runner.invoke(
            app, ["save", str(_document_file(tmp_path)), "--backend", "memory"]
        )
        assert result.exit_code == 0, result.output
        assert not (tmp_path / "document.txt").exists()

    def test_unknown_backend_is_a_usage_error(self, tmp_path: Path):
        result = runner.invoke(app, ["save", str(_document_file(tmp_path)), "-b", "ftp"])
        assert result.exit_code == 2
        assert not (tmp_path / "document.txt").exists()

    def test_database_backend_option(self, tmp_path: Path):
        result = runner.invoke(
            app, ["save", str(_document_file(tmp_path)), "--backend", "database"]
        )
        assert result.exit_code == 0, result.output
        assert "Nothing persisted" in result.output

    def test_unencodable_output_keeps_previous_file(self, tmp_path: Path):
        cfg = tmp_path / "ascii.json"
        cfg.write_text(json.dumps({"storage": {"encoding": "ascii"}}), encoding="utf-8")
        doc = tmp_path / "accent.json"
        doc.write_text(
            json.dumps({"elements": [{"kind": "text", "text": "h\u00e9llo"}]}), encoding="utf-8"
        )
        (tmp_path / "document.txt").write_text("previous", encoding="utf-8")

        result = runner.invoke(app, ["save", str(doc), "--config", str(cfg)])

        assert result.exit_code == 1
        assert (tmp_path / "document.txt").read_text(encoding="utf-8") == "previous"


# ---------------------------------------------------------------------------
# config show / init
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def test_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0, result.output
        assert "document.txt" in result.output

    def test_init_creates_file(self, tmp_path: Path):
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0, result.output
        data = json.loads((tmp_path / "doc_editor.json").read_text(encoding="utf-8"))
        assert data["storage"]["backend"] == "file"

    def test_init_refuses_overwrite(self, tmp_path: Path):
        (tmp_path / "doc_editor.json").write_text("keep", encoding="utf-8")
        result = runner.invoke(app, ["config", "init"], input="n\n")
        assert result.exit_code != 0
        assert (tmp_path / "doc_editor.json").read_text(encoding="utf-8") == "keep"

    def test_init_force(self, tmp_path: Path):
        (tmp_path / "doc_editor.json").write_text("old", encoding="utf-8")
        result = runner.invoke(app, ["config", "init", "--force"])
        assert result.exit_code == 0, result.output
        assert "storage" in (tmp_path / "doc_editor.json").read_text(encoding="utf-8")
