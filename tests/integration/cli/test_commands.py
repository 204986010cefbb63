"""Integration tests for the convert, archive, preview and formats commands"""

import zipfile

import pytest
from typer.testing import CliRunner

from txt2md.cli.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run each command from a clean tmp directory with no TXT2MD_* overrides."""
    monkeypatch.chdir(tmp_path)
    for name in ("OUTPUT_DIR", "ARCHIVE_NAME", "DOCX_MODE", "ENCODING"):
        monkeypatch.delenv(f"TXT2MD_{name}", raising=False)
    return tmp_path


def test_convert_single_file(workdir):
    (workdir / "notes.txt").write_text("Notes\n- one\n")
    result = runner.invoke(app, ["convert", "notes.txt", "--out-dir", "md"])
    assert result.exit_code == 0, result.output
    out = (workdir / "md" / "notes.md").read_text(encoding="utf-8")
    assert out.startswith("---\nconverted: true\n")
    assert out.endswith("# Notes\n\n* one\n")
    assert "Converted 1 document(s)" in result.output


def test_convert_uses_default_output_dir(workdir):
    (workdir / "notes.txt").write_text("Notes\n")
    result = runner.invoke(app, ["convert", "notes.txt"])
    assert result.exit_code == 0, result.output
    assert (workdir / "converted" / "notes.md").exists()


def test_convert_stdout(workdir):
    (workdir / "notes.txt").write_text("HELLO")
    result = runner.invoke(app, ["convert", "notes.txt", "--stdout"])
    assert result.exit_code == 0, result.output
    assert "# HELLO" in result.output
    assert not (workdir / "converted").exists()


def test_convert_directory_with_failure(workdir):
    """Good files are still written when one document fails; exit code is 1."""
    src = workdir / "src"
    src.mkdir()
    (src / "a.txt").write_text("Alpha\n")
    (src / "broken.docx").write_bytes(b"garbage")
    result = runner.invoke(app, ["convert", "src", "--out-dir", "md"])
    assert result.exit_code == 1
    assert (workdir / "md" / "a.md").exists()
    assert "broken.docx" in result.output


def test_convert_no_supported_files(workdir):
    (workdir / "readme.md").write_text("# hi\n")
    result = runner.invoke(app, ["convert", "readme.md"])
    assert result.exit_code == 1
    assert "No supported files" in result.output


def test_convert_invalid_docx_mode(workdir):
    (workdir / "notes.txt").write_text("Notes\n")
    result = runner.invoke(app, ["convert", "notes.txt", "--docx-mode", "pdf"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_archive_packages_batch(workdir):
    src = workdir / "src"
    src.mkdir()
    (src / "a.txt").write_text("Alpha\n")
    (src / "b.txt").write_text("Beta\n")
    result = runner.invoke(app, ["archive", "src", "--out-dir", "dist"])
    assert result.exit_code == 0, result.output
    archive = workdir / "dist" / "converted-markdown-files.zip"
    with zipfile.ZipFile(archive) as zf:
        assert sorted(zf.namelist()) == ["a.md", "b.md"]
        assert zf.read("a.md").decode("utf-8").endswith("# Alpha\n\n")


def test_archive_custom_name(workdir):
    (workdir / "a.txt").write_text("Alpha\n")
    result = runner.invoke(app, ["archive", "a.txt", "--out-dir", "dist", "--name", "bundle.zip"])
    assert result.exit_code == 0, result.output
    assert (workdir / "dist" / "bundle.zip").exists()


def test_preview_to_file(workdir):
    (workdir / "notes.txt").write_text("Notes\nsome text.\n")
    result = runner.invoke(app, ["preview", "notes.txt", "--out", "notes.html"])
    assert result.exit_code == 0, result.output
    html = (workdir / "notes.html").read_text(encoding="utf-8")
    assert "<h1>Notes</h1>" in html


def test_preview_unsupported_file(workdir):
    (workdir / "image.png").write_bytes(b"\x89PNG")
    result = runner.invoke(app, ["preview", "image.png"])
    assert result.exit_code == 1


def test_formats():
    result = runner.invoke(app, ["formats"])
    assert result.exit_code == 0
    assert result.output.split() == [".doc", ".docx", ".txt"]


def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "convert" in result.output


def test_convert_writes_log_file(workdir):
    (workdir / "notes.txt").write_text("Notes\n")
    result = runner.invoke(app, ["convert", "notes.txt", "--log-file", "run.log"])
    assert result.exit_code == 0, result.output
    assert "converted notes.txt" in (workdir / "run.log").read_text(encoding="utf-8")
