from __future__ import annotations

import textwrap
from pathlib import Path

import reflow_list.cli as cli_module
from reflow_list.cli import cli

PYTHON_SOURCE = """\
def clever():
    # a beautiful description
    # of a clever algorithm
    #    with some indented stuff
    return 42
"""


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_cli_prints_reflowed_document(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "clever.py", PYTHON_SOURCE)

    result = cli_runner.invoke(cli, ["--line", "2", str(target)])

    assert result.exit_code == 0
    assert result.output == (
        "def clever():\n"
        "    # a beautiful description of a clever algorithm\n"
        "    #    with some indented stuff\n"
        "    return 42\n"
    )
    assert target.read_text(encoding="utf-8") == PYTHON_SOURCE


def test_cli_updates_file_in_place(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "clever.py", PYTHON_SOURCE)

    result = cli_runner.invoke(cli, ["--line", "3", "--in-place", str(target)])

    assert result.exit_code == 0
    assert result.output == ""
    assert target.read_text(encoding="utf-8") == (
        "def clever():\n"
        "    # a beautiful description of a clever algorithm\n"
        "    #    with some indented stuff\n"
        "    return 42\n"
    )


def test_cli_in_place_leaves_unchanged_file_alone(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "done.txt", "already reflowed\n")
    before = target.stat().st_mtime_ns

    result = cli_runner.invoke(cli, ["--line", "1", "-i", str(target)])

    assert result.exit_code == 0
    assert target.stat().st_mtime_ns == before


def test_cli_wrap_column_option(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "list.md", "- one two three four five six\n")

    result = cli_runner.invoke(cli, ["--line", "1", "--wrap-column", "14", str(target)])

    assert result.exit_code == 0
    assert result.output == "- one two\n  three four\n  five six\n"


def test_cli_tab_size_option(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "tabs.txt", "\tx\n\ty\n")

    result = cli_runner.invoke(cli, ["--line", "1", "--tab-size", "2", str(target)])

    assert result.exit_code == 0
    assert result.output == "  x y\n"


def test_cli_extra_indent_option(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "defs.txt", "term: alpha beta gamma\n")

    result = cli_runner.invoke(
        cli, ["--line", "1", "--wrap-column", "16", "--extra-indent", "4", str(target)]
    )

    assert result.exit_code == 0
    assert result.output == "term: alpha beta\n    gamma\n"


def test_cli_reads_config_from_pyproject(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.reflow-list]
        wrap_column = 20
        comment_regexp = '^\\s*(?:!+)?'
        """,
    )
    target = _write(tmp_path, "prog.f90", "! fortran comments can be\n! reflowed too\n")

    result = cli_runner.invoke(cli, ["--line", "1", str(target)])

    assert result.exit_code == 0
    assert result.output == "! fortran comments\n! can be reflowed\n! too\n"


def test_cli_flags_override_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.reflow-list]
        wrap_column = 10
        """,
    )
    target = _write(tmp_path, "notes.txt", "short words that fit\n")

    result = cli_runner.invoke(cli, ["--line", "1", "--wrap-column", "80", str(target)])

    assert result.exit_code == 0
    assert result.output == "short words that fit\n"


def test_cli_paragraph_end_option(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "first\n===\nsecond\n")

    result = cli_runner.invoke(
        cli, ["--line", "1", "--paragraph-end-regexp", "^===", str(target)]
    )

    assert result.exit_code == 0
    assert result.output == "first\n===\nsecond\n"


def test_cli_rejects_invalid_pattern(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "text\n")

    result = cli_runner.invoke(
        cli, ["--line", "1", "--list-start-regexp", "^[-*]", str(target)]
    )

    assert result.exit_code != 0
    assert "must consume the whitespace" in result.output
    assert target.read_text(encoding="utf-8") == "text\n"


def test_cli_rejects_unanchored_pattern(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "text\n")

    result = cli_runner.invoke(cli, ["--line", "1", "--comment-regexp", "#", str(target)])

    assert result.exit_code != 0
    assert "anchored" in result.output


def test_cli_rejects_line_past_end(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "one\ntwo\n")

    result = cli_runner.invoke(cli, ["--line", "5", str(target)])

    assert result.exit_code != 0
    assert "outside the document" in result.output


def test_cli_rejects_line_zero(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "one\n")

    result = cli_runner.invoke(cli, ["--line", "0", str(target)])

    assert result.exit_code != 0


def test_cli_requires_line(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.txt", "one\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "--line" in result.output


def test_cli_empty_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "empty.txt", "")

    result = cli_runner.invoke(cli, ["--line", "1", str(target)])

    assert result.exit_code == 0
    assert result.output == ""


def test_cli_public_api():
    assert cli_module.__all__ == ["cli"]
