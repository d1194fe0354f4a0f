from __future__ import annotations

import functools
import re
import textwrap
from pathlib import Path

import term_markdown.cli as cli_module
from term_markdown.cli import cli
from term_markdown.source import read_source

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def test_cli_renders_stdin(cli_runner):
    result = cli_runner.invoke(cli, [], input="Hello *world*\n")

    assert result.exit_code == 0
    assert result.output == "Hello world\n\n"


def test_cli_renders_file(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "doc.md",
        """
        Intro

        - one
        - two
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == "Intro\n\n * one\n * two\n\n"


def test_cli_highlights_code_blocks(cli_runner):
    markdown = "```\nfn main() {\n}\n```\n"

    result = cli_runner.invoke(cli, [], input=markdown)

    assert result.exit_code == 0
    assert "\x1b[48;2;" in result.output
    assert ANSI_PATTERN.sub("", result.output) == "fn main() {\n}\n\n"


def test_cli_ignores_config_files(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    markdown = "```\nx\n```\n"
    baseline = cli_runner.invoke(cli, [], input=markdown)
    _write(
        tmp_path,
        "pyproject.toml",
        """
        [tool.term-markdown]
        theme = "default"
        """,
    )

    result = cli_runner.invoke(cli, [], input=markdown)

    assert result.exit_code == 0
    assert result.output == baseline.output


def test_cli_has_no_highlighting_options(cli_runner):
    result = cli_runner.invoke(cli, ["--theme", "nord"], input="x\n")

    assert result.exit_code == 2
    assert "No such option" in result.output


def test_cli_reports_invalid_utf8(cli_runner):
    result = cli_runner.invoke(cli, [], input=b"\xff\xfe broken")

    assert result.exit_code == 1
    assert "Invalid UTF-8 sequence" in result.output
    assert "broken" not in result.output


def test_cli_enforces_input_size_limit(cli_runner, monkeypatch):
    monkeypatch.setattr(cli_module, "read_source", functools.partial(read_source, max_size=4))

    result = cli_runner.invoke(cli, [], input="too long\n")

    assert result.exit_code == 1
    assert "exceeds the maximum allowed size of 4 bytes" in result.output


def test_cli_missing_file(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, [str(tmp_path / "missing.md")])

    assert result.exit_code == 2
