import pytest
from click.testing import CliRunner
from term_markdown.highlight import Color, Style


class RecordingHighlighter:
    """Highlighter stand-in that records the lines it is asked to style."""

    STYLE = Style(foreground=Color(1, 2, 3), background=Color(4, 5, 6))

    def __init__(self):
        self.lines: list[str] = []
        self.resets = 0

    def reset(self) -> None:
        self.resets += 1

    def highlight(self, line: str):
        self.lines.append(line)
        return [(self.STYLE, line)] if line else []


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def recording_highlighter() -> RecordingHighlighter:
    return RecordingHighlighter()
