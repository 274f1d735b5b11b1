"""Line normalization: comment stripping and blank-line skipping."""

from __future__ import annotations

from typing import Iterable, Iterator

COMMENT = "#"


class SourceLine:
    """One normalized input line."""

    def __init__(self, text: str, lineno: int, has_comment: bool):
        self.text: str = text
        self.lineno: int = lineno
        self.has_comment: bool = has_comment

    @property
    def indented(self) -> bool:
        """True when the line opens with a tab, marking a function body line."""
        return self.text.startswith("\t")

    def body(self) -> str:
        """The line with its leading indentation removed."""
        return self.text.lstrip(" \t")

    def __repr__(self) -> str:
        return "SourceLine(" + str(self.lineno) + ", " + repr(self.text) + ")"


def normalize_line(raw: str) -> str | None:
    """Strip a trailing comment and whitespace. Returns None for lines to skip."""
    text = raw.rstrip("\r\n")
    cut = text.find(COMMENT)
    if cut >= 0:
        text = text[:cut]
    text = text.rstrip()
    if text.strip() == "":
        return None
    return text


def read_lines(raw_lines: Iterable[str]) -> Iterator[SourceLine]:
    """Yield normalized lines, numbered from 1 by their position in the input."""
    lineno = 0
    for raw in raw_lines:
        lineno += 1
        text = normalize_line(raw)
        if text is None:
            continue
        yield SourceLine(text, lineno, COMMENT in raw)
