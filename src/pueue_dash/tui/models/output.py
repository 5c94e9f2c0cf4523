"""Captured status output and the content extents derived from it."""

from __future__ import annotations

import re
from dataclasses import dataclass

from rich.ansi import AnsiDecoder
from rich.cells import cell_len
from rich.text import Text

from pueue_dash.logging import get_logger
from pueue_dash.runners.models import CommandResult

__all__ = ["CapturedOutput", "count_lines", "strip_ansi", "max_line_width"]

logger = get_logger(__name__)

ANSI_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")

TAB_SIZE = 8


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences."""
    return ANSI_RE.sub("", text)


def split_lines(text: str) -> list[str]:
    """Split on newlines the way line-oriented tools count them.

    A trailing newline does not start another line and a ``\\r`` before the
    newline is dropped, so ``""`` has no lines and ``"a\\n"`` has one.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def count_lines(text: str) -> int:
    return len(split_lines(text))


def max_line_width(text: str) -> int:
    """Widest line in terminal cells after stripping ANSI codes; 0 if empty."""
    return max(
        (cell_len(line.expandtabs(TAB_SIZE)) for line in split_lines(strip_ansi(text))),
        default=0,
    )


@dataclass(frozen=True, slots=True)
class CapturedOutput:
    """Output of the most recent status command run.

    Replaced wholesale on every refresh. ``lines`` holds the styled text ready
    for rendering; ``line_count`` and ``max_width`` are the content extents
    used by the scrollbars.

    Attributes:
        raw: Bytes read from the command's stdout.
        lines: One styled Text per output line.
        line_count: Number of newline-delimited lines.
        max_width: Widest visible line in cells.
        decode_error: True if the bytes were not valid UTF-8.
        error: Message shown instead of output when the command did not run.
    """

    raw: bytes = b""
    lines: tuple[Text, ...] = ()
    line_count: int = 0
    max_width: int = 0
    decode_error: bool = False
    error: str | None = None

    @classmethod
    def empty(cls) -> CapturedOutput:
        return cls()

    @classmethod
    def from_bytes(cls, raw: bytes) -> CapturedOutput:
        """Decode command output, keeping its ANSI styling.

        Invalid UTF-8 is replaced with U+FFFD rather than rejected.
        """
        decode_error = False
        try:
            decoded = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("status_output_not_utf8", position=e.start, size=len(raw))
            decoded = raw.decode("utf-8", errors="replace")
            decode_error = True

        # one decoder so styles left open carry over to the next line
        decoder = AnsiDecoder()
        styled = []
        for line in split_lines(decoded):
            text = decoder.decode_line(line)
            text.expand_tabs(TAB_SIZE)
            styled.append(text)

        return cls(
            raw=raw,
            lines=tuple(styled),
            line_count=count_lines(decoded),
            max_width=max_line_width(decoded),
            decode_error=decode_error,
        )

    @classmethod
    def from_error(cls, message: str) -> CapturedOutput:
        return cls(error=message)

    @classmethod
    def from_result(cls, result: CommandResult) -> CapturedOutput:
        """Build the displayed output for a runner result."""
        if result.error is not None:
            return cls.from_error(result.error)
        return cls.from_bytes(result.stdout)
