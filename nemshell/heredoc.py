"""Reading here-documents (``<< DELIMITER``) line by line."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

PROMPT = "> "

ReadLine = Callable[[str], Optional[str]]


def matches_delimiter(line: str, delimiter: str) -> bool:
    """True when ``line`` ends the here-document.

    The line must equal the delimiter and be longer than one character.
    """
    return len(line) > 1 and line == delimiter


def _read(read_line: ReadLine) -> str | None:
    try:
        line = read_line(PROMPT)
    except EOFError:
        return None
    if line is None:
        return None
    return line[:-1] if line.endswith("\n") else line


def read_heredoc(delimiters: Sequence[str], read_line: ReadLine | None = None) -> str:
    """Read one here-document per delimiter and return the text of the last.

    Each stored line gets a newline.  The text of earlier here-documents is
    discarded.  End of input abandons everything and gives an empty text.
    A line equal to a one-character delimiter is ignored.
    """
    reader = input if read_line is None else read_line
    result = ""
    for delimiter in delimiters:
        lines: list[str] = []
        while True:
            line = _read(reader)
            if line is None:
                return ""
            if not line or line != delimiter:
                lines.append(line + "\n")
            elif matches_delimiter(line, delimiter):
                break
        result = "".join(lines)
    return result