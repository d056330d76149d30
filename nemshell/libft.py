"""Small string, number and line-reading helpers used across the shell."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

BUFFER_SIZE = 1024

_WHITESPACE = frozenset("\t\n\v\f\r ")
_CONVERSIONS = frozenset("cspdiuxX%")


def _wrap_signed(value: int, bits: int) -> int:
    span = 1 << bits
    half = 1 << (bits - 1)
    return (value + half) % span - half


def _parse_integer(text: str) -> int:
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    start = index
    while index < len(text) and "0" <= text[index] <= "9":
        index += 1
    if index == start:
        return 0
    return sign * int(text[start:index])


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value."""
    return _wrap_signed(_parse_integer(text), 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 64-bit value."""
    return _wrap_signed(_parse_integer(text), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of a signed 32-bit integer."""
    return str(_wrap_signed(n, 32))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start > len(text) or length <= 0 or not text:
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    Returns None when it is not found there.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(length, 0))
    return None if index < 0 else index


def strncmp(a: str | bytes, b: str | bytes, n: int) -> int:
    """Compare at most ``n`` bytes; the sign of the result orders ``a`` and ``b``."""
    if n <= 0:
        return 0
    left = a.encode() if isinstance(a, str) else bytes(a)
    right = b.encode() if isinstance(b, str) else bytes(b)
    for i in range(n):
        ca = left[i] if i < len(left) else 0
        cb = right[i] if i < len(right) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def _convert(spec: str, arg: object) -> str:
    if spec == "c":
        if isinstance(arg, str):
            return arg[:1]
        return chr(int(arg) & 0xFF)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in "di":
        return str(_wrap_signed(int(arg), 32))
    if spec == "u":
        return str(int(arg) & 0xFFFFFFFF)
    if spec == "x":
        return format(int(arg) & 0xFFFFFFFF, "x")
    if spec == "X":
        return format(int(arg) & 0xFFFFFFFF, "X")
    # "p"
    return "0x" + format(int(arg) & 0xFFFFFFFFFFFFFFFF, "x")


def format_printf(fmt: str, *args: object) -> str:
    """Render ``fmt`` with the conversions c, s, p, d, i, u, x, X and %%."""
    out: list[str] = []
    values = iter(args)
    index = 0
    while index < len(fmt):
        char = fmt[index]
        nxt = fmt[index + 1] if index + 1 < len(fmt) else ""
        if char == "%" and nxt and nxt in _CONVERSIONS:
            if nxt == "%":
                out.append("%")
            else:
                try:
                    arg = next(values)
                except StopIteration:
                    raise TypeError("not enough arguments for format string") from None
                out.append(_convert(nxt, arg))
            index += 2
            continue
        out.append(char)
        index += 1
    return "".join(out)


class LineReader(Generic[AnyStr]):
    """Read a stream line by line, keeping unread data between calls."""

    def __init__(self, stream: IO[AnyStr]) -> None:
        self._stream = stream
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return "\n" if isinstance(data, str) else b"\n"  # type: ignore[return-value]

    def next_line(self) -> AnyStr | None:
        """Return the next line with its newline, or None at end of stream."""
        data = self._pending
        try:
            while data is None or self._newline(data) not in data:
                chunk = self._stream.read(BUFFER_SIZE)
                if not chunk:
                    break
                data = chunk if data is None else data + chunk
        except OSError:
            self._pending = None
            raise
        if not data:
            self._pending = None
            return None
        index = data.find(self._newline(data))
        if index < 0:
            self._pending = None
            return data
        self._pending = data[index + 1:] or None
        return data[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.next_line, None)