"""Source text, positions within it and located error reports."""

from dataclasses import dataclass, field
from itertools import accumulate
from pathlib import Path
from typing import Tuple, Union

from linc.files import read

_NEWLINES = (ord("\n"), "\n", b"\n")


@dataclass(frozen=True)
class Pos:
    """A 1-based line and symbol position."""

    line: int
    symbol: int

    def after(self, char: Union[int, str, bytes]) -> "Pos":
        """Return the position that follows ``char`` placed at this one."""
        if char in _NEWLINES:
            return Pos(self.line + 1, 1)
        return Pos(self.line, self.symbol + 1)

    def __str__(self) -> str:
        return f"{self.line}:{self.symbol}"


BEGIN = Pos(1, 1)


def _get_poses(code: bytes) -> Tuple[Pos, ...]:
    if not code:
        return (BEGIN,)
    poses = list(accumulate(code, Pos.after, initial=BEGIN))[:-1]
    poses.append(poses[-1].after(" "))
    return tuple(poses)


def _get_lines(code: bytes) -> Tuple[Tuple[int, int], ...]:
    spans = []
    start = 0
    for part in code.split(b"\n"):
        spans.append((start, len(part)))
        start += len(part) + 1
    return tuple(spans)


@dataclass(frozen=True)
class Source:
    """A named piece of code with the position of every byte."""

    name: str
    code: bytes
    poses: Tuple[Pos, ...]
    lines: Tuple[Tuple[int, int], ...] = field(repr=False)

    @classmethod
    def from_bytes(cls, name: str, code: bytes) -> "Source":
        """Build a source from its name and raw contents."""
        code = bytes(code)
        return cls(name, code, _get_poses(code), _get_lines(code))

    def get_line(self, index: int) -> str:
        """Return the text of the line at 0-based ``index``."""
        if index < 0:
            raise IndexError(index)
        start, length = self.lines[index]
        return self.code[start:start + length].decode("utf-8")


def read_source(path: Union[str, Path]) -> Source:
    """Read the file at ``path`` into a :class:`Source`."""
    return Source.from_bytes(str(path), read(path))


def format_line(number: int, source: Source) -> str:
    """Render line ``number`` (1-based) with a line-number gutter."""
    return f"\n{number:4} | {source.get_line(number - 1)}"


def format_underline(start: int, end: int) -> str:
    """Render a marker row underlining symbols from ``start`` up to ``end``."""
    return "\n     |" + " " * start + "`" * max(0, end - start)


@dataclass(frozen=True)
class Location:
    """A span of a source between two positions."""

    source: Source
    start: Pos
    end: Pos

    def __str__(self) -> str:
        source, start, end = self.source, self.start, self.end
        parts = [f"{source.name} at {start}:\n     |", format_line(start.line, source)]
        if start.line == end.line:
            parts.append(format_underline(start.symbol, end.symbol))
            return "".join(parts)
        first_length = source.lines[start.line - 1][1]
        parts.append(format_underline(start.symbol, first_length + 1))
        parts.extend(format_line(n, source) for n in range(start.line + 1, end.line + 1))
        parts.append(format_underline(1, end.symbol))
        return "".join(parts)