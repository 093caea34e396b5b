from __future__ import annotations

import itertools
from pathlib import Path
from typing import Iterable, Iterator, List


class LineSource:
    """In-memory copy of a text file's lines.

    The file is read once, eagerly; iteration never touches the disk again.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: List[str] = list(lines)

    @classmethod
    def init(cls, path: Path | str) -> LineSource:
        """Read every line of ``path``; I/O errors propagate with no partial result."""
        path = Path(path)
        lines: List[str] = []
        with path.open("r", encoding="utf-8") as f:
            for line in f:
                lines.append(line.removesuffix("\n"))
        return cls(lines)

    def iterate(self) -> Iterator[str]:
        return iter(self._lines)

    def cycle(self) -> Iterator[str]:
        """Endlessly repeat the lines; the consumer must bound it."""
        return itertools.cycle(self._lines)

    def length(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return self.iterate()

    def __len__(self) -> int:
        return self.length()

    def __repr__(self) -> str:
        return f"LineSource(length={self.length()})"
