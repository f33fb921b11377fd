"""Shared utilities for the Rust backend: the text sink and identifier rewriting."""

from __future__ import annotations

from types import MappingProxyType


class RenderError(Exception):
    """Internal-consistency failure while rendering. The render is unusable."""


class EmitterError(RenderError):
    """Checkpoint stack or indentation discipline violated."""


# Java constant names with a fixed Rust spelling
NAME_MAP: MappingProxyType[str, str] = MappingProxyType(
    {
        "NaN": "NAN",
        "NEGATIVE_INFINITY": "NEG_INFINITY",
        "POSITIVE_INFINITY": "INFINITY",
        "MIN_VALUE": "MIN",
        "MAX_VALUE": "MAX",
    }
)


def to_snake(name: str) -> str:
    """Rewrite a Java identifier to Rust naming.

    Table names win. Names starting lowercase go from camelCase to snake_case,
    one underscore per uppercase letter. Anything else is returned as is.
    """
    mapped = NAME_MAP.get(name)
    if mapped is not None:
        return mapped
    if not name or not name[0].islower():
        return name
    parts: list[str] = []
    for c in name:
        if c.isupper():
            parts.append("_")
            parts.append(c.lower())
        else:
            parts.append(c)
    return "".join(parts)


class Emitter:
    """Indentation-aware, append-only text sink with nested checkpoints.

    Indentation is written lazily: the first `print` after a line break emits
    `level` copies of the indent unit. Checkpoints are buffer offsets kept on a
    stack; `discard` keeps the text written since the mark, `rewind` drops it.
    Only the most recent open mark may be resolved.
    """

    def __init__(self, indent_str: str = "    ") -> None:
        self.level: int = 0
        self._indent_str = indent_str
        self._chunks: list[str] = []
        self._size: int = 0
        self._at_line_start: bool = True
        # (buffer offset, line-start flag, chunk count) per open mark
        self._marks: list[tuple[int, bool, int]] = []

    # ── writing ──────────────────────────────────────────────

    def print(self, text: str) -> None:
        """Append text, indenting first if a line break just occurred."""
        if self._at_line_start:
            self._append(self._indent_str * self.level)
            self._at_line_start = False
        self._append(text)

    def newline(self) -> None:
        self._append("\n")
        self._at_line_start = True

    def line(self, text: str = "") -> None:
        """Print text (if any) and end the line."""
        if text:
            self.print(text)
        self.newline()

    def indent(self) -> None:
        self.level += 1

    def unindent(self) -> None:
        if self.level == 0:
            raise EmitterError("unindent below level 0")
        self.level -= 1

    def _append(self, text: str) -> None:
        if text:
            self._chunks.append(text)
            self._size += len(text)

    # ── checkpoints ──────────────────────────────────────────

    def checkpoint(self) -> int:
        """Push a mark at the current end of the buffer and return it."""
        self._marks.append((self._size, self._at_line_start, len(self._chunks)))
        return self._size

    def peek(self, mark: int) -> str:
        """Text written since `mark`. Mutates nothing."""
        for size, _, chunk in reversed(self._marks):
            if size == mark:
                return "".join(self._chunks[chunk:])
        raise EmitterError(f"peek at unknown mark {mark}")

    def discard(self, mark: int) -> None:
        """Resolve `mark`, keeping the text written since."""
        self._pop(mark)

    def rewind(self, mark: int) -> None:
        """Resolve `mark`, dropping the text written since."""
        _, at_line_start, chunk = self._pop(mark)
        del self._chunks[chunk:]
        self._size = mark
        self._at_line_start = at_line_start

    def _pop(self, mark: int) -> tuple[int, bool, int]:
        if not self._marks:
            raise EmitterError(f"no open checkpoint to resolve (mark {mark})")
        if self._marks[-1][0] != mark:
            raise EmitterError(
                f"mark {mark} is not the innermost checkpoint ({self._marks[-1][0]})"
            )
        return self._marks.pop()

    @property
    def open_marks(self) -> int:
        return len(self._marks)

    # ── scratch and result ───────────────────────────────────

    def scratch(self) -> Emitter:
        """A fresh, isolated sink continuing at this sink's indentation, mid-line."""
        sink = Emitter(self._indent_str)
        sink.level = self.level
        sink._at_line_start = False
        return sink

    def finish(self) -> str:
        """Return the accumulated text; every checkpoint must be resolved."""
        if self._marks:
            raise EmitterError(f"{len(self._marks)} checkpoint(s) left open")
        return self.output()

    def output(self) -> str:
        """Return the accumulated output as a string."""
        if len(self._chunks) > 1:
            text = "".join(self._chunks)
            # open marks index into the chunk list
            if self._marks:
                return text
            self._chunks = [text]
        return self._chunks[0] if self._chunks else ""
