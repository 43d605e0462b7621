from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from .model import Delta, Insert, Retain

Segment = Tuple[str, dict]


@dataclass
class Line:
    segments: List[Segment]
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "".join(text for text, _ in self.segments)


class TextDocument:
    """In-memory position-addressed rich-text document.

    Mirrors the editor data model: the document always ends with a newline,
    every character carries its own attributes, and the attributes stored on a
    newline are the format of the line it terminates.
    """

    def __init__(self) -> None:
        self._chars: List[str] = ["\n"]
        self._attrs: List[dict[str, Any]] = [{}]
        self._selection: Optional[int] = None

    def current_cursor_offset(self) -> Optional[int]:
        return self._selection

    def document_length(self) -> int:
        return len(self._chars)

    def set_cursor_offset(self, offset: int) -> None:
        self._selection = max(0, min(offset, self.document_length()))

    def apply_operations(self, delta: Delta) -> None:
        cursor = 0
        for op in delta.ops:
            if isinstance(op, Retain):
                if cursor + op.count > self.document_length():
                    raise ValueError(
                        f"Retain of {op.count} at {cursor} exceeds document length {self.document_length()}"
                    )
                cursor += op.count
            elif isinstance(op, Insert):
                attrs = dict(op.attributes or {})
                self._chars[cursor:cursor] = list(op.text)
                self._attrs[cursor:cursor] = [dict(attrs) for _ in op.text]
                cursor += len(op.text)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def lines(self) -> List[Line]:
        lines: List[Line] = []
        segments: List[Segment] = []
        for char, attrs in zip(self._chars, self._attrs):
            if char == "\n":
                lines.append(Line(segments=segments, attributes=dict(attrs)))
                segments = []
            elif segments and segments[-1][1] == attrs:
                segments[-1] = (segments[-1][0] + char, segments[-1][1])
            else:
                segments.append((char, dict(attrs)))
        if segments:
            lines.append(Line(segments=segments))
        return lines
