from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class InlineElement:
    """Base class for inline nodes."""


@dataclass(frozen=True)
class Text(InlineElement):
    content: str


@dataclass(frozen=True)
class Bold(InlineElement):
    children: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class Italic(InlineElement):
    children: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class Link(InlineElement):
    children: Tuple[InlineElement, ...]
    url: str


@dataclass(frozen=True)
class ListItem:
    content: Tuple[InlineElement, ...]
    indent: int = 0


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class Paragraph(Block):
    content: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class ListBlock(Block):
    items: Tuple[ListItem, ...]

    list_type: ClassVar[str] = ""


@dataclass(frozen=True)
class BulletList(ListBlock):
    list_type: ClassVar[str] = "bullet"


@dataclass(frozen=True)
class OrderedList(ListBlock):
    list_type: ClassVar[str] = "ordered"


@dataclass(frozen=True)
class Blockquote(Block):
    content: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class Newline(Block):
    """Blank-line marker."""


@dataclass(frozen=True)
class Operation(ABC):
    """Base class for delta operations."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class Retain(Operation):
    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError(f"Retain count must be positive, got {self.count}")

    def to_dict(self) -> dict[str, Any]:
        return {"retain": self.count}


@dataclass(frozen=True)
class Insert(Operation):
    text: str
    attributes: Optional[Dict[str, Any]] = field(default=None, hash=False)

    def to_dict(self) -> dict[str, Any]:
        op: dict[str, Any] = {"insert": self.text}
        if self.attributes:
            op["attributes"] = dict(self.attributes)
        return op


@dataclass
class Delta:
    """Ordered retain-then-insert edit script."""

    ops: List[Operation] = field(default_factory=list)

    def inserted_length(self) -> int:
        return sum(len(op.text) for op in self.ops if isinstance(op, Insert))

    def to_dict(self) -> dict[str, Any]:
        return {"ops": [op.to_dict() for op in self.ops]}
