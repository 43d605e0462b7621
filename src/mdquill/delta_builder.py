from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from .model import (
    Block,
    Blockquote,
    Bold,
    Delta,
    InlineElement,
    Insert,
    Italic,
    Link,
    ListBlock,
    Newline,
    Operation,
    Paragraph,
    Retain,
    Text,
)


def build_delta(blocks: Iterable[Block], start_index: int = 0) -> Delta:
    """Compile block tokens into a delta that retains start_index characters first."""
    ops: List[Operation] = []
    if start_index > 0:
        ops.append(Retain(start_index))
    for block in blocks:
        ops.extend(_dispatch_block(block))
    return Delta(ops=ops)


def _dispatch_block(block: Block) -> List[Operation]:
    if isinstance(block, Paragraph):
        return list(compile_inline(block.content))
    if isinstance(block, Newline):
        return [Insert("\n")]
    if isinstance(block, ListBlock):
        return _compile_list(block)
    if isinstance(block, Blockquote):
        ops: List[Operation] = list(compile_inline(block.content))
        ops.append(Insert("\n", {"blockquote": True}))
        return ops
    return []


def _compile_list(block: ListBlock) -> List[Operation]:
    ops: List[Operation] = []
    for item in block.items:
        ops.extend(compile_inline(item.content))
        attrs: dict[str, Any] = {"list": block.list_type}
        if item.indent > 0:
            attrs["indent"] = item.indent
        ops.append(Insert("\n", attrs))
    return ops


def compile_inline(
    tokens: Iterable[InlineElement], inherited: Optional[Mapping[str, Any]] = None
) -> List[Insert]:
    """Flatten nested inline spans into inserts carrying the accumulated attributes."""
    inherited = dict(inherited or {})
    inserts: List[Insert] = []
    for token in tokens:
        if isinstance(token, Bold):
            inserts.extend(compile_inline(token.children, {**inherited, "bold": True}))
        elif isinstance(token, Italic):
            inserts.extend(compile_inline(token.children, {**inherited, "italic": True}))
        elif isinstance(token, Link):
            inserts.extend(compile_inline(token.children, {**inherited, "link": token.url}))
        elif isinstance(token, Text):
            inserts.append(Insert(token.content, dict(inherited) if inherited else None))
    return inserts


def inserted_length(ops: Iterable[Operation]) -> int:
    return Delta(ops=list(ops)).inserted_length()
