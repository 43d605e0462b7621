from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol, runtime_checkable

from .delta_builder import build_delta
from .markdown_parser import parse_markdown
from .model import Delta

logger = logging.getLogger(__name__)


@runtime_checkable
class EditorHost(Protocol):
    """Capabilities the converter needs from a rich-text editor."""

    def current_cursor_offset(self) -> Optional[int]:
        ...

    def document_length(self) -> int:
        ...

    def apply_operations(self, delta: Delta) -> None:
        ...

    def set_cursor_offset(self, offset: int) -> None:
        ...


def find_editor(candidates: Iterable[object]) -> Optional[EditorHost]:
    """Return the first candidate exposing the editor capabilities."""
    for candidate in candidates:
        if isinstance(candidate, EditorHost):
            logger.debug("Found editor: %s", type(candidate).__name__)
            return candidate
    logger.error("Editor instance not found among candidates")
    return None


def insertion_offset(editor: EditorHost) -> int:
    offset = editor.current_cursor_offset()
    if offset is None:
        offset = editor.document_length() - 1
    return max(0, offset)


def convert_and_insert(
    markdown_text: str,
    editor: Optional[EditorHost] = None,
    *,
    candidates: Iterable[object] = (),
) -> None:
    """Parse markdown_text and insert it, formatted, at the editor's cursor.

    Without an explicit editor the first capable object in candidates is used.
    If none is found the call logs and leaves every document untouched.
    """
    logger.info("Parsing markdown...")
    blocks = parse_markdown(markdown_text)
    logger.debug("Tokens: %s", blocks)

    if editor is None:
        editor = find_editor(candidates)
    if editor is None:
        logger.error("No editor available, nothing inserted")
        return

    index = insertion_offset(editor)
    delta = build_delta(blocks, index)
    logger.debug("Applying delta: %s", delta.to_dict())
    editor.apply_operations(delta)
    editor.set_cursor_offset(index + delta.inserted_length())
    logger.info("Done. Inserted %d chars at %d", delta.inserted_length(), index)
