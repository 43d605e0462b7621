from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docx import Document as DocxDocument
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn

from . import docx_format
from .config import DocxSettings
from .document import Line, TextDocument

BULLET_PREFIX = "– "


@dataclass
class RenderState:
    list_counters: list[int] = field(default_factory=list)
    settings: DocxSettings = field(default_factory=DocxSettings)


def render_document(
    document: TextDocument, output_path: str | Path, settings: DocxSettings | None = None
) -> None:
    output_path = Path(output_path)
    state = RenderState(settings=settings or DocxSettings())
    docx = DocxDocument()
    docx_format.apply_page_layout(docx)

    for line in document.lines():
        _dispatch_line(docx, line, state)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)


def _dispatch_line(docx: DocxDocument, line: Line, state: RenderState) -> None:
    list_type = line.attributes.get("list")
    if list_type:
        _render_list_line(docx, line, list_type, state)
        return
    state.list_counters.clear()
    if line.attributes.get("blockquote"):
        paragraph = docx.add_paragraph()
        _render_segments(paragraph, line, state, force_italic=True)
        docx_format.apply_quote_format(paragraph, state.settings)
    else:
        paragraph = docx.add_paragraph()
        _render_segments(paragraph, line, state)
        docx_format.apply_body_paragraph_format(paragraph, state.settings)


def _render_list_line(docx: DocxDocument, line: Line, list_type: str, state: RenderState) -> None:
    indent = int(line.attributes.get("indent", 0))
    prefix = BULLET_PREFIX
    if list_type == "ordered":
        prefix = f"{_next_list_number(state, indent)}. "
    else:
        del state.list_counters[indent:]
    paragraph = docx.add_paragraph()
    run = paragraph.add_run(prefix)
    docx_format.set_run_font(run, state.settings)
    _render_segments(paragraph, line, state)
    docx_format.apply_list_format(paragraph, state.settings, indent)


def _next_list_number(state: RenderState, indent: int) -> int:
    counters = state.list_counters
    while len(counters) <= indent:
        counters.append(0)
    counters[indent] += 1
    del counters[indent + 1 :]
    return counters[indent]


def _render_segments(paragraph, line: Line, state: RenderState, force_italic: bool = False) -> None:
    for text, attrs in line.segments:
        bold = bool(attrs.get("bold"))
        italic = force_italic or bool(attrs.get("italic"))
        url = attrs.get("link")
        run = paragraph.add_run(text)
        docx_format.set_run_font(run, state.settings, bold=bold, italic=italic, underline=bool(url))
        if url:
            _wrap_in_hyperlink(paragraph, run, url)


def _wrap_in_hyperlink(paragraph, run, url: Any) -> None:
    """Move an already added run inside a w:hyperlink pointing at url."""
    r_id = paragraph.part.relate_to(str(url), RT.HYPERLINK, is_external=True)
    hyperlink = OxmlElement("w:hyperlink")
    hyperlink.set(qn("r:id"), r_id)
    hyperlink.append(run._r)
    paragraph._p.append(hyperlink)
