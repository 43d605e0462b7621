from __future__ import annotations

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt

A4_WIDTH_MM = 210
A4_HEIGHT_MM = 297

FONT_NAME = "Calibri"
FONT_SIZE_PT = 11
LINE_SPACING_PT = 15
LIST_INDENT_CM = 0.75
QUOTE_INDENT_CM = 1.0

MARGIN_CM = 2.0


def apply_page_layout(doc) -> None:
    """A4 page with even margins."""
    section = doc.sections[0]
    section.page_height = Cm(A4_HEIGHT_MM / 10)
    section.page_width = Cm(A4_WIDTH_MM / 10)
    section.left_margin = Cm(MARGIN_CM)
    section.right_margin = Cm(MARGIN_CM)
    section.top_margin = Cm(MARGIN_CM)
    section.bottom_margin = Cm(MARGIN_CM)


def set_run_font(run, settings, bold: bool = False, italic: bool = False, underline: bool = False) -> None:
    run.font.name = settings.font_name
    run.font.size = Pt(settings.font_size_pt)
    run.bold = bold
    run.italic = italic
    if underline:
        run.font.underline = True


def apply_body_paragraph_format(paragraph, settings) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_after = Pt(0)
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.line_spacing = Pt(settings.line_spacing_pt)
    paragraph.paragraph_format.first_line_indent = Cm(0)


def apply_list_format(paragraph, settings, indent: int) -> None:
    apply_body_paragraph_format(paragraph, settings)
    paragraph.paragraph_format.left_indent = Cm(settings.list_indent_cm * (indent + 1))


def apply_quote_format(paragraph, settings) -> None:
    apply_body_paragraph_format(paragraph, settings)
    paragraph.paragraph_format.left_indent = Cm(settings.quote_indent_cm)
