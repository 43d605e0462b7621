from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from . import docx_format

OUTPUT_FORMATS = ("json", "yaml")


@dataclass
class DocxSettings:
    font_name: str = docx_format.FONT_NAME
    font_size_pt: float = docx_format.FONT_SIZE_PT
    line_spacing_pt: float = docx_format.LINE_SPACING_PT
    list_indent_cm: float = docx_format.LIST_INDENT_CM
    quote_indent_cm: float = docx_format.QUOTE_INDENT_CM


@dataclass
class Settings:
    format: str = "json"
    offset: int = 0
    verbose: bool = False
    docx: DocxSettings = field(default_factory=DocxSettings)


def load_settings(path: str | Path | None = None) -> Settings:
    """Read CLI settings from a YAML file; no path means defaults."""
    if path is None:
        return Settings()
    text = Path(path).read_text(encoding="utf-8")
    return parse_settings(text)


def parse_settings(text: str) -> Settings:
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping.")

    settings = Settings()
    if "format" in data:
        fmt = str(data["format"]).lower()
        if fmt not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {data['format']!r}")
        settings.format = fmt
    if "offset" in data:
        settings.offset = _non_negative_int(data["offset"], "offset")
    if "verbose" in data:
        settings.verbose = bool(data["verbose"])
    if "docx" in data:
        settings.docx = _build_docx_settings(data["docx"])
    return settings


def _build_docx_settings(value: Any) -> DocxSettings:
    if value is None:
        return DocxSettings()
    if not isinstance(value, dict):
        raise ValueError("'docx' must be a mapping.")
    docx = DocxSettings()
    if value.get("font_name"):
        docx.font_name = str(value["font_name"])
    for key in ("font_size_pt", "line_spacing_pt", "list_indent_cm", "quote_indent_cm"):
        if key in value:
            try:
                setattr(docx, key, float(value[key]))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"'docx.{key}' must be a number.") from exc
    return docx


def _non_negative_int(value: Any, name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{name}' must be an integer.") from exc
    if number < 0:
        raise ValueError(f"'{name}' must not be negative.")
    return number
