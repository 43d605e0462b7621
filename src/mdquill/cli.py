from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from . import delta_builder, markdown_parser, renderer_docx
from .config import OUTPUT_FORMATS, load_settings
from .document import TextDocument
from .host import convert_and_insert
from .utils import configure_logging, read_markdown, resolve_output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdquill",
        description="Convert lightweight Markdown into rich-text editor operations.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=str, help="Path to a YAML settings file")
    sub = parser.add_subparsers(dest="command", required=True)

    delta = sub.add_parser("delta", help="Print the operation list for a Markdown file")
    delta.add_argument("input", type=str, help="Path to Markdown file, or - for stdin")
    delta.add_argument("--offset", type=int, help="Characters to retain before inserting")
    delta.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format")
    delta.add_argument("-o", "--output", type=str, help="Write to this file instead of stdout")

    docx = sub.add_parser("docx", help="Render a Markdown file to DOCX through the editor model")
    docx.add_argument("input", type=str, help="Path to Markdown file, or - for stdin")
    docx.add_argument("-o", "--output", type=str, help="Output DOCX path")

    detect = sub.add_parser("detect", help="Report whether the text contains Markdown markup")
    detect.add_argument("input", type=str, help="Path to text file, or - for stdin")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings(args.config)
    configure_logging(verbose=args.verbose or settings.verbose)

    logging.info("Reading %s", args.input)
    markdown_text = read_markdown(args.input)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    if args.command == "detect":
        found = markdown_parser.looks_like_markdown(markdown_text)
        print("markdown" if found else "plain")
        return 0 if found else 1

    if args.command == "delta":
        offset = settings.offset if args.offset is None else args.offset
        if offset < 0:
            parser.error("--offset must not be negative")
        blocks = markdown_parser.parse_markdown(markdown_text)
        delta = delta_builder.build_delta(blocks, offset)
        rendered = format_delta(delta.to_dict(), args.format or settings.format)
        if args.output:
            Path(args.output).write_text(rendered, encoding="utf-8")
            logging.info("Done. Saved to %s", args.output)
        else:
            sys.stdout.write(rendered)
        return 0

    if args.input == "-" and not args.output:
        parser.error("docx: -o/--output is required when reading from stdin")
    output_path = resolve_output_path(Path(args.input), args.output)
    document = TextDocument()
    convert_and_insert(markdown_text, candidates=[document])

    logging.info("Rendering DOCX to %s", output_path)
    renderer_docx.render_document(document, output_path, settings=settings.docx)
    logging.info("Done. Saved to %s", output_path)
    return 0


def format_delta(payload: dict, fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


if __name__ == "__main__":
    sys.exit(main())
