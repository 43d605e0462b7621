from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .model import (
    Block,
    Blockquote,
    Bold,
    BulletList,
    InlineElement,
    Italic,
    Link,
    ListItem,
    Newline,
    OrderedList,
    Paragraph,
    Text,
)

BULLET_RE = re.compile(r"^(\s*)([-*]) (.*)$")
ORDERED_RE = re.compile(r"^(\s*)([0-9]+)\. (.*)$")
QUOTE_RE = re.compile(r"^> (.*)$")

# Loose pre-filter used before intercepting a paste.
DETECT_PATTERNS = (
    re.compile(r"^[\t ]*[-*] .+", re.MULTILINE),
    re.compile(r"^[\t ]*[0-9]+\. .+", re.MULTILINE),
    re.compile(r"^[\t ]*> .+", re.MULTILINE),
    re.compile(r"\*\*.+?\*\*"),
    re.compile(r"(?<!\*)\*(?!\*)(?=\S).+?(?<!\*)\*(?!\*)"),
    re.compile(r"\[.+?\]\(.+?\)"),
)

_Match = Tuple[InlineElement, int]


def parse_markdown(text: str) -> List[Block]:
    """Split text into block tokens, grouping consecutive list lines."""
    # CRLF input is read as LF.
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    blocks: List[Block] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if BULLET_RE.match(line):
            items, i = _collect_list_items(lines, i, BULLET_RE)
            blocks.append(BulletList(items=items))
        elif ORDERED_RE.match(line):
            items, i = _collect_list_items(lines, i, ORDERED_RE)
            blocks.append(OrderedList(items=items))
        elif QUOTE_RE.match(line):
            quote = QUOTE_RE.match(line)
            blocks.append(Blockquote(content=parse_inline(quote.group(1))))
            i += 1
        elif line == "":
            blocks.append(Newline())
            i += 1
        else:
            blocks.append(Paragraph(content=parse_inline(line)))
            if i < len(lines) - 1:
                blocks.append(Newline())
            i += 1
    return blocks


def _collect_list_items(lines: List[str], index: int, pattern: re.Pattern) -> tuple[Tuple[ListItem, ...], int]:
    items: List[ListItem] = []
    i = index
    while i < len(lines):
        match = pattern.match(lines[i])
        if not match:
            break
        indent = len(match.group(1)) // 2
        items.append(ListItem(content=parse_inline(match.group(3)), indent=indent))
        i += 1
    return tuple(items), i


def parse_inline(text: str) -> Tuple[InlineElement, ...]:
    """Scan a single line for links, bold and italic spans.

    Priority at each position is link, then bold, then italic. Matched
    spans are parsed recursively; anything unmatched stays literal text.
    """
    tokens: List[InlineElement] = []
    buffer: List[str] = []
    i = 0
    while i < len(text):
        match = _match_link(text, i) or _match_bold(text, i) or _match_italic(text, i)
        if match is None:
            buffer.append(text[i])
            i += 1
            continue
        if buffer:
            tokens.append(Text("".join(buffer)))
            buffer = []
        token, i = match
        tokens.append(token)
    if buffer:
        tokens.append(Text("".join(buffer)))
    return tuple(tokens)


def _match_link(text: str, start: int) -> Optional[_Match]:
    if text[start] != "[":
        return None
    close = text.find("]", start + 1)
    if close == -1 or close == start + 1:
        return None
    if close + 1 >= len(text) or text[close + 1] != "(":
        return None
    depth = 1
    j = close + 2
    while j < len(text):
        if text[j] == "(":
            depth += 1
        elif text[j] == ")":
            depth -= 1
            if depth == 0:
                break
        j += 1
    if depth != 0:
        return None
    url = text[close + 2 : j]
    if not url:
        return None
    return Link(children=parse_inline(text[start + 1 : close]), url=url), j + 1


def _match_bold(text: str, start: int) -> Optional[_Match]:
    if not text.startswith("**", start):
        return None
    end = text.find("**", start + 2)
    if end == -1 or end == start + 2:
        return None
    return Bold(children=parse_inline(text[start + 2 : end])), end + 2


def _match_italic(text: str, start: int) -> Optional[_Match]:
    if text[start] != "*":
        return None
    j = start + 1
    while j < len(text):
        if text[j] == "*" and text[j - 1] != "*" and (j + 1 >= len(text) or text[j + 1] != "*"):
            break
        j += 1
    else:
        return None
    return Italic(children=parse_inline(text[start + 1 : j])), j + 1


def looks_like_markdown(text: str) -> bool:
    """Return True if any supported markup pattern occurs in text."""
    return any(pattern.search(text) for pattern in DETECT_PATTERNS)
