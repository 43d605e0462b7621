import pytest

from mdquill import markdown_parser
from mdquill.markdown_parser import looks_like_markdown, parse_inline, parse_markdown
from mdquill.model import (
    Blockquote,
    Bold,
    BulletList,
    Italic,
    Link,
    ListItem,
    Newline,
    OrderedList,
    Paragraph,
    Text,
)


def test_plain_text_is_single_token():
    assert parse_inline("hello world") == (Text("hello world"),)
    assert parse_inline("") == ()


def test_bold_segments():
    assert parse_inline("**a** and **b**") == (Bold((Text("a"),)), Text(" and "), Bold((Text("b"),)))
    assert parse_inline("a **bold** b") == (Text("a "), Bold((Text("bold"),)), Text(" b"))


def test_italic_and_link():
    assert parse_inline("a *italic* b") == (Text("a "), Italic((Text("italic"),)), Text(" b"))
    assert parse_inline("see [link](http://x.com) here") == (
        Text("see "),
        Link(children=(Text("link"),), url="http://x.com"),
        Text(" here"),
    )


def test_nested_spans():
    assert parse_inline("*[click](http://x.com)*") == (
        Italic((Link(children=(Text("click"),), url="http://x.com"),)),
    )
    assert parse_inline("**a *b* c**") == (Bold((Text("a "), Italic((Text("b"),)), Text(" c"))),)
    assert parse_inline("*some **bold** text*") == (
        Italic((Text("some "), Bold((Text("bold"),)), Text(" text"))),
    )


def test_unclosed_markers_stay_literal():
    assert parse_inline("**unclosed") == (Text("**unclosed"),)
    assert parse_inline("*unclosed") == (Text("*unclosed"),)
    assert parse_inline("[text](no close") == (Text("[text](no close"),)
    assert parse_inline("[text] (x)") == (Text("[text] (x)"),)
    assert parse_inline("5 * 3 = 15") == (Text("5 * 3 = 15"),)


def test_empty_spans_degrade_to_text():
    assert parse_inline("****") == (Text("****"),)
    assert parse_inline("[](u)") == (Text("[](u)"),)
    assert parse_inline("[a]()") == (Text("[a]()"),)


def test_link_url_keeps_balanced_parentheses():
    tokens = parse_inline("[wiki](https://en.wikipedia.org/wiki/Foo_(bar))")
    assert tokens == (Link(children=(Text("wiki"),), url="https://en.wikipedia.org/wiki/Foo_(bar)"),)


def test_link_wins_over_emphasis_inside_label():
    assert parse_inline("[**b**](u) x") == (Link(children=(Bold((Text("b"),)),), url="u"), Text(" x"))


def test_tokens_are_hashable_and_immutable():
    (token,) = parse_inline("**a *b* c**")
    assert hash(token) == hash(Bold((Text("a "), Italic((Text("b"),)), Text(" c"))))
    with pytest.raises(AttributeError):
        token.children.append(Text("c"))


def test_paragraphs_and_newlines():
    assert parse_markdown("hello world") == [Paragraph((Text("hello world"),))]
    assert parse_markdown("first\n\nsecond") == [
        Paragraph((Text("first"),)),
        Newline(),
        Newline(),
        Paragraph((Text("second"),)),
    ]


def test_empty_input_edge_cases():
    assert parse_markdown("") == [Newline()]
    assert parse_markdown("\n\n") == [Newline(), Newline(), Newline()]


def test_bullet_lists_group_mixed_markers():
    assert parse_markdown("- one\n* two") == [
        BulletList(items=(ListItem((Text("one"),), 0), ListItem((Text("two"),), 0)))
    ]


def test_crlf_lines_match_lf_lines():
    assert parse_markdown("- a\r\n- b") == parse_markdown("- a\n- b")
    assert parse_markdown("x\r\n\r\n> q") == parse_markdown("x\n\n> q")


def test_ordered_list():
    assert parse_markdown("1. first\n2. second\n10. third") == [
        OrderedList(
            items=(
                ListItem((Text("first"),), 0),
                ListItem((Text("second"),), 0),
                ListItem((Text("third"),), 0),
            )
        )
    ]


def test_ordered_list_needs_ascii_digits():
    assert parse_markdown("١. x") == [Paragraph((Text("١. x"),))]
    assert not looks_like_markdown("١. x")


def test_nested_list_indent():
    (block,) = parse_markdown("- parent\n  - child\n    - grandchild")
    assert isinstance(block, BulletList)
    assert [item.indent for item in block.items] == [0, 1, 2]


def test_odd_indent_rounds_down():
    (block,) = parse_markdown("   1. three spaces")
    assert block.items[0].indent == 1


def test_list_kinds_do_not_merge():
    blocks = parse_markdown("- a\n1. b")
    assert [type(b) for b in blocks] == [BulletList, OrderedList]


def test_blockquote_with_inline_formatting():
    assert parse_markdown("> **bold** and *italic*") == [
        Blockquote((Bold((Text("bold"),)), Text(" and "), Italic((Text("italic"),))))
    ]


def test_blockquote_consumes_one_line():
    assert parse_markdown("> a\n> b") == [Blockquote((Text("a"),)), Blockquote((Text("b"),))]


def test_mixed_blocks():
    result = parse_markdown("intro\n\n- item1\n- item2\n\n> quote")
    assert result == [
        Paragraph((Text("intro"),)),
        Newline(),
        Newline(),
        BulletList(items=(ListItem((Text("item1"),)), ListItem((Text("item2"),)))),
        Newline(),
        Blockquote((Text("quote"),)),
    ]


def test_trailing_newline_after_paragraph():
    assert parse_markdown("text\n") == [Paragraph((Text("text"),)), Newline(), Newline()]


def test_detects_markdown():
    for text in (
        "- item",
        "* item",
        "  - nested item",
        "1. first",
        "  1. nested",
        "> quoted",
        "some **bold** text",
        "some *italic* text",
        "[click](https://example.com)",
        "plain text\n- item1\n- item2",
        "line one\n**bold line**",
    ):
        assert looks_like_markdown(text), text


def test_rejects_plain_text():
    assert not looks_like_markdown("hello world")
    assert not looks_like_markdown("")
    assert not looks_like_markdown("5 * 3 = 15")
    assert not markdown_parser.looks_like_markdown("x * not italic*")
