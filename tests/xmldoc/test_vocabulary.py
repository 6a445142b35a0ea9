"""Tests for the tag vocabulary, cref formatting and node stream."""

from __future__ import annotations

import pytest

from xmldoc.errors import MarkupParseError
from xmldoc.vocabulary import get_cref, iter_nodes, parse_fragment, trim_multiline_string


@pytest.mark.parametrize(
    ("cref", "expected"),
    [
        ("T:System.String", "System.String "),
        ("M:Contoso.Widget.Spin(System.Int32)", "Contoso.Widget.Spin(System.Int32) "),
        ("!:Unresolved", "Unresolved "),
        ("System.String", "System.String "),
        ("x", "x"),
        ("", ""),
        ("   ", ""),
        (None, ""),
        ("T:", " "),
    ],
)
def test_get_cref(cref: str | None, expected: str) -> None:
    """Kind prefixes are dropped and a trailing space appended."""
    assert get_cref(cref) == expected


def test_trim_multiline_string_strips_leading_whitespace_only() -> None:
    """Trailing whitespace survives; empty lines are dropped."""
    assert trim_multiline_string("  first  \n\n   second", "|") == "first  |second"


def test_trim_multiline_string_handles_crlf() -> None:
    assert trim_multiline_string("one\r\n  two\n\tthree", "<br>") == "one<br>two<br>three"


def test_trim_multiline_string_keeps_whitespace_only_lines() -> None:
    """A line holding only spaces is not empty, so it survives as ``""``."""
    assert trim_multiline_string("a\n   \nb", "|") == "a||b"


@pytest.mark.parametrize("text", [None, ""])
def test_trim_multiline_string_empty(text: str | None) -> None:
    assert trim_multiline_string(text, "\n") == ""


def test_iter_nodes_reports_document_order() -> None:
    """Start, text and end events follow the markup order including tails."""
    root = parse_fragment("<A>x<b>y</b>z</A>")

    events = [(node.kind, node.name or node.text) for node in iter_nodes(root)]

    assert events == [
        ("start", "docroot"),
        ("start", "a"),
        ("text", "x"),
        ("start", "b"),
        ("text", "y"),
        ("end", "b"),
        ("text", "z"),
        ("end", "a"),
        ("end", "docroot"),
    ]


def test_iter_nodes_skips_subtree_but_keeps_tail() -> None:
    root = parse_fragment("<filterpriority>1<b>2</b></filterpriority>tail")

    nodes = iter_nodes(root, skip=frozenset({"filterpriority"}))
    events = [(node.kind, node.name or node.text) for node in nodes]

    assert events == [("start", "docroot"), ("text", "tail"), ("end", "docroot")]


def test_iter_nodes_ignores_whitespace_between_elements() -> None:
    root = parse_fragment("<a>one</a>\n    \n<b>two</b>")

    texts = [node.text for node in iter_nodes(root) if node.kind == "text"]

    assert texts == ["one", "two"]


def test_node_attribute_lookup_is_case_sensitive() -> None:
    root = parse_fragment('<param Name="upper" name="lower"/>')
    start = next(node for node in iter_nodes(root) if node.name == "param")

    assert start.attribute("name") == "lower"
    assert start.attribute("missing") is None


@pytest.mark.parametrize("fragment", ["<param", "<a></b>", "a & b", "<summary>open"])
def test_parse_fragment_rejects_malformed_markup(fragment: str) -> None:
    with pytest.raises(MarkupParseError) as excinfo:
        parse_fragment(fragment)

    assert excinfo.value.code == "markup-parse-error"
    assert excinfo.value.cause is not None


def test_iter_nodes_walks_nesting_deeper_than_recursion_limit() -> None:
    depth = 5000
    root = parse_fragment("<b>" * depth + "x" + "</b>" * depth + "tail")

    nodes = list(iter_nodes(root))

    assert len(nodes) == 2 * (depth + 1) + 2
    assert [node.text for node in nodes if node.kind == "text"] == ["x", "tail"]
    assert nodes[-1].kind == "end"
