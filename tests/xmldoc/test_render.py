"""Tests for plain-text rendering of documentation comments."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from xmldoc.render import convert_documentation

if TYPE_CHECKING:
    from _pytest.logging import LogCaptureFixture


@pytest.mark.parametrize(
    ("fragment", "expected"),
    [
        ("<summary> Hello world. </summary>", "Hello world. "),
        ('<param name="x">the value</param>', "\nx: the value"),
        ("<remarks>Note.</remarks>", "\nRemarks:\nNote."),
        ("<example>Call it.</example>", "\nExample:\nCall it."),
        ("<returns>The count.</returns>", "\nReturns: The count."),
        ("<value>Current size.</value>", "\nValue: \nCurrent size."),
        ('<typeparam name="T">Element type.</typeparam>', "\n<T>: Element type."),
        (
            '<exception cref="T:System.ArgumentNullException">when null</exception>',
            "\nSystem.ArgumentNullException: when null",
        ),
        ('<seealso cref="T:System.Object"/>', "\nSee also: System.Object "),
        (
            '<summary>Uses <see cref="T:System.String"/> values.</summary>',
            "Uses System.String values.",
        ),
        ('<summary>Uses <paramref name="count"/>items.</summary>', "Uses count items."),
        ("<summary>First.<para>Second.</para></summary>", "First.\nSecond."),
        ("<summary>First.<br/>Second.</summary>", "First.\nSecond."),
    ],
)
def test_convert_documentation_tag_vocabulary(fragment: str, expected: str) -> None:
    """Each recognised tag emits its fixed text before its content."""
    assert convert_documentation(fragment, "\n") == expected


def test_see_langword_follows_cref_text() -> None:
    """Tail text loses its leading space, so the keyword abuts the next word."""
    fragment = '<summary>Returns <see langword="null"/> when empty.</summary>'
    rendered = convert_documentation(fragment, "\n")

    assert rendered == "Returns nullwhen empty."


def test_tag_names_match_case_insensitively() -> None:
    assert convert_documentation("<REMARKS>Note.</REMARKS>", "\n") == "\nRemarks:\nNote."


def test_filterpriority_is_skipped_with_descendants() -> None:
    fragment = "<summary>Text.</summary><filterpriority>2<para>x</para></filterpriority>"

    assert convert_documentation(fragment, "\n") == "Text."


def test_unknown_tags_are_transparent() -> None:
    assert convert_documentation("<member><c>Widget</c> spins</member>", "\n") == "Widgetspins"


def test_code_text_is_verbatim() -> None:
    fragment = "<example><code>\n  var x = 1;\n  x++;\n</code></example>"

    assert convert_documentation(fragment, "\n") == "\nExample:\n\n  var x = 1;\n  x++;\n"


def test_text_after_code_is_normalised() -> None:
    """Only text whose nearest enclosing element is ``code`` keeps its spacing."""
    assert convert_documentation("<code>  a</code>  b", "\n") == "  ab"


def test_line_ending_token_is_used_for_every_break() -> None:
    rendered = convert_documentation("<remarks>a\n  b</remarks>", "\r\n")

    assert rendered == "\r\nRemarks:\r\na\r\nb"


def test_consecutive_parameters_without_single_root() -> None:
    fragment = '<param name="a">first</param>\n<param name="b">second</param>'

    assert convert_documentation(fragment, "\n") == "\na: first\nb: second"


def test_plain_text_lines_are_trimmed_and_rejoined() -> None:
    assert convert_documentation("  line one  \n\n  line two", "|") == "line one  |line two"


def test_entities_are_decoded() -> None:
    rendered = convert_documentation("<summary>List&lt;T&gt; &amp; more</summary>", "\n")

    assert rendered == "List<T> & more"


@pytest.mark.parametrize("fragment", ["", None])
def test_empty_input_returns_empty_string(fragment: str | None) -> None:
    assert convert_documentation(fragment, "\n") == ""


@pytest.mark.parametrize("fragment", ["<param", "<summary>unclosed", "a & b", "<a></b>"])
def test_malformed_input_is_returned_unchanged(fragment: str) -> None:
    assert convert_documentation(fragment, "\r\n") == fragment


def test_malformed_input_logs_fallback(caplog: LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="xmldoc.render"):
        convert_documentation("<param", "\n")

    record = caplog.records[-1]
    assert record.getMessage() == "Returning unparsable documentation unchanged"
    assert getattr(record, "status", None) == "fallback"


def test_deeply_nested_markup_renders() -> None:
    depth = 5000
    fragment = "<b>" * depth + "x" + "</b>" * depth

    assert convert_documentation(fragment, "\n") == "x"
