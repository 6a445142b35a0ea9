"""Tag vocabulary shared by the plain-text renderer and the comment builder.

Documentation comments are small XML fragments. Each recognised element name
maps to the literal text emitted when the element starts; every other element is
transparent and only its text children contribute output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final, Literal

from defusedxml.ElementTree import ParseError, fromstring

from xmldoc.errors import MarkupParseError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from xml.etree.ElementTree import Element

__all__ = [
    "ROOT_TAG",
    "Node",
    "Tag",
    "get_cref",
    "iter_nodes",
    "parse_fragment",
    "tag_text",
    "trim_multiline_string",
]

ROOT_TAG: Final[str] = "docroot"

_LINE_BREAK = re.compile(r"\r\n|\n")


class Tag(StrEnum):
    """Element names with a dedicated action (compared lower-cased)."""

    FILTERPRIORITY = "filterpriority"
    SUMMARY = "summary"
    REMARKS = "remarks"
    EXAMPLE = "example"
    EXCEPTION = "exception"
    RETURNS = "returns"
    SEE = "see"
    SEEALSO = "seealso"
    PARAMREF = "paramref"
    TYPEPARAM = "typeparam"
    PARAM = "param"
    VALUE = "value"
    BR = "br"
    PARA = "para"
    CODE = "code"


@dataclass(frozen=True, slots=True)
class Node:
    """One event of the document-order node stream.

    ``kind`` is ``"start"``, ``"text"`` or ``"end"``. ``name`` is the lower-cased
    element name for start/end events; ``element`` gives attribute access on
    start events; ``text`` holds the character data of text events.
    """

    kind: Literal["start", "text", "end"]
    name: str = ""
    element: Element | None = None
    text: str = ""

    def attribute(self, key: str) -> str | None:
        """Return the attribute ``key`` of a start event, or ``None``."""
        if self.element is None:
            return None
        return self.element.get(key)


def trim_multiline_string(text: str | None, line_ending: str) -> str:
    """Strip leading whitespace from each non-empty line and rejoin.

    Lines are split on ``\\r\\n`` or ``\\n``; empty pieces are dropped. Trailing
    whitespace on a line is kept.

    Parameters
    ----------
    text : str | None
        Input text; ``None`` behaves like an empty string.
    line_ending : str
        Token placed between surviving lines.

    Returns
    -------
    str
        Normalised text.

    Examples
    --------
    >>> trim_multiline_string("  first  \\n\\n   second", "|")
    'first  |second'
    """
    if not text:
        return ""
    lines = [line for line in _LINE_BREAK.split(text) if line]
    return line_ending.join(line.lstrip() for line in lines)


def get_cref(cref: str | None) -> str:
    """Return the display form of a cross-reference attribute.

    A one-letter kind prefix such as ``T:`` or ``M:`` is dropped and a single
    trailing space appended.

    Parameters
    ----------
    cref : str | None
        Raw ``cref`` attribute value.

    Returns
    -------
    str
        ``""`` for missing or blank input, the input unchanged when shorter than
        two characters, otherwise the formatted reference followed by a space.

    Examples
    --------
    >>> get_cref("T:System.String")
    'System.String '
    >>> get_cref("x")
    'x'
    """
    if cref is None or not cref.strip():
        return ""
    if len(cref) < 2:
        return cref
    if cref[1] == ":":
        return cref[2:] + " "
    return cref + " "


def tag_text(node: Node, line_ending: str) -> str:
    """Return the literal text the renderer emits when ``node`` starts.

    ``filterpriority`` and unrecognised tags emit nothing; skipping the
    ``filterpriority`` subtree is the traversal's job.
    """
    match node.name:
        case Tag.REMARKS:
            return f"{line_ending}Remarks:{line_ending}"
        case Tag.EXAMPLE:
            return f"{line_ending}Example:{line_ending}"
        case Tag.EXCEPTION:
            return f"{line_ending}{get_cref(node.attribute('cref')).rstrip()}: "
        case Tag.RETURNS:
            return f"{line_ending}Returns: "
        case Tag.SEE:
            return get_cref(node.attribute("cref")) + (node.attribute("langword") or "")
        case Tag.SEEALSO:
            return f"{line_ending}See also: {get_cref(node.attribute('cref'))}"
        case Tag.PARAMREF:
            return f"{node.attribute('name') or ''} "
        case Tag.TYPEPARAM:
            name = trim_multiline_string(node.attribute("name"), line_ending)
            return f"{line_ending}<{name}>: "
        case Tag.PARAM:
            name = trim_multiline_string(node.attribute("name"), line_ending)
            return f"{line_ending}{name}: "
        case Tag.VALUE:
            return f"{line_ending}Value: {line_ending}"
        case Tag.BR | Tag.PARA:
            return line_ending
        case _:
            return ""


def parse_fragment(fragment: str) -> Element:
    """Parse ``fragment`` wrapped in a synthetic ``docroot`` element.

    Raises
    ------
    MarkupParseError
        If the wrapped fragment is not well-formed or is rejected as unsafe.
    """
    try:
        return fromstring(f"<{ROOT_TAG}>{fragment}</{ROOT_TAG}>")
    except (ParseError, ValueError) as exc:
        message = f"Malformed documentation fragment: {exc}"
        raise MarkupParseError(message, cause=exc) from exc


def _element_name(element: Element) -> str:
    return element.tag.lower() if isinstance(element.tag, str) else ""


def _has_text(text: str | None) -> bool:
    return bool(text and text.strip())


def iter_nodes(root: Element, *, skip: frozenset[str] = frozenset()) -> Iterator[Node]:
    """Yield the document-order node stream below and including ``root``.

    Whitespace-only character data between elements is insignificant and not
    reported. Elements whose lower-cased name is in ``skip`` are omitted with
    their descendants; their tail text is still reported.

    The walk keeps its own stack of open elements, so nesting depth is bounded
    by memory rather than the interpreter's recursion limit.
    """
    name = _element_name(root)
    if name in skip:
        return
    yield Node("start", name, root)
    if _has_text(root.text):
        yield Node("text", text=root.text)
    stack: list[tuple[Element, Iterator[Element]]] = [(root, iter(root))]
    while stack:
        element, children = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            yield Node("end", _element_name(element), element)
            if stack and _has_text(element.tail):
                yield Node("text", text=element.tail)
            continue
        name = _element_name(child)
        if name in skip:
            if _has_text(child.tail):
                yield Node("text", text=child.tail)
            continue
        yield Node("start", name, child)
        if _has_text(child.text):
            yield Node("text", text=child.text)
        stack.append((child, iter(child)))
