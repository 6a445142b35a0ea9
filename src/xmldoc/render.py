"""Render XML documentation comments into plain text."""

from __future__ import annotations

from dataclasses import dataclass, field

from xmldoc.errors import MarkupParseError
from xmldoc.logging import get_logger
from xmldoc.vocabulary import Tag, iter_nodes, parse_fragment, tag_text, trim_multiline_string

__all__ = ["convert_documentation"]

LOGGER = get_logger(__name__)

_SKIPPED = frozenset({Tag.FILTERPRIORITY.value})


@dataclass(slots=True)
class _TraversalState:
    """Open element names and accumulated output for one conversion."""

    open_elements: list[str] = field(default_factory=list)
    parts: list[str] = field(default_factory=list)

    @property
    def element_name(self) -> str | None:
        return self.open_elements[-1] if self.open_elements else None


def convert_documentation(xml_documentation: str | None, line_ending: str) -> str:
    """Convert an XML documentation fragment into a plain-text string.

    Parameters
    ----------
    xml_documentation : str | None
        Documentation markup; multiple top-level elements are allowed.
    line_ending : str
        Token used for every line break the conversion inserts.

    Returns
    -------
    str
        Plain text. An empty string for empty input, and the input unchanged
        when it is not well-formed.

    Examples
    --------
    >>> convert_documentation("<remarks>Note.</remarks>", "\\n")
    '\\nRemarks:\\nNote.'
    """
    if not xml_documentation:
        return ""
    try:
        root = parse_fragment(xml_documentation)
    except MarkupParseError as exc:
        LOGGER.debug(
            "Returning unparsable documentation unchanged",
            extra={"operation": "render", "status": "fallback", "error": exc.message},
        )
        return xml_documentation

    state = _TraversalState()
    for node in iter_nodes(root, skip=_SKIPPED):
        if node.kind == "start":
            state.open_elements.append(node.name)
            state.parts.append(tag_text(node, line_ending))
        elif node.kind == "end":
            state.open_elements.pop()
        elif state.element_name == Tag.CODE:
            state.parts.append(node.text)
        else:
            state.parts.append(trim_multiline_string(node.text, line_ending))
    return "".join(state.parts)
