"""Build :class:`StructuredDocumentationComment` records from XML markup.

The traversal mirrors :mod:`xmldoc.render` but routes text into per-section
buckets. Each element start pushes the bucket that receives its text; the
matching end restores the enclosing one, so text after ``</summary>`` no longer
lands in the summary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from xmldoc.errors import MarkupParseError
from xmldoc.logging import get_logger
from xmldoc.schema import EMPTY, ExceptionDoc, StructuredDocumentationComment
from xmldoc.vocabulary import (
    Node,
    Tag,
    get_cref,
    iter_nodes,
    parse_fragment,
    tag_text,
    trim_multiline_string,
)

__all__ = ["build_comment"]

LOGGER = get_logger(__name__)

_SKIPPED = frozenset({Tag.FILTERPRIORITY.value})
_SCALAR_SECTIONS = frozenset(
    {Tag.SUMMARY.value, Tag.REMARKS.value, Tag.RETURNS.value, Tag.VALUE.value, Tag.EXAMPLE.value}
)
_INLINE_TAGS = frozenset({Tag.BR.value, Tag.PARA.value, Tag.PARAMREF.value, Tag.SEE.value})

type _Bucket = list[str]


@dataclass(slots=True)
class _Sections:
    """Mutable accumulators filled during one traversal."""

    scalars: dict[str, _Bucket] = field(
        default_factory=lambda: {name: [] for name in _SCALAR_SECTIONS}
    )
    parameters: dict[str, _Bucket] = field(default_factory=dict)
    type_parameters: dict[str, _Bucket] = field(default_factory=dict)
    exceptions: list[tuple[str, _Bucket]] = field(default_factory=list)
    see_also: list[_Bucket] = field(default_factory=list)

    def open_bucket(self, node: Node, line_ending: str, current: _Bucket | None) -> _Bucket | None:
        """Return the bucket receiving text inside ``node``."""
        if node.name in _SCALAR_SECTIONS:
            return self.scalars[node.name]
        if node.name == Tag.PARAM:
            name = trim_multiline_string(node.attribute("name"), line_ending)
            return self.parameters.setdefault(name, [])
        if node.name == Tag.TYPEPARAM:
            name = trim_multiline_string(node.attribute("name"), line_ending)
            return self.type_parameters.setdefault(name, [])
        if node.name == Tag.EXCEPTION:
            message: _Bucket = []
            self.exceptions.append((get_cref(node.attribute("cref")).rstrip(), message))
            return message
        if node.name == Tag.SEEALSO:
            entry = [get_cref(node.attribute("cref"))]
            self.see_also.append(entry)
            return entry
        if node.name in _INLINE_TAGS and current is not None:
            current.append(tag_text(node, line_ending))
        return current

    def freeze(self) -> StructuredDocumentationComment:
        scalars = {name: "".join(parts) for name, parts in self.scalars.items()}
        return StructuredDocumentationComment(
            summary_text=scalars[Tag.SUMMARY.value],
            remarks_text=scalars[Tag.REMARKS.value],
            returns_text=scalars[Tag.RETURNS.value],
            value_text=scalars[Tag.VALUE.value],
            example_text=scalars[Tag.EXAMPLE.value],
            parameters=MappingProxyType(
                {name: "".join(parts) for name, parts in self.parameters.items()}
            ),
            type_parameters=MappingProxyType(
                {name: "".join(parts) for name, parts in self.type_parameters.items()}
            ),
            exceptions=tuple(
                ExceptionDoc(cref, "".join(message)) for cref, message in self.exceptions
            ),
            see_also=tuple("".join(parts) for parts in self.see_also),
        )


def build_comment(
    xml_documentation: str | None, line_ending: str
) -> StructuredDocumentationComment:
    """Bucket an XML documentation fragment by section.

    Parameters
    ----------
    xml_documentation : str | None
        Documentation markup; multiple top-level elements are allowed.
    line_ending : str
        Token used for every line break the conversion inserts.

    Returns
    -------
    StructuredDocumentationComment
        The populated record. :data:`~xmldoc.schema.EMPTY` for empty or
        malformed input.

    Examples
    --------
    >>> comment = build_comment('<param name="x">The x.</param>', "\\n")
    >>> comment.get_parameter_text("x")
    'The x.'
    """
    if not xml_documentation:
        return EMPTY
    try:
        root = parse_fragment(xml_documentation)
    except MarkupParseError as exc:
        LOGGER.debug(
            "Discarding unparsable documentation",
            extra={"operation": "build_comment", "status": "fallback", "error": exc.message},
        )
        return EMPTY

    sections = _Sections()
    open_elements: list[str] = []
    buckets: list[_Bucket | None] = [None]
    for node in iter_nodes(root, skip=_SKIPPED):
        if node.kind == "start":
            open_elements.append(node.name)
            buckets.append(sections.open_bucket(node, line_ending, buckets[-1]))
            continue
        if node.kind == "end":
            open_elements.pop()
            buckets.pop()
            continue
        bucket = buckets[-1]
        if bucket is None:
            continue
        if open_elements and open_elements[-1] == Tag.CODE:
            bucket.append(node.text)
        else:
            bucket.append(trim_multiline_string(node.text, line_ending))
    return sections.freeze()
