"""Resolve the documentation shown for a symbol.

Each symbol category chooses which declaration supplies the markup:

* parameters read their containing declaration's original definition and
  return that declaration's text for the parameter name;
* type parameters read their containing declaration directly;
* aliases read their target and return its summary;
* every other declaration reads its own markup and returns the full record.

The chosen markup is merged with the declaration's external annotations before
it is bucketed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from xmldoc.comment import build_comment
from xmldoc.external import load_external_documentation
from xmldoc.logging import get_logger
from xmldoc.schema import StructuredDocumentationComment
from xmldoc.symbols import AliasSymbol, DeclarationSymbol, ParameterSymbol, TypeParameterSymbol

if TYPE_CHECKING:
    from xmldoc.symbols import Symbol

__all__ = [
    "get_documentation_text",
    "get_external_documentation",
    "get_structured_documentation",
    "get_structured_documentation_from_xml",
    "merge_documentation",
]

LOGGER = get_logger(__name__)

_SUMMARY_OPEN = "<summary>"


def merge_documentation(
    xml_documentation: str | None, external_documentation: str, line_ending: str
) -> str:
    """Combine declaration markup with external annotation text.

    External text without a ``<summary>`` element is wrapped in one so that it
    still reaches the summary of the built record.

    Examples
    --------
    >>> merge_documentation("", "abc", "\\n")
    '\\n<summary>abc</summary>'
    """
    if _SUMMARY_OPEN not in external_documentation:
        external_documentation = f"{_SUMMARY_OPEN}{external_documentation}</summary>"
    return (xml_documentation or "") + line_ending + external_documentation


def get_structured_documentation_from_xml(
    xml_documentation: str | None,
    external_documentation: str,
    line_ending: str,
) -> StructuredDocumentationComment:
    """Merge ``xml_documentation`` with external text and build the record."""
    return build_comment(
        merge_documentation(xml_documentation, external_documentation, line_ending),
        line_ending,
    )


def get_external_documentation(
    declaration: DeclarationSymbol, folder: str, line_ending: str
) -> str:
    """Load the external annotation text for ``declaration``."""
    return load_external_documentation(
        declaration.display_string,
        declaration.assembly.name,
        folder,
        line_ending,
        assembly_display=declaration.assembly.display_string,
    )


def _declaration_documentation(
    declaration: DeclarationSymbol, folder: str, line_ending: str
) -> StructuredDocumentationComment:
    external = get_external_documentation(declaration, folder, line_ending)
    return get_structured_documentation_from_xml(
        declaration.documentation_xml, external, line_ending
    )


def _resolve_text(
    symbol: Symbol, folder: str, line_ending: str
) -> str | StructuredDocumentationComment:
    match symbol:
        case ParameterSymbol(name=name, containing=containing):
            comment = _declaration_documentation(containing.definition, folder, line_ending)
            return comment.get_parameter_text(name)
        case TypeParameterSymbol(name=name, containing=containing):
            comment = _declaration_documentation(containing, folder, line_ending)
            return comment.get_type_parameter_text(name)
        case AliasSymbol(target=target):
            return _declaration_documentation(target, folder, line_ending).summary_text
        case DeclarationSymbol():
            return _declaration_documentation(symbol, folder, line_ending)
        case _:
            message = f"Unsupported symbol type: {type(symbol).__name__}"
            raise TypeError(message)


def get_structured_documentation(
    symbol: Symbol,
    folder_for_external_annotations: str,
    line_ending: str = "\n",
) -> StructuredDocumentationComment:
    """Return the structured documentation for ``symbol``.

    Parameters
    ----------
    symbol : Symbol
        Symbol to document.
    folder_for_external_annotations : str
        Directory holding ``*.ExternalAnnotations.xml`` files.
    line_ending : str, optional
        Line-ending token. Defaults to ``"\\n"``.

    Returns
    -------
    StructuredDocumentationComment
        The full record for declarations. For parameters, type parameters and
        aliases a record whose summary is the resolved text.

    Raises
    ------
    TypeError
        If ``symbol`` is not one of the :data:`~xmldoc.symbols.Symbol` records.
    """
    resolved = _resolve_text(symbol, folder_for_external_annotations, line_ending)
    LOGGER.debug(
        "Resolved symbol documentation",
        extra={"operation": "resolve", "symbol_kind": str(symbol.kind)},
    )
    if isinstance(resolved, StructuredDocumentationComment):
        return resolved
    return StructuredDocumentationComment(summary_text=resolved)


def get_documentation_text(
    symbol: Symbol,
    folder_for_external_annotations: str,
    line_ending: str = "\n",
) -> str:
    """Return the prose shown for ``symbol``.

    The resolved text for parameters, type parameters and aliases; the summary
    for any other declaration.
    """
    comment = get_structured_documentation(symbol, folder_for_external_annotations, line_ending)
    return comment.summary_text
