"""Convert XML documentation comments into plain text and structured sections.

The package exposes the flat renderer, the section builder, the external
annotation loader and the per-symbol resolver. Heavier entry points such as the
CLI are imported on demand.
"""

from __future__ import annotations

from xmldoc.comment import build_comment
from xmldoc.external import load_external_documentation
from xmldoc.render import convert_documentation
from xmldoc.resolver import (
    get_documentation_text,
    get_structured_documentation,
    get_structured_documentation_from_xml,
    merge_documentation,
)
from xmldoc.schema import EMPTY, ExceptionDoc, StructuredDocumentationComment
from xmldoc.symbols import (
    AliasSymbol,
    AssemblyRef,
    DeclarationSymbol,
    ParameterSymbol,
    Symbol,
    SymbolKind,
    TypeParameterSymbol,
)
from xmldoc.vocabulary import get_cref, trim_multiline_string

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "AliasSymbol",
    "AssemblyRef",
    "DeclarationSymbol",
    "ExceptionDoc",
    "ParameterSymbol",
    "StructuredDocumentationComment",
    "Symbol",
    "SymbolKind",
    "TypeParameterSymbol",
    "build_comment",
    "convert_documentation",
    "get_cref",
    "get_documentation_text",
    "get_structured_documentation",
    "get_structured_documentation_from_xml",
    "load_external_documentation",
    "merge_documentation",
    "trim_multiline_string",
]
