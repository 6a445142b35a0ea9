"""Symbol value types consumed by :mod:`xmldoc.resolver`.

Compilers and language services own symbol identity; callers translate their
symbols into these records. :data:`Symbol` is a closed union, one record per
documentation category.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "AliasSymbol",
    "AssemblyRef",
    "DeclarationSymbol",
    "ParameterSymbol",
    "Symbol",
    "SymbolKind",
    "TypeParameterSymbol",
]


class SymbolKind(StrEnum):
    """Documentation categories handled by the resolver."""

    PARAMETER = "parameter"
    TYPE_PARAMETER = "type-parameter"
    ALIAS = "alias"
    DECLARATION = "declaration"


@dataclass(frozen=True, slots=True)
class AssemblyRef:
    """Containing assembly of a declaration.

    ``name`` locates the external annotation file; ``display`` is the full
    identity (``"Contoso.Core, Version=1.0.0.0, Culture=neutral, ..."``)
    printed in the ``Assembly:`` trailer.
    """

    name: str
    display: str | None = None

    @property
    def display_string(self) -> str:
        return self.display or self.name


@dataclass(frozen=True, slots=True)
class DeclarationSymbol:
    """Any documented declaration: type, method, property, field, event.

    Attributes
    ----------
    display_string : str
        Fully-qualified display string, the join key for external annotations.
    assembly : AssemblyRef
        Containing assembly.
    documentation_xml : str | None
        Raw documentation markup attached to the declaration.
    original_definition : DeclarationSymbol | None
        Unconstructed generic definition when this symbol is a constructed
        instance (``List<int>.Add`` -> ``List<T>.Add``).
    """

    display_string: str
    assembly: AssemblyRef
    documentation_xml: str | None = None
    original_definition: DeclarationSymbol | None = None

    kind = SymbolKind.DECLARATION

    @property
    def definition(self) -> DeclarationSymbol:
        """Return the original definition, or ``self`` when not constructed."""
        return self.original_definition or self


@dataclass(frozen=True, slots=True)
class ParameterSymbol:
    """Parameter of a method, indexer or delegate."""

    name: str
    containing: DeclarationSymbol

    kind = SymbolKind.PARAMETER


@dataclass(frozen=True, slots=True)
class TypeParameterSymbol:
    """Generic type parameter of a type or method."""

    name: str
    containing: DeclarationSymbol

    kind = SymbolKind.TYPE_PARAMETER


@dataclass(frozen=True, slots=True)
class AliasSymbol:
    """Using-alias naming another declaration."""

    name: str
    target: DeclarationSymbol

    kind = SymbolKind.ALIAS


type Symbol = ParameterSymbol | TypeParameterSymbol | AliasSymbol | DeclarationSymbol
