"""Data structures describing structured documentation comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "EMPTY",
    "ExceptionDoc",
    "StructuredDocumentationComment",
]


def _frozen_mapping() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ExceptionDoc:
    """Exception documented by an ``<exception>`` element."""

    cref: str
    message: str = ""


@dataclass(frozen=True, slots=True)
class StructuredDocumentationComment:
    """Documentation comment bucketed by section.

    Scalar sections are empty strings when absent. ``parameters`` and
    ``type_parameters`` map names to their accumulated text.
    """

    summary_text: str = ""
    remarks_text: str = ""
    returns_text: str = ""
    value_text: str = ""
    example_text: str = ""
    parameters: Mapping[str, str] = field(default_factory=_frozen_mapping)
    type_parameters: Mapping[str, str] = field(default_factory=_frozen_mapping)
    exceptions: tuple[ExceptionDoc, ...] = ()
    see_also: tuple[str, ...] = ()

    def get_parameter_text(self, name: str) -> str:
        """Return the text documented for parameter ``name``, or ``""``."""
        return self.parameters.get(name, "")

    def get_type_parameter_text(self, name: str) -> str:
        """Return the text documented for type parameter ``name``, or ``""``."""
        return self.type_parameters.get(name, "")

    @classmethod
    def from_xml(
        cls, xml_documentation: str | None, line_ending: str
    ) -> StructuredDocumentationComment:
        """Build a comment from documentation markup.

        Thin alias for :func:`xmldoc.comment.build_comment`.
        """
        from xmldoc.comment import build_comment  # noqa: PLC0415

        return build_comment(xml_documentation, line_ending)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly view of every section."""
        return {
            "summary": self.summary_text,
            "remarks": self.remarks_text,
            "returns": self.returns_text,
            "value": self.value_text,
            "example": self.example_text,
            "parameters": dict(self.parameters),
            "type_parameters": dict(self.type_parameters),
            "exceptions": [
                {"cref": entry.cref, "message": entry.message} for entry in self.exceptions
            ],
            "see_also": list(self.see_also),
        }


EMPTY = StructuredDocumentationComment()
