"""Typed exception hierarchy for the documentation converter.

Public conversion functions are total: parse failures surface as
:class:`MarkupParseError` only inside the package and are mapped to sentinel
outputs before returning. Configuration problems raise :class:`SettingsError`.

Examples
--------
>>> from xmldoc.errors import ErrorCode, MarkupParseError
>>> error = MarkupParseError("unclosed token", context={"line": 1})
>>> error.code
<ErrorCode.MARKUP_PARSE_ERROR: 'markup-parse-error'>
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Final

__all__ = [
    "BASE_TYPE_URI",
    "ErrorCode",
    "MarkupParseError",
    "SettingsError",
    "XmlDocError",
]

BASE_TYPE_URI: Final[str] = "https://xmldoc.dev/problems"


class ErrorCode(StrEnum):
    """Stable error codes for converter exceptions.

    Attributes
    ----------
    RUNTIME_ERROR
        Unclassified failure.
    MARKUP_PARSE_ERROR
        A documentation fragment is not well-formed markup.
    CONFIGURATION_ERROR
        Settings failed validation.
    """

    RUNTIME_ERROR = "runtime-error"
    MARKUP_PARSE_ERROR = "markup-parse-error"
    CONFIGURATION_ERROR = "configuration-error"

    @property
    def type_uri(self) -> str:
        """Return the problem type URI for this code."""
        return f"{BASE_TYPE_URI}/{self.value}"


class XmlDocError(Exception):
    """Base exception for all converter errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    cause : Exception | None, optional
        Underlying exception, chained as ``__cause__`` by callers.
    context : Mapping[str, object] | None, optional
        Additional structured details.

    Attributes
    ----------
    code : ErrorCode
        Error code for the exception class.
    context : dict[str, object]
        Structured details attached to the error.
    """

    code: ErrorCode = ErrorCode.RUNTIME_ERROR

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.context: dict[str, object] = dict(context) if context else {}

    def to_problem_details(self, instance: str | None = None) -> dict[str, object]:
        """Return an RFC 9457 style payload describing the error.

        Parameters
        ----------
        instance : str | None, optional
            URI reference for the failing occurrence.

        Returns
        -------
        dict[str, object]
            Problem Details mapping with ``type``, ``title``, ``detail``, ``code``
            and any context as ``extensions``.
        """
        payload: dict[str, object] = {
            "type": self.code.type_uri,
            "title": type(self).__name__,
            "detail": self.message,
            "code": self.code.value,
        }
        if instance is not None:
            payload["instance"] = instance
        if self.context:
            payload["extensions"] = dict(self.context)
        return payload

    def __str__(self) -> str:
        return self.message


class MarkupParseError(XmlDocError):
    """Raised when a documentation fragment cannot be parsed."""

    code = ErrorCode.MARKUP_PARSE_ERROR


class SettingsError(XmlDocError):
    """Raised when runtime settings fail validation."""

    code = ErrorCode.CONFIGURATION_ERROR
