"""Tests for the converter exception hierarchy."""

from __future__ import annotations

from xmldoc.errors import ErrorCode, MarkupParseError, SettingsError, XmlDocError


def test_problem_details_payload() -> None:
    error = MarkupParseError("bad markup", context={"line": 3})

    details = error.to_problem_details(instance="urn:fragment")

    assert details == {
        "type": "https://xmldoc.dev/problems/markup-parse-error",
        "title": "MarkupParseError",
        "detail": "bad markup",
        "code": "markup-parse-error",
        "instance": "urn:fragment",
        "extensions": {"line": 3},
    }


def test_subclasses_share_base() -> None:
    assert issubclass(MarkupParseError, XmlDocError)
    assert issubclass(SettingsError, XmlDocError)
    assert XmlDocError("x").code is ErrorCode.RUNTIME_ERROR
    assert str(SettingsError("broken")) == "broken"
