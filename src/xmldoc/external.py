"""Load documentation from per-assembly external annotation files.

An annotation file named ``{AssemblyName}.ExternalAnnotations.xml`` holds one
child element per documented symbol under its root, keyed by a ``name``
attribute equal to the symbol's display string::

    <assembly name="Contoso.Core">
      <member name="Contoso.Core.Widget.Spin(int)">
        <summary>Spins the widget.</summary>
      </member>
    </assembly>

Lookups never raise: a missing file or a broken one yields diagnostic text that
is merged into the documentation like any other content.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING
from xml.etree.ElementTree import tostring
from xml.sax.saxutils import escape

from defusedxml.ElementTree import parse

from xmldoc.logging import get_logger, with_fields

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

__all__ = [
    "ANNOTATIONS_SUFFIX",
    "external_annotations_path",
    "inner_xml",
    "load_external_documentation",
]

LOGGER = get_logger(__name__)

ANNOTATIONS_SUFFIX = ".ExternalAnnotations.xml"


def external_annotations_path(folder: str, assembly_name: str) -> str:
    """Return the annotation file path for ``assembly_name`` inside ``folder``.

    The path is a plain concatenation so it matches files produced by other
    tools byte for byte.
    """
    return folder + os.sep + assembly_name + ANNOTATIONS_SUFFIX


def inner_xml(element: Element) -> str:
    """Return the markup between the start and end tags of ``element``.

    The markup is re-serialised from the parsed tree rather than sliced from the
    file, so it is equivalent but not byte-identical. Empty elements are written
    as ``<br />`` and character references come back decoded. Comments are not
    kept by the parser.
    """
    parts = [escape(element.text)] if element.text else []
    parts.extend(tostring(child, encoding="unicode") for child in element)
    return "".join(parts)


def load_external_documentation(
    symbol_display_name: str,
    assembly_name: str,
    folder: str,
    line_ending: str,
    *,
    assembly_display: str | None = None,
) -> str:
    """Return the external documentation text for one symbol.

    Parameters
    ----------
    symbol_display_name : str
        Fully-qualified display string of the symbol; matched exactly against
        the ``name`` attribute of the file's top-level entries.
    assembly_name : str
        Simple name of the containing assembly, used to locate the file.
    folder : str
        Directory holding annotation files.
    line_ending : str
        Line-ending token for the generated text.
    assembly_display : str | None, optional
        Full assembly identity for the trailing ``Assembly:`` line. Defaults to
        ``assembly_name``.

    Returns
    -------
    str
        ``line_ending + path + " not found"`` when the file is absent,
        ``"Exception: <message>"`` when it cannot be loaded, otherwise the
        display name, the inner markup of every matching entry and an
        ``Assembly:`` trailer.
    """
    path = external_annotations_path(folder, assembly_name)
    log = with_fields(LOGGER, operation="load_external", path=path)
    if not Path(path).is_file():
        log.debug("External annotations file not found", extra={"status": "missing"})
        return line_ending + path + " not found"

    text = symbol_display_name + line_ending
    try:
        with Path(path).open("rb") as handle:
            root = parse(handle).getroot()
    except Exception as exc:  # noqa: BLE001 - any load failure becomes document text
        log.warning("Failed to load external annotations", extra={"error": str(exc)})
        return f"Exception: {exc}"

    matches = [child for child in root if child.get("name") == symbol_display_name]
    text += "".join(inner_xml(child) for child in matches)
    log.debug("Loaded external annotations", extra={"matches": len(matches)})
    return text + line_ending + "Assembly: " + (assembly_display or assembly_name)
