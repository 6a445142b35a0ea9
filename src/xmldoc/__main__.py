"""Module entrypoint for ``python -m xmldoc``."""

from __future__ import annotations

from xmldoc.cli import app

if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    app(prog_name="xmldoc")
