"""Serialization of the assembled document to stdout or a file."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional, TextIO

import yaml

from .errors import OutputError
from .logging import get_logger
from .models import Document

logger = get_logger("writer")


def render_document(document: Document, *, fmt: str = "json", indent: Optional[int] = None) -> str:
    """Return the serialized document, raising OutputError when it cannot be encoded."""
    payload = document.to_dict()
    if fmt == "json":
        try:
            # Non-finite floats have no JSON spelling.
            text = json.dumps(payload, indent=indent, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise OutputError(f"encode json: {exc}") from exc
        return text + "\n"
    if fmt == "yaml":
        try:
            return yaml.safe_dump(payload, sort_keys=False, default_flow_style=False)
        except yaml.YAMLError as exc:
            raise OutputError(f"encode yaml: {exc}") from exc
    raise OutputError(f"unsupported output format: {fmt}")


def write_document(
    document: Document,
    path: Path | None = None,
    *,
    fmt: str = "json",
    indent: Optional[int] = None,
    stream: TextIO | None = None,
) -> bool:
    """Write the document and return True on success.

    Serialization and file creation failures are logged, not raised, and
    leave the process exit status untouched.
    """
    try:
        text = render_document(document, fmt=fmt, indent=indent)
        if path is None:
            target = stream if stream is not None else sys.stdout
            target.write(text)
            target.flush()
        else:
            _write_file(path, text)
    except OutputError as exc:
        logger.error("failed to produce output: %s", exc)
        return False
    logger.debug("Wrote %d bytes of %s output", len(text.encode("utf-8")), fmt)
    return True


def _write_file(path: Path, text: str) -> None:
    try:
        with path.open("w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise OutputError(f"failed to create output file: {exc}") from exc


__all__ = ["render_document", "write_document"]
