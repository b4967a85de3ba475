"""Tests for genconf.writer."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
import yaml

from genconf.errors import OutputError
from genconf.logging import configure_logging
from genconf.models import Command, Document, FileSpec
from genconf.writer import render_document, write_document


def _document() -> Document:
    return Document(
        global_vars={"x": 1},
        files=[FileSpec(name="a.txt", path="/tmp", template="t1")],
        commands=[Command(name="ls", args=["-a", "-l"])],
    )


def test_render_json_is_compact_single_line_by_default() -> None:
    text = render_document(_document())

    assert text.endswith("\n")
    assert text.count("\n") == 1
    assert json.loads(text) == _document().to_dict()


def test_render_json_with_indent() -> None:
    text = render_document(_document(), indent=2)

    assert '\n  "global": {' in text
    assert json.loads(text)["commands"] == [{"name": "ls", "args": ["-a", "-l"]}]


def test_render_yaml_preserves_key_order() -> None:
    text = render_document(_document(), fmt="yaml")

    assert text.startswith("global:")
    assert yaml.safe_load(text) == _document().to_dict()


def test_render_rejects_non_finite_json_values() -> None:
    document = Document(global_vars={"limit": float("inf")})

    with pytest.raises(OutputError, match="encode json"):
        render_document(document)


def test_render_rejects_unknown_format() -> None:
    with pytest.raises(OutputError, match="unsupported output format"):
        render_document(_document(), fmt="toml")


def test_write_document_to_stream() -> None:
    stream = io.StringIO()

    assert write_document(_document(), stream=stream) is True
    assert json.loads(stream.getvalue())["global"] == {"x": 1}


def test_write_document_to_file_truncates_existing(tmp_path: Path) -> None:
    target = tmp_path / "config.json"
    target.write_text("stale content that is longer than the document" * 10, encoding="utf-8")

    assert write_document(_document(), target) is True
    assert json.loads(target.read_text(encoding="utf-8")) == _document().to_dict()


def test_write_document_logs_encoding_failure(tmp_path: Path, capsys) -> None:
    configure_logging()
    target = tmp_path / "config.json"

    ok = write_document(Document(global_vars={"ratio": float("nan")}), target)

    assert ok is False
    assert not target.exists()
    assert "failed to produce output: encode json" in capsys.readouterr().err


def test_write_document_logs_unwritable_destination(tmp_path: Path, capsys) -> None:
    configure_logging()
    target = tmp_path / "missing-dir" / "config.json"

    assert write_document(_document(), target) is False
    assert "failed to create output file" in capsys.readouterr().err
