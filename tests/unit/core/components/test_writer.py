from __future__ import annotations

"""
Unit tests for the Sourcemap Writer.

Verifies:
1. Pretty-printed output format (2-space indent, key order, no newline).
2. Only 'sources' changes between input and output.
3. Filesystem failures surface as WriteError.
"""

import json

import pytest

from sourcemap_rebase.core.pipeline.components.writer import serialize_document, write_document
from sourcemap_rebase.domain.errors import WriteError
from sourcemap_rebase.domain.sourcemap_models import SourceDocument


def _doc(path, sources):
    payload = {"version": 3, "sources": ["old.js"], "names": ["é"], "mappings": "AAAA"}
    return SourceDocument(file_path=str(path), sources=sources, payload=payload)


def test_serialize_matches_two_space_json(tmp_path):
    text = serialize_document(_doc(tmp_path / "a.map", ["mylib/a.js"]))

    assert text == (
        '{\n'
        '  "version": 3,\n'
        '  "sources": [\n'
        '    "mylib/a.js"\n'
        '  ],\n'
        '  "names": [\n'
        '    "é"\n'
        '  ],\n'
        '  "mappings": "AAAA"\n'
        '}'
    )


def test_write_document_overwrites_file(tmp_path):
    path = tmp_path / "a.js.map"
    path.write_text("{}", encoding="utf-8")

    write_document(_doc(path, ["mylib/a.js"]))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"version": 3, "sources": ["mylib/a.js"], "names": ["é"], "mappings": "AAAA"}


def test_write_document_respects_indent(tmp_path):
    path = tmp_path / "a.js.map"
    write_document(_doc(path, ["x"]), indent=4)

    assert '\n    "version": 3' in path.read_text(encoding="utf-8")


def test_write_failure_raises_write_error(tmp_path):
    target = tmp_path / "missing_dir" / "a.js.map"

    with pytest.raises(WriteError) as exc:
        write_document(_doc(target, ["x"]))

    assert exc.value.file_path == str(target)
    assert isinstance(exc.value.__cause__, OSError)
