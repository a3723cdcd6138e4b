from __future__ import annotations

"""
Unit tests for the Source Rewrite stage.

Verifies:
1. Prefix stripping and package-name substitution.
2. Byte-identical pass-through of non-matching sources.
3. Stable source count and order, and the empty-prefix behaviour.
"""

from sourcemap_rebase.core.pipeline.stages.collector import build_normalized_index
from sourcemap_rebase.core.pipeline.stages.rewriter import rewrite_documents, rewrite_source
from sourcemap_rebase.domain.sourcemap_models import SourceDocument


def test_rewrite_source_formula():
    assert rewrite_source("/home/u/proj/src/a.js", "../../src/a.js", "/home/u/proj/", "mylib") \
        == "mylib/src/a.js"
    assert rewrite_source("/elsewhere/a.js", "/elsewhere/a.js", "/home/u/proj/", "mylib") \
        == "/elsewhere/a.js"


def test_documented_example_with_expanded_index():
    doc = SourceDocument("/home/u/proj/lib/bundle.js.map", ["../../src/a.js", "../../src/b.js"])
    index = build_normalized_index([doc])

    docs, entries = rewrite_documents([doc], index, "/home/u/proj/", "mylib")

    assert docs[0].sources == ["mylib/src/a.js", "mylib/src/b.js"]
    assert [e.render() for e in entries] == [
        "../../src/a.js -> mylib/src/a.js",
        "../../src/b.js -> mylib/src/b.js",
    ]


def test_non_matching_sources_are_untouched_and_order_is_kept():
    original = [
        "/home/u/proj/src/a.js",
        "webpack/bootstrap 1234",
        "/home/u/proj/src/b.js",
        "/vendor/lib.js",
    ]
    doc = SourceDocument("out.js.map", list(original))
    index = build_normalized_index([doc])

    _, entries = rewrite_documents([doc], index, "/home/u/proj/", "mylib")

    assert doc.sources == [
        "mylib/src/a.js",
        "webpack/bootstrap 1234",
        "mylib/src/b.js",
        "/vendor/lib.js",
    ]
    assert len(doc.sources) == len(original)
    assert [e.changed for e in entries] == [True, False, True, False]
    assert all(e.file_path == "out.js.map" for e in entries)


def test_prefix_match_is_not_segment_aware():
    doc = SourceDocument("out.js.map", ["/home/u/project-b/a.js"])
    index = build_normalized_index([doc])

    rewrite_documents([doc], index, "/home/u/proj", "mylib")

    assert doc.sources == ["mylib/ect-b/a.js"]


def test_empty_prefix_prepends_package_name_everywhere():
    doc = SourceDocument("out.js.map", ["src/a.js", "/abs/b.js"])
    index = build_normalized_index([doc])

    rewrite_documents([doc], index, "", "mylib")

    assert doc.sources == ["mylib/src/a.js", "mylib/abs/b.js"]


def test_payload_other_fields_survive():
    doc = SourceDocument("out.js.map", ["/p/a.js"], payload={"version": 3, "sources": ["/p/a.js"],
                                                             "mappings": ";;AAAA"})
    rewrite_documents([doc], build_normalized_index([doc]), "/p/", "pkg")

    payload = doc.to_payload()
    assert payload["sources"] == ["pkg/a.js"]
    assert payload["mappings"] == ";;AAAA"
    assert payload["version"] == 3
