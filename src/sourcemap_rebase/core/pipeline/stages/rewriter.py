from __future__ import annotations

"""
Source Rewrite Stage.

Replaces the resolved prefix of every matching source with the package
name. Matching is a plain string-prefix test on the normalized form; the
number and order of sources never change.
"""

import logging
from typing import List, Sequence, Tuple

from sourcemap_rebase.core.pipeline.components.path_normalizer import join_package_path
from sourcemap_rebase.domain.sourcemap_models import (
    NormalizedPathIndex,
    RewriteEntry,
    SourceDocument,
)

logger = logging.getLogger(__name__)


def rewrite_source(normalized: str, original: str, prefix: str, package_name: str) -> str:
    """Package-relative path when `normalized` starts with `prefix`, else `original`."""
    if normalized.startswith(prefix):
        return join_package_path(package_name, normalized[len(prefix):])
    return original


def rewrite_documents(
        documents: Sequence[SourceDocument],
        index: NormalizedPathIndex,
        prefix: str,
        package_name: str,
) -> Tuple[List[SourceDocument], List[RewriteEntry]]:
    """
    Rewrite the sources of every document in place.

    An empty prefix matches every source, so every source gets the package
    name prepended.

    Args:
        documents: Loaded documents.
        index: Path index built for this run.
        prefix: Prefix to strip.
        package_name: Replacement root.

    Returns:
        Tuple[List[SourceDocument], List[RewriteEntry]]: The documents and
        one record per source, in document order.
    """
    entries: List[RewriteEntry] = []

    for doc in documents:
        rewritten: List[str] = []
        for src in doc.sources:
            normalized = index.lookup(doc, src)
            result = rewrite_source(normalized, src, prefix, package_name)
            entries.append(RewriteEntry(doc.file_path, src, result))
            rewritten.append(result)
        doc.sources = rewritten

    changed = sum(1 for e in entries if e.changed)
    logger.debug(f"Rewrote {changed}/{len(entries)} source reference(s).")
    return list(documents), entries
