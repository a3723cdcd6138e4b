from __future__ import annotations

"""
Source Collection Stage.

Flattens the sources of all loaded documents and decides, once for the
whole run, whether references must be expanded against their sourcemap
location before prefix matching.
"""

import logging
from typing import Dict, List, Sequence

from sourcemap_rebase.core.pipeline.components.path_normalizer import (
    has_parent_segment,
    normalize,
)
from sourcemap_rebase.domain.sourcemap_models import NormalizedPathIndex, SourceDocument

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def collect_sources(documents: Sequence[SourceDocument]) -> List[str]:
    """
    Concatenate the sources of every document in document order.

    Duplicates are preserved.
    """
    out: List[str] = []
    for doc in documents:
        out.extend(doc.sources)
    return out


def needs_normalization(sources: Sequence[str]) -> bool:
    """True when at least one reference walks up with a '..' segment."""
    return any(has_parent_segment(s) for s in sources)


def build_normalized_index(
        documents: Sequence[SourceDocument],
        *,
        expand: bool = True,
) -> NormalizedPathIndex:
    """
    Build the path index shared by detection and rewriting.

    The decision between the identity and the expanded variant is taken
    once, from the union of all sources across all documents.

    Args:
        documents: Every loaded document of the run.
        expand: Allow the expanded variant. Runs with an explicit prefix
                pass False and always match raw references.

    Returns:
        NormalizedPathIndex: The index for this run.
    """
    sources = collect_sources(documents)

    if not (expand and needs_normalization(sources)):
        return NormalizedPathIndex(expanded=False, identity_sources=sources)

    entries: Dict[str, Dict[str, str]] = {}
    for doc in documents:
        mapping = entries.setdefault(doc.file_path, {})
        for src in doc.sources:
            mapping[src] = normalize(doc.file_path, src)

    logger.debug(f"Parent-directory references found; expanded {len(sources)} source(s).")
    return NormalizedPathIndex(expanded=True, entries=entries)
