from __future__ import annotations

"""
Statistical Common-Prefix Detector.

Finds the prefix shared by the dominant majority of a string set. Unlike a
strict longest-common-prefix, a small share of outliers (vendored or
symlinked paths, for example) does not stop the prefix from growing.
"""

import logging
from typing import Optional, Sequence

from sourcemap_rebase.core.analysis.prefix_trie import TrieNode, build_trie
from sourcemap_rebase.domain.config import DOMINANCE_THRESHOLD

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def detect_common_prefix(
        strings: Sequence[str],
        *,
        normalized: bool = False,
        threshold: float = DOMINANCE_THRESHOLD,
) -> str:
    """
    Detect the prefix shared by more than `threshold` of the strings.

    Walks the trie from the root, always following the most frequent child,
    and keeps extending the prefix while that child's share of all strings
    is strictly above the threshold.

    Args:
        strings: Candidate strings (usually normalized source paths).
        normalized: Whether the candidates went through path expansion.
                    Only affects the emitted notice.
        threshold: Dominance share a character needs to join the prefix.

    Returns:
        str: The detected prefix. Empty for fewer than two strings or when
             no first character is dominant.
    """
    if len(strings) < 2:
        logger.debug(f"Prefix detection skipped: {len(strings)} candidate(s).")
        return ""

    total = len(strings)
    root = build_trie(strings)

    chars = []
    node = root
    while True:
        best = _dominant_child(node)
        if best is None or best.count / total <= threshold:
            break
        chars.append(best.char)
        node = best

    prefix = "".join(chars)
    kind = " normalized" if normalized else ""
    logger.info(f"Auto detected{kind} prefix: '{prefix}'")
    return prefix

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _dominant_child(node: TrieNode) -> Optional[TrieNode]:
    """Most frequent child; equal counts resolve to the smallest character."""
    if not node.children:
        return None
    return min(node.children.values(), key=lambda c: (-c.count, c.char))
