from __future__ import annotations

"""
Character-Level Prefix Trie.

Counts how many inserted strings pass through every character position.
The counts drive the statistical common-prefix detection.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

# -----------------------------------------------------------------------------
# DATA STRUCTURE
# -----------------------------------------------------------------------------

@dataclass
class TrieNode:
    """
    One character position shared by a group of strings.

    Attributes:
        char: Character represented by the node; None for the root.
        count: Number of inserted strings passing through this node.
        children: Child nodes keyed by their character.
    """
    char: Optional[str] = None
    count: int = 0
    children: Dict[str, "TrieNode"] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# CONSTRUCTION
# -----------------------------------------------------------------------------

def insert(root: TrieNode, string: str) -> TrieNode:
    """
    Insert a string below root, one character at a time.

    Missing children are created on demand and every visited node below
    the root has its count incremented. Duplicate strings only raise counts.

    Args:
        root: Trie root.
        string: String to insert.

    Returns:
        TrieNode: The same root, for chaining.
    """
    node = root
    for char in string:
        child = node.children.get(char)
        if child is None:
            child = TrieNode(char=char)
            node.children[char] = child
        child.count += 1
        node = child
    return root


def build_trie(strings: Iterable[str]) -> TrieNode:
    """Build a fresh trie from strings (inserted in sorted order)."""
    root = TrieNode()
    for s in sorted(strings):
        insert(root, s)
    return root
