from __future__ import annotations

"""
Unit tests for the character-level Prefix Trie.

Verifies:
1. Node creation and per-node occurrence counts.
2. Duplicate handling (counts grow, shape does not).
3. Independence of trie shape from insertion order.
"""

from sourcemap_rebase.core.analysis.prefix_trie import TrieNode, build_trie, insert


def _shape(node: TrieNode):
    """Comparable nested representation of a trie."""
    return (node.char, node.count, {k: _shape(v) for k, v in node.children.items()})


def test_insert_creates_nodes_and_counts():
    """Every visited node below the root is incremented once per string."""
    root = TrieNode()
    insert(root, "ab")
    insert(root, "ac")

    assert root.char is None
    assert root.count == 0
    assert list(root.children) == ["a"]

    a = root.children["a"]
    assert a.count == 2
    assert a.children["b"].count == 1
    assert a.children["c"].count == 1
    assert a.children["b"].char == "b"


def test_duplicates_only_raise_counts():
    root = build_trie(["ab", "ab"])

    a = root.children["a"]
    assert a.count == 2
    assert list(a.children) == ["b"]
    assert a.children["b"].count == 2
    assert a.children["b"].children == {}


def test_insert_returns_root_for_chaining():
    root = TrieNode()
    assert insert(root, "x") is root


def test_empty_string_leaves_trie_untouched():
    root = build_trie([""])
    assert root.children == {}


def test_insertion_order_does_not_change_shape():
    words = ["/a/b", "/a/c", "/x", "/a/b/d"]
    forward = TrieNode()
    backward = TrieNode()
    for w in words:
        insert(forward, w)
    for w in reversed(words):
        insert(backward, w)

    assert _shape(forward) == _shape(backward) == _shape(build_trie(words))


def test_long_string_is_inserted_without_recursion_limit():
    """Very deep tries are built iteratively."""
    long_path = "/" + "a" * 5000
    root = build_trie([long_path, long_path])

    node = root
    depth = 0
    while node.children:
        (node,) = node.children.values()
        depth += 1
    assert depth == len(long_path)
    assert node.count == 2
