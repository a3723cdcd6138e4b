from __future__ import annotations

"""
Source Path Normalization.

All path arithmetic on sourcemap references is done with forward slashes
and POSIX semantics, independent of the host platform, so a given input
always produces the same rewritten output.
"""

import os
import posixpath

SEPARATOR = "/"


def to_posix(path: str) -> str:
    """Convert host separators to the canonical forward slash."""
    if os.sep != SEPARATOR:
        path = path.replace(os.sep, SEPARATOR)
    if os.altsep and os.altsep != SEPARATOR:
        path = path.replace(os.altsep, SEPARATOR)
    return path


def has_parent_segment(reference: str) -> bool:
    """True when the reference contains a '..' path segment."""
    return ".." in reference.split(SEPARATOR)


def normalize(base_path: str, reference: str) -> str:
    """
    Resolve a source reference against the sourcemap path that declares it.

    The sourcemap file path itself is the join base, so the first '..'
    segment consumes the map's own file name:
    'proj/lib/out.js.map' + '../../src/a.js' -> 'proj/src/a.js'.
    Absolute references are only collapsed.

    Args:
        base_path: Path of the owning sourcemap file.
        reference: Source reference as written in the map.

    Returns:
        str: Collapsed path using '/' separators.
    """
    joined = posixpath.join(to_posix(base_path), reference)
    return posixpath.normpath(joined)


def join_package_path(package_name: str, remainder: str) -> str:
    """
    Append a prefix-stripped remainder to the package name.

    A leading '/' in the remainder is treated as a separator, never as an
    absolute root, so the package name is always kept.
    """
    return posixpath.normpath(f"{package_name}{SEPARATOR}{remainder}")
