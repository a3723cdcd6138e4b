from __future__ import annotations

"""
Sourcemap File Discovery.

Resolves include/exclude glob patterns into the ordered list of sourcemap
files to process. Patterns support the recursive '**' wildcard.
"""

import glob
import logging
import os
from typing import List, Optional, Sequence, Set

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATTERN EXPANSION
# -----------------------------------------------------------------------------

def expand_pattern(pattern: str) -> List[str]:
    """
    Expand one glob pattern into matching files, sorted.

    Directories matched by the pattern are skipped.
    """
    matches = glob.glob(pattern, recursive=True)
    return sorted(m for m in matches if os.path.isfile(m))


def expand_patterns(patterns: Sequence[str]) -> List[str]:
    """
    Expand several patterns, keeping pattern order and dropping duplicates.

    Args:
        patterns: Glob patterns.

    Returns:
        List[str]: Matching files, first occurrence wins.
    """
    out: List[str] = []
    seen: Set[str] = set()
    for pattern in patterns:
        for match in expand_pattern(pattern):
            key = _path_key(match)
            if key in seen:
                continue
            seen.add(key)
            out.append(match)
    return out

# -----------------------------------------------------------------------------
# DISCOVERY
# -----------------------------------------------------------------------------

def discover_files(
        include_patterns: Sequence[str],
        exclude_patterns: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Compute the include set minus the exclude set.

    Paths are compared after normalization so './lib/a.js.map' and
    'lib/a.js.map' are the same file.

    Args:
        include_patterns: Globs of sourcemaps to process.
        exclude_patterns: Globs of sourcemaps to subtract.

    Returns:
        List[str]: Files to process, in include order.
    """
    included = expand_patterns(include_patterns)
    excluded = {_path_key(p) for p in expand_patterns(exclude_patterns or [])}

    files = [f for f in included if _path_key(f) not in excluded]

    skipped = len(included) - len(files)
    if skipped:
        logger.debug(f"Excluded {skipped} sourcemap(s) by pattern.")
    if not files:
        logger.warning(f"No sourcemap files matched: {list(include_patterns)}")

    return files


def _path_key(path: str) -> str:
    return os.path.normcase(os.path.abspath(path))
