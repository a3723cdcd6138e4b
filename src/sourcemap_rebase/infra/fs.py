from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Locates the package descriptor of the project being rebased and extracts
the package name that becomes the root of every rewritten source path.
"""

import json
import logging
import os
from typing import Any, Optional

from sourcemap_rebase.domain.config import PACKAGE_FILE_NAME
from sourcemap_rebase.domain.errors import DiscoveryError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def find_file(filename: str, start_dir: Optional[str] = None) -> str:
    """
    Search for a file in start_dir and then in each parent directory.

    Args:
        filename: Bare file name to look for.
        start_dir: First directory searched. Defaults to the working directory.

    Returns:
        str: Absolute path of the first match.

    Raises:
        DiscoveryError: If the filesystem root is reached without a match.
    """
    origin = os.path.abspath(start_dir or os.getcwd())
    current = origin

    while True:
        candidate = os.path.join(current, filename)
        if os.path.isfile(candidate):
            logger.debug(f"Found {filename} at {candidate}")
            return candidate

        parent = os.path.dirname(current)
        if parent == current:
            raise DiscoveryError(f"Couldn't find {filename}", search_root=origin)
        current = parent


def read_package_name(package_file: str) -> str:
    """
    Read the 'name' field of a package descriptor.

    Raises:
        DiscoveryError: If the descriptor is unreadable or has no usable name.
    """
    try:
        with open(package_file, "r", encoding="utf-8") as f:
            data: Any = json.load(f)
    except (OSError, ValueError) as e:
        raise DiscoveryError(f"Cannot read package descriptor '{package_file}': {e}") from e

    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name.strip():
        raise DiscoveryError(f"Package descriptor '{package_file}' has no 'name' field")
    return name.strip()


def resolve_package_name(
        start_dir: Optional[str] = None,
        filename: str = PACKAGE_FILE_NAME,
) -> str:
    """Locate the nearest package descriptor and return its package name."""
    return read_package_name(find_file(filename, start_dir))
