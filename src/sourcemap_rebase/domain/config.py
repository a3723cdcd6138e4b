from __future__ import annotations

"""
Configuration Domain Defaults.

Holds the default runtime configuration of a rebase run. The dictionary
returned here is the base layer that CLI overrides are merged into before
validation.
"""

from typing import Any, Dict

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
PACKAGE_FILE_NAME = "package.json"
DOMINANCE_THRESHOLD = 0.9
JSON_INDENT = 2


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Discovery
        "include_patterns": [],
        "exclude_patterns": [],

        # Prefix resolution
        "prefix": None,
        "auto": False,
        "threshold": DOMINANCE_THRESHOLD,

        # Package descriptor
        "package_file": PACKAGE_FILE_NAME,

        # Output
        "dry_run": False,
        "indent": JSON_INDENT,
    }
