from __future__ import annotations

"""
Sourcemap Reading Component.

Loads sourcemap files eagerly into SourceDocument objects. Any file that
cannot be read or does not carry a list of string sources aborts the run
before a single document is rewritten.
"""

import json
import logging
from typing import Any, List, Sequence

from sourcemap_rebase.domain.errors import ParseError
from sourcemap_rebase.domain.sourcemap_models import SourceDocument

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DOCUMENT LOADING
# -----------------------------------------------------------------------------

def load_document(file_path: str) -> SourceDocument:
    """
    Parse one sourcemap file.

    Args:
        file_path: Path of the sourcemap.

    Returns:
        SourceDocument: The parsed document.

    Raises:
        ParseError: If the file is unreadable, not JSON, or malformed.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            payload: Any = json.load(f)
    except OSError as e:
        raise ParseError(file_path, f"unreadable ({e})") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(file_path, f"invalid JSON ({e})") from e

    if not isinstance(payload, dict):
        raise ParseError(file_path, "top-level value is not an object")

    sources = payload.get("sources")
    if not isinstance(sources, list):
        raise ParseError(file_path, "missing 'sources' array")
    if not all(isinstance(s, str) for s in sources):
        raise ParseError(file_path, "'sources' must contain only strings")

    return SourceDocument(file_path=file_path, sources=list(sources), payload=payload)


def load_documents(file_paths: Sequence[str]) -> List[SourceDocument]:
    """Load every sourcemap in order; the first failure propagates."""
    documents = [load_document(p) for p in file_paths]
    logger.debug(f"Loaded {len(documents)} sourcemap document(s).")
    return documents
