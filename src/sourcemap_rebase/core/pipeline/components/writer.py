from __future__ import annotations

"""
Sourcemap Persistence Component.

Writes rewritten documents back to their originating files as indented
JSON. There is no transactional guarantee across documents: a failure
leaves previously written files in place.
"""

import json
import logging

from sourcemap_rebase.domain.config import JSON_INDENT
from sourcemap_rebase.domain.errors import WriteError
from sourcemap_rebase.domain.sourcemap_models import SourceDocument

logger = logging.getLogger(__name__)


def serialize_document(document: SourceDocument, indent: int = JSON_INDENT) -> str:
    """
    Render a document as pretty-printed JSON.

    Key order is preserved, non-ASCII characters are kept verbatim and no
    trailing newline is added.
    """
    return json.dumps(document.to_payload(), indent=indent, ensure_ascii=False)


def write_document(document: SourceDocument, indent: int = JSON_INDENT) -> None:
    """
    Overwrite the document's source file with its current content.

    Args:
        document: Rewritten document.
        indent: JSON indentation width.

    Raises:
        WriteError: If serialization or the filesystem write fails.
    """
    try:
        text = serialize_document(document, indent)
    except (TypeError, ValueError) as e:
        raise WriteError(document.file_path, f"serialization failed ({e})") from e

    try:
        with open(document.file_path, "w", encoding="utf-8") as out:
            out.write(text)
    except OSError as e:
        raise WriteError(document.file_path, str(e)) from e

    logger.debug(f"Wrote sourcemap: {document.file_path}")
