from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates one rebase run:
1. Validates the configuration.
2. Resolves the package name from the nearest package descriptor.
3. Discovers and parses every sourcemap (all-or-nothing).
4. Builds the normalized path index from the union of all sources.
5. Resolves the prefix (explicit, or detected over the whole index).
6. Rewrites sources and, unless dry-running, persists each document.
"""

import logging
from typing import Any, Dict, List, Optional

from sourcemap_rebase.core.analysis.prefix_detector import detect_common_prefix
from sourcemap_rebase.core.pipeline.components.filters import discover_files
from sourcemap_rebase.core.pipeline.components.reader import load_documents
from sourcemap_rebase.core.pipeline.components.writer import write_document
from sourcemap_rebase.core.pipeline.stages.collector import build_normalized_index
from sourcemap_rebase.core.pipeline.stages.rewriter import rewrite_documents
from sourcemap_rebase.core.pipeline.stages.validator import validate_config
from sourcemap_rebase.domain.sourcemap_models import RebaseResult, create_result
from sourcemap_rebase.infra.fs import resolve_package_name

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        start_dir: Optional[str] = None,
) -> RebaseResult:
    """
    Execute a full rebase run.

    Errors are not converted into results: every SourcemapRebaseError
    propagates to the caller and aborts the run.

    Args:
        config: Raw or validated configuration dictionary.
        start_dir: Directory where the package descriptor search starts.
                   Defaults to the working directory.

    Returns:
        RebaseResult: Prefix, rewrite records and persisted files.
    """
    logger.debug("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Package Descriptor
    # -------------------------------------------------------------------------
    cfg, _ = validate_config(config, strict=False)
    auto = cfg["auto"]
    dry_run = cfg["dry_run"]

    package_name = resolve_package_name(start_dir, cfg["package_file"])
    logger.debug(f"Package name: {package_name}")

    # -------------------------------------------------------------------------
    # 2) Discovery & Parsing
    # -------------------------------------------------------------------------
    files = discover_files(cfg["include_patterns"], cfg["exclude_patterns"])
    documents = load_documents(files)

    # -------------------------------------------------------------------------
    # 3) Prefix Resolution
    # -------------------------------------------------------------------------
    index = build_normalized_index(documents, expand=auto)

    if auto:
        prefix = detect_common_prefix(
            index.candidates(),
            normalized=index.expanded,
            threshold=cfg["threshold"],
        )
        if not prefix and documents:
            logger.warning("Detected prefix is empty; every source will be prefixed "
                           "with the package name.")
    else:
        prefix = cfg["prefix"]

    # -------------------------------------------------------------------------
    # 4) Rewrite & Persist
    # -------------------------------------------------------------------------
    documents, entries = rewrite_documents(documents, index, prefix, package_name)

    written: List[str] = []
    if not dry_run:
        for doc in documents:
            write_document(doc, cfg["indent"])
            written.append(doc.file_path)

    result = create_result(
        prefix,
        package_name,
        auto_detected=auto,
        normalized=index.expanded,
        dry_run=dry_run,
        files=files,
        entries=entries,
        written_files=written,
    )
    logger.info(
        f"Processed {result.summary['files']} sourcemap(s): "
        f"{result.summary['rewritten']}/{result.summary['sources']} source(s) rewritten."
    )
    return result
