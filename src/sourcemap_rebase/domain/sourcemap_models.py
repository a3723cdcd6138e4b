from __future__ import annotations

"""
Sourcemap Domain Data Models.

Defines the structures exchanged between the pipeline stages (documents,
the normalized path index, rewrite records) and the immutable result
handed back to the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass
class SourceDocument:
    """
    One parsed sourcemap file.

    Attributes:
        file_path: Location of the sourcemap as it was discovered.
        sources: Ordered source references. Replaced once by the rewriter.
        payload: The complete parsed JSON object. Fields other than
                 'sources' are written back untouched.
    """
    file_path: str
    sources: List[str]
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON object to persist, with the current sources."""
        out = dict(self.payload)
        out["sources"] = list(self.sources)
        return out


@dataclass
class NormalizedPathIndex:
    """
    Lookup table from source reference to its normalized form.

    The identity variant stores no entries and returns every reference
    unchanged. The expanded variant stores one mapping per document, keyed
    by the document's file path.

    Attributes:
        expanded: True when references were joined to their document path.
        entries: Per-document mappings (expanded variant only).
        identity_sources: Collected references (identity variant only).
    """
    expanded: bool = False
    entries: Dict[str, Dict[str, str]] = field(default_factory=dict)
    identity_sources: List[str] = field(default_factory=list)

    def lookup(self, document: SourceDocument, source: str) -> str:
        if not self.expanded:
            return source
        return self.entries.get(document.file_path, {}).get(source, source)

    def candidates(self) -> List[str]:
        """
        Distinct normalized paths, sorted.

        This is the string set fed to the common-prefix detector.
        """
        if not self.expanded:
            return sorted(set(self.identity_sources))
        values = set()
        for mapping in self.entries.values():
            values.update(mapping.values())
        return sorted(values)


@dataclass(frozen=True)
class RewriteEntry:
    """Single source substitution (or pass-through) recorded by the rewriter."""
    file_path: str
    original: str
    result: str

    @property
    def changed(self) -> bool:
        return self.original != self.result

    def render(self) -> str:
        return f"{self.original} -> {self.result}"


@dataclass(frozen=True)
class RebaseResult:
    """
    Outcome of a complete rebase run.

    Attributes:
        prefix: The prefix that was stripped (detected or explicit).
        auto_detected: Whether the prefix came from the detector.
        normalized: Whether the expanded path index was used.
        package_name: Name read from the package descriptor.
        dry_run: Whether persistence was skipped.
        files: Sourcemap files processed, in discovery order.
        entries: One record per source reference, in document order.
        written_files: Files actually rewritten on disk.
        summary: Aggregated counters.
    """
    prefix: str
    auto_detected: bool
    normalized: bool
    package_name: str
    dry_run: bool

    files: List[str] = field(default_factory=list)
    entries: List[RewriteEntry] = field(default_factory=list)
    written_files: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_result(
        prefix: str,
        package_name: str,
        *,
        auto_detected: bool,
        normalized: bool,
        dry_run: bool,
        files: Optional[List[str]] = None,
        entries: Optional[List[RewriteEntry]] = None,
        written_files: Optional[List[str]] = None,
) -> RebaseResult:
    """
    Build a RebaseResult and derive its summary counters.

    Args:
        prefix: Resolved prefix of the run.
        package_name: Package name used as the rewrite root.
        auto_detected: True when the prefix was detected automatically.
        normalized: True when the expanded path index was active.
        dry_run: True when nothing was written.
        files: Processed sourcemap paths.
        entries: Rewrite records.
        written_files: Persisted sourcemap paths.

    Returns:
        RebaseResult: Immutable run outcome.
    """
    files = files or []
    entries = entries or []
    written_files = written_files or []

    summary = {
        "files": len(files),
        "sources": len(entries),
        "rewritten": sum(1 for e in entries if e.changed),
        "written": len(written_files),
        "dry_run": dry_run,
    }

    return RebaseResult(
        prefix=prefix,
        auto_detected=auto_detected,
        normalized=normalized,
        package_name=package_name,
        dry_run=dry_run,
        files=files,
        entries=entries,
        written_files=written_files,
        summary=summary,
    )
