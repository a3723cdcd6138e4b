from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper of the pipeline: merges the raw configuration with the domain
defaults, coerces field types and enforces the prefix resolution rule
(exactly one of an explicit prefix or auto detection) before any file is
touched.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from sourcemap_rebase.domain.config import DOMINANCE_THRESHOLD, get_default_config
from sourcemap_rebase.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Type problems are coerced to defaults with a warning, or raised when
    `strict` is set. A contradictory prefix/auto selection or an empty
    include set is always fatal.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.

    Raises:
        ConfigurationError: On invalid prefix/auto combination, missing
                            include patterns or (strict) type mismatch.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Invalid config type: expected dict, received {type(config).__name__}."
        )

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing & Normalization
    for field in ("include_patterns", "exclude_patterns"):
        merged[field] = _as_list_str(merged.get(field), field, warnings, strict)

    for field in ("auto", "dry_run"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["prefix"] = _as_optional_str(merged.get("prefix"), "prefix", warnings, strict)
    merged["package_file"] = _as_optional_str(
        merged.get("package_file"), "package_file", warnings, strict
    ) or defaults["package_file"]
    merged["indent"] = _as_indent(merged.get("indent"), defaults["indent"], warnings, strict)
    merged["threshold"] = _as_threshold(merged.get("threshold"), warnings, strict)

    # 3. Domain Rules
    _check_prefix_mode(merged)

    if not merged["include_patterns"]:
        raise ConfigurationError("At least one --include pattern is required.")

    for w in warnings:
        logger.debug(f"Config coercion: {w}")

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN RULES
# -----------------------------------------------------------------------------

def _check_prefix_mode(cfg: Dict[str, Any]) -> None:
    """Exactly one of 'prefix' and 'auto' must be set."""
    has_prefix = bool(cfg["prefix"])
    if has_prefix == cfg["auto"]:
        raise ConfigurationError("Specify either prefix or auto")


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _fail(msg: str, warnings: List[str], strict: bool, suffix: str = "Using fallback.") -> None:
    if strict:
        raise ConfigurationError(msg)
    warnings.append(f"{msg} {suffix}")


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """Keep strings verbatim; empty strings count as unset."""
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    _fail(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return None


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _fail(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_list_str(value: Any, field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of non-blank glob strings."""
    if value is None:
        return []

    # A bare pattern is accepted as a one-element list
    if isinstance(value, str) and not strict:
        return [value] if value.strip() else []

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                if item.strip():
                    out.append(item.strip())
            else:
                _fail(f"Invalid item in '{field}[{i}]': expected str.", warnings, strict,
                      "Item discarded.")
        return out

    _fail(f"Invalid field '{field}': expected list[str], received {type(value).__name__}.",
          warnings, strict)
    return []


def _as_indent(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    if value is None:
        return fallback
    _fail(f"Invalid field 'indent': expected non-negative int, received {value!r}.", warnings, strict)
    return fallback


def _as_threshold(value: Any, warnings: List[str], strict: bool) -> float:
    """Dominance share must lie strictly between 0 and 1."""
    if value is None:
        return DOMINANCE_THRESHOLD
    if isinstance(value, (int, float)) and not isinstance(value, bool) and 0 < value < 1:
        return float(value)
    _fail(f"Invalid field 'threshold': expected 0 < value < 1, received {value!r}.", warnings, strict)
    return DOMINANCE_THRESHOLD
