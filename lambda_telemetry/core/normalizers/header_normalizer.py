"""
Header normalization.

Headers are kept exactly as the caller sent them (no case folding). This
module only guarantees a mapping is always present and converts between
the single-value and multi-value shapes.
"""

from typing import Any, Dict, List, Mapping, Optional


def normalize_headers(headers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Return ``{}`` for absent or empty headers, the input otherwise."""
    if not headers:
        return {}
    return headers


def expand_headers(headers: Optional[Mapping[str, Any]]) -> Dict[str, List[str]]:
    """Wrap every single value in a one-element list."""
    return {key: [value] for key, value in (headers or {}).items()}


def merge_headers(
        headers: Optional[Mapping[str, Any]],
        multi_value_headers: Optional[Mapping[str, List[str]]]
) -> Dict[str, Any]:
    """
    Fold multi-value headers into a single-value map.

    Multi-value entries are joined with ``", "``; single-value entries are
    laid over the result, so they win when a name appears in both.

    Args:
        headers: Single-value header map
        multi_value_headers: Multi-value header map

    Returns:
        Single-value header map (empty when both inputs are empty)
    """
    merged: Dict[str, Any] = {}

    for key, values in (multi_value_headers or {}).items():
        if values:
            merged[key] = ", ".join(values)

    merged.update(headers or {})
    return normalize_headers(merged)
