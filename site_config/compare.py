"""
Field-by-field comparison of two site configurations.

Used to surface conflicts between competing versions of the same file;
nothing here decides which side wins.
"""

from typing import Any, NamedTuple

from .schemas import SiteConfig


class FieldDifference(NamedTuple):
    """A wire path whose value differs; a side is None when the path is absent there."""

    path: str
    left: Any
    right: Any


def _walk(prefix: str, left: Any, right: Any, out: list[FieldDifference]) -> None:
    if isinstance(left, dict) and isinstance(right, dict):
        for key in list(left) + [k for k in right if k not in left]:
            _walk(_join(prefix, key), left.get(key), right.get(key), out)
    elif isinstance(left, list) and isinstance(right, list):
        for index in range(max(len(left), len(right))):
            _walk(
                _join(prefix, str(index)),
                left[index] if index < len(left) else None,
                right[index] if index < len(right) else None,
                out,
            )
    elif left != right:
        out.append(FieldDifference(prefix, left, right))


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def diff_configs(left: SiteConfig, right: SiteConfig) -> list[FieldDifference]:
    """List every leaf value that differs between left and right, in field order."""
    differences: list[FieldDifference] = []
    _walk("", left.to_mapping(), right.to_mapping(), differences)
    return differences
