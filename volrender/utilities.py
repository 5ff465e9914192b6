"""Margins and text formatting of three-component vectors."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Margin:
    """Distances from the four edges of a rectangle, in pixels."""

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0


def _components(values: Sequence[float], precision: int | None) -> list[str]:
    if len(values) != 3:
        raise ValueError(f"expected 3 components, got {len(values)}")
    if precision is None and all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return [str(v) for v in values]
    digits = 2 if precision is None else precision
    return [f"{float(v):.{digits}f}" for v in values]


def format_vector(vector: Sequence[float], precision: int | None = None) -> str:
    """Format a vector as ``[x, y, z]``.

    Integer vectors are written as integers unless a precision is given;
    otherwise each component is written with ``precision`` decimals (2 by default).
    """
    return "[" + ", ".join(_components(vector, precision)) + "]"


def format_size(size: Sequence[float], precision: int | None = None) -> str:
    """Format a size as ``x x y x z``, with the same rules as :func:`format_vector`."""
    return " x ".join(_components(size, precision))