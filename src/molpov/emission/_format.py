"""Number and vector formatting for scene text."""

from __future__ import annotations

from collections.abc import Iterable


def _num(value: float) -> str:
    """Format a number with six significant digits, shortest form.

    ``1.0`` becomes ``"1"``, ``0.123456789`` becomes ``"0.123457"``
    and ``1e-7`` becomes ``"1e-07"``.
    """
    return format(float(value), "g")


def _vec(values: Iterable[float]) -> str:
    """Format a 3-vector as ``<x,y,z>``."""
    return "<" + ",".join(_num(v) for v in values) + ">"
