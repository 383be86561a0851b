"""Extents, centroid and bond orientation for scene placement."""

from __future__ import annotations

import numpy as np

from molpov._constants import EPSILON
from molpov.model import BondGeometry, BoundingBox


def bounding_box(coords: np.ndarray) -> BoundingBox:
    """Compute the axis-aligned extents of a set of atom positions.

    All six extrema start at ``0.0`` rather than at the first atom, so
    the origin is always inside the box.  An empty input gives the
    zero box.

    Args:
        coords: Coordinates array of shape ``(n_atoms, 3)``.

    Returns:
        The :class:`BoundingBox` enclosing the atoms and the origin.
    """
    coords = np.asarray(coords, dtype=float).reshape(-1, 3)
    lo = np.zeros(3)
    hi = np.zeros(3)
    if len(coords):
        lo = np.minimum(lo, coords.min(axis=0))
        hi = np.maximum(hi, coords.max(axis=0))
    return BoundingBox(
        min_x=float(lo[0]), max_x=float(hi[0]),
        min_y=float(lo[1]), max_y=float(hi[1]),
        min_z=float(lo[2]), max_z=float(hi[2]),
    )


def centroid(coords: np.ndarray) -> np.ndarray:
    """Return the arithmetic mean of *coords*, or the zero vector if empty."""
    coords = np.asarray(coords, dtype=float).reshape(-1, 3)
    if len(coords) == 0:
        return np.zeros(3)
    return coords.mean(axis=0)


def bond_geometry(p1: np.ndarray, p2: np.ndarray) -> BondGeometry:
    """Compute the orientation of the bond from *p1* to *p2*.

    ``phi`` is measured from the +y axis and ``theta`` from the +x
    axis within the horizontal plane.  Either angle is zero when the
    length it is normalised by is below ``EPSILON`` (coincident
    endpoints, or a vertical bond for ``theta``).

    Args:
        p1: Begin position ``(x1, y1, z1)``.
        p2: End position ``(x2, y2, z2)``.

    Returns:
        The :class:`BondGeometry` for the bond.
    """
    x1, y1, z1 = (float(v) for v in p1)
    x2, y2, z2 = (float(v) for v in p2)
    dx, dyv, dz = x2 - x1, y2 - y1, z2 - z1

    dist = float(np.sqrt(dx * dx + dyv * dyv + dz * dz))
    dy = float(np.sqrt(dx * dx + dz * dz))

    phi = 0.0
    theta = 0.0
    if dist >= EPSILON:
        # Clamp against rounding just outside [-1, 1].
        phi = float(np.arccos(np.clip(dyv / dist, -1.0, 1.0)))
    if dy >= EPSILON:
        theta = float(np.arccos(np.clip(dx / dy, -1.0, 1.0)))

    return BondGeometry(
        dist=dist,
        dy=dy,
        phi=phi,
        theta=theta,
        direction_sign=1 if dz >= 0.0 else -1,
    )
