from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extents of a molecule.

    Attributes:
        min_x: Smallest x coordinate.
        max_x: Largest x coordinate.
        min_y: Smallest y coordinate.
        max_y: Largest y coordinate.
        min_z: Smallest z coordinate.
        max_z: Largest z coordinate.
    """

    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0
    min_z: float = 0.0
    max_z: float = 0.0

    @property
    def minimum(self) -> np.ndarray:
        """Lower corner ``(min_x, min_y, min_z)``."""
        return np.array([self.min_x, self.min_y, self.min_z])

    @property
    def maximum(self) -> np.ndarray:
        """Upper corner ``(max_x, max_y, max_z)``."""
        return np.array([self.max_x, self.max_y, self.max_z])

    @property
    def centre(self) -> np.ndarray:
        """Midpoint of the box."""
        return (self.minimum + self.maximum) / 2.0

    def expanded(self, margin: float) -> BoundingBox:
        """Return a copy grown by *margin* on every side."""
        return BoundingBox(
            min_x=self.min_x - margin,
            max_x=self.max_x + margin,
            min_y=self.min_y - margin,
            max_y=self.max_y + margin,
            min_z=self.min_z - margin,
            max_z=self.max_z + margin,
        )
