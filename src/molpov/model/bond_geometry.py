from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class BondGeometry:
    """Orientation of a bond relative to the canonical bond primitive.

    The primitive lies along +x with unit length.  It is placed on the
    bond by scaling x by :attr:`dist`, rotating about z by
    :attr:`z_rotation`, rotating about y by :attr:`y_rotation` and
    translating to the begin atom.

    Attributes:
        dist: Distance between the two endpoints.
        dy: Distance between the endpoints projected onto the
            horizontal (x-z) plane.  y is "up".
        phi: Angle in radians between the bond and the +y axis.
        theta: Angle in radians between the horizontal projection of
            the bond and the +x axis.
        direction_sign: ``+1`` if the end atom's z is not below the
            begin atom's z, otherwise ``-1``.
    """

    dist: float
    dy: float
    phi: float
    theta: float
    direction_sign: int

    @property
    def z_rotation(self) -> float:
        """Rotation about z in degrees tilting the primitive to *phi*."""
        return math.degrees(-self.phi) + 90.0

    @property
    def end_z_rotation(self) -> float:
        """Rotation about z in degrees for the end half of a split bond.

        The end half is anchored at the end atom, so it points back
        along the bond: the start rotation turned by a further 180.
        """
        return self.z_rotation + 180.0

    @property
    def y_rotation(self) -> float:
        """Rotation about y in degrees swinging the primitive to *theta*."""
        if self.direction_sign > 0:
            return -math.degrees(self.theta)
        return math.degrees(self.theta)
