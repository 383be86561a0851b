from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bond:
    """A bond between two atoms of a molecule.

    The bond is directed: the canonical bond primitive starts at the
    *begin* atom and points towards the *end* atom.

    Attributes:
        begin: 1-based index of the first atom.
        end: 1-based index of the second atom.
        order: Bond multiplicity (1 = single, 2 = double, 3 = triple,
            ...).  Selects the ``bond_<order>`` primitive.

    Raises:
        ValueError: If either index is less than 1 or *order* is not
            positive.
    """

    begin: int
    end: int
    order: int = 1

    def __post_init__(self) -> None:
        if self.begin < 1 or self.end < 1:
            raise ValueError(
                f"atom indices must be at least 1, got ({self.begin}, {self.end})"
            )
        if self.order < 1:
            raise ValueError(f"order must be positive, got {self.order}")
