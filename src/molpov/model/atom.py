from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Atom:
    """A single atom of a molecule.

    Attributes:
        index: 1-based position of the atom in its molecule.  Stable
            for the lifetime of the molecule and used to name the
            atom's declarations in the emitted scene.
        position: Cartesian coordinates ``(x, y, z)``.
        symbol: Element symbol, e.g. ``"C"`` or ``"Cl"``.  Selects the
            ``Atom_<symbol>`` primitive from the include file.
        atom_type: Atom type label, e.g. ``"C.ar"`` or ``"O3"``.
            Defaults to *symbol*.  Used for the per-atom pigment of
            capped-stick bond halves.

    Raises:
        ValueError: If *index* is less than 1, *position* does not have
            three components, or *symbol* is empty.
    """

    index: int
    position: tuple[float, float, float]
    symbol: str
    atom_type: str = ""

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError(f"index must be at least 1, got {self.index}")
        position = tuple(float(v) for v in self.position)
        if len(position) != 3:
            raise ValueError(
                f"position must have three components, got {len(position)}"
            )
        if not self.symbol:
            raise ValueError("symbol must not be empty")
        object.__setattr__(self, "position", position)
        if not self.atom_type:
            object.__setattr__(self, "atom_type", self.symbol)

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def z(self) -> float:
        return self.position[2]

    @property
    def coords(self) -> np.ndarray:
        """Position as a float array of shape ``(3,)``."""
        return np.array(self.position, dtype=float)

    @property
    def colour_name(self) -> str:
        """Atom type with ``.`` separators removed (``"C.ar"`` -> ``"Car"``).

        The include file defines one ``Color_<name>`` per such name.
        """
        return self.atom_type.replace(".", "")
