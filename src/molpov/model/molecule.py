from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import numpy as np

from molpov.model.atom import Atom
from molpov.model.bond import Bond


@runtime_checkable
class MoleculeLike(Protocol):
    """Structural interface consumed by the scene emitter.

    Any object exposing these members can be converted, not only
    :class:`Molecule`.  Atoms returned by :meth:`atom` must provide
    ``position``, ``symbol`` and ``colour_name``; bonds returned by
    :meth:`bond` must provide ``begin``, ``end`` and ``order``.
    """

    title: str

    @property
    def num_atoms(self) -> int: ...

    @property
    def num_bonds(self) -> int: ...

    def atom(self, index: int) -> Atom: ...

    def bond(self, index: int) -> Bond: ...


@dataclass(frozen=True)
class Molecule:
    """An immutable molecular structure.

    Attributes:
        atoms: Atoms in index order; ``atoms[k].index`` must equal
            ``k + 1``.
        bonds: Bonds in emission order (0-based).
        title: Free-text molecule title, printed by the renderer.

    Raises:
        ValueError: If atom indices are not ``1..N`` in order, or a
            bond refers to an atom that does not exist.
    """

    atoms: tuple[Atom, ...] = ()
    bonds: tuple[Bond, ...] = ()
    title: str = ""
    _coords: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "atoms", tuple(self.atoms))
        object.__setattr__(self, "bonds", tuple(self.bonds))
        for expected, atom in enumerate(self.atoms, start=1):
            if atom.index != expected:
                raise ValueError(
                    f"atom at position {expected} has index {atom.index}; "
                    f"indices must run 1..N in order"
                )
        n_atoms = len(self.atoms)
        for i, bond in enumerate(self.bonds):
            if bond.begin > n_atoms or bond.end > n_atoms:
                raise ValueError(
                    f"bond {i} ({bond.begin}-{bond.end}) refers to a missing "
                    f"atom; molecule has {n_atoms} atom(s)"
                )
        coords = np.array([a.position for a in self.atoms], dtype=float)
        coords = coords.reshape(-1, 3)
        coords.flags.writeable = False
        object.__setattr__(self, "_coords", coords)

    @classmethod
    def from_arrays(
        cls,
        symbols: Sequence[str],
        coords: np.ndarray | Sequence[Sequence[float]],
        bonds: Sequence[tuple[int, int] | tuple[int, int, int]] = (),
        title: str = "",
        atom_types: Sequence[str] | None = None,
    ) -> Molecule:
        """Build a molecule from parallel arrays.

        Args:
            symbols: Element symbol for each atom.
            coords: Coordinates, shape ``(n_atoms, 3)``.
            bonds: ``(begin, end)`` or ``(begin, end, order)`` tuples
                with 1-based atom indices.  Order defaults to 1.
            title: Molecule title.
            atom_types: Optional atom type labels, one per atom.

        Raises:
            ValueError: If the array lengths disagree or *coords* has
                the wrong shape.
        """
        coords = np.asarray(coords, dtype=float)
        if len(symbols) == 0:
            coords = coords.reshape(0, 3)
        if coords.ndim != 2 or coords.shape[1] != 3:
            raise ValueError(
                f"coords must have shape (n_atoms, 3), got {coords.shape}"
            )
        if coords.shape[0] != len(symbols):
            raise ValueError(
                f"got {len(symbols)} symbols but {coords.shape[0]} coordinates"
            )
        if atom_types is not None and len(atom_types) != len(symbols):
            raise ValueError(
                f"got {len(symbols)} symbols but {len(atom_types)} atom types"
            )
        atoms = tuple(
            Atom(
                index=i + 1,
                position=tuple(coords[i]),
                symbol=sym,
                atom_type=atom_types[i] if atom_types is not None else "",
            )
            for i, sym in enumerate(symbols)
        )
        return cls(
            atoms=atoms,
            bonds=tuple(Bond(*b) for b in bonds),
            title=title,
        )

    @property
    def num_atoms(self) -> int:
        return len(self.atoms)

    @property
    def num_bonds(self) -> int:
        return len(self.bonds)

    @property
    def coords(self) -> np.ndarray:
        """Atom coordinates as an array of shape ``(n_atoms, 3)``."""
        return self._coords

    def atom(self, index: int) -> Atom:
        """Return the atom with 1-based *index*."""
        if not 1 <= index <= len(self.atoms):
            raise IndexError(
                f"atom index {index} out of range 1..{len(self.atoms)}"
            )
        return self.atoms[index - 1]

    def bond(self, index: int) -> Bond:
        """Return the bond with 0-based *index*."""
        return self.bonds[index]

    def bond_atoms(self, bond: Bond) -> tuple[Atom, Atom]:
        """Return the ``(begin, end)`` atoms of *bond*."""
        return self.atom(bond.begin), self.atom(bond.end)
