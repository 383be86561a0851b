"""Atom position and object declarations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from molpov.emission._format import _vec
from molpov.model import Atom


def _pos_name(prefix: str, index: int) -> str:
    return f"{prefix}_pos_{index}"


def _atom_name(prefix: str, index: int) -> str:
    return f"{prefix}_atom{index}"


def _write_atoms(out: TextIO, atoms: Sequence[Atom], prefix: str) -> None:
    """Declare every atom's position, then an object for every atom.

    Positions are declared first so that each atom object, and later
    each bond, can refer to ``<prefix>_pos_<i>`` by name.
    """
    n_atoms = len(atoms)
    out.write(f"//Coordinates of atoms 1 - {n_atoms}\n")
    for i, atom in enumerate(atoms, start=1):
        out.write(f"#declare {_pos_name(prefix, i)} = {_vec(atom.position)};\n")

    out.write(f"\n//Povray-description of atoms 1 - {n_atoms}\n")
    for i, atom in enumerate(atoms, start=1):
        out.write(
            f"#declare {_atom_name(prefix, i)} = object {{\n"
            f"\t  Atom_{atom.symbol}\n"
            f"\t  translate {_pos_name(prefix, i)}\n"
            "\t }\n"
        )
    out.write("\n")
