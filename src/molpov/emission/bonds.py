"""Bond object declarations for the ball-and-stick and capped-sticks styles.

Both variants are always written, each inside its own renderer-side
conditional (``#if (BAS)`` / ``#if (CST)``), so the document can be
re-rendered under either style without regenerating it.  Each bond is
the canonical ``bond_<order>`` primitive (unit length along +x) placed
with the transform chain scale -> rotate z -> rotate y -> translate
computed by :func:`~molpov.geometry.bond_geometry`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from molpov._constants import EPSILON
from molpov.emission._format import _num
from molpov.emission.atoms import _pos_name
from molpov.geometry import bond_geometry
from molpov.model import Atom, Bond, BondGeometry


def _bond_name(prefix: str, index: int) -> str:
    return f"{prefix}_bond{index}"


def _transform_lines(
    geom: BondGeometry,
    length: float,
    z_rotation: float,
    anchor: str,
) -> list[str]:
    """Scale, rotate and translate statements for one bond primitive.

    Statements that would be the identity are left out: no scale for
    a zero-length bond and no rotation for a zero angle.

    Args:
        geom: Orientation of the bond.
        length: Length to scale the unit primitive to (the full bond for
            ball-and-stick, half of it for a capped-stick half).
        z_rotation: Rotation about z in degrees.
        anchor: Name of the position to translate to.
    """
    lines: list[str] = []
    if geom.dist >= EPSILON:
        lines.append(f"scale <{_num(length)},1.0000,1.0000>")
    if abs(z_rotation) >= EPSILON:
        lines.append(f"rotate <0.0000,0.0000,{_num(z_rotation)}>")
    if geom.theta >= EPSILON:
        lines.append(f"rotate <0.0000,{_num(geom.y_rotation)},0.0000>")
    lines.append(f"translate {anchor}")
    return lines


def _write_bas_bond(
    out: TextIO,
    prefix: str,
    index: int,
    bond: Bond,
    begin: Atom,
    end: Atom,
) -> None:
    geom = bond_geometry(begin.position, end.position)
    out.write(f"#declare {_bond_name(prefix, index)} = object {{\n")
    out.write(f"\t  bond_{bond.order}\n")
    for line in _transform_lines(
        geom, geom.dist, geom.z_rotation, _pos_name(prefix, bond.begin),
    ):
        out.write(f"\t  {line}\n")
    out.write("\t }\n")


def _write_half_bond(
    out: TextIO,
    bond: Bond,
    atom: Atom,
    geom: BondGeometry,
    z_rotation: float,
    anchor: str,
) -> None:
    out.write("\t   object {\n")
    out.write(f"\t    bond_{bond.order}\n")
    out.write(f"\t    pigment{{color Color_{atom.colour_name}}}\n")
    for line in _transform_lines(geom, 0.5 * geom.dist, z_rotation, anchor):
        out.write(f"\t    {line}\n")
    out.write("\t   }\n")


def _write_cst_bond(
    out: TextIO,
    prefix: str,
    index: int,
    bond: Bond,
    begin: Atom,
    end: Atom,
) -> None:
    """Write one capped-stick bond as a union of two coloured halves.

    The start half runs from the begin atom to the midpoint.  The end
    half is anchored at the end atom and turned a further 180 about z
    so that it runs back to the midpoint.
    """
    geom = bond_geometry(begin.position, end.position)
    out.write(f"#declare {_bond_name(prefix, index)} = object {{\n")
    out.write("\t  union {\n")
    _write_half_bond(
        out, bond, begin, geom, geom.z_rotation,
        _pos_name(prefix, bond.begin),
    )
    _write_half_bond(
        out, bond, end, geom, geom.end_z_rotation,
        _pos_name(prefix, bond.end),
    )
    out.write("\t  }\n")
    out.write("\t }\n\n")


def _write_bonds(
    out: TextIO,
    atoms: Sequence[Atom],
    bonds: Sequence[Bond],
    prefix: str,
) -> None:
    """Write both bond variants, each guarded by its style flag.

    Nothing is written for a molecule without bonds.

    Raises:
        IndexError: If a bond refers to an atom not in *atoms*.
    """
    if not bonds:
        return

    endpoints = [_endpoints(atoms, bond) for bond in bonds]

    out.write(f"//Povray-description of bonds 1 - {len(bonds)}\n")
    out.write("#if (BAS)\n")
    for i, (bond, (begin, end)) in enumerate(zip(bonds, endpoints)):
        _write_bas_bond(out, prefix, i, bond, begin, end)
    out.write("#end //(BAS-Bonds)\n\n")

    out.write("#if (CST)\n")
    for i, (bond, (begin, end)) in enumerate(zip(bonds, endpoints)):
        _write_cst_bond(out, prefix, i, bond, begin, end)
    out.write("#end // (CST-Bonds)\n\n")


def _endpoints(atoms: Sequence[Atom], bond: Bond) -> tuple[Atom, Atom]:
    n_atoms = len(atoms)
    for idx in (bond.begin, bond.end):
        if not 1 <= idx <= n_atoms:
            raise IndexError(
                f"bond {bond.begin}-{bond.end} refers to atom {idx}; "
                f"molecule has {n_atoms} atom(s)"
            )
    return atoms[bond.begin - 1], atoms[bond.end - 1]
