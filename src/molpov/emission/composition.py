"""Unions of atoms and bonds, the molecule object and its centre."""

from __future__ import annotations

from typing import TextIO

from molpov._constants import MAX_RADIUS
from molpov.emission._format import _vec
from molpov.emission.atoms import _atom_name
from molpov.emission.bonds import _bond_name
from molpov.model import BoundingBox


def _write_unions(
    out: TextIO,
    prefix: str,
    n_atoms: int,
    n_bonds: int,
) -> None:
    """Declare ``<prefix>_atoms`` and, if there are bonds, ``<prefix>_bonds``.

    With transparent textures the atoms are merged instead of unioned
    so that no internal surfaces show through.  The bond union only
    exists under the ball-and-stick and capped-sticks styles, matching
    the bond declarations it refers to.
    """
    out.write(f"\n//All atoms of molecule {prefix}\n")
    out.write("#if (TRANS)\n")
    out.write(f"#declare {prefix}_atoms = merge {{\n")
    out.write("#else\n")
    out.write(f"#declare {prefix}_atoms = union {{\n")
    out.write("#end //(End of TRANS)\n")
    for i in range(1, n_atoms + 1):
        out.write(f"\t  object{{{_atom_name(prefix, i)}}}\n")
    out.write("\t }\n\n")

    if n_bonds > 0:
        out.write(
            "//Bonds only needed for ball and sticks or capped sticks models\n"
        )
        out.write("#if (BAS | CST)\n")
        out.write(f"#declare {prefix}_bonds = union {{\n")
        for i in range(n_bonds):
            out.write(f"\t  object{{{_bond_name(prefix, i)}}}\n")
        out.write("\t }\n")
        out.write("#end\n\n")


def _write_molecule_with_bonds(
    out: TextIO,
    prefix: str,
    box: BoundingBox,
) -> None:
    """Declare the molecule object for a molecule that has bonds.

    Space-fill draws the atoms alone.  The stick styles add the bonds,
    cut back to the atom surfaces when textures are transparent.  The
    padded bounding box is left as a commented-out ``bounded_by`` hint.
    """
    padded = box.expanded(MAX_RADIUS)

    out.write(f"\n//Definition of molecule {prefix}\n")
    out.write("#if (SPF)\n")
    out.write(f"#declare {prefix} = object{{\n")
    out.write(f"\t  {prefix}_atoms\n")
    out.write("#else\n")
    out.write(f"#declare {prefix} = union {{\n")
    out.write(f"\t  object{{{prefix}_atoms}}\n")
    out.write("#if (BAS | CST)\n")
    out.write("#if (TRANS)\n")
    out.write("\t  difference {\n")
    out.write(f"\t   object{{{prefix}_bonds}}\n")
    out.write(f"\t   object{{{prefix}_atoms}}\n")
    out.write("\t  }\n")
    out.write("#else\n")
    out.write(f"\t  object{{{prefix}_bonds}}\n")
    out.write("#end //(End of TRANS)\n")
    out.write("#end //(End of (BAS|CST))\n")
    out.write("#end //(End of SPF)\n")

    out.write("//\t  bounded_by {\n")
    out.write("//\t   box {\n")
    out.write(f"//\t    {_vec(padded.minimum)}\n")
    out.write(f"//\t    {_vec(padded.maximum)}\n")
    out.write("//\t   }\n")
    out.write("//\t  }\n")

    # Closes whichever of the object/union above the renderer kept.
    out.write("\t }\n\n")


def _write_molecule_without_bonds(out: TextIO, prefix: str) -> None:
    out.write(f"\n//Definition of Molecule {prefix} (no bonds)\n")
    out.write(f"#declare {prefix} = object {{{prefix}_atoms}}\n\n")


def _write_centre(out: TextIO, prefix: str, box: BoundingBox) -> None:
    """Declare ``<prefix>_center``, the translation that centres the box."""
    out.write(f"//Center of molecule {prefix} (bounding box)\n")
    out.write(f"#declare {prefix}_center = {_vec(-box.centre)};\n\n")
