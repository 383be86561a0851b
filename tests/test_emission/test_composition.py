"""Tests for unions, molecule composition and the centre declaration."""

import io

from molpov.emission.composition import (
    _write_centre,
    _write_molecule_with_bonds,
    _write_molecule_without_bonds,
    _write_unions,
)
from molpov.model import BoundingBox

_BOX = BoundingBox(-0.24, 0.96, 0.0, 0.93, 0.0, 0.0)


def _write(fn, *args):
    out = io.StringIO()
    fn(out, *args)
    return out.getvalue()


class TestUnions:
    def test_atom_union_lists_every_atom(self):
        text = _write(_write_unions, "mol_0", 3, 2)
        for i in (1, 2, 3):
            assert f"\t  object{{mol_0_atom{i}}}\n" in text
        assert "mol_0_atom4" not in text

    def test_merge_when_transparent(self):
        text = _write(_write_unions, "mol_0", 1, 0)
        assert (
            "#if (TRANS)\n"
            "#declare mol_0_atoms = merge {\n"
            "#else\n"
            "#declare mol_0_atoms = union {\n"
            "#end //(End of TRANS)\n"
        ) in text

    def test_bond_union_guarded(self):
        text = _write(_write_unions, "mol_0", 3, 2)
        assert (
            "#if (BAS | CST)\n"
            "#declare mol_0_bonds = union {\n"
            "\t  object{mol_0_bond0}\n"
            "\t  object{mol_0_bond1}\n"
            "\t }\n"
            "#end\n"
        ) in text

    def test_no_bond_union_without_bonds(self):
        assert "_bonds" not in _write(_write_unions, "mol_0", 2, 0)


class TestMoleculeWithBonds:
    def test_spacefill_branch(self):
        text = _write(_write_molecule_with_bonds, "mol_0", _BOX)
        assert "#if (SPF)\n#declare mol_0 = object{\n\t  mol_0_atoms\n#else\n" in text

    def test_transparent_difference(self):
        text = _write(_write_molecule_with_bonds, "mol_0", _BOX)
        assert (
            "#if (TRANS)\n"
            "\t  difference {\n"
            "\t   object{mol_0_bonds}\n"
            "\t   object{mol_0_atoms}\n"
            "\t  }\n"
            "#else\n"
            "\t  object{mol_0_bonds}\n"
            "#end //(End of TRANS)\n"
        ) in text

    def test_bounding_box_comment_padded(self):
        text = _write(_write_molecule_with_bonds, "mol_0", _BOX)
        assert "//\t    <-3.24,-3,-3>\n" in text
        assert "//\t    <3.96,3.93,3>\n" in text

    def test_bounding_box_is_comment_only(self):
        text = _write(_write_molecule_with_bonds, "mol_0", _BOX)
        for line in text.splitlines():
            if "bounded_by" in line or "box {" in line:
                assert line.startswith("//")

    def test_closing_brace_after_comment(self):
        text = _write(_write_molecule_with_bonds, "mol_0", _BOX)
        assert text.endswith("//\t  }\n\t }\n\n")


class TestMoleculeWithoutBonds:
    def test_atoms_only(self):
        text = _write(_write_molecule_without_bonds, "mol_2")
        assert "#declare mol_2 = object {mol_2_atoms}\n" in text
        assert "#if" not in text


class TestCentre:
    def test_negated_midpoint(self):
        text = _write(_write_centre, "mol_0", _BOX)
        assert "#declare mol_0_center = <-0.36,-0.465,-0>;\n" in text

    def test_origin_box(self):
        text = _write(_write_centre, "mol_1", BoundingBox(-2.0, 2.0, -1.0, 3.0, 0.0, 4.0))
        assert "#declare mol_1_center = <-0,-1,-2>;\n" in text
