"""Core data model for molpov: molecules, options and derived geometry.

Everything is re-exported here so that ``from molpov.model import
Molecule`` works without knowing the submodule layout.
"""

from molpov.model.atom import Atom
from molpov.model.bond import Bond
from molpov.model.bond_geometry import BondGeometry
from molpov.model.bounding_box import BoundingBox
from molpov.model.molecule import Molecule, MoleculeLike
from molpov.model.render_options import ModelStyle, RenderOptions

__all__ = [
    "Atom",
    "Bond",
    "BondGeometry",
    "BoundingBox",
    "ModelStyle",
    "Molecule",
    "MoleculeLike",
    "RenderOptions",
]
