"""molpov: POV-Ray scene descriptions for 3D molecules.

molpov turns a molecule (atoms with positions and element symbols,
bonds with orders) into a POV-Ray scene that draws it as
ball-and-stick, space-fill or capped sticks.

Example usage::

    from molpov import Molecule, RenderOptions, write_scene

    water = Molecule.from_arrays(
        ["O", "H", "H"],
        [[0.0, 0.0, 0.0], [0.96, 0.0, 0.0], [-0.24, 0.93, 0.0]],
        bonds=[(1, 2), (1, 3)],
        title="water",
    )
    text = write_scene([water], RenderOptions(model_style="CST"))
"""

import logging

from molpov.emission import SceneSession, emit_scene, write_scene
from molpov.geometry import bond_geometry, bounding_box, centroid
from molpov.model import (
    Atom,
    Bond,
    BondGeometry,
    BoundingBox,
    ModelStyle,
    Molecule,
    MoleculeLike,
    RenderOptions,
)
from molpov.options_io import load_options, save_options
from molpov.preview import preview_mpl

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Atom",
    "Bond",
    "BondGeometry",
    "BoundingBox",
    "ModelStyle",
    "Molecule",
    "MoleculeLike",
    "RenderOptions",
    "SceneSession",
    "bond_geometry",
    "bounding_box",
    "centroid",
    "emit_scene",
    "load_options",
    "preview_mpl",
    "save_options",
    "write_scene",
]
