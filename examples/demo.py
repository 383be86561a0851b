"""Write a POV-Ray scene for two molecules and save a preview image.

Render the scene with ``povray +Iscene.pov`` after copying
``babel_povray3.inc`` next to it.
"""

from pathlib import Path

from molpov import Molecule, RenderOptions, preview_mpl, write_scene

water = Molecule.from_arrays(
    ["O", "H", "H"],
    [[0.0, 0.0, 0.0], [0.96, 0.0, 0.0], [-0.24, 0.93, 0.0]],
    bonds=[(1, 2), (1, 3)],
    title="water",
)

ethene = Molecule.from_arrays(
    ["C", "C", "H", "H", "H", "H"],
    [
        [4.0, 0.0, 0.0],
        [5.33, 0.0, 0.0],
        [3.43, 0.92, 0.0],
        [3.43, -0.92, 0.0],
        [5.90, 0.92, 0.0],
        [5.90, -0.92, 0.0],
    ],
    bonds=[(1, 2, 2), (1, 3), (1, 4), (2, 5), (2, 6)],
    title="ethene",
)

options = RenderOptions(model_style="CST", checkerboard=True, sky=True)

with Path("scene.pov").open("w") as fh:
    write_scene([water, ethene], options, sink=fh)

preview_mpl(ethene, options, output="ethene_preview.png")
