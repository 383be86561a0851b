"""Scene header: global flags, light, background, camera and props."""

from __future__ import annotations

import time
from typing import TextIO

import numpy as np

from molpov._constants import CAMERA_DISTANCE
from molpov.emission._format import _num, _vec
from molpov.model import RenderOptions

INCLUDE_FILE = "babel_povray3.inc"
"""Include file defining the ``Atom_*``, ``bond_*`` and ``Color_*`` names."""

POVRAY_VERSION = "3.6"

_TIME_FORMAT = "%a %b %d %H:%M:%S %Z %Y"

_LIGHT_OFFSET = np.array([2.0, 3.0, -8.0])
_MIRROR_OFFSET = np.array([8.0, -4.0, 8.0])
_MIRROR_RADIUS = 4.0
_FLOOR_OFFSET = 8.0

_SKY = """\
// Add some nice sky with clouds
sky_sphere {
    pigment {
      gradient y
      color_map {
        [0.0 1.0 color SkyBlue  color NavyBlue]
      }
      scale 2
      translate -1
    }
    pigment {
      bozo
      turbulence 0.65
      octaves 6
      omega 0.7
      lambda 2
      color_map {
          [0.0 0.1 color rgb <0.85, 0.85, 0.85>
                   color rgb <0.75, 0.75, 0.75>]
          [0.1 0.5 color rgb <0.75, 0.75, 0.75>
                   color rgbt <1, 1, 1, 1>]
          [0.5 1.0 color rgbt <1, 1, 1, 1>
                   color rgbt <1, 1, 1, 1>]
      }
      scale <0.2, 0.5, 0.2>
    }
    rotate -135*x
  }

"""

_FLAT_BACKGROUND = """\
// set a color of the background (sky)
background { color rgb <0.95 0.95 0.95> }

"""


def _escape(text: str) -> str:
    """Escape *text* for use inside a double-quoted scene string."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _timestamp(timestamp: str | None) -> str:
    if timestamp is not None:
        return timestamp
    return time.strftime(_TIME_FORMAT, time.localtime())


def _write_header(
    out: TextIO,
    options: RenderOptions,
    centre: np.ndarray,
    title: str,
    has_bonds: bool,
    timestamp: str | None = None,
) -> None:
    """Write the once-per-stream scene header.

    The light, camera and optional props are placed relative to
    *centre* (the centroid of the first molecule).  The camera sits
    ``CAMERA_DISTANCE`` in front of it along -z and looks at it.

    Args:
        out: Destination stream.
        options: Scene switches.
        centre: Centroid of the molecule, shape ``(3,)``.
        title: Molecule title, printed by the renderer while tracing.
        has_bonds: Whether the molecule has any bonds.  A bond-free
            molecule gets a renderer warning recommending space-fill.
        timestamp: Override for the ``//Date:`` line.
    """
    cx, cy, cz = (float(v) for v in centre)
    trans = "true" if options.transparent else "false"

    out.write("//Povray v3 code generated by molpov\n")
    out.write(f"//Date: {_timestamp(timestamp)}\n\n")

    out.write("//Set some global parameters for display options\n")
    out.write(f"#declare {options.model_style} = true;\n")
    out.write(f"#declare TRANS = {trans};\n\n")

    out.write('#include "colors.inc"\n\n')

    out.write(
        "// create a regular point light source\n"
        "light_source {\n"
        f"  {_vec(centre + _LIGHT_OFFSET)}\n"
        "  color rgb <1,1,1>    // light's color\n"
        "}\n\n"
    )

    out.write(_SKY if options.sky else _FLAT_BACKGROUND)

    out.write(
        "// perspective (default) camera\n"
        "camera {\n"
        f"  location  {_vec((cx, cy, cz - CAMERA_DISTANCE))}\n"
        f"  look_at   {_vec(centre)}\n"
        "  right     x*image_width/image_height\n"
        "}\n\n"
    )

    if options.mirror_sphere:
        out.write(
            "// a mirror sphere\n"
            "sphere\n"
            f"{{ {_vec(centre + _MIRROR_OFFSET)},{_num(_MIRROR_RADIUS)}\n"
            "  pigment { rgb <0,0,0> } // A perfect mirror with no color\n"
            "  finish { reflection 1 } // It reflects all\n"
            "}\n\n"
        )

    if options.checkerboard:
        out.write(
            "// simple Black on White checkerboard... it's a classic\n"
            "plane {\n"
            f" -y, {_num(-(cy - _FLOOR_OFFSET))}\n"
            " pigment {\n"
            "  checker color Black color White\n"
            "  scale 2\n"
            " }\n"
            "}\n\n"
        )

    out.write("//Include header for povray\n")
    out.write(f'#include "{INCLUDE_FILE}"\n\n')

    if not has_bonds:
        out.write("#if (BAS | CST)\n")
        out.write('#warning "Molecule without bonds!"\n')
        out.write('#warning "You should do a spacefill-model"\n')
        out.write("#end\n\n")

    out.write(f"//Use PovRay{POVRAY_VERSION}\n")
    out.write(f"#version {POVRAY_VERSION};\n\n")

    out.write("//Print name of molecule while rendering\n")
    out.write(f'#render "\\b\\b {_escape(title)}\\n\\n"\n\n')
