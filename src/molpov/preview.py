"""Quick matplotlib preview of a molecule as framed by the scene camera."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from molpov.model import Molecule, ModelStyle, RenderOptions

# Approximate CPK colours for common elements.
ELEMENT_COLOURS: dict[str, tuple[float, float, float]] = {
    "H":  (1.000, 1.000, 1.000),
    "C":  (0.350, 0.350, 0.350),
    "N":  (0.200, 0.200, 1.000),
    "O":  (1.000, 0.050, 0.050),
    "F":  (0.560, 0.880, 0.310),
    "P":  (1.000, 0.500, 0.000),
    "S":  (1.000, 0.780, 0.160),
    "Cl": (0.120, 0.940, 0.120),
    "Br": (0.650, 0.160, 0.160),
    "I":  (0.580, 0.000, 0.580),
    "Fe": (0.880, 0.400, 0.200),
}
"""Preview colours keyed by element symbol; others are drawn grey."""

_FALLBACK_COLOUR = (0.6, 0.6, 0.6)

# Display radii in angstroms for the ball-and-stick style.
_BALL_RADII: dict[str, float] = {"H": 0.25}
_DEFAULT_BALL_RADIUS = 0.4
_SPACEFILL_SCALE = 3.0
_STICK_RADIUS = 0.15
_BOND_WIDTH = 3.0


def _atom_radius(symbol: str, style: ModelStyle) -> float:
    if style is ModelStyle.CST:
        return _STICK_RADIUS
    radius = _BALL_RADII.get(symbol, _DEFAULT_BALL_RADIUS)
    if style is ModelStyle.SPF:
        return radius * _SPACEFILL_SCALE
    return radius


def _draw_molecule(ax: Axes, molecule: Molecule, style: ModelStyle) -> None:
    """Paint *molecule* onto *ax*, viewed along +z.

    The scene camera looks along +z, so screen x and y are the
    molecule's own x and y and larger z is further away.  Atoms are
    painted back-to-front via ``zorder``; each bond sits just behind
    the nearer of its two atoms.
    """
    coords = molecule.coords
    radii = np.array([
        _atom_radius(atom.symbol, style) for atom in molecule.atoms
    ])

    if style is not ModelStyle.SPF:
        for bond in molecule.bonds:
            p_a = coords[bond.begin - 1]
            p_b = coords[bond.end - 1]
            depth = min(p_a[2], p_b[2])
            ax.plot(
                [p_a[0], p_b[0]], [p_a[1], p_b[1]],
                color="0.4", linewidth=_BOND_WIDTH * bond.order ** 0.5,
                solid_capstyle="round", zorder=-depth - 1e-3,
            )

    for atom, radius in zip(molecule.atoms, radii):
        ax.add_patch(Circle(
            (atom.x, atom.y), radius,
            facecolor=ELEMENT_COLOURS.get(atom.symbol, _FALLBACK_COLOUR),
            edgecolor="black", linewidth=0.5, zorder=-atom.z,
        ))

    if len(coords):
        pad = float(radii.max())
        ax.set_xlim(coords[:, 0].min() - pad, coords[:, 0].max() + pad)
        ax.set_ylim(coords[:, 1].min() - pad, coords[:, 1].max() + pad)
    ax.set_aspect("equal")
    ax.set_axis_off()


def preview_mpl(
    molecule: Molecule,
    options: RenderOptions | None = None,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 150,
    show: bool | None = None,
) -> Figure:
    """Draw a flat preview of *molecule* in the chosen model style.

    This is a sanity check on geometry and framing before running the
    ray tracer, not a substitute for it.

    Example usage::

        preview_mpl(molecule, RenderOptions(model_style="SPF"), "check.png")

    Args:
        molecule: The molecule to draw.
        options: Only :attr:`RenderOptions.model_style` is used.
        output: Optional file path to save the figure.  Ignored when
            *ax* is provided.
        ax: Optional axes to draw into.  The caller then owns the
            figure; *output*, *figsize*, *dpi* and *show* are ignored.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution for raster output formats.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure`.
    """
    style = (options or RenderOptions()).model_style

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_molecule(ax, molecule, style)
        return fig

    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    _draw_molecule(ax, molecule, style)
    if molecule.title:
        ax.set_title(molecule.title)
    fig.tight_layout()

    if output is not None:
        fig.savefig(str(output), dpi=dpi, bbox_inches="tight")

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
