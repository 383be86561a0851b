"""Top-level molecule-to-scene conversion."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from typing import TextIO

import numpy as np

from molpov.emission.atoms import _write_atoms
from molpov.emission.bonds import _write_bonds
from molpov.emission.composition import (
    _write_centre,
    _write_molecule_with_bonds,
    _write_molecule_without_bonds,
    _write_unions,
)
from molpov.emission.header import _write_header
from molpov.emission.session import SceneSession
from molpov.geometry import bounding_box, centroid
from molpov.model import Atom, Bond, MoleculeLike, RenderOptions

logger = logging.getLogger(__name__)

# Errors raised while reading a molecule-shaped object that turns out
# not to be one (missing members, bad indices, malformed positions).
_INPUT_ERRORS = (AttributeError, IndexError, KeyError, TypeError, ValueError)


def _collect(molecule: MoleculeLike) -> tuple[list[Atom], list[Bond], str]:
    atoms = [molecule.atom(i) for i in range(1, molecule.num_atoms + 1)]
    bonds = [molecule.bond(i) for i in range(molecule.num_bonds)]
    return atoms, bonds, str(molecule.title)


def _render(
    atoms: list[Atom],
    bonds: list[Bond],
    title: str,
    options: RenderOptions,
    session: SceneSession,
) -> str:
    """Build the full text for one molecule without touching the sink."""
    prefix = session.prefix
    coords = np.array([a.position for a in atoms], dtype=float).reshape(-1, 3)
    out = io.StringIO()

    if session.needs_header:
        _write_header(
            out, options, centroid(coords), title,
            has_bonds=bool(bonds), timestamp=session.timestamp,
        )

    _write_atoms(out, atoms, prefix)
    _write_bonds(out, atoms, bonds, prefix)
    _write_unions(out, prefix, len(atoms), len(bonds))

    box = bounding_box(coords)
    if bonds:
        _write_molecule_with_bonds(out, prefix, box)
    else:
        _write_molecule_without_bonds(out, prefix)

    _write_centre(out, prefix, box)
    out.write(f"{prefix}\n")
    return out.getvalue()


def emit_scene(
    molecule: MoleculeLike,
    options: RenderOptions | None,
    session: SceneSession,
) -> bool:
    """Append the scene description of *molecule* to *session*.

    The first molecule written to a session also receives the scene
    header (global style flags, light, background, camera, optional
    mirror sphere and checkerboard, include directives).  Every
    molecule then gets its atom and bond declarations, the atom and
    bond unions, the molecule object, a recentring vector and a
    reference that instantiates it.  All identifiers carry the prefix
    ``mol_<n>`` where ``n`` is :attr:`SceneSession.sequence`.

    Example usage::

        with open("water.pov", "w") as fh:
            session = SceneSession(fh)
            emit_scene(water, RenderOptions(model_style="CST"), session)

    Args:
        molecule: A :class:`~molpov.model.Molecule` or any object
            satisfying :class:`~molpov.model.MoleculeLike`.
        options: Scene switches.  ``None`` uses the defaults.
        session: Output sink and molecule counter.

    Returns:
        ``True`` if the molecule was written.  ``False`` if *molecule*
        is not molecule-shaped or the sink refuses the write; the
        session counter is left unchanged in either case.
    """
    if options is None:
        options = RenderOptions()

    if not isinstance(molecule, MoleculeLike):
        logger.error(
            "Cannot convert %s: not a molecule", type(molecule).__name__,
        )
        return False

    try:
        atoms, bonds, title = _collect(molecule)
        text = _render(atoms, bonds, title, options, session)
    except _INPUT_ERRORS as exc:
        logger.error("Cannot convert molecule: %s", exc)
        return False

    try:
        session.sink.write(text)
    except (OSError, ValueError) as exc:
        logger.error("Cannot write %s: %s", session.prefix, exc)
        return False

    logger.debug(
        "Wrote %s: %d atom(s), %d bond(s), style %s",
        session.prefix, len(atoms), len(bonds), options.model_style,
    )
    session.sequence += 1
    return True


def write_scene(
    molecules: Iterable[MoleculeLike],
    options: RenderOptions | None = None,
    sink: TextIO | None = None,
    *,
    timestamp: str | None = None,
) -> str | None:
    """Convert several molecules into one scene with a fresh session.

    Args:
        molecules: Molecules to write, in order.
        options: Scene switches shared by all molecules.
        sink: Stream to append to.  If ``None`` the scene is collected
            in memory and returned.
        timestamp: Override for the header's ``//Date:`` line.

    Returns:
        The scene text when *sink* is ``None``, otherwise ``None``.

    Raises:
        ValueError: If any of *molecules* cannot be converted.
    """
    target = io.StringIO() if sink is None else sink
    session = SceneSession(target, timestamp=timestamp)
    for i, molecule in enumerate(molecules):
        if not emit_scene(molecule, options, session):
            raise ValueError(f"molecule {i} could not be converted")
    if sink is None:
        return target.getvalue()
    return None
