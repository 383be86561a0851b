"""Tests for molpov.preview — matplotlib preview of the camera view."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from molpov import Molecule, RenderOptions, preview_mpl


def _circles(fig):
    return [p for p in fig.axes[0].patches if isinstance(p, Circle)]


class TestPreviewMpl:
    def test_returns_figure(self, water):
        fig = preview_mpl(water, show=False)
        assert isinstance(fig, Figure)

    def test_saves_to_file(self, water, tmp_path):
        out = tmp_path / "water.png"
        preview_mpl(water, output=out)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_one_circle_per_atom(self, ethene):
        fig = preview_mpl(ethene, show=False)
        assert len(_circles(fig)) == ethene.num_atoms

    def test_bonds_drawn_for_ball_and_stick(self, ethene):
        fig = preview_mpl(ethene, show=False)
        assert len(fig.axes[0].lines) == ethene.num_bonds

    def test_spacefill_hides_bonds(self, ethene):
        fig = preview_mpl(ethene, RenderOptions(model_style="SPF"), show=False)
        assert len(fig.axes[0].lines) == 0

    def test_spacefill_atoms_larger(self, water):
        bas = preview_mpl(water, show=False)
        spf = preview_mpl(water, RenderOptions(model_style="SPF"), show=False)
        assert _circles(spf)[0].radius > _circles(bas)[0].radius

    def test_capped_sticks_uniform_caps(self, water):
        fig = preview_mpl(water, RenderOptions(model_style="CST"), show=False)
        radii = {c.radius for c in _circles(fig)}
        assert len(radii) == 1

    def test_nearer_atoms_painted_on_top(self):
        mol = Molecule.from_arrays(
            ["C", "O"], [[0.0, 0.0, 5.0], [0.0, 0.0, -5.0]],
        )
        fig = preview_mpl(mol, show=False)
        far, near = _circles(fig)
        assert near.get_zorder() > far.get_zorder()

    def test_title(self, water):
        fig = preview_mpl(water, show=False)
        assert fig.axes[0].get_title() == "water"

    def test_into_existing_axes(self, water):
        fig, ax = plt.subplots()
        try:
            result = preview_mpl(water, ax=ax)
            assert result is fig
            assert len(ax.patches) == 3
        finally:
            plt.close(fig)

    def test_empty_molecule(self):
        fig = preview_mpl(Molecule(), show=False)
        assert _circles(fig) == []


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
