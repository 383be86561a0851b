"""Tests for render option save/load."""

import json
import logging

import pytest

from molpov import ModelStyle, RenderOptions, load_options, save_options


class TestSaveOptions:
    def test_writes_only_non_defaults(self, tmp_path):
        path = tmp_path / "opts.json"
        save_options(path, RenderOptions(model_style="CST", mirror_sphere=True))
        data = json.loads(path.read_text())
        assert data == {
            "render_options": {"model_style": "CST", "mirror_sphere": True},
        }

    def test_defaults_write_empty_section(self, tmp_path):
        path = tmp_path / "opts.json"
        save_options(path, RenderOptions())
        assert json.loads(path.read_text()) == {"render_options": {}}

    def test_indented(self, tmp_path):
        path = tmp_path / "opts.json"
        save_options(path, RenderOptions(sky=True))
        assert '\n  "render_options"' in path.read_text()


class TestLoadOptions:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "opts.json"
        opts = RenderOptions(model_style="SPF", transparent=True, sky=True)
        save_options(path, opts)
        assert load_options(path) == opts

    def test_missing_section_gives_defaults(self, tmp_path):
        path = tmp_path / "opts.json"
        path.write_text("{}")
        assert load_options(path) == RenderOptions()

    def test_lowercase_style(self, tmp_path):
        path = tmp_path / "opts.json"
        path.write_text('{"render_options": {"model_style": "cst"}}')
        assert load_options(path).model_style is ModelStyle.CST

    def test_unknown_style_falls_back(self, tmp_path, caplog):
        path = tmp_path / "opts.json"
        path.write_text('{"render_options": {"model_style": "wireframe"}}')
        with caplog.at_level(logging.WARNING, logger="molpov"):
            opts = load_options(path)
        assert opts.model_style is ModelStyle.BAS
        assert len(caplog.records) == 1

    def test_unknown_top_level_key_raises(self, tmp_path):
        path = tmp_path / "opts.json"
        path.write_text('{"atom_styles": {}}')
        with pytest.raises(ValueError, match="unknown top-level keys"):
            load_options(path)

    def test_unknown_option_raises(self, tmp_path):
        path = tmp_path / "opts.json"
        path.write_text('{"render_options": {"fog": true}}')
        with pytest.raises(ValueError, match="unknown render options"):
            load_options(path)
