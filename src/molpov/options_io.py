"""Render option save/load for JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from molpov.model import RenderOptions


def save_options(path: str | Path, options: RenderOptions) -> None:
    """Save render options to a JSON file.

    Only options that differ from their defaults are written.  The
    file is human-readable with two-space indentation.

    Args:
        path: Destination file path.
        options: The options to save.
    """
    data = {"render_options": options.to_dict()}
    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_options(path: str | Path) -> RenderOptions:
    """Load render options from a JSON file.

    A missing ``"render_options"`` section gives the defaults.
    Unknown top-level keys or option names raise :class:`ValueError`;
    an unknown model style falls back to ball-and-stick with a
    logged warning.

    Args:
        path: Source file path.

    Returns:
        The parsed :class:`RenderOptions`.

    Raises:
        ValueError: If the file contains unknown keys.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - {"render_options"}
    if unknown:
        raise ValueError(
            f"unknown top-level keys in options file: {sorted(unknown)}"
        )

    return RenderOptions.from_dict(data.get("render_options", {}))
