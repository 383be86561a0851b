from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import StrEnum

logger = logging.getLogger(__name__)


class ModelStyle(StrEnum):
    """Molecular drawing style selected in the emitted scene.

    The value is written verbatim as a ``#declare <STYLE> = true;``
    flag; the renderer, not the emitter, branches on it.

    Attributes:
        BAS: Ball-and-stick.
        SPF: Space-fill.
        CST: Capped sticks.
    """

    BAS = "BAS"
    SPF = "SPF"
    CST = "CST"

    @classmethod
    def parse(cls, value: str | ModelStyle | None) -> ModelStyle:
        """Resolve a style name case-insensitively.

        ``None`` gives the default (:attr:`BAS`).  An unrecognised
        name is logged as a warning and also falls back to
        :attr:`BAS`.
        """
        if value is None:
            return cls.BAS
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            logger.warning(
                "Unknown model type %r specified. Using the default "
                "instead (\"BAS\", ball-and-stick).",
                value,
            )
            return cls.BAS


# Single-letter write options understood by from_flags().
_FLAG_FIELDS = {
    "t": "transparent",
    "s": "sky",
    "c": "checkerboard",
    "f": "mirror_sphere",
}


@dataclass(frozen=True)
class RenderOptions:
    """Scene-level switches for one conversion.

    Attributes:
        model_style: Drawing style.  Strings are accepted and parsed
            with :meth:`ModelStyle.parse`, so ``"spf"`` and ``"SPF"``
            are equivalent and unknown names fall back to ball-and-stick.
        transparent: Use transparent textures.  Atoms are merged
            rather than unioned and bonds are cut back to the atom
            surfaces.
        sky: Draw a procedural sky with clouds instead of a flat
            background.
        checkerboard: Add a black and white checkerboard floor.
        mirror_sphere: Add a large mirror sphere beside the molecule.
    """

    model_style: ModelStyle = ModelStyle.BAS
    transparent: bool = False
    sky: bool = False
    checkerboard: bool = False
    mirror_sphere: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "model_style", ModelStyle.parse(self.model_style),
        )

    @classmethod
    def from_flags(cls, flags: Mapping[str, str | None]) -> RenderOptions:
        """Build options from already-tokenised single-letter flags.

        Recognised keys are ``m`` (model type, its value is the style
        name), ``t`` (transparent), ``s`` (sky), ``c`` (checkerboard)
        and ``f`` (mirror sphere).  A boolean flag is on when its key
        is present, whatever its value.  Other keys are ignored.
        """
        kwargs: dict = {
            name: letter in flags for letter, name in _FLAG_FIELDS.items()
        }
        if "m" in flags:
            kwargs["model_style"] = ModelStyle.parse(flags["m"])
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        defaults = {f.name: f.default for f in fields(self)}
        d: dict = {}
        for key, default in defaults.items():
            value = getattr(self, key)
            if value != default:
                d[key] = str(value) if key == "model_style" else value
        return d

    @classmethod
    def from_dict(cls, d: Mapping) -> RenderOptions:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains keys that are not option names.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"unknown render options: {sorted(unknown)}")
        return cls(**dict(d))
