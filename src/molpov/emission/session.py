from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO


@dataclass
class SceneSession:
    """Output stream shared by a sequence of molecule conversions.

    The session owns the sink and the molecule counter.  Each
    successful :func:`~molpov.emission.emit_scene` call appends one
    molecule to :attr:`sink` under the identifier :attr:`prefix` and
    then advances :attr:`sequence`, so identifiers never collide
    within one stream.  Only the first molecule (``sequence == 0``)
    receives the scene header.

    A session is not thread-safe; conversions into it must be serial.

    Attributes:
        sink: Append-only text stream receiving the scene.  The caller
            opens and closes it.
        sequence: Number of molecules already written.
        timestamp: Text for the header's ``//Date:`` line.  ``None``
            uses the local time when the header is written.
    """

    sink: TextIO
    sequence: int = 0
    timestamp: str | None = None

    def __post_init__(self) -> None:
        if self.sequence < 0:
            raise ValueError(
                f"sequence must be non-negative, got {self.sequence}"
            )

    @property
    def prefix(self) -> str:
        """Identifier prefix for the next molecule, e.g. ``"mol_0"``."""
        return f"mol_{self.sequence}"

    @property
    def needs_header(self) -> bool:
        return self.sequence == 0
