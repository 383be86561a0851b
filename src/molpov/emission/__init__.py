"""POV-Ray scene emission: header, atoms, bonds and molecule composition."""

from molpov.emission.scene import emit_scene, write_scene
from molpov.emission.session import SceneSession

__all__ = [
    "SceneSession",
    "emit_scene",
    "write_scene",
]
