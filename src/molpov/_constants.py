"""Shared numeric constants for geometry and emission."""

EPSILON: float = 1e-4
"""Magnitudes below this are treated as zero when deciding on transforms."""

MAX_RADIUS: float = 3.0
"""Largest atom radius assumed when padding the bounding box."""

CAMERA_DISTANCE: float = 10.0
"""Distance of the camera from the centroid along -z."""
