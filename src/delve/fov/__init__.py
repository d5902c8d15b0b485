from .fov import (
    FieldOfView,
    FovAlgorithm,
    VisibilitySet,
    bresenham_line,
    compute_visibility,
    mark_explored,
)

__all__ = [
    "FieldOfView",
    "FovAlgorithm",
    "VisibilitySet",
    "bresenham_line",
    "compute_visibility",
    "mark_explored",
]
