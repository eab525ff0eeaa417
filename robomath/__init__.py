"""Planar geometry, integrators, interpolation and unscented Kalman filtering for mobile robots."""

__version__ = "0.1.0"

__all__ = [
    "rotation2d",
    "translation2d",
    "transform2d",
    "pose2d",
    "rect",
    "rush",
    "numerical_integration",
    "interpolating_map",
    "unscented",
    "srukf",
]