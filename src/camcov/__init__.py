from .models import Camera, CameraRange, DiscreteRect, Interval, SoftwareCamera, Stripe
from .coverage import CoverageAnalyzer, CoverageResult, InvalidRangeError, will_cameras_suffice

__all__ = [
    "Camera",
    "CameraRange",
    "DiscreteRect",
    "Interval",
    "SoftwareCamera",
    "Stripe",
    "CoverageAnalyzer",
    "CoverageResult",
    "InvalidRangeError",
    "will_cameras_suffice",
]
