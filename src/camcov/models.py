from __future__ import annotations

from dataclasses import dataclass
from math import isfinite, isnan
from typing import Any, Dict, Mapping, Optional, Tuple


Point = Tuple[float, float]


def _norm(data: Mapping[str, Any], field: str = "record") -> Dict[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected an object for '{field}', got {data!r}")
    return {str(k).strip().lower(): v for k, v in data.items()}


def _as_float(norm: Dict[str, Any], key: str) -> float:
    if key not in norm or norm[key] is None:
        raise KeyError(f"Missing required field '{key}'")
    try:
        return float(str(norm[key]).strip())
    except Exception as e:
        raise ValueError(f"Invalid float for '{key}': {norm[key]!r}") from e


@dataclass(frozen=True)
class Interval:
    """Closed range [min, max] on one axis (distance or light)."""

    min: float
    max: float

    def contains(self, v: float) -> bool:
        return self.min <= v <= self.max

    @property
    def is_valid(self) -> bool:
        return self.min <= self.max

    @property
    def has_nan(self) -> bool:
        return isnan(self.min) or isnan(self.max)

    @property
    def is_finite(self) -> bool:
        return isfinite(self.min) and isfinite(self.max)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], field: str = "interval") -> "Interval":
        norm = _norm(data, field)
        return cls(min=_as_float(norm, "min"), max=_as_float(norm, "max"))


@dataclass(frozen=True)
class CameraRange:
    """A distance x light rectangle.

    Used both for the software camera (the required region) and for each
    hardware camera. ``camera_id`` is a label for reports and plays no part
    in the coverage decision.
    """

    distance: Interval
    light: Interval
    camera_id: Optional[str] = None

    def contains(self, p: Point) -> bool:
        d, lv = p
        return self.distance.contains(d) and self.light.contains(lv)

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        return (
            (self.distance.min, self.light.min),
            (self.distance.min, self.light.max),
            (self.distance.max, self.light.min),
            (self.distance.max, self.light.max),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CameraRange":
        """Build from either nested or flat keys.

        Accepted shapes:
            {"distance": {"min": .., "max": ..}, "light": {"min": .., "max": ..}}
            {"distance_min": .., "distance_max": .., "light_min": .., "light_max": ..}
        """
        norm = _norm(data)
        camera_id = norm.get("camera_id")
        camera_id = None if camera_id is None else str(camera_id).strip() or None

        if "distance" in norm or "light" in norm:
            for key in ("distance", "light"):
                if key not in norm:
                    raise KeyError(f"Missing required field '{key}'")
            return cls(
                distance=Interval.from_dict(norm["distance"], "distance"),
                light=Interval.from_dict(norm["light"], "light"),
                camera_id=camera_id,
            )

        return cls(
            distance=Interval(_as_float(norm, "distance_min"), _as_float(norm, "distance_max")),
            light=Interval(_as_float(norm, "light_min"), _as_float(norm, "light_max")),
            camera_id=camera_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "camera_id": self.camera_id,
            "distance": {"min": self.distance.min, "max": self.distance.max},
            "light": {"min": self.light.min, "max": self.light.max},
        }


# The software camera and the hardware cameras share one shape.
SoftwareCamera = CameraRange
Camera = CameraRange


@dataclass(frozen=True)
class DiscreteRect:
    """A camera clipped to the integer lattice of the requirement."""

    d_min: int
    d_max: int
    l_min: int
    l_max: int

    @property
    def is_degenerate(self) -> bool:
        return self.d_min > self.d_max or self.l_min > self.l_max


@dataclass(frozen=True)
class Stripe:
    """Closed integer distance range [start, end]."""

    start: int
    end: int

    def to_dict(self) -> Dict[str, int]:
        return {"start": self.start, "end": self.end}
