from __future__ import annotations

from dataclasses import dataclass
from math import ceil, floor
from typing import List, Sequence

from camcov.models import CameraRange, DiscreteRect


@dataclass(frozen=True)
class LatticeBounds:
    """Integer bounds of the requirement after inward rounding."""

    d_min: int
    d_max: int
    l_min: int
    l_max: int

    @property
    def is_empty(self) -> bool:
        return self.d_min > self.d_max or self.l_min > self.l_max


def lattice_bounds(software_camera: CameraRange) -> LatticeBounds:
    """Raises ValueError when a requirement bound is infinite or NaN."""
    for axis, iv in (("distance", software_camera.distance), ("light", software_camera.light)):
        if not iv.is_finite:
            raise ValueError(f"Required {axis} bounds must be finite: [{iv.min}, {iv.max}]")
    return LatticeBounds(
        d_min=ceil(software_camera.distance.min),
        d_max=floor(software_camera.distance.max),
        l_min=ceil(software_camera.light.min),
        l_max=floor(software_camera.light.max),
    )


def clip_camera(cam: CameraRange, bounds: LatticeBounds) -> DiscreteRect:
    return DiscreteRect(
        d_min=ceil(max(cam.distance.min, bounds.d_min)),
        d_max=floor(min(cam.distance.max, bounds.d_max)),
        l_min=ceil(max(cam.light.min, bounds.l_min)),
        l_max=floor(min(cam.light.max, bounds.l_max)),
    )


def effective_rects(cameras: Sequence[CameraRange], bounds: LatticeBounds) -> List[DiscreteRect]:
    """Clip every camera to the lattice and drop the ones left empty."""
    rects = (clip_camera(cam, bounds) for cam in cameras)
    return [r for r in rects if not r.is_degenerate]
