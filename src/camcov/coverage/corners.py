from typing import List, Sequence

from camcov.models import CameraRange, Point


def uncovered_corners(software_camera: CameraRange, cameras: Sequence[CameraRange]) -> List[Point]:
    """Corners of the required region not contained in any camera.

    Works on the real-valued coordinates; the lattice used later can round
    away a corner that sits between grid lines.
    """
    return [
        p for p in software_camera.corners()
        if not any(cam.contains(p) for cam in cameras)
    ]

