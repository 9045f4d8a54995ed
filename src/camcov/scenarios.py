from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from camcov.models import CameraRange, Interval


@dataclass(frozen=True)
class Scenario:
    label: str
    expected: bool
    reason: str
    cameras: List[CameraRange]


def cam(d_min: float, d_max: float, l_min: float, l_max: float, camera_id: Optional[str] = None) -> CameraRange:
    return CameraRange(Interval(d_min, d_max), Interval(l_min, l_max), camera_id)


REFERENCE_SOFTWARE_CAMERA = cam(10, 20, 5, 15)


def reference_scenarios() -> List[Scenario]:
    """Hand-built cases against the distance [10,20] x light [5,15] requirement."""
    return [
        Scenario(
            "TC1: One camera covers all", True,
            "Single camera covers entire distance and light range.",
            [cam(10, 20, 5, 15)],
        ),
        Scenario(
            "TC2: Two halves covering cleanly", True,
            "Two adjacent cameras together cover every lattice distance.",
            [cam(10, 15, 5, 15), cam(16, 20, 5, 15)],
        ),
        Scenario(
            "TC3: Missing light 11", False,
            "There's a gap in light coverage at level 11.",
            [cam(10, 20, 5, 10), cam(10, 20, 12, 15)],
        ),
        Scenario(
            "TC4: Missing distance 16", False,
            "Gap in distance coverage at 16.",
            [cam(10, 15, 5, 15), cam(17, 20, 5, 15)],
        ),
        Scenario(
            "TC5: Looks okay, but missing (15,6)", False,
            "Point (15,6) is not covered by any camera.",
            [
                cam(10, 12, 5, 10),
                cam(13, 15, 11, 15),
                cam(16, 18, 5, 15),
                cam(19, 20, 5, 15),
                cam(12, 14, 5, 10),
                cam(10, 20, 11, 15),
            ],
        ),
        Scenario(
            "TC6: Overlapping cameras", True,
            "Cameras overlap and fully cover the range.",
            [cam(10, 18, 5, 15), cam(15, 20, 5, 15)],
        ),
        Scenario(
            "TC7: Minimal floating-point gap", False,
            "Gap between 15.999 and 16.001 leaves distance 16 uncovered.",
            [cam(10, 15.999, 5, 15), cam(16.001, 20, 5, 15)],
        ),
        Scenario(
            "TC8: Cameras meeting at exact boundary", True,
            "Second camera starts where the first ends (both inclusive).",
            [cam(10, 15, 5, 15), cam(15, 20, 5, 15)],
        ),
        Scenario(
            "TC9: Stress test with 10,000 cameras", True,
            "Large number of tiny cameras covering the whole range.",
            [cam(10 + i * 0.001, 10 + (i + 1) * 0.001, 5, 15) for i in range(10000)],
        ),
        Scenario(
            "TC10: No hardware cameras", False,
            "Empty camera list should never pass.",
            [],
        ),
        Scenario(
            "TC11: Floating-point adjacent", False,
            "Floating-point adjacent cameras are not snapped together.",
            [cam(10, 15.999, 5, 15), cam(16.001, 20, 5, 15)],
        ),
    ]
