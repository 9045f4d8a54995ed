from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from camcov.models import CameraRange, Point, Stripe
from .corners import uncovered_corners
from .discretize import effective_rects, lattice_bounds
from .stripes import active_rects, build_stripes, check_stripe, collect_boundaries
from .validate import validate_ranges


REASON_OK = "ok"
REASON_CORNER = "corner_uncovered"
REASON_NO_CAMERAS = "no_effective_cameras"
REASON_STRIPE = "stripe_uncovered"
REASON_LIGHT_GAP = "light_gap"


@dataclass(frozen=True)
class CoverageResult:
    sufficient: bool
    reason: str
    uncovered_corners: List[Point] = field(default_factory=list)
    failed_stripe: Optional[Stripe] = None
    effective_cameras: int = 0
    stripes_checked: int = 0
    notes: List[str] = field(default_factory=list)


class CoverageAnalyzer:
    """Decides whether hardware cameras cover a software camera's region.

    The decision is a chain of gates evaluated in order, stopping at the
    first one that fails:

      1. every camera has min <= max on both axes (else InvalidRangeError)
      2. the four real-valued corners of the requirement are covered
      3. at least one camera survives clipping to the integer lattice
      4. every distance stripe has active cameras whose merged light
         intervals span the required light range

    Gaps narrower than one unit that fall strictly inside a lattice cell
    are not detected.
    """

    def __init__(self, software_camera: CameraRange, cameras: Sequence[CameraRange]):
        self.software_camera = software_camera
        self.cameras = list(cameras)

    def analyze(self) -> CoverageResult:
        validate_ranges(self.cameras)

        missing = uncovered_corners(self.software_camera, self.cameras)
        if missing:
            return CoverageResult(
                False,
                REASON_CORNER,
                uncovered_corners=missing,
                notes=[f"{len(missing)} corner(s) of the required region not covered"],
            )

        bounds = lattice_bounds(self.software_camera)
        rects = effective_rects(self.cameras, bounds)
        if not rects:
            return CoverageResult(
                False,
                REASON_NO_CAMERAS,
                notes=["no camera overlaps the discretized required region"],
            )

        stripes = build_stripes(collect_boundaries(bounds.d_min, bounds.d_max, rects))
        for n, stripe in enumerate(stripes, start=1):
            if check_stripe(stripe, bounds.l_min, bounds.l_max, rects):
                continue
            if not active_rects(stripe, rects):
                reason = REASON_STRIPE
                note = f"no camera spans distance [{stripe.start}, {stripe.end}]"
            else:
                reason = REASON_LIGHT_GAP
                note = (
                    f"light [{bounds.l_min}, {bounds.l_max}] not continuously covered "
                    f"over distance [{stripe.start}, {stripe.end}]"
                )
            return CoverageResult(
                False,
                reason,
                failed_stripe=stripe,
                effective_cameras=len(rects),
                stripes_checked=n,
                notes=[note],
            )

        return CoverageResult(
            True,
            REASON_OK,
            effective_cameras=len(rects),
            stripes_checked=len(stripes),
        )


def will_cameras_suffice(software_camera: CameraRange, hardware_cameras: Sequence[CameraRange]) -> bool:
    """True iff the hardware cameras cover the software camera's region.

    Raises InvalidRangeError when any hardware camera has min > max.
    """
    return CoverageAnalyzer(software_camera, hardware_cameras).analyze().sufficient
