from typing import Sequence

from camcov.models import CameraRange


class InvalidRangeError(ValueError):
    """A hardware camera has min > max (or a NaN bound) on the distance or light axis."""


def _label(idx: int, cam: CameraRange) -> str:
    # 1-based, matching the cam_<n> ids the CSV loader assigns
    return f"camera #{idx + 1}" + (f" ({cam.camera_id})" if cam.camera_id else "")


def validate_ranges(cameras: Sequence[CameraRange]) -> None:
    """Raise InvalidRangeError for the first camera with an inverted or NaN axis."""
    for idx, cam in enumerate(cameras):
        for axis, iv in (("distance", cam.distance), ("light", cam.light)):
            if iv.has_nan:
                raise InvalidRangeError(
                    f"Invalid camera range: NaN bound on {axis} for {_label(idx, cam)}: "
                    f"[{iv.min}, {iv.max}]"
                )
            if not iv.is_valid:
                raise InvalidRangeError(
                    f"Invalid camera range: min > max on {axis} for {_label(idx, cam)}: "
                    f"[{iv.min}, {iv.max}]"
                )
