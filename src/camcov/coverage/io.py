import json
from pathlib import Path
from typing import List

import pandas as pd

from camcov.models import CameraRange, Interval


CAMERA_COLUMNS = {"distance_min", "distance_max", "light_min", "light_max"}


def load_software_camera(path: str) -> CameraRange:
    """
    Software camera JSON schema:

    {
      "distance": {"min": 10, "max": 20},
      "light": {"min": 5, "max": 15}
    }
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Software camera JSON not found: {p}")
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Software camera JSON must be an object, got {type(data).__name__}")
    for key in ("distance", "light"):
        if key not in data:
            raise KeyError(f"Missing required field '{key}'")
    software_camera = CameraRange(
        distance=Interval.from_dict(data["distance"], "distance"),
        light=Interval.from_dict(data["light"], "light"),
    )
    for key, iv in (("distance", software_camera.distance), ("light", software_camera.light)):
        if not iv.is_finite:
            raise ValueError(f"Required '{key}' bounds must be finite: [{iv.min}, {iv.max}]")
    return software_camera


def load_cameras_csv(path: str) -> List[CameraRange]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Cameras CSV not found: {p}")
    df = pd.read_csv(p)
    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = sorted(CAMERA_COLUMNS - set(df.columns))
    if missing:
        raise ValueError(f"Missing columns: {missing}")
    blank = sorted(c for c in CAMERA_COLUMNS if df[c].isna().any())
    if blank:
        raise ValueError(f"Empty values in columns: {blank}")
    if "camera_id" not in df.columns:
        df["camera_id"] = [f"cam_{i+1}" for i in range(len(df))]
    df["camera_id"] = df["camera_id"].fillna("").astype(str)

    # min > max is left for validate_ranges to reject
    return [
        CameraRange.from_dict(r)
        for r in df[["camera_id", *sorted(CAMERA_COLUMNS)]].to_dict(orient="records")
    ]
