from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from camcov.models import CameraRange
from .discretize import lattice_bounds


# dense grids beyond this are skipped by the CLI
MAX_LATTICE_POINTS = 4_000_000


@dataclass(frozen=True)
class LatticeSummary:
    points: int
    covered: int
    uncovered: int
    coverage_pct: float
    single_covered: int


def lattice_point_count(software_camera: CameraRange) -> int:
    b = lattice_bounds(software_camera)
    if b.is_empty:
        return 0
    return (b.d_max - b.d_min + 1) * (b.l_max - b.l_min + 1)


def lattice_coverage(software_camera: CameraRange, cameras: Sequence[CameraRange]) -> np.ndarray:
    """Per lattice point camera count, shape (n_light, n_distance).

    Row i is light ``l_min + i``, column j is distance ``d_min + j``.
    Containment uses the cameras' real coordinates.
    """
    b = lattice_bounds(software_camera)
    ds = np.arange(b.d_min, b.d_max + 1, dtype=float)
    ls = np.arange(b.l_min, b.l_max + 1, dtype=float)
    cov = np.zeros((len(ls), len(ds)), dtype=np.int64)
    if cov.size == 0:
        return cov

    for cam in cameras:
        in_d = (ds >= cam.distance.min) & (ds <= cam.distance.max)
        in_l = (ls >= cam.light.min) & (ls <= cam.light.max)
        cov += np.outer(in_l, in_d).astype(np.int64)
    return cov


def blind_spots(software_camera: CameraRange, cov: np.ndarray) -> List[Tuple[int, int]]:
    """(distance, light) lattice points no camera contains."""
    b = lattice_bounds(software_camera)
    ly, dx = np.nonzero(cov <= 0)
    return [(b.d_min + int(x), b.l_min + int(y)) for y, x in zip(ly, dx)]


def lattice_summary(cov: np.ndarray) -> LatticeSummary:
    points = int(cov.size)
    covered = int((cov > 0).sum())
    single = int((cov == 1).sum())
    return LatticeSummary(
        points,
        covered,
        points - covered,
        0.0 if points == 0 else 100 * covered / points,
        single,
    )
