from .validate import InvalidRangeError, validate_ranges
from .analyzer import CoverageAnalyzer, CoverageResult, will_cameras_suffice
from .grid import (
    MAX_LATTICE_POINTS,
    LatticeSummary,
    blind_spots,
    lattice_coverage,
    lattice_point_count,
    lattice_summary,
)
from .io import load_cameras_csv, load_software_camera
