import pytest

from camcov.coverage.grid import blind_spots, lattice_coverage, lattice_summary
from camcov.scenarios import cam


def test_lattice_counts_and_blind_spots():
    req = cam(10, 12, 5, 6)
    cov = lattice_coverage(req, [cam(10, 11, 5, 6), cam(11, 12, 5, 5)])
    assert cov.shape == (2, 3)
    assert cov.tolist() == [[1, 2, 1], [1, 1, 0]]
    assert blind_spots(req, cov) == [(12, 6)]

    s = lattice_summary(cov)
    assert (s.points, s.covered, s.uncovered, s.single_covered) == (6, 5, 1, 4)
    assert s.coverage_pct == pytest.approx(500 / 6)


def test_empty_lattice_summary():
    cov = lattice_coverage(cam(10.2, 10.8, 5, 6), [cam(10, 11, 5, 6)])
    assert cov.size == 0
    assert lattice_summary(cov).coverage_pct == 0.0
