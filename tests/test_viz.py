import matplotlib
matplotlib.use("Agg")

from camcov.coverage.viz import plot_coverage
from camcov.scenarios import cam


def test_plot_coverage_writes_png(tmp_path):
    out = tmp_path / "coverage.png"
    plot_coverage(cam(10, 20, 5, 15), [cam(10, 15, 5, 15, "A"), cam(17, 20, 5, 15, "B")], str(out))
    assert out.exists()
    assert out.stat().st_size > 0
