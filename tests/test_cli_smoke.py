import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _run(*args):
    env = dict(os.environ)
    env["PYTHONPATH"] = str(ROOT / "src")
    env["PYTHONIOENCODING"] = "utf-8"
    env["MPLBACKEND"] = "Agg"
    return subprocess.run(
        [sys.executable, "-m", "camcov.cli", *args],
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )


def _inputs(tmp_path, rows):
    software = tmp_path / "software.json"
    software.write_text(json.dumps({"distance": {"min": 10, "max": 20}, "light": {"min": 5, "max": 15}}), encoding="utf-8")
    cameras = tmp_path / "cameras.csv"
    cameras.write_text("camera_id,distance_min,distance_max,light_min,light_max\n" + "\n".join(rows) + "\n", encoding="utf-8")
    return str(software), str(cameras)


def test_check_sufficient(tmp_path):
    software, cameras = _inputs(tmp_path, ["A,10,15,5,15", "B,16,20,5,15"])
    out_json = tmp_path / "report.json"
    out_png = tmp_path / "coverage.png"

    r = _run("check", software, cameras, "--out-json", str(out_json), "--out-png", str(out_png))

    assert r.returncode == 0, r.stderr + "\n" + r.stdout
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["sufficient"] is True
    assert data["lattice"]["uncovered"] == 0
    assert out_png.exists()


def test_check_insufficient(tmp_path):
    software, cameras = _inputs(tmp_path, ["A,10,15,5,15", "B,17,20,5,15"])
    out_json = tmp_path / "report.json"

    r = _run("check", software, cameras, "--out-json", str(out_json), "--show-blind-spots")

    assert r.returncode == 1, r.stderr + "\n" + r.stdout
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["reason"] == "stripe_uncovered"
    assert data["failed_stripe"] == {"start": 16, "end": 16}


def test_check_invalid_range(tmp_path):
    software, cameras = _inputs(tmp_path, ["A,20,10,5,15"])
    r = _run("check", software, cameras)
    assert r.returncode == 2, r.stderr + "\n" + r.stdout


def test_demo_passes():
    r = _run("demo")
    assert r.returncode == 0, r.stderr + "\n" + r.stdout
    assert "ALL SCENARIOS PASSED" in r.stdout


def test_check_large_requirement_skips_lattice(tmp_path):
    software = tmp_path / "software.json"
    software.write_text(json.dumps({"distance": {"min": 0, "max": 100000}, "light": {"min": 0, "max": 100000}}), encoding="utf-8")
    cameras = tmp_path / "cameras.csv"
    cameras.write_text("camera_id,distance_min,distance_max,light_min,light_max\nA,0,100000,0,100000\n", encoding="utf-8")
    out_json = tmp_path / "report.json"

    r = _run("check", str(software), str(cameras), "--out-json", str(out_json), "--show-blind-spots")

    assert r.returncode == 0, r.stderr + "\n" + r.stdout
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["sufficient"] is True
    assert "lattice" not in data


def test_check_malformed_json_is_a_usage_error(tmp_path):
    software = tmp_path / "software.json"
    software.write_text(json.dumps({"distance": 5, "light": {"min": 5, "max": 15}}), encoding="utf-8")
    cameras = tmp_path / "cameras.csv"
    cameras.write_text("distance_min,distance_max,light_min,light_max\n10,20,5,15\n", encoding="utf-8")

    r = _run("check", str(software), str(cameras))

    assert r.returncode == 2
    assert "Traceback" not in r.stderr
