from pathlib import Path

import typer
from rich.console import Console

from camcov.coverage import (
    CoverageAnalyzer,
    MAX_LATTICE_POINTS,
    InvalidRangeError,
    blind_spots,
    lattice_coverage,
    lattice_point_count,
    lattice_summary,
    load_cameras_csv,
    load_software_camera,
)
from camcov.reports.json_report import JSONReporter
from camcov.reports.terminal_report import print_lattice_summary, print_terminal_summary
from camcov.scenarios import REFERENCE_SOFTWARE_CAMERA, reference_scenarios


app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def check(
    software_json: str = typer.Argument(..., help="Path to software camera JSON ({distance:{min,max}, light:{min,max}})."),
    cameras_csv: str = typer.Argument(..., help="Path to cameras.csv (camera_id,distance_min,distance_max,light_min,light_max)."),
    out_json: str = typer.Option(None, "--out-json", help="Output JSON report path."),
    out_png: str = typer.Option(None, "--out-png", help="Output PNG coverage plot path."),
    show_blind_spots: bool = typer.Option(False, "--show-blind-spots", help="List integer lattice points no camera covers."),
):
    """
    Decide whether the hardware cameras cover the software camera's region.

    Exit code: 0 sufficient, 1 insufficient, 2 invalid camera range.
    """
    for p in (software_json, cameras_csv):
        if not Path(p).exists():
            raise typer.BadParameter(f"File not found: {p}")

    try:
        software_camera = load_software_camera(software_json)
        cameras = load_cameras_csv(cameras_csv)
    except (KeyError, ValueError) as e:
        raise typer.BadParameter(str(e))

    try:
        result = CoverageAnalyzer(software_camera, cameras).analyze()
    except InvalidRangeError as e:
        console.print(f"[bold red]Invalid input:[/bold red] {e}")
        raise typer.Exit(code=2)

    print_terminal_summary(result, cameras, console=console)

    # the lattice grid is a reporting aid; the verdict above never depends on it
    grid = None
    summary = None
    if show_blind_spots or out_json or out_png:
        points = lattice_point_count(software_camera)
        if points <= MAX_LATTICE_POINTS:
            grid = lattice_coverage(software_camera, cameras)
            summary = lattice_summary(grid)
            print_lattice_summary(summary, console=console)
        else:
            console.print(
                f"[dim]- lattice has {points:,} points (limit {MAX_LATTICE_POINTS:,}); "
                f"skipping blind-spot analysis[/dim]"
            )

    if show_blind_spots and grid is not None:
        spots = blind_spots(software_camera, grid)
        console.print(f"\n[bold yellow]Blind spots ({len(spots)}):[/bold yellow]")
        for d, lv in spots[:50]:
            console.print(f"  distance={d} light={lv}")
        if len(spots) > 50:
            console.print(f"  ... {len(spots) - 50} more")

    if out_json:
        JSONReporter().generate(result, out_json, summary=summary)
        console.print(f"[green]OK[/green] JSON report saved to: {out_json}")

    if out_png:
        # matplotlib is only needed for the plot
        from camcov.coverage.viz import plot_coverage
        plot_coverage(software_camera, cameras, out_png, grid=grid, show_blind_spots=grid is not None)
        console.print(f"[green]OK[/green] Coverage PNG saved to: {out_png}")

    raise typer.Exit(code=0 if result.sufficient else 1)


@app.command()
def demo():
    """Run the built-in reference scenarios and print PASS/FAIL for each."""
    req = REFERENCE_SOFTWARE_CAMERA
    console.print(
        f"\n[bold]Running camera coverage scenarios[/bold] "
        f"(distance [{req.distance.min:g}, {req.distance.max:g}], light [{req.light.min:g}, {req.light.max:g}])\n"
    )

    all_passed = True
    for sc in reference_scenarios():
        result = CoverageAnalyzer(req, sc.cameras).analyze()
        ok = result.sufficient == sc.expected
        all_passed = all_passed and ok
        status = "[green]PASS[/green]" if ok else "[red]FAIL[/red]"
        console.print(f"{status} {sc.label}")
        console.print(f"        Expected: {sc.expected}, Got: {result.sufficient} ({result.reason})")
        console.print(f"        Reason: {sc.reason}\n")

    if all_passed:
        console.print("[bold green]ALL SCENARIOS PASSED[/bold green]")
    else:
        console.print("[bold red]SOME SCENARIOS FAILED[/bold red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
