import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
import numpy as np

from .grid import blind_spots, lattice_coverage


def plot_coverage(software_camera, cameras, out_png, grid=None, show_blind_spots=True,
                  *,
                  title=None,
                  camera_alpha=0.25,
                  show_labels=True):
    """Draw the required region, the camera rectangles and lattice blind spots.

    Distance runs along X, light along Y. ``grid`` is the output of
    ``lattice_coverage``; it is computed when not supplied and blind spots
    are requested.
    """
    if grid is None and show_blind_spots:
        grid = lattice_coverage(software_camera, cameras)

    fig, ax = plt.subplots(figsize=(9, 6), constrained_layout=True)
    cmap = plt.get_cmap("tab20")

    for i, cam in enumerate(cameras):
        w = cam.distance.max - cam.distance.min
        h = cam.light.max - cam.light.min
        ax.add_patch(
            Rectangle(
                (cam.distance.min, cam.light.min), w, h,
                facecolor=cmap(i % 20),
                edgecolor=cmap(i % 20),
                alpha=camera_alpha,
                linewidth=0.8,
                zorder=1,
            )
        )
        # labels get unreadable past a few dozen cameras
        if show_labels and cam.camera_id and len(cameras) <= 40:
            ax.text(
                cam.distance.min + w / 2, cam.light.min + h / 2, cam.camera_id,
                ha="center", va="center", fontsize=7, zorder=3,
            )

    req = software_camera
    ax.add_patch(
        Rectangle(
            (req.distance.min, req.light.min),
            req.distance.max - req.distance.min,
            req.light.max - req.light.min,
            fill=False,
            edgecolor="black",
            linestyle="--",
            linewidth=1.6,
            zorder=4,
            label="Required region",
        )
    )

    blind = []
    if show_blind_spots:
        blind = blind_spots(software_camera, grid)
        if blind:
            bx, by = zip(*blind)
            ax.scatter(bx, by, s=18, marker="x", c="red", linewidths=1.0, zorder=5, label="Blind spot")

    xs = [req.distance.min, req.distance.max] + [c.distance.min for c in cameras] + [c.distance.max for c in cameras]
    ys = [req.light.min, req.light.max] + [c.light.min for c in cameras] + [c.light.max for c in cameras]
    pad_x = max(1.0, 0.05 * (max(xs) - min(xs)))
    pad_y = max(1.0, 0.05 * (max(ys) - min(ys)))
    ax.set_xlim(min(xs) - pad_x, max(xs) + pad_x)
    ax.set_ylim(min(ys) - pad_y, max(ys) + pad_y)

    ax.set_xlabel("Distance")
    ax.set_ylabel("Light")
    ax.set_title(title or "Camera coverage")
    ax.legend(loc="upper right", framealpha=0.90)

    stats = f"Cameras: {len(cameras):,}"
    if show_blind_spots and grid is not None:
        stats = f"Lattice points: {int(np.size(grid)):,}\nBlind spots: {len(blind):,}\n" + stats
    ax.text(
        0.01, 0.01, stats,
        transform=ax.transAxes,
        va="bottom",
        ha="left",
        fontsize=9,
        bbox=dict(boxstyle="round", facecolor="black", alpha=0.45, edgecolor="none"),
        color="white",
        zorder=6,
    )

    fig.savefig(out_png, dpi=160)
    plt.close(fig)
