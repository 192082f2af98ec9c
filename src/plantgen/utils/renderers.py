"""Rendering of generated plant meshes with matplotlib."""

# Standard library
from pathlib import Path

# Third-party libraries
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import PolyCollection
from matplotlib.figure import Figure

# Local libraries
from plantgen.config import DPI
from plantgen.mesh.triangulation import PolyData


def unpack_colors(colors: np.ndarray) -> np.ndarray:
    """Packed ``0xRRGGBBAA`` integers -> (N, 4) floats in [0, 1]."""
    colors = np.asarray(colors, dtype=np.uint32)
    channels = np.stack(
        [(colors >> shift) & 0xFF for shift in (24, 16, 8, 0)],
        axis=-1,
    )
    return channels.astype(np.float64) / 255.0


def render_poly_data(
    poly: PolyData,
    save_path: Path | str | None = None,
    *,
    dpi: int = DPI,
    background: str = "black",
    title: str | None = None,
) -> Figure:
    """
    Draw the triangles of ``poly`` in depth order.

    Parameters
    ----------
    poly : PolyData
        Mesh to draw.
    save_path : Path | str | None, optional
        Where to write a PNG; nothing is written when None.
    dpi : int, optional
        Resolution of the saved image, by default 300
    background : str, optional
        Figure and axes background color, by default "black"
    title : str | None, optional
        Axes title.

    Returns
    -------
    Figure
        The matplotlib figure. It is already closed in pyplot, so repeated
        calls do not accumulate open figures; use ``fig.savefig`` to write it
        elsewhere.
    """
    positions, colors, indices = poly.as_arrays()
    fig, ax = plt.subplots(figsize=(6, 6))
    fig.patch.set_facecolor(background)
    ax.set_facecolor(background)
    ax.set_aspect("equal")
    ax.axis("off")

    if len(indices):
        triangles = positions[indices][:, :, :2]
        face_colors = unpack_colors(colors[indices[:, 0]])

        # Larger depth is further away, so draw it first
        depth = positions[indices][:, :, 2].mean(axis=1)
        order = np.argsort(-depth, kind="stable")
        collection = PolyCollection(
            triangles[order],
            facecolors=face_colors[order],
            edgecolors="none",
        )
        ax.add_collection(collection)
        ax.autoscale_view()

    if title:
        ax.set_title(title, color="white")

    if save_path is not None:
        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
    return fig
