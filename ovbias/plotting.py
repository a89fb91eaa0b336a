from __future__ import annotations

import logging
from pathlib import Path

# Non-interactive backend so charts render without a display.
import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)

_FIGSIZE = (8, 6)
_DPI = 100


def render_line_chart(
    x_values,
    y_values,
    output_path,
    title: str,
    x_label: str,
    y_label: str,
) -> Path:
    """
    Draw ``(x_values[i], y_values[i])`` as a line chart and save it as an image.

    The axes span the min/max of the data. The image format follows the
    file extension of ``output_path`` (800x600 px for the default size).

    Parameters
    ----------
    x_values, y_values : array-like
        Series of equal, non-zero length.
    output_path : str or Path
        Destination file. Its parent directory must exist.
    title, x_label, y_label : str
        Chart title and axis labels.

    Returns
    -------
    Path
        The path written.

    Raises
    ------
    ValueError
        If the series are empty or of different lengths.
    """
    xs = np.asarray(x_values, dtype=float)
    ys = np.asarray(y_values, dtype=float)
    if xs.shape != ys.shape or xs.ndim != 1:
        raise ValueError(
            f"x and y series must be 1-dimensional and the same length, "
            f"got shapes {xs.shape} and {ys.shape}."
        )
    if xs.size == 0:
        raise ValueError("Cannot plot an empty series.")

    output_path = Path(output_path)
    fig, ax = plt.subplots(figsize=_FIGSIZE, dpi=_DPI)
    try:
        ax.plot(xs, ys, color="red", label="Bias")
        if xs.min() < xs.max():
            ax.set_xlim(xs.min(), xs.max())
        if ys.min() < ys.max():
            ax.set_ylim(ys.min(), ys.max())
        ax.set_title(title)
        ax.set_xlabel(x_label)
        ax.set_ylabel(y_label)
        ax.legend(edgecolor="black")
        fig.savefig(output_path)
    finally:
        plt.close(fig)

    logger.info("Wrote %s", output_path)
    return output_path
