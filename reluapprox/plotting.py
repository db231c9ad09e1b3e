"""Plotting helpers for comparing a target function with its approximation."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple

import matplotlib.pyplot as plt


def plot_approximation(
    rows: Sequence[Tuple[float, float, float]],
    path: str | Path | None = None,
    *,
    title: str = "Approximation",
):
    """Plot ``(x, target, approximation)`` rows and optionally save the figure."""

    if not rows:
        raise ValueError("rows must not be empty")
    xs = [row[0] for row in rows]
    targets = [row[1] for row in rows]
    approximations = [row[2] for row in rows]

    fig, ax = plt.subplots()
    ax.plot(xs, targets, label="target")
    ax.plot(xs, approximations, label="network", linestyle="--")
    ax.set_xlabel("x")
    ax.set_ylabel("f(x)")
    ax.set_title(title)
    ax.legend()
    fig.tight_layout()
    if path is not None:
        fig.savefig(path)
        plt.close(fig)
    return fig
