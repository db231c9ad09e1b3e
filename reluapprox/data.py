"""Sample generation for fitting scalar functions."""
from __future__ import annotations

from typing import Callable, List, Tuple

import numpy as np

Sample = Tuple[float, float]
ScalarFn = Callable[[float], float]


def cubic(x: float) -> float:
    """Default target ``x**3 + x**2 + x``."""

    return x * x * x + x * x + x


def sample_function(
    fn: ScalarFn,
    start: int,
    stop: int,
    step: int = 1,
    scale: float = 100.0,
) -> List[Sample]:
    """Sample ``fn`` on the integer grid ``start..=stop`` divided by ``scale``.

    The grid is built on integers and divided afterwards so that points such
    as ``0.08`` are the nearest floats rather than an accumulated sum.
    """

    if step <= 0:
        raise ValueError("step must be positive")
    if scale == 0:
        raise ValueError("scale must be non-zero")
    grid = np.arange(start, stop + 1, step, dtype=np.int64) / scale
    return [(float(x), float(fn(float(x)))) for x in grid]


def training_samples(fn: ScalarFn = cubic) -> List[Sample]:
    return sample_function(fn, 1, 100, step=7)


def validation_samples(fn: ScalarFn = cubic) -> List[Sample]:
    return sample_function(fn, 20, 60)


def comparison_table(
    predict: ScalarFn,
    fn: ScalarFn = cubic,
    points: int = 1000,
) -> List[Tuple[float, float, float]]:
    """Rows of ``(x, fn(x), predict(x))`` for ``x = i / points`` over ``[0, 1)``."""

    if points <= 0:
        raise ValueError("points must be positive")
    xs = np.arange(points, dtype=np.int64) / float(points)
    return [(float(x), fn(float(x)), predict(float(x))) for x in xs]
