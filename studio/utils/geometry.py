"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def normalize_points(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Fit a point cloud into the unit square, preserving aspect ratio.

    Anchored at the cloud's own bbox minimum and divided by the larger side,
    so the longer axis spans exactly [0, 1].
    """
    if len(points) == 0:
        return np.empty((0, 2))
    xmin, ymin, xmax, ymax = bbox(points)
    scale = max(xmax - xmin or 1.0, ymax - ymin or 1.0)
    return (points - np.array([xmin, ymin])) / scale


def interpolate_segment(
    start: complex, end: complex, spacing: float
) -> list[complex]:
    """Points along a straight segment, one per ``spacing`` units, excluding ``start``."""
    distance = abs(end - start)
    n = max(1, int(np.ceil(distance / spacing)))
    return [start + (end - start) * (i / n) for i in range(1, n + 1)]


def equilateral_vertices(size: float) -> list[tuple[float, float]]:
    """Vertices of an up-pointing equilateral triangle centred on the origin."""
    h = size * np.sqrt(3) / 2
    return [
        (0.0, float(-h / 2)),
        (float(-size / 2), float(h / 2)),
        (float(size / 2), float(h / 2)),
    ]
