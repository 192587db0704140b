"""Curve approximation: turns a path type and anchor points into a dense polyline.

All functions take and return Nx2 float64 arrays. They never raise; a
degenerate input simply yields a degenerate (possibly empty) polyline.
"""

from __future__ import annotations

import enum
import math

import numpy as np
from numpy.typing import NDArray

from beatmapkit.utils.precision import almost_equals

BEZIER_TOLERANCE = 0.25

# Pieces sampled per Catmull-Rom control point quadruplet.
CATMULL_DETAIL = 50

CIRCULAR_ARC_TOLERANCE = 0.1


class PathType(str, enum.Enum):
    LINEAR = "L"
    PERFECT_CURVE = "P"
    CATMULL = "C"
    BEZIER = "B"


def _as_points(points: NDArray[np.float64] | list) -> NDArray[np.float64]:
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def approximate(path_type: PathType, control_points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Approximate one span of a slider path.

    Perfect curves need exactly three points and a non-degenerate arc;
    anything else falls back to Bezier.
    """
    points = _as_points(control_points)

    if path_type == PathType.LINEAR:
        return approximate_linear(points)

    if path_type == PathType.PERFECT_CURVE and len(points) == 3:
        arc = approximate_circular_arc(points)
        if len(arc) > 0:
            return arc

    if path_type == PathType.CATMULL:
        return approximate_catmull(points)

    return approximate_bezier(points)


def approximate_linear(control_points: NDArray[np.float64]) -> NDArray[np.float64]:
    return _as_points(control_points).copy()


# ---------------------------------------------------------------------------
# Bezier
# ---------------------------------------------------------------------------


def _bezier_is_flat_enough(control_points: NDArray[np.float64]) -> bool:
    """Check the discrete second derivative of every interior control point."""
    if len(control_points) < 3:
        return True
    second = control_points[:-2] - control_points[1:-1] * 2 + control_points[2:]
    sq_lengths = second[:, 0] ** 2 + second[:, 1] ** 2
    return bool(np.all(sq_lengths <= BEZIER_TOLERANCE * BEZIER_TOLERANCE * 4))


def _bezier_subdivide(
    control_points: NDArray[np.float64],
    left: NDArray[np.float64],
    right: NDArray[np.float64],
    midpoints: NDArray[np.float64],
    count: int,
) -> None:
    """De Casteljau split of ``count`` points into two halves, written into ``left`` and ``right``."""
    midpoints[:count] = control_points[:count]

    for i in range(count):
        left[i] = midpoints[0]
        right[count - i - 1] = midpoints[count - i - 1]
        n = count - i - 1
        midpoints[:n] = (midpoints[:n] + midpoints[1 : n + 1]) / 2


def _bezier_approximate(
    control_points: NDArray[np.float64],
    output: list[NDArray[np.float64]],
    subdivision_buffer1: NDArray[np.float64],
    subdivision_buffer2: NDArray[np.float64],
    count: int,
) -> None:
    left = subdivision_buffer2
    right = subdivision_buffer1

    _bezier_subdivide(control_points, left, right, subdivision_buffer1, count)

    left[count : 2 * count - 1] = right[1:count]

    output.append(control_points[0].copy())

    if count > 2:
        idx = np.arange(1, count - 1) * 2
        pts = (left[idx - 1] + left[idx] * 2 + left[idx + 1]) * 0.25
        output.extend(pts)


def approximate_bezier(control_points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Adaptive piecewise-linear approximation of a Bezier curve.

    Subdivides with an explicit work stack (depth-first) until each piece is
    flat enough. Buffers freed by flattened pieces are reused for the right
    children of later subdivisions.
    """
    points = _as_points(control_points)
    count = len(points) - 1

    if count < 0:
        return np.empty((0, 2))

    output: list[NDArray[np.float64]] = []

    subdivision_buffer1 = np.empty((count + 1, 2))
    subdivision_buffer2 = np.empty((count * 2 + 1, 2))

    to_flatten: list[NDArray[np.float64]] = [points.copy()]
    free_buffers: list[NDArray[np.float64]] = []
    left_child = subdivision_buffer2

    while to_flatten:
        parent = to_flatten.pop()

        if _bezier_is_flat_enough(parent):
            _bezier_approximate(
                parent, output, subdivision_buffer1, subdivision_buffer2, count + 1
            )
            free_buffers.append(parent)
            continue

        right_child = free_buffers.pop() if free_buffers else np.empty((count + 1, 2))
        _bezier_subdivide(parent, left_child, right_child, subdivision_buffer1, count + 1)

        # Parent's buffer is reused for the left child.
        parent[:] = left_child[: count + 1]

        to_flatten.append(right_child)
        to_flatten.append(parent)

    output.append(points[count].copy())
    return np.array(output, dtype=np.float64).reshape(-1, 2)


# ---------------------------------------------------------------------------
# Catmull-Rom
# ---------------------------------------------------------------------------


def _catmull_find_points(
    v1: NDArray[np.float64],
    v2: NDArray[np.float64],
    v3: NDArray[np.float64],
    v4: NDArray[np.float64],
    t: NDArray[np.float64],
) -> NDArray[np.float64]:
    t = t[:, None]
    t2 = t**2
    t3 = t**3
    return 0.5 * (
        2 * v2
        + (-v1 + v3) * t
        + (2 * v1 - 5 * v2 + 4 * v3 - v4) * t2
        + (-v1 + 3 * v2 - 3 * v3 + v4) * t3
    )


def approximate_catmull(control_points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Sample a Catmull-Rom spline, two points per step per segment."""
    points = _as_points(control_points)
    n = len(points)
    if n < 2:
        return np.empty((0, 2))

    steps = np.arange(CATMULL_DETAIL, dtype=np.float64)
    t = np.empty(CATMULL_DETAIL * 2)
    t[0::2] = steps / CATMULL_DETAIL
    t[1::2] = (steps + 1) / CATMULL_DETAIL

    segments = []
    for i in range(n - 1):
        v1 = points[i - 1] if i > 0 else points[i]
        v2 = points[i]
        v3 = points[i + 1]
        v4 = points[i + 2] if i < n - 2 else v3 + v3 - v2
        segments.append(_catmull_find_points(v1, v2, v3, v4, t))

    return np.concatenate(segments)


# ---------------------------------------------------------------------------
# Circular arc
# ---------------------------------------------------------------------------


def approximate_circular_arc(control_points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Sample the arc through three points.

    Nearly collinear points fall back to Bezier. The sample count keeps the
    chord-to-arc deviation under CIRCULAR_ARC_TOLERANCE.
    """
    points = _as_points(control_points)
    (ax, ay), (bx, by), (cx, cy) = points[0], points[1], points[2]

    if almost_equals(0, (by - ay) * (cx - ax) - (bx - ax) * (cy - ay)):
        return approximate_bezier(points)

    d = 2 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))

    a_sq = math.hypot(ax, ay) ** 2
    b_sq = math.hypot(bx, by) ** 2
    c_sq = math.hypot(cx, cy) ** 2

    center_x = (a_sq * (by - cy) + b_sq * (cy - ay) + c_sq * (ay - by)) / d
    center_y = (a_sq * (cx - bx) + b_sq * (ax - cx) + c_sq * (bx - ax)) / d

    da_x, da_y = ax - center_x, ay - center_y
    dc_x, dc_y = cx - center_x, cy - center_y

    r = math.hypot(da_x, da_y)

    theta_start = math.atan2(da_y, da_x)
    theta_end = math.atan2(dc_y, dc_x)

    while theta_end < theta_start:
        theta_end += 2 * math.pi

    direction = 1
    theta_range = theta_end - theta_start

    # Draw towards whichever side of chord AC point B lies on.
    ortho_x, ortho_y = cy - ay, -(cx - ax)
    if ortho_x * (bx - ax) + ortho_y * (by - ay) < 0:
        direction = -direction
        theta_range = 2 * math.pi - theta_range

    if 2 * r <= CIRCULAR_ARC_TOLERANCE:
        amount_points = 2
    else:
        amount_points = max(
            2,
            math.ceil(theta_range / (2 * math.acos(1 - CIRCULAR_ARC_TOLERANCE / r))),
        )

    fract = np.arange(amount_points, dtype=np.float64) / (amount_points - 1)
    theta = theta_start + direction * fract * theta_range

    out = np.empty((amount_points, 2))
    out[:, 0] = center_x + np.cos(theta) * r
    out[:, 1] = center_y + np.sin(theta) * r
    return out
