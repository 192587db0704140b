"""SliderPath: a slider's flattened polyline with an arc-length table.

The path is built once at construction. Changing anchors, path type or
expected distance means constructing a new SliderPath.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from beatmapkit.geometry.approximator import PathType, approximate
from beatmapkit.geometry.vector import Vector2
from beatmapkit.utils.precision import almost_equals


class SliderPath:
    def __init__(
        self,
        path_type: PathType,
        control_points: list[Vector2],
        expected_distance: float,
    ) -> None:
        self.path_type = path_type
        self.control_points: tuple[Vector2, ...] = tuple(control_points)
        self.expected_distance = float(expected_distance)

        path = self._calculate_path()
        path, lengths = self._calculate_cumulative_length(path)

        self.calculated_path: NDArray[np.float64] = np.array(path, dtype=np.float64).reshape(-1, 2)
        self.cumulative_length: NDArray[np.float64] = np.array(lengths, dtype=np.float64)

    def _calculate_path(self) -> list[tuple[float, float]]:
        """Approximate every span and concatenate, dropping repeated points at the seams."""
        result: list[tuple[float, float]] = []
        anchors = self.control_points
        span_start = 0

        for i in range(len(anchors)):
            if i == len(anchors) - 1 or anchors[i].equals(anchors[i + 1]):
                span_end = i + 1
                span = np.array([[p.x, p.y] for p in anchors[span_start:span_end]], dtype=np.float64)
                for x, y in approximate(self.path_type, span):
                    point = (float(x), float(y))
                    if not result or result[-1] != point:
                        result.append(point)
                span_start = span_end

        return result

    def _calculate_cumulative_length(
        self, path: list[tuple[float, float]]
    ) -> tuple[list[tuple[float, float]], list[float]]:
        expected = self.expected_distance

        if path:
            pts = np.array(path, dtype=np.float64)
            seg = np.hypot(np.diff(pts[:, 0]), np.diff(pts[:, 1]))
            lengths = [0.0] + np.cumsum(seg).tolist()
        else:
            lengths = [0.0]
        calculated_length = lengths[-1]

        if almost_equals(calculated_length, expected):
            return path, lengths

        # Legacy quirk: equal last two points are never extended.
        if len(path) >= 2 and path[-1] == path[-2] and expected > calculated_length:
            lengths.append(calculated_length)
            return path, lengths

        # The last length is always wrong after this point.
        lengths.pop()
        path_end_index = len(path) - 1

        if calculated_length > expected:
            while lengths and lengths[-1] >= expected:
                lengths.pop()
                del path[path_end_index]
                path_end_index -= 1

        if path_end_index <= 0:
            lengths.append(0.0)
            return path, lengths

        prev = Vector2(*path[path_end_index - 1])
        direction = Vector2(*path[path_end_index]).subtract(prev).normalized()
        end = prev.add(direction.scale(expected - lengths[-1]))

        path[path_end_index] = (end.x, end.y)
        lengths.append(expected)
        return path, lengths

    @property
    def distance(self) -> float:
        """Final cumulative length of the reconciled path."""
        if len(self.cumulative_length) == 0:
            return 0.0
        return float(self.cumulative_length[-1])

    def position_at(self, progress: float) -> Vector2:
        """Position at ``progress`` (0 = path start, 1 = path end), relative to the slider head."""
        d = self._progress_to_distance(progress)
        return self._interpolate_vertices(self._index_of_distance(d), d)

    def path_to_progress(self, p0: float, p1: float) -> list[Vector2]:
        """Polyline between two progress values, with interpolated end points."""
        d0 = self._progress_to_distance(p0)
        d1 = self._progress_to_distance(p1)
        n = len(self.calculated_path)
        path: list[Vector2] = []

        i = 0
        while i < n and self.cumulative_length[i] < d0:
            i += 1

        path.append(self._interpolate_vertices(i, d0))

        while i < n and self.cumulative_length[i] <= d1:
            path.append(Vector2.from_array(self.calculated_path[i]))
            i += 1

        path.append(self._interpolate_vertices(i, d1))
        return path

    def _progress_to_distance(self, progress: float) -> float:
        return min(max(progress, 0.0), 1.0) * self.expected_distance

    def _interpolate_vertices(self, i: int, d: float) -> Vector2:
        path = self.calculated_path
        if len(path) == 0:
            return Vector2(0.0, 0.0)

        if i <= 0:
            return Vector2.from_array(path[0])
        if i >= len(path):
            return Vector2.from_array(path[-1])

        p0 = Vector2.from_array(path[i - 1])
        p1 = Vector2.from_array(path[i])

        d0 = float(self.cumulative_length[i - 1])
        d1 = float(self.cumulative_length[i])

        if almost_equals(d0, d1):
            return p0

        w = (d - d0) / (d1 - d0)
        return p0.add(p1.subtract(p0).scale(w))

    def _index_of_distance(self, d: float) -> int:
        """Binary search: exact match index, else the insertion point on the right."""
        lengths = self.cumulative_length
        if len(lengths) == 0 or d < lengths[0]:
            return 0

        if d >= lengths[-1]:
            return len(lengths)

        lo = 0
        hi = len(lengths) - 2
        while lo <= hi:
            pivot = lo + ((hi - lo) >> 1)
            if lengths[pivot] < d:
                lo = pivot + 1
            elif lengths[pivot] > d:
                hi = pivot - 1
            else:
                return pivot

        return lo

    def __repr__(self) -> str:
        return (
            f"SliderPath(type={self.path_type.value}, anchors={len(self.control_points)}, "
            f"expected_distance={self.expected_distance})"
        )
