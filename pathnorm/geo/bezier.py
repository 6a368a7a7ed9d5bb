import math
import logging
from typing import Any, Iterator, NamedTuple, Tuple
import numpy as np
from .arc import ArcCenter, rotation_matrix

logger = logging.getLogger(__name__)

HALF_PI = math.pi / 2

# Tolerance on the segment count, so that a sweep which is an exact
# multiple of the maximum span (up to rounding) does not produce an
# extra, vanishingly small segment.
_SPAN_EPSILON = 1e-9

Point2D = Tuple[float, float]


class CubicSegment(NamedTuple):
    """
    The three points a cubic Bezier adds to a path: two control points
    and the end point. The start point is the end of the previous segment.
    """

    p1: Point2D
    p2: Point2D
    p3: Point2D


class ArcToBezier:
    """
    Approximates an elliptical arc, given in center parameterization, by a
    sequence of cubic Bezier segments.

    The arc is cut into ceil(|theta2 - theta1| / max_span) pieces. Each
    piece spans max_span, except the last one which spans whatever remains.
    For a piece from angle a to angle b, the control points of the unit
    circle approximation are placed along the tangents at a distance of

        k = 4/3 * tan((b - a) / 4)

    and the result is then scaled by the radii, rotated by the ellipse's
    x-axis rotation and moved to its center.

    Iterating an ArcToBezier is restartable: every iteration yields the
    full sequence of segments again.
    """

    def __init__(
        self,
        center: Point2D,
        rx: float,
        ry: float,
        phi: float,
        theta1: float,
        theta2: float,
        max_span: float = HALF_PI,
    ) -> None:
        if max_span <= 0:
            raise ValueError("max_span must be positive")
        self.center = np.array(center, dtype=float)
        self.rx = float(rx)
        self.ry = float(ry)
        self.phi = float(phi)
        self.theta1 = float(theta1)
        self.theta2 = float(theta2)
        self.max_span = float(max_span)
        self._transform = rotation_matrix(self.phi) @ np.diag(
            [self.rx, self.ry]
        )

        delta = self.theta2 - self.theta1
        if delta == 0:
            self._count = 0
        else:
            ratio = abs(delta) / self.max_span
            self._count = max(1, math.ceil(ratio - _SPAN_EPSILON))

    @classmethod
    def from_arc(
        cls, arc: ArcCenter, max_span: float = HALF_PI
    ) -> "ArcToBezier":
        return cls(
            arc.center,
            arc.rx,
            arc.ry,
            arc.phi,
            arc.theta1,
            arc.theta2,
            max_span=max_span,
        )

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[CubicSegment]:
        for a, b in self.angles():
            yield self._segment(a, b)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(theta1={self.theta1}, "
            f"theta2={self.theta2}, segments={self._count})"
        )

    def angles(self) -> Iterator[Tuple[float, float]]:
        """Yields the (start, end) angle of every segment, in order."""
        step = math.copysign(self.max_span, self.theta2 - self.theta1)
        a = self.theta1
        for i in range(self._count):
            b = self.theta2 if i == self._count - 1 else a + step
            yield a, b
            a = b

    def _map(self, points: np.ndarray) -> np.ndarray:
        return points @ self._transform.T + self.center

    def point_at(self, theta: float) -> Point2D:
        x, y = self._map(np.array([math.cos(theta), math.sin(theta)]))
        return float(x), float(y)

    @property
    def start_point(self) -> Point2D:
        return self.point_at(self.theta1)

    @property
    def end_point(self) -> Point2D:
        return self.point_at(self.theta2)

    def _segment(self, a: float, b: float) -> CubicSegment:
        k = 4 / 3 * math.tan((b - a) / 4)
        cos_a, sin_a = math.cos(a), math.sin(a)
        cos_b, sin_b = math.cos(b), math.sin(b)
        unit = np.array(
            [
                [cos_a - k * sin_a, sin_a + k * cos_a],
                [cos_b + k * sin_b, sin_b - k * cos_b],
                [cos_b, sin_b],
            ]
        )
        p1, p2, p3 = self._map(unit)
        return CubicSegment(
            (float(p1[0]), float(p1[1])),
            (float(p2[0]), float(p2[1])),
            (float(p3[0]), float(p3[1])),
        )


def quadratic_to_cubic(
    start: Tuple[Any, Any], control: Tuple[Any, Any], end: Tuple[Any, Any]
) -> Tuple[Tuple[Any, Any], Tuple[Any, Any]]:
    """
    Returns the two control points of the cubic Bezier that traces the
    same curve as the quadratic Bezier (start, control, end):

        c1 = start + 2/3 * (control - start)
        c2 = end + 2/3 * (control - end)

    Only +, * and / are used, so exact types such as Fraction stay exact.
    """
    sx, sy = start
    qx, qy = control
    ex, ey = end
    c1 = ((sx + 2 * qx) / 3, (sy + 2 * qy) / 3)
    c2 = ((ex + 2 * qx) / 3, (ey + 2 * qy) / 3)
    return c1, c2
