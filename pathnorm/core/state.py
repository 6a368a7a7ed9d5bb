from __future__ import annotations
from typing import Any, NamedTuple, Optional


class Point(NamedTuple):
    x: Any
    y: Any


class PathState:
    """
    Geometric bookkeeping for a single path: the pen position, the start
    of the current subpath, and the last control point of the previous
    cubic or quadratic Bezier (used to resolve smooth shorthands).

    All points handed to the record_* methods are absolute. At most one
    of the two control point memories is valid at any time.
    """

    def __init__(self, origin: Optional[Point] = None) -> None:
        self._origin = origin or Point(0.0, 0.0)
        self.current_point: Point = self._origin
        self.subpath_start: Point = self._origin
        self.last_cubic_control: Optional[Point] = None
        self.last_quadratic_control: Optional[Point] = None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.__dict__}>"

    def reset(self) -> None:
        self.current_point = self._origin
        self.subpath_start = self._origin
        self.invalidate_controls()

    def invalidate_controls(self) -> None:
        self.last_cubic_control = None
        self.last_quadratic_control = None

    def record_move(self, p: Point) -> None:
        self.current_point = self.subpath_start = Point(*p)
        self.invalidate_controls()

    def record_line_endpoint(self, p: Point) -> None:
        self.current_point = Point(*p)
        self.invalidate_controls()

    def record_arc(self, p: Point) -> None:
        # An elliptical arc is not a Bezier, nothing to reflect against.
        self.record_line_endpoint(p)

    def record_close(self) -> None:
        self.current_point = self.subpath_start
        self.invalidate_controls()

    def record_cubic(self, p_end: Point, p_last_control: Point) -> None:
        self.current_point = Point(*p_end)
        self.last_cubic_control = Point(*p_last_control)
        self.last_quadratic_control = None

    def record_quadratic(self, p_end: Point, p_last_control: Point) -> None:
        self.current_point = Point(*p_end)
        self.last_quadratic_control = Point(*p_last_control)
        self.last_cubic_control = None

    def _reflect(self, control: Optional[Point]) -> Point:
        cx, cy = self.current_point
        if control is None:
            return self.current_point
        return Point(2 * cx - control.x, 2 * cy - control.y)

    def reflect_cubic(self) -> Point:
        """
        Returns the implied first control point of a smooth cubic: the
        previous cubic's second control point mirrored through the current
        point, or the current point itself if there is no such cubic.
        """
        return self._reflect(self.last_cubic_control)

    def reflect_quadratic(self) -> Point:
        """Same as reflect_cubic(), for smooth quadratics."""
        return self._reflect(self.last_quadratic_control)

    def to_absolute(self, x: Any, y: Any) -> Point:
        cx, cy = self.current_point
        return Point(cx + x, cy + y)
