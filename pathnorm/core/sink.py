from abc import ABC, abstractmethod
from typing import Any
from .policy import PathPolicy, RAW


class PathSink(ABC):
    """
    Receives path commands, one method per command kind.

    Coordinates are absolute unless `relative` is True, in which case they
    are offsets from the current point. A sink states the command shapes
    it accepts through its `policy` class attribute; a PathAdapter placed
    in front of it guarantees that nothing outside that policy arrives.
    """

    policy: PathPolicy = RAW

    @abstractmethod
    def move_to(self, x: Any, y: Any, relative: bool = False) -> None:
        pass

    @abstractmethod
    def line_to(self, x: Any, y: Any, relative: bool = False) -> None:
        pass

    @abstractmethod
    def line_to_ortho(
        self, coord: Any, horizontal: bool, relative: bool = False
    ) -> None:
        """A horizontal (H) or vertical (V) line."""
        pass

    @abstractmethod
    def cubic_bezier_to(
        self,
        x1: Any,
        y1: Any,
        x2: Any,
        y2: Any,
        x: Any,
        y: Any,
        relative: bool = False,
    ) -> None:
        pass

    @abstractmethod
    def cubic_bezier_shorthand_to(
        self, x2: Any, y2: Any, x: Any, y: Any, relative: bool = False
    ) -> None:
        """A smooth cubic (S); the first control point is implied."""
        pass

    @abstractmethod
    def quadratic_bezier_to(
        self, x1: Any, y1: Any, x: Any, y: Any, relative: bool = False
    ) -> None:
        pass

    @abstractmethod
    def quadratic_bezier_shorthand_to(
        self, x: Any, y: Any, relative: bool = False
    ) -> None:
        """A smooth quadratic (T); the control point is implied."""
        pass

    @abstractmethod
    def elliptical_arc_to(
        self,
        rx: Any,
        ry: Any,
        x_axis_rotation: Any,
        large_arc: bool,
        sweep: bool,
        x: Any,
        y: Any,
        relative: bool = False,
    ) -> None:
        """
        An SVG style elliptical arc in endpoint parameterization. The
        x-axis rotation is given in degrees.
        """
        pass

    @abstractmethod
    def close_subpath(self) -> None:
        pass

    @abstractmethod
    def exit(self) -> None:
        """Signals the end of the path."""
        pass
