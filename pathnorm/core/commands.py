from __future__ import annotations
from typing import Any, Dict, Type, TYPE_CHECKING

if TYPE_CHECKING:
    from .sink import PathSink


class Command:
    """
    Base for all path commands. A command knows how to replay itself
    into a PathSink, which lets typed command streams (for example the
    output of a path data parser) be fed through a PathAdapter.
    """

    def __init__(self, relative: bool = False) -> None:
        self.relative = relative

    def __repr__(self) -> str:
        return f"<{super().__repr__()} {self.__dict__}"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def apply(self, sink: "PathSink") -> None:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """Serializes the command to a dictionary."""
        d: Dict[str, Any] = {"type": self.__class__.__name__}
        d.update(self.__dict__)
        return d

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Command":
        data = dict(data)
        cmd_type = data.pop("type")
        cls = COMMAND_TYPES.get(cmd_type)
        if cls is None:
            raise ValueError(f"Unknown command type: {cmd_type}")
        cmd = cls.__new__(cls)
        cmd.__dict__.update(data)
        return cmd


class MoveToCommand(Command):
    def __init__(self, x: Any, y: Any, relative: bool = False) -> None:
        super().__init__(relative)
        self.x = x
        self.y = y

    def apply(self, sink: "PathSink") -> None:
        sink.move_to(self.x, self.y, relative=self.relative)


class LineToCommand(Command):
    def __init__(self, x: Any, y: Any, relative: bool = False) -> None:
        super().__init__(relative)
        self.x = x
        self.y = y

    def apply(self, sink: "PathSink") -> None:
        sink.line_to(self.x, self.y, relative=self.relative)


class LineToOrthoCommand(Command):
    """A horizontal or vertical line along a single axis."""

    def __init__(
        self, coord: Any, horizontal: bool, relative: bool = False
    ) -> None:
        super().__init__(relative)
        self.coord = coord
        self.horizontal = horizontal

    def apply(self, sink: "PathSink") -> None:
        sink.line_to_ortho(
            self.coord, self.horizontal, relative=self.relative
        )


class CubicBezierToCommand(Command):
    def __init__(
        self,
        x1: Any,
        y1: Any,
        x2: Any,
        y2: Any,
        x: Any,
        y: Any,
        relative: bool = False,
    ) -> None:
        super().__init__(relative)
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2
        self.x = x
        self.y = y

    def apply(self, sink: "PathSink") -> None:
        sink.cubic_bezier_to(
            self.x1,
            self.y1,
            self.x2,
            self.y2,
            self.x,
            self.y,
            relative=self.relative,
        )


class CubicBezierShorthandToCommand(Command):
    def __init__(
        self, x2: Any, y2: Any, x: Any, y: Any, relative: bool = False
    ) -> None:
        super().__init__(relative)
        self.x2 = x2
        self.y2 = y2
        self.x = x
        self.y = y

    def apply(self, sink: "PathSink") -> None:
        sink.cubic_bezier_shorthand_to(
            self.x2, self.y2, self.x, self.y, relative=self.relative
        )


class QuadraticBezierToCommand(Command):
    def __init__(
        self, x1: Any, y1: Any, x: Any, y: Any, relative: bool = False
    ) -> None:
        super().__init__(relative)
        self.x1 = x1
        self.y1 = y1
        self.x = x
        self.y = y

    def apply(self, sink: "PathSink") -> None:
        sink.quadratic_bezier_to(
            self.x1, self.y1, self.x, self.y, relative=self.relative
        )


class QuadraticBezierShorthandToCommand(Command):
    def __init__(self, x: Any, y: Any, relative: bool = False) -> None:
        super().__init__(relative)
        self.x = x
        self.y = y

    def apply(self, sink: "PathSink") -> None:
        sink.quadratic_bezier_shorthand_to(
            self.x, self.y, relative=self.relative
        )


class EllipticalArcToCommand(Command):
    def __init__(
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
        super().__init__(relative)
        self.rx = rx
        self.ry = ry
        self.x_axis_rotation = x_axis_rotation
        self.large_arc = large_arc
        self.sweep = sweep
        self.x = x
        self.y = y

    def apply(self, sink: "PathSink") -> None:
        sink.elliptical_arc_to(
            self.rx,
            self.ry,
            self.x_axis_rotation,
            self.large_arc,
            self.sweep,
            self.x,
            self.y,
            relative=self.relative,
        )


class ClosePathCommand(Command):
    def __init__(self) -> None:
        super().__init__()

    def apply(self, sink: "PathSink") -> None:
        sink.close_subpath()


class ExitCommand(Command):
    """Marks the end of a path."""

    def __init__(self) -> None:
        super().__init__()

    def apply(self, sink: "PathSink") -> None:
        sink.exit()


COMMAND_TYPES: Dict[str, Type[Command]] = {
    cls.__name__: cls
    for cls in (
        MoveToCommand,
        LineToCommand,
        LineToOrthoCommand,
        CubicBezierToCommand,
        CubicBezierShorthandToCommand,
        QuadraticBezierToCommand,
        QuadraticBezierShorthandToCommand,
        EllipticalArcToCommand,
        ClosePathCommand,
        ExitCommand,
    )
}
