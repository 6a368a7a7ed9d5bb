from __future__ import annotations
from copy import deepcopy
from typing import Any, Dict, Iterator, List, Type, TypeVar
from blinker import Signal
from .commands import (
    Command,
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
from .policy import RAW
from .sink import PathSink

T_Path = TypeVar("T_Path", bound="Path")


class Path(PathSink):
    """
    A sink that records every command it receives, verbatim. It accepts
    the complete command vocabulary, so it is both a convenient final
    consumer and a source that can be replayed into other sinks.
    """

    policy = RAW

    def __init__(self) -> None:
        self.commands: List[Command] = []
        self.updated = Signal()

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self.commands)} commands>"

    def copy(self: T_Path) -> T_Path:
        """Creates a deep copy of the Path object."""
        new_path = self.__class__()
        new_path.commands = deepcopy(self.commands)
        return new_path

    def is_empty(self) -> bool:
        return not self.commands

    def clear(self) -> None:
        self.commands = []

    def add(self, command: Command) -> None:
        self.commands.append(command)
        self.updated.send(self, command=command)

    def replay(self, sink: PathSink) -> None:
        """Sends all recorded commands, in order, to another sink."""
        for command in self.commands:
            command.apply(sink)

    def to_dict(self) -> Dict[str, Any]:
        return {"commands": [cmd.to_dict() for cmd in self.commands]}

    @classmethod
    def from_dict(cls: Type[T_Path], data: Dict[str, Any]) -> T_Path:
        new_path = cls()
        new_path.commands = [
            Command.from_dict(d) for d in data.get("commands", [])
        ]
        return new_path

    def move_to(self, x: Any, y: Any, relative: bool = False) -> None:
        self.add(MoveToCommand(x, y, relative))

    def line_to(self, x: Any, y: Any, relative: bool = False) -> None:
        self.add(LineToCommand(x, y, relative))

    def line_to_ortho(
        self, coord: Any, horizontal: bool, relative: bool = False
    ) -> None:
        self.add(LineToOrthoCommand(coord, horizontal, relative))

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
        self.add(CubicBezierToCommand(x1, y1, x2, y2, x, y, relative))

    def cubic_bezier_shorthand_to(
        self, x2: Any, y2: Any, x: Any, y: Any, relative: bool = False
    ) -> None:
        self.add(CubicBezierShorthandToCommand(x2, y2, x, y, relative))

    def quadratic_bezier_to(
        self, x1: Any, y1: Any, x: Any, y: Any, relative: bool = False
    ) -> None:
        self.add(QuadraticBezierToCommand(x1, y1, x, y, relative))

    def quadratic_bezier_shorthand_to(
        self, x: Any, y: Any, relative: bool = False
    ) -> None:
        self.add(QuadraticBezierShorthandToCommand(x, y, relative))

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
        self.add(
            EllipticalArcToCommand(
                rx, ry, x_axis_rotation, large_arc, sweep, x, y, relative
            )
        )

    def close_subpath(self) -> None:
        self.add(ClosePathCommand())

    def exit(self) -> None:
        self.add(ExitCommand())
