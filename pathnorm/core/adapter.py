from __future__ import annotations
import logging
import numbers
from typing import Any, Callable, Iterable, Optional, Union
from ..geo.arc import arc_endpoint_to_center
from ..geo.bezier import ArcToBezier, HALF_PI, quadratic_to_cubic
from .commands import Command
from .policy import DEFAULT_POLICY, PathPolicy, PolicyError
from .sink import PathSink
from .state import PathState, Point

logger = logging.getLogger(__name__)


class PathAdapter(PathSink):
    """
    Sits in front of a PathSink and rewrites every incoming command into a
    shape the sink's PathPolicy allows: relative coordinates are made
    absolute, horizontal/vertical lines become general lines, smooth
    curves get their implied control point, quadratics become cubics and
    elliptical arcs become runs of cubics, each only if the policy asks
    for it.

    An adapter owns the PathState of exactly one path at a time and must
    not be shared between concurrently processed paths.
    """

    def __init__(
        self,
        output_context: PathSink,
        policy: Optional[PathPolicy] = None,
        number_type: Callable[[Any], Any] = float,
        max_arc_span: float = HALF_PI,
    ) -> None:
        if policy is None:
            policy = getattr(output_context, "policy", DEFAULT_POLICY)
        if (
            policy.needs_division()
            and isinstance(number_type, type)
            and issubclass(number_type, numbers.Integral)
        ):
            raise PolicyError(
                f"{number_type.__name__} coordinates cannot represent "
                f"quadratic-to-cubic or arc-to-cubic conversions"
            )
        self.policy: PathPolicy = policy
        self.number_type = number_type
        self.max_arc_span = max_arc_span
        self._output_context = output_context
        zero = number_type(0)
        self.state = PathState(Point(zero, zero))

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} policy={self.policy} "
            f"context={self._output_context!r}>"
        )

    @property
    def output_context(self) -> PathSink:
        """The sink this adapter forwards to."""
        return self._output_context

    def get_output_context(self) -> PathSink:
        return self._output_context

    def reset(self) -> None:
        """Forgets all path state, ready for a new path."""
        self.state.reset()

    def dispatch(self, command: Command) -> None:
        command.apply(self)

    def feed(self, commands: Iterable[Command]) -> None:
        for command in commands:
            command.apply(self)

    def move_to(self, x: Any, y: Any, relative: bool = False) -> None:
        if relative:
            end = self.state.to_absolute(x, y)
            if self.policy.absolute_only:
                self.move_to(end.x, end.y)
                return
        else:
            end = Point(x, y)
        self._output_context.move_to(x, y, relative=relative)
        self.state.record_move(end)

    def line_to(self, x: Any, y: Any, relative: bool = False) -> None:
        if relative:
            end = self.state.to_absolute(x, y)
            if self.policy.absolute_only:
                self.line_to(end.x, end.y)
                return
        else:
            end = Point(x, y)
        self._output_context.line_to(x, y, relative=relative)
        self.state.record_line_endpoint(end)

    def line_to_ortho(
        self, coord: Any, horizontal: bool, relative: bool = False
    ) -> None:
        cx, cy = self.state.current_point
        if self.policy.no_ortho_shorthand:
            if relative:
                held = self.number_type(0)
            else:
                held = cy if horizontal else cx
            if horizontal:
                self.line_to(coord, held, relative=relative)
            else:
                self.line_to(held, coord, relative=relative)
            return

        if relative:
            value = (cx if horizontal else cy) + coord
            if self.policy.absolute_only:
                self.line_to_ortho(value, horizontal)
                return
        else:
            value = coord
        self._output_context.line_to_ortho(
            coord, horizontal, relative=relative
        )
        if horizontal:
            end = Point(value, cy)
        else:
            end = Point(cx, value)
        self.state.record_line_endpoint(end)

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
        if relative:
            c2 = self.state.to_absolute(x2, y2)
            end = self.state.to_absolute(x, y)
            if self.policy.absolute_only:
                c1 = self.state.to_absolute(x1, y1)
                self.cubic_bezier_to(c1.x, c1.y, c2.x, c2.y, end.x, end.y)
                return
        else:
            c2 = Point(x2, y2)
            end = Point(x, y)
        self._output_context.cubic_bezier_to(
            x1, y1, x2, y2, x, y, relative=relative
        )
        self.state.record_cubic(end, c2)

    def cubic_bezier_shorthand_to(
        self, x2: Any, y2: Any, x: Any, y: Any, relative: bool = False
    ) -> None:
        if self.policy.no_cubic_shorthand:
            c1 = self.state.reflect_cubic()
            if relative:
                cx, cy = self.state.current_point
                c1 = Point(c1.x - cx, c1.y - cy)
            self.cubic_bezier_to(c1.x, c1.y, x2, y2, x, y, relative=relative)
            return

        if relative:
            c2 = self.state.to_absolute(x2, y2)
            end = self.state.to_absolute(x, y)
            if self.policy.absolute_only:
                self.cubic_bezier_shorthand_to(c2.x, c2.y, end.x, end.y)
                return
        else:
            c2 = Point(x2, y2)
            end = Point(x, y)
        self._output_context.cubic_bezier_shorthand_to(
            x2, y2, x, y, relative=relative
        )
        self.state.record_cubic(end, c2)

    def quadratic_bezier_to(
        self, x1: Any, y1: Any, x: Any, y: Any, relative: bool = False
    ) -> None:
        if relative:
            control = self.state.to_absolute(x1, y1)
            end = self.state.to_absolute(x, y)
            if self.policy.absolute_only:
                self.quadratic_bezier_to(control.x, control.y, end.x, end.y)
                return
        else:
            control = Point(x1, y1)
            end = Point(x, y)

        if self.policy.quadratic_as_cubic:
            if relative:
                zero = self.number_type(0)
                c1, c2 = quadratic_to_cubic((zero, zero), (x1, y1), (x, y))
            else:
                c1, c2 = quadratic_to_cubic(
                    self.state.current_point, control, end
                )
            self.cubic_bezier_to(*c1, *c2, x, y, relative=relative)
            # A following smooth quadratic still reflects the quadratic
            # control point, not the synthesized cubic one.
            self.state.record_quadratic(end, control)
            return

        self._output_context.quadratic_bezier_to(
            x1, y1, x, y, relative=relative
        )
        self.state.record_quadratic(end, control)

    def quadratic_bezier_shorthand_to(
        self, x: Any, y: Any, relative: bool = False
    ) -> None:
        control = self.state.reflect_quadratic()
        if self.policy.expands_quadratic_shorthand():
            if relative:
                cx, cy = self.state.current_point
                control = Point(control.x - cx, control.y - cy)
            self.quadratic_bezier_to(
                control.x, control.y, x, y, relative=relative
            )
            return

        if relative:
            end = self.state.to_absolute(x, y)
            if self.policy.absolute_only:
                self.quadratic_bezier_shorthand_to(end.x, end.y)
                return
        else:
            end = Point(x, y)
        self._output_context.quadratic_bezier_shorthand_to(
            x, y, relative=relative
        )
        self.state.record_quadratic(end, control)

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
        if relative:
            end = self.state.to_absolute(x, y)
            if self.policy.absolute_only or self.policy.arc_as_cubic:
                self.elliptical_arc_to(
                    rx, ry, x_axis_rotation, large_arc, sweep, end.x, end.y
                )
                return
        else:
            end = Point(x, y)

        if self.policy.arc_as_cubic:
            self._arc_as_cubic(rx, ry, x_axis_rotation, large_arc, sweep, end)
            return

        self._output_context.elliptical_arc_to(
            rx, ry, x_axis_rotation, large_arc, sweep, x, y,
            relative=relative,
        )
        self.state.record_arc(end)

    def _arc_as_cubic(
        self,
        rx: Any,
        ry: Any,
        x_axis_rotation: Any,
        large_arc: bool,
        sweep: bool,
        end: Point,
    ) -> None:
        start = self.state.current_point
        try:
            arc = arc_endpoint_to_center(
                start, end, rx, ry, x_axis_rotation, large_arc, sweep
            )
        except ValueError as e:
            # Zero radius, coincident or too close end points.
            logger.debug(
                f"Degenerate arc from {start} to {end} (rx={rx}, ry={ry}): "
                f"{e}, emitting a line"
            )
            self.line_to(end.x, end.y)
            return
        segments = ArcToBezier.from_arc(arc, max_span=self.max_arc_span)
        logger.debug(f"Subdividing arc into {len(segments)} cubic segment(s)")

        n = self.number_type
        last = len(segments) - 1
        for i, (p1, p2, p3) in enumerate(segments):
            # The final end point is taken verbatim so that no rounding
            # error accumulates in the current point.
            px, py = (end.x, end.y) if i == last else (n(p3[0]), n(p3[1]))
            self.cubic_bezier_to(
                n(p1[0]), n(p1[1]), n(p2[0]), n(p2[1]), px, py
            )

    def close_subpath(self) -> None:
        self._output_context.close_subpath()
        self.state.record_close()

    def exit(self) -> None:
        self._output_context.exit()


def adapt(
    output_context: PathSink,
    policy: Optional[PathPolicy] = None,
    number_type: Callable[[Any], Any] = float,
) -> Union[PathSink, PathAdapter]:
    """
    Returns a sink that accepts the complete command vocabulary and
    forwards to `output_context`. If the policy (by default the one the
    context declares) requires no rewriting, the context itself is
    returned and no adapter is involved.
    """
    if policy is None:
        policy = getattr(output_context, "policy", DEFAULT_POLICY)
    if not policy.needs_adapter():
        logger.debug(
            f"{type(output_context).__name__} accepts every command shape, "
            "bypassing adapter"
        )
        return output_context
    return PathAdapter(output_context, policy, number_type=number_type)


def get_output_context(sink: Union[PathSink, PathAdapter]) -> PathSink:
    """Returns the context behind a sink obtained from adapt()."""
    if isinstance(sink, PathAdapter):
        return sink.output_context
    return sink
