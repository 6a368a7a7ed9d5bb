import logging
import cairo
from ..core.policy import PathPolicy
from .encoder import PathEncoder

logger = logging.getLogger(__name__)

# Cairo paths consist of moves, lines, cubic curves and closes. The
# relative variants need a current point, which a fresh context lacks, so
# only absolute coordinates are accepted.
CAIRO_POLICY = PathPolicy(
    absolute_only=True,
    no_ortho_shorthand=True,
    no_quadratic_shorthand=True,
    no_cubic_shorthand=True,
    quadratic_as_cubic=True,
    arc_as_cubic=True,
    name="cairo",
)


class CairoPathEncoder(PathEncoder):
    """
    Builds a path on a cairo.Context. The path is left on the context,
    so the caller decides whether to stroke, fill or clip it.
    """

    policy = CAIRO_POLICY

    def __init__(self, ctx: cairo.Context):
        self.ctx = ctx

    def result(self) -> cairo.Context:
        return self.ctx

    def move_to(self, x, y, relative=False):
        self.ctx.move_to(x, y)

    def line_to(self, x, y, relative=False):
        self.ctx.line_to(x, y)

    def cubic_bezier_to(self, x1, y1, x2, y2, x, y, relative=False):
        self.ctx.curve_to(x1, y1, x2, y2, x, y)

    def close_subpath(self):
        self.ctx.close_path()

    def exit(self):
        pass

    def _unsupported(self, name: str):
        raise NotImplementedError(
            f"cairo has no {name}; wrap the encoder in a PathAdapter"
        )

    def line_to_ortho(self, coord, horizontal, relative=False):
        self._unsupported("horizontal/vertical line")

    def cubic_bezier_shorthand_to(self, x2, y2, x, y, relative=False):
        self._unsupported("smooth cubic")

    def quadratic_bezier_to(self, x1, y1, x, y, relative=False):
        self._unsupported("quadratic curve")

    def quadratic_bezier_shorthand_to(self, x, y, relative=False):
        self._unsupported("smooth quadratic")

    def elliptical_arc_to(
        self, rx, ry, x_axis_rotation, large_arc, sweep, x, y, relative=False
    ):
        self._unsupported("elliptical arc")
