import io
import logging
from typing import Any
from ..core.policy import PathPolicy, RAW
from .encoder import PathEncoder

logger = logging.getLogger(__name__)


class SvgPathEncoder(PathEncoder):
    """
    Writes path commands as SVG path data, i.e. the value of a `d`
    attribute. Every command shape has an SVG counterpart, so by default
    no rewriting takes place; pass a stricter policy to obtain, for
    example, absolute-only or shorthand-free path data.
    """

    def __init__(self, policy: PathPolicy = RAW, precision: int = 12):
        self.policy = policy
        self.precision = precision
        self._output = io.StringIO()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.result()!r}>"

    def _num(self, value: Any) -> str:
        if isinstance(value, bool):
            return "1" if value else "0"
        return f"{float(value):.{self.precision}g}"

    def _write(self, letter: str, relative: bool, *args: Any) -> None:
        if self._output.tell():
            self._output.write(" ")
        self._output.write(letter.lower() if relative else letter)
        pairs = []
        for i in range(0, len(args) - 1, 2):
            pairs.append(f"{self._num(args[i])},{self._num(args[i + 1])}")
        if len(args) % 2:
            pairs.append(self._num(args[-1]))
        self._output.write(" ".join(pairs))

    def encode(self, path) -> str:
        """Returns the path data of `path` only, dropping earlier output."""
        self.clear()
        return super().encode(path)

    def result(self) -> str:
        return self._output.getvalue()

    def clear(self) -> None:
        self._output = io.StringIO()

    def move_to(self, x, y, relative=False):
        self._write("M", relative, x, y)

    def line_to(self, x, y, relative=False):
        self._write("L", relative, x, y)

    def line_to_ortho(self, coord, horizontal, relative=False):
        self._write("H" if horizontal else "V", relative, coord)

    def cubic_bezier_to(self, x1, y1, x2, y2, x, y, relative=False):
        self._write("C", relative, x1, y1, x2, y2, x, y)

    def cubic_bezier_shorthand_to(self, x2, y2, x, y, relative=False):
        self._write("S", relative, x2, y2, x, y)

    def quadratic_bezier_to(self, x1, y1, x, y, relative=False):
        self._write("Q", relative, x1, y1, x, y)

    def quadratic_bezier_shorthand_to(self, x, y, relative=False):
        self._write("T", relative, x, y)

    def elliptical_arc_to(
        self, rx, ry, x_axis_rotation, large_arc, sweep, x, y, relative=False
    ):
        if self._output.tell():
            self._output.write(" ")
        self._output.write("a" if relative else "A")
        self._output.write(
            f"{self._num(rx)},{self._num(ry)} {self._num(x_axis_rotation)} "
            f"{self._num(bool(large_arc))},{self._num(bool(sweep))} "
            f"{self._num(x)},{self._num(y)}"
        )

    def close_subpath(self):
        self._write("Z", False)

    def exit(self):
        logger.debug(f"SVG path data complete: {len(self.result())} chars")
