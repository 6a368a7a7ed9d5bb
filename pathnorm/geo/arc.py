import math
import logging
from typing import NamedTuple, Tuple
import numpy as np

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


class ArcCenter(NamedTuple):
    """
    An elliptical arc in center parameterization. The arc is traced by

        P(theta) = center + R(phi) @ (rx * cos(theta), ry * sin(theta))

    for theta running from theta1 to theta1 + delta_theta. `phi` is the
    x-axis rotation in radians. The radii are the corrected radii, which
    may be larger than the ones the arc was specified with.
    """

    center: Tuple[float, float]
    rx: float
    ry: float
    phi: float
    theta1: float
    delta_theta: float

    @property
    def theta2(self) -> float:
        return self.theta1 + self.delta_theta


def rotation_matrix(phi: float) -> np.ndarray:
    c, s = math.cos(phi), math.sin(phi)
    return np.array([[c, -s], [s, c]])


def is_degenerate_arc(
    start: Tuple[float, float],
    end: Tuple[float, float],
    rx: float,
    ry: float,
) -> bool:
    """
    An arc with a zero radius or coincident endpoints has no ellipse to
    speak of and must be rendered as a straight line.
    """
    return rx == 0 or ry == 0 or tuple(start) == tuple(end)


def arc_endpoint_to_center(
    start: Tuple[float, float],
    end: Tuple[float, float],
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
) -> ArcCenter:
    """
    Converts an SVG endpoint parameterized arc into its center
    parameterization.

    This follows the SVG implementation notes
    (https://www.w3.org/TR/SVG/implnote.html#ArcConversionEndpointToCenter),
    including the correction of out-of-range radii: radii too small to
    span the chord are scaled up uniformly until the arc just fits.

    Args:
        start: Absolute start point of the arc.
        end: Absolute end point of the arc.
        rx: Radius along the ellipse's own x axis.
        ry: Radius along the ellipse's own y axis.
        x_axis_rotation: Rotation of the ellipse in degrees.
        large_arc: Select the arc spanning more than 180 degrees.
        sweep: Select the arc drawn in the positive-angle direction.

    Returns:
        An ArcCenter whose delta_theta is positive if and only if `sweep`
        is set.

    Raises:
        ValueError: if the arc is degenerate (see is_degenerate_arc()), or
            its chord is too short to yield a finite center.
    """
    if is_degenerate_arc(start, end, rx, ry):
        raise ValueError("degenerate arc has no center parameterization")

    rx, ry = abs(float(rx)), abs(float(ry))
    phi = math.radians(float(x_axis_rotation))
    p0 = np.array(start, dtype=float)
    p1 = np.array(end, dtype=float)

    # Step 1: the midpoint of the chord in the ellipse's rotated frame.
    rot = rotation_matrix(phi)
    x1p, y1p = rot.T @ ((p0 - p1) / 2)

    # Radii correction.
    lam = (x1p / rx) ** 2 + (y1p / ry) ** 2
    if lam > 1:
        scale = math.sqrt(lam)
        logger.debug(f"Scaling arc radii by {scale} to span the chord")
        rx *= scale
        ry *= scale

    # Step 2: the center in the rotated frame.
    rx2, ry2 = rx * rx, ry * ry
    num = rx2 * ry2 - rx2 * y1p * y1p - ry2 * x1p * x1p
    den = rx2 * y1p * y1p + ry2 * x1p * x1p
    if den == 0:
        # The chord is too short to be represented.
        raise ValueError("arc chord underflows, no center parameterization")
    coef = math.sqrt(max(0.0, num / den))
    if large_arc == sweep:
        coef = -coef
    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx

    # Step 3: back to user space.
    center = rot @ np.array([cxp, cyp]) + (p0 + p1) / 2

    # Step 4: start angle and sweep.
    ux, uy = (x1p - cxp) / rx, (y1p - cyp) / ry
    vx, vy = (-x1p - cxp) / rx, (-y1p - cyp) / ry
    theta1 = math.atan2(uy, ux)
    delta_theta = math.atan2(vy, vx) - theta1
    if sweep and delta_theta < 0:
        delta_theta += TWO_PI
    elif not sweep and delta_theta > 0:
        delta_theta -= TWO_PI

    if not (np.all(np.isfinite(center)) and math.isfinite(delta_theta)):
        raise ValueError("arc has no finite center parameterization")

    return ArcCenter(
        (float(center[0]), float(center[1])),
        rx,
        ry,
        phi,
        theta1,
        delta_theta,
    )


def arc_point_at(arc: ArcCenter, theta: float) -> Tuple[float, float]:
    """Returns the point of the (full) ellipse of `arc` at angle theta."""
    local = np.array([arc.rx * math.cos(theta), arc.ry * math.sin(theta)])
    x, y = rotation_matrix(arc.phi) @ local + arc.center
    return float(x), float(y)
