# flake8: noqa:F401
from .arc import (
    ArcCenter,
    arc_endpoint_to_center,
    arc_point_at,
    is_degenerate_arc,
)
from .bezier import ArcToBezier, CubicSegment, HALF_PI, quadratic_to_cubic
