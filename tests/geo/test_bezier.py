import math
from fractions import Fraction
import numpy as np
import pytest
from pathnorm.geo.arc import arc_endpoint_to_center
from pathnorm.geo.bezier import (
    ArcToBezier,
    CubicSegment,
    HALF_PI,
    quadratic_to_cubic,
)

KAPPA = 4 / 3 * math.tan(math.pi / 8)


def cubic_point(p0, seg: CubicSegment, t: float):
    p0, p1, p2, p3 = (np.array(p) for p in (p0, *seg))
    mt = 1 - t
    return (
        mt**3 * p0 + 3 * mt**2 * t * p1 + 3 * mt * t**2 * p2 + t**3 * p3
    )


@pytest.mark.parametrize(
    "theta2, count",
    [
        (0.1, 1),
        (HALF_PI, 1),
        (math.pi, 2),
        (0.75 * math.pi, 2),
        (1.5 * math.pi + 0.01, 4),
        (2 * math.pi, 4),
        (-math.pi, 2),
    ],
)
def test_segment_count(theta2, count):
    arc = ArcToBezier((0, 0), 1, 1, 0, 0, theta2)
    assert len(arc) == count
    assert len(list(arc)) == count


def test_zero_sweep_has_no_segments():
    arc = ArcToBezier((0, 0), 1, 1, 0, 1.0, 1.0)
    assert len(arc) == 0
    assert list(arc) == []


def test_max_span_must_be_positive():
    with pytest.raises(ValueError):
        ArcToBezier((0, 0), 1, 1, 0, 0, math.pi, max_span=0)


def test_angles_cover_sweep():
    arc = ArcToBezier((0, 0), 1, 1, 0, 0, 0.75 * math.pi)
    angles = list(arc.angles())
    assert angles[0] == (0, pytest.approx(HALF_PI))
    # The last piece spans the remainder and ends exactly on theta2.
    assert angles[-1][1] == 0.75 * math.pi
    assert angles[-1][1] - angles[-1][0] == pytest.approx(math.pi / 4)
    assert sum(b - a for a, b in angles) == pytest.approx(0.75 * math.pi)


def test_angles_negative_sweep():
    arc = ArcToBezier((0, 0), 1, 1, 0, 0, -0.75 * math.pi)
    angles = list(arc.angles())
    assert all(b < a for a, b in angles)
    assert angles[-1][1] == -0.75 * math.pi


def test_quarter_circle_control_points():
    (seg,) = ArcToBezier((0, 0), 1, 1, 0, 0, HALF_PI)
    assert seg.p1 == pytest.approx((1, KAPPA))
    assert seg.p2 == pytest.approx((KAPPA, 1))
    assert seg.p3 == pytest.approx((0, 1))


def test_segments_end_on_the_ellipse():
    arc = ArcToBezier((3, 4), 5, 2, 0.3, 0.2, 4.0)
    for (a, b), seg in zip(arc.angles(), arc):
        assert seg.p3 == pytest.approx(arc.point_at(b))
    assert seg.p3 == pytest.approx(arc.end_point)


def test_approximation_error_is_small():
    arc = ArcToBezier((10, -5), 7, 7, 0, 0, 2 * math.pi)
    start = arc.start_point
    for seg in arc:
        for t in np.linspace(0, 1, 11):
            x, y = cubic_point(start, seg, t)
            radius = math.hypot(x - 10, y + 5)
            assert radius == pytest.approx(7, rel=1e-3)
        start = seg.p3


def test_iteration_is_restartable():
    arc = ArcToBezier((0, 0), 2, 1, 0, 0, math.pi)
    assert list(arc) == list(arc)


def test_from_arc():
    center = arc_endpoint_to_center((0, 0), (20, 0), 10, 10, 0, False, True)
    arc = ArcToBezier.from_arc(center)
    assert len(arc) == 2
    assert arc.start_point == pytest.approx((0, 0), abs=1e-9)
    assert arc.end_point == pytest.approx((20, 0), abs=1e-9)
    segments = list(arc)
    assert segments[0].p3 == pytest.approx((10, -10))
    assert segments[-1].p3 == pytest.approx((20, 0), abs=1e-9)


def test_rotated_ellipse_mapping():
    arc = ArcToBezier((1, 1), 2, 1, HALF_PI, 0, HALF_PI)
    # The ellipse's x axis points along +y after a quarter turn.
    assert arc.start_point == pytest.approx((1, 3))
    assert arc.end_point == pytest.approx((0, 1))


def test_quadratic_to_cubic():
    c1, c2 = quadratic_to_cubic((0, 0), (30, 30), (60, 0))
    assert c1 == (20, 20)
    assert c2 == (40, 20)


def test_quadratic_to_cubic_exact():
    c1, c2 = quadratic_to_cubic(
        (Fraction(0), Fraction(0)),
        (Fraction(1), Fraction(1)),
        (Fraction(2), Fraction(0)),
    )
    assert c1 == (Fraction(2, 3), Fraction(2, 3))
    assert c2 == (Fraction(4, 3), Fraction(2, 3))
