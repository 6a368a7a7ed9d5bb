from pathnorm.core.state import PathState, Point


def test_initial_state():
    state = PathState()
    assert state.current_point == (0.0, 0.0)
    assert state.subpath_start == (0.0, 0.0)
    assert state.last_cubic_control is None
    assert state.last_quadratic_control is None


def test_record_move_sets_subpath_start():
    state = PathState()
    state.record_cubic(Point(5, 5), Point(4, 4))
    state.record_move(Point(10, 20))
    assert state.current_point == (10, 20)
    assert state.subpath_start == (10, 20)
    assert state.last_cubic_control is None


def test_record_line_and_close():
    state = PathState()
    state.record_move(Point(1, 2))
    state.record_line_endpoint(Point(5, 6))
    assert state.current_point == (5, 6)
    assert state.subpath_start == (1, 2)

    state.record_quadratic(Point(8, 8), Point(7, 9))
    state.record_close()
    assert state.current_point == (1, 2)
    assert state.last_quadratic_control is None


def test_curve_memories_are_exclusive():
    state = PathState()
    state.record_cubic(Point(10, 0), Point(8, 2))
    assert state.last_cubic_control == (8, 2)
    assert state.last_quadratic_control is None

    state.record_quadratic(Point(20, 0), Point(15, 5))
    assert state.last_quadratic_control == (15, 5)
    assert state.last_cubic_control is None

    state.record_cubic(Point(30, 0), Point(25, 5))
    assert state.last_quadratic_control is None

    state.record_arc(Point(40, 0))
    assert state.last_cubic_control is None
    assert state.current_point == (40, 0)


def test_reflection():
    state = PathState()
    state.record_move(Point(0, 0))
    # Nothing to reflect: the current point itself.
    assert state.reflect_cubic() == (0, 0)

    state.record_cubic(Point(10, 10), Point(10, 0))
    assert state.reflect_cubic() == (10, 20)
    # The quadratic memory is absent after a cubic.
    assert state.reflect_quadratic() == (10, 10)

    state.record_quadratic(Point(20, 0), Point(15, 5))
    assert state.reflect_quadratic() == (25, -5)


def test_to_absolute_and_reset():
    state = PathState()
    state.record_move(Point(3, 4))
    assert state.to_absolute(1, -1) == (4, 3)

    state.reset()
    assert state.current_point == (0.0, 0.0)
    assert state.subpath_start == (0.0, 0.0)


def test_custom_origin():
    state = PathState(Point(0, 0))
    assert isinstance(state.current_point.x, int)
    state.record_line_endpoint(Point(3, 3))
    state.reset()
    assert state.current_point == (0, 0)
