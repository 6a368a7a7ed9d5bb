import pytest
from pathnorm.core.commands import (
    MoveToCommand,
    LineToCommand,
    LineToOrthoCommand,
    CubicBezierToCommand,
    EllipticalArcToCommand,
    ClosePathCommand,
    ExitCommand,
)
from pathnorm.core.path import Path


@pytest.fixture
def square():
    path = Path()
    path.move_to(0, 0)
    path.line_to_ortho(10, True)
    path.line_to(10, 10)
    path.line_to_ortho(-10, True, relative=True)
    path.close_subpath()
    path.exit()
    return path


def test_records_commands_verbatim(square):
    assert len(square) == 6
    assert square.commands == [
        MoveToCommand(0, 0),
        LineToOrthoCommand(10, True),
        LineToCommand(10, 10),
        LineToOrthoCommand(-10, True, relative=True),
        ClosePathCommand(),
        ExitCommand(),
    ]


def test_is_empty_and_clear(square):
    assert Path().is_empty()
    assert not square.is_empty()
    square.clear()
    assert square.is_empty()


def test_updated_signal(recorder):
    received = []

    def on_updated(sender, command):
        received.append((sender, command))

    recorder.updated.connect(on_updated)
    recorder.cubic_bezier_to(1, 2, 3, 4, 5, 6, relative=True)
    assert received == [
        (recorder, CubicBezierToCommand(1, 2, 3, 4, 5, 6, relative=True))
    ]


def test_copy_is_deep(square):
    clone = square.copy()
    assert clone.commands == square.commands
    clone.commands[0].x = 99
    assert square.commands[0].x == 0


def test_replay(square, recorder):
    square.replay(recorder)
    assert recorder.commands == square.commands


def test_iter(square):
    assert [type(c) for c in square][:2] == [
        MoveToCommand,
        LineToOrthoCommand,
    ]


def test_to_dict_from_dict(recorder):
    recorder.move_to(1, 2)
    recorder.elliptical_arc_to(5, 5, 0, False, True, 11, 2)
    data = recorder.to_dict()
    assert data["commands"][1]["type"] == "EllipticalArcToCommand"

    restored = Path.from_dict(data)
    assert restored.commands == [
        MoveToCommand(1, 2),
        EllipticalArcToCommand(5, 5, 0, False, True, 11, 2),
    ]
    assert Path.from_dict({}).is_empty()
