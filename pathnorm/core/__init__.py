"""
The core module contains the path command vocabulary, the sink interface,
the capability policies and the PathAdapter that rewrites commands to fit a
sink's policy.
"""

from .policy import (
    PathPolicy,
    PolicyError,
    RAW,
    NO_SHORTHANDS,
    MINIMAL,
    DEFAULT_POLICY,
    PRESETS,
)
from .state import Point, PathState
from .sink import PathSink
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
from .path import Path
from .adapter import PathAdapter, adapt, get_output_context

__all__ = [
    "PathPolicy",
    "PolicyError",
    "RAW",
    "NO_SHORTHANDS",
    "MINIMAL",
    "DEFAULT_POLICY",
    "PRESETS",
    "Point",
    "PathState",
    "PathSink",
    "Command",
    "MoveToCommand",
    "LineToCommand",
    "LineToOrthoCommand",
    "CubicBezierToCommand",
    "CubicBezierShorthandToCommand",
    "QuadraticBezierToCommand",
    "QuadraticBezierShorthandToCommand",
    "EllipticalArcToCommand",
    "ClosePathCommand",
    "ExitCommand",
    "Path",
    "PathAdapter",
    "adapt",
    "get_output_context",
]
