"""
pathnorm rewrites streams of vector path commands (SVG style moves, lines,
Bezier curves and elliptical arcs, in absolute or relative coordinates) into
the subset of command shapes a consumer declares it can handle.
"""

from .core import (
    PathPolicy,
    PolicyError,
    RAW,
    NO_SHORTHANDS,
    MINIMAL,
    PathSink,
    Path,
    PathAdapter,
    adapt,
    get_output_context,
)

__version__ = "0.1.0"

__all__ = [
    "PathPolicy",
    "PolicyError",
    "RAW",
    "NO_SHORTHANDS",
    "MINIMAL",
    "PathSink",
    "Path",
    "PathAdapter",
    "adapt",
    "get_output_context",
]
