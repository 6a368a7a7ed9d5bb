from __future__ import annotations
import logging
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class PolicyError(ValueError):
    """
    Raised when a PathPolicy (or an adapter built from one) describes a
    combination of capabilities that cannot be honored.
    """

    pass


@dataclass(frozen=True)
class PathPolicy:
    """
    Declares which path command shapes a sink is able to accept.

    Every flag names a restriction. A policy with no flag set describes a
    sink that accepts the full command vocabulary, in which case no
    adaptation is needed at all.
    """

    absolute_only: bool = False
    no_ortho_shorthand: bool = False
    no_quadratic_shorthand: bool = False
    no_cubic_shorthand: bool = False
    quadratic_as_cubic: bool = False
    arc_as_cubic: bool = False
    name: Optional[str] = None

    def __post_init__(self) -> None:
        # Quadratics re-expressed as cubics would otherwise pollute the
        # history that a smooth cubic reflects against.
        if self.quadratic_as_cubic and not self.no_cubic_shorthand:
            raise PolicyError(
                "quadratic_as_cubic requires no_cubic_shorthand"
            )

    def needs_adapter(self) -> bool:
        """Whether any command has to be rewritten for this policy."""
        return (
            self.absolute_only
            or self.no_ortho_shorthand
            or self.no_quadratic_shorthand
            or self.no_cubic_shorthand
            or self.quadratic_as_cubic
            or self.arc_as_cubic
        )

    def expands_quadratic_shorthand(self) -> bool:
        return self.no_quadratic_shorthand or self.quadratic_as_cubic

    def needs_division(self) -> bool:
        """
        Whether the rewrites requested by this policy divide coordinates,
        which rules out integral coordinate types.
        """
        return self.quadratic_as_cubic or self.arc_as_cubic

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        if d["name"] is None:
            del d["name"]
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PathPolicy:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(
                f"Ignoring unknown policy keys: {', '.join(sorted(unknown))}"
            )
        kwargs: Dict[str, Any] = {}
        for key in known:
            if key not in data:
                continue
            value = data[key]
            if key != "name" and not isinstance(value, bool):
                raise PolicyError(
                    f"Policy flag {key} must be true or false, got {value!r}"
                )
            kwargs[key] = value
        return cls(**kwargs)


RAW = PathPolicy(name="raw")

NO_SHORTHANDS = PathPolicy(
    no_ortho_shorthand=True,
    no_quadratic_shorthand=True,
    no_cubic_shorthand=True,
    name="no_shorthands",
)

MINIMAL = PathPolicy(
    absolute_only=True,
    no_ortho_shorthand=True,
    no_quadratic_shorthand=True,
    no_cubic_shorthand=True,
    quadratic_as_cubic=True,
    arc_as_cubic=True,
    name="minimal",
)

DEFAULT_POLICY = NO_SHORTHANDS

PRESETS: Dict[str, PathPolicy] = {
    p.name: p for p in (RAW, NO_SHORTHANDS, MINIMAL)  # type: ignore[misc]
}
