"""Platform filters gating a dependency edge."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

__all__ = ["PlatformCondition", "PlatformFilter"]


class PlatformFilter(StrEnum):
    """Build platforms a dependency can be restricted to.

    Values are the names used in encoded manifests.
    """

    IOS = "ios"
    MACOS = "macos"
    TVOS = "tvos"
    CATALYST = "catalyst"
    DRIVERKIT = "driverkit"
    WATCHOS = "watchos"
    VISIONOS = "visionos"


@dataclass(frozen=True, slots=True)
class PlatformCondition:
    """A non-empty set of platform filters.

    Build one with :meth:`when`; an empty filter set has no condition.
    """

    platform_filters: frozenset[PlatformFilter]

    def __post_init__(self) -> None:
        if not self.platform_filters:
            raise ValueError("PlatformCondition requires at least one filter, use when()")

    @classmethod
    def when(cls, platform_filters: Iterable[PlatformFilter]) -> PlatformCondition | None:
        """Return a condition for ``platform_filters``, or None if empty."""
        filters = frozenset(platform_filters)
        if not filters:
            return None
        return cls(platform_filters=filters)

    def sorted_names(self) -> list[str]:
        return sorted(f.value for f in self.platform_filters)
