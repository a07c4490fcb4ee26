"""Version information for ftsbench."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Version:
    """Semantic version of ftsbench plus its release date.

    Reports carry their own schema version, ``REPORT_VERSION``, which only
    changes when the report layout does.
    """

    major: int
    minor: int
    patch: int
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.1.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return version info including the release date."""
        return f"{self} ({self.date.strftime('%Y-%m-%d')})"

    def semver(self) -> tuple[int, int, int]:
        """Return semantic version as tuple (major, minor, patch)."""
        return (self.major, self.minor, self.patch)


FTSBENCH_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    date=datetime(2026, 10, 1),
)

# Schema version of the structured report; bump on incompatible changes.
REPORT_VERSION = "1.0.0"
