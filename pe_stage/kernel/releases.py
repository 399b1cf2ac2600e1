"""
Known installer releases and the agent platforms each one ships packages for.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, Tuple

from pe_stage.kernel.errors import UnknownReleaseError

Platform = Tuple[str, str]


@dataclass(frozen=True)
class Release:
    version: str
    platforms: FrozenSet[Platform] = field(default_factory=frozenset)

    def supports(self, family: str, release: str) -> bool:
        return (family.lower(), str(release)) in self.platforms

    def families(self) -> Dict[str, list]:
        """Supported releases grouped by platform family."""
        grouped: Dict[str, list] = {}
        for family, release in sorted(self.platforms):
            grouped.setdefault(family, []).append(release)
        return grouped


def _release(version: str, **families) -> Release:
    platforms = frozenset(
        (family, release)
        for family, releases in families.items()
        for release in releases
    )
    return Release(version=version, platforms=platforms)


RELEASES: Dict[str, Release] = {
    "2019.0.0": _release(
        "2019.0.0",
        el=["5", "6", "7"],
        sles=["11", "12"],
        ubuntu=["14.04", "16.04", "18.04"],
        windows=["2008", "2008R2", "2012", "2012R2", "2016", "7", "8", "8.1", "10"],
    ),
}


def get_release(version: str) -> Release:
    try:
        return RELEASES[version]
    except KeyError:
        raise UnknownReleaseError(version) from None


def iter_releases() -> Iterator[Release]:
    for version in sorted(RELEASES):
        yield RELEASES[version]
