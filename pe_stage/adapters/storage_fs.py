"""
Read-only view of the installer cache directory, used to tell an operator
which installers are already on disk.
"""
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

from pe_stage.internal.constants import CATALOG_SUFFIXES
from pe_stage.kernel.contracts import UI


class InstallerListing(Iterable[str]):
    """
    Installer filenames directly under a directory, sorted by name.

    The directory is scanned afresh on every iteration, so the listing can be
    walked any number of times and always reflects what is on disk.
    """

    def __init__(self, path: Path, suffixes: Sequence[str] = CATALOG_SUFFIXES):
        self._path = Path(path)
        self._suffixes = tuple(suffixes)

    def __iter__(self) -> Iterator[str]:
        if not self._path.is_dir():
            return iter(())
        names = sorted(
            entry.name
            for entry in self._path.iterdir()
            if entry.is_file() and entry.name.endswith(self._suffixes)
        )
        return iter(names)


class ArchiveCatalog:
    """
    The installers held in a cache directory. Never consulted when deciding
    whether to fetch something; it only feeds diagnostics.
    """

    def __init__(self, path: Path, ui: Optional[UI] = None):
        self.path = Path(path)
        self.ui = ui

    def list(self) -> InstallerListing:
        return InstallerListing(self.path)

    def display(self, ui: Optional[UI] = None) -> list:
        ui = ui or self.ui
        if ui is None:
            raise ValueError("ArchiveCatalog.display needs a UI to write to")

        names = list(self.list())
        if not names:
            ui.info("No installers available.")
        else:
            for name in names:
                ui.info(f"  - {name}")
        return names
