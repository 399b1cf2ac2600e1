"""
The installer acquirer.

An Archive is bound to one installer filename pattern, an optional version
and an Environment. It can fill its cache entry from a generic locator, a
local directory or a URL, and unpack the cached installer into a working
directory. Every operation is guarded by the existence of its destination,
so calling it again after success does nothing.
"""
from pathlib import Path
from typing import Callable, Optional, Union

from pe_stage.adapters.storage_fs import ArchiveCatalog
from pe_stage.adapters.unpack_tar import TarExtractor
from pe_stage.internal.constants import ARCHIVE_SUFFIX
from pe_stage.internal.logging import get_logger
from pe_stage.kernel.contracts import ArtifactDescriptor, Environment, Skipped, TransferJob
from pe_stage.kernel.errors import NoInstallerSource
from pe_stage.kernel.idempotent import idempotent
from pe_stage.kernel.versioning import versioned_path
from pe_stage.transfer import factory
from pe_stage.transfer.file import LocalCopy
from pe_stage.transfer.http import HTTPDownload

logger = get_logger(__name__)


class Archive:
    """
    A packed installer in the shared cache directory.
    """

    def __init__(
        self,
        filename: str,
        env: Environment,
        version: Optional[str] = None,
        http_timeout: Optional[float] = None,
        extractor_factory: Callable[[Path, Path], TarExtractor] = TarExtractor,
    ):
        self.env = env
        self.descriptor = ArtifactDescriptor(
            filename_pattern=filename,
            cache_root=Path(env.archive_dir),
            version=version,
        )
        self.http_timeout = http_timeout
        self._extractor_factory = extractor_factory

    @property
    def filename(self) -> str:
        """The uninterpolated filename pattern."""
        return self.descriptor.filename_pattern

    @property
    def version(self) -> Optional[str]:
        return self.descriptor.version

    @property
    def path(self) -> Path:
        """Where the installer lives in the cache."""
        return self.descriptor.cache_path

    def exists(self) -> bool:
        return self.path.exists()

    def __str__(self) -> str:
        return self.descriptor.filename

    def __repr__(self) -> str:
        return f"Archive({self.descriptor.filename!r}, archive_dir={str(self.env.archive_dir)!r})"

    @property
    def installer_dir(self) -> str:
        """
        Best guess at the directory the installer unpacks into: the versioned
        filename without its archive suffix.
        """
        name = str(self)
        if name.endswith(ARCHIVE_SUFFIX):
            return name[: -len(ARCHIVE_SUFFIX)]
        return name

    # ------------------------------------------------------------------
    # Acquisition
    # ------------------------------------------------------------------

    def fetch(self, base_locator: Optional[str]) -> Union[Skipped, Path]:
        """
        Fills the cache from ``base_locator``, which may be a directory path,
        a file:// URI or an http(s) URL. The transfer strategy is picked from
        the locator's scheme.
        """
        def _fetch() -> Path:
            if not base_locator:
                self.env.ui.error(f"Cannot fetch installer {self}; no download source available.")
                self.env.ui.error("")
                self.env.ui.error("Installers available for use:")
                self._raise_no_source()

            source = versioned_path(f"{base_locator.rstrip('/')}/{self.filename}", self.version)
            transfer = factory.generate(source, timeout=self.http_timeout)
            return transfer.copy(TransferJob(source=source, destination=self.path))

        return idempotent(self.path, f"Installer {self}", _fetch, ui=self.env.ui)

    def copy_from(self, source_dir: Union[str, Path]) -> Union[Skipped, Path]:
        """
        Copies the installer out of a local directory that holds it.
        """
        def _copy() -> Path:
            source = versioned_path(str(Path(source_dir) / self.filename), self.version)
            return LocalCopy().copy(TransferJob(source=source, destination=self.path))

        return idempotent(self.path, f"Installer {self}", _copy, ui=self.env.ui)

    def download_from(self, url_base: Optional[str]) -> Union[Skipped, Path]:
        """
        Downloads the installer from ``url_base``/filename.
        """
        def _download() -> Path:
            if not url_base:
                self.env.ui.error(f"Installer {self} is not available.")
                self._raise_no_source()

            source = versioned_path(f"{url_base.rstrip('/')}/{self.filename}", self.version)
            return HTTPDownload(timeout=self.http_timeout).copy(TransferJob(source=source, destination=self.path))

        return idempotent(self.path, f"Installer {self}", _download, ui=self.env.ui)

    def _raise_no_source(self):
        catalog = ArchiveCatalog(self.env.archive_dir, self.env.ui)
        available = catalog.display()
        logger.error("no installer source", filename=str(self), cached=available)
        raise NoInstallerSource(str(self), available=available)

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def unpack_to(self, target_dir: Union[str, Path]) -> str:
        """
        Unpacks the cached installer under ``target_dir`` and returns the name
        of the directory it expanded into.

        The guard is the existence of ``target_dir/<name>`` where the name is
        read from the archive's first member. If a directory of that name is
        already there for any reason, extraction is skipped.
        """
        tar = self._extractor_factory(self.path, Path(target_dir))
        dirname = tar.dirname
        destination = Path(target_dir) / dirname

        idempotent(destination, f"Unpacked archive {self}", tar.unpack, ui=self.env.ui)
        return dirname
