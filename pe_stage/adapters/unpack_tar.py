"""
Extraction of gzip-compressed tar installers.
"""
import tarfile
import zlib
from pathlib import Path, PurePosixPath
from typing import Optional

from pe_stage.internal.logging import get_logger
from pe_stage.kernel.errors import ExtractionError

logger = get_logger(__name__)

# Errors tarfile and gzip raise on truncated or corrupt input.
_CORRUPT = (tarfile.TarError, EOFError, zlib.error, OSError)


def _top_level(member_name: str) -> Optional[str]:
    parts = [p for p in PurePosixPath(member_name).parts if p not in ("/", ".")]
    return parts[0] if parts else None


class TarExtractor:
    """
    Unpacks an installer tarball into a destination directory.

    Installers expand into a single top-level directory. When an archive
    has several top-level entries, the one named by its first member wins
    (entries for the archive root itself, such as `./`, are passed over);
    the choice only depends on member order, so it is stable for a given
    archive.
    """

    def __init__(self, archive_path: Path, destination_dir: Path):
        self.archive_path = Path(archive_path)
        self.destination_dir = Path(destination_dir)
        self._dirname: Optional[str] = None

    def _open(self) -> tarfile.TarFile:
        if not self.archive_path.is_file():
            raise ExtractionError(f"Installer archive {self.archive_path} does not exist", archive=str(self.archive_path))
        try:
            return tarfile.open(self.archive_path, mode="r:gz")
        except _CORRUPT as e:
            raise ExtractionError(f"Cannot read installer archive {self.archive_path}: {e}", archive=str(self.archive_path)) from e

    @property
    def dirname(self) -> str:
        """
        The top-level directory the archive expands into, read from its
        first named member without extracting anything.
        """
        if self._dirname is None:
            seen = False
            with self._open() as tar:
                try:
                    for member in tar:
                        seen = True
                        self._dirname = _top_level(member.name)
                        if self._dirname is not None:
                            break
                except _CORRUPT as e:
                    raise ExtractionError(f"Cannot read installer archive {self.archive_path}: {e}", archive=str(self.archive_path)) from e
            if not seen:
                raise ExtractionError(f"Installer archive {self.archive_path} is empty", archive=str(self.archive_path))
            if self._dirname is None:
                raise ExtractionError(f"Installer archive {self.archive_path} has no named entries", archive=str(self.archive_path))
        return self._dirname

    def unpack(self) -> str:
        """
        Extracts every member under the destination directory and returns the
        top-level directory name. Existing files there are left alone; a
        failure part way leaves whatever was already written.
        """
        dirname = self.dirname
        self.destination_dir.mkdir(parents=True, exist_ok=True)
        logger.info("extracting installer", archive=str(self.archive_path), destination=str(self.destination_dir))

        with self._open() as tar:
            try:
                tar.extractall(self.destination_dir, filter="data")
            except _CORRUPT as e:
                raise ExtractionError(f"Extracting {self.archive_path} failed: {e}", archive=str(self.archive_path)) from e

        logger.info("extraction complete", dirname=dirname)
        return dirname
