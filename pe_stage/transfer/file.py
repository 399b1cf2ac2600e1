import shutil
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from pe_stage.internal.logging import get_logger
from pe_stage.kernel.contracts import TransferJob
from pe_stage.kernel.errors import SourceNotFound, TransferError
from pe_stage.transfer.base import TransferStrategy

logger = get_logger(__name__)


def local_path(locator: str) -> Path:
    """
    Converts a bare path or a file:// URI into a filesystem path.
    """
    if locator.startswith("file:"):
        parsed = urlparse(locator)
        if parsed.netloc in ("", "localhost"):
            return Path(url2pathname(parsed.path))
        # file://server/share/... names a UNC path
        return Path(url2pathname(f"//{parsed.netloc}{parsed.path}"))
    return Path(locator)


class LocalCopy(TransferStrategy):
    """Copies an installer from a local file."""

    def copy(self, job: TransferJob) -> Path:
        source = local_path(job.source)
        if not source.is_file():
            raise SourceNotFound(str(source))

        logger.info("copying installer", source=str(source), destination=str(job.destination))
        try:
            with open(source, "rb") as src, self._staged(job.destination) as dst:
                shutil.copyfileobj(src, dst, length=1024 * 1024)
        except OSError as e:
            raise TransferError(f"Copying {source} to {job.destination} failed: {e}", source=str(source)) from e

        logger.info("copy complete", destination=str(job.destination))
        return Path(job.destination)
