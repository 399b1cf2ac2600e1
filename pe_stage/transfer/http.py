from pathlib import Path
from typing import Optional

import requests

from pe_stage.internal.logging import get_logger
from pe_stage.kernel.contracts import TransferJob
from pe_stage.kernel.errors import TransferError
from pe_stage.transfer.base import TransferStrategy

logger = get_logger(__name__)


class HTTPDownload(TransferStrategy):
    """
    Streams an installer from an http(s) URL.

    No retries: a failed download raises TransferError straight away and the
    caller decides whether to try again.
    """
    CHUNK_SIZE = 1024 * 1024

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def copy(self, job: TransferJob) -> Path:
        logger.info("downloading installer", url=job.source, destination=str(job.destination))
        try:
            with requests.get(job.source, stream=True, timeout=self.timeout) as r:
                if not 200 <= r.status_code < 300:
                    raise TransferError(
                        f"Download of {job.source} failed: HTTP {r.status_code} {r.reason or ''}".rstrip(),
                        status=r.status_code,
                        source=job.source,
                    )
                with self._staged(job.destination) as f:
                    for chunk in r.iter_content(chunk_size=self.CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
        except requests.exceptions.RequestException as e:
            logger.error("download failed", url=job.source, error=str(e))
            raise TransferError(f"Download of {job.source} failed: {e}", source=job.source) from e
        except OSError as e:
            logger.error("download failed", url=job.source, error=str(e))
            raise TransferError(f"Writing {job.destination} failed: {e}", source=job.source) from e

        logger.info("download complete", destination=str(job.destination))
        return Path(job.destination)
