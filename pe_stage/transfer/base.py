import os
import tempfile
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from pe_stage.kernel.contracts import TransferJob


class TransferStrategy(ABC):
    """
    Moves an installer from a source locator to a local destination.

    Strategies keep no state between jobs. A destination is either absent
    or complete: bytes go to a temporary file beside it that is renamed into
    place only once the transfer has finished.
    """

    @abstractmethod
    def copy(self, job: TransferJob) -> Path:
        """
        Performs the transfer and returns the destination path.
        """
        pass

    @contextmanager
    def _staged(self, destination: Path) -> Iterator[IO[bytes]]:
        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        handle = tempfile.NamedTemporaryFile(
            mode="wb",
            dir=destination.parent,
            prefix=f".{destination.name}.",
            suffix=".tmp",
            delete=False,
        )
        temp_path = Path(handle.name)
        try:
            with handle:
                yield handle
            os.replace(temp_path, destination)
        finally:
            if temp_path.exists():
                temp_path.unlink()
