"""
Data contracts shared by the acquisition kernel and its adapters.

The kernel talks to the outside world only through these types: the UI it
reports to, the environment it is bound to, and the transfer jobs it hands
to a transfer strategy.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from pe_stage.kernel.versioning import versioned_path


class UI(Protocol):
    """
    Leveled operator output. Implementations decide how messages are rendered.
    """

    def info(self, message: str) -> None:
        ...

    def warn(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


@dataclass(frozen=True)
class Environment:
    """
    Everything the acquirer needs from its caller, fixed at construction.
    """
    ui: UI
    archive_dir: Path


@dataclass(frozen=True)
class ArtifactDescriptor:
    """
    An installer filename pattern, the version substituted into it, and the
    cache directory the resolved file lives in.
    """
    filename_pattern: str
    cache_root: Path
    version: Optional[str] = None

    @property
    def filename(self) -> str:
        return versioned_path(self.filename_pattern, self.version)

    @property
    def cache_path(self) -> Path:
        return Path(self.cache_root) / self.filename


@dataclass(frozen=True)
class TransferJob:
    """
    One attempt to move bytes from a source locator to a local destination.
    """
    source: str
    destination: Path


@dataclass(frozen=True)
class Skipped:
    """
    Returned by an idempotency guard when the guarded destination already exists.
    """
    description: str
