"""
Structured errors raised by the acquisition subsystem.

Everything derives from PEStageError so the command line layer can render
any of them the same way.
"""
from typing import Optional, Sequence


class PEStageError(Exception):
    """Base class for every error raised by pe_stage."""


class NoInstallerSource(PEStageError):
    """
    No download source is configured for an installer that is not cached.
    Fixed by supplying a source or placing the installer in the cache.
    """

    def __init__(self, filename: str, available: Sequence[str] = ()):
        self.filename = filename
        self.available = list(available)
        super().__init__(
            f"Cannot fetch installer {filename}; no download source available."
        )


class TransferError(PEStageError):
    """A copy or download failed. ``status`` is the HTTP status when there was one."""

    def __init__(self, message: str, status: Optional[int] = None, source: Optional[str] = None):
        self.message = message
        self.status = status
        self.source = source
        super().__init__(message)


class SourceNotFound(TransferError):
    """The local file to copy from does not exist."""

    def __init__(self, source: str):
        super().__init__(f"Installer source {source} does not exist.", source=source)


class ExtractionError(PEStageError):
    """An installer archive is missing, empty, corrupt or unsafe to extract."""

    def __init__(self, message: str, archive: Optional[str] = None):
        self.archive = archive
        super().__init__(message)


class UnsupportedSchemeError(PEStageError):
    """A source locator uses a scheme no transfer strategy handles."""

    def __init__(self, locator: str, scheme: str):
        self.locator = locator
        self.scheme = scheme
        super().__init__(f"Unsupported URI scheme {scheme!r} in {locator}")


class UnknownReleaseError(PEStageError):
    def __init__(self, version: str):
        self.version = version
        super().__init__(f"No release information for version {version}")


class SettingsError(PEStageError):
    """A PE_STAGE_* environment variable holds a value that cannot be used."""
