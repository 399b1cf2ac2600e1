import re
from typing import Optional
from urllib.parse import urlparse

from pe_stage.kernel.errors import UnsupportedSchemeError
from pe_stage.transfer.base import TransferStrategy
from pe_stage.transfer.file import LocalCopy
from pe_stage.transfer.http import HTTPDownload

_WINDOWS_DRIVE = re.compile(r"^[A-Za-z]:[\\/]")


def locator_scheme(locator: str) -> str:
    """
    The scheme of a locator, with bare paths (including C:\\ style paths)
    reported as ``file``.
    """
    if _WINDOWS_DRIVE.match(locator):
        return "file"
    scheme = urlparse(locator).scheme.lower()
    return scheme or "file"


class TransferFactory:
    @staticmethod
    def generate(locator: str, timeout: Optional[float] = None) -> TransferStrategy:
        scheme = locator_scheme(locator)
        if scheme == "file":
            return LocalCopy()
        elif scheme in ("http", "https"):
            return HTTPDownload(timeout=timeout)
        else:
            raise UnsupportedSchemeError(locator, scheme)


generate = TransferFactory.generate
