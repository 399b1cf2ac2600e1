"""
Typed settings for the acquisition commands, read from PE_STAGE_* environment
variables. Command line options take precedence over these values.
"""
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from pe_stage.internal import paths
from pe_stage.internal.constants import (
    DEFAULT_FILENAME_PATTERN,
    ENV_DOWNLOAD_ROOT,
    ENV_FILENAME,
    ENV_HTTP_TIMEOUT,
    ENV_LOG_LEVEL,
    ENV_VERSION,
)
from pe_stage.kernel.errors import SettingsError


@dataclass(frozen=True)
class StageSettings:
    filename: str = DEFAULT_FILENAME_PATTERN
    version: Optional[str] = None
    download_root: Optional[str] = None
    archive_dir: Optional[Path] = None
    log_level: str = "INFO"
    http_timeout: Optional[float] = None

    def resolved_archive_dir(self) -> Path:
        return self.archive_dir if self.archive_dir is not None else paths.get_archive_dir()

    def override(self, **changes) -> "StageSettings":
        """Returns a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise SettingsError(f"{ENV_HTTP_TIMEOUT} must be a number of seconds, got {raw!r}") from None


def load_settings(environ=None) -> StageSettings:
    env = os.environ if environ is None else environ
    return StageSettings(
        filename=env.get(ENV_FILENAME) or DEFAULT_FILENAME_PATTERN,
        version=env.get(ENV_VERSION) or None,
        download_root=env.get(ENV_DOWNLOAD_ROOT) or None,
        log_level=(env.get(ENV_LOG_LEVEL) or "INFO").upper(),
        http_timeout=_parse_timeout(env.get(ENV_HTTP_TIMEOUT)),
    )
