import os
from pathlib import Path

from pe_stage.internal.constants import (
    APP_DIR_NAME,
    ARCHIVE_DIR_NAME,
    ENV_ARCHIVE_DIR,
    ENV_HOME,
    LOG_FILE_NAME,
)


# ---------------------------------------------------------------------
# Base directories
# ---------------------------------------------------------------------

def get_app_data_dir() -> Path:
    """
    Returns the application data directory.

    - PE_STAGE_HOME, when set
    - Windows: %APPDATA%\\pe_stage
    - Linux/macOS: ~/.pe_stage
    """
    override = os.environ.get(ENV_HOME)
    if override:
        path = Path(override)
    elif os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", str(Path.home()))
        path = Path(base) / APP_DIR_NAME
    else:  # Linux / macOS
        path = Path.home() / f".{APP_DIR_NAME}"

    path.mkdir(parents=True, exist_ok=True)
    return path


# ---------------------------------------------------------------------
# Installer cache
# ---------------------------------------------------------------------

def get_archive_dir() -> Path:
    """
    The shared cache directory holding downloaded or copied installers.
    """
    override = os.environ.get(ENV_ARCHIVE_DIR)
    if override:
        return Path(override)
    return get_app_data_dir() / ARCHIVE_DIR_NAME


# ---------------------------------------------------------------------
# Logs
# ---------------------------------------------------------------------

def get_log_file() -> Path:
    log_dir = get_app_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / LOG_FILE_NAME


if __name__ == "__main__":
    print("App Data Dir:", get_app_data_dir())
    print("Archive Dir:", get_archive_dir())
    print("Log File:", get_log_file())
