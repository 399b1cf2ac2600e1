from pathlib import Path
from typing import Optional

from pe_stage.adapters.storage_fs import ArchiveCatalog
from pe_stage.cli import core


def list_archives(
    archive_dir: Optional[Path] = core.ArchiveDirOption,
):
    """
    List the installers in the cache directory.
    """
    settings = core.resolve_settings(archive_dir=archive_dir)
    env = core.make_environment(settings)

    env.ui.info(f"Installers in {env.archive_dir}:")
    ArchiveCatalog(env.archive_dir, env.ui).display()
