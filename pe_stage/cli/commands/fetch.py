from pathlib import Path
from typing import Optional

import typer

from pe_stage.cli import core
from pe_stage.kernel.contracts import Skipped


def fetch(
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Directory, file:// URI or http(s) URL holding the installer."),
    version: Optional[str] = core.VersionOption,
    filename: Optional[str] = core.FilenameOption,
    archive_dir: Optional[Path] = core.ArchiveDirOption,
):
    """
    Put an installer in the cache from whatever source is given.
    """
    settings = core.resolve_settings(version, filename, archive_dir, download_root=source)
    archive = core.make_archive(settings)

    with core.reported_errors():
        result = archive.fetch(settings.download_root)

    if not isinstance(result, Skipped):
        typer.echo(f"Installer {archive} cached at {archive.path}")
