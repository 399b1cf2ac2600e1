from pathlib import Path
from typing import Optional

import typer

from pe_stage.cli import core
from pe_stage.kernel.contracts import Skipped


def download(
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Base URL the installer is published under."),
    version: Optional[str] = core.VersionOption,
    filename: Optional[str] = core.FilenameOption,
    archive_dir: Optional[Path] = core.ArchiveDirOption,
):
    """
    Download an installer into the cache.
    """
    settings = core.resolve_settings(version, filename, archive_dir, download_root=url)
    archive = core.make_archive(settings)

    with core.reported_errors():
        result = archive.download_from(settings.download_root)

    if not isinstance(result, Skipped):
        typer.echo(f"Installer {archive} downloaded to {archive.path}")
