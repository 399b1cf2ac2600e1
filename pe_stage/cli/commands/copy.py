from pathlib import Path
from typing import Optional

import typer

from pe_stage.cli import core
from pe_stage.kernel.contracts import Skipped


def copy(
    source_dir: Path = typer.Argument(..., help="Directory holding the installer."),
    version: Optional[str] = core.VersionOption,
    filename: Optional[str] = core.FilenameOption,
    archive_dir: Optional[Path] = core.ArchiveDirOption,
):
    """
    Copy an installer from a local directory into the cache.
    """
    settings = core.resolve_settings(version, filename, archive_dir)
    archive = core.make_archive(settings)

    with core.reported_errors():
        result = archive.copy_from(source_dir)

    if not isinstance(result, Skipped):
        typer.echo(f"Installer {archive} cached at {archive.path}")
