from pathlib import Path
from typing import Optional

import typer

from pe_stage.cli import core


def unpack(
    target_dir: Path = typer.Argument(..., help="Directory to unpack the installer under."),
    version: Optional[str] = core.VersionOption,
    filename: Optional[str] = core.FilenameOption,
    archive_dir: Optional[Path] = core.ArchiveDirOption,
):
    """
    Unpack a cached installer and print the directory it expanded into.
    """
    settings = core.resolve_settings(version, filename, archive_dir)
    archive = core.make_archive(settings)

    with core.reported_errors():
        dirname = archive.unpack_to(target_dir)

    typer.echo(str(target_dir / dirname))
