"""
Shared wiring for CLI commands: settings, the console UI and error rendering.
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape

from pe_stage.adapters.console_ui import ConsoleUI
from pe_stage.internal.logging import get_logger
from pe_stage.internal.settings import StageSettings, load_settings
from pe_stage.kernel.archive import Archive
from pe_stage.kernel.contracts import Environment
from pe_stage.kernel.errors import PEStageError

logger = get_logger(__name__)

err_console = Console(stderr=True, highlight=False, soft_wrap=True)

# ---------------------------------------------------------------------
# Common options
# ---------------------------------------------------------------------

VersionOption = typer.Option(None, "--version-string", "-V", help="Installer version substituted for :version.")
FilenameOption = typer.Option(None, "--filename", help="Installer filename pattern, may contain :version.")
ArchiveDirOption = typer.Option(None, "--archive-dir", help="Installer cache directory.")


def resolve_settings(
    version: Optional[str] = None,
    filename: Optional[str] = None,
    archive_dir: Optional[Path] = None,
    download_root: Optional[str] = None,
) -> StageSettings:
    return load_settings().override(
        version=version,
        filename=filename,
        archive_dir=archive_dir,
        download_root=download_root,
    )


def make_environment(settings: StageSettings) -> Environment:
    return Environment(ui=ConsoleUI(), archive_dir=settings.resolved_archive_dir())


def make_archive(settings: StageSettings) -> Archive:
    env = make_environment(settings)
    return Archive(
        settings.filename,
        env,
        version=settings.version,
        http_timeout=settings.http_timeout,
    )


# ---------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------

@contextmanager
def reported_errors() -> Iterator[None]:
    """
    Renders pe_stage errors for the operator and exits with status 1.
    """
    try:
        yield
    except PEStageError as exc:
        logger.error("command failed", error=str(exc), error_type=type(exc).__name__)
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
