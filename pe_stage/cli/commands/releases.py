from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pe_stage.cli import core
from pe_stage.kernel.releases import get_release, iter_releases

console = Console()


def releases(
    version: Optional[str] = typer.Argument(None, help="Only show this release."),
):
    """
    Show known installer releases and the platforms they support.
    """
    with core.reported_errors():
        selected = [get_release(version)] if version else list(iter_releases())

    table = Table(title="Installer Releases")
    table.add_column("Version", style="cyan", no_wrap=True)
    table.add_column("Family", style="green")
    table.add_column("Releases")

    for release in selected:
        for family, family_releases in release.families().items():
            table.add_row(release.version, family, ", ".join(family_releases))
    console.print(table)
