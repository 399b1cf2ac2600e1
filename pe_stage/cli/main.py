import typer

from pe_stage.cli import core
from pe_stage.cli.commands import (
    copy,
    download,
    fetch,
    list_archives,
    releases,
    unpack,
    version,
)
from pe_stage.internal import paths
from pe_stage.internal.logging import setup_logging
from pe_stage.internal.settings import load_settings

app = typer.Typer(
    name="pe-stage",
    help="Fetch, cache and unpack versioned installers for VM provisioning.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also log to the console."),
):
    with core.reported_errors():
        settings = load_settings()
    setup_logging(
        log_level_name="DEBUG" if verbose else settings.log_level,
        log_file_path=paths.get_log_file(),
        console_output=verbose,
    )


app.command("list")(list_archives.list_archives)
app.command("fetch")(fetch.fetch)
app.command("copy")(copy.copy)
app.command("download")(download.download)
app.command("unpack")(unpack.unpack)
app.command("releases")(releases.releases)
app.command("version")(version.version)

cli_app = app

if __name__ == "__main__":
    app()
