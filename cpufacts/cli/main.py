from typing import Optional

import typer

from cpufacts.cli.commands import (
    show,
    doctor,
    version,
)
from cpufacts.internal import paths
from cpufacts.internal.config import load_settings
from cpufacts.internal.logging import setup_logging

app = typer.Typer(
    name="cpufacts",
    help="Report normalized CPU, memory and OS facts.",
    no_args_is_help=True
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (defaults to CPUFACTS_LOG_LEVEL or WARNING)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also print logs to stderr."),
    log_file: bool = typer.Option(True, "--log-file/--no-log-file", help="Write logs under the app data directory."),
):
    setup_logging(
        log_level_name=log_level or load_settings().log_level,
        log_file_path=paths.get_log_file() if log_file else None,
        console_output=verbose,
    )


app.command("show")(show.show)
app.command("doctor")(doctor.doctor)
app.command("version")(version.version)

if __name__ == "__main__":
    app()
