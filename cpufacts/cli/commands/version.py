import typer
import importlib.metadata
from cpufacts.internal.logging import get_logger

logger = get_logger(__name__)


def version():
    """
    Show the cpufacts version.
    """
    try:
        package_version = importlib.metadata.version("cpufacts")
        typer.echo(f"cpufacts version: {package_version}")
    except importlib.metadata.PackageNotFoundError:
        typer.echo("cpufacts is not installed or version metadata not found.")
        typer.echo("Please install the package first (e.g., pip install . or pip install -e .)")
        logger.warning("cpufacts package version not found.")
        raise typer.Exit(1)


if __name__ == "__main__":
    typer.run(version)
