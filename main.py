"""
Command-line interface for the Android manifest extractor.

Reads an AndroidManifest.xml, keeps the components reachable from other
applications and writes them to a new manifest file.
"""

from pathlib import Path
from typing import Optional

import typer

from core import log, setup_logger
from core.config_loader import CONFIG_REL_PATH, load_settings
from core.exceptions import ManifestError
from core.extractor import ManifestExtractor

__version__ = "1.0.0"
PROG_NAME = "android-manifest-extractor"

app = typer.Typer(
    name=PROG_NAME,
    help="Extract exported components and intent filters from AndroidManifest.xml",
    add_completion=False,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


@app.command()
def main(
    input_path: Path = typer.Argument(..., metavar="INPUT", help="Input AndroidManifest.xml file path"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    config: Path = typer.Option(Path(CONFIG_REL_PATH), "--config", "-c", help="Path to settings YAML"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Extract exported components from AndroidManifest.xml."""
    setup_logger(verbose)
    try:
        settings = load_settings(str(config))
        verbose = verbose or settings.logging.verbose
        output_path = str(output) if output else settings.output.path

        extractor = ManifestExtractor(settings)
        extractor.extract(str(input_path), output_path, verbose)
    except (OSError, ManifestError) as e:
        log.error(f"❌ Error: {e}")
        raise typer.Exit(code=1)

    log.success(f"✅ Exported components extracted to {output_path}")


if __name__ == "__main__":
    app()
