"""
Main Typer application for the ocd-installer command.

Running ``ocd-installer`` launches the full-screen wizard. The command takes
no flags.
"""

import logging
from pathlib import Path

import typer

from ocd_installer.cli.output import print_error, print_info
from ocd_installer.config import Config, ConfigurationError, load_config
from ocd_installer.storage.paths import get_log_path

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(
    name="ocd-installer",
    help="Install, update or remove OpenChamber Desktop.",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)


def setup_logging(config: Config) -> Path | None:
    """Configure the root logger.

    The terminal belongs to the UI, so records only ever go to a file: the
    configured log file when debug logging is on, otherwise nowhere.

    Returns:
        The log file path, or None when debug logging is off.
    """
    log_path: Path | None = None
    if config.logging.debug:
        log_path = (config.logging.file or get_log_path()).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
        level = logging.DEBUG
    else:
        handler = logging.NullHandler()
        level = logging.WARNING

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)
    logger.debug("Debug logging enabled")
    return log_path


@app.command()
def main() -> None:
    """
    [bold cyan]ocd-installer[/bold cyan] - OpenChamber Desktop installer

    Launches the interactive installer. Use the arrow keys to navigate,
    Enter to select and Esc to go back.
    """
    try:
        config = load_config()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    log_path = setup_logging(config)
    if log_path is not None:
        print_info(f"Debug log: {log_path}")

    from ocd_installer.tui import InstallerError, run_installer

    try:
        exit_code = run_installer(config)
    except InstallerError as e:
        logger.error(f"Installer failed: {e}")
        print_error(f"Error: {e}")
        raise typer.Exit(1)

    raise typer.Exit(exit_code)
