"""
lssecrets CLI - Command line interface.

Main entry point for the lssecrets application.
"""

from __future__ import annotations

from pathlib import Path

import click
from loguru import logger

from lssecrets import __version__
from lssecrets.app import EXIT_FATAL, run_report
from lssecrets.config.constants import APP_NAME
from lssecrets.config.loader import load_config
from lssecrets.config.models import Config, ReportConfig
from lssecrets.core.exceptions import ConfigError
from lssecrets.core.types import DetailLevel
from lssecrets.ui.console import ConsoleUI
from lssecrets.utils.log_config import load_log_config
from lssecrets.utils.logger import setup_logger

DETAIL_HELP = (
    "Report depth: 0 service only, 1 +collections, 2 +items (default), "
    "3 +item attributes, 4 +secret values."
)


def build_options(config: Config, detail: int | None, show_secrets: bool, unlock: bool) -> ReportConfig:
    """Merge command-line flags over the configured defaults."""
    level = config.report.detail if detail is None else DetailLevel(detail)
    if show_secrets:
        level = DetailLevel.SECRETS
    return ReportConfig(detail=level, unlock=unlock or config.report.unlock)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(
    __version__, "-v", "--version", prog_name=APP_NAME, message="%(prog)s %(version)s"
)
@click.option("-d", "--detail", type=click.IntRange(0, 4), default=None, help=DETAIL_HELP)
@click.option(
    "-s", "--secrets", "show_secrets", is_flag=True, help="Show secret values (same as --detail=4)."
)
@click.option("-u", "--unlock", is_flag=True, help="Unlock locked collections and items.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: $LSSECRETS_CONFIG or ~/.config/lssecrets/config.yaml).",
)
@click.option("--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    detail: int | None,
    show_secrets: bool,
    unlock: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """
    List collections, items and secrets stored in the Secret Service keyring.
    """
    ui = ConsoleUI()

    # Nothing may reach the terminal before the sinks are configured
    logger.remove()

    try:
        config = load_config(config_path)
    except ConfigError as e:
        ui.error(e.message)
        ctx.exit(EXIT_FATAL)

    log_settings = config.logging.model_dump()
    log_settings["file_level"] = config.logging.file_level.upper()
    setup_logger(verbose=verbose, config=load_log_config(log_settings))

    options = build_options(config, detail, show_secrets, unlock)
    logger.debug(f"{APP_NAME} {__version__}: detail={int(options.detail)} unlock={options.unlock}")

    ctx.exit(run_report(options, ui))


def main() -> None:
    """Main entry point for lssecrets CLI."""
    cli()


if __name__ == "__main__":
    main()
