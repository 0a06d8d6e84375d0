"""
Top-level report run.

Connects once, resolves aliases, then renders the service block followed
by one block per collection as each one is scanned. Any error escaping
the scanner is fatal: it is printed to stderr and the report stops.
"""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from lssecrets.config.models import ReportConfig
from lssecrets.core.exceptions import classify
from lssecrets.core.protocols import SecretService
from lssecrets.report.renderer import ReportRenderer
from lssecrets.service.dbus import connect
from lssecrets.service.scanner import KeyringScanner
from lssecrets.ui.console import ConsoleUI

EXIT_OK = 0
EXIT_FATAL = 1

Connector = Callable[[bool], SecretService]


def write_report(service: SecretService, options: ReportConfig, ui: ConsoleUI) -> None:
    """Scan `service` and stream the report to `ui`."""
    scanner = KeyringScanner(service, options)
    renderer = ReportRenderer(ui)

    service_report = scanner.scan_service()
    renderer.render_service(service_report)

    count = 0
    for collection_report in scanner.iter_collections(service_report.aliases):
        renderer.render_collection(collection_report)
        count += 1
    logger.info(f"Report complete: {count} collection(s) at detail {int(options.detail)}")


def run_report(options: ReportConfig, ui: ConsoleUI, connector: Connector | None = None) -> int:
    """
    Produce the whole report.

    Args:
        options: Detail level and unlock policy
        ui: Where the report and fatal errors go
        connector: Opens the service handle; takes the want-secrets flag.
            Defaults to the D-Bus connection

    Returns:
        Process exit status
    """
    connector = connector or connect
    try:
        service = connector(options.want_secrets)
    except Exception as e:
        error = classify(e)
        logger.error(f"Cannot connect: {error}")
        ui.error(str(error))
        return EXIT_FATAL

    try:
        write_report(service, options, ui)
    except Exception as e:
        error = classify(e)
        logger.error(f"Fatal error: {error}")
        ui.error(str(error))
        return EXIT_FATAL
    finally:
        service.close()

    return EXIT_OK
