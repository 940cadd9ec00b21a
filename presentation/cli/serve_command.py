from __future__ import annotations

import argparse
import sys
from typing import Callable, List, NoReturn, Optional, Sequence

from config import settings
from core.logging.context import bind
from core.logging.logger import get_logger
from domain.entities import Configuration
from domain.exceptions import ConfigurationError, NoTargetsError, ServerStartError, UsageError
from infrastructure.config import format_duration, load_configuration
from infrastructure.config.yaml_loader import describe
from infrastructure.server import ServerStarter, serve
from presentation.http import create_app

ExitFunc = Callable[[int], None]

log = get_logger("portguard", service="portguard")


class _ArgumentParser(argparse.ArgumentParser):
    """Raises instead of exiting so callers decide the exit code."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="portguard",
        description=f"{settings.APP_NAME} - HTTP health check service for TCP ports.",
        add_help=False,
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Show this help message and exit",
    )
    parser.add_argument(
        "--config", "-config",
        default=settings.CONFIG_PATH,
        help=f"Path to configuration file (default: {settings.CONFIG_PATH})",
    )
    parser.add_argument(
        "--version", "-version",
        action="store_true",
        help="Show version and exit",
    )
    return parser


def run(
    argv: Optional[Sequence[str]] = None,
    *,
    exit: ExitFunc = sys.exit,
    start_server: ServerStarter = serve,
) -> None:
    """Parse arguments, load configuration and hand the app to ``start_server``.

    ``exit`` is only called for ``--help`` and ``--version``. Every other
    failure raises a :class:`~domain.exceptions.PortGuardError` subclass.
    """
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.help:
        parser.print_help()
        exit(0)
        return

    if args.version:
        print(f"{settings.APP_NAME} version {settings.APP_VERSION}")
        exit(0)
        return

    bind(config=args.config)
    try:
        configuration = load_configuration(args.config)
    except ConfigurationError as e:
        raise ConfigurationError(f"error loading configuration: {e}") from e

    if not configuration.targets:
        raise NoTargetsError("no port checks configured. Please add checks to the configuration file")

    setup_and_start_server(configuration, args.config, start_server)


def setup_and_start_server(configuration: Configuration, config_path: str, start_server: ServerStarter) -> None:
    """Build the app, log the startup banner and block in ``start_server``."""
    app = create_app(configuration)
    server = configuration.server
    for line in startup_lines(configuration, config_path):
        log.info(line)
    log.debug(lambda: "targets: " + ", ".join(describe(configuration)))

    try:
        start_server(server.listen_host, server.listen_port, app)
    except (ServerStartError, OSError) as e:
        raise ServerStartError(f"server error: {e}") from e


def startup_lines(configuration: Configuration, config_path: str) -> List[str]:
    server = configuration.server
    auth = server.auth
    port = server.listen_port
    lines = [
        f"{settings.APP_NAME} v{settings.APP_VERSION} starting...",
        f"Configuration loaded from: {config_path}",
        f"Monitoring {configuration.target_count} ports with {format_duration(server.default_timeout)} timeout",
        f"HTTP Basic Authentication: ENABLED (username: {auth.username})" if auth.armed
        else "HTTP Basic Authentication: DISABLED",
        f"HTTP server listening on {server.listen_address}",
        "Endpoints:",
        f"  - http://localhost:{port}/health (detailed JSON status)",
        f"  - http://localhost:{port}/live (simple OK response)",
    ]
    return lines
