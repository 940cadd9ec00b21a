"""PortGuard entry-point."""
from __future__ import annotations

import sys
from typing import Optional, Sequence

from config import settings
from core.logging.config import bootstrap_logging, shutdown_logging
from core.logging.logger import get_logger
from domain.exceptions import PortGuardError, UsageError
from presentation.cli import build_parser, run

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    bootstrap_logging(
        service="portguard",
        level=settings.LOG_LEVEL,
        console=settings.LOG_CONSOLE,
        console_level=settings.LOG_CONSOLE_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name=settings.LOG_FILE_NAME,
    )
    log = get_logger("portguard", service="portguard")
    try:
        run(argv)
        return EXIT_OK
    except UsageError as e:
        parser = build_parser()
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except PortGuardError as e:
        log.critical(str(e))
        return EXIT_FAILURE
    finally:
        shutdown_logging()


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
