"""Entry-point for launching the CLI application."""
from __future__ import annotations

import logging
import sys

from .presentation.cli.app import main as cli_main
from .presentation.cli.render import debug_enabled


def configure_logging() -> None:
    """Send library logs to stderr; verbose only when GEOQUEST_DEBUG=1."""
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Run the CLI presentation layer."""
    configure_logging()
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
