"""Logging setup for the CLI: all records go to stderr"""

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging on stderr; INFO when verbose, WARNING otherwise."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
