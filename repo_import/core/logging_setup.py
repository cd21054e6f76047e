"""Root logger configuration for the command line."""

import logging
import sys

LOG_FORMAT = "%(asctime)s-%(levelname)s-[%(name)s]-%(message)s"


def setup_logging(level: str = "INFO", debug_mode: bool = False) -> None:
    """Configure the root logger once, on stderr."""
    resolved = logging.DEBUG if debug_mode else getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stderr, force=True)
