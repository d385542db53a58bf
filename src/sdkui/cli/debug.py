"""Debug logging switch for the CLI."""

import logging
import os

DEBUG_ENV_VAR = "SDKUI_DEBUG"
DEBUG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def debug_requested(flag: bool) -> bool:
    return flag or bool(os.environ.get(DEBUG_ENV_VAR))


def configure_logging(debug: bool) -> None:
    """Send sdkui debug logs to stderr when --debug or SDKUI_DEBUG is set."""
    if not debug_requested(debug):
        return
    logging.basicConfig(level=logging.WARNING, format=DEBUG_FORMAT)
    logging.getLogger("sdkui").setLevel(logging.DEBUG)
