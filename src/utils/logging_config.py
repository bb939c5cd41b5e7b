"""Simple logging setup - all logs go to stderr so stdout stays machine readable."""

import logging
import sys


def setup_logging(verbose: bool = False, trace: bool = False):
    """Setup logging to stderr. ERROR by default, INFO when verbose, DEBUG when tracing."""
    if trace:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
