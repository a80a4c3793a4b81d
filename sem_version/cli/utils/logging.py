import logging
import sys


logger = logging.getLogger("sem_version")


def configure_logging(debug: bool):
    """
    Configures the logging system based on the debug flag.

    Diagnostics go to stderr; stdout only carries the computed version.
    """
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(message)s")
    handler.setFormatter(formatter)

    log_level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(log_level)

    # sys.stderr may have been swapped (e.g. by click's test runner)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
