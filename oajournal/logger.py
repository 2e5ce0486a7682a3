"""Logging for journal lookups.

Library use logs warnings only; the CLI switches to debug output with
``--debug``, which shows catalog requests and every match decision.
"""
import logging
import sys

logger = logging.getLogger("oajournal")

SIMPLE_FORMAT = "%(levelname)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"


def setup_logger(level="WARNING", debug_format=False, stream=None):
    """Attach a single stream handler to the oajournal logger.

    Parameters
    ----------
    level : str, default 'WARNING'
        Logging level name.
    debug_format : bool, default False
        Include timestamps and line numbers in each record.
    stream : file-like, optional
        Output stream, stderr by default.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug_format else SIMPLE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger


def get_logger():
    return logger


def setup_cli_logging(debug=False):
    """Configure logging for the command line."""
    if debug:
        return setup_logger(level="DEBUG", debug_format=True)
    return setup_logger(level="WARNING")


def log_api_request(url, params=None):
    logger.debug(f"API URL: {url} params={params}" if params else f"API URL: {url}")


def log_api_response(count, total=None):
    if total is None:
        logger.debug(f"Sources on page: {count}")
    else:
        logger.debug(f"Sources on page: {count} (total matches: {total:,})")


def log_match(journal, record_name, method, index, candidates):
    """Log which candidate was chosen for a journal and how."""
    logger.debug(
        f"Matched '{journal}' to '{record_name}' ({method}, "
        f"candidate {index + 1} of {candidates})"
    )


def log_no_candidates(journal):
    logger.info(f"No source found for journal '{journal}'")


setup_logger()
