"""Logging setup for the artistsync CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a level; ``verbose`` wins over ``quiet``."""

    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    level: int | None = None,
    force: bool = False,
) -> None:
    """Initialise the root logger with the terse CLI format.

    An explicit ``level`` overrides the verbosity flags. Pass ``force=True`` to
    replace handlers installed earlier, e.g. by a previous call in tests.
    """

    logging.basicConfig(
        level=level if level is not None else log_level(verbose=verbose, quiet=quiet),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        force=force,
    )
