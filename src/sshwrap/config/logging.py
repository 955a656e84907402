"""Logging configuration for sshwrap.

Debug traces go through stdlib ``logging`` and are rendered to stderr by a
Rich handler, so they never mix with the ssh session on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(*, debug: bool = False) -> None:
    """Install the stderr handler on the ``sshwrap`` logger.

    Args:
        debug: Enable DEBUG-level output. When False, only WARNING+.
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("sshwrap")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
