"""ssh subprocess wrapper: build the command line, run it, forward the exit code."""

from __future__ import annotations

import logging
import subprocess
from typing import List, Sequence

logger = logging.getLogger(__name__)


class SSHError(Exception):
    """Raised when the ssh client cannot be started."""


def build_command(host: str, ssh_args: Sequence[str] = (), binary: str = "ssh") -> List[str]:
    """Return ``[binary, host, *ssh_args]``; *ssh_args* are passed through verbatim."""
    return [binary, host, *ssh_args]


def run_ssh(command: Sequence[str]) -> int:
    """Run *command* with inherited stdio and return its exit code.

    A child terminated by a signal has no exit code of its own; that maps to 1.
    """
    logger.debug("Executing: %s", " ".join(command))
    try:
        result = subprocess.run(list(command), check=False)
    except FileNotFoundError as exc:
        raise SSHError(f"{command[0]} is not installed or not on PATH") from exc
    except PermissionError as exc:
        raise SSHError(f"{command[0]} is not executable") from exc

    if result.returncode < 0:
        logger.debug("ssh terminated by signal %d", -result.returncode)
        return 1
    return result.returncode
