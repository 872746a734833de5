"""
Child process launching with inherited standard streams.
"""
import logging
import subprocess
import sys
from typing import List, Optional, Sequence, Tuple, Union

from pkgmgr.errors import LaunchError

logger = logging.getLogger(__name__)

Command = Union[str, List[str]]


def build_command(binary: str, args: Sequence[str],
                  platform: Optional[str] = None) -> Tuple[Command, bool]:
    """
    Build the command for subprocess and whether it needs a shell.

    On Windows package managers are installed as .cmd shims, which only
    the command shell can run, so the command is passed as one string.

    Args:
        binary: Executable name, e.g. 'pnpm'
        args: Arguments passed through in order
        platform: Overrides sys.platform

    Returns:
        (command, shell) tuple for subprocess.Popen
    """
    platform = sys.platform if platform is None else platform
    argv = [binary] + list(args)
    if platform == 'win32':
        return subprocess.list2cmdline(argv), True
    return argv, False


def launch(binary: str, args: Sequence[str]) -> int:
    """
    Run a binary to completion, sharing stdin, stdout and stderr with it.

    Args:
        binary: Executable name
        args: Arguments passed through unmodified

    Returns:
        The child's exit status, or 0 when it was terminated by a signal

    Raises:
        LaunchError: if the binary could not be started
    """
    cmd, shell = build_command(binary, args)
    logger.debug("launching %r (shell=%s)", cmd, shell)
    try:
        process = subprocess.Popen(cmd, shell=shell)
    except OSError as e:
        raise LaunchError(binary, e.strerror or str(e)) from e

    while True:
        try:
            returncode = process.wait()
            break
        except KeyboardInterrupt:
            # The child got the same interrupt; its exit status decides ours.
            continue

    if returncode < 0:
        logger.debug("%s terminated by signal %d", binary, -returncode)
        return 0
    return returncode
