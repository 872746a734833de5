"""
Environment variable names, defaults and logging setup for the shim.
"""
import logging
import os
import sys
from typing import Mapping, Optional

# Highest-priority signal: forces a specific package manager.
OVERRIDE_ENV = 'PKGMGR'
# Set by npm, pnpm, yarn and bun when they run package scripts,
# e.g. "npm/10.2.0 node/v20.10.0 darwin arm64".
USER_AGENT_ENV = 'npm_config_user_agent'
DEBUG_ENV = 'PKGMGR_DEBUG'

DEFAULT_FALLBACK = 'npm'

# Program names used as the prefix of diagnostics.
RUN_PROG = 'pkgmgr'
EXEC_PROG = 'pkgmgrx'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def debug_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True when PKGMGR_DEBUG is set to a truthy value."""
    env = os.environ if environ is None else environ
    return env.get(DEBUG_ENV, '').strip().lower() in _TRUTHY


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Route pkgmgr log records to stderr.

    The shim shares its terminal with the child process, so it only
    emits warnings unless PKGMGR_DEBUG asks for more.

    Args:
        environ: Environment to read PKGMGR_DEBUG from (defaults to os.environ)
    """
    level = logging.DEBUG if debug_enabled(environ) else logging.WARNING
    logger = logging.getLogger('pkgmgr')
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('%(name)s %(levelname)s %(message)s'))
        logger.addHandler(handler)
    logger.propagate = False
