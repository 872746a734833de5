"""
Package manager detection from environment signals.
"""
import logging
import os
from enum import Enum
from typing import Mapping, NamedTuple, Optional

from pkgmgr.config import DEFAULT_FALLBACK, OVERRIDE_ENV, USER_AGENT_ENV

logger = logging.getLogger(__name__)


class PackageManagerId(str, Enum):
    """Package managers the shim knows how to delegate to."""

    NPM = 'npm'
    PNPM = 'pnpm'
    YARN = 'yarn'
    BUN = 'bun'

    def __str__(self) -> str:
        return self.value


SUPPORTED = frozenset(pm.value for pm in PackageManagerId)

SOURCE_OVERRIDE = 'override'
SOURCE_USER_AGENT = 'user-agent'
SOURCE_FALLBACK = 'fallback'


class Resolution(NamedTuple):
    """Outcome of a detection, with the raw signals that produced it."""

    manager: str
    source: str
    override: Optional[str]
    user_agent: Optional[str]


def parse_user_agent(value: Optional[str]) -> Optional[str]:
    """
    Extract the package manager name from an npm_config_user_agent value.

    Args:
        value: Raw variable value, e.g. "pnpm/8.15.0 npm/? node/v20.10.0"

    Returns:
        The supported name from the first "name/version" token, or None
    """
    if not value:
        return None
    first_token = value.split(' ')[0]
    if '/' not in first_token:
        return None
    name = first_token.split('/')[0]
    if name in SUPPORTED:
        return name
    return None


def explain(fallback: str = DEFAULT_FALLBACK,
            environ: Optional[Mapping[str, str]] = None) -> Resolution:
    """
    Resolve the package manager and report which signal decided it.

    Args:
        fallback: Returned when no environment signal matches. Not validated.
        environ: Environment to read (defaults to os.environ)

    Returns:
        Resolution with the chosen manager and its source
    """
    env = os.environ if environ is None else environ
    override = env.get(OVERRIDE_ENV)
    user_agent = env.get(USER_AGENT_ENV)

    if override and override in SUPPORTED:
        logger.debug("using %s from %s", override, OVERRIDE_ENV)
        return Resolution(override, SOURCE_OVERRIDE, override, user_agent)
    if override:
        logger.debug("ignoring unsupported %s=%r", OVERRIDE_ENV, override)

    name = parse_user_agent(user_agent)
    if name:
        logger.debug("using %s from %s", name, USER_AGENT_ENV)
        return Resolution(name, SOURCE_USER_AGENT, override, user_agent)

    logger.debug("no usable environment signal, falling back to %s", fallback)
    return Resolution(fallback, SOURCE_FALLBACK, override, user_agent)


def resolve(fallback: str = DEFAULT_FALLBACK,
            environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the package manager to delegate to. Never raises."""
    return explain(fallback, environ).manager
