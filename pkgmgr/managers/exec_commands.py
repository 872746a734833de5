"""
Each package manager's equivalent of "npx": the binary and prefix
arguments that download and run a package in one step.
"""
from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Sequence, Tuple

from pkgmgr.detector import PackageManagerId
from pkgmgr.errors import UnsupportedPackageManagerError


class ExecSpec(NamedTuple):
    """Binary to launch and the arguments placed before the user's."""

    binary: str
    args: Tuple[str, ...]

    def command(self, user_args: Sequence[str]) -> List[str]:
        """Prefix arguments followed by the user's arguments, in order."""
        return list(self.args) + list(user_args)


EXEC_COMMANDS: Mapping[str, ExecSpec] = MappingProxyType({
    PackageManagerId.NPM.value: ExecSpec('npx', ()),
    PackageManagerId.PNPM.value: ExecSpec('pnpm', ('dlx',)),
    PackageManagerId.YARN.value: ExecSpec('yarn', ('dlx',)),
    PackageManagerId.BUN.value: ExecSpec('bunx', ()),
})


def exec_command_for(manager: str) -> ExecSpec:
    """
    Look up the exec command for a package manager.

    Args:
        manager: Resolved package manager name

    Returns:
        The manager's ExecSpec

    Raises:
        UnsupportedPackageManagerError: if the name has no entry, which only
            happens for an unvalidated custom fallback
    """
    try:
        return EXEC_COMMANDS[manager]
    except KeyError:
        raise UnsupportedPackageManagerError(manager) from None
