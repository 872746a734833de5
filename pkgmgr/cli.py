"""
Command-line entry points: pkgmgr, pkgmgrx and pkgmgr-which.
"""
import argparse
import shlex
import sys
from typing import List, Optional, Sequence

from colorama import init, Fore, Style
from tabulate import tabulate

from pkgmgr.config import (
    DEFAULT_FALLBACK,
    EXEC_PROG,
    OVERRIDE_ENV,
    RUN_PROG,
    USER_AGENT_ENV,
    configure_logging,
)
from pkgmgr.detector import (
    SOURCE_FALLBACK,
    SOURCE_OVERRIDE,
    SOURCE_USER_AGENT,
    SUPPORTED,
    Resolution,
    explain,
    resolve,
)
from pkgmgr.errors import LaunchError, PkgmgrError
from pkgmgr.managers.exec_commands import exec_command_for
from pkgmgr.utils.launcher import launch


def _error(prog: str, message: str) -> None:
    print(f"{Fore.RED}{prog}: {message}{Style.RESET_ALL}", file=sys.stderr)


def _trailing_args(argv: Optional[Sequence[str]]) -> List[str]:
    return sys.argv[1:] if argv is None else list(argv)


def run(fallback: str = DEFAULT_FALLBACK, argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the detected package manager with the given arguments.

    Args:
        fallback: Package manager used when the environment names none
        argv: Arguments to forward (defaults to sys.argv[1:])

    Returns:
        Exit status for the calling process
    """
    manager = resolve(fallback)
    args = _trailing_args(argv)
    try:
        return launch(manager, args)
    except LaunchError as e:
        _error(RUN_PROG, str(e))
        return 1


def run_exec(fallback: str = DEFAULT_FALLBACK, argv: Optional[Sequence[str]] = None) -> int:
    """
    Download and run a package with the detected package manager,
    the way "npx <args>" does for npm.

    Args:
        fallback: Package manager used when the environment names none
        argv: Package and its arguments (defaults to sys.argv[1:])

    Returns:
        Exit status for the calling process
    """
    manager = resolve(fallback)
    args = _trailing_args(argv)

    if not args:
        _error(EXEC_PROG, "no command specified")
        return 1

    try:
        spec = exec_command_for(manager)
        return launch(spec.binary, spec.command(args))
    except PkgmgrError as e:
        _error(EXEC_PROG, str(e))
        return 1


def _signal_rows(resolution: Resolution, fallback: str) -> List[List[str]]:
    def result(source: str, value: Optional[str]) -> str:
        if resolution.source == source:
            return f"{Fore.GREEN}used{Style.RESET_ALL}"
        if value:
            return f"{Fore.YELLOW}ignored{Style.RESET_ALL}"
        return "-"

    return [
        [OVERRIDE_ENV, resolution.override or '(unset)',
         result(SOURCE_OVERRIDE, resolution.override)],
        [USER_AGENT_ENV, resolution.user_agent if resolution.user_agent is not None else '(unset)',
         result(SOURCE_USER_AGENT, resolution.user_agent)],
        ['fallback', fallback, result(SOURCE_FALLBACK, fallback)],
    ]


def which(argv: Optional[Sequence[str]] = None) -> int:
    """Print the package manager pkgmgr would run, and the command line."""
    parser = argparse.ArgumentParser(
        prog='pkgmgr-which',
        description='Show which package manager pkgmgr and pkgmgrx would run',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s                         # Print the detected package manager
    %(prog)s install                 # ...and the pkgmgr command line
    %(prog)s --exec cowsay hi        # ...and the pkgmgrx command line
    %(prog)s -v                      # Show how each signal was used
                """
    )
    parser.add_argument('--fallback', default=DEFAULT_FALLBACK,
                        help=f'Package manager used when no signal is set (default: {DEFAULT_FALLBACK})')
    parser.add_argument('--exec', dest='exec_mode', action='store_true',
                        help='Show the pkgmgrx command instead of the pkgmgr one')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show the environment signals that were considered')
    parser.add_argument('args', nargs=argparse.REMAINDER,
                        help='Arguments to append to the shown command')

    opts = parser.parse_args(argv)
    resolution = explain(opts.fallback)
    manager = resolution.manager

    if opts.verbose:
        print(tabulate(_signal_rows(resolution, opts.fallback),
                       headers=['Signal', 'Value', 'Result'],
                       tablefmt='grid'))
        if manager not in SUPPORTED:
            print(f"{Fore.YELLOW}Warning: '{manager}' is not one of {', '.join(sorted(SUPPORTED))}{Style.RESET_ALL}")

    print(manager)

    if opts.exec_mode:
        try:
            spec = exec_command_for(manager)
        except PkgmgrError as e:
            _error(EXEC_PROG, str(e))
            return 1
        command = [spec.binary] + spec.command(opts.args)
    else:
        command = [manager] + list(opts.args)

    if opts.exec_mode or opts.args:
        print(shlex.join(command))
    return 0


def _start() -> None:
    configure_logging()
    # Initialize colorama for cross-platform colored output
    init(autoreset=True)


def main():
    """Entry point for pkgmgr."""
    _start()
    sys.exit(run())


def main_exec():
    """Entry point for pkgmgrx."""
    _start()
    sys.exit(run_exec())


def main_which():
    """Entry point for pkgmgr-which."""
    _start()
    sys.exit(which())


if __name__ == '__main__':
    main()
