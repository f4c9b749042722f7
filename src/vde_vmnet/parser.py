"""
Command-line argument parsing for vde_vmnet
"""

import argparse
import sys
import uuid
from dataclasses import dataclass
from typing import NoReturn, Optional, Sequence, TypeAlias

from . import __version__
from .config import RawOptions, NetworkingMode, DEFAULT_VDE_GROUP, DEFAULT_VMNET_MASK
from .errors import ParseError

# Long options that take a value, in help order
VALUE_OPTIONS = (
    "vde-group",
    "vmnet-mode",
    "vmnet-interface",
    "vmnet-gateway",
    "vmnet-dhcp-end",
    "vmnet-mask",
    "vmnet-interface-id",
)


@dataclass(frozen=True, slots=True)
class Continue:
    """Arguments parsed; carry on with defaulting and validation"""
    options: RawOptions


@dataclass(frozen=True, slots=True)
class ShowHelp:
    """--help was given"""


@dataclass(frozen=True, slots=True)
class ShowVersion:
    """--version was given"""


ParsedArgs: TypeAlias = Continue | ShowHelp | ShowVersion

_LONG_FLAGS = {"help": ShowHelp, "version": ShowVersion}
_SHORT_FLAGS = {"h": ShowHelp, "v": ShowVersion}


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ParseError instead of exiting"""

    def error(self, message: str) -> NoReturn:
        raise ParseError(message)


def create_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Create the argument parser; its help text doubles as the usage dump."""
    parser = _ArgumentParser(
        prog=prog,
        usage="%(prog)s [OPTION]... VDESWITCH",
        description=(
            "vmnet.framework support for rootless QEMU.\n"
            "vde_vmnet does not require QEMU to run as the root user, "
            "but vde_vmnet itself has to run as the root, in most cases."
        ),
        epilog=f"version: {__version__}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "switch_names",
        metavar="VDESWITCH",
        nargs="*",
        help="VDE switch to connect to, e.g., \"/tmp/vde.ctl\""
    )

    parser.add_argument(
        "--vde-group",
        metavar="GROUP",
        help=f"VDE group name (default: \"{DEFAULT_VDE_GROUP}\")"
    )

    parser.add_argument(
        "--vmnet-mode",
        metavar="MODE",
        help="vmnet mode: host, shared or bridged (default: \"shared\")"
    )

    parser.add_argument(
        "--vmnet-interface",
        metavar="INTERFACE",
        help="interface used for --vmnet-mode=bridged, e.g., \"en0\""
    )

    parser.add_argument(
        "--vmnet-gateway",
        metavar="IP",
        help=(
            "gateway used for --vmnet-mode=(host|shared), e.g., \"192.168.105.1\" "
            "(default: decided by macOS); the next IP (e.g., \"192.168.105.2\") "
            "is used as the first DHCP address"
        )
    )

    parser.add_argument(
        "--vmnet-dhcp-end",
        metavar="IP",
        help="end of the DHCP range (default: XXX.XXX.XXX.254); requires --vmnet-gateway"
    )

    parser.add_argument(
        "--vmnet-mask",
        metavar="MASK",
        help=f"subnet mask (default: \"{DEFAULT_VMNET_MASK}\"); requires --vmnet-gateway"
    )

    parser.add_argument(
        "--vmnet-interface-id",
        metavar="UUID",
        help="vmnet interface ID (default: random)"
    )

    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="display this help and exit"
    )

    parser.add_argument(
        "-v", "--version",
        action="store_true",
        help="display version information and exit"
    )

    return parser


def _match_long_option(name: str) -> Optional[str]:
    """Resolve a long option name, accepting unambiguous prefixes like getopt_long"""
    candidates = (*VALUE_OPTIONS, *_LONG_FLAGS)
    if name in candidates:
        return name
    matches = [candidate for candidate in candidates if candidate.startswith(name)]
    return matches[0] if len(matches) == 1 else None


@dataclass(frozen=True, slots=True)
class _ScannedArgs:
    """Result of the pre-scan: an early exit, or argv ready for argparse"""
    early_exit: Optional[ShowHelp | ShowVersion] = None
    option_args: tuple[str, ...] = ()
    trailing: tuple[str, ...] = ()


def _scan_args(argv: Sequence[str]) -> _ScannedArgs:
    """
    Look for --help/--version and normalize argv ahead of argparse.

    The first flag found wins, whatever else is on the command line.
    The separate value of a value-taking option is joined to it
    ("--vde-group -h" becomes "--vde-group=-h"), so it is taken verbatim
    even when it starts with a dash. Everything after "--" is positional.
    """
    option_args: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            return _ScannedArgs(option_args=tuple(option_args), trailing=tuple(args))
        if arg.startswith("--"):
            name, has_value, _ = arg[2:].partition("=")
            option = _match_long_option(name)
            if option in _LONG_FLAGS:
                return _ScannedArgs(early_exit=_LONG_FLAGS[option]())
            if option in VALUE_OPTIONS and not has_value:
                value = next(args, None)
                if value is not None:
                    arg = f"--{option}={value}"
        elif arg.startswith("-") and len(arg) > 1:
            for flag in arg[1:]:
                if flag in _SHORT_FLAGS:
                    return _ScannedArgs(early_exit=_SHORT_FLAGS[flag]())
        option_args.append(arg)
    return _ScannedArgs(option_args=tuple(option_args))


def _parse_mode(value: str) -> NetworkingMode:
    try:
        return NetworkingMode(value)
    except ValueError:
        raise ParseError(f'unknown vmnet mode "{value}"') from None


def _parse_interface_id(value: str) -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError:
        raise ParseError(f'failed to parse UUID "{value}"') from None


def parse_args(
    argv: Optional[Sequence[str]] = None,
    parser: Optional[argparse.ArgumentParser] = None
) -> ParsedArgs:
    """
    Parse the command line into a ParsedArgs outcome.

    String options are copied verbatim. Only the mode and the interface
    ID are interpreted here.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        parser: Parser from create_parser() (created if not provided)

    Returns:
        ShowHelp or ShowVersion if either flag is present, else Continue

    Raises:
        ParseError: On unknown options, missing values, a bad mode or UUID,
            or anything but exactly one non-empty VDESWITCH
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    scanned = _scan_args(argv)
    if scanned.early_exit is not None:
        return scanned.early_exit

    parser = parser or create_parser()
    namespace = parser.parse_intermixed_args(list(scanned.option_args))
    switch_names = [*(namespace.switch_names or []), *scanned.trailing]

    if len(switch_names) != 1:
        raise ParseError(
            f"expected exactly one VDESWITCH argument, got {len(switch_names)}"
        )
    switch_name = switch_names[0]
    if not switch_name:
        raise ParseError("VDESWITCH must not be empty")

    options = RawOptions(
        switch_name=switch_name,
        group_name=namespace.vde_group,
        physical_interface=namespace.vmnet_interface,
        gateway=namespace.vmnet_gateway,
        dhcp_end=namespace.vmnet_dhcp_end,
        mask=namespace.vmnet_mask,
    )
    if namespace.vmnet_mode is not None:
        options.mode = _parse_mode(namespace.vmnet_mode)
    if namespace.vmnet_interface_id is not None:
        options.interface_id = _parse_interface_id(namespace.vmnet_interface_id)

    return Continue(options)
