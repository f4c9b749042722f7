"""
vde_vmnet configuration front-end
Parses and validates the command line of the vmnet.framework VDE bridge

Python 3.12+ with modern type system
"""

__version__ = "0.1.0"

from .config import NetworkingMode, RawOptions, VmnetConfig
from .errors import VmnetCLIError, ParseError, ValidationError
from .parser import create_parser, parse_args, Continue, ShowHelp, ShowVersion
from .defaults import resolve_defaults, derive_dhcp_end
from .identity import resolve_interface_id
from .validator import validate
from .cli import build_config, parse_cli, main

__all__ = [
    "NetworkingMode",
    "RawOptions",
    "VmnetConfig",
    "VmnetCLIError",
    "ParseError",
    "ValidationError",
    "create_parser",
    "parse_args",
    "Continue",
    "ShowHelp",
    "ShowVersion",
    "resolve_defaults",
    "derive_dhcp_end",
    "resolve_interface_id",
    "validate",
    "build_config",
    "parse_cli",
    "main",
]
