"""
CLI interface for vde_vmnet: command line to validated VmnetConfig
"""

import sys
import logging
from typing import Optional, Sequence
from rich.console import Console
from rich.table import Table
from rich import box

from . import __version__
from .config import RawOptions, VmnetConfig
from .defaults import resolve_defaults
from .errors import VmnetCLIError
from .identity import resolve_interface_id
from .parser import create_parser, parse_args, Continue, ShowHelp, ShowVersion
from .settings import load_settings
from .validator import validate

logger = logging.getLogger(__name__)

# Package logger; diagnostics on it stay visible whatever level is configured
PACKAGE_LOGGER = "vde_vmnet"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging; the package never drops below WARNING"""
    numeric_level = getattr(logging, level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(min(numeric_level, logging.WARNING))


def build_config(options: RawOptions) -> VmnetConfig:
    """Run parsed options through default, identity and validation stages."""
    return validate(resolve_interface_id(resolve_defaults(options)))


def parse_cli(argv: Optional[Sequence[str]] = None, prog: Optional[str] = None) -> VmnetConfig:
    """
    Turn the command line into a validated configuration.

    This is the contract the bridging engine relies on: it either gets a
    complete VmnetConfig or the process exits.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        prog: Program name shown in usage (default: derived from sys.argv[0])

    Returns:
        Validated configuration

    Raises:
        SystemExit: 0 after --help/--version, 1 after any parse or
            validation error (reported together with the usage text)
    """
    parser = create_parser(prog)

    try:
        match parse_args(argv, parser):
            case ShowHelp():
                parser.print_help()
                raise SystemExit(0)
            case ShowVersion():
                print(__version__)
                raise SystemExit(0)
            case Continue(options=options):
                return build_config(options)
    except VmnetCLIError as e:
        # Printed, not logged: the configured log level must not hide it
        Console(stderr=True).print(f"[FAIL] {e}", markup=False, highlight=False, soft_wrap=True)
        parser.print_help(sys.stderr)
        raise SystemExit(1) from e


def show_config(config: VmnetConfig) -> None:
    """Display the resolved configuration on stderr."""
    console = Console(stderr=True)

    console.print("[bold cyan]vmnet Configuration[/bold cyan]")
    table = Table(box=box.SIMPLE)
    table.add_column("Option", style="cyan")
    table.add_column("Value", style="white")

    for name, value in config.summary_rows():
        table.add_row(name, value)

    console.print(table)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    settings = load_settings()
    setup_logging(settings.log_level)

    try:
        config = parse_cli(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1

    logger.debug(f"Resolved configuration for switch {config.switch_name}")
    if settings.show_summary:
        show_config(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
