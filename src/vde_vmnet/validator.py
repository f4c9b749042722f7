"""
Cross-field validation of resolved options
"""

import ipaddress
import logging

from .config import RawOptions, VmnetConfig, NetworkingMode
from .errors import ValidationError
from .identity import is_nil

logger = logging.getLogger(__name__)

GATEWAY_WARNING = (
    "--vmnet-gateway=IP should be explicitly specified to avoid conflicting "
    "with other applications"
)


def _check_resolved(options: RawOptions | VmnetConfig) -> None:
    """Reject options that skipped the default or identity resolvers"""
    if not options.switch_name:
        raise ValidationError("VDESWITCH must not be empty")
    if options.group_name is None or options.mode is None:
        raise ValidationError("group and mode are unset; resolve defaults before validating")
    if is_nil(options.interface_id):
        raise ValidationError("vmnet interface ID is unset; resolve it before validating")


def validate(options: RawOptions | VmnetConfig) -> VmnetConfig:
    """
    Validate resolved options and freeze them into a VmnetConfig.

    Rules are checked in order and the first violation wins:
    1. bridged mode needs --vmnet-interface
    2. without a gateway, --vmnet-dhcp-end and --vmnet-mask are rejected
       (host and shared mode also get a warning)
    3. with a gateway, bridged mode is rejected and the gateway must be IPv4

    Validating an already valid VmnetConfig returns an equal value.

    Args:
        options: Options after default and identity resolution

    Returns:
        Validated configuration

    Raises:
        ValidationError: On the first rule violation
    """
    _check_resolved(options)
    bridged = options.mode is NetworkingMode.BRIDGED

    if bridged and options.physical_interface is None:
        raise ValidationError(
            'bridged mode requires an interface: vmnet mode "bridged" needs --vmnet-interface'
        )

    if options.gateway is None:
        if not bridged:
            logger.warning(GATEWAY_WARNING)
        if options.dhcp_end is not None:
            raise ValidationError("dhcp-end requires gateway: --vmnet-dhcp-end=IP needs --vmnet-gateway=IP")
        if options.mask is not None:
            raise ValidationError("mask requires gateway: --vmnet-mask=MASK needs --vmnet-gateway=IP")
    else:
        if bridged:
            raise ValidationError(
                'bridged mode conflicts with an explicit gateway: drop --vmnet-gateway or change --vmnet-mode'
            )
        try:
            ipaddress.IPv4Address(options.gateway)
        except ValueError as e:
            raise ValidationError(
                f'invalid gateway address "{options.gateway}" was specified for --vmnet-gateway'
            ) from e
        if options.dhcp_end is None or options.mask is None:
            raise ValidationError("DHCP range end and mask are unset; resolve defaults before validating")

    return VmnetConfig(
        switch_name=options.switch_name,
        group_name=options.group_name,
        mode=options.mode,
        interface_id=options.interface_id,
        physical_interface=options.physical_interface,
        gateway=options.gateway,
        dhcp_end=options.dhcp_end,
        mask=options.mask,
    )
