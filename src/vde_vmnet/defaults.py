"""
Default resolution for options left unset on the command line
"""

import ipaddress
import logging
from dataclasses import replace

from .config import (
    RawOptions, IPAddress,
    DEFAULT_VDE_GROUP, DEFAULT_VMNET_MODE, DEFAULT_VMNET_MASK, DHCP_END_HOST_OCTET,
)
from .errors import ValidationError

logger = logging.getLogger(__name__)


def derive_dhcp_end(gateway: IPAddress) -> IPAddress:
    """
    Derive the end of the DHCP range from the gateway address.

    The last octet is replaced with .254 whatever the mask is, so
    192.168.105.1 gives 192.168.105.254.

    Args:
        gateway: Gateway address in dotted-quad form

    Returns:
        DHCP range end in dotted-quad form

    Raises:
        ValidationError: If gateway is not a valid IPv4 address
    """
    try:
        address = ipaddress.IPv4Address(gateway)
    except ValueError as e:
        raise ValidationError(
            f'invalid gateway address "{gateway}" was specified for --vmnet-gateway'
        ) from e

    host = (int(address) & 0xFFFFFF00) | DHCP_END_HOST_OCTET
    return str(ipaddress.IPv4Address(host))


def resolve_defaults(options: RawOptions) -> RawOptions:
    """
    Fill unset fields with their defaults.

    Fields the user set are never overwritten. DHCP end and mask are only
    derived when a gateway was given.

    Returns:
        New RawOptions; the argument is left untouched
    """
    resolved = replace(options)

    if resolved.group_name is None:
        resolved.group_name = DEFAULT_VDE_GROUP
    if resolved.mode is None:
        resolved.mode = DEFAULT_VMNET_MODE

    if resolved.gateway is not None:
        if resolved.dhcp_end is None:
            resolved.dhcp_end = derive_dhcp_end(resolved.gateway)
            logger.debug(f"Derived DHCP range end {resolved.dhcp_end} from gateway {resolved.gateway}")
        if resolved.mask is None:
            resolved.mask = DEFAULT_VMNET_MASK

    return resolved
