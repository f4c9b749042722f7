"""
Configuration models and type definitions
Python 3.12+ with modern type system
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional, TypeAlias
from uuid import UUID

# Python 3.12 type aliases
InterfaceName: TypeAlias = str
IPAddress: TypeAlias = str


class NetworkingMode(Enum):
    """vmnet operating modes, valued by their command-line spelling"""
    HOST = "host"
    SHARED = "shared"
    BRIDGED = "bridged"


DEFAULT_VDE_GROUP = "staff"
DEFAULT_VMNET_MODE = NetworkingMode.SHARED
DEFAULT_VMNET_MASK = "255.255.255.0"

# Host part of the derived DHCP range end (XXX.XXX.XXX.254)
DHCP_END_HOST_OCTET = 0xFE

NIL_UUID = UUID(int=0)


@dataclass(slots=True)
class RawOptions:
    """
    Options accumulated from the command line, before defaulting.

    Every field is optional: ``None`` means "not given". The resolvers
    treat any other value, including an empty string, as explicitly set.
    """
    switch_name: Optional[str] = None
    group_name: Optional[str] = None
    mode: Optional[NetworkingMode] = None
    physical_interface: Optional[InterfaceName] = None
    gateway: Optional[IPAddress] = None
    dhcp_end: Optional[IPAddress] = None
    mask: Optional[str] = None
    interface_id: Optional[UUID] = None


@dataclass(frozen=True, slots=True)
class VmnetConfig:
    """
    Immutable, fully validated configuration handed to the bridging engine.

    Attributes:
        switch_name: VDE switch to attach to (e.g., /tmp/vde.ctl)
        group_name: Group allowed to use the switch socket
        mode: vmnet mode
        interface_id: vmnet interface UUID, never the nil UUID
        physical_interface: Host interface for bridged mode (e.g., en0)
        gateway: Gateway for host/shared mode (e.g., 192.168.105.1)
        dhcp_end: Last address of the DHCP range (e.g., 192.168.105.254)
        mask: Subnet mask (e.g., 255.255.255.0)
    """
    switch_name: str
    group_name: str
    mode: NetworkingMode
    interface_id: UUID
    physical_interface: Optional[InterfaceName] = None
    gateway: Optional[IPAddress] = None
    dhcp_end: Optional[IPAddress] = None
    mask: Optional[str] = None

    def to_options(self) -> RawOptions:
        """Return the equivalent builder, e.g. to run it through validation again"""
        return RawOptions(**{f.name: getattr(self, f.name) for f in fields(self)})

    def summary_rows(self) -> list[tuple[str, str]]:
        """Field/value pairs for display, unset fields rendered as a dash"""
        rows = [
            ("vde-group", self.group_name),
            ("vde-switch", self.switch_name),
            ("vmnet-mode", self.mode.value),
            ("vmnet-interface", self.physical_interface),
            ("vmnet-gateway", self.gateway),
            ("vmnet-dhcp-end", self.dhcp_end),
            ("vmnet-mask", self.mask),
            ("vmnet-interface-id", str(self.interface_id)),
        ]
        return [(name, value if value is not None else "-") for name, value in rows]
