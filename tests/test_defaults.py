"""
Tests for default resolution
"""

import pytest

from vde_vmnet.config import RawOptions, NetworkingMode
from vde_vmnet.defaults import resolve_defaults, derive_dhcp_end
from vde_vmnet.errors import ValidationError


class TestDeriveDhcpEnd:
    """Test DHCP range end derivation"""

    @pytest.mark.parametrize("gateway,expected", [
        ("192.168.105.1", "192.168.105.254"),
        ("10.0.0.1", "10.0.0.254"),
        ("172.16.5.200", "172.16.5.254"),
        ("192.168.105.254", "192.168.105.254"),
        ("0.0.0.0", "0.0.0.254"),
        ("255.255.255.255", "255.255.255.254"),
    ])
    def test_last_octet_replaced(self, gateway, expected):
        """Test the last octet becomes .254"""
        assert derive_dhcp_end(gateway) == expected

    @pytest.mark.parametrize("gateway", ["not-an-ip", "192.168.105", "300.1.1.1", ""])
    def test_invalid_gateway(self, gateway):
        """Test unparsable gateway is rejected"""
        with pytest.raises(ValidationError, match="invalid gateway address"):
            derive_dhcp_end(gateway)


class TestResolveDefaults:
    """Test default filling"""

    def test_group_and_mode_defaults(self):
        """Test group and mode get their defaults"""
        resolved = resolve_defaults(RawOptions(switch_name="sw"))
        assert resolved.group_name == "staff"
        assert resolved.mode is NetworkingMode.SHARED

    def test_no_gateway_nothing_derived(self):
        """Test DHCP end and mask stay unset without a gateway"""
        resolved = resolve_defaults(RawOptions(switch_name="sw"))
        assert resolved.dhcp_end is None
        assert resolved.mask is None

    def test_explicit_values_kept(self):
        """Test explicitly set fields are never overwritten"""
        options = RawOptions(
            switch_name="sw",
            group_name="",
            mode=NetworkingMode.HOST,
            gateway="192.168.105.1",
            dhcp_end="192.168.105.100",
            mask="255.255.0.0",
        )
        resolved = resolve_defaults(options)
        assert resolved == options

    def test_gateway_derives_range(self):
        """Test gateway fills DHCP end and mask"""
        resolved = resolve_defaults(RawOptions(switch_name="sw", gateway="192.168.105.1"))
        assert resolved.dhcp_end == "192.168.105.254"
        assert resolved.mask == "255.255.255.0"

    def test_stray_dhcp_end_left_alone(self):
        """Test DHCP end without a gateway is passed on for validation to reject"""
        resolved = resolve_defaults(RawOptions(switch_name="sw", dhcp_end="10.0.0.9"))
        assert resolved.dhcp_end == "10.0.0.9"
        assert resolved.mask is None

    def test_input_not_mutated(self):
        """Test resolution returns a new value"""
        options = RawOptions(switch_name="sw", gateway="10.0.0.1")
        resolve_defaults(options)
        assert options.group_name is None
        assert options.dhcp_end is None

    def test_invalid_gateway_fails(self):
        """Test an unparsable gateway stops default resolution"""
        with pytest.raises(ValidationError):
            resolve_defaults(RawOptions(switch_name="sw", gateway="bogus"))
