"""
Pytest configuration and shared fixtures
"""

import logging
import uuid

import pytest

from vde_vmnet.config import NetworkingMode, RawOptions, VmnetConfig


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep user and system settings out of every test"""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("VDE_VMNET_LOG_LEVEL", raising=False)
    monkeypatch.delenv("VDE_VMNET_SHOW_SUMMARY", raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo the level setup_logging puts on the package logger"""
    package_logger = logging.getLogger("vde_vmnet")
    level = package_logger.level
    yield
    package_logger.setLevel(level)


@pytest.fixture
def fixed_interface_id() -> uuid.UUID:
    """A non-nil interface ID supplied by the user"""
    return uuid.UUID("8a1d7c3e-52b4-4f0e-9a61-3c2d9e0f1b2a")


@pytest.fixture
def shared_options(fixed_interface_id) -> RawOptions:
    """Resolved shared-mode options with an explicit gateway"""
    return RawOptions(
        switch_name="/tmp/vde.ctl",
        group_name="staff",
        mode=NetworkingMode.SHARED,
        gateway="192.168.105.1",
        dhcp_end="192.168.105.254",
        mask="255.255.255.0",
        interface_id=fixed_interface_id,
    )


@pytest.fixture
def bridged_options(fixed_interface_id) -> RawOptions:
    """Resolved bridged-mode options on en0"""
    return RawOptions(
        switch_name="/tmp/vde.ctl",
        group_name="staff",
        mode=NetworkingMode.BRIDGED,
        physical_interface="en0",
        interface_id=fixed_interface_id,
    )


@pytest.fixture
def shared_config(fixed_interface_id) -> VmnetConfig:
    """Valid shared-mode configuration"""
    return VmnetConfig(
        switch_name="/tmp/vde.ctl",
        group_name="staff",
        mode=NetworkingMode.SHARED,
        interface_id=fixed_interface_id,
        gateway="192.168.105.1",
        dhcp_end="192.168.105.254",
        mask="255.255.255.0",
    )
