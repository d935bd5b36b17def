"""Top level netplan document models."""

from typing import Dict, Iterator, Optional, Tuple

from pydantic import Field

from netplan_types.models.base import NetplanModel
from netplan_types.models.bonds import BondConfig
from netplan_types.models.bridges import BridgeConfig
from netplan_types.models.common import CommonProperties, Renderer
from netplan_types.models.ethernets import EthernetConfig, ModemConfig
from netplan_types.models.tunnels import TunnelConfig
from netplan_types.models.virtual import DummyDeviceConfig, VlanConfig, VrfConfig
from netplan_types.models.wifis import WifiConfig


DEVICE_TYPES = (
    "ethernets",
    "modems",
    "wifis",
    "bonds",
    "bridges",
    "vlans",
    "tunnels",
    "vrfs",
    "dummy_devices",
)


class NetworkConfig(NetplanModel):
    """The ``network:`` mapping."""
    version: int = Field(..., description="Syntax version, currently 2")
    renderer: Optional[Renderer] = None
    ethernets: Optional[Dict[str, EthernetConfig]] = None
    modems: Optional[Dict[str, ModemConfig]] = None
    wifis: Optional[Dict[str, WifiConfig]] = None
    bonds: Optional[Dict[str, BondConfig]] = None
    bridges: Optional[Dict[str, BridgeConfig]] = None
    vlans: Optional[Dict[str, VlanConfig]] = None
    tunnels: Optional[Dict[str, TunnelConfig]] = None
    vrfs: Optional[Dict[str, VrfConfig]] = None
    dummy_devices: Optional[Dict[str, DummyDeviceConfig]] = None

    def interfaces(self) -> Iterator[Tuple[str, str, CommonProperties]]:
        """Yield ``(device type, name, config)`` for every defined device."""
        for device_type in DEVICE_TYPES:
            devices = getattr(self, device_type) or {}
            for name, device in devices.items():
                yield device_type, name, device


class NetplanConfig(NetplanModel):
    """A complete netplan document."""
    network: NetworkConfig
