"""Pydantic models for the netplan configuration schema."""

from netplan_types.models.authentication import AuthConfig, AuthMethod, KeyManagement
from netplan_types.models.base import NetplanModel
from netplan_types.models.bonds import (
    AdSelect,
    ArpAllTargets,
    ArpValidate,
    BondConfig,
    BondMode,
    BondParameters,
    FailOverMacPolicy,
    LacpRate,
    PrimaryReselectPolicy,
    TransmitHashPolicy,
)
from netplan_types.models.bridges import BridgeConfig, BridgeParameters
from netplan_types.models.common import (
    ActivationMode,
    AddressMapping,
    AddressOptions,
    CommonProperties,
    Ipv6AddressGeneration,
    PreferredLifetime,
    Renderer,
)
from netplan_types.models.dhcp import DhcpOverrides
from netplan_types.models.ethernets import EmbeddedSwitchMode, EthernetConfig, ModemConfig
from netplan_types.models.network import NetplanConfig, NetworkConfig
from netplan_types.models.physical import (
    ConnectionMode,
    ControllerConfig,
    FailMode,
    Lacp,
    MatchConfig,
    OpenFlowProtocol,
    OpenVSwitchConfig,
    PhysicalDeviceProperties,
    SslConfig,
)
from netplan_types.models.routing import (
    NameserverConfig,
    RouteScope,
    RouteType,
    RoutingConfig,
    RoutingPolicy,
)
from netplan_types.models.tunnels import (
    TunnelConfig,
    TunnelKeys,
    TunnelMode,
    WireGuardPeer,
    WireGuardPeerKeys,
)
from netplan_types.models.virtual import DummyDeviceConfig, VlanConfig, VrfConfig
from netplan_types.models.wifis import (
    AccessPointConfig,
    AccessPointMode,
    WakeOnWlan,
    WifiConfig,
    WirelessBand,
)

__all__ = [
    "AccessPointConfig",
    "AccessPointMode",
    "ActivationMode",
    "AdSelect",
    "AddressMapping",
    "AddressOptions",
    "ArpAllTargets",
    "ArpValidate",
    "AuthConfig",
    "AuthMethod",
    "BondConfig",
    "BondMode",
    "BondParameters",
    "BridgeConfig",
    "BridgeParameters",
    "CommonProperties",
    "ConnectionMode",
    "ControllerConfig",
    "DhcpOverrides",
    "DummyDeviceConfig",
    "EmbeddedSwitchMode",
    "EthernetConfig",
    "FailMode",
    "FailOverMacPolicy",
    "Ipv6AddressGeneration",
    "KeyManagement",
    "Lacp",
    "LacpRate",
    "MatchConfig",
    "ModemConfig",
    "NameserverConfig",
    "NetplanConfig",
    "NetplanModel",
    "NetworkConfig",
    "OpenFlowProtocol",
    "OpenVSwitchConfig",
    "PhysicalDeviceProperties",
    "PreferredLifetime",
    "PrimaryReselectPolicy",
    "Renderer",
    "RouteScope",
    "RouteType",
    "RoutingConfig",
    "RoutingPolicy",
    "SslConfig",
    "TransmitHashPolicy",
    "TunnelConfig",
    "TunnelKeys",
    "TunnelMode",
    "VlanConfig",
    "VrfConfig",
    "WakeOnWlan",
    "WifiConfig",
    "WireGuardPeer",
    "WireGuardPeerKeys",
    "WirelessBand",
]
