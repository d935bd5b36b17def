"""Properties shared by every device type."""

from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BeforeValidator, Field

from netplan_types.models.base import NetplanModel
from netplan_types.models.dhcp import DhcpOverrides
from netplan_types.models.routing import NameserverConfig, RoutingConfig, RoutingPolicy
from netplan_types.yaml_bool import OptionalLenientBool


class Renderer(str, Enum):
    """Networking backend for a definition."""
    NETWORKD = "networkd"
    NETWORK_MANAGER = "NetworkManager"
    SRIOV = "sriov"


class ActivationMode(str, Enum):
    """Management policy of an interface."""
    MANUAL = "manual"
    OFF = "off"


class Ipv6AddressGeneration(str, Enum):
    """Method for creating SLAAC addresses."""
    EUI64 = "eui64"
    STABLE_PRIVACY = "stable-privacy"


class PreferredLifetime(str, Enum):
    """Preferred lifetime of a static address."""
    FOREVER = "forever"
    ZERO = "0"


def _lifetime(value: Any) -> Any:
    # `lifetime: 0` loads as an integer
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class AddressOptions(NetplanModel):
    """Options for a single static address."""
    lifetime: Annotated[Optional[PreferredLifetime], BeforeValidator(_lifetime)] = None
    label: Optional[str] = None


# Either "10.0.0.5/24" or {"10.0.0.5/24": {"lifetime": 0, "label": "maas"}}
AddressMapping = Union[str, Dict[str, AddressOptions]]


class CommonProperties(NetplanModel):
    """Properties for all device types."""
    renderer: Optional[Renderer] = None
    dhcp4: OptionalLenientBool = Field(None, description="Enable DHCP for IPv4")
    dhcp6: OptionalLenientBool = Field(None, description="Enable DHCP for IPv6")
    ipv6_mtu: Optional[int] = Field(None, ge=0)
    ipv6_privacy: OptionalLenientBool = None
    link_local: Optional[List[str]] = None
    ignore_carrier: OptionalLenientBool = None
    critical: OptionalLenientBool = None
    dhcp_identifier: Optional[str] = None
    dhcp4_overrides: Optional[DhcpOverrides] = None
    dhcp6_overrides: Optional[DhcpOverrides] = None
    accept_ra: OptionalLenientBool = None
    addresses: Optional[List[AddressMapping]] = None
    ipv6_address_generation: Optional[Ipv6AddressGeneration] = None
    ipv6_address_token: Optional[str] = None
    gateway4: Optional[str] = Field(None, description="Deprecated, use routes")
    gateway6: Optional[str] = Field(None, description="Deprecated, use routes")
    nameservers: Optional[NameserverConfig] = None
    macaddress: Optional[str] = None
    mtu: Optional[int] = Field(None, ge=0)
    optional: OptionalLenientBool = None
    optional_addresses: Optional[List[str]] = None
    activation_mode: Optional[ActivationMode] = None
    routes: Optional[List[RoutingConfig]] = None
    routing_policy: Optional[List[RoutingPolicy]] = None
