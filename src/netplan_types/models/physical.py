"""Properties for physical device types and Open vSwitch settings."""

from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BeforeValidator, Field

from netplan_types.models.base import NetplanModel
from netplan_types.yaml_bool import OptionalLenientBool


class ConnectionMode(str, Enum):
    """Open vSwitch controller connection mode."""
    IN_BAND = "in-band"
    OUT_OF_BAND = "out-of-band"


class OpenFlowProtocol(str, Enum):
    """OpenFlow protocol versions."""
    OPENFLOW10 = "OpenFlow10"
    OPENFLOW11 = "OpenFlow11"
    OPENFLOW12 = "OpenFlow12"
    OPENFLOW13 = "OpenFlow13"
    OPENFLOW14 = "OpenFlow14"
    OPENFLOW15 = "OpenFlow15"
    OPENFLOW16 = "OpenFlow16"


class Lacp(str, Enum):
    """LACP mode of an Open vSwitch bond."""
    ACTIVE = "active"
    PASSIVE = "passive"
    OFF = "off"


class FailMode(str, Enum):
    """Open vSwitch bridge fail mode."""
    SECURE = "secure"
    STANDALONE = "standalone"


class SslConfig(NetplanModel):
    """Open vSwitch SSL settings."""
    ca_cert: Optional[str] = None
    certificate: Optional[str] = None
    private_key: Optional[str] = None


class ControllerConfig(NetplanModel):
    """Open vSwitch controller settings."""
    addresses: Optional[List[str]] = None
    connection_mode: Optional[ConnectionMode] = None


class OpenVSwitchConfig(NetplanModel):
    """Open vSwitch settings for an interface."""
    external_ids: Optional[Dict[str, str]] = None
    other_config: Optional[Dict[str, str]] = None
    lacp: Optional[Lacp] = None
    fail_mode: Optional[FailMode] = None
    mcast_snooping: OptionalLenientBool = None
    protocols: Optional[List[OpenFlowProtocol]] = None
    rstp: OptionalLenientBool = None
    controller: Optional[ControllerConfig] = None
    ports: Optional[List[List[str]]] = None
    ssl: Optional[SslConfig] = None


def _driver_list(value: Any) -> Any:
    if isinstance(value, str):
        return [value]
    return value


class MatchConfig(NetplanModel):
    """Selects physical devices by hardware properties.

    All given properties must match. Globs are supported for name and driver.
    """
    name: Optional[str] = Field(None, description="Kernel interface name, may use globs")
    macaddress: Optional[str] = None
    driver: Annotated[Optional[List[str]], BeforeValidator(_driver_list)] = None


class PhysicalDeviceProperties(NetplanModel):
    """Properties for physical device types."""
    match: Optional[MatchConfig] = None
    set_name: Optional[str] = Field(None, description="Rename the matched device")
    wakeonlan: OptionalLenientBool = None
    emit_lldp: OptionalLenientBool = None
    receive_checksum_offload: OptionalLenientBool = None
    transmit_checksum_offload: OptionalLenientBool = None
    tcp_segmentation_offload: OptionalLenientBool = None
    tcp6_segmentation_offload: OptionalLenientBool = None
    generic_segmentation_offload: OptionalLenientBool = None
    generic_receive_offload: OptionalLenientBool = None
    large_receive_offload: OptionalLenientBool = None
    openvswitch: Optional[OpenVSwitchConfig] = None
