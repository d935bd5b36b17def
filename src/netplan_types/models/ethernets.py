"""Ethernet and modem device models."""

from enum import Enum
from typing import Optional

from pydantic import Field

from netplan_types.models.authentication import AuthConfig
from netplan_types.models.common import CommonProperties
from netplan_types.models.physical import PhysicalDeviceProperties
from netplan_types.yaml_bool import OptionalLenientBool


class EmbeddedSwitchMode(str, Enum):
    """Operational mode of a SmartNIC embedded switch."""
    SWITCHDEV = "switchdev"
    LEGACY = "legacy"


class EthernetConfig(PhysicalDeviceProperties, CommonProperties):
    """Ethernet device definition."""
    link: Optional[str] = Field(None, description="(SR-IOV) physical function of this VF")
    virtual_function_count: Optional[int] = Field(None, ge=0)
    embedded_switch_mode: Optional[EmbeddedSwitchMode] = None
    delay_virtual_functions_rebind: OptionalLenientBool = None
    auth: Optional[AuthConfig] = None


class ModemConfig(PhysicalDeviceProperties, CommonProperties):
    """GSM/CDMA modem definition.

    Modems are only supported by the NetworkManager backend.
    """
    apn: Optional[str] = Field(None, description="Carrier access point name")
    auto_config: OptionalLenientBool = None
    device_id: Optional[str] = None
    network_id: Optional[str] = None
    number: Optional[str] = None
    password: Optional[str] = None
    pin: Optional[str] = None
    sim_id: Optional[str] = None
    sim_operator_id: Optional[str] = None
    username: Optional[str] = None
