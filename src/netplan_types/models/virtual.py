"""VLAN, VRF and dummy device models."""

from typing import List, Optional

from pydantic import Field

from netplan_types.models.common import CommonProperties


class VlanConfig(CommonProperties):
    """VLAN device definition."""
    id: Optional[int] = Field(None, ge=0, le=4094, description="VLAN ID")
    link: Optional[str] = Field(None, description="Underlying device netplan ID")


class VrfConfig(CommonProperties):
    """VRF device definition."""
    table: int = Field(..., description="Routing table bound to the VRF")
    interfaces: Optional[List[str]] = None


class DummyDeviceConfig(CommonProperties):
    """Dummy device definition."""
