"""Bridge device models."""

from typing import Dict, List, Optional, Union

from pydantic import Field

from netplan_types.models.base import NetplanModel
from netplan_types.models.common import CommonProperties
from netplan_types.yaml_bool import OptionalLenientBool


class BridgeParameters(NetplanModel):
    """Bridge tuning parameters.

    Time values are in seconds unless a unit suffix is given, which networkd
    understands but NetworkManager does not.
    """
    ageing_time: Optional[Union[int, str]] = None
    priority: Optional[int] = Field(None, ge=0)
    port_priority: Optional[Dict[str, int]] = Field(None, description="Per-port priority, 0-63")
    forward_delay: Optional[Union[int, str]] = None
    hello_time: Optional[Union[int, str]] = None
    max_age: Optional[Union[int, str]] = None
    path_cost: Optional[Dict[str, int]] = None
    stp: OptionalLenientBool = None


class BridgeConfig(CommonProperties):
    """Bridge device definition."""
    interfaces: Optional[List[str]] = None
    parameters: Optional[BridgeParameters] = None
