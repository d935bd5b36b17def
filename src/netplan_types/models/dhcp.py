"""DHCP override models."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BeforeValidator, Field

from netplan_types.models.base import NetplanModel
from netplan_types.yaml_bool import OptionalLenientBool, decode_required


def _bool_or_route(value: Any) -> Any:
    """use-domains takes a YAML boolean or the special value ``route``."""
    if value is None:
        return None
    if isinstance(value, str) and value.lower() == "route":
        return "route"
    return decode_required(value)


UseDomains = Annotated[
    Optional[Union[bool, Literal["route"]]], BeforeValidator(_bool_or_route)
]


class DhcpOverrides(NetplanModel):
    """DHCP behaviour overrides.

    Most overrides only have an effect with the networkd backend, except
    use-routes and route-metric. They only apply when the corresponding dhcp4
    or dhcp6 is enabled.
    """
    use_dns: OptionalLenientBool = Field(None, description="Use DNS servers received from DHCP")
    use_ntp: OptionalLenientBool = Field(None, description="Use NTP servers received from DHCP")
    send_hostname: OptionalLenientBool = None
    use_hostname: OptionalLenientBool = None
    use_mtu: OptionalLenientBool = None
    hostname: Optional[str] = Field(None, description="Hostname sent to the DHCP server")
    use_routes: OptionalLenientBool = None
    route_metric: Optional[int] = Field(None, ge=0)
    use_domains: UseDomains = None
