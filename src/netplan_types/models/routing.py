"""Routing, routing policy and nameserver models."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from netplan_types.models.base import NetplanModel
from netplan_types.yaml_bool import OptionalLenientBool


class RouteType(str, Enum):
    """The type of route."""
    UNICAST = "unicast"
    ANYCAST = "anycast"
    BLACKHOLE = "blackhole"
    BROADCAST = "broadcast"
    LOCAL = "local"
    MULTICAST = "multicast"
    NAT = "nat"
    PROHIBIT = "prohibit"
    THROW = "throw"
    UNREACHABLE = "unreachable"
    XRESOLVE = "xresolve"


class RouteScope(str, Enum):
    """How wide-ranging the route is."""
    GLOBAL = "global"
    LINK = "link"
    HOST = "host"


class RoutingConfig(NetplanModel):
    """A static route for an interface.

    If type is local or nat the default scope is host. If type is unicast
    without a gateway, or broadcast, multicast or anycast, the default scope is
    link. Otherwise it is global.
    """
    from_: Optional[str] = Field(None, alias="from", description="Source address for the route")
    to: Optional[str] = Field(None, description="Destination address, or `default`")
    via: Optional[str] = Field(None, description="Gateway address")
    on_link: OptionalLenientBool = None
    metric: Optional[int] = Field(None, ge=0)
    type: Optional[RouteType] = None
    scope: Optional[RouteScope] = None
    table: Optional[int] = Field(None, ge=1)
    mtu: Optional[int] = Field(None, ge=0)
    congestion_window: Optional[int] = Field(None, ge=0)
    advertised_receive_window: Optional[int] = Field(None, ge=0)


class RoutingPolicy(NetplanModel):
    """An extra routing policy rule."""
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    table: int = Field(..., ge=1, description="Routing table number")
    priority: Optional[int] = None
    mark: Optional[int] = Field(None, ge=1)
    type_of_service: Optional[int] = None


class NameserverConfig(NetplanModel):
    """DNS servers and search domains."""
    addresses: Optional[List[str]] = None
    search: Optional[List[str]] = None
