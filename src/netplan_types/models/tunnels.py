"""Tunnel and WireGuard models."""

from enum import Enum
from typing import List, Optional, Union

from pydantic import Field

from netplan_types.models.base import NetplanModel
from netplan_types.models.common import CommonProperties


class TunnelMode(str, Enum):
    """Tunnel type."""
    SIT = "sit"
    GRE = "gre"
    IP6GRE = "ip6gre"
    IPIP = "ipip"
    IPIP6 = "ipip6"
    IP6IP6 = "ip6ip6"
    VTI = "vti"
    VTI6 = "vti6"
    WIREGUARD = "wireguard"
    GRETAP = "gretap"
    IP6GRETAP = "ip6gretap"
    ISATAP = "isatap"


class TunnelKeys(NetplanModel):
    """Separate input/output keys, or the WireGuard private key."""
    input: Optional[Union[int, str]] = None
    output: Optional[Union[int, str]] = None
    private: Optional[str] = None


class WireGuardPeerKeys(NetplanModel):
    """Keys of a WireGuard peer."""
    public: Optional[str] = None
    shared: Optional[str] = None


class WireGuardPeer(NetplanModel):
    """A WireGuard peer."""
    endpoint: Optional[str] = None
    allowed_ips: Optional[List[str]] = None
    keepalive: Optional[int] = Field(None, ge=0)
    keys: Optional[WireGuardPeerKeys] = None


class TunnelConfig(CommonProperties):
    """Tunnel device definition.

    ``key`` sets a single key for both directions, ``keys`` sets input and
    output keys separately (or the private key for WireGuard).
    """
    mode: Optional[TunnelMode] = None
    local: Optional[str] = None
    remote: Optional[str] = None
    ttl: Optional[int] = Field(None, ge=1, le=255)
    key: Optional[Union[int, str]] = None
    keys: Optional[TunnelKeys] = None
    mark: Optional[Union[int, str]] = None
    port: Optional[Union[int, str]] = None
    peers: Optional[List[WireGuardPeer]] = None
