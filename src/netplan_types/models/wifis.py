"""Wifi device models."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from netplan_types.models.authentication import AuthConfig
from netplan_types.models.base import NetplanModel
from netplan_types.models.common import CommonProperties
from netplan_types.models.physical import PhysicalDeviceProperties
from netplan_types.yaml_bool import OptionalLenientBool


class WirelessBand(str, Enum):
    """Frequency band of an access point."""
    GHZ_2_4 = "2.4GHz"
    GHZ_5 = "5GHz"


class AccessPointMode(str, Enum):
    """Type of wireless network."""
    INFRASTRUCTURE = "infrastructure"
    AP = "ap"
    ADHOC = "adhoc"


class WakeOnWlan(str, Enum):
    """WoWLAN trigger."""
    ANY = "any"
    DISCONNECT = "disconnect"
    MAGIC_PKT = "magic_pkt"
    GTK_REKEY_FAILURE = "gtk_rekey_failure"
    EAP_IDENTITY_REQ = "eap_identity_req"
    FOUR_WAY_HANDSHAKE = "four_way_handshake"
    RFKILL_RELEASE = "rfkill_release"
    TCP = "tcp"
    DEFAULT = "default"


class AccessPointConfig(NetplanModel):
    """Settings for one wireless network, keyed by SSID."""
    password: Optional[str] = None
    auth: Optional[AuthConfig] = None
    mode: Optional[AccessPointMode] = None
    bssid: Optional[str] = None
    band: Optional[WirelessBand] = None
    channel: Optional[int] = Field(None, ge=0)
    hidden: OptionalLenientBool = None


class WifiConfig(PhysicalDeviceProperties, CommonProperties):
    """Wifi device definition."""
    access_points: Optional[Dict[str, AccessPointConfig]] = None
    wakeonwlan: Optional[List[WakeOnWlan]] = None
