"""Authentication models for ethernet and wifi."""

from enum import Enum
from typing import Optional

from pydantic import Field

from netplan_types.models.base import NetplanModel


class KeyManagement(str, Enum):
    """Supported key management modes."""
    NONE = "none"
    PSK = "psk"
    EAP = "eap"
    IEEE8021X = "802.1x"


class AuthMethod(str, Enum):
    """Supported EAP methods."""
    TLS = "tls"
    PEAP = "peap"
    TTLS = "ttls"


class AuthConfig(NetplanModel):
    """Authentication settings for an interface or access point."""
    key_management: Optional[KeyManagement] = None
    password: Optional[str] = Field(None, description="EAP password or WPA pre-shared key")
    method: Optional[AuthMethod] = None
    identity: Optional[str] = None
    anonymous_identity: Optional[str] = None
    ca_certificate: Optional[str] = Field(None, description="Path to trusted CA certificates")
    client_certificate: Optional[str] = None
    client_key: Optional[str] = None
    client_key_password: Optional[str] = None
    phase2_auth: Optional[str] = None
