"""
netplan-types - typed models for netplan network configuration.

Maps the netplan YAML schema to pydantic models, with support for netplan's
lenient YAML booleans (yes/no, on/off, y/n in any case).
"""

__version__ = "0.5.0"

# Re-export key components for easier access
from netplan_types.loader import NetplanLoadError, NetplanLoader, parse_netplan, render_netplan
from netplan_types.models.network import NetplanConfig, NetworkConfig
from netplan_types.yaml_bool import (
    LenientBool,
    OptionalLenientBool,
    TypeMismatch,
    UnrecognizedValue,
    YamlBoolError,
    decode_optional,
    decode_required,
)

__all__ = [
    "LenientBool",
    "NetplanConfig",
    "NetplanLoadError",
    "NetplanLoader",
    "NetworkConfig",
    "OptionalLenientBool",
    "TypeMismatch",
    "UnrecognizedValue",
    "YamlBoolError",
    "decode_optional",
    "decode_required",
    "parse_netplan",
    "render_netplan",
]
