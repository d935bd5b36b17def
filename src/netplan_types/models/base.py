"""Base model shared by every netplan block."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


def kebab_case(name: str) -> str:
    """Map a python field name to its netplan key."""
    return name.replace("_", "-")


class NetplanModel(BaseModel):
    """Base for netplan configuration blocks.

    Field names are snake_case in python and kebab-case in YAML. Defaults are
    validated so that optional YAML booleans go through the decoder even when
    the key is absent.
    """

    model_config = ConfigDict(
        alias_generator=kebab_case,
        populate_by_name=True,
        validate_default=True,
        frozen=True,
        extra="allow",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Return the netplan shaped data for this block, without unset keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
