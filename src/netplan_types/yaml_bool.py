"""Handling of YAML booleans.

netplan documents are read as YAML 1.2, where only ``true`` and ``false`` are
booleans. netplan itself accepts the older, friendlier spellings as well:

- ``true``, ``yes``, ``on``, ``y`` for truthy
- ``false``, ``no``, ``off``, ``n`` for falsy

in any case. This module decodes those values, including optional fields, and
provides annotated types that attach the decoder to pydantic fields.
"""

from typing import Annotated, Any, Optional

from pydantic import BeforeValidator


TRUTHY = ("true", "yes", "on", "y")
FALSY = ("false", "no", "off", "n")
ACCEPTED_LITERALS = ("true", "false", "yes", "no", "on", "off", "y", "n")


class _Missing:
    """Marker for a field that is absent from the document."""

    def __repr__(self):
        return "MISSING"


MISSING = _Missing()


class YamlBoolError(ValueError):
    """Base class for YAML boolean decoding errors."""


class UnrecognizedValue(YamlBoolError):
    """A string that is not one of the accepted boolean literals."""

    def __init__(self, literal: str, accepted=ACCEPTED_LITERALS):
        self.literal = literal
        self.accepted = tuple(accepted)
        expected = ", ".join(f"`{v}`" for v in self.accepted)
        super().__init__(f"unknown variant `{literal}`, expected one of {expected}")


class TypeMismatch(YamlBoolError):
    """A value that is neither a boolean nor a string."""

    expected = "boolean"

    def __init__(self, value: Any):
        self.value = value
        self.actual_kind = type(value).__name__
        super().__init__(f"invalid type: {self.actual_kind}, expected a YAML boolean")


def decode_required(value: Any) -> bool:
    """Decode a YAML boolean to a bool."""
    # bool is checked first, it is also an int
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in TRUTHY:
            return True
        if lowered in FALSY:
            return False
        raise UnrecognizedValue(str(value))
    raise TypeMismatch(value)


def decode_optional(value: Any = MISSING) -> Optional[bool]:
    """Decode an optional YAML boolean.

    An absent field and an explicit ``null`` both decode to ``None``. When used
    as a pydantic validator the model must validate defaults, otherwise the
    decoder is never called for absent fields.
    """
    if value is MISSING or value is None:
        return None
    return decode_required(value)


LenientBool = Annotated[bool, BeforeValidator(decode_required)]
OptionalLenientBool = Annotated[Optional[bool], BeforeValidator(decode_optional)]
