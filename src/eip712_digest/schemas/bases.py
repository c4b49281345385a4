"""
Base Schema Models for eip712-digest

This module defines the base class all schema models inherit from. It
provides consistent validation and deterministic serialization across the
typed-data models.

Core Classes:
    - CanonicalModel: Pydantic base model with canonical JSON serialization

Dependencies:
    - pydantic: For data validation and serialization
"""

import json
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


def to_0x_hex(data: bytes) -> str:
    """Return ``data`` as a lowercase ``0x``-prefixed hex string."""
    return "0x" + bytes(data).hex()


def _json_default(value: Any) -> Any:
    """Serialize byte-like message values as ``0x`` hex strings."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return to_0x_hex(bytes(value))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class CanonicalModel(BaseModel):
    """
    Pydantic base model with canonical JSON serialization.

    Field names follow Python conventions while the wire names used by
    ``eth_signTypedData_v4`` payloads (``primaryType``, ``chainId``,
    ``verifyingContract``) are declared as aliases; both spellings are
    accepted on input and ``to_dict()`` emits the wire names.

    Features:
        - Deterministic key sorting in JSON output
        - No extra whitespace, suitable for display and comparison
        - Byte-like values rendered as ``0x`` hex strings

    Example:
        class MyModel(CanonicalModel):
            name: str
            value: int

        model = MyModel(name="test", value=123)
        canonical_json = model.to_canonical_json()  # '{"name":"test","value":123}'
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_canonical_json(self) -> str:
        """
        Convert model to a canonical JSON string.

        The conversion process:
        1. model_dump(by_alias=True) keeps raw Python values (ints stay
           arbitrary precision, bytes stay bytes)
        2. json.dumps with sorted keys and compact separators, bytes
           rendered as ``0x`` hex

        Returns:
            str: JSON string with sorted keys and no extra whitespace.
        """
        data = self.model_dump(by_alias=True, exclude_none=True)
        return json.dumps(
            data,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            default=_json_default,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert model to dictionary representation using wire names.

        Returns:
            Dict[str, Any]: Dictionary with all populated model fields.
        """
        return self.model_dump(by_alias=True, exclude_none=True)
