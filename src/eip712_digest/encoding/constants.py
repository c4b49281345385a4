"""
EIP-712 Encoding Constants and Configuration

Fixed values from the EIP-712 standard (elementary type names, the signing
prefix, the domain field layout) together with the environment-aware
resource limits applied to every encode.

Limits are read from the environment (a ``.env`` file is honoured):

    EIP712_MAX_DEPTH            maximum struct/array nesting depth (default 64)
    EIP712_MAX_ARRAY_ELEMENTS   maximum array elements per encode (default 1000000)
"""

import os
from typing import Dict, List, Optional, Tuple

import dotenv
from pydantic import BaseModel, Field, ValidationError

from ..engine.exceptions import ConfigurationError

dotenv.load_dotenv()


# ---------------------------------------------------------------------------
# EIP-712 constants
# ---------------------------------------------------------------------------

#: Prefix of the signing pre-image: EIP-191 version byte 0x01 ("structured data").
EIP712_PREFIX: bytes = b"\x19\x01"

#: Name of the pseudo-type describing the signing domain.
EIP712_DOMAIN_TYPE: str = "EIP712Domain"

#: Length of every encoded word and of every hash.
WORD_SIZE: int = 32

#: Length of an ``address`` value in bytes.
ADDRESS_SIZE: int = 20

#: Python types accepted as raw byte input.
BYTE_TYPES = (bytes, bytearray, memoryview)

#: Domain fields in canonical order: (field name, solidity type).
DOMAIN_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("name", "string"),
    ("version", "string"),
    ("chainId", "uint256"),
    ("verifyingContract", "address"),
    ("salt", "bytes32"),
)

INTEGER_SIZES: Tuple[int, ...] = tuple(range(8, 257, 8))
FIXED_BYTES_SIZES: Tuple[int, ...] = tuple(range(1, 33))


def _build_elementary_types() -> Dict[str, Tuple[str, Optional[int]]]:
    """Map every elementary type name to ``(kind, size)``."""
    table: Dict[str, Tuple[str, Optional[int]]] = {
        "address": ("address", ADDRESS_SIZE),
        "bool": ("bool", None),
        "string": ("string", None),
        "bytes": ("bytes", None),
        # Legacy aliases accepted by wallets; both mean 256 bits.
        "int": ("int", 256),
        "uint": ("uint", 256),
    }
    for size in FIXED_BYTES_SIZES:
        table[f"bytes{size}"] = ("fixed_bytes", size)
    for size in INTEGER_SIZES:
        table[f"int{size}"] = ("int", size)
        table[f"uint{size}"] = ("uint", size)
    return table


#: Elementary type name -> (kind, size in bytes for address/bytesN, bits for integers).
ELEMENTARY_TYPES: Dict[str, Tuple[str, Optional[int]]] = _build_elementary_types()

#: Elementary kinds hashed rather than head-encoded.
DYNAMIC_KINDS: Tuple[str, ...] = ("string", "bytes")


def is_elementary_type(type_name: str) -> bool:
    """Return ``True`` when ``type_name`` is an elementary EIP-712 type."""
    return type_name in ELEMENTARY_TYPES


# ---------------------------------------------------------------------------
# Resource limits
# ---------------------------------------------------------------------------

DEFAULT_MAX_DEPTH = 64
DEFAULT_MAX_ARRAY_ELEMENTS = 1_000_000


class EncoderLimits(BaseModel):
    """Upper bounds applied to a single encode/hash call."""
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, description="Maximum struct/array nesting depth")
    max_array_elements: int = Field(
        default=DEFAULT_MAX_ARRAY_ELEMENTS,
        ge=1,
        description="Maximum number of array elements visited per encode, across all arrays",
    )


_LIMIT_ENV_KEYS: List[Tuple[str, str]] = [
    ("max_depth", "EIP712_MAX_DEPTH"),
    ("max_array_elements", "EIP712_MAX_ARRAY_ELEMENTS"),
]


def get_encoder_limits() -> EncoderLimits:
    """
    Build ``EncoderLimits`` from the environment.

    Unset variables fall back to the defaults.

    Returns:
        EncoderLimits: The effective limits.

    Raises:
        ConfigurationError: If a variable is set but is not a positive integer.

    Example::

        # .env
        EIP712_MAX_DEPTH=16
        EIP712_MAX_ARRAY_ELEMENTS=4096

        limits = get_encoder_limits()
        assert limits.max_depth == 16
    """
    values = {}
    for field_name, env_key in _LIMIT_ENV_KEYS:
        raw = os.getenv(env_key)
        if raw is None or not raw.strip():
            continue
        try:
            values[field_name] = int(raw.strip())
        except ValueError:
            raise ConfigurationError(f"{env_key} must be an integer, got {raw!r}")

    try:
        return EncoderLimits(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid encoder limits: {e}")
