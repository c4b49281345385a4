"""
eip712-digest: EIP-712 typed structured data hashing.

Validates ``eth_signTypedData_v4`` requests and computes the 32-byte digest
a wallet signs. Signing itself is left to the caller (e.g. ``eth_account``).

    from eip712_digest import compute_signing_digest

    digest = compute_signing_digest(typed_data_json)
"""

from .engine.exceptions import (
    TypedDataError,
    SchemaValidationError,
    UnknownTypeError,
    MalformedTypeRefError,
    CyclicTypeError,
    EncodingError,
    InvalidHexEncodingError,
    InvalidFixedLengthError,
    InvalidAddressLengthError,
    InvalidFixedBytesLengthError,
    IntegerOverflowError,
    ArrayLengthMismatchError,
    TypeMismatchError,
    LimitExceededError,
    ConfigurationError,
)
from .schemas import FieldDef, TypedData, TypedDataDomain, TypedDataHash
from .encoding import (
    EncoderLimits,
    get_encoder_limits,
    validate,
    encode_type,
    type_hash,
    hash_struct,
    encode_data,
    encode_primitive_value,
    parse_bytes,
    parse_integer,
    convert_data_to_slice,
    domain_separator,
    domain_type_fields,
    signing_digest,
    hash_typed_data,
    compute_signing_digest,
)
from .utils import logger, setup_logger

__all__ = [
    "TypedDataError",
    "SchemaValidationError",
    "UnknownTypeError",
    "MalformedTypeRefError",
    "CyclicTypeError",
    "EncodingError",
    "InvalidHexEncodingError",
    "InvalidFixedLengthError",
    "InvalidAddressLengthError",
    "InvalidFixedBytesLengthError",
    "IntegerOverflowError",
    "ArrayLengthMismatchError",
    "TypeMismatchError",
    "LimitExceededError",
    "ConfigurationError",
    "FieldDef",
    "TypedData",
    "TypedDataDomain",
    "TypedDataHash",
    "EncoderLimits",
    "get_encoder_limits",
    "validate",
    "encode_type",
    "type_hash",
    "hash_struct",
    "encode_data",
    "encode_primitive_value",
    "parse_bytes",
    "parse_integer",
    "convert_data_to_slice",
    "domain_separator",
    "domain_type_fields",
    "signing_digest",
    "hash_typed_data",
    "compute_signing_digest",
    "logger",
    "setup_logger",
]
