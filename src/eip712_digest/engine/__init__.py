from .exceptions import (
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
]
