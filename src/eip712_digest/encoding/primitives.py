"""
EIP-712 Primitive Encoder

Encodes one value of an elementary type into its 32-byte word:

    address     left-padded 20 bytes
    bool        31 zero bytes then 0x00 / 0x01
    bytesN      exactly N bytes, right-padded
    intN/uintN  big-endian two's complement, sign-extended with 0xff
    bytes       keccak256 of the raw bytes
    string      keccak256 of the UTF-8 bytes

``bytes`` and ``string`` are dynamic: their word is a hash rather than a
head encoding.
"""

from typing import Any, Optional

from eth_utils import is_0x_prefixed, keccak

from ..engine.exceptions import (
    InvalidAddressLengthError,
    InvalidFixedBytesLengthError,
    InvalidHexEncodingError,
    TypeMismatchError,
    UnknownTypeError,
)
from .coercers import is_hex_digits, parse_bytes, parse_integer
from .constants import ADDRESS_SIZE, BYTE_TYPES, ELEMENTARY_TYPES, WORD_SIZE
from .types import ElementaryType

_BOOL_STRINGS = {"true": True, "false": False}


def _require_bytes(solidity_type: str, value: Any, path: Optional[str], depth: Optional[int]) -> bytes:
    data, ok = parse_bytes(value)
    if ok:
        return data
    if isinstance(value, str) and is_0x_prefixed(value):
        raise InvalidHexEncodingError(f"invalid hex string {value!r} for type {solidity_type}", path, depth)
    raise TypeMismatchError(
        f"provided data '{value!r}' doesn't match type '{solidity_type}'", path, depth
    )


def _encode_address(value: Any, path: Optional[str], depth: Optional[int]) -> bytes:
    if isinstance(value, str):
        digits = value[2:] if is_0x_prefixed(value) else value
        if len(digits) != ADDRESS_SIZE * 2:
            raise InvalidAddressLengthError(
                f"invalid address {value!r}: expected {ADDRESS_SIZE * 2} hex digits, got {len(digits)}",
                path,
                depth,
                expected=ADDRESS_SIZE * 2,
                actual=len(digits),
            )
        if not is_hex_digits(digits):
            raise InvalidHexEncodingError(f"invalid address {value!r}: not hexadecimal", path, depth)
        data = bytes.fromhex(digits)
    elif isinstance(value, BYTE_TYPES):
        data = bytes(value)
        if len(data) != ADDRESS_SIZE:
            raise InvalidAddressLengthError(
                f"invalid address: expected {ADDRESS_SIZE} bytes, got {len(data)}",
                path,
                depth,
                expected=ADDRESS_SIZE,
                actual=len(data),
            )
    else:
        raise TypeMismatchError(f"provided data '{value!r}' doesn't match type 'address'", path, depth)
    return data.rjust(WORD_SIZE, b"\x00")


def _encode_bool(value: Any, path: Optional[str], depth: Optional[int]) -> bytes:
    if isinstance(value, str) and value in _BOOL_STRINGS:
        value = _BOOL_STRINGS[value]
    if not isinstance(value, bool):
        raise TypeMismatchError(f"invalid bool value {value!r}", path, depth)
    return (b"\x01" if value else b"\x00").rjust(WORD_SIZE, b"\x00")


def encode_elementary(
    element_type: ElementaryType,
    value: Any,
    depth: int = 0,
    path: Optional[str] = None,
) -> bytes:
    """
    Encode ``value`` as a parsed elementary type.

    Same contract as ``encode_primitive_value`` but skips the type-name
    lookup; used by the struct encoder with types parsed at validation time.
    """
    kind = element_type.kind
    name = element_type.name

    if kind == "address":
        return _encode_address(value, path, depth)

    if kind == "bool":
        return _encode_bool(value, path, depth)

    if kind == "fixed_bytes":
        data = _require_bytes(name, value, path, depth)
        if len(data) != element_type.size:
            raise InvalidFixedBytesLengthError(
                f"invalid {name} value: expected {element_type.size} bytes, got {len(data)}",
                path,
                depth,
                expected=element_type.size,
                actual=len(data),
            )
        return data.ljust(WORD_SIZE, b"\x00")

    if kind == "bytes":
        return keccak(_require_bytes(name, value, path, depth))

    if kind == "string":
        if not isinstance(value, str):
            raise TypeMismatchError(f"provided data '{value!r}' doesn't match type 'string'", path, depth)
        return keccak(text=value)

    if kind in ("int", "uint"):
        number = parse_integer(name, value, path, depth)
        return number.to_bytes(WORD_SIZE, "big", signed=(kind == "int"))

    raise UnknownTypeError(f"unrecognized elementary type {name!r}", name)


def encode_primitive_value(
    solidity_type: str,
    value: Any,
    depth: int = 0,
    path: Optional[str] = None,
) -> bytes:
    """
    Encode one elementary value into its 32-byte word.

    Args:
        solidity_type: Elementary type name (``address``, ``bool``,
                       ``bytes1``..``bytes32``, ``bytes``, ``string``,
                       ``int8``..``int256``, ``uint8``..``uint256``).
        value: The value, in any of the accepted input variants.
        depth: Nesting depth, reported in error messages only.
        path: Field path, reported in error messages only.

    Returns:
        Exactly 32 bytes.

    Raises:
        InvalidAddressLengthError: Address not 20 bytes / 40 hex digits.
        InvalidFixedBytesLengthError: ``bytesN`` value not exactly N bytes.
        InvalidHexEncodingError: Malformed ``0x`` hex content.
        IntegerOverflowError: Integer outside the type's range.
        TypeMismatchError: Value of an unsupported kind.
        UnknownTypeError: ``solidity_type`` is not elementary.

    Example::

        encode_primitive_value("bytes1", b"\\x01").hex()
        # '0100000000000000000000000000000000000000000000000000000000000000'
        encode_primitive_value("int8", -1).hex()
        # 'ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff'
    """
    try:
        kind, size = ELEMENTARY_TYPES[solidity_type]
    except KeyError:
        raise UnknownTypeError(f"{solidity_type!r} is not an elementary type", solidity_type)
    return encode_elementary(ElementaryType(name=solidity_type, kind=kind, size=size), value, depth, path)
