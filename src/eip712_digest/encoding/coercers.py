"""
Primitive Value Coercers

Normalise the loosely-typed values found in decoded JSON (and in Python
callers) into canonical byte strings, integers and element lists. Each
coercion accepts a closed set of input variants:

parse_bytes
    ``0x``-prefixed even-length hex string, ``bytes`` (and subclasses such
    as ``HexBytes``), ``bytearray`` or ``memoryview``. Never raises; returns
    ``(value, ok)``.

parse_integer
    Decimal string (optional sign), ``0x`` hex string (unsigned magnitude),
    ``int`` or an integral ``float``. Range-checked against the solidity type.

convert_data_to_slice
    Any ordered sequence other than text or bytes, returned as a ``list``.
"""

import re
from collections.abc import Sequence
from typing import Any, List, Optional, Tuple

from eth_utils import decode_hex, is_0x_prefixed

from ..engine.exceptions import (
    IntegerOverflowError,
    InvalidHexEncodingError,
    TypeMismatchError,
)
from .constants import BYTE_TYPES, ELEMENTARY_TYPES

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]*$")
_DECIMAL = re.compile(r"^[+-]?[0-9]+$")

# largest magnitude a float64 holds without losing integer precision
_MAX_EXACT_FLOAT = 2 ** 53


def is_hex_digits(value: str) -> bool:
    """Return ``True`` when ``value`` holds only hex digits (no prefix)."""
    return bool(_HEX_DIGITS.match(value))


def parse_bytes(value: Any) -> Tuple[Optional[bytes], bool]:
    """
    Coerce a byte-like value into ``bytes``.

    Args:
        value: Hex string with ``0x``/``0X`` prefix, ``bytes``, ``bytearray``
               or ``memoryview``.

    Returns:
        ``(data, True)`` on success, ``(None, False)`` otherwise. Odd nibble
        counts, non-hex characters, strings without prefix, integers, booleans
        and ``None`` are all rejected.

    Example::

        parse_bytes("0x1234")      # (b"\\x12\\x34", True)
        parse_bytes("0x01233")     # (None, False)
        parse_bytes(15)            # (None, False)
    """
    if isinstance(value, BYTE_TYPES):
        return bytes(value), True

    if isinstance(value, str):
        if not is_0x_prefixed(value):
            return None, False
        digits = value[2:]
        if len(digits) % 2 or not is_hex_digits(digits):
            return None, False
        return decode_hex(value), True

    return None, False


def integer_bounds(solidity_type: str) -> Tuple[int, int]:
    """
    Return the inclusive ``(min, max)`` range of an integer type.

    Raises:
        TypeMismatchError: If ``solidity_type`` is not ``intN``/``uintN``.
    """
    kind, bits = ELEMENTARY_TYPES.get(solidity_type, (None, None))
    if kind == "uint":
        return 0, (1 << bits) - 1
    if kind == "int":
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    raise TypeMismatchError(f"{solidity_type!r} is not an integer type")


def parse_integer(solidity_type: str, value: Any, path: Optional[str] = None, depth: Optional[int] = None) -> int:
    """
    Coerce ``value`` into an ``int`` within the range of ``solidity_type``.

    Hex strings are read as unsigned magnitudes, so ``"0xff"`` is 255 for
    every integer type (and therefore out of range for ``int8``).

    Args:
        solidity_type: ``intN`` or ``uintN`` (N in 8..256 step 8), ``int`` or ``uint``.
        value: Decimal string, ``0x`` hex string, ``int`` or integral ``float`` of magnitude at most 2**53.
        path: Field path for error messages.
        depth: Nesting depth for error messages.

    Returns:
        The range-checked integer.

    Raises:
        IntegerOverflowError: If the value is outside the type's range.
        InvalidHexEncodingError: If a ``0x`` string holds non-hex digits.
        TypeMismatchError: For any other kind of value.
    """
    low, high = integer_bounds(solidity_type)

    if isinstance(value, bool):
        raise TypeMismatchError(f"invalid integer value {value!r} for type {solidity_type}", path, depth)

    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        # JSON numbers may arrive as floats; only exact integers are usable.
        if not value.is_integer():
            raise TypeMismatchError(f"invalid float value {value!r} for type {solidity_type}", path, depth)
        if abs(value) > _MAX_EXACT_FLOAT:
            raise TypeMismatchError(
                f"float value {value!r} for type {solidity_type} exceeds 2**53 and may have lost precision",
                path,
                depth,
            )
        number = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if is_0x_prefixed(text):
            digits = text[2:]
            if not digits or not is_hex_digits(digits):
                raise InvalidHexEncodingError(f"invalid hex integer {value!r} for type {solidity_type}", path, depth)
            number = int(digits, 16)
        elif _DECIMAL.match(text):
            number = int(text, 10)
        else:
            raise TypeMismatchError(f"invalid integer value {value!r} for type {solidity_type}", path, depth)
    else:
        raise TypeMismatchError(
            f"invalid integer value {value!r}/{type(value).__name__} for type {solidity_type}", path, depth
        )

    if number < low or number > high:
        raise IntegerOverflowError(
            f"integer {number} out of range for {solidity_type} [{low}, {high}]",
            path,
            depth,
            solidity_type=solidity_type,
            value=number,
        )
    return number


def convert_data_to_slice(value: Any, path: Optional[str] = None, depth: Optional[int] = None) -> List[Any]:
    """
    Normalise an ordered collection into a ``list`` of opaque elements.

    Args:
        value: A list, tuple or any other ``Sequence`` that is not text or bytes.

    Returns:
        A new list with the elements in their original order.

    Raises:
        TypeMismatchError: If ``value`` is not an ordered collection.
    """
    if isinstance(value, (str,) + BYTE_TYPES) or not isinstance(value, Sequence):
        raise TypeMismatchError(f"expected an array, got {type(value).__name__}", path, depth)
    return list(value)
