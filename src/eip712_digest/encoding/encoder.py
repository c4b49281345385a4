"""
EIP-712 Struct and Array Encoder

Implements ``encodeData`` and ``hashStruct``:

    hashStruct(T, v) = keccak256(typeHash(T) ‖ encodeData(T, v))
    encodeData(T, v) = word(field_1) ‖ word(field_2) ‖ ...

where a field's word is

    elementary  its primitive word (``string``/``bytes`` hashed)
    struct      hashStruct of the nested mapping
    array       keccak256 of the concatenated element words, one dimension
                stripped per level (``Foo[2][2]`` hashes arrays of hashes)

Field values missing from a mapping encode as the zero value of their type
(zero word, hash of empty bytes, empty array, struct of zero fields). An
explicit ``None`` is rejected, and keys the type does not declare are
ignored.

Every call is bounded by ``EncoderLimits``: nesting deeper than
``max_depth`` or visiting more than ``max_array_elements`` array elements
raises ``LimitExceededError``.
"""

from typing import Any, Mapping, Optional, Union

from eth_utils import keccak

from ..engine.exceptions import ArrayLengthMismatchError, LimitExceededError, TypeMismatchError
from ..utils import logger
from .coercers import convert_data_to_slice
from .constants import EncoderLimits, WORD_SIZE, get_encoder_limits
from .primitives import encode_elementary
from .type_strings import type_hash
from .types import ArrayType, ElementaryType, FieldType, StructType
from .validator import TypeSchema, as_schema

_ZERO_WORD = b"\x00" * WORD_SIZE
_EMPTY_HASH = keccak(b"")


class _EncodeContext:
    """State of one encode call: compiled schema, limits, elements visited."""

    def __init__(self, schema: TypeSchema, limits: EncoderLimits):
        self.schema = schema
        self.limits = limits
        self.array_elements = 0

    def _check_depth(self, depth: int, path: str) -> None:
        if depth > self.limits.max_depth:
            raise LimitExceededError(f"nesting depth exceeds the limit of {self.limits.max_depth}", path, depth)

    def _count_elements(self, count: int, depth: int, path: str) -> None:
        self.array_elements += count
        if self.array_elements > self.limits.max_array_elements:
            raise LimitExceededError(
                f"more than {self.limits.max_array_elements} array elements in one encode", path, depth
            )

    def encode_struct(self, type_name: str, value: Any, depth: int, path: str) -> bytes:
        self._check_depth(depth, path)
        if not isinstance(value, Mapping):
            raise TypeMismatchError(
                f"expected a mapping for struct {type_name}, got {type(value).__name__}", path, depth
            )

        fields = self.schema.fields(type_name)
        declared = {field.name for field in fields}
        extra = [key for key in value if key not in declared]
        if extra:
            logger.debug(f"Ignoring undeclared keys {extra} of {type_name} at {path}")

        words = []
        for field in fields:
            field_path = f"{path}.{field.name}"
            if field.name in value:
                words.append(self.encode_value(field.field_type, value[field.name], depth + 1, field_path))
            else:
                words.append(self.encode_absent(field.field_type, depth + 1, field_path))
        return b"".join(words)

    def hash_struct(self, type_name: str, value: Any, depth: int, path: str) -> bytes:
        return keccak(type_hash(type_name, self.schema) + self.encode_struct(type_name, value, depth, path))

    def encode_array(self, array_type: ArrayType, value: Any, depth: int, path: str) -> bytes:
        self._check_depth(depth, path)
        elements = convert_data_to_slice(value, path, depth)
        if array_type.is_fixed and len(elements) != array_type.length:
            raise ArrayLengthMismatchError(
                f"expected {array_type.length} elements for {array_type}, got {len(elements)}",
                path,
                depth,
                expected=array_type.length,
                actual=len(elements),
            )
        self._count_elements(len(elements), depth, path)

        element_type = array_type.element
        words = [
            self.encode_value(element_type, element, depth + 1, f"{path}[{index}]")
            for index, element in enumerate(elements)
        ]
        return keccak(b"".join(words))

    def encode_value(self, field_type: FieldType, value: Any, depth: int, path: str) -> bytes:
        if value is None:
            raise TypeMismatchError(f"null value for field of type {field_type}", path, depth)
        if isinstance(field_type, ElementaryType):
            return encode_elementary(field_type, value, depth, path)
        if isinstance(field_type, StructType):
            return self.hash_struct(field_type.name, value, depth, path)
        return self.encode_array(field_type, value, depth, path)

    def encode_absent(self, field_type: FieldType, depth: int, path: str) -> bytes:
        if isinstance(field_type, ElementaryType):
            return _EMPTY_HASH if field_type.is_dynamic else _ZERO_WORD
        if isinstance(field_type, StructType):
            return self.hash_struct(field_type.name, {}, depth, path)
        return self.encode_array(field_type, [], depth, path)


def _context(types: Union[TypeSchema, Mapping[str, Any]], limits: Optional[EncoderLimits]) -> _EncodeContext:
    return _EncodeContext(as_schema(types), limits or get_encoder_limits())


def encode_data(
    type_name: str,
    value: Mapping[str, Any],
    types: Union[TypeSchema, Mapping[str, Any]],
    limits: Optional[EncoderLimits] = None,
) -> bytes:
    """
    Encode the fields of a struct value, without its type hash.

    Args:
        type_name: Declared struct type of ``value``.
        value: Mapping from field name to field value.
        types: Type map or compiled schema.
        limits: Resource limits; read from the environment when omitted.

    Returns:
        32 bytes per declared field, in declaration order.

    Raises:
        UnknownTypeError: If ``type_name`` is not declared.
        EncodingError: (or a subclass) if a value does not fit its field.
    """
    return _context(types, limits).encode_struct(type_name, value, 0, type_name)


def hash_struct(
    type_name: str,
    value: Mapping[str, Any],
    types: Union[TypeSchema, Mapping[str, Any]],
    limits: Optional[EncoderLimits] = None,
) -> bytes:
    """
    Compute ``keccak256(type_hash(type_name) ‖ encode_data(type_name, value))``.

    Args:
        type_name: Declared struct type of ``value``.
        value: Mapping from field name to field value; nested structs are
               mappings, arrays are lists or tuples.
        types: Type map or compiled schema.
        limits: Resource limits; read from the environment when omitted.

    Returns:
        The 32-byte struct hash.

    Raises:
        UnknownTypeError: If ``type_name`` is not declared.
        ArrayLengthMismatchError: If a ``T[N]`` value does not hold N elements.
        TypeMismatchError: If a value has the wrong shape (or is ``None``).
        LimitExceededError: If the value is nested too deep or too large.
        EncodingError: (other subclasses) for invalid primitive values.

    Example::

        person = {"name": "Cow", "wallet": "0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826"}
        hash_struct("Person", person, {"Person": [{"name": "name", "type": "string"},
                                                  {"name": "wallet", "type": "address"}]})
    """
    context = _context(types, limits)
    logger.debug(f"Hashing struct {type_name}")
    return context.hash_struct(type_name, value, 0, type_name)
