"""
EIP-712 Type Schema Validation

Checks that a type map is usable for hashing and compiles it into a
``TypeSchema``: every field's type reference parsed once into a
``FieldType`` variant, reused by every subsequent encode.

Checks performed
----------------
- type names are identifiers and do not shadow elementary types
- field names and field types are non-empty, field names unique per type
- every type reference is well formed (``Foo``, ``Foo[]``, ``Foo[2][]``)
  with positive fixed sizes
- every base type is elementary or declared
- no cycle of bare struct references (a reference through an array is fine)
- the primary type is declared
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Mapping, Union

from pydantic import ValidationError

from ..engine.exceptions import (
    CyclicTypeError,
    MalformedTypeRefError,
    SchemaValidationError,
    UnknownTypeError,
)
from ..schemas.typed_data import TypedData, TypeMap, normalize_types
from ..utils import logger
from .constants import EIP712_DOMAIN_TYPE, is_elementary_type
from .domain import effective_types
from .types import ArrayType, FieldType, StructType, parse_type_ref

_TYPE_NAME = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass(frozen=True)
class CompiledField:
    """A struct field with its parsed type."""
    name: str
    type_ref: str
    field_type: FieldType


class TypeSchema:
    """
    A validated, parsed type map.

    Build with ``TypeSchema.compile(types)``; instances are never mutated
    afterwards apart from the canonical type-string memo, which only ever
    caches pure results.
    """

    def __init__(self, types: TypeMap, fields: Dict[str, List[CompiledField]]):
        self._types = types
        self._fields = fields
        # canonical type strings, memoised by encode_type
        self._encoded_types: Dict[str, str] = {}

    @classmethod
    def compile(cls, types: Mapping[str, Any]) -> "TypeSchema":
        """
        Validate ``types`` and parse every field's type reference.

        Args:
            types: Type map; values are lists of ``FieldDef`` or
                   ``{"name", "type"}`` dicts.

        Returns:
            The compiled schema.

        Raises:
            MalformedTypeRefError: On bad names, empty or duplicate fields,
                or malformed type references.
            UnknownTypeError: On references to undeclared types.
            CyclicTypeError: On struct cycles without array indirection.
        """
        try:
            normalized = normalize_types(types)
        except ValidationError as e:
            raise MalformedTypeRefError(f"invalid type declaration: {e}")

        struct_names = set(normalized)
        fields: Dict[str, List[CompiledField]] = {}
        for type_name, declared in normalized.items():
            if not type_name:
                raise MalformedTypeRefError("empty type key", type_name)
            if not _TYPE_NAME.match(type_name):
                raise MalformedTypeRefError(f"invalid type name {type_name!r}", type_name)
            if is_elementary_type(type_name):
                raise MalformedTypeRefError(f"type name {type_name!r} shadows an elementary type", type_name)

            compiled: List[CompiledField] = []
            seen_names = set()
            for index, field in enumerate(declared):
                if not field.type:
                    raise MalformedTypeRefError(f"type {type_name!r}:{index}: empty Type", field.type)
                if not field.name:
                    raise MalformedTypeRefError(f"type {type_name!r}:{index}: empty Name", field.type)
                if field.name in seen_names:
                    raise MalformedTypeRefError(
                        f"type {type_name!r}: duplicate field name {field.name!r}", field.type
                    )
                seen_names.add(field.name)
                compiled.append(
                    CompiledField(
                        name=field.name,
                        type_ref=field.type,
                        field_type=parse_type_ref(field.type, struct_names),
                    )
                )
            fields[type_name] = compiled

        schema = cls(normalized, fields)
        schema._check_struct_cycles()
        return schema

    def _check_struct_cycles(self) -> None:
        """Reject cycles made only of bare (non-array) struct references."""
        done = set()
        for root in sorted(self._fields):
            if root in done:
                continue
            # Iterative DFS; each stack entry is (type name, iterator over its bare struct refs).
            path: List[str] = [root]
            on_path = {root}
            stack = [(root, self._bare_struct_refs(root))]
            while stack:
                current, refs = stack[-1]
                advanced = False
                for ref in refs:
                    if ref in on_path:
                        cycle = path[path.index(ref):] + [ref]
                        raise CyclicTypeError(
                            f"type {ref!r} references itself without an array: {' -> '.join(cycle)}",
                            cycle,
                        )
                    if ref in done:
                        continue
                    path.append(ref)
                    on_path.add(ref)
                    stack.append((ref, self._bare_struct_refs(ref)))
                    advanced = True
                    break
                if not advanced:
                    stack.pop()
                    on_path.discard(current)
                    path.pop()
                    done.add(current)

    def _bare_struct_refs(self, type_name: str) -> Iterator[str]:
        for field in self._fields[type_name]:
            if isinstance(field.field_type, StructType):
                yield field.field_type.name

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._fields

    @property
    def type_names(self) -> List[str]:
        return list(self._fields)

    @property
    def types(self) -> TypeMap:
        return self._types

    def fields(self, type_name: str) -> List[CompiledField]:
        """
        Return the compiled fields of ``type_name``.

        Raises:
            UnknownTypeError: If the type is not declared.
        """
        try:
            return self._fields[type_name]
        except KeyError:
            raise UnknownTypeError(f"type {type_name!r} is undefined", type_name)

    def encoded_type(self, type_name: str, build: Callable[[str], str]) -> str:
        """Return the canonical type string of ``type_name``, building it once with ``build``."""
        encoded = self._encoded_types.get(type_name)
        if encoded is None:
            encoded = self._encoded_types[type_name] = build(type_name)
        return encoded

    def struct_dependencies(self, type_name: str) -> Iterator[str]:
        """Yield struct names referenced by ``type_name``'s fields, arrays unwrapped."""
        for field in self.fields(type_name):
            base = field.field_type.base if isinstance(field.field_type, ArrayType) else field.field_type
            if isinstance(base, StructType):
                yield base.name


def as_schema(types: Union[TypeSchema, Mapping[str, Any]]) -> TypeSchema:
    """Return ``types`` compiled, compiling a raw type map when needed."""
    if isinstance(types, TypeSchema):
        return types
    return TypeSchema.compile(types)


def as_typed_data(typed_data: Union[TypedData, Mapping[str, Any]]) -> TypedData:
    """
    Return ``typed_data`` as a ``TypedData`` model.

    Raises:
        SchemaValidationError: If a mapping does not have the typed-data shape.
    """
    if isinstance(typed_data, TypedData):
        return typed_data
    try:
        return TypedData.model_validate(typed_data)
    except ValidationError as e:
        raise SchemaValidationError(f"invalid typed data: {e}")


def validate_types(types: Union[TypeSchema, Mapping[str, Any]], primary_type: str) -> TypeSchema:
    """
    Validate a type map and its primary type.

    Args:
        types: Type map (or an already compiled schema).
        primary_type: Name of the top-level struct.

    Returns:
        The compiled schema, for reuse by the encoder.

    Raises:
        SchemaValidationError: (or a subclass) when the schema is unusable.
    """
    schema = as_schema(types)
    if primary_type not in schema:
        raise UnknownTypeError(f"primary type {primary_type!r} is undefined", primary_type)
    return schema


def compile_typed_data(typed_data: Union[TypedData, Mapping[str, Any]]) -> TypeSchema:
    """
    Validate a complete request and return the schema used to hash it.

    The caller's declarations are checked as written (including a declared
    ``EIP712Domain``); the returned schema is built from the effective type
    map, whose ``EIP712Domain`` matches the populated domain fields.
    """
    typed_data = as_typed_data(typed_data)
    if EIP712_DOMAIN_TYPE in typed_data.types:
        TypeSchema.compile(typed_data.types)

    schema = validate_types(effective_types(typed_data), typed_data.primary_type)
    logger.debug(f"Validated typed data: primary type {typed_data.primary_type}, types {schema.type_names}")
    return schema


def validate(typed_data: Union[TypedData, Mapping[str, Any]]) -> None:
    """
    Validate the type schema of a typed-data request.

    Succeeds iff every type reference in every declared type resolves to an
    elementary type or a declared struct, and the primary type is declared.
    Message values are not inspected; they are checked when encoding.

    Args:
        typed_data: A ``TypedData`` or the equivalent JSON-shaped dict.

    Raises:
        SchemaValidationError: (or a subclass) describing the first problem found.

    Example::

        validate({
            "types": {"BulkOrder": [{"name": "tree", "type": "OrderComponent[2]"}], ...},
            "primaryType": "BulkOrder",
            "domain": {...},
            "message": {...},
        })
        # UnknownTypeError: reference type 'OrderComponent[2]' is undefined
    """
    compile_typed_data(typed_data)
