"""
Canonical EIP-712 type strings and type hashes.

``encode_type("Mail", types)`` produces

    Mail(Person from,Person to,string contents)Person(string name,address wallet)

the primary type's declaration followed by the declarations of every
struct it references, directly or transitively (through arrays too), each
exactly once and sorted by name. ``type_hash`` is the keccak-256 of that
string's UTF-8 bytes. Both depend only on the type map, never on values.
"""

from typing import Any, List, Mapping, Union

from eth_utils import keccak

from .validator import TypeSchema, as_schema


def find_dependencies(type_name: str, types: Union[TypeSchema, Mapping[str, Any]]) -> List[str]:
    """
    Return the struct types ``type_name`` depends on, sorted, excluding itself.

    The closure is computed with an explicit worklist and visited set, so
    self-referencing and mutually-referencing types terminate.

    Raises:
        UnknownTypeError: If ``type_name`` is not declared.
    """
    schema = as_schema(types)
    schema.fields(type_name)

    visited = set()
    worklist = [type_name]
    while worklist:
        current = worklist.pop()
        for dependency in schema.struct_dependencies(current):
            if dependency == type_name or dependency in visited:
                continue
            visited.add(dependency)
            worklist.append(dependency)
    return sorted(visited)


def _declaration(type_name: str, schema: TypeSchema) -> str:
    members = ",".join(f"{field.type_ref} {field.name}" for field in schema.fields(type_name))
    return f"{type_name}({members})"


def encode_type(type_name: str, types: Union[TypeSchema, Mapping[str, Any]]) -> str:
    """
    Build the canonical type string of ``type_name``.

    Args:
        type_name: A declared struct name.
        types: Type map or compiled schema.

    Returns:
        The declaration of ``type_name`` followed by the sorted declarations
        of its dependencies. Field types keep their array suffixes verbatim.

    Raises:
        UnknownTypeError: If ``type_name`` is not declared.

    Example::

        encode_type("BulkOrder", types)
        # 'BulkOrder(OrderComponents[2][2] tree)ConsiderationItem(...)OfferItem(...)OrderComponents(...)'
    """
    schema = as_schema(types)

    def build(name: str) -> str:
        return _declaration(name, schema) + "".join(
            _declaration(dependency, schema) for dependency in find_dependencies(name, schema)
        )

    return schema.encoded_type(type_name, build)


def type_hash(type_name: str, types: Union[TypeSchema, Mapping[str, Any]]) -> bytes:
    """Return ``keccak256(encode_type(type_name, types))`` (32 bytes)."""
    return keccak(text=encode_type(type_name, types))
