"""
Parsed EIP-712 field types.

A field's type reference (``"OrderComponents[2][2]"``, ``"uint256"``,
``"Mail"``) is parsed once, while validating the schema, into one of three
variants:

    ElementaryType   address, bool, string, bytes, bytesN, intN, uintN
    StructType       a reference to a declared struct
    ArrayType        an array of any FieldType, fixed (``[N]``) or dynamic (``[]``)

Array suffixes apply left to right, so the last suffix is the outermost
dimension: ``Foo[2][3]`` is an array of 3 arrays of 2 ``Foo``.
"""

import re
from dataclasses import dataclass
from typing import Collection, List, Optional, Tuple, Union

from ..engine.exceptions import MalformedTypeRefError, UnknownTypeError
from .constants import DYNAMIC_KINDS, ELEMENTARY_TYPES

_TYPE_REF = re.compile(r"^(?P<base>[A-Za-z_$][A-Za-z0-9_$]*)(?P<dims>(?:\[[0-9]*\])*)$")
_DIMENSION = re.compile(r"\[([0-9]*)\]")


@dataclass(frozen=True)
class ElementaryType:
    """
    An elementary solidity type.

    Attributes:
        name: Type name as written (``"uint256"``, ``"bytes32"``).
        kind: One of ``address``, ``bool``, ``string``, ``bytes``,
              ``fixed_bytes``, ``int``, ``uint``.
        size: Byte length for ``address``/``bytesN``, bit width for integers,
              ``None`` otherwise.
    """
    name: str
    kind: str
    size: Optional[int] = None

    @property
    def is_dynamic(self) -> bool:
        return self.kind in DYNAMIC_KINDS

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class StructType:
    """A reference to a struct declared in the type map."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ArrayType:
    """
    An array of ``element``.

    Attributes:
        element: Type of each element; may itself be an ``ArrayType``.
        length: Required element count for ``[N]``, ``None`` for ``[]``.
    """
    element: "FieldType"
    length: Optional[int] = None

    @property
    def is_fixed(self) -> bool:
        return self.length is not None

    @property
    def base(self) -> Union[ElementaryType, StructType]:
        """The innermost non-array type."""
        element = self.element
        while isinstance(element, ArrayType):
            element = element.element
        return element

    def __str__(self) -> str:
        return f"{self.element}[{'' if self.length is None else self.length}]"


FieldType = Union[ElementaryType, StructType, ArrayType]


def split_type_ref(type_ref: str) -> Tuple[str, List[Optional[int]]]:
    """
    Split a type reference into its base name and array dimensions.

    Args:
        type_ref: e.g. ``"OrderComponents[2][]"``.

    Returns:
        ``(base, dims)`` with dims in written order, ``None`` for ``[]``:
        ``("OrderComponents", [2, None])``.

    Raises:
        MalformedTypeRefError: On empty input, bad characters, unbalanced
            brackets, non-numeric or zero sizes.
    """
    if not isinstance(type_ref, str) or not type_ref:
        raise MalformedTypeRefError("empty type reference", type_ref)

    match = _TYPE_REF.match(type_ref)
    if not match:
        raise MalformedTypeRefError(f"malformed type reference {type_ref!r}", type_ref)

    dims: List[Optional[int]] = []
    for token in _DIMENSION.findall(match.group("dims")):
        if token == "":
            dims.append(None)
            continue
        size = int(token)
        if size <= 0:
            raise MalformedTypeRefError(f"array size must be positive in {type_ref!r}", type_ref)
        dims.append(size)
    return match.group("base"), dims


def base_type_name(type_ref: str) -> str:
    """Return ``type_ref`` with every array suffix stripped."""
    return split_type_ref(type_ref)[0]


def parse_type_ref(type_ref: str, struct_names: Collection[str]) -> FieldType:
    """
    Parse ``type_ref`` into a ``FieldType``.

    Args:
        type_ref: The field's type reference.
        struct_names: Names of the declared struct types.

    Returns:
        The parsed variant; array suffixes wrap the base type from the
        innermost (first written) to the outermost (last written).

    Raises:
        MalformedTypeRefError: If the reference is syntactically invalid.
        UnknownTypeError: If the base is neither elementary nor declared.

    Example::

        parse_type_ref("Foo[2][3]", {"Foo"})
        # ArrayType(element=ArrayType(element=StructType("Foo"), length=2), length=3)
    """
    base, dims = split_type_ref(type_ref)

    if base in ELEMENTARY_TYPES:
        kind, size = ELEMENTARY_TYPES[base]
        parsed: FieldType = ElementaryType(name=base, kind=kind, size=size)
    elif base in struct_names:
        parsed = StructType(name=base)
    else:
        raise UnknownTypeError(f"reference type {type_ref!r} is undefined", type_ref)

    for length in dims:
        parsed = ArrayType(element=parsed, length=length)
    return parsed
