from .bases import CanonicalModel, to_0x_hex
from .typed_data import FieldDef, TypeMap, TypedData, TypedDataDomain, TypedDataHash, normalize_types

__all__ = [
    "CanonicalModel",
    "to_0x_hex",
    "FieldDef",
    "TypeMap",
    "TypedData",
    "TypedDataDomain",
    "TypedDataHash",
    "normalize_types",
]
