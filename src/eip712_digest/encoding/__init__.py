"""
EIP-712 encoding pipeline.

validate -> encode_type / type_hash -> hash_struct -> domain_separator -> digest
"""

from .constants import EncoderLimits, get_encoder_limits
from .types import ElementaryType, StructType, ArrayType, FieldType, parse_type_ref, split_type_ref
from .coercers import parse_bytes, parse_integer, integer_bounds, convert_data_to_slice
from .primitives import encode_primitive_value
from .domain import domain_type_fields, domain_message
from .validator import TypeSchema, validate, validate_types, compile_typed_data
from .type_strings import find_dependencies, encode_type, type_hash
from .encoder import encode_data, hash_struct
from .digest import domain_separator, signing_digest, hash_typed_data, compute_signing_digest

__all__ = [
    "EncoderLimits",
    "get_encoder_limits",
    "ElementaryType",
    "StructType",
    "ArrayType",
    "FieldType",
    "parse_type_ref",
    "split_type_ref",
    "parse_bytes",
    "parse_integer",
    "integer_bounds",
    "convert_data_to_slice",
    "encode_primitive_value",
    "domain_type_fields",
    "domain_message",
    "TypeSchema",
    "validate",
    "validate_types",
    "compile_typed_data",
    "find_dependencies",
    "encode_type",
    "type_hash",
    "encode_data",
    "hash_struct",
    "domain_separator",
    "signing_digest",
    "hash_typed_data",
    "compute_signing_digest",
]
