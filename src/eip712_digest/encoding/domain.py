"""
Instance-dependent ``EIP712Domain`` type.

The domain's struct declaration is not fixed: it lists exactly the domain
fields populated on a given ``TypedDataDomain``, in canonical order. The
helpers here derive that declaration and the matching message, and build
the effective type map used for validation and hashing.
"""

from typing import Any, Dict, List

from ..schemas.typed_data import FieldDef, TypedData, TypedDataDomain, TypeMap
from ..utils import logger
from .constants import DOMAIN_FIELDS, EIP712_DOMAIN_TYPE


def _is_populated(field_name: str, value: Any) -> bool:
    if value is None:
        return False
    if field_name == "chainId" and not isinstance(value, str):
        # 0 is a legitimate chain id
        return True
    return len(value) > 0


def domain_type_fields(domain: TypedDataDomain) -> List[FieldDef]:
    """
    Derive the ``EIP712Domain`` declaration for ``domain``.

    Args:
        domain: The signing domain.

    Returns:
        One ``FieldDef`` per populated field, in the order name, version,
        chainId, verifyingContract, salt.

    Example::

        domain_type_fields(TypedDataDomain(name="Permit2", chainId=1))
        # [FieldDef(name="name", type="string"), FieldDef(name="chainId", type="uint256")]
    """
    values = domain.values_by_wire_name()
    return [
        FieldDef(name=field_name, type=field_type)
        for field_name, field_type in DOMAIN_FIELDS
        if _is_populated(field_name, values[field_name])
    ]


def domain_message(domain: TypedDataDomain) -> Dict[str, Any]:
    """Return the populated domain values keyed by wire name."""
    values = domain.values_by_wire_name()
    return {field.name: values[field.name] for field in domain_type_fields(domain)}


def effective_types(typed_data: TypedData) -> TypeMap:
    """
    Return the type map used to validate and hash ``typed_data``.

    The caller's declarations are kept as they are, except ``EIP712Domain``,
    which is replaced by the declaration derived from the populated domain
    fields. A caller declaration that disagrees is logged and ignored.
    """
    synthesized = domain_type_fields(typed_data.domain)
    declared = typed_data.types.get(EIP712_DOMAIN_TYPE)
    if declared is not None:
        declared_pairs = [(f.name, f.type) for f in declared]
        synthesized_pairs = [(f.name, f.type) for f in synthesized]
        if declared_pairs != synthesized_pairs:
            logger.warning(
                f"Declared {EIP712_DOMAIN_TYPE} {declared_pairs} does not match the populated "
                f"domain fields {synthesized_pairs}; using the populated fields"
            )

    types = dict(typed_data.types)
    types[EIP712_DOMAIN_TYPE] = synthesized
    return types
