"""
Domain separator and signing digest.

    domainSeparator = hashStruct(EIP712Domain, domain)
    digest          = keccak256(0x19 0x01 ‖ domainSeparator ‖ hashStruct(primaryType, message))

``hash_typed_data`` returns every intermediate value; ``compute_signing_digest``
returns only the 32 bytes handed to a signer.
"""

from typing import Any, Mapping, Optional, Union

from eth_utils import keccak
from pydantic import ValidationError

from ..engine.exceptions import InvalidFixedLengthError, SchemaValidationError, TypedDataError
from ..schemas.typed_data import TypedData, TypedDataDomain, TypedDataHash
from ..utils import error_context, logger
from .coercers import parse_bytes
from .constants import EIP712_DOMAIN_TYPE, EIP712_PREFIX, WORD_SIZE, EncoderLimits, get_encoder_limits
from .domain import domain_message, domain_type_fields
from .encoder import hash_struct
from .validator import as_typed_data, compile_typed_data


def _as_domain(domain: Union[TypedDataDomain, Mapping[str, Any]]) -> TypedDataDomain:
    if isinstance(domain, TypedDataDomain):
        return domain
    try:
        return TypedDataDomain.model_validate(domain)
    except ValidationError as e:
        raise SchemaValidationError(f"invalid domain: {e}")


def _as_word(name: str, value: Any) -> bytes:
    data, ok = parse_bytes(value)
    if not ok or len(data) != WORD_SIZE:
        raise InvalidFixedLengthError(
            f"{name} must be {WORD_SIZE} bytes",
            expected=WORD_SIZE,
            actual=len(data) if ok else None,
        )
    return data


def domain_separator(
    domain: Union[TypedDataDomain, Mapping[str, Any]],
    limits: Optional[EncoderLimits] = None,
) -> bytes:
    """
    Compute the domain separator of ``domain``.

    Only populated fields take part, in the order name, version, chainId,
    verifyingContract, salt; an empty domain hashes ``EIP712Domain()``.

    Args:
        domain: A ``TypedDataDomain`` or its wire-shaped dict.
        limits: Resource limits; read from the environment when omitted.

    Returns:
        The 32-byte separator.

    Example::

        domain_separator({
            "name": "Ether Mail",
            "version": "1",
            "chainId": 1,
            "verifyingContract": "0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
        }).hex()
        # 'f2cee375fa42b42143804025fc449deafd50cc031ca257e0b194a650a912090f'
    """
    domain = _as_domain(domain)
    types = {EIP712_DOMAIN_TYPE: domain_type_fields(domain)}
    return hash_struct(EIP712_DOMAIN_TYPE, domain_message(domain), types, limits)


def signing_digest(domain_separator: Union[bytes, str], message_hash: Union[bytes, str]) -> bytes:
    """
    Return ``keccak256(0x19 0x01 ‖ domain_separator ‖ message_hash)``.

    Raises:
        InvalidFixedLengthError: If either input is not 32 bytes.
    """
    separator = _as_word("domain separator", domain_separator)
    message = _as_word("message hash", message_hash)
    return keccak(EIP712_PREFIX + separator + message)


def hash_typed_data(
    typed_data: Union[TypedData, Mapping[str, Any]],
    limits: Optional[EncoderLimits] = None,
) -> TypedDataHash:
    """
    Validate and hash a complete typed-data request.

    Args:
        typed_data: A ``TypedData`` or the ``eth_signTypedData_v4`` JSON dict.
        limits: Resource limits; read from the environment when omitted.

    Returns:
        TypedDataHash: domain separator, message hash, pre-image and digest.

    Raises:
        SchemaValidationError: (or a subclass) if the schema is unusable.
        EncodingError: (or a subclass) if the domain or message does not fit it.
    """
    typed_data = as_typed_data(typed_data)
    limits = limits or get_encoder_limits()

    try:
        schema = compile_typed_data(typed_data)
        separator = hash_struct(EIP712_DOMAIN_TYPE, domain_message(typed_data.domain), schema, limits)
        message_hash = hash_struct(typed_data.primary_type, typed_data.message, schema, limits)
    except TypedDataError as e:
        logger.debug(f"Typed data rejected for {error_context()}: {e}")
        raise

    preimage = EIP712_PREFIX + separator + message_hash
    digest = keccak(preimage)
    logger.debug(f"Typed data digest for {typed_data.primary_type}: 0x{digest.hex()}")
    return TypedDataHash(
        domain_separator=separator,
        message_hash=message_hash,
        digest=digest,
        preimage=preimage,
    )


def compute_signing_digest(
    typed_data: Union[TypedData, Mapping[str, Any]],
    limits: Optional[EncoderLimits] = None,
) -> bytes:
    """
    Compute the 32-byte EIP-712 digest of a typed-data request.

    The domain, types and message are validated first; any failure aborts
    with no partial result.

    Example::

        digest = compute_signing_digest(bulk_order_typed_data)
        # 0x09311d5cc4e0d26af26c78438f55094fdf489083cd75223073db9a0a5da22b84 for the
        # single-order ImmutableSeaport request
    """
    return hash_typed_data(typed_data, limits).digest
