"""
EIP-712 Typed Data Models

Pydantic models mirroring the ``eth_signTypedData_v4`` payload:

    {
        "types": {"Mail": [{"name": "from", "type": "Person"}, ...], ...},
        "primaryType": "Mail",
        "domain": {"name": "Ether Mail", "version": "1", "chainId": 1, ...},
        "message": {...}
    }

Classes:
    - FieldDef: One ``{name, type}`` entry of a struct declaration.
    - TypedDataDomain: The five optional domain fields.
    - TypedData: The complete request (types, primary type, domain, message).
    - TypedDataHash: Domain separator, message hash and final digest.

Message values are kept exactly as supplied; all structural checks happen
at encode time against the type map.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import Field

from .bases import CanonicalModel, to_0x_hex


class FieldDef(CanonicalModel):
    """
    A single field of a struct type.

    Attributes:
        name: Field name, used as the key into the message mapping.
        type: Type reference, e.g. ``"address"``, ``"Person"``, ``"OfferItem[]"``.
    """
    name: str = Field(..., description="Field name")
    type: str = Field(..., description="Type reference, possibly with [] / [N] suffixes")


TypeMap = Dict[str, List[FieldDef]]


def normalize_types(types: Mapping[str, Sequence[Union[FieldDef, Mapping[str, str]]]]) -> TypeMap:
    """
    Coerce a JSON-shaped type map into ``FieldDef`` lists.

    Accepts ``FieldDef`` instances or ``{"name": ..., "type": ...}`` dicts;
    declaration order is preserved.
    """
    return {
        type_name: [
            field if isinstance(field, FieldDef) else FieldDef.model_validate(field)
            for field in fields
        ]
        for type_name, fields in types.items()
    }


class TypedDataDomain(CanonicalModel):
    """
    EIP-712 domain.

    Binds a signature to an application, contract and chain. Every field is
    optional; only populated fields take part in the derived
    ``EIP712Domain`` type and in the domain separator.

    Attributes:
        name: Human-readable name of the signing domain.
        version: Current major version of the signing domain.
        chain_id: EIP-155 chain id; ``int`` or decimal/hex string.
        verifying_contract: Address of the contract that will verify the signature.
        salt: 32-byte disambiguating salt (hex string or bytes).
    """
    name: Optional[str] = Field(None, description="Signing domain name")
    version: Optional[str] = Field(None, description="Signing domain version")
    chain_id: Optional[Union[int, str]] = Field(None, alias="chainId", description="EIP-155 chain id")
    verifying_contract: Optional[Union[str, bytes]] = Field(
        None, alias="verifyingContract", description="Verifying contract address"
    )
    salt: Optional[Union[str, bytes]] = Field(None, description="bytes32 salt")

    def values_by_wire_name(self) -> Dict[str, Any]:
        """Return all five domain values keyed by their wire names."""
        return {
            "name": self.name,
            "version": self.version,
            "chainId": self.chain_id,
            "verifyingContract": self.verifying_contract,
            "salt": self.salt,
        }


class TypedData(CanonicalModel):
    """
    A complete EIP-712 signing request.

    Attributes:
        types: Struct declarations keyed by type name; field order matters.
        primary_type: Name of the message's top-level struct.
        domain: Domain descriptor.
        message: The message value tree (decoded JSON).

    Example::

        typed_data = TypedData.model_validate({
            "types": {"Mail": [{"name": "contents", "type": "string"}]},
            "primaryType": "Mail",
            "domain": {"name": "Ether Mail", "version": "1", "chainId": 1},
            "message": {"contents": "Hello, Bob!"},
        })
    """
    types: TypeMap = Field(..., description="Struct declarations keyed by type name")
    primary_type: str = Field(..., alias="primaryType", description="Top-level struct of the message")
    domain: TypedDataDomain = Field(default_factory=TypedDataDomain, description="Signing domain")
    message: Dict[str, Any] = Field(default_factory=dict, description="Message value tree")


class TypedDataHash(CanonicalModel):
    """
    Intermediate and final hashes of a typed-data request.

    Attributes:
        domain_separator: ``hashStruct(EIP712Domain, domain)``.
        message_hash: ``hashStruct(primaryType, message)``.
        digest: ``keccak256(0x19 0x01 ‖ domain_separator ‖ message_hash)``, the value to sign.
        preimage: ``0x19 0x01 ‖ domain_separator ‖ message_hash``.
    """
    domain_separator: bytes = Field(..., min_length=32, max_length=32)
    message_hash: bytes = Field(..., min_length=32, max_length=32)
    digest: bytes = Field(..., min_length=32, max_length=32)
    preimage: bytes = Field(..., min_length=66, max_length=66)

    def to_hex_dict(self) -> Dict[str, str]:
        """Return every hash as a ``0x`` hex string, for display."""
        return {
            "domainSeparator": to_0x_hex(self.domain_separator),
            "messageHash": to_0x_hex(self.message_hash),
            "digest": to_0x_hex(self.digest),
            "preimage": to_0x_hex(self.preimage),
        }
