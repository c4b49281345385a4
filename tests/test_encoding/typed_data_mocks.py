"""
Typed Data Test Mocks Module

Provides the typed-data payloads and expected hashes shared by the encoding
test suites. Payloads are built as plain JSON-shaped dicts, exactly as a
wallet receives them over ``eth_signTypedData_v4``.

Key Components:
    - ImmutableSeaport bulk-order requests (single order, 1 to 5 tree
      dimensions, and a lean two-dimension variant) with their known
      domain separator, message hashes and digests
    - The EIP-712 reference "Mail" request and its hashes
    - Factory functions to build orders, padding orders and order trees

Usage:
    from typed_data_mocks import (
        create_bulk_order_typed_data,
        BULK_ORDER_CASES,
        MAIL_TYPED_DATA,
    )

    typed_data = create_bulk_order_typed_data(BULK_ORDER_CASES["two-dimension"])
"""

import copy
from typing import Any, Dict, List, Optional

import sys
from pathlib import Path
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))


# ========================================================================
# Seaport Constants
# ========================================================================

MOCK_OFFERER = "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266"
MOCK_ZONE = "0x84c7fea5b8c328db68632a3bdda3aadab7d36e66"
MOCK_ZERO_ADDRESS = "0x" + "00" * 20
MOCK_ZERO_BYTES32 = "0x" + "00" * 32

SEAPORT_DOMAIN = {
    "name": "ImmutableSeaport",
    "version": "1.5",
    "chainId": 31337,
    "verifyingContract": "0x3870289A34bba912a05B2c0503F7484dD18d2f6F",
}

SEAPORT_DOMAIN_SEPARATOR = "0x94c78e94e233546655365725a17a437f48bb870b898e35b894da4a0887172dc2"

SEAPORT_DOMAIN_TYPE = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]

ORDER_COMPONENTS_TYPE = [
    {"name": "offerer", "type": "address"},
    {"name": "zone", "type": "address"},
    {"name": "offer", "type": "OfferItem[]"},
    {"name": "consideration", "type": "ConsiderationItem[]"},
    {"name": "orderType", "type": "uint8"},
    {"name": "startTime", "type": "uint256"},
    {"name": "endTime", "type": "uint256"},
    {"name": "zoneHash", "type": "bytes32"},
    {"name": "salt", "type": "uint256"},
    {"name": "conduitKey", "type": "bytes32"},
    {"name": "counter", "type": "uint256"},
]

OFFER_ITEM_TYPE = [
    {"name": "itemType", "type": "uint8"},
    {"name": "token", "type": "address"},
    {"name": "identifierOrCriteria", "type": "uint256"},
    {"name": "startAmount", "type": "uint256"},
    {"name": "endAmount", "type": "uint256"},
]

CONSIDERATION_ITEM_TYPE = OFFER_ITEM_TYPE + [{"name": "recipient", "type": "address"}]

ORDER_TYPES = {
    "OrderComponents": ORDER_COMPONENTS_TYPE,
    "OfferItem": OFFER_ITEM_TYPE,
    "ConsiderationItem": CONSIDERATION_ITEM_TYPE,
    "EIP712Domain": SEAPORT_DOMAIN_TYPE,
}

ORDER_COMPONENTS_DECLARATION = (
    "OrderComponents(address offerer,address zone,OfferItem[] offer,ConsiderationItem[] consideration,"
    "uint8 orderType,uint256 startTime,uint256 endTime,bytes32 zoneHash,uint256 salt,bytes32 conduitKey,"
    "uint256 counter)"
)
CONSIDERATION_ITEM_DECLARATION = (
    "ConsiderationItem(uint8 itemType,address token,uint256 identifierOrCriteria,uint256 startAmount,"
    "uint256 endAmount,address recipient)"
)
OFFER_ITEM_DECLARATION = (
    "OfferItem(uint8 itemType,address token,uint256 identifierOrCriteria,uint256 startAmount,"
    "uint256 endAmount)"
)
ORDER_COMPONENTS_TYPE_STRING = ORDER_COMPONENTS_DECLARATION + CONSIDERATION_ITEM_DECLARATION + OFFER_ITEM_DECLARATION



# ========================================================================
# Bulk Order Cases
# ========================================================================

# height: number of [2] suffixes on BulkOrder.tree (0 = a plain OrderComponents message)
BULK_ORDER_CASES: Dict[str, Dict[str, Any]] = {
    "non-array": {
        "height": 0,
        "token": "0xa62835d1a6bf5f521c4e2746e1f51c923b8f3483",
        "start_time": "1721370485",
        "end_time": "1784442485",
        "salts": ["0xd23957f29d709c45"],
        "message_hash": "0x81203a474f76afd1376c9f00b3947b5b7e89a73b13b165f999d540377bb1c2fb",
        "digest": "0x09311d5cc4e0d26af26c78438f55094fdf489083cd75223073db9a0a5da22b84",
    },
    "single-dimension": {
        "height": 1,
        "token": "0x262e2b50219620226c5fb5956432a88fffd94ba7",
        "start_time": "1721370489",
        "end_time": "1784442489",
        "salts": ["0x61bc238c47087001", "0x9bf89a1fed29e323"],
        "message_hash": "0x449764b1b6c14b5c3d2b69ca5f112e4172feefc49d9712be588862d606d82552",
        "digest": "0xa51998e192ae3b3f551e481205b3e84f47041cd1fdccc6ebeb84d09dbaa9163c",
    },
    "two-dimension": {
        "height": 2,
        "token": "0x06b3244b086cecc40f1e5a826f736ded68068a0f",
        "start_time": "1721370492",
        "end_time": "1784442492",
        "salts": ["0x143555bae9f6c3dd", "0xa40e43309562a29b", "0x43ef498909096747"],
        "message_hash": "0x369514af6e781a85186ef2c059e0d9e7b14e5d58a95970655794439eca7f3f7e",
        "digest": "0x42554635de2cd114d9e36535d7890e93525faa924af52182ae72c069c4909de6",
    },
    "three-dimension": {
        "height": 3,
        "token": "0x2f8d338360d095a72680a943a22fe6a0d398a0b4",
        "start_time": "1721798594",
        "end_time": "1784870594",
        "salts": [
            "0xea6603a0f70fa487",
            "0x5e5926d7394ebc15",
            "0xecb78d6939c73069",
            "0xb468f60676944382",
            "0x84e6227b4e60e915",
        ],
        "message_hash": "0xb5676629424954a09bd2aea49194741ea05d9525153b062b4507b45c7a0ad759",
        "digest": "0xba39e9b22ff1ecd70a6ca86875a8c28e8c3f638d089071edaf97c1e4b6b072a0",
    },
    "four-dimension": {
        "height": 4,
        "token": "0xc1eed9232a0a44c2463acb83698c162966fbc78d",
        "start_time": "1721798609",
        "end_time": "1784870609",
        "salts": [
            "0x0aea7fa399421d03",
            "0x547bf138eb02083d",
            "0x1fdc5cf73c2846",
            "0x982c1f45640e7238",
            "0x52438c99a8a41726",
            "0x17a2c2cca1c84c21",
            "0xad92568ed1ac612a",
            "0x1d72b3b8d1dfd249",
            "0x03834e51be5d84bf",
        ],
        "message_hash": "0x6141febc9edb34347a91729533c7c8d3a934fdc34429a0ef9497d5d22664321c",
        "digest": "0x9478f43bbeeb2da013ff8595f19a3cb803b41c72596dc0faa6ff1d1b8a70c9f8",
    },
    "five-dimension": {
        "height": 5,
        "token": "0xd28f3246f047efd4059b24fa1fa587ed9fa3e77f",
        "start_time": "1721798656",
        "end_time": "1784870656",
        "salts": [
            "0xad1cd95e33df638d",
            "0x8c46499a985556e7",
            "0xf113dfcd2fd90f34",
            "0x86e05a39d63439ab",
            "0xea0549310e1fcf98",
            "0x3c7ebf9ef6b22665",
            "0x6d8a0266cd32c3cf",
            "0x5508a5f8c60e761f",
            "0xde53a72c803e4780",
            "0xb4ad240444cd7c1d",
            "0xd5559fcc7192a0e8",
            "0xdde06bfaf059bf21",
            "0x02f0b40bd92ec30d",
            "0xa2e93fa3d6add8ef",
            "0x1c9502d5e53ca013",
            "0x32c9f5cdbbcf0a0e",
            "0x9cc16b772ab421d8",
        ],
        "message_hash": "0x127b8c1a34e217116438ea08d10a5e6679ec57fd553ba64891f24500f12dada0",
        "digest": "0xc319cb3f3ad00993bd33741486db2c9dec09fe8afc1757697cb7ce2b35e1b8e1",
    },
}

LEAN_MESSAGE_HASH = "0xa931ed014c19242a3e88739106335a65918f8ac748ae4e9965eae8cc2c4c16c7"
LEAN_DIGEST = "0x90c689705d7b249b2c5ff6368a0a3cd8b57aa31b13479c8cf074d85b2416af84"


# ========================================================================
# EIP-712 Reference Example ("Mail")
# ========================================================================

MAIL_TYPED_DATA = {
    "types": {
        "EIP712Domain": [
            {"name": "name", "type": "string"},
            {"name": "version", "type": "string"},
            {"name": "chainId", "type": "uint256"},
            {"name": "verifyingContract", "type": "address"},
        ],
        "Person": [
            {"name": "name", "type": "string"},
            {"name": "wallet", "type": "address"},
        ],
        "Mail": [
            {"name": "from", "type": "Person"},
            {"name": "to", "type": "Person"},
            {"name": "contents", "type": "string"},
        ],
    },
    "primaryType": "Mail",
    "domain": {
        "name": "Ether Mail",
        "version": "1",
        "chainId": 1,
        "verifyingContract": "0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
    },
    "message": {
        "from": {"name": "Cow", "wallet": "0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826"},
        "to": {"name": "Bob", "wallet": "0xbBbBBBBbbBBBbbbBbbBbbbbBBbBbbbbBbBbbBBbB"},
        "contents": "Hello, Bob!",
    },
}

MAIL_TYPE_STRING = "Mail(Person from,Person to,string contents)Person(string name,address wallet)"
MAIL_TYPE_HASH = "0xa0cedeb2dc280ba39b857546d74f5549c3a1d7bdc2dd96bf881f76108e23dac2"
MAIL_DOMAIN_SEPARATOR = "0xf2cee375fa42b42143804025fc449deafd50cc031ca257e0b194a650a912090f"
MAIL_MESSAGE_HASH = "0xc52c0ee5d84264471806290a3f2c4cecfc5490626bf912d01f240d7a274b371e"
MAIL_DIGEST = "0xbe609aee343fb3c4b28e1df9e632fca64fcfaede20f02e86244efddf30957bd2"


# ========================================================================
# Factory Functions
# ========================================================================

def create_order(
    token: str,
    identifier: int,
    start_time: str,
    end_time: str,
    salt: str,
) -> Dict[str, Any]:
    """Create a single-offer, single-consideration Seaport order."""
    return {
        "offerer": MOCK_OFFERER,
        "zone": MOCK_ZONE,
        "offer": [
            {
                "itemType": "2",
                "token": token,
                "identifierOrCriteria": str(identifier),
                "startAmount": "1",
                "endAmount": "1",
            }
        ],
        "consideration": [
            {
                "itemType": "0",
                "token": MOCK_ZERO_ADDRESS,
                "identifierOrCriteria": "0",
                "startAmount": "1000000",
                "endAmount": "1000000",
                "recipient": MOCK_OFFERER,
            }
        ],
        "orderType": "2",
        "startTime": start_time,
        "endTime": end_time,
        "zoneHash": MOCK_ZERO_BYTES32,
        "salt": salt,
        "conduitKey": MOCK_ZERO_BYTES32,
        "counter": "0",
    }


def create_empty_order() -> Dict[str, Any]:
    """Create the all-zero order used to pad a bulk order tree."""
    return {
        "offerer": MOCK_ZERO_ADDRESS,
        "zone": MOCK_ZERO_ADDRESS,
        "offer": [],
        "consideration": [],
        "orderType": "0",
        "startTime": "0",
        "endTime": "0",
        "zoneHash": MOCK_ZERO_BYTES32,
        "salt": "0",
        "conduitKey": MOCK_ZERO_BYTES32,
        "counter": "0",
    }


def create_bulk_tree(leaves: List[Any], height: int) -> List[Any]:
    """
    Nest ``2 ** height`` leaves into a tree of pairs, row-major.

    ``create_bulk_tree([a, b, c, d], 2)`` returns ``[[a, b], [c, d]]``.
    """
    assert len(leaves) == 2 ** height
    level = list(leaves)
    for _ in range(height):
        level = [level[i:i + 2] for i in range(0, len(level), 2)]
    return level[0]


def create_case_leaves(case: Dict[str, Any], empty_order: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """Build the real orders of ``case`` followed by padding up to ``2 ** height``."""
    orders = [
        create_order(case["token"], index, case["start_time"], case["end_time"], salt)
        for index, salt in enumerate(case["salts"])
    ]
    padding = create_empty_order() if empty_order is None else empty_order
    while len(orders) < 2 ** case["height"]:
        orders.append(copy.deepcopy(padding))
    return orders


def create_bulk_order_typed_data(
    case: Dict[str, Any],
    empty_order: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build the full ``eth_signTypedData_v4`` request for a bulk order case.

    Height 0 yields a plain ``OrderComponents`` message; otherwise the
    primary type is ``BulkOrder`` with ``tree: OrderComponents[2]...[2]``.
    """
    types = copy.deepcopy(ORDER_TYPES)
    leaves = create_case_leaves(case, empty_order)

    if case["height"] == 0:
        return {
            "types": types,
            "primaryType": "OrderComponents",
            "domain": dict(SEAPORT_DOMAIN),
            "message": leaves[0],
        }

    types["BulkOrder"] = [{"name": "tree", "type": "OrderComponents" + "[2]" * case["height"]}]
    return {
        "types": types,
        "primaryType": "BulkOrder",
        "domain": dict(SEAPORT_DOMAIN),
        "message": {"tree": create_bulk_tree(leaves, case["height"])},
    }


def create_lean_bulk_order_typed_data() -> Dict[str, Any]:
    """Build the two-dimension bulk order whose orders carry only an offerer."""
    offerers = [f"0xf39fd6e51aad88f6f4ce6ab8827279cfffb9226{digit}" for digit in "6789"]
    return {
        "types": {
            "BulkOrder": [{"name": "tree", "type": "OrderComponents[2][2]"}],
            "OrderComponents": [{"name": "offerer", "type": "address"}],
            "EIP712Domain": copy.deepcopy(SEAPORT_DOMAIN_TYPE),
        },
        "primaryType": "BulkOrder",
        "domain": dict(SEAPORT_DOMAIN),
        "message": {"tree": create_bulk_tree([{"offerer": offerer} for offerer in offerers], 2)},
    }


def hex_to_bytes(value: str) -> bytes:
    return bytes.fromhex(value[2:] if value.startswith("0x") else value)
