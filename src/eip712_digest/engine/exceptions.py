"""
Exception and Error Definitions Module

Defines the exception hierarchy raised while validating EIP-712 type
schemas and encoding typed messages. Every error is a permanent rejection
of the supplied input: there is no partial result and nothing is worth
retrying. The root class derives from ``ValueError`` so callers that only
catch ``ValueError`` keep working.

Exception Hierarchy:
    TypedDataError (root)
    ├── SchemaValidationError
    │   ├── UnknownTypeError
    │   ├── MalformedTypeRefError
    │   └── CyclicTypeError
    ├── EncodingError
    │   ├── InvalidHexEncodingError
    │   ├── InvalidFixedLengthError
    │   │   ├── InvalidAddressLengthError
    │   │   ├── InvalidFixedBytesLengthError
    │   │   └── ArrayLengthMismatchError
    │   ├── IntegerOverflowError
    │   ├── TypeMismatchError
    │   └── LimitExceededError
    └── ConfigurationError
"""

from typing import Optional


class TypedDataError(ValueError):
    """
    Root exception class for all package-specific exceptions.

    All custom exceptions inherit from this class to enable unified
    exception handling by the calling layer (RPC handler, CLI, UI).
    """
    pass


class SchemaValidationError(TypedDataError):
    """
    Base exception for type-schema validation failures.

    Raised before any message value is looked at, when the type map itself
    cannot be used to hash a message.
    """
    pass


class UnknownTypeError(SchemaValidationError):
    """
    Raised when a type reference does not resolve.

    This includes scenarios such as:
    - A field whose base type is neither elementary nor declared
    - A primary type missing from the type map
    - A misspelled struct name (``OrderComponent`` vs ``OrderComponents``)

    Attributes:
        type_ref: The offending type reference, verbatim
    """

    def __init__(self, message: str, type_ref: Optional[str] = None):
        super().__init__(message)
        self.type_ref = type_ref


class MalformedTypeRefError(SchemaValidationError):
    """
    Raised when a type reference or type declaration is syntactically invalid.

    This includes scenarios such as:
    - Unbalanced or non-numeric array brackets (``Foo[``, ``Foo[x]``)
    - Zero-sized fixed arrays (``Foo[0]``)
    - Empty type names, field names or field types
    - Duplicate field names inside one type

    Attributes:
        type_ref: The offending type reference, verbatim
    """

    def __init__(self, message: str, type_ref: Optional[str] = None):
        super().__init__(message)
        self.type_ref = type_ref


class CyclicTypeError(SchemaValidationError):
    """
    Raised when struct types reference each other without an array in between.

    A value of such a type would have to be infinitely deep. References that
    pass through an array (``Node(Node[] children)``) are accepted.

    Attributes:
        cycle: The type names forming the cycle, in reference order
    """

    def __init__(self, message: str, cycle: Optional[list] = None):
        super().__init__(message)
        self.cycle = cycle or []


class EncodingError(TypedDataError):
    """
    Base exception for message values that cannot be encoded.

    Attributes:
        path: Dotted field path of the failing value
              (e.g. ``BulkOrder.tree[1][0].offer[0].token``)
        depth: Struct/array nesting depth at which the failure occurred
    """

    def __init__(self, message: str, path: Optional[str] = None, depth: Optional[int] = None):
        self.reason = message
        self.path = path
        self.depth = depth
        super().__init__(self._format())

    def _format(self) -> str:
        context = []
        if self.path:
            context.append(f"at {self.path}")
        if self.depth is not None:
            context.append(f"depth {self.depth}")
        if not context:
            return self.reason
        return f"{self.reason} ({', '.join(context)})"


class InvalidHexEncodingError(EncodingError):
    """
    Raised when a ``0x``-prefixed value is not valid hexadecimal.

    This includes scenarios such as:
    - Odd number of nibbles (``0x01233``)
    - Characters outside ``[0-9a-fA-F]``
    """
    pass


class InvalidFixedLengthError(EncodingError):
    """
    Base exception for fixed-width values of the wrong length.

    Attributes:
        expected: Length required by the declared type
        actual: Length of the supplied value
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        depth: Optional[int] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(message, path=path, depth=depth)


class InvalidAddressLengthError(InvalidFixedLengthError):
    """Raised when an ``address`` value is not exactly 20 bytes / 40 hex digits."""
    pass


class InvalidFixedBytesLengthError(InvalidFixedLengthError):
    """Raised when a ``bytesN`` value is not exactly N bytes."""
    pass


class IntegerOverflowError(EncodingError):
    """
    Raised when an integer falls outside its declared range.

    ``intN`` accepts ``[-2**(N-1), 2**(N-1) - 1]`` and ``uintN`` accepts
    ``[0, 2**N - 1]``.

    Attributes:
        solidity_type: The declared integer type
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        depth: Optional[int] = None,
        solidity_type: Optional[str] = None,
        value: Optional[int] = None,
    ):
        self.solidity_type = solidity_type
        self.value = value
        super().__init__(message, path=path, depth=depth)


class ArrayLengthMismatchError(InvalidFixedLengthError):
    """Raised when a fixed-size array ``T[N]`` receives a sequence whose length is not N."""
    pass


class TypeMismatchError(EncodingError):
    """
    Raised when a value's shape does not match its schema position.

    This includes scenarios such as:
    - A scalar where a sequence is expected
    - A non-mapping where a struct is expected
    - A string for a ``bool`` field, ``None`` for any field
    """
    pass


class LimitExceededError(EncodingError):
    """
    Raised when an encode exceeds the configured depth or element limits.

    Guards against schemas and messages from untrusted sources that would
    otherwise cost unbounded memory and hashing work.
    """
    pass


class ConfigurationError(TypedDataError):
    """
    Raised when configuration is missing or invalid.

    This includes scenarios such as:
    - Non-integer ``EIP712_MAX_DEPTH`` / ``EIP712_MAX_ARRAY_ELEMENTS``
    - Non-positive limit values
    """
    pass
