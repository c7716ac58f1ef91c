"""Hash primitives for tree construction and proof verification.

hash_value(block) hashes one data block, hash_combined(a, b) hashes the
concatenation a || b. Both produce DIGEST_SIZE bytes. The module-level
functions are SHA-256; HashEngine binds the same operations to any
algorithm in SUPPORTED_HASHES.
"""
import hashlib
import json

import blake3

from ..constants import (
    BYTE_MAX,
    BYTE_MIN,
    DEFAULT_HASH,
    DIGEST_SIZE,
    HASH_BLAKE3,
    HASH_SHA256,
    JSON_SEPARATORS,
)
from ..errors import UnsupportedHash

Block = bytes | bytearray | memoryview | str | dict | int


def to_block(value: Block) -> bytes:
    """Normalize a data block to bytes.

    Args:
        value: bytes-like, str (UTF-8), dict (canonical JSON) or an int
            in 0..255 (a single byte)

    Returns:
        Block bytes

    Raises:
        TypeError: If value has an unsupported type
        ValueError: If an int value does not fit in one byte
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True, separators=JSON_SEPARATORS).encode("utf-8")
    # bool is an int subclass but never a meaningful block
    if isinstance(value, int) and not isinstance(value, bool):
        if not BYTE_MIN <= value <= BYTE_MAX:
            raise ValueError(f"Int block must be in {BYTE_MIN}..{BYTE_MAX}, got {value}")
        return bytes([value])
    raise TypeError(f"Unsupported block type: {type(value).__name__}")


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def _blake3(data: bytes) -> bytes:
    return blake3.blake3(data).digest()


_ALGORITHMS = {
    HASH_SHA256: _sha256,
    HASH_BLAKE3: _blake3,
}


class HashEngine:
    """Hash primitives bound to one algorithm."""

    def __init__(self, algorithm: str = DEFAULT_HASH):
        algorithm = algorithm.lower()
        if algorithm not in _ALGORITHMS:
            raise UnsupportedHash(algorithm)
        self.algorithm = algorithm
        self._digest = _ALGORITHMS[algorithm]

    @classmethod
    def from_config(cls, config) -> "HashEngine":
        """Build an engine from a TreeConfig."""
        return cls(config.hash_algorithm)

    @property
    def digest_size(self) -> int:
        return DIGEST_SIZE

    def hash_value(self, block: Block) -> bytes:
        """Hash a single data block."""
        return self._digest(to_block(block))

    def hash_combined(self, a: bytes, b: bytes) -> bytes:
        """Hash a || b. Order matters: swapping a and b changes the digest."""
        return self._digest(bytes(a) + bytes(b))

    def __eq__(self, other) -> bool:
        return isinstance(other, HashEngine) and other.algorithm == self.algorithm

    def __hash__(self) -> int:
        return hash(self.algorithm)

    def __repr__(self) -> str:
        return f"HashEngine({self.algorithm!r})"


SHA256 = HashEngine(HASH_SHA256)


def hash_value(block: Block) -> bytes:
    """SHA-256 of a single data block.

    Args:
        block: Data block, normalized with to_block()

    Returns:
        32-byte digest
    """
    return SHA256.hash_value(block)


def hash_combined(a: bytes, b: bytes) -> bytes:
    """SHA-256 of a concatenated with b, in that order.

    Args:
        a: Left digest
        b: Right digest

    Returns:
        32-byte digest
    """
    return SHA256.hash_combined(a, b)
