"""Exceptions raised by merkletree.

A value that cannot be proven is not an error: Tree.inclusion_proof
returns None for it.
"""


class MerkleError(Exception):
    """Base class for merkletree errors."""
    pass


class EmptyInput(MerkleError, ValueError):
    """Raised when a tree is built from zero data blocks. Never catch silently."""
    pass


class UnsupportedHash(MerkleError, ValueError):
    """Raised when a hash algorithm name is not one of SUPPORTED_HASHES."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"Unsupported hash algorithm: {algorithm!r}")
