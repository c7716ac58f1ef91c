"""Inclusion proof verification.

Needs only the claimed value, its position, the proof and the expected
root digest. The tree itself is never consulted.
"""
from collections.abc import Iterable
from typing import Optional

from .hash import SHA256, Block, HashEngine


def verify_proof(
    index: int,
    value: Block,
    proof: Iterable[bytes],
    root_digest: bytes,
    engine: Optional[HashEngine] = None,
) -> bool:
    """Verify that value sits at index in the tree with root_digest.

    Recomputes the root bottom-up from hash_value(value). The parity of
    the running index tells whether the current node is a left (even) or
    right (odd) child at each level.

    Args:
        index: Claimed position of value in the original data
        value: Claimed data block
        proof: Sibling digests, leaf level first
        root_digest: Expected root digest
        engine: Hash engine the tree was built with (default SHA-256)

    Returns:
        True if the recomputed root equals root_digest, False otherwise
    """
    engine = engine or SHA256
    if index < 0:
        return False

    computed = engine.hash_value(value)
    current_index = index
    for sibling in proof:
        if current_index % 2 == 0:
            # We're on left, sibling on right
            computed = engine.hash_combined(computed, sibling)
        else:
            # We're on right, sibling on left
            computed = engine.hash_combined(sibling, computed)
        current_index //= 2

    return computed == bytes(root_digest)
