"""Anchor subpackage for Merkle trees and inclusion proofs.

Provides hashing primitives, tree construction and proof verification.
"""
from .hash import HashEngine, hash_combined, hash_value, to_block
from .merkle import Tree, tree_height
from .node import Node
from .prove import merkle_proof
from .verify import verify_proof

__all__ = [
    "HashEngine",
    "hash_value",
    "hash_combined",
    "to_block",
    "Node",
    "Tree",
    "tree_height",
    "merkle_proof",
    "verify_proof",
]
