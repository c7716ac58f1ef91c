"""Immutable binary tree node.

A node without children is a leaf and holds the digest of one data block.
An internal node holds the digest of its children's digests concatenated
left to right. No node has exactly one child.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .hash import SHA256, Block, HashEngine


@dataclass(frozen=True)
class Node:
    """Tree node: digest plus optional left/right children."""

    digest: bytes
    left: Optional[Node] = None
    right: Optional[Node] = None

    def __post_init__(self):
        if (self.left is None) != (self.right is None):
            raise ValueError("Node must have both children or none")

    @classmethod
    def leaf(cls, block: Block, engine: HashEngine = SHA256) -> Node:
        """Create a leaf from a data block."""
        return cls(engine.hash_value(block))

    @classmethod
    def combine(cls, left: Node, right: Node, engine: HashEngine = SHA256) -> Node:
        """Create the parent of left and right."""
        return cls(engine.hash_combined(left.digest, right.digest), left, right)

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf else "internal"
        return f"Node({kind}, digest={self.digest.hex()[:16]}...)"
