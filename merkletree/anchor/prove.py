"""Proof path generation for Merkle tree inclusion."""
from .node import Node


def merkle_proof(node: Node, index: int, height: int) -> list[bytes]:
    """Collect sibling digests on the path from a leaf up to node.

    The proof that a leaf is in a tree is its proof within one of the two
    subtrees plus the digest of the other subtree. The left subtree of a
    node at height h always covers 2 ** (h - 1) leaves.

    Args:
        node: Root of the (sub)tree to descend
        index: Leaf position local to this subtree
        height: Height of this subtree

    Returns:
        Sibling digests ordered leaf level first, root level last
    """
    if node.is_leaf:
        return []

    half_size = 1 << (height - 1)
    if index < half_size:
        proof = merkle_proof(node.left, index, height - 1)
        proof.append(node.right.digest)
    else:
        proof = merkle_proof(node.right, index - half_size, height - 1)
        proof.append(node.left.digest)
    return proof
