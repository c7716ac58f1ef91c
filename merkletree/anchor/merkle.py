"""Merkle tree construction and inclusion proofs.

A Tree is built once from an ordered sequence of data blocks and never
mutated. Every level with more than one node is made even by duplicating
its last node before pairs are combined, so odd inputs hash differently
from their padded equivalents in other schemes.
"""
import logging
from collections.abc import Iterable
from typing import Optional

from ..errors import EmptyInput
from .hash import SHA256, Block, HashEngine, to_block
from .node import Node
from .prove import merkle_proof

logger = logging.getLogger("merkletree.anchor")


def tree_height(n: int) -> int:
    """ceil(log2(n)) for n >= 1, computed without floating point."""
    return (n - 1).bit_length()


def _build_tree(data: tuple[bytes, ...], engine: HashEngine) -> tuple[Node, int]:
    """Build the node hierarchy bottom-up.

    Args:
        data: Normalized data blocks, at least one
        engine: Hash engine for leaves and parents

    Returns:
        (root node, padded leaf count)
    """
    current = [Node.leaf(block, engine) for block in data]
    leaf_count = len(current)
    level = 0

    while len(current) > 1:
        # Duplicate last if odd
        if len(current) % 2 == 1:
            current.append(current[-1])
        if level == 0:
            leaf_count = len(current)

        # Combine pairs
        current = [
            Node.combine(current[i], current[i + 1], engine)
            for i in range(0, len(current), 2)
        ]
        level += 1
        logger.debug("Built level %d with %d node(s)", level, len(current))

    return current[0], leaf_count


class Tree:
    """Binary Merkle tree over an ordered sequence of data blocks.

    Keeps a copy of the original (unpadded) blocks to check proof requests
    and to compute the tree height.

    Raises:
        EmptyInput: If blocks is empty
    """

    def __init__(self, blocks: Iterable[Block], engine: Optional[HashEngine] = None):
        self._engine = engine or SHA256
        self._data = tuple(to_block(block) for block in blocks)
        if not self._data:
            raise EmptyInput("Cannot build a Merkle tree from zero data blocks")

        self._root, self._leaf_count = _build_tree(self._data, self._engine)
        self._height = tree_height(len(self._data))
        logger.debug(
            "Built %s tree: blocks=%d height=%d root=%s",
            self._engine.algorithm, len(self._data), self._height, self._root.digest.hex(),
        )

    @property
    def root(self) -> Node:
        return self._root

    @property
    def root_digest(self) -> bytes:
        """Digest summarizing the entire input sequence."""
        return self._root.digest

    @property
    def height(self) -> int:
        """ceil(log2(N)) for the original block count N."""
        return self._height

    @property
    def data(self) -> tuple[bytes, ...]:
        return self._data

    @property
    def engine(self) -> HashEngine:
        return self._engine

    @property
    def algorithm(self) -> str:
        return self._engine.algorithm

    @property
    def leaf_count(self) -> int:
        """Number of leaves at the bottom level, padding included."""
        return self._leaf_count

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return (
            f"Tree(blocks={len(self._data)}, height={self._height}, "
            f"algorithm={self._engine.algorithm!r}, root={self.root_digest.hex()[:16]}...)"
        )

    def inclusion_proof(self, index: int, value: Block) -> Optional[list[bytes]]:
        """Generate an inclusion proof that value sits at index.

        Args:
            index: Position of value in the original data
            value: Claimed data block

        Returns:
            Sibling digests ordered leaf level first, root level last, or
            None if data[index] is not value (index out of range included)

        Raises:
            TypeError: If value has an unsupported block type
        """
        try:
            block = to_block(value)
        except ValueError:
            # an int outside 0..255 can never equal a stored block
            block = None
        if block is None or not 0 <= index < len(self._data) or self._data[index] != block:
            logger.debug("No proof available for index %d", index)
            return None

        return merkle_proof(self._root, index, self._height)
