"""Unit tests for Tree construction.

Invariants tested: leaf digests, parent digests, level padding, height.
"""
import logging
import math

import pytest

from merkletree.anchor import HashEngine, Node, Tree, hash_combined, hash_value, tree_height
from merkletree.errors import EmptyInput, MerkleError


def _depth(node: Node) -> int:
    """Number of combination levels below node along the left spine."""
    depth = 0
    while not node.is_leaf:
        node = node.left
        depth += 1
    return depth


def _check_invariants(node: Node, engine: HashEngine) -> None:
    if node.is_leaf:
        return
    assert node.digest == engine.hash_combined(node.left.digest, node.right.digest)
    _check_invariants(node.left, engine)
    _check_invariants(node.right, engine)


class TestConstruction:
    """Tests for building trees."""

    def test_even_tree(self):
        """Four blocks: root = H(H(h1,h2), H(h3,h4))."""
        h = [hash_value(bytes([i])) for i in range(1, 5)]
        tree = Tree([bytes([i]) for i in range(1, 5)])
        expected = hash_combined(hash_combined(h[0], h[1]), hash_combined(h[2], h[3]))
        assert tree.root_digest == expected

    def test_odd_tree_duplicates_last(self, five_blocks, five_vectors):
        """Five blocks: leaf 5 and then R are duplicated."""
        tree = Tree(five_blocks)
        assert tree.root_digest == five_vectors["root"]

    def test_single_block_is_root(self):
        tree = Tree([b"only"])
        assert tree.root_digest == hash_value(b"only")
        assert tree.root.is_leaf
        assert tree.height == 0
        assert tree.leaf_count == 1

    def test_two_blocks(self):
        tree = Tree([b"a", b"b"])
        assert tree.root_digest == hash_combined(hash_value(b"a"), hash_value(b"b"))
        assert tree.height == 1

    def test_three_blocks(self):
        ha, hb, hc = hash_value(b"a"), hash_value(b"b"), hash_value(b"c")
        tree = Tree([b"a", b"b", b"c"])
        expected = hash_combined(hash_combined(ha, hb), hash_combined(hc, hc))
        assert tree.root_digest == expected

    def test_bytes_input_iterates_single_bytes(self, five_blocks):
        """A byte string is a sequence of one-byte blocks."""
        assert Tree(bytes([1, 2, 3, 4, 5])).root_digest == Tree(five_blocks).root_digest

    def test_int_and_str_blocks(self):
        assert Tree([1, 2]).root_digest == Tree([b"\x01", b"\x02"]).root_digest
        assert Tree(["a", "b"]).root_digest == Tree([b"a", b"b"]).root_digest

    def test_generator_input(self, sample_blocks):
        tree = Tree(block for block in sample_blocks)
        assert tree.root_digest == Tree(sample_blocks).root_digest
        assert len(tree) == len(sample_blocks)

    def test_empty_raises(self):
        with pytest.raises(EmptyInput):
            Tree([])

    def test_empty_is_value_error(self):
        with pytest.raises(ValueError):
            Tree(iter(()))
        with pytest.raises(MerkleError):
            Tree(b"")

    def test_bad_block_type(self):
        with pytest.raises(TypeError):
            Tree([b"a", 1.5])


class TestProperties:
    """Tests for tree invariants and accessors."""

    def test_deterministic(self, sample_blocks):
        assert Tree(sample_blocks).root_digest == Tree(list(sample_blocks)).root_digest

    def test_order_sensitive(self):
        assert Tree([b"a", b"b"]).root_digest != Tree([b"b", b"a"]).root_digest

    def test_content_sensitive(self, sample_blocks):
        changed = list(sample_blocks)
        changed[7] = b"tampered"
        assert Tree(changed).root_digest != Tree(sample_blocks).root_digest

    def test_data_retained_unpadded(self, five_blocks):
        tree = Tree(five_blocks)
        assert tree.data == tuple(five_blocks)
        assert len(tree) == 5
        assert tree.leaf_count == 6

    def test_leaf_count_even(self):
        assert Tree([b"x"] * 4).leaf_count == 4

    @pytest.mark.parametrize("n", list(range(1, 34)) + [64, 100, 1000])
    def test_height(self, n):
        tree = Tree([i.to_bytes(2, "big") for i in range(n)])
        assert tree.height == math.ceil(math.log2(n))
        assert tree.height == tree_height(n)
        assert _depth(tree.root) == tree.height

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 6, 7, 9, 13])
    def test_every_internal_node_hashes_children(self, n):
        tree = Tree([bytes([i]) for i in range(n)])
        _check_invariants(tree.root, tree.engine)

    def test_leaf_digests_in_order(self, sample_blocks):
        tree = Tree(sample_blocks)
        leaves = []

        def collect(node):
            if node.is_leaf:
                leaves.append(node.digest)
            else:
                collect(node.left)
                collect(node.right)

        collect(tree.root)
        expected = [hash_value(block) for block in sample_blocks]
        assert leaves[:len(expected)] == expected

    def test_blake3_engine(self, sample_blocks):
        tree = Tree(sample_blocks, HashEngine("blake3"))
        assert tree.algorithm == "blake3"
        assert tree.root_digest != Tree(sample_blocks).root_digest
        _check_invariants(tree.root, tree.engine)

    def test_repr(self, five_blocks):
        text = repr(Tree(five_blocks))
        assert "blocks=5" in text
        assert "height=3" in text


class TestLogging:
    """Tests for construction diagnostics."""

    def test_one_record_per_level(self, caplog):
        caplog.set_level(logging.DEBUG, logger="merkletree.anchor")
        Tree([b"a"] * 5)
        levels = [r for r in caplog.records if r.getMessage().startswith("Built level")]
        assert len(levels) == 3
        assert all(r.levelno == logging.DEBUG and r.name == "merkletree.anchor" for r in levels)

    def test_single_block_builds_no_level(self, caplog):
        caplog.set_level(logging.DEBUG, logger="merkletree.anchor")
        Tree([b"a"])
        assert not any(r.getMessage().startswith("Built level") for r in caplog.records)
