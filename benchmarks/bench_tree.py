"""Benchmark: tree construction, proof generation and verification."""
import time

from merkletree.anchor import Tree, verify_proof


def _blocks(n: int) -> list[bytes]:
    return [f"block-{i}".encode() for i in range(n)]


class TestTreePerformance:
    """Benchmark Merkle tree operations."""

    def test_build_1000_blocks(self, benchmark):
        """Build a tree over 1000 blocks."""
        blocks = _blocks(1000)
        tree = benchmark(Tree, blocks)
        assert tree.height == 10

    def test_build_10000_blocks(self, benchmark):
        """Build a tree over 10000 blocks - stress test."""
        blocks = _blocks(10000)
        tree = benchmark(Tree, blocks)
        assert len(tree) == 10000

    def test_inclusion_proof(self, benchmark):
        """Generate a proof in a 10000-block tree."""
        blocks = _blocks(10000)
        tree = Tree(blocks)
        proof = benchmark(tree.inclusion_proof, 7777, blocks[7777])
        assert len(proof) == tree.height

    def test_verify_proof(self, benchmark):
        """Verify a proof from a 10000-block tree."""
        blocks = _blocks(10000)
        tree = Tree(blocks)
        proof = tree.inclusion_proof(7777, blocks[7777])
        assert benchmark(verify_proof, 7777, blocks[7777], proof, tree.root_digest) is True


def manual_benchmark():
    """Manual benchmark for verification."""
    sizes = [100, 1000, 10000, 100000]

    print("\nMerkle Tree Benchmark")
    print("-" * 50)

    for size in sizes:
        blocks = _blocks(size)
        start = time.perf_counter()
        tree = Tree(blocks)
        build_ms = (time.perf_counter() - start) * 1000

        start = time.perf_counter()
        proof = tree.inclusion_proof(size // 2, blocks[size // 2])
        verify_proof(size // 2, blocks[size // 2], proof, tree.root_digest)
        prove_ms = (time.perf_counter() - start) * 1000

        print(f"{size:>7} blocks: build {build_ms:8.1f}ms  prove+verify {prove_ms:6.2f}ms")


if __name__ == "__main__":
    manual_benchmark()
