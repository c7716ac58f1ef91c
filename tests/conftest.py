"""Pytest fixtures for merkletree tests."""
import pytest

from merkletree.anchor import hash_combined, hash_value


@pytest.fixture
def five_blocks():
    """Provide the one-byte blocks 1..5."""
    return [bytes([i]) for i in range(1, 6)]


@pytest.fixture
def five_vectors():
    """Provide hand-computed digests for the tree over blocks 1..5.

    Level 1 is (L, M, R) padded to (L, M, R, R); level 2 is (LM, RR).
    """
    h = [hash_value(bytes([i])) for i in range(1, 6)]
    left = hash_combined(h[0], h[1])
    middle = hash_combined(h[2], h[3])
    right = hash_combined(h[4], h[4])
    left_middle = hash_combined(left, middle)
    right_right = hash_combined(right, right)
    return {
        "leaves": h,
        "L": left,
        "M": middle,
        "R": right,
        "LM": left_middle,
        "RR": right_right,
        "root": hash_combined(left_middle, right_right),
    }


@pytest.fixture
def sample_blocks():
    """Provide 10 text blocks."""
    return [f"block_{i}".encode() for i in range(10)]
