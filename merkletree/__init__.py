"""merkletree: binary Merkle trees with inclusion proofs.

Public API:
- Hashing: hash_value, hash_combined, HashEngine
- Tree: Tree, Node
- Verify: verify_proof
- Errors: MerkleError, EmptyInput, UnsupportedHash
- Config: TreeConfig
"""

__version__ = "1.0.0"

from .anchor import HashEngine, Node, Tree, hash_combined, hash_value, to_block, verify_proof
from .config import TreeConfig
from .errors import EmptyInput, MerkleError, UnsupportedHash

__all__ = [
    # Hashing
    "hash_value",
    "hash_combined",
    "to_block",
    "HashEngine",
    # Tree
    "Tree",
    "Node",
    # Verify
    "verify_proof",
    # Errors
    "MerkleError",
    "EmptyInput",
    "UnsupportedHash",
    # Config
    "TreeConfig",
    "__version__",
]
