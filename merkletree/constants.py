"""merkletree constants.

All magic numbers live here. No exceptions.
"""

# Digest size in bytes, shared by every supported algorithm
DIGEST_SIZE = 32

# Hash algorithms
HASH_SHA256 = "sha256"
HASH_BLAKE3 = "blake3"
SUPPORTED_HASHES = (HASH_SHA256, HASH_BLAKE3)
DEFAULT_HASH = HASH_SHA256

# Single-byte blocks
BYTE_MIN = 0
BYTE_MAX = 255

# Canonical JSON for dict blocks
JSON_SEPARATORS = (",", ":")

# Configuration
ENV_PREFIX = "MERKLETREE_"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
