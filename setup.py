"""merkletree setup - Merkle trees with inclusion proofs."""
from setuptools import setup, find_packages

setup(
    name="merkletree",
    version="1.0.0",
    description="merkletree: binary Merkle trees with inclusion proofs",
    packages=find_packages(include=["merkletree", "merkletree.*", "merkletree_cli", "merkletree_cli.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "blake3>=0.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-benchmark>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "merkle=merkletree_cli.main:cli",
        ],
    },
)
