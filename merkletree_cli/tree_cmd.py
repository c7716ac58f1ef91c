"""Tree commands: hash, root, prove, verify.

Exit codes: 0 success, 1 claim not provable / proof invalid, 2 bad input.
"""
import json
import sys
import time

import click

from merkletree.anchor import HashEngine, Tree, verify_proof
from merkletree.constants import SUPPORTED_HASHES
from merkletree.errors import EmptyInput, MerkleError

from .output import error_box, print_json, success_box

hash_option = click.option(
    '--hash', 'algorithm', type=click.Choice(SUPPORTED_HASHES, case_sensitive=False),
    default=None, help='Hash algorithm (default: MERKLETREE_HASH or sha256)',
)
json_option = click.option('--json', 'as_json', is_flag=True, help='Print JSON instead of a box')


def _engine(config, algorithm: str | None) -> HashEngine:
    return HashEngine(algorithm or config.hash_algorithm)


def _collect_blocks(file_path: str | None, data: tuple) -> list[str]:
    """Blocks from a text file (one per non-blank line) followed by inline data."""
    blocks = []
    if file_path:
        with open(file_path, encoding="utf-8") as f:
            for line in f:
                line = line.rstrip("\r\n")
                if line.strip():
                    blocks.append(line)
    blocks.extend(data)
    return blocks


def _build(file_path: str | None, data: tuple, engine: HashEngine) -> Tree:
    return Tree(_collect_blocks(file_path, data), engine)


def _elapsed_ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)


def _load_proof(path: str) -> tuple[list[bytes], str | None]:
    """Read a proof document or a bare JSON list of hex digests.

    Returns:
        (sibling digests, algorithm recorded in the document or None)
    """
    with open(path, encoding="utf-8") as f:
        doc = json.load(f)

    algorithm = None
    if isinstance(doc, dict):
        algorithm = doc.get("algorithm")
        if algorithm is not None and not isinstance(algorithm, str):
            raise ValueError("Proof algorithm must be a string")
        doc = doc["proof"]
    if not isinstance(doc, list):
        raise ValueError("Proof must be a JSON list of hex digests")
    if not all(isinstance(h, str) for h in doc):
        raise ValueError("Proof entries must be hex strings")
    return [bytes.fromhex(h) for h in doc], algorithm


@click.command(name="hash")
@click.argument('data')
@hash_option
@click.pass_obj
def hash_cmd(config, data: str, algorithm: str | None):
    """Compute the digest of a single data block."""
    engine = _engine(config, algorithm)
    digest = engine.hash_value(data)
    success_box("Hash", [
        ("Input", data),
        ("Algorithm", engine.algorithm),
        ("Digest", digest.hex()),
    ], "merkle root --data a --data b")
    sys.exit(0)


@click.command()
@click.option('--file', 'file_path', type=click.Path(exists=True, dir_okay=False),
              help='Text file, one block per line')
@click.option('--data', multiple=True, help='Inline data blocks')
@hash_option
@json_option
@click.pass_obj
def root(config, file_path: str | None, data: tuple, algorithm: str | None, as_json: bool):
    """Compute the Merkle root of data blocks."""
    t0 = time.perf_counter()
    try:
        tree = _build(file_path, data, _engine(config, algorithm))
    except EmptyInput:
        error_box("Root: NO DATA", "Provide --file or --data", "merkle root --data a --data b")
        sys.exit(2)
    except (MerkleError, ValueError, OSError) as e:
        error_box("Root: ERROR", str(e))
        sys.exit(2)

    if as_json:
        print_json({
            "root": tree.root_digest.hex(),
            "tree_height": tree.height,
            "blocks": len(tree),
            "algorithm": tree.algorithm,
        })
        sys.exit(0)

    success_box("Merkle Root", [
        ("Blocks", str(len(tree))),
        ("Height", str(tree.height)),
        ("Algorithm", tree.algorithm),
        ("Root", tree.root_digest.hex()),
        ("Duration", f"{_elapsed_ms(t0)}ms"),
    ], "merkle prove INDEX VALUE --output proof.json")
    sys.exit(0)


@click.command()
@click.argument('index', type=int)
@click.argument('value')
@click.option('--file', 'file_path', type=click.Path(exists=True, dir_okay=False),
              help='Text file, one block per line')
@click.option('--data', multiple=True, help='Inline data blocks')
@click.option('--output', type=click.Path(dir_okay=False, writable=True), help='Write proof JSON here')
@hash_option
@json_option
@click.pass_obj
def prove(config, index: int, value: str, file_path: str | None, data: tuple,
          output: str | None, algorithm: str | None, as_json: bool):
    """Generate an inclusion proof that VALUE sits at INDEX."""
    t0 = time.perf_counter()
    try:
        tree = _build(file_path, data, _engine(config, algorithm))
    except EmptyInput:
        error_box("Prove: NO DATA", "Provide --file or --data")
        sys.exit(2)
    except (MerkleError, ValueError, OSError) as e:
        error_box("Prove: ERROR", str(e))
        sys.exit(2)

    proof = tree.inclusion_proof(index, value)
    if proof is None:
        error_box("Prove: NOT PROVABLE", f"Block {index} is not {value!r}")
        sys.exit(1)

    doc = {
        "index": index,
        "value": value,
        "proof": [sibling.hex() for sibling in proof],
        "root": tree.root_digest.hex(),
        "algorithm": tree.algorithm,
        "tree_height": tree.height,
    }
    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                json.dump(doc, f, indent=2, sort_keys=True)
        except OSError as e:
            error_box("Prove: ERROR", str(e))
            sys.exit(2)

    if as_json:
        print_json(doc)
        sys.exit(0)

    rows = [("Index", str(index)), ("Value", value), ("Root", doc["root"])]
    rows += [(f"Proof[{i}]", h) for i, h in enumerate(doc["proof"])]
    rows.append(("Duration", f"{_elapsed_ms(t0)}ms"))
    next_cmd = f"merkle verify {index} {value} --root {doc['root']} --proof {output}" if output else None
    success_box("Inclusion Proof", rows, next_cmd)
    sys.exit(0)


@click.command()
@click.argument('index', type=int)
@click.argument('value')
@click.option('--root', 'root_hex', required=True, help='Expected Merkle root (hex)')
@click.option('--proof', 'proof_path', required=True, type=click.Path(exists=True, dir_okay=False),
              help='Proof JSON file')
@hash_option
@json_option
@click.pass_obj
def verify(config, index: int, value: str, root_hex: str, proof_path: str,
           algorithm: str | None, as_json: bool):
    """Verify that VALUE sits at INDEX in the tree with the given root."""
    t0 = time.perf_counter()
    try:
        root_digest = bytes.fromhex(root_hex)
        proof, doc_algorithm = _load_proof(proof_path)
        engine = _engine(config, algorithm or doc_algorithm)
    except (MerkleError, ValueError, KeyError, OSError) as e:
        error_box("Verify: ERROR", str(e))
        sys.exit(2)

    valid = verify_proof(index, value, proof, root_digest, engine)

    if as_json:
        print_json({
            "valid": valid,
            "index": index,
            "value": value,
            "root": root_hex.lower(),
            "algorithm": engine.algorithm,
            "proof_depth": len(proof),
        })
        sys.exit(0 if valid else 1)

    if not valid:
        error_box("Verify: INVALID", "Proof does not reconstruct the expected root")
        sys.exit(1)

    success_box("Verify: VALID", [
        ("Index", str(index)),
        ("Value", value),
        ("Root", root_hex.lower()),
        ("Depth", str(len(proof))),
        ("Duration", f"{_elapsed_ms(t0)}ms"),
    ])
    sys.exit(0)
