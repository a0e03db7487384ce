"""Authentication proof data structures and JSON serialization."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from stark_auth.errors import ProofFormatError, StarkAuthError
from stark_auth.primitives.field import (
    FIELD_ELEMENT_SIZE,
    FieldElement,
    field_element_from_bytes,
    field_element_to_bytes,
)
from stark_auth.primitives.hashing import DIGEST_SIZE, HashFunction, sha256
from stark_auth.primitives.merkle_tree import MerkleProof, MerkleSibling, Side

# Per-entry size estimates: a u32 index and a tagged sibling hash.
INDEX_SIZE = 4
SIBLING_SIZE = DIGEST_SIZE + 1


# --- Proof Data Structures ---

@dataclass(frozen=True)
class AuthOpening:
    """Opened transition trace[index] -> trace[index + 1] with both Merkle paths."""

    index: int
    current: FieldElement
    next: FieldElement
    proof_current: MerkleProof
    proof_next: MerkleProof


@dataclass(frozen=True)
class AuthProof:
    """Complete non-interactive authentication proof.

    Attributes:
        root: Merkle root of the full trace
        indices: Challenged transition indices, in derivation order
        openings: One opening per index, same order
    """

    root: bytes
    indices: Tuple[int, ...]
    openings: Tuple[AuthOpening, ...]


def proof_size(proof: AuthProof) -> int:
    """Binary size estimate in bytes.

    Root, a u32 per index, two encoded field elements per opening and a
    hash-plus-position byte per sibling.
    """
    size = len(proof.root)
    size += len(proof.indices) * INDEX_SIZE
    for opening in proof.openings:
        size += 2 * FIELD_ELEMENT_SIZE
        size += len(opening.proof_current.siblings) * SIBLING_SIZE
        size += len(opening.proof_next.siblings) * SIBLING_SIZE
    return size


# --- JSON Serialization ---

def _merkle_proof_to_json(mp: MerkleProof) -> Dict[str, Any]:
    return {
        "leaf": mp.leaf.hex(),
        "root": mp.root.hex(),
        "siblings": [
            {"hash": s.hash.hex(), "position": s.position.value} for s in mp.siblings
        ],
    }


def proof_to_json(proof: AuthProof) -> Dict[str, Any]:
    """Convert proof to a JSON-serializable dictionary."""
    return {
        "root": proof.root.hex(),
        "indices": list(proof.indices),
        "openings": [
            {
                "index": o.index,
                "current": field_element_to_bytes(o.current).hex(),
                "next": field_element_to_bytes(o.next).hex(),
                "proof_current": _merkle_proof_to_json(o.proof_current),
                "proof_next": _merkle_proof_to_json(o.proof_next),
            }
            for o in proof.openings
        ],
    }


def _parse_hex(value: Any, name: str) -> bytes:
    if not isinstance(value, str):
        raise ProofFormatError(f"{name}: expected hex string, got {type(value).__name__}")
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise ProofFormatError(f"{name}: invalid hex") from None


def _parse_int(value: Any, name: str) -> int:
    # bool is an int subclass but never a valid index
    if not isinstance(value, int) or isinstance(value, bool):
        raise ProofFormatError(f"{name}: expected integer, got {type(value).__name__}")
    return value


def _parse_field(value: Any, name: str) -> FieldElement:
    try:
        return field_element_from_bytes(_parse_hex(value, name))
    except StarkAuthError as e:
        raise ProofFormatError(f"{name}: {e}") from e


def _merkle_proof_from_json(data: Dict[str, Any], name: str, hash_fn: HashFunction) -> MerkleProof:
    siblings = []
    for i, s in enumerate(data["siblings"]):
        try:
            position = Side(s["position"])
        except ValueError:
            raise ProofFormatError(f"{name}.siblings[{i}]: bad position {s['position']!r}") from None
        siblings.append(MerkleSibling(
            hash=_parse_hex(s["hash"], f"{name}.siblings[{i}].hash"),
            position=position,
        ))
    return MerkleProof(
        leaf=_parse_hex(data["leaf"], f"{name}.leaf"),
        siblings=tuple(siblings),
        root=_parse_hex(data["root"], f"{name}.root"),
        hash_fn=hash_fn,
    )


def proof_from_json(data: Dict[str, Any], hash_fn: HashFunction = sha256) -> AuthProof:
    """Rebuild a proof from proof_to_json output.

    Raises:
        ProofFormatError: On missing keys, wrong types, bad hex or non-canonical
                          field values.
    """
    try:
        openings = []
        for i, o in enumerate(data["openings"]):
            name = f"openings[{i}]"
            openings.append(AuthOpening(
                index=_parse_int(o["index"], f"{name}.index"),
                current=_parse_field(o["current"], f"{name}.current"),
                next=_parse_field(o["next"], f"{name}.next"),
                proof_current=_merkle_proof_from_json(o["proof_current"], f"{name}.proof_current", hash_fn),
                proof_next=_merkle_proof_from_json(o["proof_next"], f"{name}.proof_next", hash_fn),
            ))
        return AuthProof(
            root=_parse_hex(data["root"], "root"),
            indices=tuple(_parse_int(idx, "indices") for idx in data["indices"]),
            openings=tuple(openings),
        )
    except (KeyError, TypeError) as e:
        raise ProofFormatError(f"Malformed proof: {e!r}") from e


def save_proof(proof: AuthProof, path: Union[str, Path]) -> None:
    with open(path, "w") as f:
        json.dump(proof_to_json(proof), f, indent=2)


def load_proof(path: Union[str, Path], hash_fn: HashFunction = sha256) -> AuthProof:
    """Load a proof written by save_proof."""
    with open(path) as f:
        data = json.load(f)
    return proof_from_json(data, hash_fn)
