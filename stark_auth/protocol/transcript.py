"""Fiat-Shamir challenge derivation.

The seed binds the verifier's randomness to both the trace commitment and the
public statement:

    seed = H(root || encode(final_hash))

Query indices are then drawn from H(seed || counter). Since the root is fixed
before the seed exists, the prover cannot pick trace contents after learning
which transitions will be opened.
"""

from typing import List

from stark_auth.primitives.field import field_element_to_bytes
from stark_auth.primitives.hashing import HashFunction, sha256
from stark_auth.protocol.data import AuthParams, Statement

COUNTER_SIZE = 4
INDEX_BYTES = 8


def compute_challenge_seed(
    root: bytes,
    statement: Statement,
    hash_fn: HashFunction = sha256,
) -> bytes:
    """Seed for index derivation: H(root || encode(final_hash))."""
    return hash_fn(root + field_element_to_bytes(statement.final_hash))


def derive_query_indices(
    seed: bytes,
    params: AuthParams,
    hash_fn: HashFunction = sha256,
) -> List[int]:
    """Derive `queries` distinct transition indices in [0, steps-2].

    Index steps-2 (the transition into the public final hash) always comes
    first. The rest come from H(seed || counter) with a 4-byte big-endian
    counter starting at 0 and advancing on every draw, duplicates included;
    the first 8 digest bytes reduced mod (steps-1) give the index.

    Raises:
        InvalidParamsError: If queries < 1, steps < 2 or queries > steps - 1.
    """
    params.validate()
    n_transitions = params.steps - 1

    indices = [params.final_index]
    seen = {params.final_index}

    counter = 0
    while len(indices) < params.queries:
        digest = hash_fn(seed + counter.to_bytes(COUNTER_SIZE, "big"))
        idx = int.from_bytes(digest[:INDEX_BYTES], "big") % n_transitions
        if idx not in seen:
            seen.add(idx)
            indices.append(idx)
        counter += 1

    return indices
