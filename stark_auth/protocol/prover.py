"""Hash-chain authentication prover.

Proves knowledge of a secret s such that iterating the transition `steps`
times from s ends at the public final_hash:

1. Build the trace t[0..steps-1] and check it ends at final_hash.
2. Commit to the trace with a Merkle tree over 32-byte encodings.
3. Derive query indices from H(root || final_hash) (Fiat-Shamir).
4. Open t[i] and t[i+1] with Merkle paths for every challenged i.

All randomness is derived from public data and the already committed root,
so the prover cannot know the indices before committing.
"""

import logging

from stark_auth.errors import InvalidParamsError, WitnessMismatchError
from stark_auth.primitives.field import field_element_to_bytes
from stark_auth.primitives.merkle_tree import MerkleTree
from stark_auth.protocol.data import AuthParams, Statement, Witness
from stark_auth.protocol.proof import AuthOpening, AuthProof
from stark_auth.protocol.trace import build_auth_trace
from stark_auth.protocol.transcript import compute_challenge_seed, derive_query_indices

logger = logging.getLogger(__name__)


def generate_auth_proof(statement: Statement, witness: Witness, params: AuthParams) -> AuthProof:
    """Generate a proof that witness reproduces statement.final_hash.

    Raises:
        InvalidParamsError: If params are out of range or disagree with statement.steps.
        WitnessMismatchError: If the rebuilt trace does not end at final_hash.
    """
    params.validate()
    if statement.steps != params.steps:
        raise InvalidParamsError(
            f"statement.steps ({statement.steps}) != params.steps ({params.steps})"
        )
    hash_fn = params.hash_function

    # --- Trace ---
    trace = build_auth_trace(witness, params)
    if not trace[-1].equals(statement.final_hash):
        raise WitnessMismatchError("Witness does not match statement.final_hash")

    # --- Commitment ---
    leaves = [field_element_to_bytes(e) for e in trace]
    tree = MerkleTree(leaves, hash_fn=hash_fn)
    root = tree.get_root()
    logger.debug("Committed trace of %d steps, root=%s", params.steps, root.hex())

    # --- Fiat-Shamir ---
    seed = compute_challenge_seed(root, statement, hash_fn)
    indices = derive_query_indices(seed, params, hash_fn)
    logger.debug("Derived query indices %s", indices)

    # --- Openings ---
    openings = tuple(
        AuthOpening(
            index=i,
            current=trace[i],
            next=trace[i + 1],
            proof_current=tree.get_proof(i),
            proof_next=tree.get_proof(i + 1),
        )
        for i in indices
    )

    return AuthProof(root=root, indices=tuple(indices), openings=openings)


class StarkProver:
    """Holds statement, witness and params for repeated proof generation."""

    def __init__(self, statement: Statement, witness: Witness, params: AuthParams):
        self.statement = statement
        self.witness = witness
        self.params = params

    def generate_proof(self) -> AuthProof:
        return generate_auth_proof(self.statement, self.witness, self.params)
