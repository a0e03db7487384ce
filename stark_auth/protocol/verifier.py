"""Hash-chain authentication verifier.

Verification consists of several phases:
1. Shape checks - parameters sane, one opening per challenged index
2. Fiat-Shamir replay - re-derive the indices from proof.root and the statement
3. Opening checks - Merkle paths against proof.root, leaves bound to the opened
   values, and the transition t[i+1] = H(t[i])
4. Final edge - the forced opening at steps-2 ends at the public final_hash

verify() only ever returns a bool. Proofs come from untrusted parties, so any
exception raised while checking one is logged and treated as rejection.
"""

import logging
from typing import Any, Dict

from stark_auth.primitives.field import field_element_to_bytes
from stark_auth.primitives.hashing import HashFunction
from stark_auth.protocol.data import AuthParams, Statement
from stark_auth.protocol.proof import AuthOpening, AuthProof, proof_from_json, proof_size
from stark_auth.protocol.trace import transition
from stark_auth.protocol.transcript import compute_challenge_seed, derive_query_indices

logger = logging.getLogger(__name__)


def _reject(reason: str, *args: Any) -> bool:
    logger.debug("Proof rejected: " + reason, *args)
    return False


class StarkVerifier:
    """Verifier for a fixed statement and parameter set."""

    def __init__(self, statement: Statement, params: AuthParams):
        self.statement = statement
        self.params = params

    def verify(self, proof: AuthProof) -> bool:
        """Return True iff every check passes. Never raises."""
        try:
            return self._verify(proof)
        except Exception:
            logger.debug("Proof rejected: exception during verification", exc_info=True)
            return False

    def verify_json(self, data: Dict[str, Any]) -> bool:
        """Deserialize and verify; malformed input is a rejection."""
        try:
            proof = proof_from_json(data, self.params.hash_function)
        except Exception:
            logger.debug("Proof rejected: malformed serialization", exc_info=True)
            return False
        return self.verify(proof)

    def get_proof_size(self, proof: AuthProof) -> int:
        return proof_size(proof)

    def get_verification_complexity(self, proof: AuthProof) -> str:
        """Asymptotic cost, dominated by one Merkle path pair per query."""
        return f"O({len(proof.indices)} * log({self.params.steps}))"

    # --- Checks ---

    def _verify(self, proof: AuthProof) -> bool:
        steps, queries = self.params.steps, self.params.queries
        hash_fn = self.params.hash_function

        # --- Shape ---
        if steps < 2 or queries < 1:
            return _reject("bad params steps=%d queries=%d", steps, queries)
        if self.statement.steps != steps:
            return _reject("statement.steps=%d != params.steps=%d", self.statement.steps, steps)
        if len(proof.indices) != queries:
            return _reject("expected %d indices, got %d", queries, len(proof.indices))
        if len(proof.openings) != queries:
            return _reject("expected %d openings, got %d", queries, len(proof.openings))

        # --- Fiat-Shamir replay ---
        seed = compute_challenge_seed(proof.root, self.statement, hash_fn)
        expected_indices = derive_query_indices(seed, self.params, hash_fn)
        if list(proof.indices) != expected_indices:
            return _reject("indices do not match Fiat-Shamir derivation")

        # --- Openings ---
        final_index = self.params.final_index
        final_edge_checked = False

        for index, opening in zip(proof.indices, proof.openings):
            if opening.index != index:
                return _reject("opening index %d listed under %d", opening.index, index)
            if index < 0 or index > final_index:
                return _reject("index %d outside [0, %d]", index, final_index)
            if not self._check_opening(proof.root, opening, hash_fn):
                return False

            if index == final_index:
                if not opening.next.equals(self.statement.final_hash):
                    return _reject("final transition does not reach final_hash")
                final_edge_checked = True

        if not final_edge_checked:
            return _reject("final transition %d was not opened", final_index)

        return True

    def _check_opening(self, root: bytes, opening: AuthOpening, hash_fn: HashFunction) -> bool:
        index = opening.index
        if opening.proof_current.root != root or opening.proof_next.root != root:
            return _reject("opening %d: Merkle proof bound to a different root", index)

        if not opening.proof_current.verify(hash_fn):
            return _reject("opening %d: Merkle path for current fails", index)
        if not opening.proof_next.verify(hash_fn):
            return _reject("opening %d: Merkle path for next fails", index)

        # Merkle leaves must be the values being checked
        if opening.proof_current.leaf != field_element_to_bytes(opening.current):
            return _reject("opening %d: leaf does not encode current", index)
        if opening.proof_next.leaf != field_element_to_bytes(opening.next):
            return _reject("opening %d: leaf does not encode next", index)

        if not transition(opening.current).equals(opening.next):
            return _reject("opening %d: transition constraint fails", index)

        return True


def verify_auth_proof(statement: Statement, params: AuthParams, proof: AuthProof) -> bool:
    """Functional form of StarkVerifier(statement, params).verify(proof)."""
    return StarkVerifier(statement, params).verify(proof)
