"""Protocol - hash-chain trace, Fiat-Shamir derivation, prover and verifier."""

from stark_auth.protocol.data import AuthParams, Statement, Witness
from stark_auth.protocol.proof import (
    AuthOpening,
    AuthProof,
    load_proof,
    proof_from_json,
    proof_size,
    proof_to_json,
    save_proof,
)
from stark_auth.protocol.prover import StarkProver, generate_auth_proof
from stark_auth.protocol.trace import (
    TRANSITION_CONSTANT,
    build_auth_trace,
    derive_statement,
    transition,
)
from stark_auth.protocol.transcript import compute_challenge_seed, derive_query_indices
from stark_auth.protocol.verifier import StarkVerifier, verify_auth_proof

__all__ = [
    # Data
    "AuthParams",
    "Statement",
    "Witness",
    # Trace
    "TRANSITION_CONSTANT",
    "transition",
    "build_auth_trace",
    "derive_statement",
    # Fiat-Shamir
    "compute_challenge_seed",
    "derive_query_indices",
    # Proof
    "AuthOpening",
    "AuthProof",
    "proof_size",
    "proof_to_json",
    "proof_from_json",
    "save_proof",
    "load_proof",
    # Prover / Verifier
    "StarkProver",
    "generate_auth_proof",
    "StarkVerifier",
    "verify_auth_proof",
]
