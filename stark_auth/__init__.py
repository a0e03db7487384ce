"""
Hash-chain STARK-style authentication.

A prover shows knowledge of a secret s whose chain t[0] = H(s),
t[i+1] = H(t[i]) with H(x) = x^3 + 7 ends at a public value, without revealing
s. The trace is committed with a Merkle tree and a Fiat-Shamir challenge picks
which transitions are opened.

This package provides:
- STARK prime field arithmetic (via galois)
- Binary Merkle commitments with inclusion proofs
- Fiat-Shamir query index derivation
- Prover, verifier and JSON proof serialization
- Polynomial arithmetic and interpolation (not used by the protocol)

Usage:
    from stark_auth import AuthParams, StarkProver, StarkVerifier, Witness
    from stark_auth import create_field, derive_statement

    params = AuthParams(steps=16, queries=5)
    witness = Witness(secret=create_field(123456789))
    statement = derive_statement(witness, params)

    proof = StarkProver(statement, witness, params).generate_proof()
    assert StarkVerifier(statement, params).verify(proof)
"""

from stark_auth.errors import (
    DivisionByZeroError,
    EmptyInputError,
    FieldMismatchError,
    IndexOutOfRangeError,
    InvalidLengthError,
    InvalidModulusError,
    InvalidParamsError,
    NonCanonicalEncodingError,
    ProofFormatError,
    StarkAuthError,
    WitnessMismatchError,
)
from stark_auth.primitives import (
    STARK_PRIME,
    FieldElement,
    MerkleProof,
    MerkleTree,
    Polynomial,
    create_field,
    field_element_from_bytes,
    field_element_to_bytes,
)
from stark_auth.protocol import (
    AuthOpening,
    AuthParams,
    AuthProof,
    Statement,
    StarkProver,
    StarkVerifier,
    Witness,
    build_auth_trace,
    compute_challenge_seed,
    derive_query_indices,
    derive_statement,
    generate_auth_proof,
    load_proof,
    proof_from_json,
    proof_to_json,
    save_proof,
    transition,
    verify_auth_proof,
)

__version__ = "1.0.0"
__all__ = [
    # Errors
    "StarkAuthError",
    "FieldMismatchError",
    "DivisionByZeroError",
    "InvalidLengthError",
    "InvalidModulusError",
    "NonCanonicalEncodingError",
    "EmptyInputError",
    "IndexOutOfRangeError",
    "InvalidParamsError",
    "WitnessMismatchError",
    "ProofFormatError",
    # Primitives
    "STARK_PRIME",
    "FieldElement",
    "create_field",
    "field_element_to_bytes",
    "field_element_from_bytes",
    "MerkleTree",
    "MerkleProof",
    "Polynomial",
    # Protocol
    "AuthParams",
    "Statement",
    "Witness",
    "transition",
    "build_auth_trace",
    "derive_statement",
    "compute_challenge_seed",
    "derive_query_indices",
    "AuthOpening",
    "AuthProof",
    "proof_to_json",
    "proof_from_json",
    "save_proof",
    "load_proof",
    "StarkProver",
    "generate_auth_proof",
    "StarkVerifier",
    "verify_auth_proof",
]
