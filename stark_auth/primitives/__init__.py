"""Primitives - field arithmetic, hashing, Merkle commitments, polynomials."""

from stark_auth.primitives.field import (
    FF,
    FIELD_ELEMENT_SIZE,
    SMALL_MODULUS_LIMIT,
    STARK_GENERATOR,
    STARK_PRIME,
    FieldElement,
    check_modulus,
    create_field,
    field_element_from_bytes,
    field_element_to_bytes,
    inv_mod,
    prime_field,
)
from stark_auth.primitives.hashing import (
    DEFAULT_HASH,
    DIGEST_SIZE,
    HASH_FUNCTIONS,
    HashFunction,
    get_hash_function,
    hash_pair,
    sha256,
)
from stark_auth.primitives.merkle_tree import (
    MerkleProof,
    MerkleRoot,
    MerkleSibling,
    MerkleTree,
    Side,
)
from stark_auth.primitives.polynomial import Polynomial

__all__ = [
    # Field
    "FF",
    "FIELD_ELEMENT_SIZE",
    "SMALL_MODULUS_LIMIT",
    "STARK_GENERATOR",
    "STARK_PRIME",
    "FieldElement",
    "check_modulus",
    "create_field",
    "field_element_from_bytes",
    "field_element_to_bytes",
    "inv_mod",
    "prime_field",
    # Hashing
    "DEFAULT_HASH",
    "DIGEST_SIZE",
    "HASH_FUNCTIONS",
    "HashFunction",
    "get_hash_function",
    "hash_pair",
    "sha256",
    # Merkle Tree
    "MerkleProof",
    "MerkleRoot",
    "MerkleSibling",
    "MerkleTree",
    "Side",
    # Polynomial
    "Polynomial",
]
