"""256-bit hash primitives used for commitments and Fiat-Shamir.

The hash is swappable: protocol code receives a HashFunction and never calls
hashlib directly. Parties must agree on the hash out of band (AuthParams
carries its registry name).
"""

import hashlib
from typing import Callable, Dict

from stark_auth.errors import InvalidParamsError

# --- Constants ---

DIGEST_SIZE = 32

# --- Type Aliases ---

HashFunction = Callable[[bytes], bytes]


# --- Hash Functions ---

def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def blake2s(data: bytes) -> bytes:
    return hashlib.blake2s(data, digest_size=DIGEST_SIZE).digest()


HASH_FUNCTIONS: Dict[str, HashFunction] = {
    "sha256": sha256,
    "sha3_256": sha3_256,
    "blake2s": blake2s,
}

DEFAULT_HASH = "sha256"


def get_hash_function(name: str) -> HashFunction:
    """Look up a registered hash by name."""
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        raise InvalidParamsError(
            f"Unknown hash function {name!r}; expected one of {sorted(HASH_FUNCTIONS)}"
        ) from None


def hash_pair(left: bytes, right: bytes, hash_fn: HashFunction = sha256) -> bytes:
    """Combine two nodes as H(left || right).

    No length prefix and no domain-separation byte: the exact concatenation is
    part of the commitment format.
    """
    return hash_fn(left + right)
