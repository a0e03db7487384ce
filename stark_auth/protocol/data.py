"""Public statement, private witness and agreed protocol parameters."""

from dataclasses import dataclass, field

from stark_auth.errors import InvalidParamsError
from stark_auth.primitives.field import FieldElement
from stark_auth.primitives.hashing import DEFAULT_HASH, HashFunction, get_hash_function


@dataclass(frozen=True)
class AuthParams:
    """Parameters both parties agree on out of band.

    Attributes:
        steps: Length of the hash chain (trace length), >= 2
        queries: Number of opened transitions, 1 <= queries <= steps - 1
        hash_name: Registered hash used for the Merkle tree and Fiat-Shamir
    """

    steps: int
    queries: int
    hash_name: str = DEFAULT_HASH

    def validate(self) -> None:
        """Raise InvalidParamsError unless the parameters are usable."""
        if self.steps < 2:
            raise InvalidParamsError(f"steps must be >= 2, got {self.steps}")
        if self.queries < 1:
            raise InvalidParamsError(f"queries must be >= 1, got {self.queries}")
        if self.queries > self.steps - 1:
            raise InvalidParamsError(
                f"queries must be <= steps - 1 ({self.steps - 1}), got {self.queries}"
            )
        get_hash_function(self.hash_name)

    @property
    def hash_function(self) -> HashFunction:
        return get_hash_function(self.hash_name)

    @property
    def final_index(self) -> int:
        """Index of the last transition, trace[steps-2] -> trace[steps-1]."""
        return self.steps - 2


@dataclass(frozen=True)
class Statement:
    """Public claim: iterating the transition `steps` times ends at final_hash."""

    steps: int
    final_hash: FieldElement


@dataclass(frozen=True)
class Witness:
    """Private input. Never transmitted, never shown in repr."""

    secret: FieldElement = field(repr=False)
