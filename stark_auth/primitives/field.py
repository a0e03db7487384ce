"""STARK prime field GF(p) and its 32-byte wire encoding.

Uses galois for the field arithmetic. FieldElement is an immutable
(value, modulus) pair over STARK_PRIME or a prime below 2^64. The galois field
class for each modulus is built once and cached, so elements stay plain
hashable values while add/sub/mul/pow run on galois scalars.

Encoding is fixed-width 32-byte big-endian. Decoding rejects values >= p
instead of reducing them, so every field element has exactly one encoding.
"""

import numbers
from dataclasses import dataclass
from functools import lru_cache
from typing import Union

import galois

from stark_auth.errors import (
    DivisionByZeroError,
    FieldMismatchError,
    InvalidLengthError,
    InvalidModulusError,
    NonCanonicalEncodingError,
)

# --- Field Constants ---

STARK_PRIME = 2**251 + 17 * 2**192 + 1
"""The 252-bit STARK prime p = 2^251 + 17 * 2^192 + 1."""

STARK_GENERATOR = 3
"""Multiplicative generator of GF(STARK_PRIME)."""

FIELD_ELEMENT_SIZE = 32
"""Bytes per encoded field element."""

SMALL_MODULUS_LIMIT = 2**64
"""Other prime moduli must stay below this so galois can find a primitive root."""


# --- Field Construction ---

@lru_cache(maxsize=None)
def prime_field(modulus: int) -> type:
    """Return the galois field class GF(modulus).

    For the STARK prime the known generator is passed in and verification is
    skipped; otherwise galois would factor p - 1 to find a primitive root.
    """
    check_modulus(modulus)
    if modulus == STARK_PRIME:
        return galois.GF(STARK_PRIME, primitive_element=STARK_GENERATOR, verify=False)
    return galois.GF(modulus)


@lru_cache(maxsize=None)
def _is_prime(n: int) -> bool:
    return galois.is_prime(n)


def check_modulus(modulus: int) -> None:
    """Accept STARK_PRIME or a prime below SMALL_MODULUS_LIMIT.

    galois.GF of a prime power builds an extension field, whose arithmetic is
    not integer arithmetic mod m, so composite moduli are refused outright.

    Raises:
        InvalidModulusError: If modulus is not a supported prime.
    """
    if modulus == STARK_PRIME:
        return
    if isinstance(modulus, bool) or not isinstance(modulus, numbers.Integral):
        raise InvalidModulusError(f"modulus must be an integer, got {type(modulus).__name__}")
    if modulus < 2:
        raise InvalidModulusError(f"modulus must be >= 2, got {modulus}")
    if modulus >= SMALL_MODULUS_LIMIT:
        raise InvalidModulusError(
            f"modulus {modulus} unsupported: only STARK_PRIME or primes below 2^64"
        )
    if not _is_prime(int(modulus)):
        raise InvalidModulusError(f"modulus {modulus} is not prime")


FF = prime_field(STARK_PRIME)
"""Base field GF(p) over the STARK prime."""


# --- Modular Helpers ---

def inv_mod(x: int, mod: int = STARK_PRIME) -> int:
    """Modular inverse via the extended Euclidean algorithm.

    Raises:
        DivisionByZeroError: If x has no inverse modulo mod.
    """
    old_r, r = x % mod, mod
    old_s, s = 1, 0
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s

    if old_r != 1:
        raise DivisionByZeroError(f"{x} is not invertible modulo {mod}")
    return old_s % mod


# --- Field Element ---

@dataclass(frozen=True)
class FieldElement:
    """Element of GF(modulus), canonicalized into [0, modulus) on construction.

    Binary operations require both operands to share a modulus. The named
    methods are the primary API; Python operators map onto them.
    """

    value: int
    modulus: int = STARK_PRIME

    def __post_init__(self) -> None:
        check_modulus(self.modulus)
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Integral):
            raise TypeError(f"Field element value must be an integer, got {type(self.value).__name__}")
        object.__setattr__(self, "modulus", int(self.modulus))
        object.__setattr__(self, "value", int(self.value) % self.modulus)

    # --- Constructors ---

    @classmethod
    def zero(cls, modulus: int = STARK_PRIME) -> "FieldElement":
        return cls(0, modulus)

    @classmethod
    def one(cls, modulus: int = STARK_PRIME) -> "FieldElement":
        return cls(1, modulus)

    # --- Arithmetic ---

    def add(self, other: "FieldElement") -> "FieldElement":
        self._ensure_same_field(other)
        return self._wrap(self._lift() + other._lift())

    def sub(self, other: "FieldElement") -> "FieldElement":
        self._ensure_same_field(other)
        return self._wrap(self._lift() - other._lift())

    def mul(self, other: "FieldElement") -> "FieldElement":
        self._ensure_same_field(other)
        return self._wrap(self._lift() * other._lift())

    def div(self, other: "FieldElement") -> "FieldElement":
        self._ensure_same_field(other)
        return self.mul(other.inverse())

    def neg(self) -> "FieldElement":
        return self._wrap(-self._lift())

    def pow(self, exponent: int) -> "FieldElement":
        """Raise to an integer power; negative exponents invert first."""
        if exponent < 0:
            return self.inverse().pow(-exponent)

        result = prime_field(self.modulus)(1)
        base = self._lift()
        while exponent > 0:
            if exponent & 1:
                result = result * base
            exponent >>= 1
            base = base * base
        return self._wrap(result)

    def inverse(self) -> "FieldElement":
        if self.is_zero():
            raise DivisionByZeroError("Cannot invert zero")
        return FieldElement(inv_mod(self.value, self.modulus), self.modulus)

    # --- Predicates ---

    def equals(self, other: "FieldElement") -> bool:
        return self.value == other.value and self.modulus == other.modulus

    def is_zero(self) -> bool:
        return self.value == 0

    # --- Encoding ---

    def to_bytes(self) -> bytes:
        return field_element_to_bytes(self)

    @classmethod
    def from_bytes(cls, data: bytes, modulus: int = STARK_PRIME) -> "FieldElement":
        return field_element_from_bytes(data, modulus)

    # --- Operators ---

    def __add__(self, other: object) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.div(other)

    __neg__ = neg
    __pow__ = pow

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    # --- Internal Helpers ---

    def _lift(self):
        """Convert to a galois scalar of this element's field."""
        return prime_field(self.modulus)(self.value)

    def _wrap(self, result) -> "FieldElement":
        return FieldElement(int(result), self.modulus)

    def _ensure_same_field(self, other: "FieldElement") -> None:
        if not isinstance(other, FieldElement):
            raise TypeError(f"Expected FieldElement, got {type(other).__name__}")
        if other.modulus != self.modulus:
            raise FieldMismatchError(
                f"Field mismatch: modulus {self.modulus} vs {other.modulus}"
            )


def create_field(value: Union[int, str]) -> FieldElement:
    """Create an element of GF(STARK_PRIME) from an int or a decimal/0x string."""
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith(("0x", "-0x")):
            value = int(text, 16)
        else:
            value = int(text, 10)
    return FieldElement(value, STARK_PRIME)


# --- Wire Encoding ---

def field_element_to_bytes(fe: FieldElement) -> bytes:
    """Encode as FIELD_ELEMENT_SIZE bytes, big-endian."""
    return fe.value.to_bytes(FIELD_ELEMENT_SIZE, "big")


def field_element_from_bytes(data: bytes, modulus: int = STARK_PRIME) -> FieldElement:
    """Decode FIELD_ELEMENT_SIZE big-endian bytes.

    Raises:
        InvalidLengthError: If data is not exactly FIELD_ELEMENT_SIZE bytes.
        NonCanonicalEncodingError: If the encoded integer is >= modulus.
    """
    if len(data) != FIELD_ELEMENT_SIZE:
        raise InvalidLengthError(
            f"Expected {FIELD_ELEMENT_SIZE} bytes for field element, got {len(data)}"
        )
    value = int.from_bytes(data, "big")
    if value >= modulus:
        raise NonCanonicalEncodingError(f"Encoded value is not reduced modulo {modulus}")
    return FieldElement(value, modulus)
