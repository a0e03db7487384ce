"""Univariate polynomials over a prime field.

Standalone scaffolding for a future low-degree-extension layer; the hash-chain
authentication protocol does not use it. Arithmetic and Lagrange interpolation
run on galois.Poly, while the public API speaks FieldElement.

Coefficients are kept in ascending order [a0, a1, ..., an]. Galois uses
descending order, so every conversion reverses.
"""

from typing import List, Sequence, Tuple

import galois

from stark_auth.errors import EmptyInputError, FieldMismatchError
from stark_auth.primitives.field import FieldElement, prime_field

# --- Type Aliases ---

Point = Tuple[FieldElement, FieldElement]


class Polynomial:
    """Polynomial with FieldElement coefficients, trailing zeros trimmed."""

    def __init__(self, coefficients: Sequence[FieldElement]):
        if len(coefficients) == 0:
            raise EmptyInputError("Polynomial must have at least one coefficient")

        self.modulus = coefficients[0].modulus
        for coef in coefficients:
            if coef.modulus != self.modulus:
                raise FieldMismatchError("All coefficients must be from the same field")

        field_type = prime_field(self.modulus)
        self._poly = galois.Poly([c.value for c in coefficients][::-1], field=field_type)

    @classmethod
    def _from_galois(cls, poly: galois.Poly, modulus: int) -> "Polynomial":
        coeffs = [FieldElement(int(c), modulus) for c in poly.coeffs[::-1]]
        return cls(coeffs)

    # --- Accessors ---

    @property
    def coefficients(self) -> List[FieldElement]:
        """Ascending-order coefficients; [0] for the zero polynomial."""
        return [FieldElement(int(c), self.modulus) for c in self._poly.coeffs[::-1]]

    def degree(self) -> int:
        return int(self._poly.degree)

    def leading_coefficient(self) -> FieldElement:
        return self.coefficients[-1]

    def is_zero(self) -> bool:
        return self._poly == galois.Poly.Zero(self._poly.field)

    # --- Evaluation ---

    def evaluate(self, x: FieldElement) -> FieldElement:
        if x.modulus != self.modulus:
            raise FieldMismatchError("Point must be from the same field")
        field_type = prime_field(self.modulus)
        return FieldElement(int(self._poly(field_type(x.value))), self.modulus)

    # --- Arithmetic ---

    def add(self, other: "Polynomial") -> "Polynomial":
        self._ensure_same_field(other)
        return Polynomial._from_galois(self._poly + other._poly, self.modulus)

    def sub(self, other: "Polynomial") -> "Polynomial":
        self._ensure_same_field(other)
        return Polynomial._from_galois(self._poly - other._poly, self.modulus)

    def mul(self, other: "Polynomial") -> "Polynomial":
        self._ensure_same_field(other)
        return Polynomial._from_galois(self._poly * other._poly, self.modulus)

    def scalar_mul(self, scalar: FieldElement) -> "Polynomial":
        if scalar.modulus != self.modulus:
            raise FieldMismatchError("Scalar must be from the same field")
        constant = galois.Poly([scalar.value], field=self._poly.field)
        return Polynomial._from_galois(self._poly * constant, self.modulus)

    __add__ = add
    __sub__ = sub
    __mul__ = mul

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.modulus == other.modulus and self._poly == other._poly

    def __hash__(self) -> int:
        return hash((self.modulus, tuple(c.value for c in self.coefficients)))

    # --- Constructors ---

    @staticmethod
    def zero(modulus: int) -> "Polynomial":
        return Polynomial([FieldElement.zero(modulus)])

    @staticmethod
    def one(modulus: int) -> "Polynomial":
        return Polynomial([FieldElement.one(modulus)])

    @staticmethod
    def interpolate(points: Sequence[Point]) -> "Polynomial":
        """Lagrange interpolation through points with distinct x-coordinates."""
        if len(points) == 0:
            raise EmptyInputError("Need at least one point for interpolation")

        modulus = points[0][0].modulus
        for x, y in points:
            if x.modulus != modulus or y.modulus != modulus:
                raise FieldMismatchError("All points must be from the same field")

        field_type = prime_field(modulus)
        xs = field_type([x.value for x, _ in points])
        ys = field_type([y.value for _, y in points])
        return Polynomial._from_galois(galois.lagrange_poly(xs, ys), modulus)

    # --- Display ---

    def __str__(self) -> str:
        terms = []
        for i, c in enumerate(self.coefficients):
            if c.is_zero():
                continue
            coef_str = "" if c.value == 1 and i > 0 else str(c)
            var_str = "" if i == 0 else ("x" if i == 1 else f"x^{i}")
            terms.append(f"{coef_str}{var_str}")
        return " + ".join(terms) or "0"

    def __repr__(self) -> str:
        return f"Polynomial({self})"

    def _ensure_same_field(self, other: "Polynomial") -> None:
        if self.modulus != other.modulus:
            raise FieldMismatchError("Polynomials must be over the same field")
