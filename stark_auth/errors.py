"""Error taxonomy for usage and construction mistakes.

These are raised for malformed statements, witnesses, parameters and encodings.
Verification never raises any of them: a verifier turns every anomaly into a
plain ``False``.

Each error also derives from the closest builtin exception so callers can catch
either the specific type or the generic one.
"""


class StarkAuthError(Exception):
    """Base class for all stark_auth errors."""


class FieldMismatchError(StarkAuthError, ValueError):
    """Operands belong to fields with different moduli."""


class DivisionByZeroError(StarkAuthError, ZeroDivisionError):
    """Attempted to invert the additive identity."""


class InvalidLengthError(StarkAuthError, ValueError):
    """Byte encoding has the wrong length."""


class NonCanonicalEncodingError(StarkAuthError, ValueError):
    """Encoded integer is not reduced modulo the field prime."""


class EmptyInputError(StarkAuthError, ValueError):
    """A non-empty sequence was required."""


class IndexOutOfRangeError(StarkAuthError, IndexError):
    """Leaf or trace index outside the valid range."""


class InvalidParamsError(StarkAuthError, ValueError):
    """Protocol parameters violate 1 <= queries <= steps - 1, steps >= 2."""


class WitnessMismatchError(StarkAuthError, ValueError):
    """The witness does not reproduce the statement's final hash."""


class ProofFormatError(StarkAuthError, ValueError):
    """Serialized proof is missing fields or has malformed values."""


class InvalidModulusError(StarkAuthError, ValueError):
    """Modulus is not a supported prime."""
