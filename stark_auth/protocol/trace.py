"""Hash-chain execution trace.

The transition H(x) = x^3 + 7 is a public algebraic step, not a collision
resistant hash. The trace is

    t[0]   = H(secret)
    t[i+1] = H(t[i])      for i = 0..steps-2
    Y      = t[steps-1]

and Y is the public commitment stored by the verifying party.
"""

from typing import List

from stark_auth.errors import InvalidParamsError
from stark_auth.primitives.field import FieldElement
from stark_auth.protocol.data import AuthParams, Statement, Witness

TRANSITION_CONSTANT = 7

# --- Type Aliases ---

Trace = List[FieldElement]


def transition(x: FieldElement) -> FieldElement:
    """One step of the chain: x^3 + 7 mod p."""
    return x.pow(3).add(FieldElement(TRANSITION_CONSTANT, x.modulus))


def build_auth_trace(witness: Witness, params: AuthParams) -> Trace:
    """Build t[0..steps-1] from the secret."""
    steps = params.steps
    if steps < 2:
        raise InvalidParamsError(f"steps must be >= 2, got {steps}")

    trace: Trace = [transition(witness.secret)]
    for _ in range(1, steps):
        trace.append(transition(trace[-1]))
    return trace


def derive_statement(witness: Witness, params: AuthParams) -> Statement:
    """Public statement for a secret, as computed once at enrollment."""
    trace = build_auth_trace(witness, params)
    return Statement(steps=params.steps, final_hash=trace[-1])
