"""
Pytest configuration and shared fixtures for stark_auth tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so the package imports without installation
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from stark_auth import AuthParams, Witness, create_field, derive_statement, generate_auth_proof  # noqa: E402

SECRET = 123456789
STEPS = 16
QUERIES = 5


@pytest.fixture(scope="session")
def params() -> AuthParams:
    return AuthParams(steps=STEPS, queries=QUERIES)


@pytest.fixture(scope="session")
def witness() -> Witness:
    return Witness(secret=create_field(SECRET))


@pytest.fixture(scope="session")
def statement(witness, params):
    return derive_statement(witness, params)


@pytest.fixture(scope="session")
def proof(statement, witness, params):
    return generate_auth_proof(statement, witness, params)
