"""
Tests for proof JSON serialization and file round-trips.
"""

import copy
import json

import pytest

from stark_auth.errors import ProofFormatError
from stark_auth.primitives.field import STARK_PRIME
from stark_auth.protocol.proof import (
    load_proof,
    proof_from_json,
    proof_size,
    proof_to_json,
    save_proof,
)
from stark_auth.protocol.verifier import StarkVerifier


class TestProofSerialization:
    """JSON layout and round-trips."""

    def test_layout(self, params, proof) -> None:
        j = proof_to_json(proof)
        assert j["root"] == proof.root.hex()
        assert j["indices"] == list(proof.indices)
        assert len(j["openings"]) == params.queries

        first = j["openings"][0]
        assert first["index"] == params.steps - 2
        assert len(bytes.fromhex(first["current"])) == 32
        assert set(first["proof_current"]) == {"leaf", "root", "siblings"}
        assert {s["position"] for s in first["proof_current"]["siblings"]} <= {"left", "right"}

    def test_json_round_trip(self, proof) -> None:
        """Proof survives dumps/loads unchanged."""
        data = json.loads(json.dumps(proof_to_json(proof)))
        assert proof_from_json(data) == proof

    def test_round_trip_still_verifies(self, statement, params, proof) -> None:
        data = json.loads(json.dumps(proof_to_json(proof)))
        assert StarkVerifier(statement, params).verify(proof_from_json(data))
        assert StarkVerifier(statement, params).verify_json(data)

    def test_file_round_trip(self, tmp_path, proof) -> None:
        path = tmp_path / "proof.json"
        save_proof(proof, path)
        assert load_proof(path) == proof
        assert proof_size(load_proof(path)) == proof_size(proof)


class TestMalformedProofs:
    """Deserialization errors and verifier behaviour on bad JSON."""

    @pytest.fixture
    def data(self, proof):
        return proof_to_json(proof)

    def test_missing_root(self, data) -> None:
        del data["root"]
        with pytest.raises(ProofFormatError):
            proof_from_json(data)

    def test_bad_hex(self, data) -> None:
        data["openings"][0]["current"] = "zz"
        with pytest.raises(ProofFormatError):
            proof_from_json(data)

    def test_short_field_value(self, data) -> None:
        data["openings"][0]["next"] = "00" * 31
        with pytest.raises(ProofFormatError):
            proof_from_json(data)

    def test_non_canonical_field_value(self, data) -> None:
        data["openings"][0]["next"] = STARK_PRIME.to_bytes(32, "big").hex()
        with pytest.raises(ProofFormatError):
            proof_from_json(data)

    def test_bad_position(self, data) -> None:
        data["openings"][0]["proof_current"]["siblings"][0]["position"] = "up"
        with pytest.raises(ProofFormatError):
            proof_from_json(data)

    @pytest.mark.parametrize("bad", ["3", 3.0, True, None])
    def test_bad_index_type(self, data, bad) -> None:
        data["indices"][0] = bad
        with pytest.raises(ProofFormatError):
            proof_from_json(data)

    def test_openings_not_a_list(self, data) -> None:
        data["openings"] = 5
        with pytest.raises(ProofFormatError):
            proof_from_json(data)

    def test_verify_json_rejects_garbage(self, statement, params, data) -> None:
        verifier = StarkVerifier(statement, params)
        assert verifier.verify_json({}) is False
        assert verifier.verify_json(None) is False

        broken = copy.deepcopy(data)
        broken["openings"][1]["proof_next"]["leaf"] = "not hex"
        assert verifier.verify_json(broken) is False

    def test_verify_json_rejects_tampered_value(self, statement, params, data) -> None:
        data["openings"][1]["current"] = data["openings"][2]["current"]
        assert StarkVerifier(statement, params).verify_json(data) is False
