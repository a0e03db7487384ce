"""Unit tests for the binary Merkle tree commitment."""

import hashlib

import pytest

from stark_auth.errors import EmptyInputError, IndexOutOfRangeError
from stark_auth.primitives.hashing import blake2s, hash_pair, sha256
from stark_auth.primitives.merkle_tree import MerkleProof, MerkleSibling, MerkleTree, Side


def _leaves(n: int) -> list:
    return [bytes([i]) * 32 for i in range(n)]


def _h(left: bytes, right: bytes) -> bytes:
    return hashlib.sha256(left + right).digest()


class TestConstruction:
    """Root computation and layer layout."""

    def test_empty_leaves_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            MerkleTree([])

    def test_single_leaf_root_is_leaf(self) -> None:
        leaf = b"\x42" * 32
        tree = MerkleTree([leaf])
        assert tree.get_root() == leaf
        assert tree.depth == 0
        assert tree.get_proof(0).siblings == ()

    def test_two_leaves(self) -> None:
        a, b = _leaves(2)
        assert MerkleTree([a, b]).get_root() == _h(a, b)

    def test_four_leaves(self) -> None:
        a, b, c, d = _leaves(4)
        assert MerkleTree([a, b, c, d]).get_root() == _h(_h(a, b), _h(c, d))

    def test_odd_leaf_is_promoted(self) -> None:
        """Trailing unpaired node moves up unchanged, no duplication."""
        a, b, c = _leaves(3)
        tree = MerkleTree([a, b, c])
        assert tree.layers[1] == [_h(a, b), c]
        assert tree.get_root() == _h(_h(a, b), c)

    def test_five_leaves(self) -> None:
        a, b, c, d, e = _leaves(5)
        expected = _h(_h(_h(a, b), _h(c, d)), e)
        assert MerkleTree([a, b, c, d, e]).get_root() == expected

    def test_deterministic(self) -> None:
        leaves = _leaves(11)
        assert MerkleTree(leaves).get_root() == MerkleTree(list(leaves)).get_root()

    def test_order_matters(self) -> None:
        leaves = _leaves(4)
        assert MerkleTree(leaves).get_root() != MerkleTree(leaves[::-1]).get_root()

    def test_len_and_depth(self) -> None:
        tree = MerkleTree(_leaves(16))
        assert len(tree) == 16
        assert tree.depth == 4
        assert MerkleTree.max_proof_length(16) == 4
        assert MerkleTree.max_proof_length(1) == 0

    def test_custom_hash(self) -> None:
        a, b = _leaves(2)
        assert MerkleTree([a, b], hash_fn=blake2s).get_root() == blake2s(a + b)


class TestProofs:
    """Inclusion proof generation and verification."""

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 13, 16])
    def test_every_proof_verifies(self, n: int) -> None:
        tree = MerkleTree(_leaves(n))
        for i in range(n):
            proof = tree.get_proof(i)
            assert proof.verify()
            assert tree.verify(proof)
            assert proof.leaf == tree.leaves[i]
            assert proof.get_root() == tree.get_root()

    def test_sibling_positions(self) -> None:
        a, b, c, d = _leaves(4)
        tree = MerkleTree([a, b, c, d])
        proof = tree.get_proof(2)
        assert proof.siblings == (
            MerkleSibling(hash=d, position=Side.RIGHT),
            MerkleSibling(hash=_h(a, b), position=Side.LEFT),
        )

    def test_promoted_level_has_no_sibling(self) -> None:
        """Leaf 4 of 5 is promoted twice before meeting a sibling."""
        tree = MerkleTree(_leaves(5))
        proof = tree.get_proof(4)
        assert len(proof.siblings) == 1
        assert proof.siblings[0].position == Side.LEFT

    def test_identical_trees_give_identical_proofs(self) -> None:
        leaves = _leaves(7)
        t1, t2 = MerkleTree(leaves), MerkleTree(leaves)
        for i in range(7):
            assert t1.get_proof(i) == t2.get_proof(i)

    @pytest.mark.parametrize("index", [-1, 8, 100])
    def test_index_out_of_range(self, index: int) -> None:
        with pytest.raises(IndexOutOfRangeError):
            MerkleTree(_leaves(8)).get_proof(index)

    def test_verifies_without_tree(self) -> None:
        """Proof rebuilt from raw parts still verifies."""
        tree = MerkleTree(_leaves(6))
        original = tree.get_proof(3)
        rebuilt = MerkleProof(leaf=original.leaf, siblings=original.siblings, root=original.root)
        assert rebuilt.verify()


class TestTamper:
    """Any modification invalidates a proof."""

    @pytest.mark.parametrize("byte_idx", [0, 15, 31])
    def test_flipped_leaf_byte(self, byte_idx: int) -> None:
        tree = MerkleTree(_leaves(8))
        proof = tree.get_proof(5)
        leaf = bytearray(proof.leaf)
        leaf[byte_idx] ^= 0x01
        tampered = MerkleProof(leaf=bytes(leaf), siblings=proof.siblings, root=proof.root)
        assert not tampered.verify()

    def test_tampered_sibling(self) -> None:
        proof = MerkleTree(_leaves(8)).get_proof(2)
        bad = MerkleSibling(hash=b"\x00" * 32, position=proof.siblings[0].position)
        tampered = MerkleProof(leaf=proof.leaf, siblings=(bad,) + proof.siblings[1:], root=proof.root)
        assert not tampered.verify()

    def test_swapped_position(self) -> None:
        proof = MerkleTree(_leaves(8)).get_proof(2)
        first = proof.siblings[0]
        flipped = MerkleSibling(
            hash=first.hash,
            position=Side.LEFT if first.position == Side.RIGHT else Side.RIGHT,
        )
        tampered = MerkleProof(leaf=proof.leaf, siblings=(flipped,) + proof.siblings[1:], root=proof.root)
        assert not tampered.verify()

    def test_wrong_root(self) -> None:
        proof = MerkleTree(_leaves(8)).get_proof(2)
        tampered = MerkleProof(leaf=proof.leaf, siblings=proof.siblings, root=b"\x11" * 32)
        assert not tampered.verify()

    def test_hash_override(self) -> None:
        """Verifying with a different hash than the tree's fails."""
        proof = MerkleTree(_leaves(4)).get_proof(1)
        assert proof.verify(sha256)
        assert not proof.verify(blake2s)


class TestHashing:
    """Node combination rule."""

    def test_hash_pair_is_plain_concatenation(self) -> None:
        a, b = b"\x01" * 32, b"\x02" * 32
        assert hash_pair(a, b) == hashlib.sha256(a + b).digest()
        assert hash_pair(a, b) != hash_pair(b, a)

    def test_hash_leaf(self) -> None:
        assert MerkleTree.hash_leaf("abc") == hashlib.sha256(b"abc").digest()
        assert MerkleTree.hash_leaf(b"abc") == MerkleTree.hash_leaf("abc")
