"""Binary Merkle tree commitment over byte-string leaves.

Leaves are committed as given (no leaf hashing). Each parent is
H(left || right). A trailing unpaired node is promoted to the next layer
unchanged, so no padding is ever introduced and a single-leaf tree has the leaf
itself as root.

A MerkleProof carries its own leaf, sibling path and root, so it can be checked
without access to the tree.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from stark_auth.errors import EmptyInputError, IndexOutOfRangeError
from stark_auth.primitives.hashing import HashFunction, hash_pair, sha256

# --- Type Aliases ---

MerkleRoot = bytes
Layer = List[bytes]


# --- Data Classes ---

class Side(str, Enum):
    """Position of a sibling relative to the running hash."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class MerkleSibling:
    """One authentication path entry: sibling digest and the side it sits on."""

    hash: bytes
    position: Side


@dataclass(frozen=True)
class MerkleProof:
    """Inclusion proof for one leaf.

    Attributes:
        leaf: Leaf bytes as committed
        siblings: Sibling hashes from leaf level up to the root. Levels where the
                  node was promoted without a sibling contribute no entry.
        root: Root the proof claims membership in
        hash_fn: Node hash; not part of equality
    """

    leaf: bytes
    siblings: Tuple[MerkleSibling, ...]
    root: MerkleRoot
    hash_fn: HashFunction = field(default=sha256, compare=False, repr=False)

    def compute_root(self, hash_fn: Optional[HashFunction] = None) -> MerkleRoot:
        """Replay the hash chain from the leaf.

        hash_fn overrides the proof's own hash, so a verifier can insist on the
        agreed one.
        """
        hash_fn = hash_fn or self.hash_fn
        current = self.leaf
        for sibling in self.siblings:
            if sibling.position == Side.LEFT:
                current = hash_pair(sibling.hash, current, hash_fn)
            else:
                current = hash_pair(current, sibling.hash, hash_fn)
        return current

    def verify(self, hash_fn: Optional[HashFunction] = None) -> bool:
        return self.compute_root(hash_fn) == self.root

    def get_root(self) -> MerkleRoot:
        return self.root


# --- Merkle Tree ---

class MerkleTree:
    """Binary Merkle tree with promotion of unpaired trailing nodes."""

    def __init__(self, leaves: Sequence[bytes], hash_fn: HashFunction = sha256):
        if len(leaves) == 0:
            raise EmptyInputError("Merkle tree must have at least one leaf")

        self.hash_fn = hash_fn
        self.leaves: Layer = [bytes(leaf) for leaf in leaves]
        self.layers: List[Layer] = [self.leaves]
        self.root: MerkleRoot = self._build()

    # --- Core Operations ---

    def get_root(self) -> MerkleRoot:
        return self.root

    def get_proof(self, index: int) -> MerkleProof:
        """Authentication path for the leaf at index.

        Raises:
            IndexOutOfRangeError: If index is outside [0, len(leaves)).
        """
        if index < 0 or index >= len(self.leaves):
            raise IndexOutOfRangeError(
                f"Leaf index {index} out of range [0, {len(self.leaves)})"
            )

        siblings: List[MerkleSibling] = []
        current_idx = index

        for layer in self.layers[:-1]:
            is_right = current_idx % 2 == 1
            sibling_idx = current_idx - 1 if is_right else current_idx + 1

            if sibling_idx < len(layer):
                siblings.append(MerkleSibling(
                    hash=layer[sibling_idx],
                    position=Side.LEFT if is_right else Side.RIGHT,
                ))

            current_idx //= 2

        return MerkleProof(
            leaf=self.leaves[index],
            siblings=tuple(siblings),
            root=self.root,
            hash_fn=self.hash_fn,
        )

    def verify(self, proof: MerkleProof) -> bool:
        return proof.verify()

    @staticmethod
    def hash_leaf(data: Union[str, bytes], hash_fn: HashFunction = sha256) -> bytes:
        """Hash an arbitrary payload into a fixed-size leaf."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        return hash_fn(data)

    # --- Size Utilities ---

    @property
    def depth(self) -> int:
        """Number of hashing layers above the leaves."""
        return len(self.layers) - 1

    def __len__(self) -> int:
        return len(self.leaves)

    @staticmethod
    def max_proof_length(n_leaves: int) -> int:
        """Upper bound on siblings per proof for a tree of n_leaves."""
        if n_leaves <= 1:
            return 0
        return math.ceil(math.log2(n_leaves))

    # --- Internal Helpers ---

    def _build(self) -> MerkleRoot:
        current = self.leaves
        while len(current) > 1:
            next_layer: Layer = []
            for i in range(0, len(current), 2):
                if i + 1 < len(current):
                    next_layer.append(hash_pair(current[i], current[i + 1], self.hash_fn))
                else:
                    next_layer.append(current[i])
            self.layers.append(next_layer)
            current = next_layer
        return current[0]
