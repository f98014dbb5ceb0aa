"""
Per-slot message generators.

Signer, holder and verifier must use exactly the same basis for every
message slot. The basis of slot i is the pair (Yb_i ∈ G1, Y_i ∈ G2) taken
from the public key: Yb_i is raised to the message when signing, Y_i when
verifying a signature or a proof. The derivation is a pure function of
(public key, count) under the ciphersuite tag GENERATORS_VERSION.
"""

from .errors import MismatchedLengths
from .fs_oracles import GENERATORS_VERSION


class MessageGenerators:
    """
    Ordered generator basis, one entry per message slot.

    Attributes
    ----------
    h : tuple of G1
        Signing bases Yb_i
    y : tuple of G2
        Verification bases Y_i
    version : bytes
        The derivation tag the basis was produced under
    """

    def __init__(self, h, y, params: dict, version: bytes = GENERATORS_VERSION):
        if len(h) != len(y):
            raise MismatchedLengths(f"generator halves disagree: {len(h)} != {len(y)}")
        self.h = tuple(h)
        self.y = tuple(y)
        self.params = params
        self.version = version

    @classmethod
    def from_public_key(cls, public_key, count: int) -> 'MessageGenerators':
        """
        Derive the basis for the first ``count`` message slots of a key.

        Raises
        ------
        MismatchedLengths
            If the key covers fewer than ``count`` slots.
        """
        if count < 0:
            raise ValueError("count must not be negative")
        if public_key.message_count < count:
            raise MismatchedLengths(
                f"public key has {public_key.message_count} message slots, {count} requested")
        return cls(public_key.y_blinds[:count], public_key.y[:count], public_key.params)

    def check_covers(self, count: int):
        """Raise MismatchedLengths unless there is a generator for ``count`` messages."""
        if len(self) < count:
            raise MismatchedLengths(f"{len(self)} generators for {count} messages")

    def __len__(self):
        return len(self.y)

    def __eq__(self, other):
        if not isinstance(other, MessageGenerators):
            return NotImplemented
        return self.version == other.version and self.h == other.h and self.y == other.y

    def __hash__(self):
        return hash((self.version, len(self)))

    def __repr__(self):
        return f"MessageGenerators(count={len(self)})"
