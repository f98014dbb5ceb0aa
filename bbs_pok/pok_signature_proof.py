"""
Proof of Knowledge of a Signature (verifier-facing transcript)
==============================================================

PokSignatureProof = (sigma_1', sigma_2', J, z) where z holds one response
per committed base, in the prover's insertion order:

    z_0 ↔ g2 (t),  z_1 ↔ W (m'),  z_{2+k} ↔ Y_i for the k-th hidden slot i

Recovering the Schnorr commitment (Equation T):

    T = J^{-c} · g2^{z_0} · W^{z_1} · ∏_{i hidden} Y_i^{z_i}

Signature relation (Equation P):

    e(sigma_1', X · J · ∏_{i revealed} Y_i^{m_i}) = e(sigma_2', g2)

Wire format:
    sigma_1' || sigma_2' || J || u32-BE response count || z_0 || z_1 || ...
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from . import codec
from .errors import InvalidEncoding, MismatchedLengths
from .fs_oracles import HashSink
from .groups import get_params, identity_g1
from .scalars import Challenge, Message
from .utils import multiexp_g2, pairing_eq

logger = logging.getLogger(__name__)

_COUNT_BYTES = 4

RevealedMessages = Union[Mapping[int, Message], Sequence[Tuple[int, Message]]]


def normalize_revealed(revealed: RevealedMessages, total: int) -> Optional[Dict[int, Message]]:
    """
    Turn revealed messages into an index → Message map.

    Returns None when an index repeats or falls outside [0, total).

    Raises
    ------
    TypeError
        If a revealed value is not a Message.
    """
    pairs = list(revealed.items()) if isinstance(revealed, Mapping) else list(revealed)
    result = {}
    for index, message in pairs:
        if not isinstance(message, Message):
            raise TypeError(f"expected Message, got {type(message).__name__}")
        if not 0 <= index < total or index in result:
            return None
        result[index] = message
    return result


class PokSignatureProof:
    """An immutable, serializable proof of knowledge of a signature."""

    def __init__(self, sigma_1, sigma_2, commitment, proof: List, params: dict = None):
        self.params = params or get_params()
        self.sigma_1 = sigma_1
        self.sigma_2 = sigma_2
        self.commitment = commitment
        self.proof = tuple(proof)

    @property
    def hidden_message_count(self) -> int:
        return len(self.proof) - 2

    def message_count(self, revealed: RevealedMessages) -> int:
        """Number of signed messages: the revealed ones plus one per hidden response."""
        return len(revealed) + self.hidden_message_count

    def _split_slots(self, revealed: RevealedMessages, generators) -> Tuple[Dict[int, Message], List[int]]:
        total = self.message_count(revealed)
        generators.check_covers(total)
        revealed = normalize_revealed(revealed, total)
        if revealed is None:
            raise InvalidEncoding("revealed message indices are out of range or repeated")
        return revealed, [i for i in range(total) if i not in revealed]

    def _recover_commitment(self, public_key, generators, hidden: List[int], challenge: Challenge):
        params = self.params
        bases = [self.commitment, params['g2'], public_key.w] + [generators.y[i] for i in hidden]
        scalars = [-challenge.value] + list(self.proof)
        return multiexp_g2(bases, scalars, params)

    def add_challenge_contribution(self, public_key, generators, revealed: RevealedMessages,
                                   challenge: Challenge, hasher: HashSink):
        """
        Absorb ``sigma_1' || sigma_2' || J || T`` as the prover did.

        T is recomputed from the responses and ``challenge`` (Equation T).
        The signed vector has ``len(revealed) + hidden_message_count``
        messages; ``generators`` may cover more slots than that.

        Raises
        ------
        MismatchedLengths
            If ``generators`` covers fewer slots than the signed vector.
        InvalidEncoding
            If a revealed index repeats or lies outside the signed vector.
        """
        params = self.params
        _, hidden = self._split_slots(revealed, generators)

        hasher.update(codec.g1_to_bytes(self.sigma_1, params))
        hasher.update(codec.g1_to_bytes(self.sigma_2, params))
        hasher.update(codec.g2_to_bytes(self.commitment, params))
        recovered = self._recover_commitment(public_key, generators, hidden, challenge)
        hasher.update(codec.g2_to_bytes(recovered, params))

    def verify(self, revealed: RevealedMessages, public_key, generators) -> bool:
        """
        Check the signature relation (Equation P) over the rerandomized pair.

        This does not check the challenge; Verifier.verify_signature_pok
        does both.
        """
        params = self.params
        try:
            revealed, _ = self._split_slots(revealed, generators)
        except (InvalidEncoding, MismatchedLengths) as e:
            logger.debug("proof rejected: %s", e)
            return False
        if self.sigma_1 == identity_g1(params) or self.sigma_2 == identity_g1(params):
            logger.debug("proof rejected: identity signature component")
            return False

        indices = sorted(revealed)
        rhs = public_key.x * self.commitment
        rhs *= multiexp_g2([generators.y[i] for i in indices],
                           [revealed[i].value for i in indices], params)
        if not pairing_eq(self.sigma_1, rhs, self.sigma_2, params['g2']):
            logger.debug("proof rejected: pairing check failed")
            return False
        return True

    def to_bytes(self) -> bytes:
        params = self.params
        out = bytearray()
        out += codec.g1_to_bytes(self.sigma_1, params)
        out += codec.g1_to_bytes(self.sigma_2, params)
        out += codec.g2_to_bytes(self.commitment, params)
        out += len(self.proof).to_bytes(_COUNT_BYTES, 'big')
        for response in self.proof:
            out += codec.scalar_to_bytes(response, params)
        return bytes(out)

    @staticmethod
    def byte_length(hidden_count: int, params: dict = None) -> int:
        params = params or get_params()
        return (2 * params['g1_bytes'] + params['g2_bytes'] + _COUNT_BYTES
                + (hidden_count + 2) * params['scalar_bytes'])

    @classmethod
    def from_bytes(cls, data: bytes, hidden_count: int = None, params: dict = None) -> 'PokSignatureProof':
        """
        Decode a proof.

        Parameters
        ----------
        data : bytes
            The encoded proof
        hidden_count : int, optional
            The number of hidden messages the disclosure policy implies;
            the length is checked against it before anything is decoded.

        Raises
        ------
        InvalidEncoding
            On any length mismatch or invalid element.
        """
        params = params or get_params()
        data = bytes(data)
        g1_len, g2_len, s_len = params['g1_bytes'], params['g2_bytes'], params['scalar_bytes']
        header = 2 * g1_len + g2_len + _COUNT_BYTES
        if len(data) < header:
            raise InvalidEncoding(f"proof too short: {len(data)} bytes")
        count = int.from_bytes(data[header - _COUNT_BYTES:header], 'big')
        if count < 2:
            raise InvalidEncoding(f"proof needs at least 2 responses, found {count}")
        if hidden_count is not None and count != hidden_count + 2:
            raise InvalidEncoding(f"proof has {count - 2} hidden responses, {hidden_count} expected")
        if len(data) != header + count * s_len:
            raise InvalidEncoding(f"proof length {len(data)} does not match {count} responses")

        sigma_1 = codec.g1_from_bytes(data[:g1_len], params)
        sigma_2 = codec.g1_from_bytes(data[g1_len:2 * g1_len], params)
        commitment = codec.g2_from_bytes(data[2 * g1_len:2 * g1_len + g2_len], params)
        responses = [codec.scalar_from_bytes(data[offset:offset + s_len], params)
                     for offset in range(header, len(data), s_len)]
        return cls(sigma_1, sigma_2, commitment, responses, params)

    def __eq__(self, other):
        if not isinstance(other, PokSignatureProof):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self):
        return hash(self.to_bytes())

    def __repr__(self):
        return f"PokSignatureProof(hidden={self.hidden_message_count})"
