"""
Signature Generation and Verification
=====================================

Signing a message vector (m_1, ..., m_n) with key x:

    m'      = H_aux(m_1, ..., m_n)
    e       ← random, or H_sig(x, m_1, ..., m_n) when no generator is injected
    u       = 1 / (x + e)
    sigma_1 = g1^u
    sigma_2 = (g1^{x + w·m'} · ∏ Yb_i^{m_i})^u

so that sigma_2 = sigma_1^{x + w·m' + Σ y_i m_i}. Verification checks

    e(sigma_1, X · W^{m'} · ∏ Y_i^{m_i}) = e(sigma_2, g2)

with sigma_1 ≠ 1. The exponent e never leaves the signer: it only fixes
the random base sigma_1.
"""

import logging
from typing import Sequence

from . import codec, fs_oracles
from .errors import DegenerateKey, InvalidEncoding
from .generators import MessageGenerators
from .groups import get_params, identity_g1
from .keys import PublicKey, SecretKey
from .scalars import Message, random_scalar
from .utils import multiexp_g1, multiexp_g2, pairing_eq

logger = logging.getLogger(__name__)


def aux_exponent(messages: Sequence[Message], params: dict):
    """The auxiliary exponent m' of an ordered message vector."""
    return fs_oracles.H_aux((m.to_bytes() for m in messages), params)


class _ByteLength:
    """``Signature.BYTES``: two compressed G1 points on the configured curve."""

    def __get__(self, obj, owner):
        params = obj.params if obj is not None else get_params()
        return 2 * params['g1_bytes']


class Signature:
    """A signature (sigma_1, sigma_2) ∈ G1 × G1 over a message vector."""

    BYTES = _ByteLength()

    def __init__(self, sigma_1, sigma_2, params: dict = None):
        self.params = params or get_params()
        self.sigma_1 = sigma_1
        self.sigma_2 = sigma_2

    @classmethod
    def new(cls, secret_key: SecretKey, generators: MessageGenerators,
            messages: Sequence[Message], rng=None) -> 'Signature':
        """
        Sign ``messages`` under ``secret_key``.

        Parameters
        ----------
        secret_key : SecretKey
            The signer's key
        generators : MessageGenerators
            The basis derived from the signer's public key
        messages : Sequence[Message]
            The messages, one per slot
        rng : object, optional
            Source of the exponent e. When omitted e is derived from the key
            and the messages, which makes signing deterministic.

        Raises
        ------
        MismatchedLengths
            If there are fewer generators than messages.
        DegenerateKey
            If x + e = 0.
        """
        params = secret_key.params
        generators.check_covers(len(messages))

        m_tick = aux_exponent(messages, params)
        if rng is None:
            e = fs_oracles.H_sig(secret_key.to_bytes(), (m.to_bytes() for m in messages), params)
        else:
            e = random_scalar(rng, params)

        denominator = secret_key.x + e
        if int(denominator) % params['order'] == 0:
            raise DegenerateKey("x + e is zero")
        u = 1 / denominator

        g1 = params['g1']
        base = g1 ** (secret_key.x + secret_key.aux_exponent() * m_tick)
        base *= multiexp_g1(list(generators.h[:len(messages)]), [m.value for m in messages], params)

        return cls(g1 ** u, base ** u, params)

    def verify(self, public_key: PublicKey, generators: MessageGenerators,
               messages: Sequence[Message]) -> bool:
        """
        Check the signature against a public key and message vector.

        Returns False for any mismatch, including too few generators.
        """
        params = self.params
        if len(generators) < len(messages):
            logger.debug("signature rejected: %d generators for %d messages", len(generators), len(messages))
            return False
        if self.sigma_1 == identity_g1(params):
            logger.debug("signature rejected: sigma_1 is the identity")
            return False

        m_tick = aux_exponent(messages, params)
        rhs = public_key.x * (public_key.w ** m_tick)
        rhs *= multiexp_g2(list(generators.y[:len(messages)]), [m.value for m in messages], params)

        if not pairing_eq(self.sigma_1, rhs, self.sigma_2, params['g2']):
            logger.debug("signature rejected: pairing check failed")
            return False
        return True

    def to_bytes(self) -> bytes:
        return codec.g1_to_bytes(self.sigma_1, self.params) + codec.g1_to_bytes(self.sigma_2, self.params)

    @classmethod
    def from_bytes(cls, data: bytes, params: dict = None) -> 'Signature':
        """
        Decode ``sigma_1 || sigma_2``.

        Raises
        ------
        InvalidEncoding
            On a wrong length, a point off the curve or outside the
            subgroup, or an identity sigma_1.
        """
        params = params or get_params()
        data = bytes(data)
        size = params['g1_bytes']
        if len(data) != 2 * size:
            raise InvalidEncoding(f"signature must be {2 * size} bytes, got {len(data)}")
        sigma_1 = codec.g1_from_bytes(data[:size], params)
        sigma_2 = codec.g1_from_bytes(data[size:], params)
        if sigma_1 == identity_g1(params):
            raise InvalidEncoding("sigma_1 must not be the identity")
        return cls(sigma_1, sigma_2, params)

    def __eq__(self, other):
        if not isinstance(other, Signature):
            return NotImplemented
        return self.sigma_1 == other.sigma_1 and self.sigma_2 == other.sigma_2

    def __hash__(self):
        return hash(self.to_bytes())

    def __repr__(self):
        return f"Signature({codec.to_hex(self.to_bytes())})"
