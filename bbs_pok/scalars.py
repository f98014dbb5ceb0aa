"""
Scalar value types and randomness.

Messages, nonces and challenges are all elements of Z_q. They are wrapped in
small immutable classes so that a challenge cannot be passed where a message
is expected, and so that each carries its canonical encoding.

Randomness is always injected: every sampling function takes an ``rng``
object exposing ``getrandbits(k)``. ``random.Random(seed)`` gives
reproducible runs for test vectors, ``secrets.SystemRandom()`` is the
default.
"""

import secrets

from charm.toolbox.pairinggroup import ZR

from . import codec, fs_oracles
from .errors import InvalidEncoding
from .groups import get_params

# Extra bits sampled above the order size to make the reduction unbiased
_SAMPLING_MARGIN = 128


def default_rng():
    return secrets.SystemRandom()


def random_scalar(rng, params: dict) -> ZR:
    """
    Sample a uniform non-zero scalar from an injected generator.

    Parameters
    ----------
    rng : object
        Any object with ``getrandbits(k)``
    params : dict
        The group parameters from groups.setup()
    """
    q = params['order']
    bits = q.bit_length() + _SAMPLING_MARGIN
    while True:
        value = rng.getrandbits(bits) % q
        if value != 0:
            return params['group'].init(ZR, value)


class _Scalar:
    __slots__ = ('value', 'params')

    def __init__(self, value, params: dict = None):
        self.params = params or get_params()
        if isinstance(value, int):
            value = self.params['group'].init(ZR, value % self.params['order'])
        self.value = value

    def to_bytes(self) -> bytes:
        return codec.scalar_to_bytes(self.value, self.params)

    @classmethod
    def from_bytes(cls, data: bytes, params: dict = None):
        params = params or get_params()
        return cls(codec.scalar_from_bytes(data, params), params)

    def is_zero(self) -> bool:
        return int(self.value) % self.params['order'] == 0

    def __int__(self):
        return int(self.value) % self.params['order']

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return int(self) == int(other)

    def __hash__(self):
        return hash((type(self).__name__, int(self)))

    def __repr__(self):
        return f"{type(self).__name__}({codec.to_hex(self.to_bytes())})"


class Message(_Scalar):
    """A signed message: a claim value mapped into Z_q."""

    __slots__ = ()

    @classmethod
    def hash(cls, data: bytes, params: dict = None) -> 'Message':
        params = params or get_params()
        return cls(fs_oracles.H_msg(bytes(data), params), params)

    @classmethod
    def random(cls, rng=None, params: dict = None) -> 'Message':
        params = params or get_params()
        return cls(random_scalar(rng or default_rng(), params), params)


class Nonce(_Scalar):
    """A presentation nonce, or an externally supplied blinding factor."""

    __slots__ = ()

    @classmethod
    def random(cls, rng=None, params: dict = None) -> 'Nonce':
        params = params or get_params()
        return cls(random_scalar(rng or default_rng(), params), params)

    @classmethod
    def default(cls, params: dict = None) -> 'Nonce':
        """The empty nonce: encodes as all-zero bytes."""
        return cls(0, params)


class Challenge(_Scalar):
    """A Fiat-Shamir challenge. Never zero."""

    __slots__ = ()

    def __init__(self, value, params: dict = None):
        super().__init__(value, params)
        if self.is_zero():
            raise InvalidEncoding("challenge must not be zero")

    @classmethod
    def from_okm(cls, okm: bytes, params: dict = None) -> 'Challenge':
        params = params or get_params()
        return cls(fs_oracles.okm_to_scalar(okm, params), params)

    @classmethod
    def from_hasher(cls, hasher, params: dict = None) -> 'Challenge':
        params = params or get_params()
        return cls(fs_oracles.H_chal(hasher, params), params)
