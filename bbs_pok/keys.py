"""
Key Generation
==============

The signer holds a single secret scalar x. Every other secret exponent is
derived from it by domain-separated hashing:

- w   = H_exp(x, "w", 0)       auxiliary exponent, binds m'
- y_i = H_exp(x, "y", i)       exponent of message slot i

The public key publishes, for a fixed number n of message slots:

- X  = g2^x
- W  = g2^w,      W_blind  = g1^w
- Y_i = g2^{y_i}, Yb_i     = g1^{y_i}    for i ∈ [0, n)

g1^x is never published: together with the G1 bases it would allow anyone
to produce signatures.
"""

import logging
from typing import List

from charm.toolbox.pairinggroup import pair

from . import codec, fs_oracles
from .errors import DegenerateKey, InvalidEncoding
from .groups import get_params, identity_g1, identity_g2
from .scalars import default_rng, random_scalar

logger = logging.getLogger(__name__)

_COUNT_BYTES = 4


class SecretKey:
    """The signer's secret scalar x."""

    def __init__(self, x, params: dict = None):
        self.params = params or get_params()
        if int(x) % self.params['order'] == 0:
            raise DegenerateKey("secret key must not be zero")
        self.x = x

    @classmethod
    def from_seed(cls, seed: bytes, params: dict = None) -> 'SecretKey':
        """Derive a key from seed material; any byte string, including empty, is accepted."""
        params = params or get_params()
        return cls(fs_oracles.H_key(bytes(seed), params), params)

    @classmethod
    def random(cls, rng=None, params: dict = None) -> 'SecretKey':
        params = params or get_params()
        return cls(random_scalar(rng or default_rng(), params), params)

    def to_bytes(self) -> bytes:
        return codec.scalar_to_bytes(self.x, self.params)

    @classmethod
    def from_bytes(cls, data: bytes, params: dict = None) -> 'SecretKey':
        params = params or get_params()
        return cls(codec.scalar_from_bytes(data, params), params)

    def aux_exponent(self):
        return fs_oracles.H_exp(self.to_bytes(), b"w", 0, self.params)

    def message_exponent(self, index: int):
        return fs_oracles.H_exp(self.to_bytes(), b"y", index, self.params)

    def __eq__(self, other):
        if not isinstance(other, SecretKey):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self):
        return hash(self.to_bytes())

    def __repr__(self):
        return "SecretKey(<redacted>)"


class PublicKey:
    """
    Public commitment to a SecretKey for a fixed number of message slots.

    Attributes
    ----------
    x : G2
        X = g2^x
    w : G2
        W = g2^w, base of the auxiliary exponent
    w_blind : G1
        g1^w
    y : tuple of G2
        Y_i = g2^{y_i}, one per message slot
    y_blinds : tuple of G1
        g1^{y_i}, one per message slot
    """

    def __init__(self, x, w, w_blind, y: List, y_blinds: List, params: dict = None):
        self.params = params or get_params()
        if len(y) != len(y_blinds):
            raise InvalidEncoding(f"slot bases disagree: {len(y)} G2 vs {len(y_blinds)} G1")
        self.x = x
        self.w = w
        self.w_blind = w_blind
        self.y = tuple(y)
        self.y_blinds = tuple(y_blinds)

    @classmethod
    def from_secret_key(cls, secret_key: SecretKey, message_count: int) -> 'PublicKey':
        """
        Compute the public key of ``secret_key`` covering ``message_count`` slots.

        Parameters
        ----------
        secret_key : SecretKey
            The signer's key
        message_count : int
            The number of message slots the key can sign
        """
        if message_count < 0:
            raise ValueError("message_count must not be negative")
        params = secret_key.params
        g1, g2 = params['g1'], params['g2']
        w = secret_key.aux_exponent()
        y_exps = [secret_key.message_exponent(i) for i in range(message_count)]
        return cls(
            g2 ** secret_key.x,
            g2 ** w,
            g1 ** w,
            [g2 ** y_i for y_i in y_exps],
            [g1 ** y_i for y_i in y_exps],
            params,
        )

    @property
    def message_count(self) -> int:
        return len(self.y)

    def is_valid(self) -> bool:
        """
        Check that the key is well-formed.

        Every element must be a non-identity member of its group, and each
        G1 base must share its exponent with the matching G2 base:
        e(Yb_i, g2) = e(g1, Y_i) and e(W_blind, g2) = e(g1, W).
        """
        params = self.params
        group = params['group']
        g1, g2 = params['g1'], params['g2']
        id1, id2 = identity_g1(params), identity_g2(params)

        for point in (self.x, self.w) + self.y:
            if point == id2 or not group.ismember(point):
                logger.debug("public key rejected: invalid G2 element")
                return False
        for point in (self.w_blind,) + self.y_blinds:
            if point == id1 or not group.ismember(point):
                logger.debug("public key rejected: invalid G1 element")
                return False

        pairs = [(self.w_blind, self.w)] + list(zip(self.y_blinds, self.y))
        for blind, base in pairs:
            if pair(blind, g2) != pair(g1, base):
                logger.debug("public key rejected: G1/G2 bases disagree")
                return False
        return True

    def to_bytes(self) -> bytes:
        params = self.params
        out = bytearray()
        out += codec.g2_to_bytes(self.x, params)
        out += codec.g2_to_bytes(self.w, params)
        out += codec.g1_to_bytes(self.w_blind, params)
        out += len(self.y).to_bytes(_COUNT_BYTES, 'big')
        for point in self.y:
            out += codec.g2_to_bytes(point, params)
        for point in self.y_blinds:
            out += codec.g1_to_bytes(point, params)
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes, params: dict = None) -> 'PublicKey':
        params = params or get_params()
        data = bytes(data)
        g1_len, g2_len = params['g1_bytes'], params['g2_bytes']
        header = 2 * g2_len + g1_len + _COUNT_BYTES
        if len(data) < header:
            raise InvalidEncoding(f"public key too short: {len(data)} bytes")
        count = int.from_bytes(data[header - _COUNT_BYTES:header], 'big')
        if len(data) != header + count * (g1_len + g2_len):
            raise InvalidEncoding(f"public key length {len(data)} does not match {count} slots")

        x = codec.g2_from_bytes(data[:g2_len], params)
        w = codec.g2_from_bytes(data[g2_len:2 * g2_len], params)
        w_blind = codec.g1_from_bytes(data[2 * g2_len:2 * g2_len + g1_len], params)
        offset = header
        y = []
        for _ in range(count):
            y.append(codec.g2_from_bytes(data[offset:offset + g2_len], params))
            offset += g2_len
        y_blinds = []
        for _ in range(count):
            y_blinds.append(codec.g1_from_bytes(data[offset:offset + g1_len], params))
            offset += g1_len
        return cls(x, w, w_blind, y, y_blinds, params)

    def __eq__(self, other):
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self):
        return hash(self.to_bytes())

    def __repr__(self):
        return f"PublicKey(slots={self.message_count})"


class KeyPair:
    """A SecretKey together with its PublicKey."""

    def __init__(self, secret_key: SecretKey, public_key: PublicKey):
        self.secret_key = secret_key
        self.public_key = public_key

    @classmethod
    def from_seed(cls, seed: bytes, message_count: int, params: dict = None) -> 'KeyPair':
        sk = SecretKey.from_seed(seed, params)
        return cls(sk, PublicKey.from_secret_key(sk, message_count))

    @classmethod
    def random(cls, message_count: int, rng=None, params: dict = None) -> 'KeyPair':
        sk = SecretKey.random(rng, params)
        return cls(sk, PublicKey.from_secret_key(sk, message_count))

    def is_valid(self) -> bool:
        """The public key is well-formed and was computed from this secret key."""
        if not self.public_key.is_valid():
            return False
        expected = PublicKey.from_secret_key(self.secret_key, self.public_key.message_count)
        return expected == self.public_key
