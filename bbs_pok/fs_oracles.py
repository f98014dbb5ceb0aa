"""
Fiat-Shamir Random Oracles
===========================

This module implements the hash functions of the ciphersuite: hashing
arbitrary bytes to scalars, deriving key material from seeds, and turning a
proof transcript into a Fiat-Shamir challenge.

Random Oracles:
---------------
- H_msg:  Hash a claim value to a message scalar
- H_key:  Derive the secret key scalar x from a seed
- H_exp:  Derive the auxiliary and per-slot exponents from x
- H_aux:  Derive the auxiliary exponent m' of a message vector
- H_sig:  Derive a deterministic signing exponent e
- H_chal: Derive the challenge from a transcript

Domain Separation:
------------------
Each oracle absorbs its own tag before any input, prefixed by the tag
length, so no two oracles can be made to agree on an input:

    SHAKE-256( len(dst) || dst || data )

All oracles read a 48-byte window of the XOF stream and reduce it modulo
the group order q, which keeps the bias below 2^-128 for q < 2^256.
"""

import hashlib
from typing import Iterable, Protocol

from charm.toolbox.pairinggroup import ZR

OKM_BYTES = 48
CHALLENGE_BYTES = 48

DST_MESSAGE = b"BBS_POK_V1_MESSAGE"
DST_KEYGEN = b"BBS_POK_V1_KEYGEN"
DST_KEY_EXPONENT = b"BBS_POK_V1_KEY_EXPONENT"
DST_AUX = b"BBS_POK_V1_M_TICK"
DST_SIGN = b"BBS_POK_V1_SIGN"

# Tag of the generator derivation in use; bumping it is a ciphersuite change
GENERATORS_VERSION = b"BBS_POK_V1_GENERATORS"


class HashSink(Protocol):
    """Anything that can absorb transcript bytes (hashlib objects qualify)."""

    def update(self, data: bytes) -> None:
        ...


def _xof(dst: bytes):
    hasher = hashlib.shake_256()
    hasher.update(len(dst).to_bytes(1, 'big'))
    hasher.update(dst)
    return hasher


def okm_to_scalar(okm: bytes, params: dict) -> ZR:
    """Reduce output keying material modulo q."""
    return params['group'].init(ZR, int.from_bytes(okm, 'big') % params['order'])


def hash_to_scalar(data: bytes, dst: bytes, params: dict) -> ZR:
    """
    Hash arbitrary bytes to a scalar under a domain separation tag.

    Parameters
    ----------
    data : bytes
        The input bytes
    dst : bytes
        The domain separation tag of the oracle
    params : dict
        The group parameters from groups.setup()

    Returns
    -------
    ZR
        A scalar in Z_q
    """
    hasher = _xof(dst)
    hasher.update(data)
    return okm_to_scalar(hasher.digest(OKM_BYTES), params)


def H_msg(data: bytes, params: dict) -> ZR:
    return hash_to_scalar(data, DST_MESSAGE, params)


def H_key(seed: bytes, params: dict) -> ZR:
    return hash_to_scalar(seed, DST_KEYGEN, params)


def H_exp(x_bytes: bytes, label: bytes, index: int, params: dict) -> ZR:
    """
    Derive a secret exponent bound to the key scalar x.

    The input is ``x || label || index`` with a 4-byte big-endian index,
    so slot exponents are independent of each other and of the auxiliary
    exponent (label ``b"w"``).
    """
    return hash_to_scalar(x_bytes + label + index.to_bytes(4, 'big'), DST_KEY_EXPONENT, params)


def H_aux(message_bytes: Iterable[bytes], params: dict) -> ZR:
    """
    Random oracle H_aux: the auxiliary exponent m' of a message vector.

    Both the signer and the holder derive m' from the ordered message
    encodings, so it never travels with the signature.
    """
    hasher = _xof(DST_AUX)
    count = 0
    for encoded in message_bytes:
        hasher.update(encoded)
        count += 1
    hasher.update(count.to_bytes(4, 'big'))
    return okm_to_scalar(hasher.digest(OKM_BYTES), params)


def H_sig(x_bytes: bytes, message_bytes: Iterable[bytes], params: dict) -> ZR:
    """Deterministic signing exponent e derived from the key and the messages."""
    hasher = _xof(DST_SIGN)
    hasher.update(x_bytes)
    for encoded in message_bytes:
        hasher.update(encoded)
    return okm_to_scalar(hasher.digest(OKM_BYTES), params)


def challenge_hasher():
    """
    Fresh transcript hasher for the Fiat-Shamir challenge.

    Notes
    -----
    The challenge transcript carries no domain tag: prover and verifier
    absorb ``sigma_1' || sigma_2' || J || T || nonce`` and read
    CHALLENGE_BYTES from the stream.
    """
    return hashlib.shake_256()


def H_chal(hasher, params: dict) -> ZR:
    """Read the challenge window from a finished transcript hasher."""
    return okm_to_scalar(hasher.digest(CHALLENGE_BYTES), params)
