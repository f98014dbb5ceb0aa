"""
Group Initialization and Setup
===============================

This module initializes the pairing groups the signature scheme runs over.

According to charm-crypto documentation (https://jhuisi.github.io/charm/tutorial.html):
- PairingGroup('BN254') provides asymmetric Type-3 pairings with 254-bit base field
- Alternative curves: 'MNT224', 'SS512' (symmetric, but can be used)
- G1, G2 are the source groups; GT is the target group
- Pairing operation: pair(g1_elem, g2_elem) -> GT element

The generators g1 ∈ G1 and g2 ∈ G2 are not sampled at random: they are
obtained by hashing fixed tags into the groups, so that every signer and
verifier running the same curve agrees on them without extra key material.
"""

import base64
import logging
from functools import lru_cache

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair

from .config import config

logger = logging.getLogger(__name__)

# Fallback chain when the requested curve is unavailable in the local charm build
FALLBACK_CURVES = ('BN254', 'MNT224', 'SS512')

G1_GENERATOR_TAG = b"BBS_POK_V1_G1_GENERATOR"
G2_GENERATOR_TAG = b"BBS_POK_V1_G2_GENERATOR"


def _compressed_size(group: PairingGroup, elem) -> int:
    serialized = group.serialize(elem, compression=True)
    return len(base64.b64decode(serialized.split(b':', 1)[1]))


def setup(group_name: str = 'BN254') -> dict:
    """
    Initialize the pairing group and the fixed generators of the scheme.

    Parameters
    ----------
    group_name : str, optional
        The pairing curve identifier. Default is 'BN254'.
        Supported curves:
        - 'BN254': Asymmetric Type-3, 254-bit base field (preferred)
        - 'MNT224': Asymmetric Type-3, 224-bit base field (fallback)
        - 'SS512': Symmetric, 512-bit base field (fallback)

    Returns
    -------
    dict
        A dictionary containing:
        - 'group': The PairingGroup object
        - 'group_name': The name of the curve used
        - 'g1': The fixed generator of G1
        - 'g2': The fixed generator of G2
        - 'order': The prime group order q as a Python int
        - 'g1_bytes': Length of a compressed G1 encoding
        - 'g2_bytes': Length of a compressed G2 encoding
        - 'scalar_bytes': Length of a scalar encoding
        - 'pair': The pairing function

    Notes
    -----
    The generators depend only on the curve, so two processes configured
    with the same curve derive identical parameters.
    """
    candidates = [group_name] + [name for name in FALLBACK_CURVES if name != group_name]
    group = None
    for name in candidates:
        try:
            group = PairingGroup(name)
        except Exception as e:
            logger.warning("pairing curve %s not available (%s), trying next fallback", name, e)
            continue
        if name != group_name:
            logger.warning("falling back from %s to %s", group_name, name)
        group_name = name
        break
    if group is None:
        raise RuntimeError("no pairing curve available in the installed charm-crypto")

    g1 = group.hash(G1_GENERATOR_TAG, G1)
    g2 = group.hash(G2_GENERATOR_TAG, G2)
    order = int(group.order())

    return {
        'group': group,
        'group_name': group_name,
        'g1': g1,
        'g2': g2,
        'order': order,
        'g1_bytes': _compressed_size(group, g1),
        'g2_bytes': _compressed_size(group, g2),
        'scalar_bytes': (order.bit_length() + 7) // 8,
        'pair': pair,
    }


@lru_cache(maxsize=None)
def get_params(group_name: str = None) -> dict:
    """
    Return the cached parameters of the configured curve.

    The result is shared read-only by every key, signature and proof
    created in the process.
    """
    return setup(group_name or config.pairing_curve)


def identity_g1(params: dict):
    return params['group'].init(G1, 1)


def identity_g2(params: dict):
    return params['group'].init(G2, 1)


def zero(params: dict):
    return params['group'].init(ZR, 0)


__all__ = ['setup', 'get_params', 'identity_g1', 'identity_g2', 'zero', 'ZR', 'G1', 'G2', 'GT', 'pair']
