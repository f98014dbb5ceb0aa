"""
Schnorr Commitment Builder
==========================

A reusable sigma-protocol kernel: it batches any number of
"I know s_i such that P_i = B_i^{s_i}" obligations into one commitment

    T = ∏ B_i^{r_i}

and, once the Fiat-Shamir challenge c is known, one response vector

    z_i = r_i + c · s_i

in insertion order. A verifier holding P = ∏ B_i^{s_i} recovers
T = P^{-c} · ∏ B_i^{z_i}.

The builder is one-shot: after generate_proof() it refuses further
commitments and a second generate_proof().
"""

import logging
from typing import List, Sequence

from charm.toolbox.pairinggroup import ZR, G1, G2

from . import codec
from .errors import BuilderMisuse
from .fs_oracles import HashSink
from .scalars import random_scalar

logger = logging.getLogger(__name__)


def _scalar_value(value):
    return getattr(value, 'value', value)


class ProofCommittedBuilder:
    """
    Accumulates (base, blinding) pairs in one source group.

    Parameters
    ----------
    params : dict
        The group parameters from groups.setup()
    group_type : int, optional
        G1 or G2, the group the bases live in. Default is G2.
    """

    def __init__(self, params: dict, group_type: int = G2):
        if group_type not in (G1, G2):
            raise ValueError("bases must live in G1 or G2")
        self.params = params
        self.group_type = group_type
        self._encode = codec.g1_to_bytes if group_type == G1 else codec.g2_to_bytes
        self._bases = []
        self._randoms = []
        self._commitment = params['group'].init(group_type, 1)
        self._consumed = False

    def _check_open(self):
        if self._consumed:
            raise BuilderMisuse("builder already generated its proof")

    def commit_random(self, base, rng) -> ZR:
        """
        Commit to ``base`` with a freshly sampled blinding factor.

        Returns
        -------
        ZR
            The sampled blinding, which stays owned by the builder.
        """
        self._check_open()
        blinding = random_scalar(rng, self.params)
        self.commit(base, blinding)
        return blinding

    def commit(self, base, blinding):
        """
        Commit to ``base`` with a caller-supplied blinding factor.

        Used when the same hidden value must be proved with the same
        blinding in several commitments, so that their responses match.
        """
        self._check_open()
        blinding = _scalar_value(blinding)
        if int(blinding) % self.params['order'] == 0:
            raise BuilderMisuse("blinding factor must not be zero")
        self._bases.append(base)
        self._randoms.append(blinding)
        self._commitment *= base ** blinding

    @property
    def commitment(self):
        return self._commitment

    def __len__(self):
        return len(self._bases)

    def add_challenge_contribution(self, hasher: HashSink):
        """Absorb the compressed encoding of T into the transcript."""
        hasher.update(self._encode(self._commitment, self.params))

    def generate_proof(self, challenge, secrets: Sequence) -> List[ZR]:
        """
        Compute z_i = r_i + c · s_i for every committed base.

        Parameters
        ----------
        challenge : Challenge or ZR
            The Fiat-Shamir challenge
        secrets : Sequence
            One secret per committed base, in insertion order

        Raises
        ------
        BuilderMisuse
            On a second call, or when len(secrets) differs from the
            number of committed bases.
        """
        self._check_open()
        if len(secrets) != len(self._bases):
            raise BuilderMisuse(f"{len(secrets)} secrets for {len(self._bases)} committed bases")

        c = _scalar_value(challenge)
        responses = [r + c * _scalar_value(s) for r, s in zip(self._randoms, secrets)]

        self._consumed = True
        self._randoms = []
        return responses
