"""
Proof of Knowledge of a Signature (prover side)
================================================

Given a signature (sigma_1, sigma_2) on (m_1, ..., m_n), the holder proves
knowledge of the hidden messages while revealing the others.

Rerandomization with fresh r, t:

    sigma_1' = sigma_1^r
    sigma_2' = (sigma_2 · sigma_1^t)^r

The holder then proves knowledge of (t, m', m_i for hidden i) in

    J = g2^t · W^{m'} · ∏_{i hidden} Y_i^{m_i}

so that e(sigma_1', X · J · ∏_{i revealed} Y_i^{m_i}) = e(sigma_2', g2).

Session lifecycle:
    INIT → COMMITTED → CHALLENGE_BOUND → PROOF_GENERATED
init_with_rng() leaves the session COMMITTED, add_proof_contribution()
binds it to a transcript, generate_proof() ends it.
"""

import logging
from typing import Sequence

from charm.toolbox.pairinggroup import G2

from . import codec
from .builder import ProofCommittedBuilder
from .errors import BuilderMisuse
from .fs_oracles import HashSink
from .generators import MessageGenerators
from .keys import PublicKey
from .pok_signature_proof import PokSignatureProof
from .proof_message import (ExternalBlinding, ProofMessage, ProofSpecificBlinding,
                            RevealedMessage)
from .scalars import Challenge, default_rng, random_scalar
from .signature import Signature, aux_exponent
from .utils import multiexp_g2

logger = logging.getLogger(__name__)

INIT = 'init'
COMMITTED = 'committed'
CHALLENGE_BOUND = 'challenge_bound'
PROOF_GENERATED = 'proof_generated'


class PokSignature:
    """
    Prover session state for one proof.

    Not shareable between threads; owned by the single proof being built.
    """

    def __init__(self, sigma_1, sigma_2, commitment, builder: ProofCommittedBuilder,
                 secrets: list, params: dict):
        self.sigma_1 = sigma_1
        self.sigma_2 = sigma_2
        self.commitment = commitment
        self.params = params
        self._builder = builder
        self._secrets = secrets
        self.state = INIT

    @classmethod
    def init(cls, signature: Signature, public_key: PublicKey,
             messages: Sequence[ProofMessage]) -> 'PokSignature':
        """Start a proof session using system randomness."""
        return cls.init_with_rng(signature, public_key, messages, default_rng())

    @classmethod
    def init_with_rng(cls, signature: Signature, public_key: PublicKey,
                      messages: Sequence[ProofMessage], rng,
                      generators: MessageGenerators = None) -> 'PokSignature':
        """
        Rerandomize ``signature`` and commit to every hidden value.

        Parameters
        ----------
        signature : Signature
            The holder's signature over all messages
        public_key : PublicKey
            The signer's public key
        messages : Sequence[ProofMessage]
            Every signed message, in slot order, tagged with its policy
        rng : object
            Source of r, t and the proof-specific blindings
        generators : MessageGenerators, optional
            The basis to prove against; derived from ``public_key`` when
            omitted

        Raises
        ------
        MismatchedLengths
            If there are fewer generators than messages.
        TypeError
            If an entry of ``messages`` is not a ProofMessage variant.
        """
        params = public_key.params
        if generators is None:
            generators = MessageGenerators.from_public_key(public_key, len(messages))
        else:
            generators.check_covers(len(messages))
        for pm in messages:
            if not isinstance(pm, ProofMessage):
                raise TypeError(f"expected ProofMessage, got {type(pm).__name__}")

        r = random_scalar(rng, params)
        t = random_scalar(rng, params)

        sigma_1 = signature.sigma_1 ** r
        sigma_2 = (signature.sigma_2 * (signature.sigma_1 ** t)) ** r

        g2 = params['g2']
        builder = ProofCommittedBuilder(params, G2)
        points = []
        secrets = []

        builder.commit_random(g2, rng)
        points.append(g2)
        secrets.append(t)

        builder.commit_random(public_key.w, rng)
        points.append(public_key.w)
        secrets.append(aux_exponent([pm.message for pm in messages], params))

        for i, pm in enumerate(messages):
            if isinstance(pm, RevealedMessage):
                continue
            elif isinstance(pm, ProofSpecificBlinding):
                builder.commit_random(generators.y[i], rng)
            elif isinstance(pm, ExternalBlinding):
                builder.commit(generators.y[i], pm.blinding)
            else:
                raise TypeError(f"unhandled disclosure policy {type(pm).__name__}")
            points.append(generators.y[i])
            secrets.append(pm.message.value)

        commitment = multiexp_g2(points, secrets, params)
        logger.debug("proof session committed: %d hidden of %d messages", len(points) - 2, len(messages))
        session = cls(sigma_1, sigma_2, commitment, builder, secrets, params)
        session.state = COMMITTED
        return session

    def add_proof_contribution(self, hasher: HashSink):
        """
        Absorb ``sigma_1' || sigma_2' || J || T`` into a transcript.

        The caller appends any further context (the presentation nonce)
        before reading the challenge. A session binds to exactly one
        transcript.

        Raises
        ------
        BuilderMisuse
            Unless the session is COMMITTED.
        """
        if self.state != COMMITTED:
            raise BuilderMisuse(f"cannot bind a transcript in state '{self.state}'")
        params = self.params
        hasher.update(codec.g1_to_bytes(self.sigma_1, params))
        hasher.update(codec.g1_to_bytes(self.sigma_2, params))
        hasher.update(codec.g2_to_bytes(self.commitment, params))
        self._builder.add_challenge_contribution(hasher)
        self.state = CHALLENGE_BOUND

    def generate_proof(self, challenge: Challenge) -> PokSignatureProof:
        """
        Answer the challenge and close the session.

        Raises
        ------
        BuilderMisuse
            If the session was never bound to a transcript, or already
            produced its proof.
        """
        if self.state != CHALLENGE_BOUND:
            raise BuilderMisuse(f"cannot generate a proof in state '{self.state}'")
        responses = self._builder.generate_proof(challenge, self._secrets)
        self._secrets = []
        self.state = PROOF_GENERATED
        return PokSignatureProof(self.sigma_1, self.sigma_2, self.commitment, responses, self.params)
