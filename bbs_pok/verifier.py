"""
Verification of signature proofs of knowledge.

A proof is accepted only if both hold:
1. The challenge recomputed from sigma_1', sigma_2', J, the recovered
   Schnorr commitment T and the nonce equals the supplied challenge.
2. The signature relation holds over the rerandomized pair.
"""

import logging

from .errors import InvalidEncoding, MismatchedLengths
from .fs_oracles import challenge_hasher
from .generators import MessageGenerators
from .keys import PublicKey
from .pok_signature_proof import PokSignatureProof, RevealedMessages
from .scalars import Challenge, Nonce

logger = logging.getLogger(__name__)


class Verifier:
    """Stateless verifier; all methods are static."""

    @staticmethod
    def verify_signature_pok(revealed_messages: RevealedMessages, public_key: PublicKey,
                             proof: PokSignatureProof, generators: MessageGenerators,
                             nonce: Nonce, challenge: Challenge) -> bool:
        """
        Verify a proof of knowledge of a signature.

        Parameters
        ----------
        revealed_messages : mapping or sequence of (index, Message)
            The disclosed messages with their slot indices
        public_key : PublicKey
            The signer's public key
        proof : PokSignatureProof
            The holder's proof
        generators : MessageGenerators
            A basis covering at least the signed messages
        nonce : Nonce
            The presentation nonce the prover absorbed
        challenge : Challenge
            The challenge the prover answered

        Returns
        -------
        bool
            True if the proof is valid for this exact transcript.
        """
        params = proof.params
        hasher = challenge_hasher()
        try:
            proof.add_challenge_contribution(public_key, generators, revealed_messages, challenge, hasher)
        except (InvalidEncoding, MismatchedLengths) as e:
            logger.debug("proof rejected: %s", e)
            return False
        hasher.update(nonce.to_bytes())

        recomputed = Challenge.from_hasher(hasher, params)
        if recomputed != challenge:
            logger.debug("proof rejected: challenge mismatch")
            return False
        return proof.verify(revealed_messages, public_key, generators)
