"""
Boundary functions for host-language adapters.

These four calls are the whole surface an adapter needs. Adapters do the
marshaling; no cryptographic logic lives outside this package.

Encoded derived proof:  challenge || PokSignatureProof.to_bytes()
"""

import logging
from typing import Sequence

from .fs_oracles import challenge_hasher
from .generators import MessageGenerators
from .keys import PublicKey, SecretKey
from .pok_signature import PokSignature
from .pok_signature_proof import PokSignatureProof, RevealedMessages
from .proof_message import ProofMessage
from .scalars import Challenge, Message, Nonce, default_rng
from .signature import Signature
from .verifier import Verifier

logger = logging.getLogger(__name__)


def sign(secret_key: SecretKey, generators: MessageGenerators,
         messages: Sequence[Message], rng=None) -> Signature:
    """Sign ``messages``; deterministic unless ``rng`` is given."""
    return Signature.new(secret_key, generators, messages, rng)


def verify(public_key: PublicKey, generators: MessageGenerators,
           messages: Sequence[Message], signature: Signature) -> bool:
    return signature.verify(public_key, generators, messages)


def derive_proof(signature: Signature, public_key: PublicKey, generators: MessageGenerators,
                 proof_messages: Sequence[ProofMessage], nonce: Nonce, rng=None) -> bytes:
    """
    Derive a selective-disclosure proof bound to ``nonce``.

    Returns
    -------
    bytes
        The challenge followed by the encoded proof.

    Raises
    ------
    MismatchedLengths
        If there are fewer generators than messages.
    """
    pok = PokSignature.init_with_rng(signature, public_key, proof_messages,
                                     rng or default_rng(), generators)
    hasher = challenge_hasher()
    pok.add_proof_contribution(hasher)
    hasher.update(nonce.to_bytes())
    challenge = Challenge.from_hasher(hasher, public_key.params)
    proof = pok.generate_proof(challenge)
    logger.debug("derived proof: %d of %d messages hidden", proof.hidden_message_count, len(proof_messages))
    return challenge.to_bytes() + proof.to_bytes()


def verify_proof(revealed_messages: RevealedMessages, public_key: PublicKey, proof: bytes,
                 generators: MessageGenerators, nonce: Nonce) -> bool:
    """
    Verify bytes produced by derive_proof().

    The number of signed messages is the number of revealed messages plus
    the number of hidden responses in ``proof``; ``generators`` may cover
    more slots than that. Returns False on a cryptographic mismatch,
    impossible revealed indices, or a basis too short for the proof.

    Raises
    ------
    InvalidEncoding
        If ``proof`` is malformed.
    """
    params = public_key.params
    proof = bytes(proof)
    split = params['scalar_bytes']
    challenge = Challenge.from_bytes(proof[:split], params)
    pok_proof = PokSignatureProof.from_bytes(proof[split:], params=params)
    return Verifier.verify_signature_pok(revealed_messages, public_key, pok_proof, generators, nonce, challenge)
