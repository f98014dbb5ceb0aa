"""
Multi-Message Signatures with Selective-Disclosure Proofs
=========================================================

A pairing-based multi-message signature scheme and a non-interactive proof
of knowledge of a signature that reveals any chosen subset of the signed
messages, built on charm-crypto pairing groups.

Modules:
--------
- groups: Group initialization and fixed generators
- config: Environment configuration
- codec: Fixed-length encodings of scalars and points
- fs_oracles: Hash-to-scalar oracles and Fiat-Shamir challenge derivation
- scalars: Message, Nonce, Challenge and injected randomness
- keys: SecretKey, PublicKey, KeyPair
- generators: Per-slot message generators
- signature: Sign / verify
- builder: Generic Schnorr commitment builder
- proof_message: Disclosure policies
- pok_signature: Proof generation
- pok_signature_proof: Proof transcript and relation check
- verifier: Proof verification
- api: Boundary functions for adapters

Usage:
------
    from bbs_pok import KeyPair, MessageGenerators, Message, Nonce, api
    from bbs_pok import RevealedMessage, ProofSpecificBlinding

    keys = KeyPair.from_seed(b"seed", message_count=3)
    gens = MessageGenerators.from_public_key(keys.public_key, 3)
    msgs = [Message.hash(c) for c in (b"alice", b"1990-01-01", b"id-42")]
    sig = api.sign(keys.secret_key, gens, msgs)

    nonce = Nonce.random()
    policy = [RevealedMessage(msgs[0])] + [ProofSpecificBlinding(m) for m in msgs[1:]]
    proof = api.derive_proof(sig, keys.public_key, gens, policy, nonce)
    assert api.verify_proof({0: msgs[0]}, keys.public_key, proof, gens, nonce)
"""

__version__ = "0.1.0"

from . import api
from .builder import ProofCommittedBuilder
from .errors import BbsError, BuilderMisuse, DegenerateKey, InvalidEncoding, MismatchedLengths
from .generators import MessageGenerators
from .groups import get_params, setup
from .keys import KeyPair, PublicKey, SecretKey
from .pok_signature import PokSignature
from .pok_signature_proof import PokSignatureProof
from .proof_message import (ExternalBlinding, HiddenMessage, ProofMessage,
                            ProofSpecificBlinding, RevealedMessage)
from .scalars import Challenge, Message, Nonce
from .signature import Signature
from .verifier import Verifier

__all__ = [
    'api', 'setup', 'get_params',
    'BbsError', 'BuilderMisuse', 'DegenerateKey', 'InvalidEncoding', 'MismatchedLengths',
    'SecretKey', 'PublicKey', 'KeyPair', 'MessageGenerators', 'Signature',
    'Message', 'Nonce', 'Challenge',
    'ProofMessage', 'RevealedMessage', 'HiddenMessage', 'ProofSpecificBlinding', 'ExternalBlinding',
    'ProofCommittedBuilder', 'PokSignature', 'PokSignatureProof', 'Verifier',
]
