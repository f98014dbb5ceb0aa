"""
Shared fixtures for the bbs_pok test suite.

The seeds and claim names are the ones used for the signing and proof
vectors: seven key seeds (including the empty seed) and a six-field claim
set.
"""

import random

import pytest

from bbs_pok import KeyPair, Message, MessageGenerators, Signature, get_params

TEST_KEYS = [
    b"",
    b"abc",
    b"abcdefgh",
    b"abcdefghijklmnopqrstuvwxyz",
    b"qqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqq",
    b"12345678901234567890123456789012345678901234567890",
    b"1qaz2wsx3edc4rfv5tgb6yhn7ujm8ik,9ol.0p;/",
]

TEST_CLAIMS = [
    b"first_name",
    b"surname",
    b"date_of_birth",
    b"father",
    b"mother",
    b"credential_id",
]


class FixedRng:
    """Returns queued values from getrandbits, for steering sampled scalars."""

    def __init__(self, *values):
        self.values = list(values)

    def getrandbits(self, k):
        return self.values.pop(0)


@pytest.fixture(scope="session")
def params():
    """Group parameters of the configured curve."""
    return get_params()


@pytest.fixture(scope="session")
def messages(params):
    """The hashed claim set."""
    return [Message.hash(claim, params) for claim in TEST_CLAIMS]


@pytest.fixture(scope="session")
def keypair(params):
    """Key pair derived from the seed "abc", one slot per claim."""
    return KeyPair.from_seed(b"abc", len(TEST_CLAIMS), params)


@pytest.fixture(scope="session")
def generators(keypair):
    return MessageGenerators.from_public_key(keypair.public_key, len(TEST_CLAIMS))


@pytest.fixture(scope="session")
def signature(keypair, generators, messages):
    return Signature.new(keypair.secret_key, generators, messages)


@pytest.fixture
def mock_rng():
    """Seeded generator standing in for the mock RNG of the proof vectors."""
    return random.Random(1)
