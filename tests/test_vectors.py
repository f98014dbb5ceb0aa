"""
Known-Answer Tests on BN254
===========================

Pinned values for the key seed "abc" and the six-field claim set. Every
oracle output below is SHAKE-256 over the documented byte layout, reduced
modulo the BN254 group order. Group elements are checked as powers of the
fixed generators g1, g2, so any change to an oracle, a domain tag, a scalar
encoding or the order in which randomness is drawn fails here.

Proof vectors follow the sequential disclosure pattern: round j reveals
claims 0..j-1 and hides the rest, with the empty nonce.
"""

import hashlib

import pytest
from charm.toolbox.pairinggroup import ZR

from bbs_pok import (Challenge, KeyPair, Message, MessageGenerators, Nonce, PokSignature,
                     ProofSpecificBlinding, RevealedMessage, SecretKey, Signature, Verifier)
from bbs_pok.fs_oracles import CHALLENGE_BYTES, H_sig
from bbs_pok.signature import aux_exponent

from conftest import TEST_CLAIMS, FixedRng

BN254_ORDER = 16283262548997601220198008118239886026907663399064043451383740756301306087801

SEED = b"abc"

X = 9764577906774372655866035281493899739203247249451406716177455901576005022907
W = 4018335799569076816686842115504254561035717801204548307260651525317216717610
Y = [
    7870972358787260302865937380760692034398129356754846847850681356053885753341,
    1448737795807275100824224591321196855449899368204110639940784651625839239994,
    5711567061124465917488667148610464730141200528588951238129995200523995008404,
    10632280370722862760948428862143736699381316967693243887081600637783293900834,
    8830144626408387227961880079536103774615118602308723882950017176451515057083,
    7358320071455516509818826428101349625234416812665384382795694877171527860927,
]
MESSAGES = [
    8643409893356444155130136373704564859708588602920149404614266137645480011274,
    12627902462378612950306472323417410714493203715171745158385184956667465784153,
    14279238506217230702845425559296738283655967014292564780990274523737188051450,
    1173208688844631799455251426959806421355371005225160155239258590995908066532,
    3050697026917223398024426917166794931483314570088682206727629430378809819286,
    3710945390752489189726236011184562215931065496014521301041147849654645299103,
]
M_TICK = 10303134281466870638678205218061764700999163986095154619865360626804763666062
E = 4437131545878086997447964699696955738823752800386735241186591845698614350051
EMPTY_SEED_KEY = 2956838578793698737457456823423200060212635703428694704059700450340828072686

# Draw order of one proof session: r, t, blinding of t, blinding of m',
# then one blinding per hidden slot in ascending index
R, T, B_T, B_W = 101, 202, 303, 404
B_HIDDEN = [505, 606, 707, 808, 909, 1010]


@pytest.fixture(scope="module", autouse=True)
def bn254(params):
    if params['order'] != BN254_ORDER:
        pytest.skip(f"vectors are for BN254, running on {params['group_name']}")


@pytest.fixture(scope="module")
def abc_keys(params):
    return KeyPair.from_seed(SEED, len(TEST_CLAIMS), params)


@pytest.fixture(scope="module")
def abc_generators(abc_keys):
    return MessageGenerators.from_public_key(abc_keys.public_key, len(TEST_CLAIMS))


@pytest.fixture(scope="module")
def abc_signature(abc_keys, abc_generators, messages):
    return Signature.new(abc_keys.secret_key, abc_generators, messages)


def _g1(params, exponent):
    return params['g1'] ** params['group'].init(ZR, exponent % BN254_ORDER)


def _g2(params, exponent):
    return params['g2'] ** params['group'].init(ZR, exponent % BN254_ORDER)


def _signature_exponent():
    return (X + W * M_TICK + sum(y * m for y, m in zip(Y, MESSAGES))) % BN254_ORDER


class TestOracleVectors:

    def test_secret_key(self, abc_keys):
        assert int(abc_keys.secret_key.x) == X

    def test_empty_seed_key(self, params):
        assert int(SecretKey.from_seed(b"", params).x) == EMPTY_SEED_KEY

    def test_key_exponents(self, abc_keys):
        sk = abc_keys.secret_key
        assert int(sk.aux_exponent()) == W
        assert [int(sk.message_exponent(i)) for i in range(len(Y))] == Y

    def test_claim_messages(self, messages):
        assert [int(m) for m in messages] == MESSAGES

    def test_aux_exponent(self, messages, params):
        assert int(aux_exponent(messages, params)) == M_TICK

    def test_signing_exponent(self, abc_keys, messages, params):
        e = H_sig(abc_keys.secret_key.to_bytes(), (m.to_bytes() for m in messages), params)
        assert int(e) == E


class TestKeyVectors:

    def test_public_key(self, abc_keys, params):
        pk = abc_keys.public_key
        assert pk.x == _g2(params, X)
        assert pk.w == _g2(params, W)
        assert pk.w_blind == _g1(params, W)
        assert list(pk.y) == [_g2(params, y) for y in Y]
        assert list(pk.y_blinds) == [_g1(params, y) for y in Y]


class TestSignatureVector:

    def test_abc_signature(self, abc_signature, params):
        u = pow(X + E, -1, BN254_ORDER)
        assert abc_signature.sigma_1 == _g1(params, u)
        assert abc_signature.sigma_2 == _g1(params, u * _signature_exponent())

    def test_abc_signature_bytes_are_stable(self, abc_signature, params):
        u = pow(X + E, -1, BN254_ORDER)
        expected = Signature(_g1(params, u), _g1(params, u * _signature_exponent()), params)
        assert abc_signature.to_bytes() == expected.to_bytes()


class TestSequentialDisclosureVectors:

    @pytest.mark.parametrize("revealed_count", range(len(TEST_CLAIMS) + 1))
    def test_proof(self, revealed_count, abc_keys, abc_generators, abc_signature, messages, params):
        hidden = list(range(revealed_count, len(messages)))
        policy = [RevealedMessage(m) if i < revealed_count else ProofSpecificBlinding(m)
                  for i, m in enumerate(messages)]
        rng = FixedRng(R, T, B_T, B_W, *B_HIDDEN[:len(hidden)])

        pok = PokSignature.init_with_rng(abc_signature, abc_keys.public_key, policy, rng)
        hasher = hashlib.shake_256()
        pok.add_proof_contribution(hasher)
        nonce = Nonce.default(params)
        hasher.update(nonce.to_bytes())
        challenge = Challenge.from_okm(hasher.digest(CHALLENGE_BYTES), params)
        proof = pok.generate_proof(challenge)
        assert rng.values == []

        u = pow(X + E, -1, BN254_ORDER)
        assert proof.sigma_1 == _g1(params, u * R)
        assert proof.sigma_2 == _g1(params, u * (_signature_exponent() + T) * R)
        assert proof.commitment == _g2(params, T + W * M_TICK + sum(Y[i] * MESSAGES[i] for i in hidden))

        c = int(challenge)
        expected = [(B_T + c * T) % BN254_ORDER, (B_W + c * M_TICK) % BN254_ORDER]
        expected += [(b + c * MESSAGES[i]) % BN254_ORDER for b, i in zip(B_HIDDEN, hidden)]
        assert [int(z) for z in proof.proof] == expected

        revealed = {i: Message(MESSAGES[i], params) for i in range(revealed_count)}
        assert Verifier.verify_signature_pok(revealed, abc_keys.public_key, proof, abc_generators,
                                             nonce, challenge)
