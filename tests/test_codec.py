"""
Test Suite for Canonical Encodings
===================================
"""

import pytest
from charm.toolbox.pairinggroup import ZR

from bbs_pok import InvalidEncoding
from bbs_pok.codec import (from_hex, g1_from_bytes, g1_to_bytes, g2_from_bytes, g2_to_bytes,
                           scalar_from_bytes, scalar_to_bytes, to_hex)
from bbs_pok.groups import identity_g1, identity_g2


@pytest.fixture
def g1_point(params):
    return params['g1'] ** params['group'].init(ZR, 1234567)


@pytest.fixture
def g2_point(params):
    return params['g2'] ** params['group'].init(ZR, 7654321)


class TestPoints:

    def test_g1_fixed_length(self, g1_point, params):
        encoded = g1_to_bytes(g1_point, params)
        assert len(encoded) == params['g1_bytes']
        assert g1_from_bytes(encoded, params) == g1_point

    def test_g2_fixed_length(self, g2_point, params):
        encoded = g2_to_bytes(g2_point, params)
        assert len(encoded) == params['g2_bytes']
        assert g2_from_bytes(encoded, params) == g2_point

    def test_identity_is_zero_block(self, params):
        assert g1_to_bytes(identity_g1(params), params) == bytes(params['g1_bytes'])
        assert g2_to_bytes(identity_g2(params), params) == bytes(params['g2_bytes'])
        assert g1_from_bytes(bytes(params['g1_bytes']), params) == identity_g1(params)

    def test_wrong_length_raises(self, g1_point, params):
        encoded = g1_to_bytes(g1_point, params)
        with pytest.raises(InvalidEncoding):
            g1_from_bytes(encoded[:-1], params)
        with pytest.raises(InvalidEncoding):
            g1_from_bytes(encoded + b"\x00", params)

    def test_garbage_raises(self, params):
        with pytest.raises(InvalidEncoding):
            g1_from_bytes(b"\xff" * params['g1_bytes'], params)


class TestScalars:

    def test_big_endian_fixed_width(self, params):
        encoded = scalar_to_bytes(params['group'].init(ZR, 258), params)
        assert len(encoded) == params['scalar_bytes']
        assert encoded.endswith(b"\x01\x02")
        assert int(scalar_from_bytes(encoded, params)) == 258

    def test_order_is_rejected(self, params):
        encoded = params['order'].to_bytes(params['scalar_bytes'], 'big')
        with pytest.raises(InvalidEncoding):
            scalar_from_bytes(encoded, params)

    def test_wrong_length_raises(self, params):
        with pytest.raises(InvalidEncoding):
            scalar_from_bytes(b"\x01", params)


class TestHex:

    def test_round_trip(self):
        assert from_hex(to_hex(b"\x00\xab")) == b"\x00\xab"
        assert to_hex(b"\x00\xab") == "00ab"

    @pytest.mark.parametrize("text", ["abc", "zz"])
    def test_invalid_hex_raises(self, text):
        with pytest.raises(InvalidEncoding):
            from_hex(text)
