"""
Canonical byte encodings of scalars and group elements.

charm-crypto serializes elements as ``b"<type>:<base64>"``; the scheme's wire
format only keeps the raw compressed point so that every encoding has a
fixed, curve-dependent length. The identity element has no compressed form
in charm and is written as an all-zero block of the same length.

Decoding is strict: a point is accepted only if re-encoding it gives back
the input bytes.
"""

import base64
import binascii

from charm.toolbox.pairinggroup import ZR, G1, G2

from .errors import InvalidEncoding


def _point_to_bytes(elem, type_id: int, size: int, params: dict) -> bytes:
    group = params['group']
    if elem == group.init(type_id, 1):
        return bytes(size)
    serialized = group.serialize(elem, compression=True)
    return base64.b64decode(serialized.split(b':', 1)[1])


def _point_from_bytes(data: bytes, type_id: int, size: int, params: dict):
    group = params['group']
    data = bytes(data)
    if len(data) != size:
        raise InvalidEncoding(f"expected {size} bytes for a point, got {len(data)}")
    if not any(data):
        return group.init(type_id, 1)
    try:
        elem = group.deserialize(b'%d:' % type_id + base64.b64encode(data), compression=True)
    except Exception as e:
        raise InvalidEncoding(f"point does not decode: {e}") from e
    if elem is None or not group.ismember(elem):
        raise InvalidEncoding("point is not in the prime-order subgroup")
    # Non-square x, unreduced coordinates and stray flag bits all decode to
    # some point; only the canonical encoding of that point is accepted.
    if _point_to_bytes(elem, type_id, size, params) != data:
        raise InvalidEncoding("non-canonical point encoding")
    return elem


def g1_to_bytes(elem, params: dict) -> bytes:
    return _point_to_bytes(elem, G1, params['g1_bytes'], params)


def g2_to_bytes(elem, params: dict) -> bytes:
    return _point_to_bytes(elem, G2, params['g2_bytes'], params)


def g1_from_bytes(data: bytes, params: dict):
    """Decode a compressed G1 point, validating length and subgroup membership."""
    return _point_from_bytes(data, G1, params['g1_bytes'], params)


def g2_from_bytes(data: bytes, params: dict):
    """Decode a compressed G2 point, validating length and subgroup membership."""
    return _point_from_bytes(data, G2, params['g2_bytes'], params)


def scalar_to_bytes(value, params: dict) -> bytes:
    return (int(value) % params['order']).to_bytes(params['scalar_bytes'], 'big')


def scalar_from_bytes(data: bytes, params: dict):
    """Decode a big-endian scalar; values >= q are not canonical and rejected."""
    data = bytes(data)
    if len(data) != params['scalar_bytes']:
        raise InvalidEncoding(f"expected {params['scalar_bytes']} bytes for a scalar, got {len(data)}")
    value = int.from_bytes(data, 'big')
    if value >= params['order']:
        raise InvalidEncoding("scalar is not reduced modulo the group order")
    return params['group'].init(ZR, value)


def from_hex(data: str) -> bytes:
    try:
        return binascii.unhexlify(data)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncoding(f"invalid hex: {e}") from e


def to_hex(data: bytes) -> str:
    return binascii.hexlify(data).decode('ascii')
