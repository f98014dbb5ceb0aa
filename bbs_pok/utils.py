"""
Utility Functions
=================

Group helpers shared by signing, proving and verification.

Key Operations:
- Multi-exponentiation: Compute ∏ g_i^{e_i}
- Pairing equality: Check e(a_1, b_1) = e(a_2, b_2)

According to charm-crypto documentation:
- Group operations use * for multiplication, ** for exponentiation
- Pairing is computed as pair(g1_elem, g2_elem)
"""

from typing import List

from charm.toolbox.pairinggroup import ZR, G1, G2, pair


def _multiexp(bases: List, exponents: List[ZR], identity):
    if len(bases) != len(exponents):
        raise ValueError(f"bases and exponents must have same length: {len(bases)} != {len(exponents)}")

    result = identity
    for base, exp in zip(bases, exponents):
        result *= base ** exp
    return result


def multiexp_g1(bases: List[G1], exponents: List[ZR], params: dict) -> G1:
    """
    Compute multi-exponentiation in G1: ∏ bases[i]^{exponents[i]}.

    Notes
    -----
    - If bases is empty, returns the identity element of G1
    - bases and exponents must have the same length
    """
    return _multiexp(bases, exponents, params['group'].init(G1, 1))


def multiexp_g2(bases: List[G2], exponents: List[ZR], params: dict) -> G2:
    """
    Compute multi-exponentiation in G2: ∏ bases[i]^{exponents[i]}.

    Notes
    -----
    - If bases is empty, returns the identity element of G2
    - bases and exponents must have the same length
    """
    return _multiexp(bases, exponents, params['group'].init(G2, 1))


def pairing_eq(a1: G1, b1: G2, a2: G1, b2: G2) -> bool:
    """Test e(a1, b1) == e(a2, b2)."""
    return pair(a1, b1) == pair(a2, b2)
