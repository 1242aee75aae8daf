# toyrsa/crypto/numtheory.py
# Exact integer helpers: Euclid, extended Euclid, modular inverse, modular power.
from typing import NamedTuple, Optional, Tuple


class EgcdResult(NamedTuple):
    g: int
    x: int
    y: int


def _trunc_divmod(a: int, b: int) -> Tuple[int, int]:
    # Quotient rounds toward zero, remainder takes the sign of the dividend.
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm. The sign of the result is not normalized."""
    a, b = int(a), int(b)
    while b != 0:
        a, b = b, _trunc_divmod(a, b)[1]
    return a


def extended_gcd(a: int, b: int) -> EgcdResult:
    a, b = int(a), int(b)
    x0, y0 = 1, 0
    x1, y1 = 0, 1
    while b != 0:
        q, r = _trunc_divmod(a, b)
        a, b = b, r
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return EgcdResult(a, x0, y0)


def mod_inverse(e: int, phi: int) -> Optional[int]:
    """Inverse of e modulo phi in [0, phi), or None when gcd(e, phi) != 1."""
    e, phi = int(e), int(phi)
    if phi < 1:
        raise ValueError("modulus must be positive")
    res = extended_gcd(e, phi)
    if res.g != 1:
        return None
    inv = _trunc_divmod(res.x, phi)[1]
    if inv < 0:
        inv += phi
    return inv


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Right-to-left square-and-multiply; base**exp % mod without the big power."""
    base, exp, mod = int(base), int(exp), int(mod)
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    if mod < 1:
        raise ValueError("modulus must be positive")
    result = 1 % mod
    base %= mod
    while exp > 0:
        if exp & 1:
            result = (result * base) % mod
        base = (base * base) % mod
        exp >>= 1
    return result
