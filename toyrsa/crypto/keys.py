# toyrsa/crypto/keys.py
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import KeyConfigurationError
from .numtheory import mod_inverse

log = logging.getLogger(__name__)

# Receiver demo parameters (small primes).
DEMO_P = 61
DEMO_Q = 53
DEMO_E = 17


@dataclass(frozen=True)
class KeyMaterial:
    n: int
    e: int
    d: Optional[int]
    # None marks untrusted material whose exponents were never checked.
    phi: Optional[int] = None

    @property
    def public_key(self) -> Tuple[int, int]:
        return self.n, self.e

    @property
    def private_key(self) -> Tuple[int, int]:
        if self.d is None:
            raise KeyConfigurationError(
                f"No private exponent: e={self.e} has no inverse modulo phi={self.phi}"
            )
        return self.n, self.d

    @property
    def has_private(self) -> bool:
        return self.d is not None


def derive_keypair(p: int, q: int, e: int) -> KeyMaterial:
    """Build key material from two primes and a public exponent.

    d is left as None when e is not invertible modulo (p-1)*(q-1); callers
    find out when they ask for ``private_key``. A non-positive e, or primes
    that leave phi < 2, are rejected outright.
    """
    p, q, e = int(p), int(q), int(e)
    if e < 1:
        raise KeyConfigurationError(f"Public exponent must be positive, got e={e}")
    n = p * q
    phi = (p - 1) * (q - 1)
    if p < 2 or q < 2 or phi < 2:
        raise KeyConfigurationError(f"p={p}, q={q} give phi={phi}; need p, q >= 2 and phi >= 2")
    d = mod_inverse(e, phi)
    if d is None:
        log.debug("e=%d has no inverse modulo phi=%d", e, phi)
    elif (e * d) % phi != 1:
        raise KeyConfigurationError(f"(e*d) mod phi != 1 for e={e}, d={d}, phi={phi}")
    return KeyMaterial(n=n, e=e, d=d, phi=phi)


def demo_keypair() -> KeyMaterial:
    return derive_keypair(DEMO_P, DEMO_Q, DEMO_E)


def untrusted_keypair(n: int, e: int, d: Optional[int] = None) -> KeyMaterial:
    return KeyMaterial(n=int(n), e=int(e), d=None if d is None else int(d))


def describe_keys(keys: KeyMaterial) -> List[str]:
    n, e = keys.public_key
    d = "null" if keys.d is None else str(keys.d)
    lines = [
        f"Receiver public key (n,e): {n} {e}",
        f"Receiver private key (n,d): {n} {d}",
    ]
    if keys.phi is not None:
        lines.append(f"phi(n): {keys.phi}")
        if keys.d is not None:
            lines.append(f"Check (e*d) mod phi(n): {(keys.e * keys.d) % keys.phi}")
    return lines
