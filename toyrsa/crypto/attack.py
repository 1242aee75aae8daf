# toyrsa/crypto/attack.py
# Staged forgery: an attacker encrypts under their own key and the receiver
# tries to read it with the legitimate private key.
import logging
from dataclasses import dataclass
from typing import List

from .cipher import parse_token
from .keys import KeyMaterial, untrusted_keypair
from .numtheory import mod_pow

log = logging.getLogger(__name__)

FORGED_MESSAGE = "Mensaje falsificado por el hacker"
FORGED_N = 187
FORGED_E = 7
FORGED_D = 23

PRINTABLE_MIN = 32
PRINTABLE_MAX = 255

REJECTION_MESSAGE = "Invalid digital signature. Message rejected"
IMPERSONATION_WARNING = (
    "Impersonation attempt detected: the signature does not match the original sender."
)


@dataclass(frozen=True)
class AttackOutcome:
    forged_tokens: List[str]
    recovered: List[int]
    verified: bool
    message: str = REJECTION_MESSAGE

    @property
    def impersonation_detected(self) -> bool:
        return not self.verified

    @property
    def ciphertext(self) -> str:
        return " ".join(self.forged_tokens)


def forged_keypair() -> KeyMaterial:
    return untrusted_keypair(FORGED_N, FORGED_E, FORGED_D)


def forge_ciphertext(message: str, forged: KeyMaterial) -> List[str]:
    # Raw code points, not the letter mapping used by the legitimate cipher.
    n, e = forged.public_key
    return [str(mod_pow(ord(ch), e, n)) for ch in message]


def verify_with_receiver(tokens: List[str], receiver: KeyMaterial):
    """Decrypt each token with the receiver's private key.

    Returns (verified, recovered values). Any value outside the printable
    window marks the message as not verified.
    """
    n, d = receiver.private_key
    recovered = [mod_pow(parse_token(t), d, n) for t in tokens]
    verified = all(PRINTABLE_MIN <= m <= PRINTABLE_MAX for m in recovered)
    return verified, recovered


def run_attack_demo(receiver: KeyMaterial, message: str = FORGED_MESSAGE) -> AttackOutcome:
    tokens = forge_ciphertext(message, forged_keypair())
    verified, recovered = verify_with_receiver(tokens, receiver)
    out_of_window = sum(1 for m in recovered if not PRINTABLE_MIN <= m <= PRINTABLE_MAX)
    log.debug("forged tokens=%d out of window=%d", len(tokens), out_of_window)
    return AttackOutcome(forged_tokens=tokens, recovered=recovered, verified=verified)
