# toyrsa/crypto/cipher.py
# Character-at-a-time RSA. Deliberately weak: each character is its own block.
from .errors import DecryptedValueError, MalformedCiphertextError
from .keys import KeyMaterial
from .numtheory import mod_pow

_LETTER_OFFSET = 96  # ord('a') - 1
_OTHER_OFFSET = 26


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def char_to_code(ch: str) -> int:
    if ch == " ":
        return 0
    if _is_ascii_letter(ch):
        return ord(ch.lower()) - _LETTER_OFFSET
    return ord(ch) + _OTHER_OFFSET


def code_to_char(m: int) -> str:
    # Letters always come back lowercase.
    m = int(m)
    if m == 0:
        return " "
    if 1 <= m <= 26:
        return chr(_LETTER_OFFSET + m)
    try:
        return chr(m - _OTHER_OFFSET)
    except (ValueError, OverflowError):
        raise DecryptedValueError(m) from None


def encrypt_message(plaintext: str, keys: KeyMaterial) -> str:
    n, e = keys.public_key
    return " ".join(str(mod_pow(char_to_code(ch), e, n)) for ch in plaintext)


def parse_token(token: str) -> int:
    try:
        return int(token, 10)
    except ValueError:
        raise MalformedCiphertextError(token) from None


def decrypt_message(ciphertext: str, keys: KeyMaterial) -> str:
    n, d = keys.private_key
    out = []
    for token in ciphertext.split():
        c = parse_token(token)
        out.append(code_to_char(mod_pow(c, d, n)))
    return "".join(out)
