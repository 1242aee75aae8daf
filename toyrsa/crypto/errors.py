# toyrsa/crypto/errors.py


class ToyRSAError(Exception):
    pass


class KeyConfigurationError(ToyRSAError):
    """Key material cannot be used for the requested operation."""


class MalformedCiphertextError(ToyRSAError, ValueError):
    def __init__(self, token: str):
        super().__init__(f"Ciphertext token is not a decimal integer: {token!r}")
        self.token = token


class EmptyInputError(ToyRSAError, ValueError):
    pass


class DecryptedValueError(ToyRSAError, ValueError):
    def __init__(self, value: int):
        super().__init__(f"Decrypted value {value} does not map to a character")
        self.value = value
