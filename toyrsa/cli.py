# toyrsa/cli.py
# Command-line front end for the toy RSA demo.
# Usage examples (run from project root):
#   python -m toyrsa.cli keys
#   python -m toyrsa.cli encrypt "hola mundo"
#   python -m toyrsa.cli decrypt 2041 1972
#   python -m toyrsa.cli attack --show-values
#   python -m toyrsa.cli --p 61 --q 53 --e 17 demo "hola mundo"

import argparse
import logging
import os
import sys

from toyrsa.crypto.attack import IMPERSONATION_WARNING, run_attack_demo
from toyrsa.crypto.cipher import decrypt_message, encrypt_message
from toyrsa.crypto.errors import EmptyInputError, ToyRSAError
from toyrsa.crypto.keys import DEMO_E, DEMO_P, DEMO_Q, derive_keypair, describe_keys


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"Warning: ignoring non-integer {name}={raw!r}", file=sys.stderr)
        return default


def require_text(text: str, what: str) -> str:
    # Plaintext made only of spaces is still a message.
    if not text:
        raise EmptyInputError(what)
    return text


def require_ciphertext(text: str, what: str) -> str:
    if not text or not text.strip():
        raise EmptyInputError(what)
    return text


def setup_logging(verbose: bool = False):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def cmd_keys(keys, args) -> int:
    for line in describe_keys(keys):
        print(line)
    return 0


def cmd_encrypt(keys, args) -> int:
    message = require_text(args.message, "Please write a message to encrypt")
    print(encrypt_message(message, keys))
    print("Message encrypted with the receiver's public key", file=sys.stderr)
    return 0


def cmd_decrypt(keys, args) -> int:
    ciphertext = require_ciphertext(" ".join(args.tokens), "Encrypt a message before decrypting")
    print(decrypt_message(ciphertext, keys))
    print("Message decrypted with the receiver's private key", file=sys.stderr)
    return 0


def cmd_attack(keys, args) -> int:
    outcome = run_attack_demo(keys)
    print(outcome.ciphertext)
    print(outcome.message)
    if args.show_values:
        print("recovered:", " ".join(map(str, outcome.recovered)))
    if outcome.impersonation_detected:
        print(f"Warning: {IMPERSONATION_WARNING}", file=sys.stderr)
    return 0


def cmd_demo(keys, args) -> int:
    message = require_text(args.message, "Please write a message to encrypt")
    for line in describe_keys(keys):
        print(line)
    ciphertext = encrypt_message(message, keys)
    print(f"message: {message}")
    print(f"cipher: {ciphertext}")
    print(f"decrypted: {decrypt_message(ciphertext, keys)}")
    outcome = run_attack_demo(keys)
    print(f"forged cipher: {outcome.ciphertext}")
    print(f"forged verified: {outcome.verified}")
    print(outcome.message)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Toy RSA demo: per-character encryption and a forged-signature attack")
    p.add_argument("--p", type=int, default=_env_int("TOYRSA_P", DEMO_P), help="First prime (env TOYRSA_P)")
    p.add_argument("--q", type=int, default=_env_int("TOYRSA_Q", DEMO_Q), help="Second prime (env TOYRSA_Q)")
    p.add_argument("--e", type=int, default=_env_int("TOYRSA_E", DEMO_E), help="Public exponent (env TOYRSA_E)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("keys", help="Show the receiver key pair")
    s.set_defaults(func=cmd_keys)

    s = sub.add_parser("encrypt", help="Encrypt a message with the receiver public key")
    s.add_argument("message", type=str)
    s.set_defaults(func=cmd_encrypt)

    s = sub.add_parser("decrypt", help="Decrypt space separated cipher tokens")
    s.add_argument("tokens", nargs="*", default=[])
    s.set_defaults(func=cmd_decrypt)

    s = sub.add_parser("attack", help="Run the forged-signature demonstration")
    s.add_argument("--show-values", action="store_true", help="Print the values recovered by the receiver")
    s.set_defaults(func=cmd_attack)

    s = sub.add_parser("demo", help="Keys, encrypt, decrypt and attack in one run")
    s.add_argument("message", type=str)
    s.set_defaults(func=cmd_demo)
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        keys = derive_keypair(args.p, args.q, args.e)
        return args.func(keys, args)
    except ToyRSAError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
