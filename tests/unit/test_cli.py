"""
Tests for toyrsa.cli
"""

import pytest

from toyrsa.cli import build_parser, main, require_ciphertext, require_text
from toyrsa.crypto.errors import EmptyInputError


class TestRequireText:
    def test_passes_text_through(self) -> None:
        assert require_text("hola", "x") == "hola"

    def test_rejects_empty(self) -> None:
        with pytest.raises(EmptyInputError):
            require_text("", "Please write a message to encrypt")

    @pytest.mark.parametrize("text", [" ", "   ", "\t\n"])
    def test_whitespace_plaintext_allowed(self, text) -> None:
        assert require_text(text, "x") == text


class TestRequireCiphertext:
    def test_passes_tokens_through(self) -> None:
        assert require_ciphertext("2041 1972", "x") == "2041 1972"

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_rejects_blank(self, text) -> None:
        with pytest.raises(EmptyInputError):
            require_ciphertext(text, "Encrypt a message before decrypting")


class TestKeysCommand:
    def test_report(self, capsys) -> None:
        assert main(["keys"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Receiver public key (n,e): 3233 17",
            "Receiver private key (n,d): 3233 2753",
            "phi(n): 3120",
            "Check (e*d) mod phi(n): 1",
        ]

    def test_env_configuration(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("TOYRSA_P", "11")
        monkeypatch.setenv("TOYRSA_Q", "17")
        monkeypatch.setenv("TOYRSA_E", "7")
        assert main(["keys"]) == 0
        out = capsys.readouterr().out
        assert "Receiver private key (n,d): 187 23" in out

    def test_flags_override_env(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("TOYRSA_E", "7")
        assert main(["--e", "17", "keys"]) == 0
        assert "3233 17" in capsys.readouterr().out

    def test_bad_env_value_falls_back(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("TOYRSA_E", "seventeen")
        assert main(["keys"]) == 0
        captured = capsys.readouterr()
        assert "3233 17" in captured.out
        assert "TOYRSA_E" in captured.err

    def test_rejects_tiny_primes(self, capsys) -> None:
        assert main(["--p", "1", "keys"]) == 2
        assert "Error" in capsys.readouterr().err

    def test_rejects_phi_one(self, capsys) -> None:
        assert main(["--p", "2", "--q", "2", "keys"]) == 2
        assert "phi=1" in capsys.readouterr().err

    @pytest.mark.parametrize("e", ["-1", "0"])
    def test_rejects_non_positive_exponent(self, e, capsys) -> None:
        assert main(["--e", e, "encrypt", "hi"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Public exponent must be positive" in captured.err


class TestEncryptDecryptCommands:
    def test_encrypt(self, capsys) -> None:
        assert main(["encrypt", "hi"]) == 0
        captured = capsys.readouterr()
        assert captured.out.strip() == "2041 1972"
        assert "public key" in captured.err

    def test_encrypt_empty(self, capsys) -> None:
        assert main(["encrypt", ""]) == 2
        assert "Please write a message to encrypt" in capsys.readouterr().err

    def test_encrypt_spaces_only(self, capsys) -> None:
        assert main(["encrypt", "   "]) == 0
        assert capsys.readouterr().out.strip() == "0 0 0"

    def test_decrypt_blank_argument(self, capsys) -> None:
        assert main(["decrypt", "   "]) == 2
        assert "Encrypt a message before decrypting" in capsys.readouterr().err

    def test_decrypt_value_outside_character_range(self, capsys) -> None:
        argv = ["--p", "1000003", "--q", "1000033", "--e", "65537", "decrypt", "999999999999"]
        assert main(argv) == 2
        assert "does not map to a character" in capsys.readouterr().err

    def test_decrypt(self, capsys) -> None:
        assert main(["decrypt", "2041", "1972"]) == 0
        assert capsys.readouterr().out.strip() == "hi"

    def test_decrypt_single_quoted_argument(self, capsys) -> None:
        assert main(["decrypt", "2041 1972"]) == 0
        assert capsys.readouterr().out.strip() == "hi"

    def test_decrypt_nothing(self, capsys) -> None:
        assert main(["decrypt"]) == 2
        assert "Encrypt a message before decrypting" in capsys.readouterr().err

    def test_decrypt_malformed(self, capsys) -> None:
        assert main(["decrypt", "2041", "zz"]) == 2
        assert "'zz'" in capsys.readouterr().err

    def test_decrypt_without_inverse(self, capsys) -> None:
        assert main(["--e", "15", "decrypt", "2041"]) == 2
        assert "No private exponent" in capsys.readouterr().err


class TestAttackCommand:
    def test_attack(self, capsys) -> None:
        assert main(["attack"]) == 0
        captured = capsys.readouterr()
        lines = captured.out.splitlines()
        assert lines[0].startswith("121 84 66 157")
        assert lines[1] == "Invalid digital signature. Message rejected"
        assert "Impersonation attempt detected" in captured.err

    def test_show_values(self, capsys) -> None:
        assert main(["attack", "--show-values"]) == 0
        assert "recovered: 3049 2046 2215" in capsys.readouterr().out


class TestDemoCommand:
    def test_walkthrough(self, capsys) -> None:
        assert main(["demo", "Hola Mundo"]) == 0
        out = capsys.readouterr().out
        assert "message: Hola Mundo" in out
        assert "decrypted: hola mundo" in out
        assert "forged verified: False" in out

    def test_parser_requires_command(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
