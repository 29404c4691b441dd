"""
Tests for the periodic polyalphabetic ciphers: Vigenère, Beaufort,
Gronsfeld and Porta.
"""
import pytest

from scytale.ciphers.polyalphabetic import Beaufort, Gronsfeld, Porta, Vigenere
from scytale.ciphers.shift import Rot13
from scytale.core.errors import EmptyInputError, KeyValidationError


class TestVigenere:
    """Test the Vigenère cipher."""

    def test_known_vector(self):
        assert Vigenere("HELLO", "KEY").encode() == "RIJVS"

    def test_decode(self):
        assert Vigenere("RIJVS", "KEY").decode() == "HELLO"

    def test_key_repeats(self):
        assert Vigenere("ABCDEFGH", "AB").encode() == "ACCEEGGI"

    def test_classic_vector(self):
        cipher = Vigenere("ATTACKATDAWN", "LEMON")
        assert cipher.encode() == "LXFOPVEFRNHR"

    def test_non_letters_do_not_consume_key(self):
        assert Vigenere("HE LLO!", "KEY").encode() == "RI JVS!"

    def test_case_preserved(self):
        assert Vigenere("Hello", "key").encode() == "Rijvs"

    def test_round_trip(self):
        cipher = Vigenere(key="Lemon")
        text = "Meet me by the old oak tree at 9."
        assert cipher.decode(cipher.encode(text)) == text

    def test_empty_key(self):
        with pytest.raises(EmptyInputError) as exc:
            Vigenere("HELLO", "").encode()
        assert exc.value.field == "key"

    def test_key_with_digits(self):
        with pytest.raises(KeyValidationError):
            Vigenere("HELLO", "K3Y").encode()


class TestBeaufort:
    """Test the Beaufort cipher."""

    def test_known_vector(self):
        assert Beaufort("HELLO", "KEY").encode() == "DANZQ"

    def test_self_reciprocal(self):
        assert Beaufort("DANZQ", "KEY").encode() == "HELLO"
        assert Beaufort("DANZQ", "KEY").decode() == "HELLO"

    def test_spaces_kept(self):
        assert Beaufort("HE LLO", "KEY").encode() == "DA NZQ"


class TestGronsfeld:
    """Test the Gronsfeld cipher."""

    def test_known_vector(self):
        assert Gronsfeld("HELLO", "31415").encode() == "KFPMT"

    def test_matches_vigenere_with_letter_key(self):
        text = "Attack at dawn"
        assert Gronsfeld(text, "31415").encode() == Vigenere(text, "DBEBF").encode()

    def test_integer_key(self):
        cipher = Gronsfeld("HELLO", 31415)
        assert cipher.decode(cipher.encode()) == "HELLO"

    @pytest.mark.parametrize("key", ["KEY", "31a", "3-1"])
    def test_key_must_be_digits(self, key):
        with pytest.raises(KeyValidationError) as exc:
            Gronsfeld("HELLO", key).encode()
        assert exc.value.field == "key"

    def test_empty_key(self):
        with pytest.raises(EmptyInputError):
            Gronsfeld("HELLO", " ").encode()


class TestPorta:
    """Test the Porta cipher."""

    def test_first_alphabet_is_rot13(self):
        assert Porta("HELLO", "A").encode() == "URYYB"
        assert Porta("Hello, World", "B").encode() == Rot13("Hello, World").encode()

    def test_reciprocal(self):
        cipher = Porta(key="FORTIFICATION")
        encoded = cipher.encode("DEFEND THE EAST WALL")
        assert encoded != "DEFEND THE EAST WALL"
        assert cipher.encode(encoded) == "DEFEND THE EAST WALL"
        assert cipher.decode(encoded) == "DEFEND THE EAST WALL"

    def test_halves_swap(self):
        encoded = Porta("ABCDEFGHIJKLM", "PORTA").encode()
        assert all("N" <= ch <= "Z" for ch in encoded)
