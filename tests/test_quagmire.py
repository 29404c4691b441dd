"""
Tests for the Quagmire I-IV periodic ciphers.
"""
import pytest

from scytale.ciphers.quagmire import Quagmire1, Quagmire2, Quagmire3, Quagmire4
from scytale.core.errors import CipherError, EmptyInputError, KeyValidationError


class TestQuagmire1:
    """Straight plain alphabet, keyed cipher alphabet."""

    def test_known_vector(self):
        assert Quagmire1("HELLO", "KEY").encode() == "FCMJO"

    def test_decode(self):
        assert Quagmire1("FCMJO", "KEY").decode() == "HELLO"

    def test_non_letters_do_not_advance_key(self):
        assert Quagmire1("HE LLO", "KEY").encode() == "FC MJO"

    def test_lowercase_input(self):
        assert Quagmire1("hello", "key").encode() == "FCMJO"

    def test_alphabets_exposed_after_use(self):
        cipher = Quagmire1("HELLO", "KEY")
        cipher.encode()
        assert cipher.alphabet[1].startswith("KEYABCD")


class TestKeyedVariants:
    """Quagmire II, III and IV."""

    def test_quagmire2_vector(self):
        assert Quagmire2("HELLO", "KEY").encode() == "QCHTQ"

    @pytest.mark.parametrize("cls", [Quagmire2, Quagmire3])
    def test_round_trip(self, cls):
        cipher = cls("Attack at dawn", "SPRINGTIME", indicator="B")
        assert cipher.decode(cipher.encode()) == "ATTACK AT DAWN"

    def test_quagmire4_round_trip(self):
        cipher = Quagmire4("Meet me at noon", "SENIOR", "CODEBREAKER", "PERCEPTION")
        assert cipher.decode(cipher.encode()) == "MEET ME AT NOON"

    def test_repeat_key_changes_output(self):
        plain = Quagmire3("HELLOWORLD", "SPRINGTIME").encode()
        keyed = Quagmire3("HELLOWORLD", "SPRINGTIME", repeat_key="FLOWER")
        assert keyed.encode() != plain
        assert keyed.decode(keyed.encode()) == "HELLOWORLD"


class TestQuagmireErrors:
    """Key and indicator validation happens on use."""

    def test_empty_keyword(self):
        with pytest.raises(EmptyInputError) as exc:
            Quagmire1("HELLO", "").encode()
        assert exc.value.field == "key"

    def test_bad_indicator(self):
        cipher = Quagmire1("HELLO", "KEY", indicator="AB")
        with pytest.raises(KeyValidationError) as exc:
            cipher.encode()
        assert exc.value.field == "indicator"

    def test_missing_cipher_keyword(self):
        with pytest.raises(EmptyInputError) as exc:
            Quagmire4("HELLO", "KEY").encode()
        assert exc.value.field == "cipher_keyword"

    def test_empty_repeat_key(self):
        with pytest.raises(EmptyInputError) as exc:
            Quagmire1("HELLO", "KEY", repeat_key="  ").encode()
        assert exc.value.field == "repeat_key"

    def test_repeat_key_with_digits(self):
        with pytest.raises(KeyValidationError) as exc:
            Quagmire1("HELLO", "KEY", repeat_key="123").encode()
        assert exc.value.field == "repeat_key"

    def test_keyword_with_symbols(self):
        with pytest.raises(CipherError) as exc:
            Quagmire1("HELLO", "K3Y!").encode()
        assert exc.value.field == "key"
