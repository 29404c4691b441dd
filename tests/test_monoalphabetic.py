"""
Tests for the dictionary ciphers: Atbash, keyword substitution and
Bazeries, plus the Morse and Baconian encodings.
"""
import pytest

from scytale.ciphers.baconian import Baconian
from scytale.ciphers.monoalphabetic import (
    Atbash,
    Bazeries,
    SimpleSubstitution,
    number_to_words,
    substitution_table,
)
from scytale.ciphers.morse import Morse
from scytale.core.alphabet import AlphabetTable
from scytale.core.errors import EmptyInputError, KeyValidationError


class TestAtbash:
    """Test the Atbash mirror."""

    def test_known_vector(self):
        assert Atbash("Encode this text please").encode() == "0r2q10 lxwm l0hl pt04m0"

    def test_decode(self):
        assert Atbash("0r2q10 lxwm l0hl pt04m0").decode() == "encode this text please"

    def test_self_inverse_on_lowercase(self):
        text = "attack at dawn"
        assert Atbash().encode(Atbash(text).encode()) == text

    def test_punctuation_pairs(self):
        assert Atbash("hi!").encode() == "xw5"
        assert Atbash("xw5").encode() == "hi!"

    def test_unknown_symbols_dropped(self):
        assert Atbash("a#b").encode() == "43"

    def test_nine_becomes_word_break(self):
        encoded = Atbash("a9b").encode()
        assert encoded == "4 y"
        assert Atbash(encoded).decode() == "a b"

    def test_alphabet_is_table(self):
        table = Atbash().alphabet
        assert isinstance(table, AlphabetTable)
        assert table["a"] == "4"
        assert table["f"] == "z"
        assert table["p"] == "p"


class TestSimpleSubstitution:
    """Test keyword substitution."""

    def test_known_vector(self):
        cipher = SimpleSubstitution("Encode this text please", "Tyranosaurus")
        assert cipher.encode() == "lejfkl aopg alya usldgl"

    def test_decode(self):
        cipher = SimpleSubstitution("lejfkl aopg alya usldgl", "Tyranosaurus")
        assert cipher.decode() == "encode this text please"

    def test_digits_and_punctuation_map_to_themselves(self):
        table = substitution_table("Tyranosaurus")
        for symbol in "0123456789 .,?!":
            assert table[symbol] == symbol

    def test_empty_key_raises_on_encode(self):
        cipher = SimpleSubstitution("hello", "")
        with pytest.raises(EmptyInputError) as exc:
            cipher.encode()
        assert exc.value.field == "key"

    def test_key_without_letters(self):
        with pytest.raises(KeyValidationError) as exc:
            SimpleSubstitution("hello", "1234").encode()
        assert exc.value.field == "key"

    def test_key_with_symbols(self):
        with pytest.raises(KeyValidationError):
            substitution_table("Tyrano-saurus")
        assert dict(substitution_table("Tyrano saurus")) == dict(substitution_table("Tyranosaurus"))


class TestBazeries:
    """Test the Bazeries square substitution."""

    def test_straight_key_maps_across_transposed_square(self):
        # With an unkeyed cipher square, 'b' (plain cell 1,0) -> cipher cell 1,0 = 'f'
        assert Bazeries("ab", "abc").encode() == "a f"

    def test_separators(self):
        encoded = Bazeries("hello world", "cipher").encode()
        words = encoded.split("   ")
        assert len(words) == 2
        assert len(words[0].split(" ")) == 5

    def test_round_trip_with_numeric_key(self):
        cipher = Bazeries("Hello world", 3752)
        assert cipher.decode(cipher.encode()) == "hello world"

    def test_j_folded_into_i(self):
        cipher = Bazeries(key="keyword")
        assert cipher.decode(cipher.encode("jam")) == "iam"

    def test_empty_key(self):
        with pytest.raises(EmptyInputError):
            Bazeries("hello", "").encode()

    def test_mixed_key_rejected(self):
        with pytest.raises(KeyValidationError) as exc:
            Bazeries("hello", "cipher7").encode()
        assert exc.value.field == "key"

    @pytest.mark.parametrize(
        "number,words",
        [
            (0, "zero"),
            (15, "fifteen"),
            (40, "forty"),
            (3752, "three thousand seven hundred fifty two"),
            (1_000_000, "one million"),
        ],
    )
    def test_number_to_words(self, number, words):
        assert number_to_words(number) == words


class TestMorse:
    """Test Morse encoding."""

    def test_known_vector(self):
        assert Morse("Encode this text please").encode() == (
            ". -. -.-. --- -.. .   - .... .. ...   - . -..- -   .--. .-.. . .- ... ."
        )

    def test_decode(self):
        assert Morse("... --- ...   ... --- ...").decode() == "sos sos"

    def test_punctuation(self):
        assert Morse("hi!").encode() == ".... .. -.-.--"

    def test_unknown_symbols_dropped(self):
        assert Morse("a#b").encode() == ".- -..."

    def test_empty_message(self):
        with pytest.raises(EmptyInputError):
            Morse("").encode()

    def test_custom_word_separator(self):
        assert Morse("a b", word_sep=" / ").encode() == ".- / -..."


class TestBaconian:
    """Test the Baconian biliteral encoding."""

    def test_known_vector(self):
        assert Baconian("hi").encode() == "aabbb abaaa"

    def test_first_and_last_letters(self):
        assert Baconian("az").encode() == "aaaaa bbaab"

    def test_words_separated_by_three_spaces(self):
        assert Baconian("a b").encode() == "aaaaa   aaaab"

    def test_decode(self):
        assert Baconian("aabbb aabaa ababb ababb abbba").decode() == "hello"

    def test_round_trip_drops_unknown_symbols(self):
        cipher = Baconian("Attack at dawn!")
        assert cipher.decode(cipher.encode()) == "attack at dawn"

    def test_keyless(self):
        assert Baconian.keyed is False
