"""
Tests for the AMSCO and rail fence transpositions and the ADFGX,
ADFGVX and Bifid fractionating ciphers.
"""
import pytest

from scytale.ciphers.amsco import Amsco, amsco_layout
from scytale.ciphers.fractionation import (
    ADFGVX,
    ADFGX,
    Bifid,
    columnar_order,
    columnar_restore,
    columnar_transpose,
)
from scytale.ciphers.rail_fence import RailFence, rail_pattern
from scytale.core.errors import (
    EmptyInputError,
    KeyValidationError,
    UnsupportedSymbolError,
)


class TestAmsco:
    """Test the AMSCO cipher."""

    def test_known_vector(self):
        assert Amsco("Encode this text please", "321").encode() == "OHELENCETSTTPASEDIXE"

    def test_decode(self):
        assert Amsco("OHELENCETSTTPASEDIXE", "321").decode() == "ENCODETHISTEXTPLEASE"

    def test_validate_key(self):
        assert Amsco("x", "4123").validate_key() is True
        assert Amsco("x", "1245").validate_key() is False
        assert Amsco("x", "1234567891").validate_key() is False

    def test_invalid_key_raises_on_encode(self):
        cipher = Amsco("Encode this", "1245")
        with pytest.raises(KeyValidationError) as exc:
            cipher.encode()
        assert exc.value.field == "key"

    def test_invalid_key_raises_on_decode(self):
        with pytest.raises(KeyValidationError):
            Amsco("ABC", "22").decode()

    def test_layout_odd_columns(self):
        assert amsco_layout(5, 3) == [(0, 0, 1), (0, 1, 2), (0, 2, 1), (1, 0, 1)]

    def test_layout_even_columns_alternates_row_start(self):
        assert amsco_layout(6, 2) == [(0, 0, 1), (0, 1, 2), (1, 0, 2), (1, 1, 1)]

    def test_round_trip_incomplete_last_row(self):
        cipher = Amsco("The quick brown fox jumps over the lazy dog", "25314")
        assert cipher.decode(cipher.encode()) == "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"

    def test_max_key_length(self):
        cipher = Amsco("HELLO", "4123", max_key_length=3)
        assert not cipher.validate_key()


class TestColumnar:
    """Test the columnar stage shared by the fractionating ciphers."""

    def test_numeric_and_alphabetic_keys(self):
        assert columnar_order("21") == [1, 0]
        assert columnar_order("bab") == [1, 0, 2]

    def test_numeric_key_must_be_permutation(self):
        with pytest.raises(KeyValidationError) as exc:
            columnar_order("1245")
        assert exc.value.field == "transposition_key"

    @pytest.mark.parametrize("key", ["CARGO7", "CAR GO", "7-3-1"])
    def test_mixed_key_rejected(self, key):
        with pytest.raises(KeyValidationError) as exc:
            columnar_order(key)
        assert exc.value.field == "transposition_key"

    def test_mixed_key_rejected_on_encode(self):
        with pytest.raises(KeyValidationError):
            ADFGVX("ATTACK", "PH0QG64", "CARGO7").encode()

    def test_empty_key(self):
        with pytest.raises(EmptyInputError) as exc:
            columnar_order("")
        assert exc.value.field == "transposition_key"

    def test_restore_incomplete_columns(self):
        order = [2, 0, 1]
        text = "ABCDEFG"
        assert columnar_transpose(text, order) == "CFADGBE"
        assert columnar_restore("CFADGBE", order) == text


class TestFractionation:
    """Test ADFGX and ADFGVX."""

    def test_adfgx_straight_square(self):
        # A -> AA, B -> AD; columns "AA" / "AD" read in order 2, 1
        assert ADFGX("AB", "", "21").encode() == "ADAA"

    def test_adfgvx_digit(self):
        assert ADFGVX("1", None, "1").encode() == "VG"

    def test_adfgvx_round_trip(self):
        cipher = ADFGVX(
            "Attack at 1200 AM", "PH0QG64MEA1YL2NOFDXKR3CVS5ZW7BJ9UTI8", "PRIVACY"
        )
        encoded = cipher.encode()
        assert set(encoded) <= set("ADFGVX")
        assert cipher.decode(encoded) == "ATTACKAT1200AM"

    def test_adfgvx_incomplete_columns(self):
        cipher = ADFGVX("Defend the east wall", "NACHTBOMBER", "GERMAN")
        assert cipher.decode(cipher.encode()) == "DEFENDTHEEASTWALL"

    def test_adfgx_folds_j(self):
        cipher = ADFGX("Jam", "KEYWORD", "3142")
        assert cipher.decode(cipher.encode()) == "IAM"

    def test_empty_transposition_key(self):
        with pytest.raises(EmptyInputError) as exc:
            ADFGVX("HELLO", "KEY", "").encode()
        assert exc.value.field == "transposition_key"

    def test_odd_coordinate_count(self):
        with pytest.raises(UnsupportedSymbolError):
            ADFGVX("ADF", "KEY", "KEY").decode()

    def test_message_without_symbols(self):
        with pytest.raises(EmptyInputError):
            ADFGVX("!!!", "KEY", "12").encode()

    def test_square_key_outside_alphabet(self):
        with pytest.raises(KeyValidationError) as exc:
            ADFGX("HELLO", "KEY5", "12").encode()
        assert exc.value.field == "key"


class TestRailFence:
    """Test the rail fence zigzag."""

    def test_pattern(self):
        assert rail_pattern(6, 3) == [0, 1, 2, 1, 0, 1]
        assert rail_pattern(4, 2) == [0, 1, 0, 1]

    def test_two_rails(self):
        assert RailFence("HELLO", 2).encode() == "HLOEL"

    def test_known_vector(self):
        cipher = RailFence("WE ARE DISCOVERED. FLEE AT ONCE", 3)
        assert cipher.encode() == "WECRLTEERDSOEEFEAOCAIVDEN"

    def test_decode(self):
        assert RailFence("WECRLTEERDSOEEFEAOCAIVDEN", 3).decode() == (
            "WEAREDISCOVEREDFLEEATONCE"
        )

    def test_default_is_three_rails(self):
        assert RailFence("WEAREDISCOVERED").encode() == "WECRERDSOEEAIVD"

    def test_more_rails_than_letters(self):
        cipher = RailFence("ABC", 5)
        assert cipher.encode() == "ABC"
        assert cipher.decode("ABC") == "ABC"

    @pytest.mark.parametrize("rails", [1, 0, -2])
    def test_too_few_rails(self, rails):
        with pytest.raises(KeyValidationError) as exc:
            RailFence("HELLO", rails).encode()
        assert exc.value.field == "key"

    def test_non_numeric_rails(self):
        with pytest.raises(KeyValidationError):
            RailFence("HELLO", "three").encode()

    def test_message_without_letters(self):
        with pytest.raises(EmptyInputError):
            RailFence("1234", 3).encode()


class TestBifid:
    """Test Delastelle's Bifid."""

    SQUARE = "BGWKZQPNDSIOAXEFCLUMTHYVR"

    def test_known_vector(self):
        assert Bifid("FLEEATONCE", self.SQUARE).encode() == "UAEOLWRINS"

    def test_decode(self):
        assert Bifid("UAEOLWRINS", self.SQUARE).decode() == "FLEEATONCE"

    def test_straight_square_round_trip(self):
        cipher = Bifid("Jump over the lazy dog")
        assert cipher.decode(cipher.encode()) == "IUMPOVERTHELAZYDOG"

    def test_key_with_digits(self):
        with pytest.raises(KeyValidationError):
            Bifid("HELLO", "KEY1").encode()

    def test_message_without_letters(self):
        with pytest.raises(EmptyInputError):
            Bifid("!!", "KEY").encode()
