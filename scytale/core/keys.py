"""
Key Parsing and Validation
===========================

One parse-and-validate step per key type. ``validate_*`` functions
report problems as a :class:`KeyValidation` result; ``parse_*`` functions
return the normalised key or raise a :mod:`scytale.core.errors` error
naming the failing field.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel

from scytale.core.errors import EmptyInputError, KeyValidationError


class KeyValidation(BaseModel):
    """Outcome of validating a key.

    Attributes:
        valid: Whether the key is usable.
        reason: Human-readable explanation when ``valid`` is False.
        value: The normalised key when ``valid`` is True.
    """

    valid: bool
    reason: str = ""
    value: Optional[Any] = None

    def __bool__(self) -> bool:
        return self.valid


# ===================================================================== #
#  Shift keys
# ===================================================================== #


def parse_shift_key(key: Any, *, field: str = "key") -> int:
    """Accept an ``int`` or a string of (optionally signed) digits.

    Raises:
        EmptyInputError: For ``None`` or a blank string.
        KeyValidationError: For booleans, floats and non-numeric strings.
    """
    if key is None or (isinstance(key, str) and not key.strip()):
        raise EmptyInputError("Shift key is empty", field=field)
    if isinstance(key, bool):
        raise KeyValidationError("Shift key must be an integer, not a boolean", field=field)
    if isinstance(key, int):
        return key
    if isinstance(key, str):
        try:
            return int(key.strip(), 10)
        except ValueError:
            raise KeyValidationError(
                f"Shift key {key!r} is not an integer", field=field
            ) from None
    raise KeyValidationError(
        f"Shift key must be an integer, got {type(key).__name__}", field=field
    )


# ===================================================================== #
#  Permutation keys
# ===================================================================== #


def validate_permutation_key(key: Any, max_length: int = 9) -> KeyValidation:
    """Check that *key* is a digit string holding each of ``1..n`` once.

    >>> validate_permutation_key("4123").valid
    True
    >>> validate_permutation_key("1245").valid
    False
    """
    if isinstance(key, int) and not isinstance(key, bool):
        key = str(key)
    if not isinstance(key, str) or not key:
        return KeyValidation(valid=False, reason="Key is empty")
    if not key.isdigit():
        return KeyValidation(valid=False, reason=f"Key {key!r} must contain digits only")
    if len(key) > max_length:
        return KeyValidation(
            valid=False,
            reason=f"Key {key!r} is longer than {max_length} digits",
        )
    expected = [str(d) for d in range(1, len(key) + 1)]
    if sorted(key) != expected:
        return KeyValidation(
            valid=False,
            reason=f"Key {key!r} is not a permutation of 1..{len(key)}",
        )
    return KeyValidation(valid=True, value=key)


def parse_permutation_key(key: Any, *, max_length: int = 9, field: str = "key") -> str:
    """Return *key* as a validated permutation string or raise."""
    if key is None or key == "":
        raise EmptyInputError("Permutation key is empty", field=field)
    result = validate_permutation_key(key, max_length)
    if not result.valid:
        raise KeyValidationError(result.reason, field=field)
    return result.value


# ===================================================================== #
#  Keywords and indicators
# ===================================================================== #


def parse_keyword(key: Any, *, field: str = "key") -> str:
    """Return *key* upper-cased with whitespace removed.

    Only the letters A-Z and whitespace are accepted, so ``"key word"``
    gives ``"KEYWORD"`` while ``"K3Y!"`` is rejected instead of being
    quietly shortened.

    Raises:
        EmptyInputError: If *key* is ``None`` or blank.
        KeyValidationError: If *key* holds any other symbol.
    """
    if key is None:
        raise EmptyInputError("Keyword is empty", field=field)
    letters = "".join(str(key).split()).upper()
    if not letters:
        raise EmptyInputError("Keyword is empty", field=field)
    invalid = sorted({ch for ch in letters if not "A" <= ch <= "Z"})
    if invalid:
        raise KeyValidationError(
            f"Keyword {key!r} may hold only letters A-Z, found {''.join(invalid)!r}",
            field=field,
        )
    return letters


def validate_indicator(indicator: Any, *, field: str = "indicator") -> str:
    """Return *indicator* as a single upper-case letter or raise."""
    if not isinstance(indicator, str) or len(indicator) != 1 or not (
        "A" <= indicator.upper() <= "Z"
    ):
        raise KeyValidationError(
            f"Indicator must be a single letter A-Z, got {indicator!r}", field=field
        )
    return indicator.upper()
