"""
Shared fixtures for the Scytale test suite.
"""
import pytest

from shared.config import ScytaleConfig

from scytale.ciphers.shift import CaesarShift

ENGLISH_PARAGRAPH = (
    "It was the best of times, it was the worst of times, it was the age of "
    "wisdom, it was the age of foolishness, it was the epoch of belief, it was "
    "the epoch of incredulity, it was the season of Light, it was the season of "
    "Darkness, it was the spring of hope, it was the winter of despair, we had "
    "everything before us, we had nothing before us, we were all going direct "
    "to Heaven, we were all going direct the other way."
)


@pytest.fixture
def english_text():
    return ENGLISH_PARAGRAPH


@pytest.fixture
def shifted_text():
    """The English paragraph under a Caesar shift of 7."""
    return CaesarShift(ENGLISH_PARAGRAPH, 7).encode()


@pytest.fixture
def config():
    return ScytaleConfig()
