"""
Pytest fixtures for bip39kit tests
"""

import logging

import pytest

from bip39kit import Constants, Wordlist


@pytest.fixture(autouse=True)
def restore_defaults():
    """Undo changes to Constants and to the package logger."""
    yield
    Constants.reset()
    logger = logging.getLogger("bip39kit")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def english() -> Wordlist:
    return Wordlist.from_language("english")


@pytest.fixture
def japanese() -> Wordlist:
    return Wordlist.from_language("japanese")


@pytest.fixture
def spanish() -> Wordlist:
    return Wordlist.from_language("spanish")


@pytest.fixture
def numbered_words() -> list:
    """A made-up list of 2048 distinct words."""
    return ["w{:04d}".format(i) for i in range(2048)]


@pytest.fixture
def pill_frown() -> str:
    return "pill frown erosion humor invest inquiry rich garment seek such mention punch"
