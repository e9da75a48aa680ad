"""
Tests for seed derivation, sync and async
"""

import pytest

from bip39kit import mnemonic_to_seed, mnemonic_to_seed_async, indices_to_bytes
from bip39kit.errors import InvalidMnemonicLengthError

from vectors import ENGLISH_VECTORS, JAPANESE_VECTORS

PILL_FROWN_SEED = bytes([
    213, 198, 189, 89, 252, 121, 48, 207, 56, 105, 8, 152, 129, 116, 186, 218, 26, 71, 225, 55,
    201, 122, 153, 178, 5, 235, 40, 132, 179, 248, 166, 147, 18, 128, 248, 25, 184, 206, 113,
    170, 71, 235, 73, 144, 0, 134, 22, 244, 18, 229, 222, 139, 246, 28, 123, 131, 16, 215, 191,
    216, 252, 159, 213, 235,
])

PILL_FROWN_PASSPHRASE_SEED = bytes([
    180, 211, 212, 196, 151, 216, 92, 25, 11, 35, 14, 186, 80, 80, 141, 156, 245, 11, 25, 118,
    50, 75, 80, 36, 116, 113, 11, 112, 36, 86, 70, 188, 92, 156, 172, 167, 83, 159, 47, 149, 92,
    107, 130, 66, 39, 251, 34, 169, 115, 143, 121, 110, 166, 28, 221, 93, 252, 165, 155, 127,
    19, 138, 107, 135,
])

JAPANESE_PASSPHRASE = "㍍ガバヴァぱばぐゞちぢ十人十色"
JAPANESE_PASSPHRASE_NFKD = "メートルガバヴァぱばぐゞちぢ十人十色"


def compact_form(text, wordlist):
    return indices_to_bytes(wordlist.from_words(text))


class TestWithoutPassphrase:
    def test_text(self, pill_frown):
        assert mnemonic_to_seed(pill_frown) == PILL_FROWN_SEED

    def test_compact_with_wordlist(self, english, pill_frown):
        assert mnemonic_to_seed(compact_form(pill_frown, english), wordlist=english) == PILL_FROWN_SEED

    def test_none_is_empty(self, pill_frown):
        assert mnemonic_to_seed(pill_frown, None) == PILL_FROWN_SEED

    @pytest.mark.asyncio
    async def test_async(self, pill_frown):
        assert await mnemonic_to_seed_async(pill_frown) == PILL_FROWN_SEED


class TestWithPassphrase:
    def test_text(self, pill_frown):
        assert mnemonic_to_seed(pill_frown, "passphrase") == PILL_FROWN_PASSPHRASE_SEED

    def test_compact_with_wordlist(self, english, pill_frown):
        seed = mnemonic_to_seed(compact_form(pill_frown, english), "passphrase", english)
        assert seed == PILL_FROWN_PASSPHRASE_SEED

    @pytest.mark.asyncio
    async def test_async(self, pill_frown):
        assert await mnemonic_to_seed_async(pill_frown, "passphrase") == PILL_FROWN_PASSPHRASE_SEED


@pytest.mark.parametrize("entropy,mnemonic,seed,compact", ENGLISH_VECTORS)
def test_english_vectors(english, entropy, mnemonic, seed, compact):
    assert mnemonic_to_seed(mnemonic, "TREZOR").hex() == seed
    assert mnemonic_to_seed(compact, "TREZOR", english).hex() == seed


@pytest.mark.asyncio
@pytest.mark.parametrize("entropy,mnemonic,seed,compact", ENGLISH_VECTORS)
async def test_english_vectors_compact_async(english, entropy, mnemonic, seed, compact):
    with_wordlist = await mnemonic_to_seed_async(compact, "TREZOR", english)
    assert with_wordlist.hex() == seed
    assert with_wordlist == mnemonic_to_seed(compact, "TREZOR", english)

    without_wordlist = await mnemonic_to_seed_async(compact)
    assert without_wordlist == mnemonic_to_seed(compact)
    assert len(without_wordlist) == 64


@pytest.mark.parametrize("entropy,mnemonic,seed", JAPANESE_VECTORS)
def test_japanese_vectors(japanese, entropy, mnemonic, seed):
    assert mnemonic_to_seed(mnemonic, JAPANESE_PASSPHRASE).hex() == seed
    assert mnemonic_to_seed(mnemonic, JAPANESE_PASSPHRASE_NFKD).hex() == seed
    assert mnemonic_to_seed(compact_form(mnemonic, japanese), JAPANESE_PASSPHRASE, japanese).hex() == seed


@pytest.mark.asyncio
@pytest.mark.parametrize("entropy,mnemonic,seed", JAPANESE_VECTORS[:3])
async def test_japanese_vectors_async(entropy, mnemonic, seed):
    assert (await mnemonic_to_seed_async(mnemonic, JAPANESE_PASSPHRASE)).hex() == seed


def test_compact_without_wordlist_uses_numerals(english):
    compact = indices_to_bytes([0] * 11 + [3])
    assert mnemonic_to_seed(compact) == mnemonic_to_seed("0 0 0 0 0 0 0 0 0 0 0 3")
    assert mnemonic_to_seed(compact) != mnemonic_to_seed(compact, wordlist=english)


def test_no_validation():
    seed = mnemonic_to_seed("sleep kitten sleep kitten sleep kitten sleep kitten sleep kitten sleep kitten")
    assert len(seed) == 64
    assert mnemonic_to_seed("not a mnemonic at all") == mnemonic_to_seed("not a mnemonic at all")


@pytest.mark.parametrize("mnemonic", ["", b""])
def test_empty_mnemonic(mnemonic):
    with pytest.raises(InvalidMnemonicLengthError):
        mnemonic_to_seed(mnemonic)


@pytest.mark.asyncio
async def test_async_propagates_errors():
    with pytest.raises(InvalidMnemonicLengthError):
        await mnemonic_to_seed_async("")
