#!/usr/bin/env python3
# -*- coding: utf-8 -*-

''' BIP-39 mnemonic code.

Entropy (ENT) is extended with a checksum (CS) made of the first ENT/32 bits
of its SHA-256 digest; ENT+CS is split in groups of 11 bits, each of them an
index in a 2048-word list.

    ENT   CS   ENT+CS   MS
    128    4      132   12
    160    5      165   15
    192    6      198   18
    224    7      231   21
    256    8      264   24

A mnemonic is handled either as text (words joined by the separator of the
wordlist) or in compact form (indices as little-endian 16-bit integers).
'''

import asyncio
import functools
import logging

from .constants import Constants
from .crypto import sha256, getrandbytes, seed_from_mnemonic
from .errors import (InvalidEntropyLengthError, InvalidMnemonicLengthError,
                     InvalidWordIndexError, ChecksumMismatchError)
from .util import BitCursor, ensure_bytes, indices_to_bytes, indices_from_bytes
from .wordlist import Wordlist, normalize_text

logger = logging.getLogger(__name__)

# Bit packing

def mnemonic_checksum(entropy, nbits):
    ''' First nbits of SHA-256(entropy), as a binary 0/1 string. '''
    digest = int.from_bytes( sha256(entropy), 'big' )
    return "{:0256b}".format(digest)[:nbits]

def encode_indices(entropy):
    ''' Splits entropy and its checksum into 11-bit word indices.
    entropy (bytes): 16, 20, 24, 28 or 32 bytes '''
    entropy = ensure_bytes(entropy)
    nbits = 8 * len(entropy)
    if nbits not in Constants.ENTROPY_BITS:
        raise InvalidEntropyLengthError(nbits)
    # CS is at most 8 bits: the first byte of the digest holds all of it
    cursor = BitCursor( entropy + sha256(entropy)[:1] )
    return [ cursor.read(Constants.BITS_PER_WORD) for _ in range(Constants.word_count(nbits)) ]

def decode_indices(indices):
    ''' Joins word indices back into entropy and claimed checksum bits.
    Returns (entropy bytes, checksum as binary 0/1 string). '''
    nwords = len(indices)
    if nwords not in Constants.MNEMONIC_LENGTHS:
        raise InvalidMnemonicLengthError(nwords)
    cursor = BitCursor()
    for i in indices:
        if not ( 0 <= i < Constants.WORDLIST_SIZE ):
            raise InvalidWordIndexError(i)
        cursor.write(i, Constants.BITS_PER_WORD)
    total = nwords * Constants.BITS_PER_WORD
    nbits = total * Constants.CHECKSUM_DIVISOR // (Constants.CHECKSUM_DIVISOR + 1)
    cursor.seek(0)
    entropy = cursor.read_bytes(nbits // 8)
    checksum = "{:0{}b}".format( cursor.read(total - nbits), total - nbits )
    return entropy, checksum

def verify_checksum(entropy, checksum):
    return mnemonic_checksum(entropy, len(checksum)) == checksum

# Mnemonic forms

def is_compact(mnemonic):
    if isinstance(mnemonic, str):
        return False
    if isinstance(mnemonic, (bytes, bytearray, memoryview)):
        return True
    raise TypeError("Wrong type {0!r}".format(mnemonic))

def mnemonic_to_indices(mnemonic, wordlist=None):
    ''' Word indices of a mnemonic in text or compact form. '''
    if is_compact(mnemonic):
        return indices_from_bytes(mnemonic)
    return Wordlist.coerce(wordlist).from_words(mnemonic)

def _format(indices, wordlist, compact):
    if compact:
        return indices_to_bytes(indices)
    return Wordlist.coerce(wordlist).to_words(indices)

# Codec

def entropy_to_mnemonic(entropy, wordlist=None, compact=False):
    ''' Encodes BIP-39 mnemonic phrase from entropy.
    entropy (bytes): 128 to 256 bits, by steps of 32
    wordlist (Wordlist, str or list): defaults to Constants.DEFAULT_LANGUAGE
    compact (bool): return the compact form instead of text '''
    indices = encode_indices(entropy)
    return _format(indices, wordlist, compact)

def mnemonic_to_entropy(mnemonic, wordlist=None):
    ''' Decodes BIP-39 mnemonic phrase and verifies its checksum.
    mnemonic (str or bytes): text or compact form
    wordlist (Wordlist, str or list): used for the text form only '''
    indices = mnemonic_to_indices(mnemonic, wordlist)
    entropy, checksum = decode_indices(indices)
    if not verify_checksum(entropy, checksum):
        raise ChecksumMismatchError(checksum, mnemonic_checksum(entropy, len(checksum)))
    return entropy

def validate_mnemonic(mnemonic, wordlist=None):
    try:
        mnemonic_to_entropy(mnemonic, wordlist)
    except (ValueError, TypeError) as e:
        logger.debug("Mnemonic rejected: %s", type(e).__name__)
        return False
    return True

def generate_mnemonic(wordlist=None, nbits=None, compact=False):
    '''Generates a random BIP-39 mnemonic phrase.
    nbits (int): bits of entropy, defaults to Constants.DEFAULT_ENTROPY_BITS '''
    if nbits is None:
        nbits = Constants.DEFAULT_ENTROPY_BITS
    if nbits not in Constants.ENTROPY_BITS:
        raise InvalidEntropyLengthError(nbits)
    entropy = getrandbytes(nbits // 8)
    logger.debug("Generating %d-word mnemonic", Constants.word_count(nbits))
    return entropy_to_mnemonic(entropy, wordlist, compact)

# Seed

def _seed_text(mnemonic, wordlist):
    if not is_compact(mnemonic):
        return mnemonic
    indices = indices_from_bytes(mnemonic)
    if wordlist is None:
        # wordlist-independent rendering of the indices
        return " ".join( str(i) for i in indices )
    return Wordlist.coerce(wordlist).to_words(indices)

def mnemonic_to_seed(mnemonic, passphrase="", wordlist=None):
    ''' Computes the 64-byte BIP-39 seed. Neither the words nor the checksum
    are verified, any text gives a seed.
    mnemonic (str or bytes): text or compact form
    passphrase (str): optional, empty by default
    wordlist (Wordlist, str or list): renders a compact mnemonic as words '''
    text = _seed_text(mnemonic, wordlist)
    if not text:
        raise InvalidMnemonicLengthError(0)
    password = normalize_text(text).encode('utf-8')
    salt = normalize_text(passphrase or "").encode('utf-8')
    return seed_from_mnemonic(password, salt)

async def mnemonic_to_seed_async(mnemonic, passphrase="", wordlist=None):
    ''' Same as mnemonic_to_seed, computed in the default executor so that
    the event loop is not blocked by the 2048 PBKDF2 rounds. '''
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(mnemonic_to_seed, mnemonic, passphrase, wordlist))
