#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from .errors import UnknownLanguageError

class Constants:
    '''BIP-39 mnemonic code constants.'''

    # Entropy sizes (ENT) and the matching sentence lengths (MS)
    ENTROPY_BITS = (128, 160, 192, 224, 256)
    MNEMONIC_LENGTHS = (12, 15, 18, 21, 24)

    BITS_PER_WORD = 11
    WORDLIST_SIZE = 1 << BITS_PER_WORD # 2048 words

    # Checksum (CS) is ENT/32 bits of SHA-256(entropy)
    CHECKSUM_DIVISOR = 32

    # Compact form: one little-endian 16-bit integer per word index
    COMPACT_INDEX_SIZE = 2

    # Seed derivation (PBKDF2-HMAC-SHA512)
    PBKDF2_ITERATIONS = 2048
    SEED_SIZE = 64 # 512 bits
    SALT_PREFIX = "mnemonic"

    UNICODE_FORM = 'NFKD'

    # Word separators; any language not listed uses a plain space
    SPACE = " "
    IDEOGRAPHIC_SPACE = "\u3000"
    SEPARATORS = {
        'japanese': IDEOGRAPHIC_SPACE,
    }

    @classmethod
    def separator(self, language):
        ''' Word separator of the text form in the given language. '''
        return self.SEPARATORS.get(language, self.SPACE)

    @classmethod
    def checksum_bits(self, nbits):
        return nbits // self.CHECKSUM_DIVISOR

    @classmethod
    def word_count(self, nbits):
        ''' Number of words encoding nbits of entropy. '''
        return (nbits + self.checksum_bits(nbits)) // self.BITS_PER_WORD

    @classmethod
    def set_default_language(self, language):
        ''' Language used when no wordlist is given. This is process-wide:
        set it once at startup, and pass a wordlist explicitly otherwise. '''
        from .wordlist import available_languages
        if language not in available_languages():
            raise UnknownLanguageError(language)
        self.DEFAULT_LANGUAGE = language

    @classmethod
    def reset(self):
        ''' Factory defaults. '''
        self.DEFAULT_LANGUAGE = 'english'
        self.DEFAULT_ENTROPY_BITS = 128

Constants.reset()
