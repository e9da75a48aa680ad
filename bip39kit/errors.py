#!/usr/bin/env python3
# -*- coding: utf-8 -*-

class MnemonicError(ValueError):
    '''Exception used for mnemonic encoding and decoding errors.'''

class InvalidEntropyLengthError(MnemonicError):
    '''Entropy is not 128, 160, 192, 224 or 256 bits long.'''

    def __init__(self, nbits):
        self.nbits = nbits
        MnemonicError.__init__(self, "invalid entropy length: {:d} bits".format(nbits))

class InvalidMnemonicLengthError(MnemonicError):
    '''Mnemonic does not have 12, 15, 18, 21 or 24 words.'''

    def __init__(self, nwords, msg=None):
        self.nwords = nwords
        MnemonicError.__init__(self, msg or "invalid mnemonic length: {:d} words".format(nwords))

class InvalidWordIndexError(MnemonicError):
    '''Word index does not fit in 11 bits.'''

    def __init__(self, index):
        self.index = index
        MnemonicError.__init__(self, "invalid word index: {:d}".format(index))

class WordNotInListError(MnemonicError):

    def __init__(self, word):
        self.word = word
        MnemonicError.__init__(self, "word not in wordlist: {!r}".format(word))

class InvalidWordlistSizeError(MnemonicError):

    def __init__(self, size):
        self.size = size
        MnemonicError.__init__(self, "wordlist must have 2048 words, got {:d}".format(size))

class DuplicateWordError(MnemonicError):

    def __init__(self, word):
        self.word = word
        MnemonicError.__init__(self, "duplicate word in wordlist: {!r}".format(word))

class WordlistIndexOutOfRangeError(MnemonicError):

    def __init__(self, index, size):
        self.index = index
        self.size = size
        MnemonicError.__init__(self, "index {:d} out of range for a {:d}-word list".format(index, size))

class ChecksumMismatchError(MnemonicError):
    '''Checksum bits of the mnemonic do not match SHA-256 of its entropy.'''

    def __init__(self, claimed, expected):
        self.claimed = claimed
        self.expected = expected
        MnemonicError.__init__(self, "invalid checksum: {}; expected: {}".format(claimed, expected))

class UnknownLanguageError(MnemonicError):

    def __init__(self, language):
        self.language = language
        MnemonicError.__init__(self, "unknown wordlist language: {!r}".format(language))
