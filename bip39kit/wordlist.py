#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import functools
import logging
import unicodedata

from mnemonic import Mnemonic

from .constants import Constants
from .errors import (InvalidWordlistSizeError, DuplicateWordError, WordNotInListError,
                     WordlistIndexOutOfRangeError, UnknownLanguageError)

logger = logging.getLogger(__name__)

def normalize_text(s):
    return unicodedata.normalize(Constants.UNICODE_FORM, s)

def load_wordlist(filename, separator=Constants.SPACE, language=None):
    ''' Loads a wordlist from a text file, one word per line.
    Everything after a '#' is a comment. '''
    with open(filename, 'r', encoding='utf-8') as f:
        s = f.read().strip()
    s = normalize_text(s)
    words = []
    for line in s.split('\n'):
        line = line.split('#')[0]
        line = line.strip(' \r')
        if ' ' in line:
            raise ValueError("wordlist line contains a space: {!r}".format(line))
        if line:
            words.append(line)
    return Wordlist(words, separator, language)

def available_languages():
    return sorted(Mnemonic.list_languages())

@functools.lru_cache(maxsize=None)
def _language_wordlist(language):
    if language not in Mnemonic.list_languages():
        raise UnknownLanguageError(language)
    words = Mnemonic(language).wordlist
    logger.debug("Loaded %s wordlist (%d words)", language, len(words))
    return Wordlist(words, Constants.separator(language), language)

class Wordlist:
    ''' Ordered list of 2048 words: position i is the word of index i. '''

    def __init__(self, words, separator=Constants.SPACE, language=None):
        words = tuple( normalize_text(w) for w in words )
        if len(words) != Constants.WORDLIST_SIZE:
            raise InvalidWordlistSizeError(len(words))
        self.words = words
        self.separator = separator
        self.language = language
        self._lookup = {}
        for i, w in enumerate(words):
            if w in self._lookup:
                raise DuplicateWordError(w)
            self._lookup[w] = i

    @classmethod
    def from_language(self, language):
        ''' Wordlist shipped for the given language (english, japanese, spanish...). '''
        return _language_wordlist(language)

    @classmethod
    def default(self):
        return self.from_language(Constants.DEFAULT_LANGUAGE)

    @classmethod
    def coerce(self, wordlist):
        ''' Accepts a Wordlist, a language name or a plain sequence of words. '''
        if isinstance(wordlist, Wordlist):
            return wordlist
        if wordlist is None:
            return self.default()
        if isinstance(wordlist, str):
            return self.from_language(wordlist)
        if isinstance(wordlist, (list, tuple)):
            return self(wordlist)
        raise TypeError("Wrong type {0!r}".format(wordlist))

    def index(self, word):
        try:
            return self._lookup[word]
        except KeyError:
            raise WordNotInListError(word) from None

    def to_words(self, indices):
        ''' Text form of a sequence of word indices. '''
        words = []
        for i in indices:
            if not ( 0 <= i < len(self.words) ):
                raise WordlistIndexOutOfRangeError(i, len(self.words))
            words.append( self.words[i] )
        return self.separator.join(words)

    def from_words(self, text):
        ''' Word indices of a mnemonic sentence in text form. '''
        if not isinstance(text, str):
            raise TypeError("Wrong type {0!r}".format(text))
        # split first: NFKD turns the ideographic space into a plain one
        return [ self.index(normalize_text(w)) for w in text.split(self.separator) ]

    def __len__(self):
        return len(self.words)

    def __getitem__(self, i):
        return self.words[i]

    def __contains__(self, word):
        return normalize_text(word) in self._lookup

    def __iter__(self):
        return iter(self.words)

    def __repr__(self):
        return '<Wordlist {}>'.format(self.language or 'custom')
