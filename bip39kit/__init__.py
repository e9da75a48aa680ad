#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from .codec import (generate_mnemonic, entropy_to_mnemonic, mnemonic_to_entropy, validate_mnemonic,
                    mnemonic_to_seed, mnemonic_to_seed_async, encode_indices, decode_indices,
                    verify_checksum, mnemonic_to_indices)
from .constants import Constants
from .errors import *
from .util import BitCursor, indices_to_bytes, indices_from_bytes
from .wordlist import Wordlist, load_wordlist, available_languages

__version__ = "0.1.0"
