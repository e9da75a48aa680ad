#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import ecdsa
import hashlib
import hmac
import pbkdf2

from .constants import Constants

# Hash functions

def sha256(x):
    '''Simple wrapper of hashlib sha256.'''
    return hashlib.sha256(x).digest()

# Randomness

def getrandrange(order, entropy=None):
    return ecdsa.util.randrange(order, entropy)

def getrandbytes(n, entropy=None):
    ''' Returns n random bytes from the system CSPRNG.
    entropy (callable): alternative source, same contract as os.urandom '''
    return getrandrange(1 << (8 * n), entropy).to_bytes(n, 'big')

# Key Derivation

def pbkdf2_hmac_sha512(password, salt, iterations, dklen):
    return pbkdf2.PBKDF2(password, salt, iterations = iterations, macmodule = hmac, digestmodule = hashlib.sha512).read(dklen)

def seed_from_mnemonic( mnemonic, passphrase = b"" ):
    ''' Compute BIP-39 seed from normalized BIP-39 mnemonic and passphrase bytes. '''
    salt = Constants.SALT_PREFIX.encode('utf-8') + passphrase
    return pbkdf2_hmac_sha512(mnemonic, salt, Constants.PBKDF2_ITERATIONS, Constants.SEED_SIZE)
