#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from .constants import Constants
from .errors import InvalidMnemonicLengthError, InvalidWordIndexError

# Bytes

def read_int( b, l, e ):
    ''' Splits an l-byte integer off the front of b. '''
    return int.from_bytes( b[:l], e ), b[l:]

def ensure_bytes(x):
    if isinstance(x, (bytes, bytearray, memoryview)):
        return bytes(x)
    raise TypeError("Wrong type {0!r}".format(x))

# Bits

class BitCursor:
    ''' Bit-level cursor over a byte buffer.

    Bits are addressed most significant first within each byte, so that the
    buffer reads as one big-endian bitstream. Writing past the end of the
    buffer extends it with zero bytes. '''

    def __init__(self, buf=b''):
        self.buf = bytearray(buf)
        self.byte_offset = 0
        self.bit_offset = 0

    def tell(self):
        ''' Position in bits from the start of the buffer. '''
        return 8 * self.byte_offset + self.bit_offset

    def seek(self, pos):
        if not ( 0 <= pos <= 8 * len(self.buf) ):
            raise ValueError("bit position {:d} outside buffer".format(pos))
        self.byte_offset, self.bit_offset = divmod(pos, 8)

    def remaining(self):
        return 8 * len(self.buf) - self.tell()

    def read(self, nbits):
        ''' Reads nbits as an unsigned integer. '''
        if nbits > self.remaining():
            raise ValueError("cannot read {:d} bits, {:d} left".format(nbits, self.remaining()))
        value = 0
        for _ in range(nbits):
            bit = ( self.buf[self.byte_offset] >> (7 - self.bit_offset) ) & 1
            value = (value << 1) | bit
            self._advance()
        return value

    def write(self, value, nbits):
        ''' Writes the unsigned integer value on nbits. '''
        if value < 0 or value >> nbits:
            raise ValueError("{:d} does not fit in {:d} bits".format(value, nbits))
        for i in range(nbits - 1, -1, -1):
            if self.byte_offset == len(self.buf):
                self.buf.append(0)
            mask = 0x80 >> self.bit_offset
            if (value >> i) & 1:
                self.buf[self.byte_offset] |= mask
            else:
                self.buf[self.byte_offset] &= ~mask & 0xff
            self._advance()

    def read_bytes(self, n):
        return bytes( self.read(8) for _ in range(n) )

    def getvalue(self):
        return bytes(self.buf)

    def _advance(self):
        self.bit_offset += 1
        if self.bit_offset == 8:
            self.bit_offset = 0
            self.byte_offset += 1

    def __repr__(self):
        return '<BitCursor {:d}/{:d} bits>'.format(self.tell(), 8 * len(self.buf))

# Compact mnemonic form

def indices_to_bytes( indices ):
    ''' Serializes word indices as little-endian 16-bit integers. '''
    b = bytes()
    for i in indices:
        if not ( 0 <= i < Constants.WORDLIST_SIZE ):
            raise InvalidWordIndexError(i)
        b += i.to_bytes(Constants.COMPACT_INDEX_SIZE, 'little')
    return b

def indices_from_bytes( b ):
    ''' Parses the compact form back into word indices. '''
    b = ensure_bytes(b)
    if len(b) % Constants.COMPACT_INDEX_SIZE:
        raise InvalidMnemonicLengthError(len(b) // Constants.COMPACT_INDEX_SIZE,
            "compact form has an odd number of bytes: {:d}".format(len(b)))
    indices = []
    while b:
        i, b = read_int(b, Constants.COMPACT_INDEX_SIZE, 'little')
        indices.append(i)
    return indices
