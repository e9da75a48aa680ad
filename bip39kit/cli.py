#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import os
import sys

from .codec import (generate_mnemonic, entropy_to_mnemonic, mnemonic_to_entropy,
                    validate_mnemonic, mnemonic_to_seed)
from .constants import Constants
from .logging_config import setup_logging
from .wordlist import Wordlist, load_wordlist, available_languages

def get_wordlist(args):
    if args.wordlist_file:
        return load_wordlist(args.wordlist_file, Constants.separator(args.language), args.language)
    return Wordlist.from_language(args.language)

def cmd_generate(args):
    wordlist = get_wordlist(args)
    mnemonic = generate_mnemonic(wordlist, args.bits, compact=args.hex)
    print(mnemonic.hex() if args.hex else mnemonic)
    return 0

def cmd_entropy_to_mnemonic(args):
    entropy = bytes.fromhex(args.entropy)
    print(entropy_to_mnemonic(entropy, get_wordlist(args)))
    return 0

def cmd_mnemonic_to_entropy(args):
    print(mnemonic_to_entropy(args.mnemonic, get_wordlist(args)).hex())
    return 0

def cmd_validate(args):
    if validate_mnemonic(args.mnemonic, get_wordlist(args)):
        print("valid")
        return 0
    print("invalid")
    return 1

def cmd_seed(args):
    print(mnemonic_to_seed(args.mnemonic, args.passphrase).hex())
    return 0

def cmd_languages(args):
    for language in available_languages():
        print(language)
    return 0

COMMANDS = {
    'generate': cmd_generate,
    'entropy-to-mnemonic': cmd_entropy_to_mnemonic,
    'mnemonic-to-entropy': cmd_mnemonic_to_entropy,
    'validate': cmd_validate,
    'seed': cmd_seed,
    'languages': cmd_languages,
}

def build_parser():
    parser = argparse.ArgumentParser(prog='bip39kit', description='BIP-39 mnemonic code')
    parser.add_argument('--log-level', default=os.getenv('BIP39KIT_LOG_LEVEL', 'WARNING'),
                        help='logging level (default: WARNING)')

    # wordlist selection, shared by the commands that need one
    wl = argparse.ArgumentParser(add_help=False)
    wl.add_argument('-l', '--language', default=os.getenv('BIP39KIT_LANGUAGE', Constants.DEFAULT_LANGUAGE),
                    help='wordlist language')
    wl.add_argument('-W', '--wordlist-file', help='custom wordlist file, one word per line')

    subparsers = parser.add_subparsers(dest='command')

    p = subparsers.add_parser('generate', parents=[wl], help='random mnemonic')
    p.add_argument('-b', '--bits', type=int, default=Constants.DEFAULT_ENTROPY_BITS,
                   help='entropy bits: 128, 160, 192, 224 or 256')
    p.add_argument('--hex', action='store_true', help='print the compact form as hex')

    p = subparsers.add_parser('entropy-to-mnemonic', parents=[wl], help='encode hex entropy')
    p.add_argument('entropy')

    p = subparsers.add_parser('mnemonic-to-entropy', parents=[wl], help='decode a mnemonic')
    p.add_argument('mnemonic')

    p = subparsers.add_parser('validate', parents=[wl], help='check words and checksum')
    p.add_argument('mnemonic')

    p = subparsers.add_parser('seed', help='derive the 64-byte seed')
    p.add_argument('mnemonic')
    p.add_argument('-p', '--passphrase', default="")

    subparsers.add_parser('languages', help='list wordlist languages')
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        setup_logging(args.log_level)
        return COMMANDS[args.command](args)
    except (ValueError, OSError) as e:
        # MnemonicError, bytes.fromhex, unknown log level, unreadable wordlist file
        print("[bip39kit] ERROR: {}".format(e), file=sys.stderr)
        return 1

if __name__ == '__main__':
    sys.exit(main())
