#! /usr/bin/env python3

"""Squishy ID command-line interface

Encode integers to short IDs and decode them back, for scripting and
for checking a key before deploying it.

    squishy-id 48888851145
    squishy-id --preset alphanumeric --secret 'our phrase' 1234567890
    squishy-id -k 0123456789ABCDEF -d FF

"""

import argparse
import re
import sys

import keygen
from squishyid import Codec, InvalidKey

DEFAULT_PRESET = 'base62ish'

MODE_AUTO = 'auto'
MODE_ENCODE = 'encode'
MODE_DECODE = 'decode'

EXIT_OK = 0
EXIT_FAILED_VALUE = 1
EXIT_INVALID_KEY = 2

class Transcoder:

    __slots__ = ('key', 'preset', 'secret', 'mode', 'values', 'codec')

    decimal_re = re.compile(r'^[0-9]+\Z')

    def __init__(self):
        # See also .configure() when changing these values:
        self.key = None         # explicit key wins over preset
        self.preset = DEFAULT_PRESET
        self.secret = None
        self.mode = MODE_AUTO
        self.values = []
        self.codec = None

    def main(self, argv=None):
        """Returns: exit status"""
        self.configure(argv)
        try:
            self.codec = Codec(self.make_key())
        except InvalidKey as err:
            print("error=invalid-key reason={}".format(err), file=sys.stderr)
            return EXIT_INVALID_KEY

        status = EXIT_OK
        for value in self.values:
            try:
                print(self.transcode(value))
            except ValueError as err: # includes DecodeError
                print("error={} value={} reason={}"
                      .format(type(err).__name__, value, err), file=sys.stderr)
                status = EXIT_FAILED_VALUE

        return status

    def configure(self, argv=None):
        args = self.parse_args(argv)
        # See also .__init__() when changing these values:
        self.key = args.key
        self.preset = args.preset
        self.secret = args.secret
        self.mode = args.mode
        self.values = args.values

    def parse_args(self, argv=None):
        parser = argparse.ArgumentParser(
            prog='squishy-id',
            description="Encode integers as short IDs over a custom key,"
            " and decode them back",
            epilog='Values made only of decimal digits are encoded,'
            ' anything else is decoded, unless -e or -d is given.')
        parser.add_argument('-k', '--key', dest='key',
                            default=self.key,
                            help='Characters to use as digits;'
                            ' at least 2, all unique')
        parser.add_argument('--preset', dest='preset',
                            default=self.preset,
                            choices=sorted(keygen.PRESETS),
                            help='Ready-made key, used when -k is omitted')
        parser.add_argument('--secret', dest='secret',
                            default=self.secret,
                            help='Shuffle the key deterministically'
                            ' with this phrase')
        group = parser.add_mutually_exclusive_group()
        group.add_argument('-e', '--encode', dest='mode',
                           action='store_const', const=MODE_ENCODE,
                           default=self.mode,
                           help='Treat every value as an integer to encode')
        group.add_argument('-d', '--decode', dest='mode',
                           action='store_const', const=MODE_DECODE,
                           help='Treat every value as an ID to decode')
        parser.add_argument('values', nargs='+',
                            help='Integers to encode or IDs to decode')
        args = parser.parse_args(argv)
        return args

    def make_key(self):
        """Returns: key from -k or preset, shuffled when secret given"""
        key = self.key if self.key is not None else keygen.PRESETS[self.preset]
        if self.secret:
            key = keygen.shuffle_key(key, self.secret)
        return key

    def transcode(self, value):
        """Encode or decode VALUE according to mode.
        Returns: result as string
        """
        mode = self.mode
        if mode == MODE_AUTO:
            if self.decimal_re.match(value) is None:
                mode = MODE_DECODE
            else:
                mode = MODE_ENCODE

        if mode == MODE_ENCODE:
            return self.codec.encode(int(value, 10))
        return str(self.codec.decode(value))

def main():
    return Transcoder().main()

if __name__ == '__main__':
    sys.exit(main())
