#! /usr/bin/env python3

"""Shorten and obfuscate integer IDs at the same time.

A Codec converts unsigned 64-bit integers into strings made exclusively
of characters from a caller-supplied key, and back.  The longer the
key, the shorter the encoded ID.  Each character of the key is one
digit of a positional notation whose base is the length of the key.

    >>> codec = Codec('2BjLhRduC6Tb8Q5cEk9oxnFaWUDpOlGAgwYzNre7tI4yqPvXm0KSV1fJs3ZiHM')
    >>> codec.encode(48888851145)
    '1FN7Ab'
    >>> codec.decode('1FN7Ab')
    48888851145

This is NOT encryption: the key is easy to reverse engineer given a
small number of encoded/decoded samples.  Treat it as fast obfuscation.
"""

import types

U64_MAX = 2**64 - 1

class SquishyIdError(ValueError):
    """Common base for every failure raised by this module"""

class InvalidKey(SquishyIdError):
    pass

class TooShort(InvalidKey):

    def __init__(self):
        super().__init__('Key must contain at least 2 characters.')

class DuplicateCharacter(InvalidKey):

    def __init__(self, character, position):
        super().__init__('Key must contain unique characters.')
        self.character = character
        self.position = position

class DecodeError(SquishyIdError):
    pass

class EmptyInput(DecodeError):

    def __init__(self):
        super().__init__('Encoded value must contain at least 1 character.')

class UnknownCharacter(DecodeError):

    def __init__(self, character, position):
        super().__init__('Encoded value contains character not present in key.')
        self.character = character
        self.position = position

class Overflow(DecodeError):

    def __init__(self, text):
        super().__init__('Encoded value too big to decode.')
        self.text = text

class Codec:
    """Bidirectional mapping between integers and strings over KEY.

    Immutable after construction, so one instance may be shared by any
    number of readers.
    """

    __slots__ = ('_key', '_base', '_symbol_of_index', '_index_of_symbol')

    def __init__(self, key):
        """Validate KEY and build lookup tables.
        May raise TooShort or DuplicateCharacter (both InvalidKey)"""
        if not isinstance(key, str):
            raise TypeError('Key must be a string, not {}'
                            .format(type(key).__name__))
        symbols = tuple(key)
        if len(symbols) < 2:
            raise TooShort()

        inverted = {}
        for index, char in enumerate(symbols):
            if char in inverted:
                raise DuplicateCharacter(char, index)
            inverted[char] = index

        self._key = key
        self._base = len(symbols)
        self._symbol_of_index = symbols
        self._index_of_symbol = types.MappingProxyType(inverted)

    @property
    def key(self):
        return self._key

    @property
    def base(self):
        return self._base

    @property
    def symbol_of_index(self):
        return self._symbol_of_index

    @property
    def index_of_symbol(self):
        return self._index_of_symbol

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._key)

    def __eq__(self, other):
        if not isinstance(other, Codec):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def encode(self, integer):
        """Returns INTEGER encoded as string of key characters.
        Never fails for values within unsigned 64-bit range."""
        if not isinstance(integer, int) or isinstance(integer, bool):
            raise TypeError('Value must be an integer, not {}'
                            .format(type(integer).__name__))
        if not 0 <= integer <= U64_MAX:
            raise ValueError('Value must be within 0..{}'.format(U64_MAX))

        if integer == 0:
            return self._symbol_of_index[0]
        digits = []
        while integer != 0:
            integer, remainder = divmod(integer, self._base)
            digits.append(self._symbol_of_index[remainder])

        return ''.join(reversed(digits))

    def decode(self, encoded_string):
        """Returns ENCODED_STRING interpreted as an integer.
        May raise EmptyInput, UnknownCharacter or Overflow (all DecodeError)"""
        if not isinstance(encoded_string, str):
            raise TypeError('Encoded value must be a string, not {}'
                            .format(type(encoded_string).__name__))
        if encoded_string == '':
            raise EmptyInput()

        # Python integers never wrap, so every intermediate result is
        # compared against the 64-bit ceiling before being used further.
        last = len(encoded_string) - 1
        integer = 0
        power = 1
        for position, char in enumerate(reversed(encoded_string)):
            digit = self._index_of_symbol.get(char)
            if digit is None:
                raise UnknownCharacter(char, last - position)
            if position > 0:
                power *= self._base
                if power > U64_MAX:
                    raise Overflow(encoded_string)
            term = digit * power
            if term > U64_MAX:
                raise Overflow(encoded_string)
            integer += term
            if integer > U64_MAX:
                raise Overflow(encoded_string)

        return integer
