#! /usr/bin/env python3

"""Ready-made keys, and deterministic shuffling of a key by a secret.

Choose key characters for where encoded IDs will travel:

 - SMS, URLs: ALPHANUMERIC gives excellent shortening,
   e.g., 1234567890 becomes 6 characters.
 - Manually typed: BASE62ISH avoids visually similar "Il1" and "O0".
 - Case-insensitive file systems (NTFS): LOWERCASE.
 - Trolling: EMOJI.

A published preset is trivial to guess, so shuffle it with a secret
phrase to get a key unique to one deployment.
"""

import string

import cityhash

from squishyid import Codec

ALPHANUMERIC = string.digits + string.ascii_uppercase + string.ascii_lowercase
LOWERCASE = string.ascii_lowercase
BASE62ISH = 'ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz23456789'
EMOJI = ''.join(chr(code_point) for code_point in range(0x1F600, 0x1F638))

PRESETS = {
    'alphanumeric': ALPHANUMERIC,
    'lowercase': LOWERCASE,
    'base62ish': BASE62ISH,
    'emoji': EMOJI,
}

def shuffle_key(key, secret):
    """Returns KEY with its characters permuted deterministically by SECRET.
    May raise InvalidKey for KEY, or ValueError for empty SECRET"""
    if not secret:
        raise ValueError('Secret must not be empty')
    codec = Codec(key)
    ranked = sorted(codec.symbol_of_index,
                    key=lambda char: (cityhash.CityHash64(secret + char), char))
    return ''.join(ranked)
