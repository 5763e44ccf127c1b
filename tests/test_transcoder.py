#! /usr/bin/env python3

import contextlib
import io
import sys
import unittest
from unittest import mock

import keygen
import transcoder

def run(*argv):
    """Returns: tuple of exit status, stdout lines, stderr text"""
    out = io.StringIO()
    err = io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        status = transcoder.Transcoder().main(list(argv))
    return (status, out.getvalue().splitlines(), err.getvalue())

class TestTranscoder(unittest.TestCase):

    def test_defaults(self):
        tool = transcoder.Transcoder()
        self.assertEqual(tool.preset, 'base62ish')
        self.assertEqual(tool.mode, transcoder.MODE_AUTO)
        self.assertIsNone(tool.key)

    def test_encode_with_key(self):
        status, lines, _err = run(
            '-k', '2BjLhRduC6Tb8Q5cEk9oxnFaWUDpOlGAgwYzNre7tI4yqPvXm0KSV1fJs3ZiHM',
            '48888851145')
        self.assertEqual(status, transcoder.EXIT_OK)
        self.assertEqual(lines, ['1FN7Ab'])

    def test_auto_detect(self):
        status, lines, _err = run('-k', 'ab', '8', 'baaa', 'a')
        self.assertEqual(status, transcoder.EXIT_OK)
        self.assertEqual(lines, ['baaa', '8', '0'])

    def test_forced_modes(self):
        key = '0123456789ABCDEF'
        self.assertEqual(run('-k', key, '-d', '10')[1], ['16'])
        self.assertEqual(run('-k', key, '-e', '255')[1], ['FF'])
        self.assertEqual(run('-k', key, 'FF')[1], ['255'])

    def test_default_preset(self):
        status, lines, _err = run('0', str(len(keygen.BASE62ISH)))
        self.assertEqual(status, transcoder.EXIT_OK)
        self.assertEqual(lines, ['A', 'BA'])

    def test_preset_and_secret(self):
        shuffled = keygen.shuffle_key(keygen.LOWERCASE, 'phrase')
        status, lines, _err = run('--preset', 'lowercase',
                                  '--secret', 'phrase', '0')
        self.assertEqual(status, transcoder.EXIT_OK)
        self.assertEqual(lines, [shuffled[0]])

    def test_invalid_key(self):
        for key in ('a', 'aba'):
            status, lines, err = run('-k', key, '1')
            self.assertEqual(status, transcoder.EXIT_INVALID_KEY)
            self.assertEqual(lines, [])
            self.assertIn('error=invalid-key', err)

    def test_failed_values_continue(self):
        status, lines, err = run('-k', '0123456789ABCDEF',
                                 '-d', 'XYZ', '10000000000000000', 'A')
        self.assertEqual(status, transcoder.EXIT_FAILED_VALUE)
        self.assertEqual(lines, ['10'])
        self.assertIn('error=UnknownCharacter value=XYZ', err)
        self.assertIn('error=Overflow value=10000000000000000', err)

    def test_encode_not_an_integer(self):
        status, lines, err = run('-k', 'ab', '-e', 'ab')
        self.assertEqual(status, transcoder.EXIT_FAILED_VALUE)
        self.assertEqual(lines, [])
        self.assertIn('error=ValueError value=ab', err)

    def test_encode_out_of_range(self):
        status, lines, err = run('-k', 'ab', '18446744073709551616')
        self.assertEqual(status, transcoder.EXIT_FAILED_VALUE)
        self.assertIn('error=ValueError', err)

    def test_trailing_newline_is_not_decimal(self):
        status, lines, err = run('-k', 'ab', '12\n')
        self.assertEqual(status, transcoder.EXIT_FAILED_VALUE)
        self.assertEqual(lines, [])
        self.assertIn('error=UnknownCharacter', err)

    def test_console_script(self):
        out = io.StringIO()
        argv = ['squishy-id', '-k', 'ab', '8']
        with mock.patch.object(sys, 'argv', argv), \
             contextlib.redirect_stdout(out):
            status = transcoder.main()
        self.assertEqual(status, transcoder.EXIT_OK)
        self.assertEqual(out.getvalue(), 'baaa\n')

if __name__ == '__main__':
    unittest.main()
