from decimal import Decimal
import unittest

from redis_scored_sets import EncodingError
from redis_scored_sets.scores import decode_score, encode_boundary, encode_score


class ScoreCodecTestCase(unittest.TestCase):

    def test_encode_score(self):
        self.assertEqual(encode_score(10), '10.0')
        self.assertEqual(encode_score(-2.5), '-2.5')
        self.assertEqual(encode_score(0.1), '0.1')
        self.assertEqual(encode_score(Decimal('1.50')), '1.50')

    def test_no_scientific_notation(self):
        self.assertEqual(encode_score(1e-05), '0.00001')
        self.assertEqual(encode_score(1e20), '100000000000000000000')
        self.assertEqual(encode_score(1.5e-7), '0.00000015')
        self.assertNotIn('e', encode_score(2.0 ** 70).lower())

    def test_infinity(self):
        self.assertEqual(encode_score(float('inf')), '+inf')
        self.assertEqual(encode_score(float('-inf')), '-inf')
        self.assertEqual(encode_score(Decimal('-Infinity')), '-inf')

        self.assertEqual(decode_score('+inf'), float('inf'))
        self.assertEqual(decode_score(b'-inf'), float('-inf'))

    def test_round_trip(self):
        scores = [
            0.0, 1.0, -1.0, 0.1, 1 / 3, 2.0 ** 70, 1e-300, 123456789.123456,
            5e-324, float('inf'), float('-inf'),
        ]
        for s in scores:
            text = encode_score(s)
            self.assertEqual(encode_score(decode_score(text)), text)
            self.assertEqual(decode_score(text), s)

    def test_encode_boundary(self):
        self.assertEqual(encode_boundary(1.5), '1.5')
        self.assertEqual(encode_boundary(1.5, inclusive=True), '1.5')
        self.assertEqual(encode_boundary(1.5, inclusive=False), '(1.5')
        self.assertEqual(encode_boundary(float('-inf'), False), '(-inf')

        self.assertEqual(decode_score('(1.5'), 1.5)

    def test_invalid(self):
        with self.assertRaises(EncodingError):
            encode_score(float('nan'))

        with self.assertRaises(EncodingError):
            encode_score(Decimal('NaN'))

        with self.assertRaises(EncodingError):
            encode_score('10')

        with self.assertRaises(EncodingError):
            encode_score(True)

        # EncodingError is still a ValueError
        with self.assertRaises(ValueError):
            encode_score(None)
