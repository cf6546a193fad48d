# -*- coding: utf-8 -*-
"""
scores
~~~~~~

Conversion of scores to the text Redis expects in score arguments and
range boundaries.

Scores are written in plain decimal notation (``0.00001``, never ``1e-05``)
using the shortest digits that round-trip the float, so no precision is
lost. The infinities become ``+inf`` and ``-inf``, and an exclusive range
boundary is prefixed with ``(``.
"""
from decimal import Decimal
import math
from numbers import Real

from .exceptions import EncodingError

POSITIVE_INFINITY = '+inf'
NEGATIVE_INFINITY = '-inf'
EXCLUSIVE_MARKER = '('


def encode_score(score):
    """Return *score* as canonical plain decimal text.

    :param score: Any real number. :class:`decimal.Decimal` values are
                  written exactly, everything else goes through
                  :class:`float`.
    :rtype: str
    """
    if isinstance(score, bool) or not isinstance(score, (Real, Decimal)):
        raise EncodingError('Score must be a real number: {!r}'.format(score))

    if isinstance(score, Decimal):
        if score.is_nan():
            raise EncodingError('Score must not be NaN')
        if score.is_infinite():
            return NEGATIVE_INFINITY if score < 0 else POSITIVE_INFINITY
        return format(score, 'f')

    try:
        score = float(score)
    except OverflowError as exc:
        raise EncodingError('Score is out of range: {!r}'.format(score)) from exc

    if math.isnan(score):
        raise EncodingError('Score must not be NaN')
    if math.isinf(score):
        return NEGATIVE_INFINITY if score < 0 else POSITIVE_INFINITY

    # repr() gives the shortest round-tripping digits, Decimal drops the
    # exponent form.
    return format(Decimal(repr(score)), 'f')


def encode_boundary(score, inclusive=True):
    """Return *score* as a range boundary, marked exclusive if needed."""
    text = encode_score(score)
    if not inclusive:
        return EXCLUSIVE_MARKER + text
    return text


def decode_score(text):
    """Parse score text (or a range boundary) back into a :class:`float`."""
    if isinstance(text, bytes):
        text = text.decode('ascii')
    text = text.strip()
    if text.startswith(EXCLUSIVE_MARKER):
        text = text[1:]

    return float(text)
