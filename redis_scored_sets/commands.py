# -*- coding: utf-8 -*-
"""
commands
~~~~~~~~

Descriptions of the requests sent to Redis, one builder per command.

A builder never talks to the server. It returns a :class:`Command` (one
redis-py client method call), a :class:`Script` (one evaluation of a script
from :mod:`.scripts`) or a :class:`Result` (an answer known without a round
trip). Collections hand these to their ``_execute`` method, which is the
only place where requests are actually made, so the blocking and the
asyncio collections share every builder.

Members are expected to be encoded already; scores are encoded here with
:mod:`.scores`.
"""
from .scores import encode_boundary, encode_score

#: Largest number of members sent to a single ``remove_all`` script call.
REMOVE_ALL_CHUNK_SIZE = 5000


class Command(object):
    """A call of the redis-py client method named *method*."""

    def __init__(self, method, *args, **kwargs):
        self.method = method
        self.args = args
        self.kwargs = kwargs
        self.callback = None

    def then(self, fn):
        """Chain *fn* after the current result callback and return self."""
        previous = self.callback
        if previous is None:
            self.callback = fn
        else:
            self.callback = lambda result: fn(previous(result))

        return self

    def finish(self, result):
        """Apply the result callbacks to the raw *result*."""
        if self.callback is None:
            return result

        return self.callback(result)

    def __repr__(self):
        return '<{} {} {!r}>'.format(
            self.__class__.__name__, self.method, self.args
        )


class Script(Command):
    """An evaluation of the script registered under *name*."""

    def __init__(self, name, keys, args):
        super().__init__('evalsha')
        self.name = name
        self.keys = list(keys)
        self.args = list(args)

    def __repr__(self):
        return '<Script {} keys={!r} args={}>'.format(
            self.name, self.keys, len(self.args)
        )


class Result(Command):
    """A result that is known without asking the server."""

    def __init__(self, value):
        super().__init__(None)
        self.value = value


# Writes


def add(key, score, member):
    return Command('zadd', key, {member: encode_score(score)}).then(bool)


def try_add(key, score, member):
    return Command(
        'zadd', key, {member: encode_score(score)}, nx=True
    ).then(bool)


def add_all(key, pairs):
    """
    *pairs* is a sequence of ``(encoded_member, score)`` tuples. A member
    listed more than once keeps its last score.
    """
    mapping = {member: encode_score(score) for member, score in pairs}
    if not mapping:
        return Result(0)

    return Command('zadd', key, mapping)


def add_score(key, member, delta):
    return Command('zincrby', key, encode_score(delta), member)


def remove(key, member):
    return Command('zrem', key, member).then(bool)


def remove_range_by_rank(key, start, end):
    return Command('zremrangebyrank', key, start, end)


def remove_range_by_score(key, start, start_inclusive, end, end_inclusive):
    return Command(
        'zremrangebyscore',
        key,
        encode_boundary(start, start_inclusive),
        encode_boundary(end, end_inclusive),
    )


# Reads


def size(key):
    return Command('zcard', key)


def count(key, start, start_inclusive, end, end_inclusive):
    return Command(
        'zcount',
        key,
        encode_boundary(start, start_inclusive),
        encode_boundary(end, end_inclusive),
    )


def score(key, member):
    return Command('zscore', key, member)


def rank(key, member):
    return Command('zrank', key, member)


def rev_rank(key, member):
    return Command('zrevrank', key, member)


def rank_range(key, start, end, withscores=False, reverse=False):
    """
    Members ranked *start* to *end*, both inclusive; negative ranks count
    from the highest score, so ``end=-1`` means the last member. With
    *reverse* the ranks are counted from the highest score instead.
    """
    method = 'zrevrange' if reverse else 'zrange'
    return Command(method, key, start, end, withscores=withscores)


def score_range(
    key,
    start,
    start_inclusive,
    end,
    end_inclusive,
    offset=None,
    count=None,
    withscores=False,
    reverse=False,
):
    """
    Members scored between *start* and *end*. *offset* and *count* add a
    ``LIMIT`` clause and must be given together.

    With *reverse* the members come highest score first. ``ZREVRANGEBYSCORE``
    takes its boundaries as ``max min``, so they are swapped here; *start*
    is still the low end of the range.
    """
    if (offset is None) != (count is None):
        raise ValueError('offset and count must be given together')

    low = encode_boundary(start, start_inclusive)
    high = encode_boundary(end, end_inclusive)

    kwargs = {'withscores': withscores}
    if offset is not None:
        kwargs['start'] = offset
        kwargs['num'] = count

    if reverse:
        return Command('zrevrangebyscore', key, high, low, **kwargs)

    return Command('zrangebyscore', key, low, high, **kwargs)


def scan(key, cursor, count=None):
    return Command('zscan', key, cursor, count=count)


# Scripts


def poll(key, index):
    return Script('poll', [key], [index, index])


def contains_all(key, members):
    if not members:
        return Result(True)

    return Script('contains_all', [key], members).then(bool)


def remove_all(key, members):
    """
    Return the list of scripts removing *members*, one per chunk of at most
    :data:`REMOVE_ALL_CHUNK_SIZE` members. An empty list means there is
    nothing to do.
    """
    return [
        Script(
            'remove_all', [key], members[i:i + REMOVE_ALL_CHUNK_SIZE]
        ).then(bool)
        for i in range(0, len(members), REMOVE_ALL_CHUNK_SIZE)
    ]


def retain_all(key, members):
    if not members:
        return Result(False)

    return Script('retain_all', [key], members).then(bool)


# Key level


def delete(key):
    return Command('delete', key).then(bool)


def expire(key, seconds):
    return Command('expire', key, seconds).then(bool)


def expire_at(key, when):
    return Command('expireat', key, when).then(bool)


def persist(key):
    return Command('persist', key).then(bool)


def pttl(key):
    return Command('pttl', key)
