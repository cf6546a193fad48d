# -*- coding: utf-8 -*-
"""
exceptions
~~~~~~~~~~

Errors raised by the collections. Anything coming back from the server as
an error reply is redis-py's :exc:`redis.exceptions.ResponseError`, which is
re-exported here as :exc:`RemoteProtocolError`.
"""
from redis.exceptions import RedisError
from redis.exceptions import ResponseError as RemoteProtocolError


class ScoredSetError(RedisError):
    """Base class for failures reported by or while talking to Redis."""


class EncodingError(ValueError):
    """A member or score could not be serialized for the wire.

    This is a local data error, so it is not a :exc:`RedisError`.
    """


class PartialRemovalError(ScoredSetError):
    """A chunked removal failed after some of its chunks were applied.

    Each chunk runs as one atomic script, but the chunks themselves are
    separate round trips, so the members handled by the first
    :attr:`chunks_done` chunks are already gone. :attr:`changed` tells
    whether any of them actually removed something. The original error is
    available as ``__cause__``.
    """

    def __init__(self, message, changed, chunks_done):
        super().__init__(message)
        self.changed = changed
        self.chunks_done = chunks_done


__all__ = [
    'EncodingError',
    'PartialRemovalError',
    'RemoteProtocolError',
    'ScoredSetError',
]
