# -*- coding: utf-8 -*-
"""
aio
~~~

:class:`AsyncScoredSortedSet` is the asyncio counterpart of
:class:`~redis_scored_sets.ScoredSortedSet`. It takes a
:class:`redis.asyncio.Redis` client and every operation is a coroutine:

    >>> board = AsyncScoredSortedSet(redis=redis.asyncio.Redis(), key='lb')
    >>> await board.add(10, 'alice')
    True
    >>> await board.poll_first()
    'alice'

Abandoning an awaited call does not cancel the request on the server.
"""
import logging

import redis.asyncio
from redis.exceptions import RedisError

from . import commands
from .iterators import AsyncScanIterator
from .sortedsets import ScoredSortedSetBase

logger = logging.getLogger(__name__)


class AsyncScoredSortedSet(ScoredSortedSetBase):
    """
    Sorted set collection whose operations are coroutines. See
    :class:`~redis_scored_sets.ScoredSortedSet` for their description.

    Unlike the blocking collection it can't be filled from the constructor,
    use :func:`add_all` instead.
    """

    def __init__(self, redis=None, key=None, pickler=None):
        """
        :param redis: Redis client instance. If not provided, a new
                      :class:`redis.asyncio.Redis` client is created.
        :type redis: :class:`redis.asyncio.Redis`
        :param key: Redis key for the collection.
        :type key: str
        :param pickler: Serializer for members, :mod:`pickle` by default.
        """
        super().__init__(redis=redis, key=key, pickler=pickler)

    def _create_redis(self):
        return redis.asyncio.Redis()

    def _repr_data(self):
        return None

    async def _execute(self, command):
        if isinstance(command, commands.Result):
            return command.finish(command.value)

        logger.debug('%r on %s', command, self.key)
        if isinstance(command, commands.Script):
            script = self._scripts[command.name]
            result = await script(keys=command.keys, args=command.args)
        else:
            method = getattr(self.redis, command.method)
            result = await method(*command.args, **command.kwargs)

        return command.finish(result)

    def __aiter__(self):
        return self.iterator()

    async def copy(self, key=None):
        other = self.__class__(redis=self.redis, key=key, pickler=self.pickler)
        await other.add_all(await self.items())

        return other

    async def update(self, other):
        """
        Update the collection with items from *other*: another
        :class:`AsyncScoredSortedSet`, a blocking sorted set, a mapping of
        members to scores or a sequence of ``(member, score)`` tuples.
        """
        if isinstance(other, AsyncScoredSortedSet):
            other = await other.items()

        await self.add_all(other)

    async def items(self):
        """Return a list of ``(member, score)`` tuples, lowest score first."""
        return await self.entry_range(0, -1)

    def iterator(self, count=None):
        """Return an :class:`.AsyncScanIterator` over the members."""
        return AsyncScanIterator(self, count=count)

    async def remove_all(self, values):
        """
        Remove every one of *values* from the collection. Return ``True`` if
        anything was removed. Chunks are applied one after the other, see
        :func:`redis_scored_sets.ScoredSortedSet.remove_all`.
        """
        chunks = commands.remove_all(self.key, self._pickle_all(values))

        changed = False
        for i, command in enumerate(chunks):
            try:
                changed = await self._execute(command) or changed
            except RedisError as exc:
                if i == 0:
                    raise
                raise self._chunk_failed(exc, changed, i) from exc

        return changed
