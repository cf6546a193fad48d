# -*- coding: utf-8 -*-
"""
iterators
~~~~~~~~~

Lazy iteration over a sorted set with ``ZSCAN``.

An iterator keeps the scan cursor, the batch of members received with it
and the encoded form of the member it returned last. Members are fetched a
batch at a time; the scan is finished once Redis hands back cursor ``0``.

The usual ``SCAN`` guarantees apply: a member present during the whole
scan is returned at least once, members added or removed in the meantime
may or may not be, and an iterator can't be restarted.
"""
import collections

from . import commands

NOT_STARTED = 'not-started'
SCANNING = 'scanning'
EXHAUSTED = 'exhausted'


class BaseScanIterator(object):
    def __init__(self, collection, count=None):
        """
        :param collection: The sorted set to scan.
        :param count: ``COUNT`` hint sent with every ``ZSCAN``.
        :type count: int
        """
        self.collection = collection
        self.count = count
        self.cursor = 0
        self._batch = collections.deque()
        self._started = False
        self._finished = False
        self._current = None

    @property
    def state(self):
        if not self._started:
            return NOT_STARTED
        if self._finished and not self._batch:
            return EXHAUSTED
        return SCANNING

    def _scan_command(self):
        self._started = True
        return commands.scan(self.collection.key, self.cursor, self.count)

    def _receive(self, response):
        cursor, items = response
        self.cursor = int(cursor)
        self._batch.extend(member for member, score in items)
        if self.cursor == 0:
            self._finished = True

    def _take(self):
        self._current = self._batch.popleft()
        return self.collection._unpickle(self._current)

    def _remove_command(self):
        if self._current is None:
            raise RuntimeError(
                'remove() must follow a call to next() and may only be '
                'called once per element'
            )
        member, self._current = self._current, None

        # The encoded bytes are sent back as they came, the member is
        # never re-serialized.
        return commands.remove(self.collection.key, member)


class ScanIterator(BaseScanIterator):
    """Iterator over the members of a :class:`.ScoredSortedSet`.

        >>> it = sorted_set.iterator()
        >>> for member in it:
        ...     if member.startswith('tmp-'):
        ...         it.remove()
    """

    def __iter__(self):
        return self

    def __next__(self):
        while not self._batch:
            if self._finished:
                raise StopIteration
            response = self.collection._execute(self._scan_command())
            self._receive(response)

        return self._take()

    def remove(self):
        """Remove the member returned by the last call to :func:`next`."""
        return self.collection._execute(self._remove_command())


class AsyncScanIterator(BaseScanIterator):
    """Asynchronous iterator over an :class:`.AsyncScoredSortedSet`."""

    def __aiter__(self):
        return self

    async def __anext__(self):
        while not self._batch:
            if self._finished:
                raise StopAsyncIteration
            response = await self.collection._execute(self._scan_command())
            self._receive(response)

        return self._take()

    async def remove(self):
        """Remove the member returned by the last ``__anext__``."""
        return await self.collection._execute(self._remove_command())
