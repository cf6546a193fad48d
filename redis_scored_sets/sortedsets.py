# -*- coding: utf-8 -*-
"""
sortedsets
~~~~~~~~~~

The `sortedsets` module contains collections based on the
Redis `Sorted Set <https://redis.io/commands#sorted_set>`__ type.

:class:`ScoredSortedSet` blocks until Redis answers;
:class:`~redis_scored_sets.aio.AsyncScoredSortedSet` offers the same
operations as coroutines. Both build their requests with
:mod:`~redis_scored_sets.commands`.

"""
from redis.exceptions import RedisError

from . import commands
from .base import RedisCollection
from .iterators import ScanIterator


class ScoredSortedSetBase(RedisCollection):
    """
    Operations shared by the blocking and the asyncio sorted sets. Every
    method returns ``self._execute(...)``, which is either the result or,
    for the asyncio collection, an awaitable of it.
    """

    # Result decoders

    def _value(self, results):
        return self._unpickle(results[0]) if results else None

    def _values(self, results):
        return [self._unpickle(member) for member in results]

    def _entries(self, results):
        return [(self._unpickle(member), score) for member, score in results]

    def _pairs(self, other):
        if hasattr(other, 'items'):
            other = other.items()

        return [(self._pickle(member), score) for member, score in other]

    # Writes

    def add(self, score, member):
        """
        Add *member* with *score*, or update its score if it's already
        present. Return ``True`` if *member* was not present before.
        """
        return self._execute(
            commands.add(self.key, score, self._pickle(member))
        )

    def try_add(self, score, member):
        """
        Add *member* with *score* only if it's not present yet. Return
        ``True`` if it was added.
        """
        return self._execute(
            commands.try_add(self.key, score, self._pickle(member))
        )

    def add_all(self, other):
        """
        Add the members of *other*, a mapping of members to scores or a
        sequence of ``(member, score)`` tuples. Return the number of members
        that were not present before.
        """
        return self._execute(commands.add_all(self.key, self._pairs(other)))

    def add_score(self, member, delta):
        """
        Adjust the score of *member* by *delta* and return the new score.
        If *member* is not in the collection it is stored with a score of
        *delta*.
        """
        return self._execute(
            commands.add_score(self.key, self._pickle(member), delta)
        )

    def remove(self, member):
        """Remove *member*. Return ``True`` if it was present."""
        return self._execute(commands.remove(self.key, self._pickle(member)))

    def remove_range_by_rank(self, start, end):
        """
        Remove the members ranked *start* to *end* (inclusive, negative
        ranks count from the end) and return how many were removed.
        """
        return self._execute(
            commands.remove_range_by_rank(self.key, start, end)
        )

    def remove_range_by_score(self, start, start_inclusive, end, end_inclusive):
        """
        Remove the members whose score is between *start* and *end*.
        Each boundary is included only if its ``*_inclusive`` flag is set.
        """
        return self._execute(
            commands.remove_range_by_score(
                self.key, start, start_inclusive, end, end_inclusive
            )
        )

    def poll_first(self):
        """
        Remove and return the member with the lowest score, or ``None`` if
        the collection is empty.
        """
        return self._execute(commands.poll(self.key, 0).then(self._unpickle))

    def poll_last(self):
        """
        Remove and return the member with the highest score, or ``None`` if
        the collection is empty.
        """
        return self._execute(commands.poll(self.key, -1).then(self._unpickle))

    def retain_all(self, values):
        """
        Remove every member that is not in *values*. Return ``True`` if the
        collection changed. An empty *values* changes nothing and returns
        ``False`` without a round trip.
        """
        return self._execute(
            commands.retain_all(self.key, self._pickle_all(values))
        )

    def update(self, other):
        """
        Update the collection with items from *other*. Accepts other
        sorted sets, dictionaries mapping members to numeric scores, or
        sequences of ``(member, score)`` tuples.
        """
        return self._execute(
            commands.add_all(self.key, self._pairs(other)).then(lambda r: None)
        )

    # Reads

    def size(self):
        """Return the number of members in the collection."""
        return self._execute(commands.size(self.key))

    def is_empty(self):
        return self._execute(commands.size(self.key).then(lambda n: n == 0))

    def contains(self, member):
        """Return ``True`` if *member* is present, else ``False``."""
        return self._execute(
            commands.score(self.key, self._pickle(member)).then(
                lambda score: score is not None
            )
        )

    def contains_all(self, values):
        """Return ``True`` if every one of *values* is present."""
        return self._execute(
            commands.contains_all(self.key, self._pickle_all(values))
        )

    def get_score(self, member):
        """
        Return the score of *member*, or ``None`` if it is not in the
        collection.
        """
        return self._execute(commands.score(self.key, self._pickle(member)))

    def rank(self, member):
        """
        Return the rank of *member* in the collection, or ``None`` if it's
        not present. The member with the lowest score has rank 0.
        """
        return self._execute(commands.rank(self.key, self._pickle(member)))

    def rev_rank(self, member):
        """
        Return the rank of *member* counted from the highest score, or
        ``None`` if it's not present.
        """
        return self._execute(commands.rev_rank(self.key, self._pickle(member)))

    def first(self):
        """Return the member with the lowest score, or ``None``."""
        return self._execute(
            commands.rank_range(self.key, 0, 0).then(self._value)
        )

    def last(self):
        """Return the member with the highest score, or ``None``."""
        return self._execute(
            commands.rank_range(self.key, -1, -1).then(self._value)
        )

    def count(self, start, start_inclusive, end, end_inclusive):
        """Return the number of members scored between *start* and *end*."""
        return self._execute(
            commands.count(
                self.key, start, start_inclusive, end, end_inclusive
            )
        )

    def value_range(self, start, end, reverse=False):
        """
        Return the members ranked *start* to *end* (both inclusive).
        Negative ranks count from the end, so ``value_range(0, -1)`` returns
        everything. With *reverse*, ranks are counted from the highest
        score and members are returned highest score first.
        """
        return self._execute(
            commands.rank_range(self.key, start, end, reverse=reverse).then(
                self._values
            )
        )

    def entry_range(self, start, end, reverse=False):
        """
        Like :func:`value_range`, but return ``(member, score)`` tuples.
        """
        return self._execute(
            commands.rank_range(
                self.key, start, end, withscores=True, reverse=reverse
            ).then(self._entries)
        )

    def value_range_by_score(
        self,
        start,
        start_inclusive,
        end,
        end_inclusive,
        offset=None,
        count=None,
        reverse=False,
    ):
        """
        Return the members whose score is between *start* and *end*, each
        boundary included only if its ``*_inclusive`` flag is set. Use
        ``float('-inf')`` and ``float('inf')`` for open ends.

        *offset* and *count* page through the matching members and must be
        given together. With *reverse*, members come highest score first
        (*start* remains the low end of the range).
        """
        return self._execute(
            commands.score_range(
                self.key,
                start,
                start_inclusive,
                end,
                end_inclusive,
                offset=offset,
                count=count,
                reverse=reverse,
            ).then(self._values)
        )

    def entry_range_by_score(
        self,
        start,
        start_inclusive,
        end,
        end_inclusive,
        offset=None,
        count=None,
        reverse=False,
    ):
        """
        Like :func:`value_range_by_score`, but return ``(member, score)``
        tuples.
        """
        return self._execute(
            commands.score_range(
                self.key,
                start,
                start_inclusive,
                end,
                end_inclusive,
                offset=offset,
                count=count,
                withscores=True,
                reverse=reverse,
            ).then(self._entries)
        )

    def read_all(self):
        """Return a list of all members, lowest score first."""
        return self.value_range(0, -1)


class ScoredSortedSet(ScoredSortedSetBase):
    """
    :class:`ScoredSortedSet` is a collection based on the Redis
    `Sorted Set <http://redis.io/topics/data-types#sorted-sets>`_ type.
    Instances map a unique set of ``member`` objects to floating point
    ``score`` values.

        >>> board = ScoredSortedSet(key='lb')
        >>> board.add_all({'alice': 10, 'bob': 20, 'carol': 15})
        3
        >>> board.first(), board.last()
        ('alice', 'bob')
        >>> board.value_range(0, -1)
        ['alice', 'carol', 'bob']

    Members with equal scores are ordered by their serialized bytes.

    Operations that read and then modify the collection
    (:func:`poll_first`, :func:`poll_last`, :func:`remove_all`,
    :func:`retain_all`) run as Lua scripts, so concurrent clients never see
    them half done.

    .. note::
        Equal numeric types are distinct members: ``1`` and ``1.0``
        serialize differently.
    """

    def __init__(self, *args, **kwargs):
        """
        Create a new ScoredSortedSet object.

        If the first argument (*data*) is a mapping or an iterable of
        ``(member, score)`` tuples, add its items to the collection.

        :param data: Initial data.
        :type data: iterable or mapping
        :param redis: Redis client instance. If not provided, default Redis
                      connection is used.
        :type redis: :class:`redis.StrictRedis`
        :param key: Redis key for the collection. Collections with the same key
                    point to the same data. If not provided, a random
                    string is generated.
        :type key: str
        :param pickler: Serializer for members, :mod:`pickle` by default.
        """
        data = args[0] if args else kwargs.pop('data', None)

        super().__init__(**kwargs)

        if data:
            self.update(data)

    def _repr_data(self):
        items = ('{}: {}'.format(repr(k), repr(v)) for k, v in self.items())
        return '{{{}}}'.format(', '.join(items))

    # Magic methods

    def __contains__(self, member):
        """Return ``True`` if *member* is present, else ``False``."""
        return self.contains(member)

    def __iter__(self):
        """
        Return a :class:`.ScanIterator` over the members of the collection.
        """
        return self.iterator()

    def __len__(self):
        """Return the number of members in the collection."""
        return self.size()

    # Named methods

    def copy(self, key=None):
        other = self.__class__(redis=self.redis, key=key, pickler=self.pickler)
        other.update(self)

        return other

    def items(self):
        """Return a list of ``(member, score)`` tuples, lowest score first."""
        return self.entry_range(0, -1)

    def iterator(self, count=None):
        """
        Return an iterator over the members that fetches them from Redis in
        batches. *count* is passed to ``ZSCAN`` as a batch size hint.

        .. warning::
            This iterator may return the same member multiple times if the
            collection changes while it's being scanned.
            See the `Redis SCAN documentation
            <http://redis.io/commands/scan#scan-guarantees>`_ for details.
        """
        return ScanIterator(self, count=count)

    def remove_all(self, values):
        """
        Remove every one of *values* from the collection. Return ``True`` if
        anything was removed.

        Members are sent in chunks of
        :data:`~redis_scored_sets.commands.REMOVE_ALL_CHUNK_SIZE`. Each chunk
        is removed atomically, but if a later chunk fails the earlier ones
        stay applied and :exc:`.PartialRemovalError` is raised.
        """
        chunks = commands.remove_all(self.key, self._pickle_all(values))

        changed = False
        for i, command in enumerate(chunks):
            try:
                changed = self._execute(command) or changed
            except RedisError as exc:
                if i == 0:
                    raise
                raise self._chunk_failed(exc, changed, i) from exc

        return changed
