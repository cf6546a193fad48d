# -*- coding: utf-8 -*-
"""
base
~~~~
"""
import abc
import logging
import pickle
import uuid

import redis

from . import commands
from .exceptions import EncodingError, PartialRemovalError
from .scripts import SCRIPTS

logger = logging.getLogger(__name__)


class RedisCollection(metaclass=abc.ABCMeta):
    """Abstract class providing backend functionality for the Redis
    collections.
    """

    @abc.abstractmethod
    def __init__(self, redis=None, key=None, pickler=None):
        """
        :param redis: Redis client instance. If not provided, a new Redis
                      connection is created.
        :type redis: :class:`redis.StrictRedis`
        :param key: The key at which the collection will be stored in Redis.
                    Collections with the same key point to the same data.
                    If not provided a random key is generated.
        :type key: str
        :param pickler: Implementation of data serialization. Object with two
                        methods is expected: :func:`dumps` for conversion
                        of data to bytes and :func:`loads` for the opposite
                        direction. Default serialization implementation uses
                        :mod:`pickle`.
        """
        #: Redis client instance. :class:`StrictRedis` object with default
        #: connection settings is used if not set by :func:`__init__`.
        self.redis = redis or self._create_redis()

        #: Redis key of the collection.
        self.key = key or self._create_key()

        #: Class or module implementing pickling.
        self.pickler = pickler or pickle

        # register_script only computes the SHA; the body is sent to the
        # server on the first NOSCRIPT reply.
        self._scripts = {
            name: self.redis.register_script(body)
            for name, body in SCRIPTS.items()
        }

    def _create_redis(self):
        """
        Creates a new Redis connection when none is specified during
        initialization.

        :rtype: :class:`redis.StrictRedis`
        """
        return redis.StrictRedis()

    def _create_key(self):
        """
        Creates a random Redis key for storing this collection's data.

        :rtype: string

        .. note::
            :func:`uuid.uuid4` is used. If you are not satisfied with its
            `collision
            probability <http://stackoverflow.com/a/786541/325365>`_,
            make your own implementation by subclassing and overriding this
            method.
        """
        return uuid.uuid4().hex

    def _pickle(self, data):
        """Converts given data to a bytes string.

        :param data: Data to be serialized.
        :type data: anything serializable
        :rtype: bytes
        """
        try:
            return self.pickler.dumps(data)
        except Exception as exc:
            raise EncodingError(
                'Cannot serialize {!r}: {}'.format(data, exc)
            ) from exc

    def _pickle_all(self, values):
        return [self._pickle(v) for v in values]

    def _unpickle(self, pickled_data):
        """Convert *pickled_data* to a Python object and return it.

        :param pickled_data: Serialized data.
        :type pickled_data: bytes
        :rtype: anything serializable
        """
        return self.pickler.loads(pickled_data) if pickled_data else None

    def _execute(self, command):
        """Send *command* to Redis and return its decoded result.

        :param command: A request built by :mod:`.commands`.
        :type command: :class:`.commands.Command`
        """
        if isinstance(command, commands.Result):
            return command.finish(command.value)

        logger.debug('%r on %s', command, self.key)
        if isinstance(command, commands.Script):
            script = self._scripts[command.name]
            result = script(keys=command.keys, args=command.args)
        else:
            method = getattr(self.redis, command.method)
            result = method(*command.args, **command.kwargs)

        return command.finish(result)

    def _chunk_failed(self, exc, changed, chunks_done):
        logger.warning(
            'Chunked removal on %s failed after %d applied chunk(s): %s',
            self.key,
            chunks_done,
            exc,
        )
        return PartialRemovalError(
            'Removal failed after {} chunk(s) were applied'.format(
                chunks_done
            ),
            changed,
            chunks_done,
        )

    # Key level operations

    def delete(self):
        """Delete the collection's key. Return ``True`` if it existed."""
        return self._execute(commands.delete(self.key))

    def clear(self):
        """Remove all members from the collection."""
        return self._execute(commands.delete(self.key).then(lambda r: None))

    def expire(self, seconds):
        """
        Make the collection expire after *seconds* (an :class:`int` or a
        :class:`datetime.timedelta`). Return ``False`` if the key does not
        exist.
        """
        return self._execute(commands.expire(self.key, seconds))

    def expire_at(self, when):
        """
        Make the collection expire at *when* (a Unix timestamp or a
        :class:`datetime.datetime`).
        """
        return self._execute(commands.expire_at(self.key, when))

    def clear_expire(self):
        """Remove any pending expiration. Return ``True`` if one was set."""
        return self._execute(commands.persist(self.key))

    def remain_time_to_live(self):
        """
        Return the time to live of the collection in milliseconds, ``-1`` if
        it never expires or ``-2`` if the key does not exist.
        """
        return self._execute(commands.pttl(self.key))

    @abc.abstractmethod
    def _repr_data(self):
        """
        Abstract method for subclasses to implement.
        Return a string appropriate for displaying the contents of the
        collection, or ``None`` to leave them out. Called by __repr__.
        """

    def __repr__(self):
        cls_name = self.__class__.__name__
        data = self._repr_data()
        if data is None:
            return '<redis_scored_sets.%s at %s>' % (cls_name, self.key)
        return '<redis_scored_sets.%s at %s %s>' % (cls_name, self.key, data)
