# -*- coding: utf-8 -*-
"""
RedisScoredSetsFactory
"""
import redis

from .sortedsets import ScoredSortedSet


class RedisScoredSetsFactory(redis.Redis):
    """
    This class factory exposes the redis-py methods
    along with the sorted set collections.
    Collections require a key name and use the factory itself as their
    redis connection.

    Examples:

    my_redis = RedisScoredSetsFactory.from_url("redis://x:x@host.com/dbname")

    board = my_redis.ScoredSortedSet("leaderboard", {"alice": 10}, ...)

    you still can use redis native:

    my_redis.zcard("leaderboard")

    """

    def ScoredSortedSet(self, key, *args, **kwargs):
        kwargs.update({"key": key, "redis": self})
        return ScoredSortedSet(*args, **kwargs)
