__title__ = 'redis-scored-sets'
__version__ = '0.1.0'
__author__ = 'Honza Javorek'
__license__ = 'ISC'
__copyright__ = 'Copyright 2013-? Honza Javorek'


from .aio import AsyncScoredSortedSet
from .base import RedisCollection
from .exceptions import (
    EncodingError,
    PartialRemovalError,
    RemoteProtocolError,
    ScoredSetError,
)
from .factory import RedisScoredSetsFactory
from .iterators import AsyncScanIterator, ScanIterator
from .scores import decode_score, encode_boundary, encode_score
from .sortedsets import ScoredSortedSet

__all__ = [
    'AsyncScanIterator',
    'AsyncScoredSortedSet',
    'EncodingError',
    'PartialRemovalError',
    'RedisCollection',
    'RedisScoredSetsFactory',
    'RemoteProtocolError',
    'ScanIterator',
    'ScoredSetError',
    'ScoredSortedSet',
    'decode_score',
    'encode_boundary',
    'encode_score',
]
