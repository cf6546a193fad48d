#!/usr/bin/env python
# -*- coding: utf-8 -*-
import unittest
import redis_scored_sets as rss


class RedisScoredSetsFactoryTest(unittest.TestCase):

    def test_factory(self):
        factory = rss.RedisScoredSetsFactory.from_url("redis://")
        board = factory.ScoredSortedSet('leaderboard')

        self.assertIsInstance(board, rss.ScoredSortedSet)
        self.assertEqual(board.key, 'leaderboard')
        self.assertIs(board.redis, factory)


if __name__ == '__main__':
    unittest.main()
