import unittest

from redis_scored_sets import commands
from redis_scored_sets.scripts import SCRIPTS


class CommandsTestCase(unittest.TestCase):
    """The exact arguments sent to Redis for each operation."""

    def test_add(self):
        cmd = commands.add('lb', 10, b'alice')
        self.assertEqual(cmd.method, 'zadd')
        self.assertEqual(cmd.args, ('lb', {b'alice': '10.0'}))
        self.assertEqual(cmd.kwargs, {})
        self.assertIs(cmd.finish(1), True)
        self.assertIs(cmd.finish(0), False)

        cmd = commands.try_add('lb', 1e-05, b'alice')
        self.assertEqual(cmd.args, ('lb', {b'alice': '0.00001'}))
        self.assertEqual(cmd.kwargs, {'nx': True})

    def test_add_all(self):
        cmd = commands.add_all('lb', [(b'a', 1), (b'b', 2.5), (b'a', 3)])
        self.assertEqual(cmd.args, ('lb', {b'a': '3.0', b'b': '2.5'}))

        cmd = commands.add_all('lb', [])
        self.assertIsInstance(cmd, commands.Result)
        self.assertEqual(cmd.finish(cmd.value), 0)

    def test_add_score(self):
        cmd = commands.add_score('lb', b'alice', 5)
        self.assertEqual(cmd.method, 'zincrby')
        self.assertEqual(cmd.args, ('lb', '5.0', b'alice'))

    def test_remove_ranges(self):
        cmd = commands.remove_range_by_rank('lb', 0, -2)
        self.assertEqual(cmd.method, 'zremrangebyrank')
        self.assertEqual(cmd.args, ('lb', 0, -2))

        cmd = commands.remove_range_by_score('lb', 1, False, float('inf'), True)
        self.assertEqual(cmd.method, 'zremrangebyscore')
        self.assertEqual(cmd.args, ('lb', '(1.0', '+inf'))

    def test_count(self):
        cmd = commands.count('lb', float('-inf'), True, 2, False)
        self.assertEqual(cmd.method, 'zcount')
        self.assertEqual(cmd.args, ('lb', '-inf', '(2.0'))

    def test_rank_range(self):
        cmd = commands.rank_range('lb', 0, -1)
        self.assertEqual(cmd.method, 'zrange')
        self.assertEqual(cmd.args, ('lb', 0, -1))
        self.assertEqual(cmd.kwargs, {'withscores': False})

        cmd = commands.rank_range('lb', 0, 1, withscores=True, reverse=True)
        self.assertEqual(cmd.method, 'zrevrange')
        self.assertEqual(cmd.kwargs, {'withscores': True})

    def test_score_range(self):
        cmd = commands.score_range('lb', 10, True, 20, False)
        self.assertEqual(cmd.method, 'zrangebyscore')
        self.assertEqual(cmd.args, ('lb', '10.0', '(20.0'))
        self.assertEqual(cmd.kwargs, {'withscores': False})

        cmd = commands.score_range(
            'lb', 10, True, 20, False, offset=5, count=2, withscores=True
        )
        self.assertEqual(
            cmd.kwargs, {'withscores': True, 'start': 5, 'num': 2}
        )

    def test_score_range_reverse(self):
        # The reverse command takes max before min
        cmd = commands.score_range('lb', 10, True, 20, False, reverse=True)
        self.assertEqual(cmd.method, 'zrevrangebyscore')
        self.assertEqual(cmd.args, ('lb', '(20.0', '10.0'))

    def test_score_range_limit_needs_both(self):
        with self.assertRaises(ValueError):
            commands.score_range('lb', 0, True, 1, True, offset=1)

        with self.assertRaises(ValueError):
            commands.score_range('lb', 0, True, 1, True, count=1)

    def test_scan(self):
        cmd = commands.scan('lb', 17, count=100)
        self.assertEqual(cmd.method, 'zscan')
        self.assertEqual(cmd.args, ('lb', 17))
        self.assertEqual(cmd.kwargs, {'count': 100})

    def test_poll(self):
        cmd = commands.poll('lb', -1)
        self.assertIsInstance(cmd, commands.Script)
        self.assertEqual(cmd.name, 'poll')
        self.assertEqual(cmd.keys, ['lb'])
        self.assertEqual(cmd.args, [-1, -1])

    def test_contains_all(self):
        cmd = commands.contains_all('lb', [])
        self.assertIsInstance(cmd, commands.Result)
        self.assertIs(cmd.finish(cmd.value), True)

        cmd = commands.contains_all('lb', [b'a', b'b'])
        self.assertEqual(cmd.name, 'contains_all')
        self.assertEqual(cmd.args, [b'a', b'b'])
        self.assertIs(cmd.finish(0), False)

    def test_remove_all_chunks(self):
        self.assertEqual(commands.remove_all('lb', []), [])

        members = [str(i).encode() for i in range(10001)]
        chunks = commands.remove_all('lb', members)
        self.assertEqual([len(c.args) for c in chunks], [5000, 5000, 1])
        self.assertEqual(chunks[2].args, [b'10000'])
        self.assertTrue(all(c.keys == ['lb'] for c in chunks))

        # Nil reply from a false Lua boolean
        self.assertIs(chunks[0].finish(None), False)
        self.assertIs(chunks[0].finish(1), True)

    def test_scripts_registered(self):
        for name in ('poll', 'contains_all', 'remove_all', 'retain_all'):
            self.assertIn(name, SCRIPTS)

        script = commands.retain_all('lb', [b'a'])
        self.assertEqual(script.name, 'retain_all')

    def test_retain_all_empty(self):
        cmd = commands.retain_all('lb', [])
        self.assertIsInstance(cmd, commands.Result)
        self.assertIs(cmd.finish(cmd.value), False)

    def test_then(self):
        cmd = commands.size('lb').then(lambda n: n + 1).then(str)
        self.assertEqual(cmd.finish(1), '2')

    def test_key_level(self):
        self.assertEqual(commands.delete('lb').method, 'delete')
        self.assertEqual(commands.expire('lb', 10).args, ('lb', 10))
        self.assertEqual(commands.expire_at('lb', 100).method, 'expireat')
        self.assertEqual(commands.persist('lb').method, 'persist')
        self.assertEqual(commands.pttl('lb').method, 'pttl')
