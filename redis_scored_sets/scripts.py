# -*- coding: utf-8 -*-
"""
scripts
~~~~~~~

Lua scripts for the operations that read and then modify the sorted set.
Each one runs as a single ``EVALSHA`` so no other client can slip in
between the read and the write.

``KEYS[1]`` is always the sorted set. The script bodies are part of the
wire format: changing one means bumping :data:`SCRIPT_VERSION`.
"""

SCRIPT_VERSION = 1

# ARGV[1], ARGV[2]: the rank to pop (0 for the lowest score, -1 for the
# highest), given twice as a range.
POLL = """
local v = redis.call('zrange', KEYS[1], ARGV[1], ARGV[2])
if v[1] ~= nil then
    redis.call('zremrangebyrank', KEYS[1], ARGV[1], ARGV[2])
    return v[1]
end
return nil
"""

# ARGV: encoded candidates. Returns 1 if every one of them is a member.
CONTAINS_ALL = """
for i = 1, #ARGV, 1 do
    if redis.call('zscore', KEYS[1], ARGV[i]) == false then
        return 0
    end
end
return 1
"""

# ARGV: encoded members to remove. Returns true if anything was removed.
REMOVE_ALL = """
local unpack = unpack or table.unpack
local v = 0
for i = 1, #ARGV, 5000 do
    v = v + redis.call('zrem', KEYS[1], unpack(ARGV, i, math.min(i + 4999, #ARGV)))
end
return v > 0
"""

# ARGV: encoded members to keep. Returns 1 if anything was removed.
RETAIN_ALL = """
local keep = {}
for i = 1, #ARGV, 1 do
    keep[ARGV[i]] = true
end
local changed = 0
local s = redis.call('zrange', KEYS[1], 0, -1)
for i = 1, #s, 1 do
    if not keep[s[i]] then
        redis.call('zrem', KEYS[1], s[i])
        changed = 1
    end
end
return changed
"""

SCRIPTS = {
    'poll': POLL,
    'contains_all': CONTAINS_ALL,
    'remove_all': REMOVE_ALL,
    'retain_all': RETAIN_ALL,
}
