# redcmd

`redcmd` builds Redis commands as lists of byte-string arguments. Every
helper returns a `Command` (from `redcmd.command`); its `to_redis_args()`
gives the exact arguments to send, command name first. Nothing here opens
a connection: you hand the arguments to whatever client or socket code you
use, or compare them in your own tests.

The package has no runtime dependencies and supports Python 3.10 and later.

## Building commands

```python
from redcmd.command import cmd
from redcmd.keyspace import get, set, get_ex, Expiry

set("my_key", 42).to_redis_args()
# [b"SET", b"my_key", b"42"]

get(["a", "b"]).to_redis_args()
# [b"MGET", b"a", b"b"]        several keys turn GET into MGET

get_ex("k", Expiry.ex(10)).to_redis_args()
# [b"GETEX", b"k", b"EX", b"10"]

cmd("PING").arg("hello").to_redis_args()
# [b"PING", b"hello"]
```

`Command.arg()` appends and returns the command, so calls chain.
`Command.cursor_arg()` adds a scan cursor, readable back through the
`cursor` property; a command may carry only one.

### How values become arguments

`redcmd.command.to_redis_args(value)` does the conversion:

- `None` adds nothing (so optional counts can be passed straight through);
- `bool` becomes `b"1"` or `b"0"`;
- `str` is UTF-8 encoded, `bytes`-like values pass through;
- `int` is written in decimal, `float` as its `repr`;
- objects with a `to_redis_args()` method supply their own arguments;
- dictionaries are flattened to key, value, key, value …;
- tuples, lists and sets are flattened item by item.

Anything else raises `TypeError`. `is_single_arg(value)` tells whether a
value stands for one argument; `is_float(value)` decides between the
integer and float variants of increment commands (`incr`, `hincr`);
`is_readonly_command(name)` tells whether a command only reads data.

## Command groups

| Module                 | Commands                                                     |
|------------------------|--------------------------------------------------------------|
| `redcmd.keyspace`      | GET/MGET, SET, MSET, SETEX, EXPIRE, GETEX, DEL (`delete`), RENAME, OBJECT, SCAN |
| `redcmd.strings`       | APPEND, INCRBY/INCRBYFLOAT, DECRBY, SETBIT, BITCOUNT, BITOP, PFADD/PFCOUNT/PFMERGE, PUBLISH |
| `redcmd.hashes`        | HGET/HMGET, HSET, HSETNX, HMSET, HINCRBY/HINCRBYFLOAT, HGETALL, HSCAN |
| `redcmd.lists`         | LPUSH, RPOP, LPOS, LMOVE, BLMOVE, LMPOP, BLMPOP …, with `Direction` and `LposOptions` |
| `redcmd.sets`          | SADD, SINTER, SUNIONSTORE, SRANDMEMBER, SSCAN …              |
| `redcmd.sorted_sets`   | ZADD, ZRANGEBYSCORE, ZINTERSTORE/ZUNIONSTORE with AGGREGATE and WEIGHTS, ZMPOP, ZSCAN … |
| `redcmd.acl`           | ACL LOAD, SAVE, SETUSER, DELUSER, GENPASS, LOG …             |
| `redcmd.geo`           | GEOADD, GEODIST, GEOHASH, GEOPOS, GEORADIUS, GEORADIUSBYMEMBER |
| `redcmd.streams`       | XADD, XREAD, XRANGE, XREVRANGE, XGROUP, XINFO, XPENDING, XCLAIM … |
| `redcmd.json_commands` | JSON.SET, JSON.GET/JSON.MGET, JSON.ARRAPPEND, JSON.ARRINDEX … |

`keyspace.set_multiple` is kept as an older name for `mset` and emits a
`DeprecationWarning`.

## Options objects

Option setters return a new object, leaving the original unchanged.

```python
from redcmd.lists import Direction, LposOptions, lmove, lpos
from redcmd.geo import RadiusOptions, RadiusOrder, Unit, geo_radius

lpos("mylist", "x", LposOptions().count(2).rank(-1)).to_redis_args()
# [b"LPOS", b"mylist", b"x", b"COUNT", b"2", b"RANK", b"-1"]

lmove("src", "dst", Direction.LEFT, Direction.RIGHT).to_redis_args()
# [b"LMOVE", b"src", b"dst", b"LEFT", b"RIGHT"]

opts = RadiusOptions().order(RadiusOrder.ASC).limit(10).with_dist()
opts.to_redis_args()
# [b"WITHDIST", b"COUNT", b"10", b"ASC"]
geo_radius("my_gis", 15.9, 37.21, 51.39, Unit.KILOMETERS, opts)
```

`lpop` and `rpop` take an optional count that must be positive; negative
counts and limits in `LposOptions` and `RadiusOptions` raise `ValueError`.

## RedisJSON values

The helpers in `redcmd.json_commands` serialise their values as compact
JSON (`{"item":42}`). Values JSON cannot hold raise `TypeError`, and NaN
or infinite floats raise `ValueError`. `json_get` sends `JSON.MGET` when
given several keys.

## Reading geo replies

`redcmd.geo.Coord.from_value(reply)` reads a two-item GEOPOS position
(floats by default, or through a converter you pass), and
`RadiusSearchResult.from_value(reply)` reads a GEORADIUS item that is
either a bare name or `[name, dist?, coord?]`. Both raise `TypeError`
when the reply has the wrong shape.

## What it does not do

`redcmd` only builds arguments. It has no client: it does not connect to
a server, encode the wire protocol, send commands, run pipelines or
transactions, or subscribe to channels. The scan helpers build the first
call (cursor 0) only; following the cursor is left to the caller. Apart
from the geo reply readers above, it does not parse replies.

## Tests

The test suite lives in `tests/` and runs under pytest; install the
`test` extra to get it.