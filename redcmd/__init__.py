"""Build Redis command argument lists for keys, data types, ACL, geo, streams and RedisJSON."""

__version__ = "0.1.0"

__all__ = [
    "command",
    "keyspace",
    "strings",
    "hashes",
    "lists",
    "sets",
    "sorted_sets",
    "acl",
    "geo",
    "streams",
    "json_commands",
]