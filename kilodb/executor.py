"""Execution of parsed commands against the server context."""

from __future__ import annotations

from kilodb.command import (
    Command,
    DbSize,
    Del,
    Echo,
    Exists,
    Expire,
    FlushDb,
    Get,
    Ping,
    Set,
)
from kilodb.store import DEFAULT_TTL, Context, StringStore

OK = b"+OK\r\n"
PONG = b"+PONG\r\n"
NIL = b"$-1\r\n"
NOT_A_STRING = b"-ERR value is not a string\r\n"


def _bulk(text: str) -> bytes:
    payload = text.encode("utf-8", errors="surrogatepass")
    return b"$%d\r\n" % len(payload) + payload + b"\r\n"


def _integer(value: int) -> bytes:
    return b":%d\r\n" % value


def execute_command(command: Command, context: Context) -> bytes:
    """Run command against context and return the RESP-encoded reply.

    Commands that are parsed but not supported reply with a nil bulk string.
    """
    match command:
        case Set(key=key, value=value, ttl=ttl):
            context.put(key, StringStore(value), DEFAULT_TTL if ttl is None else ttl)
            return OK

        case Get(key=key):
            stored = context.lookup(key)
            if stored is None:
                return NIL
            if isinstance(stored, StringStore):
                return _bulk(stored.value)
            return NOT_A_STRING

        case Del(keys=keys):
            for key in keys:
                context.remove(key)
            return OK

        case Exists(keys=keys):
            return _integer(sum(context.lookup(key) is not None for key in keys))

        case Expire(key=key, seconds=seconds):
            stored = context.lookup(key)
            if stored is None:
                return _integer(0)
            context.set_ttl(seconds, stored)
            return _integer(1)

        case FlushDb():
            context.clear()
            return OK

        case DbSize():
            return _integer(context.size())

        case Echo(message=message):
            return _bulk(message)

        case Ping():
            return PONG

        case _:
            return NIL