"""Command objects and their parsing from a client's argument list."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional, Union

_U64_MAX = 2**64 - 1
_ISIZE_MIN = -(2**63)
_ISIZE_MAX = 2**63 - 1


@dataclass(frozen=True)
class Set:
    key: str
    value: str
    ttl: Optional[int] = None


@dataclass(frozen=True)
class Get:
    key: str


@dataclass(frozen=True)
class Del:
    keys: tuple[str, ...]


@dataclass(frozen=True)
class Exists:
    keys: tuple[str, ...]


@dataclass(frozen=True)
class Expire:
    key: str
    seconds: int


@dataclass(frozen=True)
class HSet:
    key: str
    fields: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class HGet:
    key: str
    field: str


@dataclass(frozen=True)
class HGetAll:
    key: str


@dataclass(frozen=True)
class HDel:
    key: str
    fields: tuple[str, ...]


@dataclass(frozen=True)
class HExists:
    key: str
    field: str


@dataclass(frozen=True)
class LPush:
    key: str
    values: tuple[str, ...]


@dataclass(frozen=True)
class RPush:
    key: str
    values: tuple[str, ...]


@dataclass(frozen=True)
class LPop:
    key: str


@dataclass(frozen=True)
class RPop:
    key: str


@dataclass(frozen=True)
class LRange:
    key: str
    start: int
    stop: int


@dataclass(frozen=True)
class SAdd:
    key: str
    members: tuple[str, ...]


@dataclass(frozen=True)
class SRem:
    key: str
    members: tuple[str, ...]


@dataclass(frozen=True)
class SMembers:
    key: str


@dataclass(frozen=True)
class SIsMember:
    key: str
    member: str


@dataclass(frozen=True)
class ZAdd:
    key: str
    entries: tuple[tuple[float, str], ...]


@dataclass(frozen=True)
class ZRem:
    key: str
    members: tuple[str, ...]


@dataclass(frozen=True)
class ZRange:
    key: str
    start: int
    stop: int


@dataclass(frozen=True)
class Ping:
    pass


@dataclass(frozen=True)
class Echo:
    message: str


@dataclass(frozen=True)
class FlushDb:
    pass


@dataclass(frozen=True)
class DbSize:
    pass


@dataclass(frozen=True)
class Unknown:
    raw: tuple[str, ...]


Command = Union[
    Set, Get, Del, Exists, Expire,
    HSet, HGet, HGetAll, HDel, HExists,
    LPush, RPush, LPop, RPop, LRange,
    SAdd, SRem, SMembers, SIsMember,
    ZAdd, ZRem, ZRange,
    Ping, Echo, FlushDb, DbSize, Unknown,
]


def _parse_unsigned(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not (digits and digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= _U64_MAX else None


def _parse_signed_or_zero(text: str) -> int:
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits and digits.isascii() and digits.isdigit()):
        return 0
    value = int(text)
    return value if _ISIZE_MIN <= value <= _ISIZE_MAX else 0


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _pairs(items: Sequence[str]) -> list[tuple[str, str]]:
    it = iter(items)
    return list(zip(it, it))


def _set(args: Sequence[str]) -> Command | None:
    if len(args) == 3:
        return Set(args[1], args[2])
    if len(args) == 5 and args[3].upper() == "EX":
        ttl = _parse_unsigned(args[4])
        return None if ttl is None else Set(args[1], args[2], ttl)
    return None


def _expire(args: Sequence[str]) -> Command | None:
    if len(args) != 3:
        return None
    seconds = _parse_unsigned(args[2])
    return None if seconds is None else Expire(args[1], seconds)


def _hset(args: Sequence[str]) -> Command | None:
    if len(args) < 4 or len(args) % 2:
        return None
    return HSet(args[1], tuple(_pairs(args[2:])))


def _zadd(args: Sequence[str]) -> Command | None:
    if len(args) < 4 or len(args) % 2:
        return None
    entries = []
    for score_text, member in _pairs(args[2:]):
        score = _parse_float(score_text)
        if score is None:
            return None
        entries.append((score, member))
    return ZAdd(args[1], tuple(entries))


def _exact(n: int, build: Callable[[Sequence[str]], Command]) -> Callable[[Sequence[str]], Command | None]:
    return lambda args: build(args) if len(args) == n else None


def _at_least(n: int, build: Callable[[Sequence[str]], Command]) -> Callable[[Sequence[str]], Command | None]:
    return lambda args: build(args) if len(args) >= n else None


_PARSERS: dict[str, Callable[[Sequence[str]], Command | None]] = {
    "SET": _set,
    "GET": _exact(2, lambda a: Get(a[1])),
    "DEL": _at_least(2, lambda a: Del(tuple(a[1:]))),
    "EXISTS": _at_least(2, lambda a: Exists(tuple(a[1:]))),
    "EXPIRE": _expire,
    "HSET": _hset,
    "HGET": _exact(3, lambda a: HGet(a[1], a[2])),
    "HGETALL": _exact(2, lambda a: HGetAll(a[1])),
    "HDEL": _at_least(3, lambda a: HDel(a[1], tuple(a[2:]))),
    "HEXISTS": _exact(3, lambda a: HExists(a[1], a[2])),
    "LPUSH": _at_least(3, lambda a: LPush(a[1], tuple(a[2:]))),
    "RPUSH": _at_least(3, lambda a: RPush(a[1], tuple(a[2:]))),
    "LPOP": _exact(2, lambda a: LPop(a[1])),
    "RPOP": _exact(2, lambda a: RPop(a[1])),
    "LRANGE": _exact(
        4, lambda a: LRange(a[1], _parse_signed_or_zero(a[2]), _parse_signed_or_zero(a[3]))
    ),
    "SADD": _at_least(3, lambda a: SAdd(a[1], tuple(a[2:]))),
    "SREM": _at_least(3, lambda a: SRem(a[1], tuple(a[2:]))),
    "SMEMBERS": _exact(2, lambda a: SMembers(a[1])),
    "SISMEMBER": _exact(3, lambda a: SIsMember(a[1], a[2])),
    "ZADD": _zadd,
    "ZREM": _at_least(3, lambda a: ZRem(a[1], tuple(a[2:]))),
    "ZRANGE": _exact(
        4, lambda a: ZRange(a[1], _parse_signed_or_zero(a[2]), _parse_signed_or_zero(a[3]))
    ),
    "PING": lambda a: Ping(),
    "ECHO": _exact(2, lambda a: Echo(a[1])),
    "FLUSHDB": lambda a: FlushDb(),
    "DBSIZE": lambda a: DbSize(),
}


def parse_command(args: Sequence[str]) -> Command:
    """Build a command from its arguments; Unknown if it is not recognised or malformed."""
    if not args:
        return Unknown(())
    parser = _PARSERS.get(args[0].upper())
    command = parser(args) if parser is not None else None
    return command if command is not None else Unknown(tuple(args))