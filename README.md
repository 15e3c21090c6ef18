# kilodb

A tiny in-memory key-value server that speaks the Redis serialization
protocol (RESP). It serves one client at a time over plain TCP and keeps all
data in memory for the life of the process.

## Installing

```
pip install .
```

## Running

```
kilodb
kilodb --host 0.0.0.0 --port 6380
```

By default the server listens on `127.0.0.1:6379`, the usual Redis port, so
`redis-cli` or a Redis client library can talk to it. Each read of up to 512
bytes from a client is treated as one request. Stop the server with Ctrl-C.

## Supported commands

| Command | Reply |
|---------|-------|
| `PING` | `+PONG` |
| `ECHO message` | the message as a bulk string |
| `SET key value [EX seconds]` | `+OK` |
| `GET key` | the value as a bulk string, or a null bulk string if absent |
| `DEL key [key ...]` | `+OK` |
| `EXISTS key [key ...]` | the number of the given keys that have a value |
| `EXPIRE key seconds` | `:1` if the key has a value, `:0` otherwise |
| `DBSIZE` | the number of keys |
| `FLUSHDB` | `+OK` |

Command names are case-insensitive. Hash, list, set and sorted-set commands
(`HSET`, `HGET`, `LPUSH`, `LRANGE`, `SADD`, `ZADD` and the rest) are parsed
into command objects but not carried out; the server answers them with a
null bulk string. Unknown commands and commands with the wrong number or
kind of arguments get `-ERR empty command`. Input that is not a RESP array of
bulk strings gets an `-ERR` reply naming the problem, for example
`-ERR Expected RESP Array`.

## What it does not do

- Nothing ever expires with time. `SET ... EX n` and `EXPIRE key n` only
  place the value in a TTL slot numbered `n` (plain `SET` uses slot 86400).
  A slot holds one value; putting a new value in a slot releases the old
  one, and a key whose value was released no longer answers `GET` or
  `EXISTS`, though it still counts towards `DBSIZE` until deleted.
- Nothing is written to disk; all data is lost when the process exits.
- Only one client is served at a time, and there is no authentication.

## Using it as a library

```python
from kilodb.resp import parse_resp_array
from kilodb.command import parse_command
from kilodb.executor import execute_command
from kilodb.store import Context

context = Context()
args = parse_resp_array("*3\r\n$3\r\nSET\r\n$1\r\na\r\n$1\r\nb\r\n")
execute_command(parse_command(args), context)          # b"+OK\r\n"
execute_command(parse_command(["GET", "a"]), context)  # b"$1\r\nb\r\n"
```

- `kilodb.resp.parse_resp_array(text)` returns the bulk strings of a RESP
  array and raises `RespError` (a `ValueError`) on malformed input.
- `kilodb.command.parse_command(args)` returns a frozen dataclass such as
  `Set`, `Get` or `ZAdd`, or `Unknown` if the arguments are not recognised.
- `kilodb.executor.execute_command(command, context)` runs a command and
  returns the RESP reply as bytes.
- `kilodb.store.Context` holds the keyspace, with `lookup`, `put`, `remove`,
  `set_ttl`, `clear` and `size`.
- `kilodb.server.respond(data, context)` turns one raw request into its reply
  bytes, `handle_client(conn, context)` serves one connected socket, and
  `serve(host, port, context)` runs the accept loop.

## Testing

```
pip install .[test]
pytest
```