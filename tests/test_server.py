import socket
import threading
import time

import pytest

from kilodb.resp import parse_resp_array
from kilodb.server import handle_client, respond, serve
from kilodb.store import Context


def _encode(*args: str) -> bytes:
    parts = [f"*{len(args)}\r\n"]
    for arg in args:
        parts.append(f"${len(arg.encode())}\r\n{arg}\r\n")
    return "".join(parts).encode()


def _bulk_value(reply: bytes) -> str:
    return parse_resp_array("*1\r\n" + reply.decode("utf-8"))[0]


@pytest.fixture
def context():
    return Context()


def test_respond_ping(context):
    assert respond(_encode("PING"), context) == b"+PONG\r\n"


def test_respond_set_get_round_trip(context):
    assert respond(_encode("SET", "k", "value"), context) == b"+OK\r\n"
    assert _bulk_value(respond(_encode("GET", "k"), context)) == "value"


def test_respond_parse_error(context):
    assert respond(b"PING\r\n", context) == b"-ERR Expected RESP Array\r\n"


def test_respond_length_mismatch(context):
    reply = respond(b"*1\r\n$3\r\nPING\r\n", context)
    assert reply == b"-ERR Bulk string length mismatch\r\n"


def test_respond_unknown_command(context):
    assert respond(_encode("NOSUCH"), context) == b"-ERR empty command\r\n"


def test_respond_empty_array(context):
    assert respond(b"*0\r\n", context) == b"-ERR empty command\r\n"


def test_respond_unsupported_command_is_nil(context):
    assert respond(_encode("LPOP", "l"), context) == b"$-1\r\n"


def test_respond_invalid_utf8_is_tolerated(context):
    reply = respond(b"\xff\xfe", context)
    assert reply.startswith(b"-ERR ")


def test_handle_client_serves_until_close(context):
    server_side, client_side = socket.socketpair()
    worker = threading.Thread(target=handle_client, args=(server_side, context))
    worker.start()
    try:
        client_side.sendall(_encode("SET", "a", "b"))
        assert client_side.recv(512) == b"+OK\r\n"
        client_side.sendall(_encode("GET", "a"))
        assert _bulk_value(client_side.recv(512)) == "b"
    finally:
        client_side.close()
        worker.join(timeout=5)
    assert not worker.is_alive()
    assert context.lookup("a").value == "b"


def _free_port() -> int:
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_serve_answers_clients(context):
    port = _free_port()
    threading.Thread(target=serve, args=("127.0.0.1", port, context), daemon=True).start()

    deadline = time.monotonic() + 5
    while True:
        try:
            client = socket.create_connection(("127.0.0.1", port), timeout=5)
            break
        except OSError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.05)

    with client:
        client.sendall(_encode("ECHO", "hi there"))
        assert _bulk_value(client.recv(512)) == "hi there"
        client.sendall(_encode("DBSIZE"))
        assert client.recv(512) == b":0\r\n"