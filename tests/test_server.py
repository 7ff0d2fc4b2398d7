import io
import signal

from minitalk.protocol import ACK_SIGNAL, BIT_SIGNALS, encode_bits
from minitalk.server import Server


class _Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, pid, sig):
        self.calls.append((pid, sig))


def _feed(server, text, terminate=False, pid=4242):
    for bit in encode_bits(text, terminate):
        server.handle(BIT_SIGNALS[bit], pid)


def test_plain_server_writes_message():
    out = io.BytesIO()
    server = Server(out=out, notify=_Recorder())
    _feed(server, "hello")
    assert out.getvalue() == b"hello"


def test_partial_byte_is_not_written():
    out = io.BytesIO()
    server = Server(out=out)
    for bit in list(encode_bits("x"))[:5]:
        server.handle(BIT_SIGNALS[bit], 1)
    assert out.getvalue() == b""


def test_plain_server_never_acknowledges():
    out = io.BytesIO()
    recorder = _Recorder()
    server = Server(out=out, acknowledge=False, notify=recorder)
    _feed(server, "hi", terminate=True)
    assert recorder.calls == []
    assert out.getvalue() == b"hi\0"


def test_acknowledging_server_signals_sender_on_nul():
    out = io.BytesIO()
    recorder = _Recorder()
    server = Server(out=out, acknowledge=True, notify=recorder)
    _feed(server, "hi", terminate=True, pid=777)
    assert recorder.calls == [(777, ACK_SIGNAL)]
    assert out.getvalue() == b"hi\0"


def test_acknowledgement_needs_sender_pid():
    recorder = _Recorder()
    server = Server(out=io.BytesIO(), acknowledge=True, notify=recorder)
    _feed(server, "", terminate=True, pid=0)
    assert recorder.calls == []


def test_two_messages_acknowledged_separately():
    out = io.BytesIO()
    recorder = _Recorder()
    server = Server(out=out, acknowledge=True, notify=recorder)
    _feed(server, "a", terminate=True, pid=10)
    _feed(server, "b", terminate=True, pid=20)
    assert recorder.calls == [(10, ACK_SIGNAL), (20, ACK_SIGNAL)]
    assert out.getvalue() == b"a\0b\0"


def test_unrelated_signal_is_ignored():
    out = io.BytesIO()
    server = Server(out=out)
    bits = list(encode_bits("ok"))
    for index, bit in enumerate(bits):
        if index == 3:
            server.handle(signal.SIGINT, 1)
        server.handle(BIT_SIGNALS[bit], 1)
    assert out.getvalue() == b"ok"


def test_utf8_message_round_trips():
    out = io.BytesIO()
    server = Server(out=out)
    _feed(server, "\u00e7a va")
    assert out.getvalue().decode("utf-8") == "\u00e7a va"