import io
import os
import signal
from unittest.mock import patch

import pytest

from minitalk.protocol import encode_message
from minitalk.server import SignalServer, main


def _signal_for(bit):
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def test_handle_writes_complete_bytes():
    out = io.BytesIO()
    server = SignalServer(out)
    for bit in encode_message("hello"):
        server.handle(_signal_for(bit), None)
    assert out.getvalue() == b"hello"


def test_handle_holds_partial_byte():
    out = io.BytesIO()
    server = SignalServer(out)
    for bit in encode_message("x")[:7]:
        server.handle(_signal_for(bit), None)
    assert out.getvalue() == b""


def test_serve_forever_receives_signals_and_restores_handlers():
    out = io.BytesIO()
    server = SignalServer(out)
    before = [signal.getsignal(s) for s in (signal.SIGUSR1, signal.SIGUSR2)]
    bits = encode_message("hi")

    def deliver():
        for bit in bits:
            signal.raise_signal(_signal_for(bit))
        raise KeyboardInterrupt

    with patch("signal.pause", side_effect=deliver):
        with pytest.raises(KeyboardInterrupt):
            server.serve_forever()
    assert out.getvalue() == b"hi"
    assert [signal.getsignal(s) for s in (signal.SIGUSR1, signal.SIGUSR2)] == before


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 0
    assert capsys.readouterr().out == "Error: Wrong format \nTry ./server\n"


def test_main_prints_pid_and_stops_on_interrupt(capsys):
    with patch("signal.pause", side_effect=KeyboardInterrupt):
        assert main([]) == 0
    assert capsys.readouterr().out == f"PID {os.getpid()}\nWaiting for Message...\n"