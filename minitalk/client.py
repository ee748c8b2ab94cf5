"""Send a message to a server process one bit at a time, as signals."""

import os
import signal
import sys
import time
from typing import List, Optional

from minitalk.numbers import atoi
from minitalk.protocol import Message, encode_message

DEFAULT_DELAY = 0.0005


def parse_pid(text: str) -> int:
    """Parse a process id given as decimal digits only.

    Raises ``ValueError`` for any other character, for an empty string and
    for a value that does not name a single process.
    """
    if not text or not all("0" <= ch <= "9" for ch in text):
        raise ValueError(f"invalid process id: {text!r}")
    pid = atoi(text)
    if pid <= 0:
        raise ValueError(f"invalid process id: {text!r}")
    return pid


def send_message(pid: int, message: Message, delay: float = DEFAULT_DELAY) -> None:
    """Signal every bit of ``message`` to ``pid``, pausing ``delay`` seconds after each."""
    for bit in encode_message(message):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)


def main(argv: Optional[List[str]] = None) -> int:
    """Command entry point: ``client PID MESSAGE``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        return 0
    try:
        pid = parse_pid(args[0])
    except ValueError:
        return 1
    try:
        send_message(pid, args[1])
    except OSError as exc:
        print(f"client: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())