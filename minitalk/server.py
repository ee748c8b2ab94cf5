"""Receive messages sent as signals and write their bytes to an output stream."""

import os
import signal
import sys
from typing import BinaryIO, List, Optional

from minitalk.printf import printf
from minitalk.protocol import BitDecoder

_SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)


class SignalServer:
    """Turns SIGUSR1 (1) and SIGUSR2 (0) into bytes written to ``output``."""

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self._decoder = BitDecoder()

    def handle(self, signum: int, frame=None) -> None:
        """Signal handler: take one bit and write the byte once it is complete."""
        byte = self._decoder.feed(1 if signum == signal.SIGUSR1 else 0)
        if byte is not None:
            self.output.write(bytes([byte]))
            self.output.flush()

    def serve_forever(self) -> None:
        """Handle signals until interrupted; the previous handlers are restored on exit."""
        previous = {signum: signal.signal(signum, self.handle) for signum in _SIGNALS}
        try:
            while True:
                signal.pause()
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)


def main(argv: Optional[List[str]] = None) -> int:
    """Command entry point: print the process id and serve until interrupted."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        printf("Error: Wrong format \nTry ./server\n")
        return 0
    printf("PID %d\n", os.getpid())
    printf("Waiting for Message...\n")
    sys.stdout.flush()
    server = SignalServer()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())