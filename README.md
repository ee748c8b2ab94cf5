# minitalk

This package provides a small pair of programs that pass messages between
processes with signals. It runs on POSIX systems. The server prints its
process id and then waits. The client sends a text message to that process
one bit per signal:

- `SIGUSR1` carries a 1.
- `SIGUSR2` carries a 0.

The client encodes the message as UTF-8. Each byte goes out as eight bits,
most significant bit first. The server collects every eight bits into one
byte and writes that byte to standard output. It flushes after each byte.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal:

```
$ minitalk-server
PID 41237
Waiting for Message...
```

The server takes no arguments. If you pass any, it prints
`Error: Wrong format` followed by `Try ./server` and exits with status 0. It
keeps serving until you interrupt it with Ctrl-C. When it stops, it puts back
the signal handlers that were installed before it started.

Send a message from another terminal:

```
$ minitalk-client 41237 "hello there"
```

The client exits with one of these statuses:

- **0**: the message was sent. The client also exits with 0, and sends
  nothing, if the number of arguments is not exactly two.
- **1**: the process id is not valid. It must be made of decimal digits
  only and must be a positive number.
- **1**: sending a signal failed, for example because there is no such
  process. The error is printed to standard error.

After each signal the client waits 0.5 ms, which is `DEFAULT_DELAY` in
`minitalk.client`.

## Limitations

- The client treats each byte as a signed char. A byte with its high bit set,
  which includes every byte of a non-ASCII UTF-8 character, is sent as eight
  zero bits. The server receives a NUL byte in its place.
- The server sends nothing back. The client cannot tell whether a signal
  arrived.
- Signals that arrive close together may be merged by the operating system,
  and then the bits fall out of step.

## Library

You can use the wire format without sending any signals:

```python
from minitalk.protocol import BitDecoder, decode_bits, encode_byte, encode_message

bits = encode_message("hi")          # 16 bits, most significant first
assert decode_bits(bits) == b"hi"
assert encode_byte(ord("A")) == (0, 1, 0, 0, 0, 0, 0, 1)

decoder = BitDecoder()
received = [decoder.feed(bit) for bit in bits[:8]]
assert received[-1] == ord("h")      # feed returns the byte on every eighth bit
```

`decode_bits` drops an incomplete final byte.

The sending and receiving sides can be driven from Python:

- `minitalk.client.parse_pid(text)` checks and converts a process id.
- `minitalk.client.send_message(pid, message, delay)` signals a message to a
  process.
- `minitalk.server.SignalServer(output)` writes the bytes it receives to a
  binary stream. Its `handle(signum, frame)` method is the signal handler, and
  `serve_forever()` installs that handler and waits.

The package also includes some small helper modules:

- `minitalk.chars`: ASCII character classes and case mapping (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`).
- `minitalk.memory`: byte-buffer helpers (`memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`).
- `minitalk.numbers`: `atoi` and `itoa` for 32-bit C ints.
- `minitalk.strings`: C-style string routines. These are `strlen`, `strchr`,
  `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `strdup`, `substr`,
  `strjoin`, `strtrim`, `split`, `strmapi` and `striteri`.
- `minitalk.linkedlist`: a singly linked `LinkedList` of `Node`s.
- `minitalk.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to any text stream.
- `minitalk.printf`: `format_string` and `printf`, which support
  `%c %s %p %d %i %u %x %X %%`.

## Running the tests

```
pip install ".[test]"
pytest
```