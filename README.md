# sigtalk

`sigtalk` sends a text message from one process to another on the same
machine using only two signals. Each byte goes as eight bits, most
significant first: `SIGUSR1` carries a 0 and `SIGUSR2` carries a 1. For
every bit the server answers the sender with `SIGUSR1`, and the client waits
for that answer before it sends the next bit.

The programs use `signal.pthread_sigmask`, `signal.sigwait` and
`signal.sigwaitinfo`, so they need a platform that provides all three, such
as Linux.

## Installing

```
pip install .
```

The tests need pytest: `pip install .[test]`.

## Running

Start the server in one terminal. It prints its process id and then writes
every byte it receives to standard output as soon as the byte is complete:

```
sigtalk-server
Server PID: 12345
```

From a second terminal, send a message to that process id:

```
sigtalk-client 12345 "Hello there"
```

The client takes exactly two arguments, the server's PID and the message. It
prints `Wrong number of arguments.` when it gets any other count and
`Wrong PID.` when the PID holds anything but digits, and then exits with
status 1. The server runs until it is interrupted (Ctrl-C).

## Using it from Python

The protocol is plain Python:

```python
from sigtalk.protocol import BitAssembler, message_to_bits

assembler = BitAssembler()
received = bytearray()
for bit in message_to_bits("hi"):
    byte = assembler.feed(bit)
    if byte is not None:
        received.append(byte)
assert bytes(received) == b"hi"
```

`sigtalk.protocol` also has `byte_to_bits`, `signal_for_bit` and
`bit_for_signal`, and the signal constants `ZERO_SIGNAL`, `ONE_SIGNAL` and
`ACK_SIGNAL`.

- `sigtalk.client.validate_arguments(argv)` checks `[pid, message]` and
  returns `(pid, message)`, raising `ArgumentError` otherwise.
  `sigtalk.client.send_message(server_pid, message)` sends a message to a
  running server and returns the number of bytes sent.
- `sigtalk.server.Server(output=None, acknowledge=None)` holds the receiving
  state. `handle(signum, sender_pid)` takes one bit-carrying signal, writes
  the byte it completes to `output` (binary standard output by default),
  calls `acknowledge` with the sender's pid (by default it signals the
  sender) and returns the byte or None. `serve_forever()` waits for signals
  and handles them.

## Helpers

The package also has the small utilities the programs use:

- `sigtalk.chars`: `atoi`, `atol`, `itoa`, the character class tests
  `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`, and `tolower` and
  `toupper`.
- `sigtalk.strtools`: `split`, `word_count`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `strchr`, `strrchr`. Searches return an index or
  None.
- `sigtalk.linereader.LineReader(source, buffer_size=10)`: reads lines,
  newline included, from a file descriptor or any object with a
  `read(size)` method; `read_line()` returns None at the end, and the reader
  can be iterated over.
- `sigtalk.conversions` and `sigtalk.printf`: a small printf supporting
  `%c %s %d %i %u %x %X %p %%` and the flags ` `, `+` and `#`.
  `format_string(fmt, *args)` returns the text and
  `printf(fmt, *args, file=None)` writes it and returns its length.

## What it does not do

There is no message framing: the server does not mark where one message
ends, and bits from two clients sending at the same time are mixed into the
same bytes. Nothing is encrypted or authenticated; any process allowed to
signal the server can send it bits.