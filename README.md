# minitalk

A small client/server pair that sends text from one process to another using
nothing but the signals `SIGUSR1` and `SIGUSR2`. Each byte of the message
(strings are encoded as UTF-8) is sent as eight signals, most significant bit
first: `SIGUSR1` for a 1 bit, `SIGUSR2` for a 0 bit. The server puts the bits
back together and writes each byte to standard output as soon as it is
complete.

The server waits for signals with `signal.sigwaitinfo`, so it needs a platform
that provides it, such as Linux.

## Installing

```
pip install .
```

## Basic mode

Start the server. It prints its process id and then waits for signals until
it is interrupted with Ctrl-C:

```
minitalk-server
PID from the server is: 12345
```

From another terminal, send it a message:

```
minitalk-client 12345 "hello there"
```

The text appears in the server's terminal. The client needs exactly two
arguments, the server's PID and the message; otherwise it prints a usage
complaint. The PID is read like C's `atoi` (leading whitespace, an optional
sign, then digits), and a PID that reads as zero is rejected with exit status
1. If the server cannot be signalled, the client reports the error and exits
with status 1.

## Acknowledging mode

The bonus pair adds a terminator and a reply. After the message the client
sends one extra all-zero byte. When the server completes that zero byte it
signals the sender back with `SIGUSR1`, and the client prints
`Server has received the message!`.

```
minitalk-server-bonus
minitalk-client-bonus 12345 "hello there"
```

## Using it as a library

The bit encoding and decoding work without any signals involved:

```python
from minitalk.protocol import BitDecoder, encode_bits

bits = list(encode_bits("hi", terminate=True))
decoder = BitDecoder()
received = [byte for bit in bits if (byte := decoder.push(bit)) is not None]
# received == [104, 105, 0]
```

`BitDecoder.pending` tells how many bits of the next byte have arrived.
`minitalk.protocol` also holds the mapping constants `BIT_SIGNALS`,
`SIGNAL_BITS` and `ACK_SIGNAL`.

- `minitalk.client.send_message(pid, text, terminate=False, delay=DEFAULT_DELAY)`
  sends a message to a running server, pausing `delay` seconds (0.0005 by
  default) after every signal.
- `minitalk.server.Server(out=None, acknowledge=False, notify=os.kill)` can be
  fed signals directly through `Server.handle(signum, sender_pid)`, writing to
  any binary stream, or started with `Server.run()`.
- `minitalk.formatting.format_message(fmt, *args)` and
  `print_formatted(fmt, *args)` implement a small formatter for
  `%c %s %d %i %u %x %X %p %%` with 32-bit integer wrapping; `%s` of `None`
  gives `(null)` and `%p` of `None` or 0 gives `(nil)`.
- `minitalk.chars` holds character tests and conversions (`atoi`, `itoa`,
  `isalpha`, `toupper`, ...) and raw file-descriptor writers (`putstr_fd`,
  `putnbr_fd`, ...); `minitalk.strfuncs` holds string and byte helpers
  (`split`, `strchr`, `strlcpy`, `strnstr`, `strtrim`, `substr`, `memcmp`, ...)
  that return indices or new strings rather than modifying buffers.

## What it does not do

There is no flow control beyond a fixed pause between signals: the client
does not wait for the server to confirm each bit, so a heavily loaded server
can lose or merge signals and garble the text. Messages from several clients
at once are interleaved into the same decoder. The only reply the server ever
sends is the single end-of-message acknowledgement in acknowledging mode.

## Running the tests

```
pip install ".[test]"
pytest
```