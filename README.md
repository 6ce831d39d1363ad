# sigtalk

Send a text message from one process to another using only POSIX signals.
Each byte goes out as eight bits, most significant bit first. `SIGUSR1`
carries a 1 and `SIGUSR2` carries a 0. The server answers every bit with
`SIGUSR1`, and the client waits for that answer before it sends the next
bit. A message ends with a zero byte. When the server receives that byte it
prints a newline.

The server waits for signals with `signal.sigwaitinfo`, so it runs on Linux.
The client uses `signal.sigwait` and `signal.pthread_sigmask`.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
for messages until you interrupt it with Ctrl-C:

```
$ sigtalk-server
Server Pid:12345
```

From another terminal, send it a message:

```
$ sigtalk-client 12345 "hello there"
```

The server prints `hello there` followed by a newline. If the message
contains a zero byte, nothing after that byte is sent.

The client takes exactly two arguments: the server's PID and the message.
The PID is read as a leading decimal integer. With any other number of
arguments, the client prints `Usage: client <PID> <MESSAGE>` to standard
error and exits with status 1. If the PID is not positive, or no process
with that PID can be signalled, it prints `Invalid PID or Server Not On` to
standard error and exits without sending anything.

## Library use

### Wire format: `sigtalk.protocol`

```python
from sigtalk.protocol import ByteAssembler, byte_to_bits, encode_message

byte_to_bits(ord("A"))             # (0, 1, 0, 0, 0, 0, 0, 1)
bits = list(encode_message("hi"))  # 24 bits: "h", "i" and the closing zero byte

assembler = ByteAssembler()
for bit in byte_to_bits(ord("A")):
    value = assembler.push(bit)
# value == 65; push returns None until the eighth bit arrives
```

`encode_message` accepts `str`, which it encodes as UTF-8, or `bytes`.
`ByteAssembler.pending` gives the number of bits collected so far, and
`reset()` discards a partial byte. The module also defines `ONE_SIGNAL`,
`ZERO_SIGNAL`, `ACK_SIGNAL`, `BIT_SIGNALS` and `BITS_PER_BYTE`.

### Sending: `sigtalk.client`

- `check_server(pid)` raises `ServerUnavailable` unless `pid` is positive
  and can be signalled.
- `send_bit(pid, bit)` sends one bit, waits for the acknowledgement and
  returns the signal it received.
- `send_byte(pid, value)` sends the eight bits of one byte.
- `send_message(pid, message)` sends a message and its closing zero byte,
  and returns the number of bytes sent, counting that zero byte.
- `main(argv=None)` is the command-line entry point.

### Receiving: `sigtalk.server`

`Server(stream=None, notify=None)` writes each completed byte to a binary
stream, which defaults to standard output. It acknowledges every bit through
`notify(pid, signum)`, which defaults to `os.kill`. A zero byte is written as
a newline. `Server.handle(signum, sender_pid)` processes a single bit signal
and returns the byte that bit completes, or `None`. `Server.serve_forever()`
announces the process id and handles signals until interrupted. Calling
`handle` directly lets you drive the server without real signals:

```python
import io
from sigtalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, encode_message
from sigtalk.server import Server

out = io.BytesIO()
server = Server(stream=out, notify=lambda pid, sig: None)
for bit in encode_message("ok"):
    server.handle(ONE_SIGNAL if bit else ZERO_SIGNAL, 0)
out.getvalue()  # b"ok\n"
```

### Helpers

The programs use these smaller modules, which you can also use directly:

- `sigtalk.chars`: ASCII classification (`isalpha`, `isdigit`, `isalnum`,
  `isascii`, `isprint`) and case conversion (`tolower`, `toupper`). Each
  function accepts an integer code or a one-character string.
- `sigtalk.memory`: operations on `bytes` and `bytearray`: `memchr`,
  `memcmp`, `memset`, `bzero`, `memcpy`, `memmove` (within one buffer, safe
  when the regions overlap) and `calloc`.
- `sigtalk.textops`: string functions that work with C-string rules. These
  are `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
  `strchr`, `strrchr`, `strlcpy`, `strlcat`, `strmapi`, `striteri`,
  `strjoin`, `strdup` and `strlen`. Search functions return indices or
  `None`.
- `sigtalk.linkedlist`: a singly linked list made of `Node` objects. `None`
  stands for the empty list. The functions are `from_iterable`, `last`,
  `size`, `add_front`, `add_back`, `iterate`, `mapped`, `delete_one` and
  `clear`.
- `sigtalk.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to a text stream. The stream defaults to standard output.

## Running the tests

```
pip install .[test]
pytest
```