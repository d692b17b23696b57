# pushtalk

Three small tools in one package:

- **minitalk**: send a text message from one process to another using only
  the `SIGUSR1` and `SIGUSR2` signals. Each byte goes out as eight signals,
  most significant bit first (`SIGUSR1` for 0, `SIGUSR2` for 1), and a zero
  byte ends the message.
- **push_swap**: sort a list of integers with two stacks and a fixed set of
  operations (`sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb`,
  `rrr`), printing the operations used.
- **libft**: small ASCII character, string and output helpers.

## Installation

```
pip install .
```

Signals need a POSIX system.

## Sending messages

Start the server in one terminal. It prints its process id, then writes the
bytes of every message it receives to standard output as they arrive
(no newline is added). Stop it with Ctrl-C.

```
pushtalk-server
Server's PID: 4242
```

Send a message from another terminal:

```
pushtalk-client 4242 "hello there"
```

The client needs exactly two arguments: the server's PID and a non-empty
message. With the wrong number of arguments, a PID that reads as zero, or an
empty message it prints a short notice and sends nothing. If a signal cannot
be delivered it reports the error on standard error and exits with status 1.
Text is sent as UTF-8, with a pause of 50 microseconds after each signal.

From Python:

```python
from pushtalk.minitalk.protocol import Decoder, encode_bits
from pushtalk.minitalk.client import send_message

bits = list(encode_bits("hi"))   # 24 bits, including the zero terminator

decoder = Decoder()
for bit in bits:
    message = decoder.push(bit)   # b"hi" once the terminator arrives, else None

send_message(4242, "hi")          # returns the number of signals sent
```

`pushtalk.minitalk.server.SignalServer` decodes incoming signals; give it a
binary stream as `output`, call `install()` to take over `SIGUSR1` and
`SIGUSR2`, or call `handle(signum, frame)` yourself.

## Sorting with push_swap

```
push-swap 3 2 1 0
```

prints one operation per line which, applied in order, sorts stack `a` in
ascending order. Each argument must be an integer (digits with at most one
leading sign) within the 32-bit signed range, with no duplicates; `+5` and
`5` count as the same number, as do any two spellings of zero. Otherwise
`Error` is written to standard error and the exit status is 1. With no
arguments nothing is printed.

From Python:

```python
import io

from pushtalk.push_swap.parsing import assign_index, fill_stack_values
from pushtalk.push_swap.sorter import push_swap
from pushtalk.push_swap.stack import Stacks

out = io.StringIO()
stacks = Stacks(fill_stack_values(["3", "2", "1", "0"]), output=out)
assign_index(stacks.a)
push_swap(stacks)
print(stacks.operations)              # the operations, also written to out
print([e.value for e in stacks.a])    # [0, 1, 2, 3]
```

`Stacks.from_values(values)` builds stacks straight from integers; each
operation is a method of the same name (`stacks.pb()`, `stacks.rra()`, ...).
`pushtalk.push_swap.parsing.is_correct_input` checks a list of arguments and
`fill_stack_values` raises `InputError` for a value out of range.

## Helpers

- `pushtalk.libft.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `tolower`, `toupper`, taking an integer code or a one-character
  string.
- `pushtalk.libft.text`: `atoi`, `itoa`, `split`, `strdup`, `strjoin`,
  `strlen`, `strtrim`, `substr`.
- `pushtalk.libft.search`: `strchr`, `strrchr`, `striteri`, `strmapi`,
  `strlcpy`, `strlcat`, `strncmp`, `strnstr`; searches return an index or
  `None`.
- `pushtalk.libft.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`,
  `putnbr_fd`, `print_info`, writing to a text stream (standard output by
  default).

Strings are treated as ending at their first NUL character.

## What it does not do

There are no raw-memory helpers (fill, copy, compare or search of byte
buffers); Python's `bytes`, `bytearray` and `memoryview` cover that ground.

## Running the tests

```
pip install .[test]
pytest
```