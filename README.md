# nextline

Read lines from a raw file descriptor one at a time. Bytes read past the
end of the current line are kept for the next call.

Reads go through `os.read` in fixed-size chunks. The default size is 42
bytes (`nextline.reader.BUFFER_SIZE`). Reading stops as soon as a newline
has been seen or the input ends. Lines are returned as `bytes` and include
their trailing `b"\n"`.

## Installing

```
pip install .
```

## Reading one descriptor

```python
import os
import sys
from nextline.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(fd, 42)
for line in reader:
    sys.stdout.buffer.write(line)
os.close(fd)
```

- `LineReader(fd, buffer_size=42)` raises `ValueError` when `fd` is
  negative or `buffer_size` is not positive.
- `LineReader.read_line()` returns the next line, or `None` once the input
  is exhausted. The last line of the input is returned even when it has no
  trailing newline.
- Iterating over a `LineReader` yields lines until `read_line()` returns
  `None`.
- An `OSError` from the read drops any buffered bytes and is raised to the
  caller.

`nextline.reader.get_next_line(fd)` behaves the same way with the default
buffer size. It keeps a single buffer for the whole process, whatever the
descriptor. Use it to read one descriptor from start to end.

Two helpers split buffered bytes:

- `extract_line(stash)` returns everything up to and including the first
  newline. If there is no newline, it returns the whole of `stash`. It
  returns `None` for empty input or `None`.
- `update_stash(stash)` returns what follows the first newline. It returns
  `None` when there is no newline or nothing follows it.

```python
from nextline.reader import extract_line, update_stash

extract_line(b"one\ntwo")   # b"one\n"
update_stash(b"one\ntwo")   # b"two"
```

## Reading several descriptors in turn

```python
import os
from nextline.multi import MultiLineReader

a = os.open("a.txt", os.O_RDONLY)
b = os.open("b.txt", os.O_RDONLY)
reader = MultiLineReader(42)

first_a = reader.read_line(a)
first_b = reader.read_line(b)
second_a = reader.read_line(a)
```

`MultiLineReader` keeps a separate buffer for each descriptor. Reads from
different descriptors can therefore be interleaved.

- `MultiLineReader(buffer_size=42)` raises `ValueError` when `buffer_size`
  is not positive.
- `read_line(fd)` raises `ValueError` when `fd` is negative.
- `read_line(fd)` returns only complete, newline-terminated lines. Text
  after the last newline is not returned. When the input ends, the call
  returns `None` and that text stays in the descriptor's buffer.
- An `OSError` from the read drops the buffer for that descriptor and is
  raised to the caller.
- `fd in reader` is true once `read_line(fd)` has been called, until the
  buffer is dropped. A buffer is dropped by `reader.discard(fd)` or by a
  read error.

`nextline.multi.get_next_line(fd)` does the same through one reader shared
by the whole process.

## What it does not do

The package is a library only. It has no command-line program. It does
not decode text: lines are raw `bytes`. It does not open or close
descriptors for you.

## Running the tests

```
pip install .[test]
pytest
```