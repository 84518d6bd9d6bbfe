# nextline

Read from a file descriptor one line at a time. Bytes are pulled
through a fixed-size buffer until a newline turns up. Whatever follows
that newline is kept for the next call.

Lines come back as `bytes` and keep their trailing newline. The last
line of the input may not have one. Decoding is left to the caller.

## Installation

```
pip install nextline
```

## Reading lines from a descriptor

`nextline.reader.LineReader` wraps one open file descriptor. Each call
to `read_line()` returns the next line. Once the input runs out it
returns `None`.

```python
import os
from nextline.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    reader = LineReader(fd, 42)
    first = reader.read_line()
    for line in reader:
        print(line.decode(), end="")
finally:
    os.close(fd)
```

The second argument is the buffer size, which is the number of bytes
asked for on each `os.read` call. It defaults to `DEFAULT_BUFFER_SIZE`,
which is 1. The reader is also an iterator and stops at the end of the
input. `reset()` drops any data that has been read ahead but not yet
returned.

If a read fails, the `OSError` is raised and the read-ahead data is
dropped.

## Several descriptors at once

`DescriptorLines` keeps separate read-ahead data for each descriptor.
Descriptors from 0 up to, but not including, `max_fd` are accepted, and
`max_fd` defaults to `MAX_FD`, which is 1024. This lets reads from
different files be interleaved freely:

```python
import os
from nextline.reader import DescriptorLines

lines = DescriptorLines(1, 1024)
a = os.open("a.txt", os.O_RDONLY)
b = os.open("b.txt", os.O_RDONLY)
try:
    for _ in range(3):
        for fd in (a, b):
            line = lines.get_next_line(fd)
            if line is not None:
                print(line.decode(), end="")
finally:
    lines.forget(a)
    lines.forget(b)
    os.close(a)
    os.close(b)
```

`get_next_line(fd)` returns `None` at the end of that descriptor's input.
`forget(fd)` discards whatever is still buffered for that descriptor.

The following cases raise `ValueError`:

- a negative descriptor, or one at or above `max_fd`;
- a buffer size below 1;
- a `max_fd` below 1.

The module-level function `nextline.reader.get_next_line(fd)` uses one
shared `DescriptorLines` with the default settings.

## Command line

The `nextline` command opens the files named on the command line. It
prints their lines in rounds, taking one line from each file in turn.
Files that have run out are skipped.

```
nextline test.txt
nextline test.txt test2.txt
nextline -n 10 -b 64 a.txt b.txt
```

Options:

- `-n`, `--count`: how many rounds to print. The default is 4 for a
  single file and 3 for several files.
- `-b`, `--buffer-size`: how many bytes to read per call. The default
  is 1.

With no file names, the command reads `test.txt` in the current
directory. Output is decoded as UTF-8, and undecodable bytes are
replaced.

Exit statuses:

- 0 on success;
- 1 if a file cannot be opened;
- 2 for an invalid buffer size.

## What it does not do

The package reads only through raw file descriptors. It does not wrap
Python file objects or sockets, does not decode text in the library
itself, and the command has no option to print a whole file to its end.

## Running the tests

```
pip install nextline[test]
pytest
```