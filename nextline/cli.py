"""Print the first lines of one or more files, taking them in turn."""

from __future__ import annotations

import argparse
import os
import sys
from contextlib import ExitStack

from nextline.reader import DEFAULT_BUFFER_SIZE, DescriptorLines


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nextline",
        description="Print lines from files, one line from each file per round.",
    )
    parser.add_argument(
        "files", nargs="*", default=["test.txt"], help="files to read"
    )
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=None,
        help="rounds to print (default 4 for one file, 3 for several)",
    )
    parser.add_argument(
        "-b",
        "--buffer-size",
        type=int,
        default=DEFAULT_BUFFER_SIZE,
        help="bytes read per call",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)
    count = args.count
    if count is None:
        count = 4 if len(args.files) == 1 else 3
    try:
        lines = DescriptorLines(buffer_size=args.buffer_size)
    except ValueError as exc:
        print(f"nextline: {exc}", file=sys.stderr)
        return 2

    with ExitStack() as stack:
        fds = []
        for path in args.files:
            try:
                fd = os.open(path, os.O_RDONLY)
            except OSError as exc:
                print(f"nextline: {path}: {exc.strerror}", file=sys.stderr)
                return 1
            stack.callback(os.close, fd)
            fds.append(fd)

        out = sys.stdout
        for _ in range(count):
            for fd in fds:
                line = lines.get_next_line(fd)
                if line is not None:
                    out.write(line.decode("utf-8", errors="replace"))
        out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())