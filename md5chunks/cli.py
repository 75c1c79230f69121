"""Command line: hash files with a chosen backend and report the time taken."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from md5chunks.sequential import hash_sequential
from md5chunks.utils import sig2hex

USAGE = "Too few arguments, usage: md5chunks <CUDA|OPENMP|SEQUENTIAL> <files to hash>"

_UNAVAILABLE_MODES = {
    "CUDA": "no CUDA device available",
    "OPENMP": "the OPENMP backend is not available",
}


def main(argv: Sequence[str] | None = None) -> int:
    """Hash each named file and print "name, seconds: hex" lines."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE, file=sys.stderr)
        return 1

    mode, files = args[0], args[1:]
    if mode in _UNAVAILABLE_MODES:
        print(_UNAVAILABLE_MODES[mode], file=sys.stderr)
        return 1

    results = []
    for filename in files:
        try:
            with open(filename, "rb") as handle:
                data = handle.read()
        except OSError:
            print(f"Error opening file: {filename}", file=sys.stderr)
            return 1
        start = time.perf_counter()
        signature = hash_sequential(data)
        elapsed = time.perf_counter() - start
        results.append((filename, elapsed, signature))

    for filename, elapsed, signature in results:
        print(f"{filename}, {elapsed:g}: {sig2hex(signature)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())