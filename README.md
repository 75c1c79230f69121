# md5chunks

md5chunks computes MD5 digests in plain Python. It has no third-party dependencies.

The message is first padded to a multiple of 64 bytes. The padding is a 1 bit, then zeros, then the message length in bits. Each 64-byte chunk is then folded into a 128-bit state. The final four state words become the 16-byte signature.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Command line

```
md5chunks <MODE> [<file> ...]
```

The first argument is the mode.

- `CUDA` and `OPENMP` are recognised, but these back ends are not available. The command prints a message on standard error and exits with status 1.
- Any other mode hashes the files with the sequential implementation.

The command reads every file first and hashes each one. It then prints one line per file, in the order given:

```
path/to/file, <seconds spent hashing>: <hex digest>
```

The time covers only the hashing, not reading the file. If no files follow the mode, nothing is printed and the exit status is 0.

The command prints to standard error and exits with status 1 when:

- no arguments are given at all (a usage message is printed);
- a file cannot be opened. The message is `Error opening file: <name>`, and no results are printed.

## Library use

```python
from md5chunks.sequential import hash_sequential
from md5chunks.utils import sig2hex

digest = hash_sequential(b"The quick brown fox jumps over the lazy dog")
print(sig2hex(digest))  # 9e107d9d372bb6826bd81d3542a419d6
```

`hash_sequential` returns the 16-byte digest as `bytes`. It accepts:

- `bytes`, `bytearray` or `memoryview`;
- `str`, which is encoded as UTF-8 first.

`md5chunks.sequential.process_chunk(padded_message, chunk_start, state)` folds one 64-byte chunk into a state. The state is a tuple of four 32-bit words, and the function returns the new tuple. It raises `ValueError` if fewer than 64 bytes remain at `chunk_start`.

`md5chunks.utils` provides the building blocks and constants:

- `preprocess(data)` returns the padded message.
- `build_signature(a0, b0, c0, d0)` lays out four state words as the 16-byte digest.
- `sig2hex(sig)` renders a 16-byte signature as lower-case hex. It raises `ValueError` for any other length.
- `left_rotate_32bits(n, rotate)` rotates a 32-bit word left. The rotation count is taken modulo 32.
- `to_little_endian_32(n)` and `to_little_endian_64(n)` swap the byte order of a word on a little-endian host. On a big-endian host they return the word unchanged. `is_big_endian()` reports which kind of host this is.
- The constants are `S` (shift amounts), `K` (round constants), `INITIAL_STATE`, `CHUNK_SIZE` and `SIGNATURE_SIZE`.

## What it does not do

There is only the single-threaded implementation. The package has no GPU back end and no multi-threaded back end, so the `CUDA` and `OPENMP` modes of the command only report that they are unavailable.

## Tests

```
pytest
```