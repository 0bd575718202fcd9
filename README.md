# nulstr

Operations on null-terminated byte strings held in Python bytes-like buffers
(`bytes`, `bytearray`, `memoryview`), following the familiar semantics of
`strlen`, `strcpy`, `strcat`, `strncat`, `strncpy`, `strcmp`, `strncmp`,
`strchr`, `strrchr` and `strspn`.

A string ends at its first zero byte; anything after that byte is ignored by
the operations that read strings. Where a buffer holds no zero byte, its end
is taken as the terminator.

## Functions

All of them live in `nulstr.ops`.

Reading:

- `strlen(data)`: the number of bytes before the first zero byte.
- `strcmp(lhs, rhs)`: compares byte by byte as unsigned values and returns the
  difference of the first pair of bytes that differ, or `0` when the strings
  are equal.
- `strncmp(lhs, rhs, count)`: like `strcmp`, but looks at no more than `count`
  bytes. A count of `0` always gives `0`.
- `strchr(data, ch)`: the offset of the first `ch` in the string, or `None`.
- `strrchr(data, ch)`: the offset of the last `ch` in the string, or `None`.
- `strspn(data, accept)`: the length of the leading run of `data` made only of
  bytes found in the string `accept`.

For `strchr` and `strrchr`, `ch` is either an `int` (reduced to its low byte,
so `0x161` searches for `0x61`) or a single-byte `bytes` object. The
terminator counts as part of the string, so searching for zero returns the
string's length.

Writing:

- `strcpy(dest, src)`: copies the string in `src`, terminator included, to
  the start of `dest`.
- `strcat(dest, src)`: appends the string in `src` to the string already held
  in `dest`, keeping it terminated.
- `strncat(dest, src, count)`: appends at most `count` bytes of `src`, then a
  terminator. With a count of `0`, `dest` is left untouched.
- `strncpy(dest, src, count)`: writes exactly `count` bytes to the start of
  `dest`: the bytes of `src`, then zero bytes to pad. If `src` is `count`
  bytes long or longer, no terminator is written.

The destination of a writing function must be a `bytearray`. It is changed in
place, grows when the result does not fit, and is returned. Bytes past the
written region are kept as they were.

## Errors

- A source that is not `bytes`, `bytearray` or `memoryview` raises
  `TypeError`.
- A destination that is not a `bytearray` raises `TypeError`.
- A `count` that is not an `int` (or is a `bool`) raises `TypeError`; a
  negative `count` raises `ValueError`.
- A `ch` that is neither an `int` nor a single byte raises `TypeError`.

## Example

```python
from nulstr.ops import strcat, strcmp, strchr, strlen, strncpy, strspn

buf = bytearray(b"Hello\0" + bytes(10))
strcat(buf, b", world")
assert bytes(buf[:strlen(buf)]) == b"Hello, world"

assert strcmp(b"abc", b"abd") < 0
assert strchr(b"banana", ord("n")) == 2
assert strchr(b"banana", 0) == 6
assert strspn(b"123abc", b"0123456789") == 3

out = bytearray(8)
strncpy(out, b"hi", 4)
assert bytes(out[:4]) == b"hi\0\0"
```

## Tests

The test suite lives in `tests/` and runs under pytest with hypothesis; both
come with the `test` extra.