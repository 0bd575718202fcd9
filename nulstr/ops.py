"""Operations on null-terminated byte strings held in bytes-like buffers.

A string is read up to its first zero byte; where a buffer holds no zero
byte, its end is taken as the terminator. Functions that write take a
``bytearray`` as destination, change it in place, grow it when the result
does not fit, and return it. Searches return an offset into the buffer,
or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import islice, takewhile
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

NUL = 0


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")


def _cstring(data: BytesLike) -> bytes:
    """The contents of *data* before its terminator."""
    raw = _as_bytes(data)
    end = raw.find(NUL)
    return raw if end < 0 else raw[:end]


def _char(ch: Union[int, bytes]) -> int:
    """Reduce *ch* to a single byte value, as a cast to char would."""
    if isinstance(ch, int):
        return ch & 0xFF
    if isinstance(ch, (bytes, bytearray)) and len(ch) == 1:
        return ch[0]
    raise TypeError("character must be an int or a single byte")


def _count(count: int) -> int:
    if not isinstance(count, int) or isinstance(count, bool):
        raise TypeError("count must be an int")
    if count < 0:
        raise ValueError("count must not be negative")
    return count


def _buffer(dest: bytearray) -> bytearray:
    if not isinstance(dest, bytearray):
        raise TypeError(
            f"destination must be a bytearray, got {type(dest).__name__}"
        )
    return dest


def strlen(data: BytesLike) -> int:
    """Number of bytes before the first zero byte of *data*."""
    return len(_cstring(data))


def strcpy(dest: bytearray, src: BytesLike) -> bytearray:
    """Copy the string in *src*, terminator included, to the start of *dest*."""
    _buffer(dest)
    payload = _cstring(src) + b"\0"
    dest[: len(payload)] = payload
    return dest


def strcat(dest: bytearray, src: BytesLike) -> bytearray:
    """Append the string in *src* to the string in *dest*, keeping it terminated."""
    _buffer(dest)
    offset = strlen(dest)
    payload = _cstring(src) + b"\0"
    dest[offset : offset + len(payload)] = payload
    return dest


def strncat(dest: bytearray, src: BytesLike, count: int) -> bytearray:
    """Append at most *count* bytes of *src* to *dest*, then a terminator.

    With a count of zero, *dest* is left untouched.
    """
    _buffer(dest)
    count = _count(count)
    if count == 0:
        return dest
    offset = strlen(dest)
    payload = _cstring(src)[:count] + b"\0"
    dest[offset : offset + len(payload)] = payload
    return dest


def strncpy(dest: bytearray, src: BytesLike, count: int) -> bytearray:
    """Write exactly *count* bytes to the start of *dest*.

    The bytes of *src* come first, then zero bytes pad the rest. If *src*
    is *count* bytes long or longer, no terminator is written.
    """
    _buffer(dest)
    count = _count(count)
    payload = _cstring(src)[:count].ljust(count, b"\0")
    dest[:count] = payload
    return dest


def strcmp(lhs: BytesLike, rhs: BytesLike) -> int:
    """Compare two strings byte by byte as unsigned values.

    Returns the difference of the first pair of bytes that differ, or zero
    when the strings are equal.
    """
    return _compare(_cstring(lhs) + b"\0", _cstring(rhs) + b"\0", None)


def strncmp(lhs: BytesLike, rhs: BytesLike, count: int) -> int:
    """Compare at most *count* bytes of two strings, as :func:`strcmp` does."""
    count = _count(count)
    return _compare(_cstring(lhs) + b"\0", _cstring(rhs) + b"\0", count)


def _compare(lhs: bytes, rhs: bytes, limit: Optional[int]) -> int:
    for left, right in islice(zip(lhs, rhs), limit):
        if left != right:
            return left - right
        if left == NUL:
            break
    return 0


def strchr(data: BytesLike, ch: Union[int, bytes]) -> Optional[int]:
    """Offset of the first *ch* in the string, or ``None``.

    The terminator counts as part of the string, so searching for zero
    yields the string's length.
    """
    text = _cstring(data)
    target = _char(ch)
    if target == NUL:
        return len(text)
    found = text.find(target)
    return None if found < 0 else found


def strrchr(data: BytesLike, ch: Union[int, bytes]) -> Optional[int]:
    """Offset of the last *ch* in the string, or ``None``.

    The terminator counts as part of the string, so searching for zero
    yields the string's length.
    """
    text = _cstring(data)
    target = _char(ch)
    if target == NUL:
        return len(text)
    found = text.rfind(target)
    return None if found < 0 else found


def strspn(data: BytesLike, accept: BytesLike) -> int:
    """Length of the leading run of *data* made only of bytes in *accept*."""
    allowed = frozenset(_cstring(accept))
    return sum(1 for _ in takewhile(allowed.__contains__, _cstring(data)))