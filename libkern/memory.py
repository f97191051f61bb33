"""Raw byte-buffer operations: search, compare, copy and fill.

Buffers are any bytes-like objects; the operations that write need a
mutable one such as ``bytearray``. Asking for more bytes than a buffer
holds raises :class:`ValueError` instead of running off its end.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _check_span(buf: Buffer, offset: int, num: int, name: str) -> None:
    if num < 0:
        raise ValueError(f"byte count must not be negative, got {num}")
    if offset < 0 or offset + num > len(buf):
        raise ValueError(
            f"{name} holds {len(buf)} bytes; cannot access {num} at offset {offset}"
        )


def memchr(buf: Buffer, val: int, num: int) -> Optional[int]:
    """Return the index of the first byte equal to ``val`` among the first
    ``num`` bytes of ``buf``, or ``None`` if there is none.

    ``val`` is reduced to an unsigned byte first.
    """
    _check_span(buf, 0, num, "buf")
    index = bytes(buf[:num]).find(val & 0xFF)
    return None if index < 0 else index


def memcmp(buf1: Buffer, buf2: Buffer, num: int) -> int:
    """Compare the first ``num`` bytes of two buffers.

    Returns zero when they are equal, otherwise the difference between the
    first pair of bytes that differ, taken as unsigned values.
    """
    _check_span(buf1, 0, num, "buf1")
    _check_span(buf2, 0, num, "buf2")
    return next(
        (a - b for a, b in zip(bytes(buf1[:num]), bytes(buf2[:num])) if a != b),
        0,
    )


def memcpy(dst: MutableBuffer, src: Buffer, num: int) -> MutableBuffer:
    """Copy the first ``num`` bytes of ``src`` into the start of ``dst``."""
    _check_span(dst, 0, num, "dst")
    _check_span(src, 0, num, "src")
    dst[:num] = bytes(src[:num])
    return dst


def memmove(
    buf: MutableBuffer, dst_offset: int, src_offset: int, num: int
) -> MutableBuffer:
    """Copy ``num`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``.

    The copy runs forward, one byte at a time, when the destination starts at
    least ``num`` bytes after the source, and backward otherwise. Backward
    copying keeps overlapping regions intact when the destination lies after
    the source.
    """
    _check_span(buf, src_offset, num, "buf")
    _check_span(buf, dst_offset, num, "buf")
    if dst_offset - src_offset >= num:
        order = range(num)
    else:
        order = reversed(range(num))
    for i in order:
        buf[dst_offset + i] = buf[src_offset + i]
    return buf


def memset(buf: MutableBuffer, val: int, num: int) -> MutableBuffer:
    """Fill the first ``num`` bytes of ``buf`` with ``val`` as an unsigned byte."""
    _check_span(buf, 0, num, "buf")
    buf[:num] = bytes([val & 0xFF]) * num
    return buf