"""Kernel error numbers, their messages, and the abort hook."""

from __future__ import annotations

import enum


class Errno(enum.IntEnum):
    """Error numbers used throughout the kernel library."""

    ENONE = 0
    EINVAL = 1
    ENOMEM = 2
    EFAULT = 3
    EDOM = 4
    ERANGE = 5
    ENOENT = 6
    EIO = 7
    EBADF = 8
    EACCES = 9
    EBUSY = 10
    EEXIST = 11
    EMFILE = 12
    EFBIG = 13
    ENOSPC = 14
    ENAMETOOLONG = 15
    ENOSYS = 16


_MESSAGES = {
    Errno.ENONE: "no error",
    Errno.EINVAL: "invalid argument",
    Errno.ENOMEM: "no free memory",
    Errno.EFAULT: "page fault",
    Errno.EDOM: "domain error",
    Errno.ERANGE: "range error",
    Errno.ENOENT: "no such file or directory",
    Errno.EIO: "I/O error",
    Errno.EBADF: "bad file descriptor",
    Errno.EACCES: "access denied",
    Errno.EBUSY: "device busy",
    Errno.EEXIST: "file or directory exists",
    Errno.EMFILE: "too many opened files",
    Errno.EFBIG: "file too big",
    Errno.ENOSPC: "no space left on device",
    Errno.ENAMETOOLONG: "name or path too long",
    Errno.ENOSYS: "no such syscall or not implemented",
}

_UNKNOWN = "unknown error"


class KernelAbort(Exception):
    """Raised by :func:`abort`; the kernel would halt at this point."""


def strerror(errnum: int) -> str:
    """Return the message for ``errnum``, or ``"unknown error"``."""
    try:
        return _MESSAGES[Errno(errnum)]
    except ValueError:
        return _UNKNOWN


def abort() -> None:
    """Stop execution unconditionally by raising :class:`KernelAbort`."""
    raise KernelAbort("abort called")