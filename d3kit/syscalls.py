"""System call numbers, error codes and return-code conversion."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "NUM_SYSCALLS",
    "SystemCall",
    "Errno",
    "SyscallError",
    "check_ret_code",
    "ret_code_of",
]


class SystemCall(IntEnum):
    """All known system calls, numbered in dispatch-table order."""

    TERMINAL_READ = 0
    TERMINAL_WRITE = 1
    MAP_USER_HEAP = 2
    PROCESS_EXECUTE_BINARY = 3
    PROCESS_ID = 4
    PROCESS_EXIT = 5
    THREAD_CREATE = 6
    THREAD_ID = 7
    THREAD_SWITCH = 8
    THREAD_SLEEP = 9
    THREAD_JOIN = 10
    THREAD_EXIT = 11
    GET_SYSTEM_TIME = 12
    GET_DATE = 13
    SET_DATE = 14
    OPEN = 15
    READ = 16
    WRITE = 17
    SEEK = 18
    CLOSE = 19
    MKDIR = 20
    TOUCH = 21
    READDIR = 22
    CWD = 23
    CD = 24


NUM_SYSCALLS = len(SystemCall)


class Errno(IntEnum):
    """Error codes returned by system calls as negative numbers."""

    EUNKN = -1  # Unknown error
    ENOENT = -2  # No such file or directory
    ENOHANDLES = -3  # No more free handles
    EBADF = -4  # Bad file descriptor for an operation
    EACCES = -5  # Permission denied
    EEXIST = -6  # File/directory exists
    ENOTDIR = -7  # Not a directory
    EINVAL = -8  # Invalid argument
    EINVALH = -9  # Invalid handle
    ENOTEMPTY = -10  # Directory not empty
    EBADSTR = -11  # Bad string

    @classmethod
    def _missing_(cls, value: object) -> Errno:
        return cls.EUNKN


class SyscallError(Exception):
    """A system call reported an error code."""

    def __init__(self, errno: Errno, message: str | None = None) -> None:
        self.errno = Errno(errno)
        super().__init__(message or f"system call failed: {self.errno.name}")


def check_ret_code(ret_code: int) -> int:
    """Return a non-negative return code, or raise the error a negative one stands for."""
    if ret_code < 0:
        raise SyscallError(Errno(ret_code))
    return ret_code


def ret_code_of(result: int | Errno | SyscallError) -> int:
    """Turn a successful value or an error back into a raw return code."""
    if isinstance(result, SyscallError):
        return int(result.errno)
    if isinstance(result, Errno):
        return int(result)
    value = int(result)
    if value < 0:
        raise ValueError(f"a successful result cannot be negative, got {value}")
    return value