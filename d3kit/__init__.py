"""Colors, an ANSI palette and escape sequences, frame buffers, system call codes, naming types and block devices."""

__version__ = "0.1.0"
__all__ = [
    "ansi",
    "block",
    "buffered_lfb",
    "color",
    "lfb",
    "naming",
    "palette",
    "storage",
    "syscalls",
]