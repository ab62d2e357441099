"""Overwrite memory buffers with a fixed pattern and verify the result."""

from __future__ import annotations

from typing import Any

ZEROIZE_PATTERN = 0xA5
ZEROIZE_PATTERN_REVERSE = 0x5A
ZEROIZE_ALIGNMENT = 4


class ZeroizeError(ValueError):
    """Base class for buffers that cannot be zeroized."""


class EmptyBufferError(ZeroizeError):
    """The buffer is missing or has no bytes."""


class MisalignedSizeError(ZeroizeError):
    """The buffer size is not a multiple of ZEROIZE_ALIGNMENT."""


def _byte_view(buffer: Any) -> memoryview:
    view = memoryview(buffer)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def zeroize(buffer: Any) -> None:
    """Fill every byte of a writable buffer with ZEROIZE_PATTERN.

    Raises EmptyBufferError for a missing or empty buffer, MisalignedSizeError
    when its size in bytes is not a multiple of ZEROIZE_ALIGNMENT, and
    TypeError when the buffer is read-only.
    """
    if buffer is None:
        raise EmptyBufferError("buffer is missing")
    view = _byte_view(buffer)
    size = view.nbytes
    if size == 0:
        raise EmptyBufferError("buffer is empty")
    if size % ZEROIZE_ALIGNMENT != 0:
        raise MisalignedSizeError(
            f"buffer size {size} is not a multiple of {ZEROIZE_ALIGNMENT}"
        )
    if view.readonly:
        raise TypeError("buffer is read-only")
    view[:] = bytes([ZEROIZE_PATTERN]) * size


def is_zeroized(buffer: Any) -> bool:
    """Return True if every byte of the buffer equals ZEROIZE_PATTERN.

    A missing, empty or misaligned buffer is never considered zeroized.
    """
    if buffer is None:
        return False
    view = _byte_view(buffer)
    size = view.nbytes
    if size == 0 or size % ZEROIZE_ALIGNMENT != 0:
        return False
    return view.tobytes() == bytes([ZEROIZE_PATTERN]) * size