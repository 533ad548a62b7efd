"""Helpers for draining caller-owned binary streams."""

from __future__ import annotations

from typing import BinaryIO

from gmsign.errors import InvalidArgument, IOFailure

DEFAULT_CHUNK_SIZE = 65536


def read_stream(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """Read ``stream`` to exhaustion without closing it.

    An already exhausted stream yields ``b""``.

    Args:
        stream: Readable binary stream owned by the caller
        chunk_size: Size of each ``read`` call

    Returns:
        Everything remaining in the stream

    Raises:
        InvalidArgument: If ``stream`` is missing or not readable
        IOFailure: If reading fails or the stream yields non-binary data
    """
    if stream is None:
        raise InvalidArgument("Input stream must not be None")
    if not callable(getattr(stream, "read", None)):
        raise InvalidArgument(f"Input of type {type(stream).__name__} is not a readable stream")

    buffer = bytearray()
    while True:
        try:
            chunk = stream.read(chunk_size)
        except (OSError, ValueError) as exc:
            # ValueError covers reads on closed file objects
            raise IOFailure(f"Failed to read input stream: {exc}") from exc

        if not chunk:
            break
        if not isinstance(chunk, (bytes, bytearray, memoryview)):
            raise IOFailure(
                f"Input stream returned {type(chunk).__name__}; a binary stream is required"
            )
        buffer.extend(chunk)

    return bytes(buffer)
