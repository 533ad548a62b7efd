"""SM3 hashing utilities (GB/T 32905) for content and files."""

from pathlib import Path

from gmssl import func, sm3

SM3_DIGEST_SIZE = 32


def sm3_digest(content: bytes) -> bytes:
    """Compute the raw SM3 digest of content.

    Args:
        content: Bytes to hash

    Returns:
        32-byte digest
    """
    return bytes.fromhex(compute_sm3(content))


def compute_sm3(content: bytes) -> str:
    """Compute SM3 hash of content.

    Args:
        content: Bytes to hash

    Returns:
        Lowercase hexadecimal hash string
    """
    return sm3.sm3_hash(func.bytes_to_list(bytes(content))).lower()


def compute_sm3_file(file_path: Path, chunk_size: int = 65536) -> str:
    """Compute SM3 hash of a file.

    gmssl hashes a complete message, so chunks are gathered before hashing.

    Args:
        file_path: Path to file
        chunk_size: Size of chunks to read (default 64KB)

    Returns:
        Hexadecimal hash string

    Raises:
        FileNotFoundError: If file does not exist
        PermissionError: If file cannot be read
    """
    buffer = bytearray()

    with open(file_path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            buffer.extend(chunk)

    return compute_sm3(bytes(buffer))
