# dirdupes/core/hasher.py
import hashlib
import logging
from typing import BinaryIO, Optional

from .models import DEFAULT_BLOCK_SIZE, DEFAULT_HASH_ALGORITHM

logger = logging.getLogger(__name__)


def calculate_digest(
    file_obj: BinaryIO,
    block_size: int = DEFAULT_BLOCK_SIZE,
    algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> Optional[str]:
    """
    Streams an open binary file through the hash in blocks of block_size bytes.

    Returns the hex digest, or None if a read fails. The handle is left open
    and its position is advanced to the end of the stream.
    """
    hasher = hashlib.new(algorithm)
    try:
        for block in iter(lambda: file_obj.read(block_size), b''):
            hasher.update(block)
    except OSError as e:
        logger.debug("Read failed while hashing %s: %s", getattr(file_obj, 'name', file_obj), e)
        return None
    return hasher.hexdigest()


def calculate_file_digest(
    file_path: str,
    block_size: int = DEFAULT_BLOCK_SIZE,
    algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> Optional[str]:
    """Opens file_path and digests it. Open errors propagate as OSError."""
    with open(file_path, 'rb') as f:
        return calculate_digest(f, block_size=block_size, algorithm=algorithm)
