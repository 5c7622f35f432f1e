# dirdupes/core/models.py
import hashlib
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Tuple

DEFAULT_WORKER_COUNT = 10
DEFAULT_BLOCK_SIZE = 10 * 1024
DEFAULT_HASH_ALGORITHM = "sha1"


class ScanPhase(str, Enum):
    IDLE = "IDLE"
    LISTING = "LISTING"
    PARTITIONED = "PARTITIONED"
    SCANNING = "SCANNING"
    REDUCING = "REDUCING"
    DONE = "DONE"
    FAILED = "FAILED"


@dataclass
class ScanConfig:
    directory: str
    worker_count: int = DEFAULT_WORKER_COUNT
    block_size: int = DEFAULT_BLOCK_SIZE
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    show_progress: bool = False

    def __post_init__(self):
        if not _is_positive_int(self.worker_count):
            raise ValueError(f"worker_count must be a positive integer, got {self.worker_count!r}")
        if not _is_positive_int(self.block_size):
            raise ValueError(f"block_size must be a positive integer, got {self.block_size!r}")
        try:
            hasher = hashlib.new(self.hash_algorithm)
        except (ValueError, TypeError):
            raise ValueError(f"Unsupported hash algorithm: {self.hash_algorithm!r}")
        # shake_* digests have no fixed length
        if hasher.digest_size == 0:
            raise ValueError(f"Hash algorithm {self.hash_algorithm!r} has no fixed digest size")


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


@dataclass(frozen=True)
class DuplicateGroup:
    id: str # The digest shared by every file in the group
    files: Tuple[str, ...] = ()

    @property
    def total_files(self) -> int:
        return len(self.files)


@dataclass
class ScanReport:
    scanned_directory: str
    total_entries_listed: int = 0
    total_files_scanned: int = 0
    workers_used: int = 0
    duplicate_groups: List[DuplicateGroup] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict) # file name: error_message
    cancelled: bool = False

    @property
    def total_duplicate_files(self) -> int:
        return sum(group.total_files for group in self.duplicate_groups)

    @property
    def redundant_files(self) -> int:
        # Assuming we keep one file per group
        return sum(group.total_files - 1 for group in self.duplicate_groups)
