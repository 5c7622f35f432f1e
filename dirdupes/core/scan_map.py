# dirdupes/core/scan_map.py
import threading
from collections import defaultdict
from typing import Dict, List, Tuple


class ScanMap:
    """Digest -> file names, appended to from many worker threads."""

    def __init__(self):
        self._hashes: Dict[str, List[str]] = defaultdict(list)
        self._lock = threading.Lock()

    def record(self, digest: str, file_id: str) -> None:
        with self._lock:
            self._hashes[digest].append(file_id)

    def size(self) -> int:
        with self._lock:
            return len(self._hashes)

    def __len__(self) -> int:
        return self.size()

    def snapshot(self) -> Dict[str, Tuple[str, ...]]:
        # Only meaningful once every writer has finished
        with self._lock:
            return {digest: tuple(files) for digest, files in self._hashes.items()}
