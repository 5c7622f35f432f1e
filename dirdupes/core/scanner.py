# dirdupes/core/scanner.py
import os
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple, Dict, Optional, Callable
from tqdm import tqdm
from .models import ScanConfig, ScanPhase, ScanReport, DuplicateGroup, DEFAULT_WORKER_COUNT
from .scan_map import ScanMap
from .hasher import calculate_digest
from .duplicate_detector import find_duplicate_groups

logger = logging.getLogger(__name__)

StopRequested = Callable[[], bool]


class ScanError(Exception):
    """The target directory could not be listed."""

    def __init__(self, directory: str, reason: str):
        super().__init__(f"Cannot scan directory {directory}: {reason}")
        self.directory = directory
        self.reason = reason


def effective_worker_count(worker_count: int, entry_count: int) -> int:
    return max(1, min(worker_count, entry_count))


def partition(entry_count: int, worker_count: int) -> List[Tuple[int, int]]:
    """
    Splits range(entry_count) into worker_count contiguous half-open ranges.

    Every range has entry_count // worker_count entries except the last one,
    which also takes the remainder.
    """
    if entry_count < 1:
        return []
    workers = effective_worker_count(worker_count, entry_count)
    chunk_size = entry_count // workers
    chunks = []
    for i in range(workers):
        start = i * chunk_size
        end = entry_count if i == workers - 1 else start + chunk_size
        chunks.append((start, end))
    return chunks


def _list_entries(directory: str) -> List[os.DirEntry]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


class Scanner:
    """Scans a single directory (non-recursive) for files with identical content."""

    def __init__(self, config: ScanConfig):
        self.config = config
        self.phase = ScanPhase.IDLE
        self._progress_lock = threading.Lock()

    def scan(self, stop_requested: Optional[StopRequested] = None) -> ScanReport:
        """
        Runs the whole scan and blocks until every worker has finished.

        Raises ScanError if the directory cannot be listed. Problems with
        single files are logged and collected in ScanReport.errors.
        """
        directory = self.config.directory
        report = ScanReport(scanned_directory=directory)

        self.phase = ScanPhase.LISTING
        try:
            entries = _list_entries(directory)
        except OSError as e:
            self.phase = ScanPhase.FAILED
            logger.debug("Could not list %s: %s", directory, e)
            raise ScanError(directory, e.strerror or str(e)) from e

        report.total_entries_listed = len(entries)
        self.phase = ScanPhase.PARTITIONED
        if not entries:
            logger.info("No entries in %s, nothing to scan.", directory)
            self.phase = ScanPhase.DONE
            return report

        chunks = partition(len(entries), self.config.worker_count)
        report.workers_used = len(chunks)
        logger.info("Scanning %d entries in %s with %d workers", len(entries), directory, len(chunks))

        scan_map = ScanMap()
        self.phase = ScanPhase.SCANNING
        with tqdm(total=len(entries),
                  desc="Scanning files",
                  unit="file",
                  disable=not self.config.show_progress) as pbar:

            def advance() -> None:
                with self._progress_lock:
                    pbar.update(1)

            with ThreadPoolExecutor(max_workers=len(chunks), thread_name_prefix="dirdupes") as pool:
                futures = [
                    pool.submit(self._scan_chunk, entries[start:end], scan_map, stop_requested, advance)
                    for start, end in chunks
                ]
                # Barrier: result() re-raises anything unexpected from a worker
                results = [future.result() for future in futures]

        for scanned, errors, stopped in results:
            report.total_files_scanned += scanned
            report.errors.update(errors)
            report.cancelled = report.cancelled or stopped

        self.phase = ScanPhase.REDUCING
        report.duplicate_groups = find_duplicate_groups(scan_map.snapshot())
        if report.cancelled:
            logger.warning("Scan of %s was stopped before all files were hashed.", directory)
        logger.info("Found %d duplicate groups among %d hashed files",
                    len(report.duplicate_groups), report.total_files_scanned)
        self.phase = ScanPhase.DONE
        return report

    def _scan_chunk(
        self,
        chunk: List[os.DirEntry],
        scan_map: ScanMap,
        stop_requested: Optional[StopRequested],
        advance: Callable[[], None],
    ) -> Tuple[int, Dict[str, str], bool]:
        scanned = 0
        errors: Dict[str, str] = {}
        for entry in chunk:
            if stop_requested is not None and stop_requested():
                return scanned, errors, True

            if entry.is_dir():
                advance()
                continue

            file_path = os.path.join(self.config.directory, entry.name)
            try:
                f = open(file_path, 'rb')
            except OSError as e:
                logger.warning("Couldn't open file %s: %s", entry.name, e)
                errors[entry.name] = f"Could not open file: {e.strerror or e}"
                advance()
                continue

            with f:
                file_hash = calculate_digest(f, self.config.block_size, self.config.hash_algorithm)
            if file_hash is None:
                logger.warning("Couldn't hash file %s", entry.name)
                errors[entry.name] = "Could not calculate hash (read error)"
            else:
                scan_map.record(file_hash, entry.name)
                scanned += 1
            advance()
        return scanned, errors, False


def scan_directory(config: ScanConfig, stop_requested: Optional[StopRequested] = None) -> ScanReport:
    return Scanner(config).scan(stop_requested)


def find_duplicates(directory: str, worker_count: int = DEFAULT_WORKER_COUNT) -> List[DuplicateGroup]:
    """Groups of same-content files in directory. Raises ScanError if it can't be listed."""
    return scan_directory(ScanConfig(directory=directory, worker_count=worker_count)).duplicate_groups
