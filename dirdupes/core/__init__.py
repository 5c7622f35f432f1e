# dirdupes/core/__init__.py
from .models import ScanConfig, ScanPhase, ScanReport, DuplicateGroup
from .hasher import calculate_digest, calculate_file_digest
from .scan_map import ScanMap
from .duplicate_detector import find_duplicate_groups
from .scanner import Scanner, ScanError, scan_directory, find_duplicates, partition
