# dirdupes/__init__.py
from .core import ScanConfig, ScanReport, DuplicateGroup, ScanError, scan_directory, find_duplicates

__version__ = "0.1.0"
