# dirdupes/core/duplicate_detector.py
from typing import List, Mapping, Sequence
from .models import DuplicateGroup


def find_duplicate_groups(hashes: Mapping[str, Sequence[str]]) -> List[DuplicateGroup]:
    """
    Reduces a digest -> file names mapping to the groups holding two or more files.

    File order inside a group is kept as recorded. Group order follows the
    mapping's iteration order.
    """
    duplicate_groups: List[DuplicateGroup] = []

    for file_hash, file_list in hashes.items():
        if len(file_list) > 1:
            duplicate_groups.append(DuplicateGroup(id=file_hash, files=tuple(file_list)))

    return duplicate_groups
