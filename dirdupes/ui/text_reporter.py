# dirdupes/ui/text_reporter.py
import sys
from typing import TextIO, Optional
from dirdupes.core.models import ScanReport


def print_scan_report(report: ScanReport, stream: Optional[TextIO] = None) -> None:
    """Prints the duplicate groups of a finished scan in the console format."""
    out = stream if stream is not None else sys.stdout

    print("- finished --------------", file=out)
    if report.cancelled:
        print("  (scan stopped early, results are partial)", file=out)

    if not report.duplicate_groups:
        print("  no duplicate files found!", file=out)
        print("  have a nice day :)", file=out)
    else:
        print(f"-> {len(report.duplicate_groups)} duplications found.\n", file=out)
        for index, group in enumerate(report.duplicate_groups):
            print(f"• group {index}", file=out)
            for file_name in group.files:
                print(f"  |- {file_name}", file=out)
            print("", file=out)

    if report.errors:
        print(f"  {len(report.errors)} file(s) could not be read and were skipped:", file=out)
        for file_name, message in sorted(report.errors.items()):
            print(f"  !  {file_name}: {message}", file=out)
