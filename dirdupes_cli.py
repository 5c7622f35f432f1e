import signal
import sys
import logging
import argparse
import threading
from datetime import datetime
from typing import Optional, List

from dirdupes.core import ScanConfig, ScanError, scan_directory
from dirdupes.core.models import DEFAULT_WORKER_COUNT, DEFAULT_BLOCK_SIZE, DEFAULT_HASH_ALGORITHM
from dirdupes.ui import generate_html_report, print_scan_report

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="dirdupes: Find files with identical content in a single directory.")
    parser.add_argument("scan_directory", metavar="DIRECTORY", type=str, help="The directory to scan for duplicates (not recursive).")
    parser.add_argument("-t", "--threads", type=int, default=DEFAULT_WORKER_COUNT, help="The maximum number of worker threads to use during scanning.")
    parser.add_argument("--block-size", type=int, default=DEFAULT_BLOCK_SIZE, help="Read buffer size in bytes used while hashing.")
    parser.add_argument("--algorithm", type=str, default=DEFAULT_HASH_ALGORITHM, help="hashlib algorithm used for content digests.")
    parser.add_argument("-o", "--output", type=str, default=None, help="Also write an HTML report to this path.")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = ScanConfig(
            directory=args.scan_directory,
            worker_count=args.threads,
            block_size=args.block_size,
            hash_algorithm=args.algorithm,
            show_progress=not args.no_progress,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    stop_event = threading.Event()

    def signal_handler(signum, frame):
        if not stop_event.is_set(): # Print message only once
            print("\nCtrl+C detected. Stopping workers after their current file...")
        stop_event.set()

    previous_handler = signal.signal(signal.SIGINT, signal_handler)
    try:
        print(f"Starting scan of directory: {config.directory}")
        report = scan_directory(config, stop_requested=stop_event.is_set)
    except ScanError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    print(f"dirdupes finished at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print_scan_report(report)

    if args.output:
        if generate_html_report(report, args.output):
            print(f"HTML report written to: {args.output}")

    return EXIT_INTERRUPTED if report.cancelled else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
