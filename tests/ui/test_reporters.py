# tests/ui/test_reporters.py
import unittest
import os
import io
import tempfile

from dirdupes.core.models import DuplicateGroup, ScanReport
from dirdupes.ui import generate_html_report, print_scan_report


def _report(**kwargs):
    defaults = dict(
        scanned_directory="/data",
        total_entries_listed=4,
        total_files_scanned=3,
        workers_used=2,
        duplicate_groups=[DuplicateGroup(id="abc123", files=("b<1>.txt", "a.txt"))],
        errors={"locked.bin": "Could not open file: Permission denied"},
    )
    defaults.update(kwargs)
    return ScanReport(**defaults)


class TestTextReporter(unittest.TestCase):

    def test_prints_groups(self):
        out = io.StringIO()
        print_scan_report(_report(), stream=out)
        text = out.getvalue()
        self.assertIn("-> 1 duplications found.", text)
        self.assertIn("• group 0", text)
        self.assertIn("  |- b<1>.txt", text)
        self.assertIn("  |- a.txt", text)
        self.assertIn("locked.bin", text)
        self.assertNotIn("no duplicate files found", text)

    def test_no_duplicates(self):
        out = io.StringIO()
        print_scan_report(_report(duplicate_groups=[], errors={}), stream=out)
        self.assertIn("no duplicate files found!", out.getvalue())
        self.assertNotIn("duplications found", out.getvalue())

    def test_cancelled_note(self):
        out = io.StringIO()
        print_scan_report(_report(cancelled=True), stream=out)
        self.assertIn("stopped early", out.getvalue())


class TestHtmlReporter(unittest.TestCase):

    def test_writes_report(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "report.html")
            self.assertTrue(generate_html_report(_report(), path))
            with open(path, encoding='utf-8') as f:
                html = f.read()
        self.assertIn("Total duplicate sets found: 1", html)
        self.assertIn("abc123", html)
        self.assertIn("b&lt;1&gt;.txt", html)
        self.assertIn("locked.bin", html)
        # Files listed by name
        self.assertLess(html.index("a.txt"), html.index("b&lt;1&gt;.txt"))

    def test_unwritable_path_returns_false(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "missing-dir", "report.html")
            with self.assertLogs('dirdupes.ui.html_reporter', level='ERROR'):
                self.assertFalse(generate_html_report(_report(), path))


if __name__ == '__main__':
    unittest.main()
