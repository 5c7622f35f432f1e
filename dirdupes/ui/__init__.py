# dirdupes/ui/__init__.py
from .html_reporter import generate_html_report
from .text_reporter import print_scan_report
