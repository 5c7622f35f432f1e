# dirdupes/ui/html_reporter.py
import logging
from html import escape
from dirdupes.core.models import ScanReport

logger = logging.getLogger(__name__)


def generate_html_report(report: ScanReport, output_html_path: str) -> bool:
    """
    Generates a basic HTML report listing duplicate files.

    Args:
        report (ScanReport): The finished scan.
        output_html_path (str): Path to save the generated HTML file.

    Returns:
        bool: True if the file was written.
    """

    duplicate_groups = report.duplicate_groups
    total_duplicate_sets = len(duplicate_groups)

    # Basic inline CSS for readability
    html_style = """
    <style>
        body { font-family: sans-serif; margin: 20px; background-color: #f4f4f4; color: #333; }
        h1 { color: #333; border-bottom: 2px solid #337ab7; padding-bottom: 10px; }
        h2 { color: #337ab7; margin-top: 30px; border-bottom: 1px solid #ccc; padding-bottom: 5px;}
        ul { list-style-type: none; padding-left: 0; }
        li { background-color: #fff; border: 1px solid #ddd; margin-bottom: 8px; padding: 10px; border-radius: 4px; }
        .file-path { font-weight: bold; }
        .file-details { font-size: 0.9em; color: #555; }
        .summary { background-color: #e7f3fe; border-left: 6px solid #2196F3; padding: 15px; margin-bottom: 20px; }
        .errors li { border-color: #e0b4b4; background-color: #fff6f6; }
    </style>
    """

    cancelled_note = "<p><em>The scan was stopped early; results are partial.</em></p>" if report.cancelled else ""

    html_content = f"""
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>dirdupes Report</title>
        {html_style}
    </head>
    <body>
        <h1>dirdupes - Duplicate File Report</h1>

        <div class="summary">
            <p><strong>Directory:</strong> <span class="file-path">{escape(report.scanned_directory)}</span></p>
            <p>Files hashed: {report.total_files_scanned} of {report.total_entries_listed} entries ({report.workers_used} workers)</p>
            <p>Total duplicate sets found: {total_duplicate_sets}</p>
            <p>Total files involved in duplicates: {report.total_duplicate_files}</p>
            <p>Redundant copies: {report.redundant_files}</p>
            {cancelled_note}
        </div>
    """

    for i, group in enumerate(duplicate_groups):
        html_content += f"""
        <div class="group-header">
            <h2>Duplicate Set {i + 1}</h2>
            <p class="file-details">Digest: {escape(group.id)} | Number of files: {group.total_files}</p>
        </div>
        <ul>
        """
        # Sort files by name for consistent order in report
        for file_name in sorted(group.files):
            html_content += f"""
            <li><span class="file-path">{escape(file_name)}</span></li>
            """
        html_content += "</ul>"

    if report.errors:
        html_content += f"""
        <h2>Files skipped ({len(report.errors)})</h2>
        <ul class="errors">
        """
        for file_name, message in sorted(report.errors.items()):
            html_content += f"""
            <li><span class="file-path">{escape(file_name)}</span>
            <br><span class="file-details">{escape(message)}</span></li>
            """
        html_content += "</ul>"

    html_content += """
    </body>
    </html>
    """

    try:
        with open(output_html_path, 'w', encoding='utf-8') as f:
            f.write(html_content)
    except OSError as e:
        logger.error("Error writing HTML report to %s: %s", output_html_path, e)
        return False
    return True
