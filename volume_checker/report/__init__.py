"""
Reporting: console table and CSV for the daily volume check.
"""

from volume_checker.report.writer import (
    CSV_FIELDS,
    build_rows,
    csv_filename,
    render_table,
    write_csv,
)

__all__ = ["CSV_FIELDS", "build_rows", "csv_filename", "render_table", "write_csv"]
