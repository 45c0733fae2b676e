"""
Export — projection to delimited text.
"""

from .csv_export import EXPORT_FILENAME, CSV_HEADERS, projection_to_csv, write_csv

__all__ = ["EXPORT_FILENAME", "CSV_HEADERS", "projection_to_csv", "write_csv"]
