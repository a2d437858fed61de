from .csv_writer import CsvExportResult, suggested_filename, write_rows_to_csv
from .excel_writer import write_rows_to_xlsx

__all__ = ["CsvExportResult", "suggested_filename", "write_rows_to_csv", "write_rows_to_xlsx"]
