import logging

from exceptions import NoDataError
from models import ParsedData, make_row
from .file_parser import BaseParser


class CSVParser(BaseParser):
    """Parser for comma-separated text.

    Fields are split on every comma; quoted commas are not supported. Lines
    whose field count differs from the header are dropped and counted.
    """

    delimiter = ','

    def read(self, text):
        """Parse CSV text and return ParsedData"""
        text = self._decode(text)
        lines = [line for line in text.split('\n') if line.strip()]

        if not lines:
            raise NoDataError("CSV file has no lines")

        headers = self._split_line(lines[0])
        rows = []
        skipped = 0

        for line_number, line in enumerate(lines[1:], start=2):
            values = self._split_line(line)
            if len(values) != len(headers):
                skipped += 1
                logging.debug(f"Dropping CSV line {line_number}: expected {len(headers)} fields, got {len(values)}")
                continue
            rows.append(make_row(zip(headers, values)))

        if skipped:
            logging.warning(f"Dropped {skipped} CSV line(s) with a field count different from the header")

        if not rows:
            raise NoDataError("CSV file has a header but no data rows")

        logging.info(f"Parsed CSV with {len(rows)} rows and {len(headers)} columns")
        return ParsedData(rows=rows, skipped_rows=skipped)

    def _split_line(self, line):
        return [self._clean_cell(cell) for cell in line.split(self.delimiter)]

    def _clean_cell(self, cell):
        """Trim whitespace and remove double quotes"""
        return cell.strip().replace('"', '')
