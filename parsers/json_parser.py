import json
import logging

from exceptions import MalformedInputError, NoDataError
from models import ParsedData, make_row
from .file_parser import BaseParser


class JSONParser(BaseParser):
    """Parser for JSON record files (an array of objects or a single object)"""

    def read(self, text):
        """Parse JSON text and return ParsedData"""
        text = self._decode(text)

        try:
            data = json.loads(text, parse_constant=self._reject_constant)
        except json.JSONDecodeError as e:
            logging.error(f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}")
            raise MalformedInputError("Invalid JSON format")

        records = data if isinstance(data, list) else [data]

        rows = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise MalformedInputError(
                    f"JSON record {index} is a {type(record).__name__}, expected an object"
                )
            rows.append(make_row(record))

        if not rows:
            raise NoDataError("JSON file contains no records")

        logging.info(f"Parsed JSON with {len(rows)} records")
        return ParsedData(rows=rows)

    @staticmethod
    def _reject_constant(name):
        raise MalformedInputError(f"Invalid JSON constant: {name}")
