import logging
from abc import ABC, abstractmethod

from exceptions import MalformedInputError, NoDataError, UnsupportedFormatError


class BaseParser(ABC):
    """Abstract base class for tabular text parsers"""

    @abstractmethod
    def read(self, text):
        """Parse text and return ParsedData"""
        pass

    def parse(self, text):
        """Parse text and return the list of row records"""
        return self.read(text).rows

    def _decode(self, content):
        """Accept str or bytes; bytes are decoded as UTF-8"""
        if isinstance(content, (bytes, bytearray)):
            try:
                content = bytes(content).decode('utf-8-sig')
            except UnicodeDecodeError as e:
                raise MalformedInputError(f"File is not valid UTF-8 text: {e.reason}")
        content = (content or '').lstrip('\ufeff')
        if not content.strip():
            raise NoDataError("File is empty")
        return content


class FileParserFactory:
    """Factory class to get appropriate parser for file type"""

    def __init__(self):
        from .csv_parser import CSVParser
        from .json_parser import JSONParser

        self.parsers = {
            'csv': CSVParser(),
            'json': JSONParser()
        }

    def get_parser(self, file_name):
        """Get parser for a file name or bare extension"""
        file_type = get_file_type(file_name)
        parser = self.parsers.get(file_type)
        if not parser:
            logging.warning(f"No parser registered for '{file_name}'")
            raise UnsupportedFormatError(f"Unsupported file type: {file_type or file_name}")
        return parser


def get_file_type(file_name):
    """Lower-cased extension of a file name, or the name itself when it has none"""
    name = (file_name or '').strip()
    if '.' in name:
        return name.rsplit('.', 1)[1].lower()
    return name.lower()
