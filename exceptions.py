class DataQualityError(Exception):
    """Base class for errors surfaced to the caller as a specific failure"""

    status_code = 400
    default_message = "Data quality analysis failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {
            'status': 'error',
            'error': self.__class__.__name__,
            'message': self.message
        }


class NoDataError(DataQualityError):
    """Input is empty or produced no rows"""

    default_message = "No data found in file"


class UnsupportedFormatError(NoDataError):
    """File is neither CSV nor JSON, so no rows can be produced"""

    default_message = "Unsupported file format"


class MalformedInputError(DataQualityError):
    """Outer syntax is recognised but the content is invalid"""

    default_message = "Malformed input"


class GenerationError(DataQualityError):
    """The summary or fix generation step failed"""

    status_code = 502
    default_message = "Text generation failed"
