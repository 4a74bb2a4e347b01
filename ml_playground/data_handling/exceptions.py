class DatasetError(Exception):
    """Base class for dataset loading and validation errors."""
    def __init__(self, message, original_exception=None):
        super().__init__(message)
        self.original_exception = original_exception


class InvalidFileTypeError(DatasetError):
    pass


class DatasetParseError(DatasetError):
    pass


class EmptyDatasetError(DatasetError):
    pass


class DatasetTooLargeError(DatasetError):
    pass


class TooManyColumnsError(DatasetError):
    pass


class NoValidRowsError(DatasetError):
    pass
