class PredictionInputError(Exception):
    """Raised when the values supplied for a live prediction are missing or not numeric."""
    def __init__(self, message, column=None):
        super().__init__(message)
        self.column = column
