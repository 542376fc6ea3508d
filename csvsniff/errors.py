class NoNewlineFoundError(ValueError):
    """Raised when none of the candidate line terminators occurs in the sample."""

    def __init__(self, message: str = "No newline characters found in the sample."):
        super().__init__(message)
