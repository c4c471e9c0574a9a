"""Model errors."""


class ValidationError(Exception):
    """Malformed model input: out-of-range positions, bad seats, empty tables, bad grid."""

    def __init__(self, message: str = "Validation error", field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)
