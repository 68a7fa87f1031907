"""Custom exceptions for tskquery."""


class TskQueryError(Exception):
    """Base exception class for all tskquery errors."""

    def __init__(self, message: str | None = None, *args):
        """Initialize the TskQueryError.

        Args:
            message: Optional error message.
            *args: Additional arguments to pass to the base
            Exception class.
        """
        self.message = message or self.__class__.__name__
        super().__init__(self.message, *args)


class ValidationError(TskQueryError):
    """Exception raised for validation errors."""


class QuerySyntaxError(ValidationError):
    """Exception raised for invalid query syntax.

    Classification itself never fails; this is raised by callers that opt in
    to rejecting queries containing unexpected tokens.
    """

    def __init__(
        self, input_value: str, cause: str, message: str | None = None, *args: object
    ) -> None:
        """Initialize the QuerySyntaxError.

        Args:
            input_value: The input value with invalid syntax.
            cause: Description of the syntax error cause.
            message: Optional custom error message.
            *args: Additional arguments to pass to the base Exception class.
        """
        if message is None:
            message = f"Syntax error in query '{input_value}': {cause}"
        super().__init__(message, *args)
        self.input_value = input_value
        self.cause = cause
