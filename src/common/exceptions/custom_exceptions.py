"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class InvalidSelectionError(ApplicationError):
    """Exception raised when a menu selection cannot be parsed as an integer."""

    def __init__(
        self,
        raw_input: str,
        message: str = "failed to convert to integer",
        original_exception: Exception | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.raw_input = raw_input
        self.message = f"Invalid Selection: {message} (input: {raw_input!r})"


class InvalidItemInputError(ApplicationError):
    """Exception raised for an item name or quantity that cannot be used."""

    def __init__(self, message: str = "Invalid item input", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
