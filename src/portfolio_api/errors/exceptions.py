"""Custom exception classes for the portfolio API."""


class PortfolioError(Exception):
    """Base exception for the portfolio API."""

    def __init__(self, code: str, message: str, status_code: int = 500):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidInputError(PortfolioError):
    """Missing required field or malformed identifier."""

    def __init__(self, message: str):
        super().__init__("INVALID_INPUT", message, status_code=400)


class NotFoundError(PortfolioError):
    """Resource not found."""

    def __init__(self, message: str = "not found"):
        super().__init__("NOT_FOUND", message, status_code=404)


class StoreError(PortfolioError):
    """The document store rejected or failed an operation."""

    def __init__(self, message: str = "database operation failed"):
        super().__init__("STORE_ERROR", message, status_code=500)
