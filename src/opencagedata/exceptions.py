"""Custom exception hierarchy for opencagedata."""


class OpenCageError(Exception):
    """Base exception for all opencagedata errors."""


class ConfigurationError(OpenCageError):
    """The client was created without a usable configuration."""

    def __init__(self, field: str, detail: str):
        self.field = field
        super().__init__(detail)


class InvalidAddress(OpenCageError):
    """An address or coordinate argument was missing or empty."""

    def __init__(self) -> None:
        super().__init__("INVALID_ADDRESS")


class ServiceStatusError(OpenCageError):
    """The service answered with a status code other than 200."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class ResponseInvalid(OpenCageError):
    """The response body is not JSON or lacks the expected structure."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Invalid response (HTTP {status_code}): {detail}")
