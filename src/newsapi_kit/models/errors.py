from typing import Optional


class NewsKitError(Exception):
    """Base class for every error raised by newsapi_kit."""


class ConfigurationError(NewsKitError):
    def __init__(
        self,
        message="API key missing. Set the NEWSAPI_KEY environment variable or pass api_key to NewsClient.",
    ):
        self.message = message
        super().__init__(self.message)


class RequestBuildError(NewsKitError):
    """Raised when a request spec cannot be turned into a prepared request.

    A failed build never reaches the network.
    """


class InvalidURLError(RequestBuildError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid request URL: {url!r}")


class BodyEncodingError(RequestBuildError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to encode request body: {detail}")


class APIError(NewsKitError):
    """The news API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        code: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.body = body
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"


class TransportError(NewsKitError):
    """Connectivity failure or timeout while talking to the news API."""


class ResponseDecodingError(NewsKitError):
    """The response body could not be decoded into the expected model."""
