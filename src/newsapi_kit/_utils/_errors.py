import json
from contextlib import contextmanager
from typing import Generator

import httpx
from pydantic import ValidationError

from ..models.errors import (
    APIError,
    NewsKitError,
    ResponseDecodingError,
    TransportError,
)


@contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Context manager for handling HTTP and decoding errors in API calls.

    Converts the exceptions raised while sending a request and reading its
    response into the package's error kinds. Errors that already belong to
    the package, such as a failed request build, pass through unchanged.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        APIError: For HTTP errors with status codes and error messages.
        TransportError: For connectivity failures and timeouts.
        ResponseDecodingError: For bodies that are not valid JSON or do not
            match the expected model.
    """
    try:
        yield
    except NewsKitError:
        raise
    except httpx.HTTPStatusError as e:
        try:
            error_body = e.response.json()
        except ValueError:
            error_body = e.response.text

        status_code = e.response.status_code

        message: str | None = None
        code: str | None = None
        if isinstance(error_body, dict):
            message = (
                error_body.get("message")
                or error_body.get("error")
                or error_body.get("detail")
            )
            code = error_body.get("code")
            error_body = json.dumps(error_body)

        raise APIError(message or str(e), status_code, error_body, code) from e
    except httpx.TransportError as e:
        raise TransportError(str(e) or type(e).__name__) from e
    except (ValidationError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ResponseDecodingError(str(e)) from e
