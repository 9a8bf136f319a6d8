"""
Exceptions raised by the catbox client.

Local validation problems are raised before any request is sent. Failed
responses surface as CatboxHTTPError unless they match one of the known
Catbox error bodies, in which case a more specific error is raised with the
original CatboxHTTPError attached as its cause.
"""

from typing import Optional

import requests

from .constants import PRECONDITION_FAILED


class CatboxError(Exception):
    """Base exception for catbox client errors."""

    pass


class CatboxValidationError(CatboxError, ValueError):
    """Invalid arguments, detected before anything was sent."""

    pass


class CatboxHTTPError(CatboxError):
    """
    Non-2xx response from Catbox or Litterbox.

    Args:
        status_code: HTTP status of the response
        text: Response body as text
        response: The underlying requests response, if any
    """

    def __init__(
        self, status_code: int, text: str, response: Optional[requests.Response] = None
    ):
        super().__init__(f"API error ({status_code}): {text}")
        self.status_code = status_code
        self.text = text
        self.response = response

    def matches(self, signature: str) -> bool:
        """Check whether this is a 412 whose body is exactly ``signature``."""
        return self.status_code == PRECONDITION_FAILED and self.text == signature


class NoSuchFileError(CatboxError):
    """Catbox was given a file name that does not exist on its server."""

    def __init__(self, cause: CatboxHTTPError):
        super().__init__("Catbox was given an invalid file.")
        self.cause = cause


class NoSuchAlbumError(CatboxError):
    """The album short does not exist or does not belong to the current user."""

    def __init__(self, short: str, cause: CatboxHTTPError):
        super().__init__(
            f"Album '{short}' either does not exist, or does not belong to the current user."
        )
        self.short = short
        self.cause = cause
