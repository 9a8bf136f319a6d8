"""
Litterbox client: temporary uploads that expire after a fixed time.
"""

import enum
from typing import Optional, Union

from .client import _Dispatcher
from .constants import DEFAULT_TIMEOUT, LITTERBOX_API_URL, MAX_LITTERBOX_FILE_SIZE
from .exceptions import CatboxValidationError
from .files import FileSource, read_source


class LitterboxTime(enum.Enum):
    """How long a Litterbox file stays available."""

    HOUR_1 = "1h"
    HOUR_12 = "12h"
    HOUR_24 = "24h"
    HOUR_72 = "72h"


def _coerce_time(time: Union[LitterboxTime, str]) -> LitterboxTime:
    try:
        return LitterboxTime(time)
    except ValueError:
        choices = ", ".join(t.value for t in LitterboxTime)
        raise CatboxValidationError(
            f"Unknown Litterbox time {time!r}, expected one of {choices}"
        ) from None


class Litterbox(_Dispatcher):
    """
    Litterbox API client. Litterbox has no accounts, so there is no user hash.

    Args:
        base_url: Litterbox API endpoint
        timeout: Request timeout in seconds (default: 30)
    """

    def __init__(self, base_url: str = LITTERBOX_API_URL, timeout: float = DEFAULT_TIMEOUT):
        super().__init__(base_url, timeout)

    def upload(
        self,
        content: bytes,
        name: str,
        time: Union[LitterboxTime, str] = LitterboxTime.HOUR_1,
    ) -> str:
        """
        Upload raw bytes and return the URL of the temporary file.

        Args:
            content: The contents to upload
            name: Name of the file, must not be blank
            time: How long the file should be available for (default: 1 hour)

        Raises:
            CatboxValidationError: If name is blank or time is unknown
            CatboxHTTPError: If Litterbox rejects the upload

        Example:
            >>> url = Litterbox().upload(b"...", "clip.mp4", LitterboxTime.HOUR_24)
        """
        time = _coerce_time(time)
        return self._upload(content, name, [("time", time.value)])

    def upload_file(
        self,
        file_path: FileSource,
        name: Optional[str] = None,
        time: Union[LitterboxTime, str] = LitterboxTime.HOUR_1,
    ) -> str:
        """Upload a local file or file-like object of at most 1 GiB."""
        time = _coerce_time(time)
        name, content = read_source(file_path, MAX_LITTERBOX_FILE_SIZE, name)
        return self.upload(content, name, time)


def upload(
    content: bytes, name: str, time: Union[LitterboxTime, str] = LitterboxTime.HOUR_1
) -> str:
    """Upload raw bytes to Litterbox with a one-off client."""
    with Litterbox() as client:
        return client.upload(content, name, time)
