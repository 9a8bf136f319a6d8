"""
Catbox client implementation.

This module contains the request dispatcher shared by both services, the
Catbox client and the anonymous Catbox operations.
For usage examples, see the package docstring: help(catbox)
"""

import enum
import logging
import mimetypes
import os
from typing import Iterable, List, Optional, Sequence, Tuple

import requests

from .constants import (
    CATBOX_API_URL,
    DEFAULT_TIMEOUT,
    MAX_ALBUM_FILES,
    MAX_CATBOX_FILE_SIZE,
    NO_SUCH_ALBUM_ERROR,
    NO_SUCH_FILE_ERROR,
    TIMEOUT_ENV,
    USERHASH_ENV,
)
from .exceptions import (
    CatboxHTTPError,
    CatboxValidationError,
    NoSuchAlbumError,
    NoSuchFileError,
)
from .files import FileSource, read_source

logger = logging.getLogger(__name__)

Fields = List[Tuple[str, str]]


class ReqType(enum.Enum):
    URL_UPLOAD = "urlupload"
    DELETE_FILES = "deletefiles"
    CREATE_ALBUM = "createalbum"
    EDIT_ALBUM = "editalbum"
    ADD_TO_ALBUM = "addtoalbum"
    REMOVE_FROM_ALBUM = "removefromalbum"
    DELETE_ALBUM = "deletealbum"


FILE_UPLOAD = "fileupload"


def _file_names(files: Iterable[str]) -> List[str]:
    """Drop duplicates, blanks and inner spaces, keeping the caller's order."""
    if isinstance(files, str):
        files = [files]
    names = (name.replace(" ", "") for name in files)
    return list(dict.fromkeys(name for name in names if name))


def _check_album_size(names: Sequence[str]):
    if len(names) > MAX_ALBUM_FILES:
        raise CatboxValidationError(
            f"Albums can only contain {MAX_ALBUM_FILES} files, was given {len(names)}."
        )


class _Dispatcher:
    """
    Sends form posts to a single fixed endpoint.

    Args:
        base_url: Endpoint every request is posted to
        timeout: Request timeout in seconds (default: 30)
    """

    user_hash: Optional[str] = None

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """Release the underlying HTTP session."""
        self.session.close()

    def _fields(self, reqtype: str) -> Fields:
        fields = [("reqtype", reqtype)]
        if self.user_hash is not None:
            fields.append(("userhash", self.user_hash))
        return fields

    def _post(self, **kwargs) -> str:
        """Make POST request."""
        response = self.session.post(self.base_url, timeout=self.timeout, **kwargs)
        self._handle_errors(response)
        return response.text

    def _handle_errors(self, response: requests.Response):
        """Turn any non-2xx response into a CatboxHTTPError."""
        if not 200 <= response.status_code < 300:
            logger.debug("%s answered %s", self.base_url, response.status_code)
            raise CatboxHTTPError(response.status_code, response.text, response)

    def _request(self, reqtype: ReqType, params: Fields = ()) -> str:
        """Post a url-encoded form for ``reqtype`` and return the body."""
        logger.debug("POST %s reqtype=%s", self.base_url, reqtype.value)
        return self._post(data=self._fields(reqtype.value) + list(params))

    def _upload(self, content: bytes, name: str, extra: Fields = ()) -> str:
        """Post ``content`` as a multipart file upload and return the body."""
        if not name or not name.strip():
            raise CatboxValidationError("'name' must not be blank")

        content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"
        logger.debug(
            "POST %s reqtype=%s (%d bytes)", self.base_url, FILE_UPLOAD, len(content)
        )
        return self._post(
            data=self._fields(FILE_UPLOAD) + list(extra),
            files={"fileToUpload": (name, content, content_type)},
        )


class Catbox(_Dispatcher):
    """
    Catbox API client.

    Without a user hash the client is anonymous: it can upload and create
    albums, but anything scoped to an account is rejected before a request
    is made.

    Args:
        user_hash: Your Catbox user hash (account settings), or None
        base_url: Catbox API endpoint (default: https://catbox.moe/user/api.php)
        timeout: Request timeout in seconds (default: 30)
    """

    def __init__(
        self,
        user_hash: Optional[str] = None,
        base_url: str = CATBOX_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__(base_url, timeout)
        # A blank hash is the same as no account
        self.user_hash = user_hash.strip() if user_hash and user_hash.strip() else None

    @classmethod
    def from_env(cls) -> "Catbox":
        """
        Build a client from CATBOX_USERHASH and the optional CATBOX_TIMEOUT.

        Raises:
            CatboxValidationError: If CATBOX_USERHASH is missing or blank, or
                CATBOX_TIMEOUT is not a number
        """
        user_hash = os.getenv(USERHASH_ENV)
        if user_hash is None or user_hash.strip() == "":
            raise CatboxValidationError(
                f"Missing required environment variable: {USERHASH_ENV}"
            )
        timeout = os.getenv(TIMEOUT_ENV)
        if not timeout:
            return cls(user_hash.strip())
        try:
            return cls(user_hash.strip(), timeout=float(timeout))
        except ValueError:
            raise CatboxValidationError(
                f"{TIMEOUT_ENV} must be a number, got {timeout!r}"
            ) from None

    def _require_account(self, action: str):
        if self.user_hash is None:
            raise CatboxValidationError(f"A user hash is required to {action}")

    def upload(self, content: bytes, name: str) -> str:
        """
        Upload raw bytes and return the URL of the hosted file.

        Args:
            content: The contents to upload
            name: Name of the file, must not be blank

        Raises:
            CatboxValidationError: If name is blank
            CatboxHTTPError: If Catbox rejects the upload

        Example:
            >>> url = Catbox("hash").upload(b"...", "photo.png")
            >>> print(url)
            https://files.catbox.moe/abc123.png
        """
        return self._upload(content, name)

    def upload_url(self, url: str) -> str:
        """Have Catbox fetch ``url`` and return the URL of the hosted copy."""
        return self._request(ReqType.URL_UPLOAD, [("url", url)])

    def upload_file(self, file_path: FileSource, name: Optional[str] = None) -> str:
        """
        Upload a local file, or a binary file-like object.

        Args:
            file_path: Path to the file, or a file-like object; at most 200 MiB
            name: Upload name, defaults to the file's name

        Raises:
            CatboxValidationError: If the file or the name is faulty in some manner
        """
        name, content = read_source(file_path, MAX_CATBOX_FILE_SIZE, name)
        return self.upload(content, name)

    def delete(self, files: Iterable[str]):
        """
        Delete files from the account.

        Catbox deletes the given files in order until it meets one that does
        not exist. Given ``["a.png", "b.png", "c.png"]`` where only ``b.png`` is
        invalid, ``a.png`` is deleted and ``c.png`` is not, yet the call still
        raises NoSuchFileError. The client neither reorders nor retries.

        Args:
            files: File names to delete; spaces inside entries are removed

        Raises:
            NoSuchFileError: If one or more of the files do not exist
        """
        self._require_account("delete files")
        try:
            self._request(ReqType.DELETE_FILES, [("files", " ".join(_file_names(files)))])
        except CatboxHTTPError as e:
            if e.matches(NO_SUCH_FILE_ERROR):
                raise NoSuchFileError(e) from e
            raise

    def create_album(self, title: str, description: str, files: Iterable[str]) -> str:
        """
        Create an album and return its URL.

        Invalid file names do not raise; Catbox stores them as "corrupt"
        entries. Albums created without a user hash can never be edited.

        Args:
            title: Album title
            description: Album description
            files: File names to include, at most 500

        Raises:
            CatboxValidationError: If more than 500 files are given
        """
        names = _file_names(files)
        _check_album_size(names)
        return self._request(
            ReqType.CREATE_ALBUM,
            [("title", title), ("desc", description), ("files", " ".join(names))],
        )

    def edit_album(self, short: str, title: str, description: str, files: Iterable[str]):
        """
        Replace the title, description and files of an album.

        Nothing is merged: the album ends up with exactly the given files.

        Raises:
            CatboxValidationError: If more than 500 files are given
            NoSuchAlbumError: If the album doesn't exist or isn't the user's
        """
        self._require_account("edit albums")
        names = _file_names(files)
        _check_album_size(names)
        self._request_album(
            ReqType.EDIT_ALBUM,
            short,
            [("title", title), ("desc", description), ("files", " ".join(names))],
        )

    def add_to_album(self, short: str, files: Iterable[str]):
        """Add files to the album ``short``."""
        self._require_account("modify albums")
        self._request_album(
            ReqType.ADD_TO_ALBUM, short, [("files", " ".join(_file_names(files)))]
        )

    def remove_from_album(self, short: str, files: Iterable[str]):
        """Remove files from the album ``short``."""
        self._require_account("modify albums")
        self._request_album(
            ReqType.REMOVE_FROM_ALBUM, short, [("files", " ".join(_file_names(files)))]
        )

    def delete_album(self, short: str):
        """Delete the album ``short``."""
        self._require_account("delete albums")
        self._request_album(ReqType.DELETE_ALBUM, short)

    def _request_album(self, reqtype: ReqType, short: str, params: Fields = ()):
        try:
            self._request(reqtype, [("short", short)] + list(params))
        except CatboxHTTPError as e:
            if e.matches(NO_SUCH_ALBUM_ERROR):
                raise NoSuchAlbumError(short, e) from e
            # Whether add/remove report unknown files this way is unconfirmed
            if e.matches(NO_SUCH_FILE_ERROR):
                raise NoSuchFileError(e) from e
            raise


# Anonymous operations


def upload(content: bytes, name: str) -> str:
    """Upload raw bytes anonymously and return the hosted URL."""
    with Catbox() as client:
        return client.upload(content, name)


def upload_url(url: str) -> str:
    """Upload a remote URL anonymously and return the hosted URL."""
    with Catbox() as client:
        return client.upload_url(url)


def upload_file(file_path: FileSource, name: Optional[str] = None) -> str:
    """Upload a local file anonymously and return the hosted URL."""
    with Catbox() as client:
        return client.upload_file(file_path, name)


def create_album(title: str, description: str, files: Iterable[str]) -> str:
    """Create an anonymous album; it cannot be edited afterwards."""
    with Catbox() as client:
        return client.create_album(title, description, files)
