"""
Catbox Python SDK

Simple client library for the Catbox and Litterbox file hosts.

Usage:
    from catbox import Catbox, Litterbox, LitterboxTime

    # Initialize client (omit the user hash for anonymous use)
    client = Catbox(user_hash="your_user_hash")

    # Upload bytes, a local file or a remote URL
    url = client.upload(b"...", "photo.png")
    url = client.upload_file("photo.png")
    url = client.upload_url("https://example.com/photo.png")

    # Albums
    album_url = client.create_album("Holiday", "Summer 2022", {"abc123.png"})
    client.add_to_album("pd412w", {"def456.png"})
    client.delete_album("pd412w")

    # Temporary upload
    url = Litterbox().upload_file("clip.mp4", time=LitterboxTime.HOUR_24)
"""

from .client import (
    Catbox,
    ReqType,
    create_album,
    upload,
    upload_file,
    upload_url,
)
from .exceptions import (
    CatboxError,
    CatboxHTTPError,
    CatboxValidationError,
    NoSuchAlbumError,
    NoSuchFileError,
)
from .litterbox import Litterbox, LitterboxTime

__version__ = "0.1.0"

__all__ = [
    "Catbox",
    "Litterbox",
    "LitterboxTime",
    "ReqType",
    "CatboxError",
    "CatboxHTTPError",
    "CatboxValidationError",
    "NoSuchAlbumError",
    "NoSuchFileError",
    "upload",
    "upload_url",
    "upload_file",
    "create_album",
]
