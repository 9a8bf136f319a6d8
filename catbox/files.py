"""
Reading local files and file-like objects into upload payloads.

Both clients accept a path or an open binary file wherever they accept raw
bytes; this module does the checks that have to happen before the content
is handed to the request dispatcher.
"""

import os
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from .constants import GIB, MIB
from .exceptions import CatboxValidationError

FileSource = Union[str, Path, BinaryIO]


def _describe_size(limit: int) -> str:
    if limit % GIB == 0:
        return f"{limit // GIB} GiB"
    return f"{limit // MIB} MiB"


def read_source(
    file_path: FileSource, max_size: int, name: Optional[str] = None
) -> Tuple[str, bytes]:
    """
    Load an upload source into memory.

    Args:
        file_path: Path to a file, or a binary file-like object
        max_size: Largest accepted size in bytes
        name: Upload name; defaults to the file's own name

    Returns:
        (name, content) tuple

    Raises:
        CatboxValidationError: If the file is missing, not a regular file, or
            larger than ``max_size``
    """
    if isinstance(file_path, (str, Path)):
        file_path = Path(file_path)
        if not file_path.exists():
            raise CatboxValidationError(f"File not found: {file_path}")
        if not file_path.is_file():
            raise CatboxValidationError(f"Not a regular file: {file_path}")
        if file_path.stat().st_size > max_size:
            raise CatboxValidationError(
                f"File can't be larger than {_describe_size(max_size)}: {file_path}"
            )

        with open(file_path, "rb") as f:
            content = f.read()
        return (name if name is not None else file_path.name), content

    # File-like object; read one byte past the limit to detect oversize
    content = file_path.read(max_size + 1)
    if len(content) > max_size:
        raise CatboxValidationError(
            f"File can't be larger than {_describe_size(max_size)}"
        )
    if name is None:
        raw = getattr(file_path, "name", "")
        name = os.path.basename(raw) if isinstance(raw, str) else ""
    return name, content
