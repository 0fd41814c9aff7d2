from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from ..errors import ChannelIOError, FileError

logger = logging.getLogger(__name__)


class FileChannel:
    """Capture the framed byte stream in a file instead of a serial port."""

    def __init__(self, path: str) -> None:
        self._path = path
        logger.info("Writing frame to %s...", path)
        try:
            self._handle: Optional[BinaryIO] = open(path, "wb")
        except OSError as exc:
            raise FileError(f"Cannot open output file {path}: {exc}") from exc

    def write_all(self, data: bytes) -> None:
        try:
            self._require_open().write(data)
        except OSError as exc:
            raise ChannelIOError(f"Write failed on {self._path}: {exc}") from exc

    def flush(self) -> None:
        handle = self._require_open()
        try:
            handle.flush()
        except OSError as exc:
            raise ChannelIOError(f"Flush failed on {self._path}: {exc}") from exc

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def _require_open(self) -> BinaryIO:
        if self._handle is None:
            raise ChannelIOError(f"Output file {self._path} is closed")
        return self._handle

    def __enter__(self) -> "FileChannel":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
