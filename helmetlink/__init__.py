from .config import LinkConfig
from .errors import (
    ChannelIOError,
    DecodeError,
    FileError,
    HelmetLinkError,
    PortOpenError,
    PreconditionViolation,
)

__all__ = [
    "ChannelIOError",
    "DecodeError",
    "FileError",
    "HelmetLinkError",
    "LinkConfig",
    "PortOpenError",
    "PreconditionViolation",
]
