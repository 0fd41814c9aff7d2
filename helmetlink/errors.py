from __future__ import annotations


class HelmetLinkError(RuntimeError):
    """Base class for every failure surfaced to the command line."""


class FileError(HelmetLinkError):
    """Input image missing or unreadable."""


class DecodeError(HelmetLinkError):
    """Malformed image or decoded size mismatch."""


class PortOpenError(HelmetLinkError):
    """Serial device unavailable or misconfigured."""


class ChannelIOError(HelmetLinkError):
    """Write or flush failed during transmission."""


class PreconditionViolation(HelmetLinkError, ValueError):
    """Sample buffer length does not match the declared dimensions."""
