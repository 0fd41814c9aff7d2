from .file import FileChannel
from .serial import SerialChannel

__all__ = ["FileChannel", "SerialChannel"]
