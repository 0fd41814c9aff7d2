from __future__ import annotations

import logging
from typing import Any, Optional

from ..config import SERIAL_BAUD_RATE
from ..errors import ChannelIOError, PortOpenError

logger = logging.getLogger(__name__)


class SerialChannel:
    """Blocking byte sink over a pyserial port, opened on construction."""

    def __init__(self, port: str, baud_rate: int = SERIAL_BAUD_RATE) -> None:
        try:
            import serial
        except Exception as exc:  # pragma: no cover
            raise RuntimeError("pyserial is required. Install with: pip install helmetlink") from exc
        self._port = port
        self._baud_rate = baud_rate
        logger.info("Establishing connection with %s at %d baud...", port, baud_rate)
        try:
            self._serial: Optional[Any] = serial.Serial(port, baud_rate)
        except (serial.SerialException, ValueError) as exc:
            raise PortOpenError(f"Cannot open serial port {port}: {exc}") from exc

    def write_all(self, data: bytes) -> None:
        port = self._require_open()
        try:
            written = port.write(data)
        except Exception as exc:
            raise ChannelIOError(f"Serial write failed on {self._port}: {exc}") from exc
        if written is not None and written != len(data):
            raise ChannelIOError(f"Serial write on {self._port} sent {written} of {len(data)} bytes")

    def flush(self) -> None:
        port = self._require_open()
        try:
            port.flush()
        except Exception as exc:
            raise ChannelIOError(f"Serial flush failed on {self._port}: {exc}") from exc

    def close(self) -> None:
        if self._serial is not None:
            self._serial.close()
            self._serial = None

    def _require_open(self) -> Any:
        if self._serial is None:
            raise ChannelIOError(f"Serial port {self._port} is closed")
        return self._serial

    def __enter__(self) -> "SerialChannel":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
