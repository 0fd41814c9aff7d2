from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Protocol

from ..config import BLOCK_DELAY_MS
from .encoding import pack_bits
from .frame import BLOCK_PADDING, BYTES_PER_BLOCK, SYNC_PREAMBLE

logger = logging.getLogger(__name__)


class Channel(Protocol):
    def write_all(self, data: bytes) -> None:
        ...

    def flush(self) -> None:
        ...


@dataclass(frozen=True)
class TransmitStats:
    payload_bytes: int
    blocks: int


class FrameTransmitter:
    """Drive a channel with the display's framed, paced wire protocol.

    The stream is the sync preamble followed by blocks of 8 payload bytes
    and one 0x00 padding byte. After each block the channel is flushed and
    the caller blocks for ``block_delay_ms`` so the receiver can refresh.
    """

    def __init__(
        self,
        channel: Channel,
        block_delay_ms: int = BLOCK_DELAY_MS,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._channel = channel
        self._delay = max(0.0, block_delay_ms / 1000.0)
        self._sleep = sleep or time.sleep

    def send(self, samples: Iterable[int]) -> TransmitStats:
        self._channel.write_all(SYNC_PREAMBLE)
        self._channel.flush()
        payload_bytes = 0
        blocks = 0
        in_block = 0
        for value in pack_bits(samples):
            self._channel.write_all(bytes([value]))
            payload_bytes += 1
            in_block += 1
            if in_block >= BYTES_PER_BLOCK:
                self._channel.write_all(BLOCK_PADDING)
                self._channel.flush()
                self._sleep(self._delay)
                in_block = 0
                blocks += 1
        self._channel.flush()
        logger.info("Sent %d payload bytes in %d blocks", payload_bytes, blocks)
        return TransmitStats(payload_bytes=payload_bytes, blocks=blocks)


class BufferChannel:
    """In-memory channel collecting everything written to it."""

    def __init__(self) -> None:
        self.buffer = bytearray()

    def write_all(self, data: bytes) -> None:
        self.buffer += data

    def flush(self) -> None:
        pass


def build_frame(samples: Iterable[int]) -> bytes:
    """Return the exact byte stream ``FrameTransmitter.send`` writes, without pausing."""
    channel = BufferChannel()
    FrameTransmitter(channel, block_delay_ms=0, sleep=lambda seconds: None).send(samples)
    return bytes(channel.buffer)
