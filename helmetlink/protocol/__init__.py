from .encoding import pack_bits, threshold
from .frame import (
    BLOCK_PADDING,
    BYTES_PER_BLOCK,
    SAMPLES_PER_BLOCK,
    SYNC_PREAMBLE,
)
from .transmitter import BufferChannel, Channel, FrameTransmitter, TransmitStats, build_frame

__all__ = [
    "BLOCK_PADDING",
    "BYTES_PER_BLOCK",
    "BufferChannel",
    "Channel",
    "FrameTransmitter",
    "SAMPLES_PER_BLOCK",
    "SYNC_PREAMBLE",
    "TransmitStats",
    "build_frame",
    "pack_bits",
    "threshold",
]
