from __future__ import annotations

SYNC_BYTE = 0x23
SYNC_PREAMBLE = bytes([SYNC_BYTE]) * 11
BYTES_PER_BLOCK = 8
SAMPLES_PER_BLOCK = BYTES_PER_BLOCK * 8
BLOCK_PADDING = bytes([0x00])
