from __future__ import annotations

from typing import Iterable, Iterator

THRESHOLD = 127


def threshold(sample: int) -> int:
    """Return the display bit for a luminance sample (1 when above midpoint)."""
    return 1 if sample > THRESHOLD else 0


def pack_bits(samples: Iterable[int]) -> Iterator[int]:
    """Yield packed bytes, first sample of each group in the least significant bit.

    A trailing group shorter than 8 samples is emitted with its unused high
    bits cleared.
    """
    value = 0
    bit = 0
    for sample in samples:
        if threshold(sample):
            value |= 1 << bit
        bit += 1
        if bit >= 8:
            yield value
            value = 0
            bit = 0
    if bit:
        yield value
