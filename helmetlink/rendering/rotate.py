from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from ..errors import PreconditionViolation


def rotate_coordinates(x: int, y: int, width: int) -> Tuple[int, int]:
    """Map a target (rotated) coordinate to its source coordinate.

    The target is ``height`` samples wide and ``width`` samples tall. For a
    square image of side n, applying the mapping four times is the identity.
    """
    return width - 1 - y, x


class RotatingView:
    """Single-pass iterator reading a row-major buffer rotated by 90 degrees.

    No second buffer is built: every step maps the cursor back into the
    source and reads one sample. The sequence ends the first time the
    mapped coordinate falls outside the source image.
    """

    def __init__(self, buffer: Sequence[int], width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise PreconditionViolation(f"Dimensions must be positive, got {width}x{height}")
        if len(buffer) != width * height:
            raise PreconditionViolation(
                f"Buffer holds {len(buffer)} samples, expected {width}x{height}={width * height}"
            )
        self._buffer = buffer
        self._width = width
        self._height = height
        self._x = 0
        self._y = 0
        self._yielded = 0

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        xt, yt = rotate_coordinates(self._x, self._y, self._width)
        if not (0 <= xt < self._width and 0 <= yt < self._height):
            raise StopIteration
        value = self._buffer[yt * self._width + xt]
        self._x += 1
        if self._x >= self._height:
            self._x = 0
            self._y += 1
        self._yielded += 1
        return value

    def __len__(self) -> int:
        return self._width * self._height

    @property
    def remaining(self) -> int:
        return len(self) - self._yielded

    @property
    def target_size(self) -> Tuple[int, int]:
        """Width and height of the rotated image."""
        return self._height, self._width
