from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

DEFAULT_IMAGE_PATH = "tallintest.png"
DEFAULT_DEVICE = "/dev/ttyUSB0"
DEVICE_ENV_VAR = "HELMETLINK_DEVICE"
SERIAL_BAUD_RATE = 115200
DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 64
BLOCK_DELAY_MS = 10


@dataclass(frozen=True)
class LinkConfig:
    """Everything a transmission needs, fixed at process start."""

    image_path: str = DEFAULT_IMAGE_PATH
    device: str = DEFAULT_DEVICE
    baud_rate: int = SERIAL_BAUD_RATE
    width: int = DISPLAY_WIDTH
    height: int = DISPLAY_HEIGHT
    block_delay_ms: int = BLOCK_DELAY_MS
    fit: bool = False
    output: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LinkConfig":
        return cls(device=os.environ.get(DEVICE_ENV_VAR, DEFAULT_DEVICE))

    def with_overrides(self, **changes) -> "LinkConfig":
        """Return a copy with every non-None value in ``changes`` applied."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})
