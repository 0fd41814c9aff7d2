from __future__ import annotations

from typing import List, Optional

import pytest

from helmetlink.errors import ChannelIOError


class RecordingChannel:
    """Channel double that logs every call as ("write", bytes) or ("flush", None)."""

    def __init__(self, fail_after_writes: Optional[int] = None, fail_on_flush: Optional[int] = None) -> None:
        self.events: List[tuple] = []
        self._fail_after_writes = fail_after_writes
        self._fail_on_flush = fail_on_flush
        self._writes = 0
        self._flushes = 0

    def write_all(self, data: bytes) -> None:
        if self._fail_after_writes is not None and self._writes >= self._fail_after_writes:
            raise ChannelIOError("link dropped")
        self._writes += 1
        self.events.append(("write", bytes(data)))

    def flush(self) -> None:
        self._flushes += 1
        if self._fail_on_flush is not None and self._flushes >= self._fail_on_flush:
            raise ChannelIOError("flush failed")
        self.events.append(("flush", None))

    @property
    def data(self) -> bytes:
        return b"".join(payload for kind, payload in self.events if kind == "write")


class FakeSleep:
    def __init__(self, channel: Optional[RecordingChannel] = None) -> None:
        self.calls: List[float] = []
        self._channel = channel

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self._channel is not None:
            self._channel.events.append(("sleep", seconds))


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def sleep(channel: RecordingChannel) -> FakeSleep:
    return FakeSleep(channel)


@pytest.fixture
def make_channel():
    return RecordingChannel
