"""Delay policies between consecutive calls to a rate-limited service."""

import asyncio
from abc import ABC, abstractmethod


class DelayPolicy(ABC):
    """Pause inserted between two consecutive external calls."""

    @abstractmethod
    async def wait(self) -> None:
        pass


class FixedDelay(DelayPolicy):
    """Sleep a fixed number of seconds."""

    def __init__(self, seconds: float = 0.5) -> None:
        if seconds < 0:
            raise ValueError("Delay cannot be negative")
        self.seconds = seconds

    async def wait(self) -> None:
        await asyncio.sleep(self.seconds)


class NoDelay(DelayPolicy):
    """No pause at all."""

    async def wait(self) -> None:
        return None
