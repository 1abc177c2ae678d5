import asyncio
from typing import Optional


class Interval:
    """
    Fixed-period timer. The first tick completes immediately; after that
    deadlines advance by `period` from the previous deadline, so a late
    consumer gets the missed ticks back to back.
    """

    def __init__(self, period: float):
        if not period > 0:
            raise ValueError(f"interval period must be positive, got {period!r}")
        self.period = period
        self._deadline: Optional[float] = None

    async def tick(self) -> float:
        loop = asyncio.get_running_loop()
        now = loop.time()
        if self._deadline is None:
            self._deadline = now
        delay = self._deadline - now
        if delay > 0:
            await asyncio.sleep(delay)
        fired = self._deadline
        self._deadline += self.period
        return fired
